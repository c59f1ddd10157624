"""
Custom permission classes for drinks app.

Querysets are already scoped to the requesting user; these classes are the
object-level check for anything fetched by id.
"""
from rest_framework.permissions import BasePermission


class IsDrinkOwner(BasePermission):
    """
    Permission: only the owner can read or modify a drink.

    Usage:
        class DrinkViewSet(viewsets.ModelViewSet):
            permission_classes = [IsAuthenticated, IsDrinkOwner]
    """

    message = 'You do not have permission to access this drink.'

    def has_object_permission(self, request, view, obj):
        return obj.owner_id == request.user.id
