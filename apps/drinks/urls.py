from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'drinks'

# Router for ViewSets
router = DefaultRouter()
router.register(r'', views.DrinkViewSet, basename='drink')

urlpatterns = [
    # Consumption records
    # Note: must be listed BEFORE the router so 'records' isn't taken as a drink id
    # GET    /api/drinks/records/?start_date=&end_date=  - Records in range
    # GET    /api/drinks/records/{YYYY-MM-DD}/           - Day records
    # PUT    /api/drinks/records/{YYYY-MM-DD}/           - Replace day records
    path('records/', views.record_list, name='record-list'),
    path('records/<str:day>/', views.day_records, name='day-records'),

    # Drink ViewSet routes
    # GET    /api/drinks/              - List drinks
    # POST   /api/drinks/              - Create drink
    # GET    /api/drinks/{id}/         - Get drink
    # PUT    /api/drinks/{id}/         - Update drink
    # PATCH  /api/drinks/{id}/         - Partial update
    # DELETE /api/drinks/{id}/         - Delete drink (and its records)
    # POST   /api/drinks/{id}/move/    - Move up/down
    # POST   /api/drinks/reorder/      - Rewrite display order
    path('', include(router.urls)),
]
