from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Window statistics
    path('summary/', views.summary, name='summary'),
    path('monthly/', views.monthly_stats, name='monthly'),
    path('yearly/', views.yearly_stats, name='yearly'),

    # Record entry preview
    path('day/<str:day>/', views.day_summary, name='day'),

    # Dashboard
    path('overview/', views.overview, name='overview'),
]
