from django.urls import path

from . import views

app_name = 'vehicles'

urlpatterns = [
    path('', views.vehicle_list, name='list'),
    path('available/', views.available_vehicle_list, name='available'),
    path('search/', views.vehicle_search, name='search'),
    path('cars/', views.create_car, name='create_car'),
    path('motorcycles/', views.create_motorcycle, name='create_motorcycle'),
    path('trucks/', views.create_truck, name='create_truck'),
    path('<int:vehicle_id>/', views.vehicle_detail, name='detail'),
    path('<int:vehicle_id>/availability/', views.vehicle_availability, name='availability'),
]
