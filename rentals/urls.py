from django.urls import path

from . import views

app_name = 'rentals'

urlpatterns = [
    path('', views.rental_list, name='list'),
    path('overdue/', views.overdue_rentals, name='overdue'),
    path('customer/<int:customer_id>/', views.customer_rentals, name='customer'),
    path('<int:rental_id>/', views.rental_detail, name='detail'),
    path('<int:rental_id>/complete/', views.complete_rental, name='complete'),
    path('<int:rental_id>/cancel/', views.cancel_rental, name='cancel'),
]
