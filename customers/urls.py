from django.urls import path

from . import views

app_name = 'customers'

urlpatterns = [
    path('', views.customer_list, name='list'),
    path('search/', views.customer_search, name='search'),
    path('<int:customer_id>/', views.customer_detail, name='detail'),
]
