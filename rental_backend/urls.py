from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('api/vehicles/', include('vehicles.urls')),
    path('api/customers/', include('customers.urls')),
    path('api/rentals/', include('rentals.urls')),
]
