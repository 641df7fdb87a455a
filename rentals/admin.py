from django.contrib import admin, messages
from django.http import HttpResponseRedirect

from rental_backend.exceptions import RentalError

from . import services
from .forms import RentalAdminForm
from .models import Rental


@admin.register(Rental)
class RentalAdmin(admin.ModelAdmin):
    form = RentalAdminForm
    list_display = ('id', 'get_customer_name', 'vehicle', 'start_date', 'end_date', 'total_price', 'status')
    list_filter = ('status', 'start_date', 'end_date')
    search_fields = ('customer__first_name', 'customer__last_name', 'customer__email',
                     'vehicle__brand', 'vehicle__model')
    actions = ['complete_selected', 'cancel_selected']

    def get_customer_name(self, obj):
        return obj.customer.full_name
    get_customer_name.short_description = 'Customer'

    def get_readonly_fields(self, request, obj=None):
        # Rentals change only through the lifecycle actions
        if obj is not None:
            return ('customer', 'vehicle', 'start_date', 'end_date', 'total_price', 'status', 'created_at')
        return ()

    def has_delete_permission(self, request, obj=None):
        return False

    def save_model(self, request, obj, form, change):
        if change:
            return
        try:
            rental = services.create_rental(obj.customer_id, obj.vehicle_id, obj.start_date, obj.end_date)
        except RentalError as e:
            # Another booking can land between form validation and the vehicle lock
            self.message_user(request, f"Rental not created: {e.message}", messages.ERROR)
            return
        obj.pk = rental.pk
        obj.total_price = rental.total_price
        obj.status = rental.status
        obj.created_at = rental.created_at

    def log_addition(self, request, obj, message):
        if obj.pk is not None:
            return super().log_addition(request, obj, message)

    def response_add(self, request, obj, post_url_continue=None):
        if obj.pk is None:
            return HttpResponseRedirect(request.path)
        return super().response_add(request, obj, post_url_continue)

    def run_lifecycle_action(self, request, queryset, operation, verb):
        done = 0
        for rental in queryset:
            try:
                operation(rental.pk)
                done += 1
            except RentalError as e:
                self.message_user(request, f"Rental #{rental.pk}: {e.message}", messages.WARNING)
        if done:
            self.message_user(request, f"{done} rental(s) {verb}.", messages.SUCCESS)

    def complete_selected(self, request, queryset):
        self.run_lifecycle_action(request, queryset, services.complete_rental, 'completed')
    complete_selected.short_description = 'Complete selected rentals'

    def cancel_selected(self, request, queryset):
        self.run_lifecycle_action(request, queryset, services.cancel_rental, 'cancelled')
    cancel_selected.short_description = 'Cancel selected rentals'
