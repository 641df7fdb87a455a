from django import forms
from django.core.exceptions import ValidationError
from django.utils import timezone
from django_select2 import forms as s2forms

from customers.models import Customer
from rental_backend.exceptions import ConflictError
from vehicles.models import Vehicle

from .models import Rental
from .services import check_bookable


class RentalForm(forms.Form):
    """Booking payload accepted by the rentals API."""
    customer_id = forms.IntegerField(min_value=1)
    vehicle_id = forms.IntegerField(min_value=1)
    start_date = forms.DateTimeField()
    end_date = forms.DateTimeField()

    def clean_end_date(self):
        end_date = self.cleaned_data.get('end_date')
        if end_date and end_date <= timezone.now():
            raise ValidationError("End date must be in the future")
        return end_date


class RentalAdminForm(forms.ModelForm):
    customer = forms.ModelChoiceField(
        queryset=Customer.objects.all(),
        widget=s2forms.Select2Widget(attrs={
            'data-placeholder': 'Search or select customer...',
            'data-allow-clear': 'true',
            'data-width': '100%',
        }),
    )
    vehicle = forms.ModelChoiceField(
        queryset=Vehicle.objects.none(),
        widget=s2forms.Select2Widget(attrs={
            'data-placeholder': 'Search or select an available vehicle...',
            'data-allow-clear': 'true',
            'data-width': '100%',
        }),
        help_text="Only vehicles that are currently available are listed",
    )

    class Meta:
        model = Rental
        fields = ['customer', 'vehicle', 'start_date', 'end_date']

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)

        if self.instance and self.instance.pk:
            self.fields['vehicle'].queryset = Vehicle.objects.filter(pk=self.instance.vehicle_id)
        else:
            self.fields['vehicle'].queryset = Vehicle.objects.available()

    def clean(self):
        cleaned_data = super().clean()
        if self.instance.pk:
            return cleaned_data

        vehicle = cleaned_data.get('vehicle')
        start_date = cleaned_data.get('start_date')
        end_date = cleaned_data.get('end_date')
        if vehicle and start_date and end_date:
            try:
                check_bookable(vehicle, start_date, end_date)
            except ConflictError as e:
                raise ValidationError(e.message)
        return cleaned_data
