from django import forms

from .models import Car, Motorcycle, Truck

VEHICLE_FIELDS = ['brand', 'model', 'year', 'daily_rate']


class CarForm(forms.ModelForm):
    # Parsed by the service so an unknown name is reported as a conflict
    fuel_type = forms.CharField(max_length=20)

    class Meta:
        model = Car
        fields = VEHICLE_FIELDS + ['doors', 'automatic']
        labels = {
            'daily_rate': 'Daily rate',
        }


class MotorcycleForm(forms.ModelForm):
    class Meta:
        model = Motorcycle
        fields = VEHICLE_FIELDS + ['engine_size', 'type']

    def clean_type(self):
        return self.cleaned_data['type'].strip().upper()


class TruckForm(forms.ModelForm):
    class Meta:
        model = Truck
        fields = VEHICLE_FIELDS + ['capacity', 'four_wheel_drive']
