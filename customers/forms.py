import re

from django import forms
from django.core.exceptions import ValidationError

PHONE_PATTERN = re.compile(r'^\+?[0-9.\-\s()]{10,}$')


class CustomerForm(forms.Form):
    """
    Field validation for customer payloads. Email and license uniqueness is
    checked by the customer service when the row is written.
    """
    first_name = forms.CharField(max_length=100)
    last_name = forms.CharField(max_length=100)
    email = forms.EmailField()
    phone_number = forms.CharField(max_length=30)
    driver_license_number = forms.CharField(max_length=50)

    def clean_phone_number(self):
        phone = self.cleaned_data.get('phone_number')
        if not PHONE_PATTERN.match(phone):
            raise ValidationError("Invalid phone number format (e.g., +1234567890 or 123-456-7890)")
        return phone

    def clean_driver_license_number(self):
        return self.cleaned_data.get('driver_license_number').upper()
