from django.db import models
from django.db.models.functions import Lower


class Customer(models.Model):
    first_name = models.CharField(max_length=100)
    last_name = models.CharField(max_length=100)
    email = models.EmailField(unique=True)
    phone_number = models.CharField(max_length=30)
    driver_license_number = models.CharField(max_length=50, unique=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ['id']
        # Emails and license numbers are unique whatever their case
        constraints = [
            models.UniqueConstraint(
                Lower('email'), name='customer_email_ci_unique',
                violation_error_message="A customer with this email already exists.",
            ),
            models.UniqueConstraint(
                Lower('driver_license_number'), name='customer_license_ci_unique',
                violation_error_message="A customer with this driver license number already exists.",
            ),
        ]

    def __str__(self):
        return self.full_name

    def clean(self):
        self.normalize()

    def save(self, *args, **kwargs):
        self.normalize()
        super().save(*args, **kwargs)

    def normalize(self):
        if self.email:
            self.email = self.email.strip()
        if self.driver_license_number:
            self.driver_license_number = self.driver_license_number.strip().upper()

    @property
    def full_name(self):
        return f"{self.first_name} {self.last_name}"
