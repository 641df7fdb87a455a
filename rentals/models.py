from django.db import models
from django.db.models import Q
from django.utils import timezone

from customers.models import Customer
from vehicles.models import Vehicle


class RentalStatus(models.TextChoices):
    ACTIVE = 'ACTIVE', 'Active'
    COMPLETED = 'COMPLETED', 'Completed'
    CANCELLED = 'CANCELLED', 'Cancelled'


class RentalQuerySet(models.QuerySet):
    def active(self):
        return self.filter(status=RentalStatus.ACTIVE)

    def overlapping(self, vehicle_id, start_date, end_date):
        """
        Active rentals of a vehicle whose start or end falls inside
        [start_date, end_date], bounds included.

        Only the existing rental's endpoints are tested, so a booking that
        lies strictly inside an existing rental is not returned.
        """
        window = (start_date, end_date)
        return self.active().filter(vehicle_id=vehicle_id).filter(
            Q(start_date__range=window) | Q(end_date__range=window)
        )

    def overdue(self, now):
        return self.active().filter(end_date__lt=now)

    def with_related(self):
        return self.select_related(
            'customer', 'vehicle__car', 'vehicle__motorcycle', 'vehicle__truck',
        )


class Rental(models.Model):
    customer = models.ForeignKey(Customer, on_delete=models.PROTECT, related_name='rentals')
    vehicle = models.ForeignKey(Vehicle, on_delete=models.PROTECT, related_name='rentals')
    start_date = models.DateTimeField()
    end_date = models.DateTimeField()
    total_price = models.DecimalField(max_digits=12, decimal_places=2, editable=False)
    status = models.CharField(max_length=10, choices=RentalStatus.choices, default=RentalStatus.ACTIVE, db_index=True)
    created_at = models.DateTimeField(auto_now_add=True)

    objects = RentalQuerySet.as_manager()

    class Meta:
        ordering = ['id']
        indexes = [
            models.Index(fields=['vehicle', 'status'], name='rental_vehicle_status_idx'),
            models.Index(fields=['status', 'end_date'], name='rental_status_end_date_idx'),
        ]

    def __str__(self):
        return f"Rental #{self.pk} - {self.vehicle} ({self.status})"

    def is_active(self):
        return self.status == RentalStatus.ACTIVE

    def is_overdue(self, now=None):
        return self.is_active() and self.end_date < (now or timezone.now())
