"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

from django.db import models


class ParkingType(models.TextChoices):
    CAR = "CAR", "Car"
    BIKE = "BIKE", "Bike"


class ParkingSpot(models.Model):
    """Persistence model for the fixed spot inventory."""

    number = models.PositiveIntegerField(primary_key=True)
    parking_type = models.CharField(max_length=10, choices=ParkingType.choices)
    available = models.BooleanField(default=True)

    class Meta:
        ordering = ["number"]
        indexes = [
            models.Index(fields=["parking_type", "available"], name="parking_spot_type_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.number} ({self.parking_type})"


class Ticket(models.Model):
    """Persistence model for parking sessions."""

    parking_spot = models.ForeignKey(
        ParkingSpot, on_delete=models.PROTECT, related_name="tickets"
    )
    vehicle_reg_number = models.CharField(max_length=10)
    price = models.DecimalField(max_digits=10, decimal_places=2, default=0)
    in_time = models.DateTimeField()
    out_time = models.DateTimeField(blank=True, null=True)
    is_regular_customer = models.BooleanField(default=False)

    class Meta:
        ordering = ["-in_time"]
        indexes = [
            models.Index(fields=["vehicle_reg_number", "-in_time"], name="parking_ticket_vehicle_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.vehicle_reg_number} - {self.in_time}"
