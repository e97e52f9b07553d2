import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="ParkingSpot",
            fields=[
                ("number", models.PositiveIntegerField(primary_key=True, serialize=False)),
                (
                    "parking_type",
                    models.CharField(
                        choices=[("CAR", "Car"), ("BIKE", "Bike")], max_length=10
                    ),
                ),
                ("available", models.BooleanField(default=True)),
            ],
            options={
                "ordering": ["number"],
                "indexes": [
                    models.Index(
                        fields=["parking_type", "available"],
                        name="parking_spot_type_idx",
                    )
                ],
            },
        ),
        migrations.CreateModel(
            name="Ticket",
            fields=[
                (
                    "id",
                    models.BigAutoField(
                        auto_created=True,
                        primary_key=True,
                        serialize=False,
                        verbose_name="ID",
                    ),
                ),
                ("vehicle_reg_number", models.CharField(max_length=10)),
                (
                    "price",
                    models.DecimalField(decimal_places=2, default=0, max_digits=10),
                ),
                ("in_time", models.DateTimeField()),
                ("out_time", models.DateTimeField(blank=True, null=True)),
                ("is_regular_customer", models.BooleanField(default=False)),
                (
                    "parking_spot",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="tickets",
                        to="parking.parkingspot",
                    ),
                ),
            ],
            options={
                "ordering": ["-in_time"],
                "indexes": [
                    models.Index(
                        fields=["vehicle_reg_number", "-in_time"],
                        name="parking_ticket_vehicle_idx",
                    )
                ],
            },
        ),
    ]
