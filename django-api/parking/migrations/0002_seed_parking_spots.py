from django.db import migrations

SPOTS = [
    (1, "CAR"),
    (2, "CAR"),
    (3, "CAR"),
    (4, "BIKE"),
    (5, "BIKE"),
]


def create_spots(apps, schema_editor):
    ParkingSpot = apps.get_model("parking", "ParkingSpot")
    ParkingSpot.objects.bulk_create(
        ParkingSpot(number=number, parking_type=parking_type, available=True)
        for number, parking_type in SPOTS
    )


def delete_spots(apps, schema_editor):
    ParkingSpot = apps.get_model("parking", "ParkingSpot")
    ParkingSpot.objects.filter(number__in=[number for number, _ in SPOTS]).delete()


class Migration(migrations.Migration):

    dependencies = [
        ("parking", "0001_initial"),
    ]

    operations = [
        migrations.RunPython(create_spots, delete_spots),
    ]
