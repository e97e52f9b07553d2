from django.contrib import admin

from parking.models import ParkingSpot, Ticket


class TicketInline(admin.TabularInline):
    model = Ticket
    extra = 0
    fields = ["vehicle_reg_number", "in_time", "out_time", "price"]
    readonly_fields = fields


@admin.register(ParkingSpot)
class ParkingSpotAdmin(admin.ModelAdmin):
    list_display = ["number", "parking_type", "available"]
    list_filter = ["parking_type", "available"]
    inlines = [TicketInline]


@admin.register(Ticket)
class TicketAdmin(admin.ModelAdmin):
    list_display = [
        "vehicle_reg_number",
        "parking_spot",
        "in_time",
        "out_time",
        "price",
        "is_regular_customer",
    ]
    list_filter = ["parking_spot__parking_type", "is_regular_customer"]
    search_fields = ["vehicle_reg_number"]
