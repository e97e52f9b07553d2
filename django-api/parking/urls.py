from django.urls import path

from parking.handlers import EntryView, ExitView, SpotListView

urlpatterns = [
    path("entries", EntryView.as_view(), name="entry"),
    path("exits", ExitView.as_view(), name="exit"),
    path("spots", SpotListView.as_view(), name="spot-list"),
]
