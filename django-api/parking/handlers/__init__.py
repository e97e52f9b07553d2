from parking.handlers.views import EntryView, ExitView, SpotListView

__all__ = ["EntryView", "ExitView", "SpotListView"]
