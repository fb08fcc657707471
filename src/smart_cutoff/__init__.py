"""Interactive selection of cutoff dates for beets smart playlists."""

from smart_cutoff.models import DateEntry, FilterSpec, Transition

__all__ = ["DateEntry", "FilterSpec", "Transition"]
