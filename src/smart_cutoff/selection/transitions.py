"""Locating date breakpoints in a newest-first entry list."""

from collections.abc import Sequence

from smart_cutoff.models import DateEntry, Transition


def find_transition(entries: Sequence[DateEntry], target: int) -> Transition | None:
    """Find the first date change at or after position `target`.

    Scans adjacent pairs starting with `(entries[target], entries[target + 1])`
    and returns the first pair whose dates differ. Cutting between such a pair
    never splits entries that share a date.

    Returns:
        The transition, or None if the list is too short or has no date
        change past `target`.
    """
    for index in range(max(target, 0), len(entries) - 1):
        included, excluded = entries[index], entries[index + 1]
        if included.date != excluded.date:
            return Transition(index=index, included=included, excluded=excluded)
    return None
