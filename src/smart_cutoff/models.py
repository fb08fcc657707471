"""Pydantic models for catalog entries, filters and breakpoints."""

from dataclasses import dataclass
from typing import Self

from pydantic import BaseModel, ConfigDict, field_validator

# 01234567890123456789...
# YYYY-MM-DD HH:MM:SS description
DATE_LENGTH = 10
ENTRY_START = 20


class EntryParseError(ValueError):
    """Raised when a `beet list` output line cannot be read as a DateEntry."""


class DateEntry(BaseModel):
    """One item from `beet list`, keyed by the day it was added."""

    model_config = ConfigDict(frozen=True)

    date: str
    entry: str

    @classmethod
    def from_line(cls, line: str) -> Self:
        """Parse a `<date><10 ignored chars><description>` line.

        The date is kept as an opaque, lexicographically sortable token.
        Characters 10-19 (time of day and separator) are skipped unvalidated.

        Raises:
            EntryParseError: If the line is too short to hold a description.
        """
        if len(line) <= ENTRY_START:
            raise EntryParseError(f"entry too short: {line}")
        return cls(date=line[:DATE_LENGTH], entry=line[ENTRY_START:])

    def __str__(self) -> str:
        return f"{self.date} {self.entry}"


@dataclass(frozen=True)
class Transition:
    """Boundary between two adjacent entries whose dates differ.

    `included` is the last entry kept when the cutoff is placed at this
    boundary, `excluded` the first one dropped. Both are references into the
    entry list the transition was computed from.
    """

    index: int
    included: DateEntry
    excluded: DateEntry

    @property
    def rank(self) -> int:
        """1-based position of `included` in the entry list."""
        return self.index + 1

    def __str__(self) -> str:
        return (
            f"    {self.rank}: {self.included.date} {self.included.entry}\n"
            f"    {self.rank + 1}: {self.excluded.date} {self.excluded.entry}"
        )


class FilterSpec(BaseModel):
    """Timeless `beet list` filters, as a disjunctive chain of groups.

    Each group is one alternative of the query. In the raw form groups are
    separated by commas and the tokens of a group by newlines:

        "a\\nb,c\\nd"  ->  (("a", "b"), ("c", "d"))

    which `beet` receives as `a b, c d`.
    """

    model_config = ConfigDict(frozen=True)

    groups: tuple[tuple[str, ...], ...]

    @field_validator("groups")
    @classmethod
    def groups_must_be_nonempty(
        cls, groups: tuple[tuple[str, ...], ...]
    ) -> tuple[tuple[str, ...], ...]:
        if not groups:
            raise ValueError("filter spec needs at least one group")
        for number, group in enumerate(groups, 1):
            if not group:
                raise ValueError(
                    f"filter group {number} is empty (duplicate commas in timeless args?)"
                )
        return groups

    @classmethod
    def parse(cls, raw: str) -> Self:
        """Build a FilterSpec from the comma/newline separated string form."""
        return cls(groups=tuple(tuple(part.splitlines()) for part in raw.split(",")))
