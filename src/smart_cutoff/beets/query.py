"""Catalog queries against a beets library via `beet list`."""

import logging
from collections.abc import Iterator
from itertools import islice
from pathlib import Path

from smart_cutoff.beets.filters import build_list_args
from smart_cutoff.beets.runner import ProcessError, ProcessRunner, SubprocessRunner
from smart_cutoff.models import DateEntry, EntryParseError, FilterSpec

logger = logging.getLogger(__name__)

# Most recently added first
SORT_ADDED_DESCENDING = "added-"
RECENT_FORMAT = "$added $artist - $album - $title"
ID_FORMAT = "$id"


class QueryError(RuntimeError):
    """Raised when a `beet list` query fails or returns unreadable output."""


def _decoded_lines(output: bytes) -> Iterator[tuple[int, str]]:
    """Yield (1-based line number, text) for each output line."""
    for number, raw in enumerate(output.splitlines(), 1):
        try:
            yield number, raw.decode("utf-8")
        except UnicodeDecodeError as e:
            raise QueryError(f"line {number} from current_output beet command") from e


class BeetQuery:
    """Runs the two `beet list` queries used to pick a cutoff.

    Args:
        beet_command: Path to the `beet` executable.
        filter_spec: Timeless filters applied to every query.
        max_entries: Default number of recent entries to keep.
        runner: Process runner, replaceable in tests.
    """

    def __init__(
        self,
        beet_command: Path,
        filter_spec: FilterSpec,
        max_entries: int,
        runner: ProcessRunner | None = None,
    ) -> None:
        self.beet_command = beet_command
        self.filter_spec = filter_spec
        self.max_entries = max_entries
        self.runner = runner if runner is not None else SubprocessRunner()

    def fetch_recent(self, limit: int | None = None) -> list[DateEntry]:
        """Fetch the most recently added entries, newest first.

        Only the first `limit` lines (default `max_entries`) are parsed.

        Raises:
            QueryError: If `beet` fails or an output line is malformed.
        """
        if limit is None:
            limit = self.max_entries

        args = build_list_args(self.filter_spec)
        args += [SORT_ADDED_DESCENDING, "--format", RECENT_FORMAT]
        try:
            output = self.runner.run(self.beet_command, args)
        except ProcessError as e:
            raise QueryError("beet ls [current_args]") from e

        entries = []
        for number, line in islice(_decoded_lines(output), limit):
            try:
                entries.append(DateEntry.from_line(line))
            except EntryParseError as e:
                raise QueryError(
                    f"line {number} from current_output beet command"
                ) from e

        logger.debug("Parsed %d entries (limit %d)", len(entries), limit)
        return entries

    def count_after(self, date: str) -> int:
        """Count entries added on or after `date`.

        Raises:
            QueryError: If `beet` fails or its output is not UTF-8.
        """
        args = build_list_args(self.filter_spec, extra_filter=f"added:{date}..")
        args += ["--format", ID_FORMAT]
        try:
            output = self.runner.run(self.beet_command, args)
        except ProcessError as e:
            raise QueryError("beet ls [current_args] added:[selection]..") from e

        return sum(1 for _, line in _decoded_lines(output) if line.strip())
