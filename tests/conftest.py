"""Shared test fixtures and configuration."""

from collections.abc import Sequence
from pathlib import Path

import pytest

from smart_cutoff.beets.runner import ProcessError
from smart_cutoff.models import DateEntry


class FakeRunner:
    """ProcessRunner returning canned outputs in order and recording calls."""

    def __init__(self, *outputs: bytes | ProcessError) -> None:
        self.outputs = list(outputs)
        self.calls: list[tuple[Path, list[str]]] = []

    def run(self, program: Path, args: Sequence[str]) -> bytes:
        self.calls.append((program, list(args)))
        output = self.outputs.pop(0)
        if isinstance(output, ProcessError):
            raise output
        return output


class ScriptedPrompt:
    """Prompt answering from a fixed list of replies and recording prompts."""

    def __init__(self, *replies: str) -> None:
        self.replies = list(replies)
        self.prompts: list[str] = []

    def read_line(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.replies.pop(0).strip()


def beet_line(date: str, description: str, time: str = "12:00:00") -> str:
    """Format a line the way `beet list --format '$added ...'` prints it."""
    return f"{date} {time} {description}"


def make_entries(*dates_and_counts: tuple[str, int]) -> list[DateEntry]:
    """Build a newest-first entry list with `count` entries per date."""
    entries = []
    for date, count in dates_and_counts:
        for _ in range(count):
            number = len(entries) + 1
            entries.append(DateEntry(date=date, entry=f"Artist - Album - Track {number}"))
    return entries


@pytest.fixture
def recent_entries() -> list[DateEntry]:
    """35 entries: 31 added on one day, then 4 on an earlier day."""
    return make_entries(("2024-05-10", 31), ("2024-04-01", 4))


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> pytest.MonkeyPatch:
    """Run without configuration from the environment or `.env` files."""
    for name in ("BEET_COMMAND", "TIMELESS_ARGS", "MAX_ENTRIES", "OUTPUT_FILE", "OUTPUT_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch
