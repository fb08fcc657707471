"""Parsing of interactive selector input."""

from dataclasses import dataclass


class InvalidCommandError(ValueError):
    """Raised for selection input that is not a known command."""


class InvalidRanksError(ValueError):
    """Raised for a custom target rank list that cannot be used."""


@dataclass(frozen=True)
class Quit:
    """Stop without choosing a cutoff."""


@dataclass(frozen=True)
class Custom:
    """Ask for a new set of target ranks."""


@dataclass(frozen=True)
class Empty:
    """Blank input; prompt again."""


@dataclass(frozen=True)
class Number:
    """Pick the displayed breakpoint with this 1-based choice number."""

    value: int


Command = Quit | Custom | Empty | Number

QUIT_WORDS = frozenset({"q", "quit", "exit"})
CUSTOM_WORDS = frozenset({"c", "custom"})


def _is_ascii_number(token: str) -> bool:
    return token.isascii() and token.isdigit()


def parse_command(text: str) -> Command:
    """Classify one line typed at the selection prompt.

    Raises:
        InvalidCommandError: If the input is none of quit/custom/empty or a
            positive integer.
    """
    lowered = text.lower()
    if lowered in QUIT_WORDS:
        return Quit()
    if lowered in CUSTOM_WORDS:
        return Custom()
    if lowered == "":
        return Empty()
    if _is_ascii_number(lowered) and int(lowered) > 0:
        return Number(int(lowered))
    raise InvalidCommandError(f"unrecognized command {text!r}")


def parse_target_ranks(text: str, max_entries: int) -> list[int]:
    """Parse a whitespace separated list of target ranks.

    The whole list is rejected if any token is invalid.

    Raises:
        InvalidRanksError: On a non-numeric token or a value above `max_entries`.
    """
    ranks = []
    for token in text.split():
        if not _is_ascii_number(token):
            raise InvalidRanksError(f"{token!r} is not a non-negative integer")
        number = int(token)
        if number > max_entries:
            raise InvalidRanksError(
                f"{number} exceeds max_entries ({max_entries}) command-line argument"
            )
        ranks.append(number)
    return ranks
