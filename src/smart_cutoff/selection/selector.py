"""Interactive selection of a cutoff entry.

The selector shows the breakpoint nearest each target rank and asks the user
to pick one, to enter different target ranks, or to quit:

    [#1] Breakpoint for 30:
        31: 2024-03-02 Artist - Album - Title
        32: 2024-02-28 Artist - Album - Title

    Enter selection [#/Custom/Quit]:
"""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

from smart_cutoff.models import DateEntry, Transition
from smart_cutoff.selection.commands import (
    Custom,
    Empty,
    InvalidCommandError,
    InvalidRanksError,
    Number,
    Quit,
    parse_command,
    parse_target_ranks,
)
from smart_cutoff.selection.prompt import Prompt
from smart_cutoff.selection.transitions import find_transition

logger = logging.getLogger(__name__)

DEFAULT_TARGET_RANKS: tuple[int, ...] = (30, 50, 70)

SELECTION_PROMPT = "Enter selection [#/Custom/Quit]:"
CUSTOM_RANKS_PROMPT = "Enter custom target numbers (space separated):"


@dataclass
class SelectionState:
    """Target ranks being inspected and the breakpoints found for them."""

    target_ranks: list[int]
    transitions: list[Transition] = field(default_factory=list)


@dataclass(frozen=True)
class NewTargets:
    """User asked to re-evaluate with these target ranks."""

    ranks: list[int]


def evaluate_targets(
    entries: Sequence[DateEntry], target_ranks: Sequence[int]
) -> list[Transition]:
    """Compute and print one breakpoint per usable target rank.

    A target that does not lie past the previously found breakpoint would
    yield the same breakpoint again and is skipped.
    """
    transitions: list[Transition] = []
    prev_index: int | None = None
    for target in sorted(target_ranks):
        if prev_index is not None and prev_index >= target:
            print(f"[skipping target: {target}]")
            continue

        transition = find_transition(entries, target)
        if transition is None:
            print(f"[out of range: {target}]")
            continue

        transitions.append(transition)
        print(f"[#{len(transitions)}] Breakpoint for {target}:")
        print(transition)
        prev_index = transition.index

    return transitions


def prompt_user_selection(
    transitions: Sequence[Transition], max_entries: int, prompt: Prompt
) -> DateEntry | NewTargets | None:
    """Read commands until the user picks, asks for new targets, or quits.

    Invalid input is reported and the prompt is shown again.
    """
    while True:
        text = prompt.read_line(SELECTION_PROMPT)
        try:
            command = parse_command(text)
        except InvalidCommandError as e:
            print(f"invalid command: {e}")
            continue

        match command:
            case Quit():
                return None
            case Empty():
                continue
            case Number(value=number):
                if number <= len(transitions):
                    return transitions[number - 1].included
                print(f"invalid number {number}")
            case Custom():
                ranks_text = prompt.read_line(CUSTOM_RANKS_PROMPT)
                try:
                    return NewTargets(parse_target_ranks(ranks_text, max_entries))
                except InvalidRanksError as e:
                    print(f"invalid custom input {ranks_text!r}: {e}")


def select_cutoff(
    entries: Sequence[DateEntry],
    max_entries: int,
    prompt: Prompt,
    target_ranks: Sequence[int] = DEFAULT_TARGET_RANKS,
) -> DateEntry | None:
    """Run the selection loop over a newest-first entry list.

    Args:
        entries: Entries ordered most recently added first. Not modified.
        max_entries: Upper bound accepted for custom target ranks.
        prompt: Source of user input.
        target_ranks: Ranks to inspect on the first pass.

    Returns:
        The last entry to keep (the cutoff), or None if the user quit.
    """
    state = SelectionState(target_ranks=list(target_ranks))
    while True:
        state.transitions = evaluate_targets(entries, state.target_ranks)

        match prompt_user_selection(state.transitions, max_entries, prompt):
            case None:
                logger.debug("Selection cancelled")
                return None
            case NewTargets(ranks=ranks):
                logger.debug("New target ranks: %s", ranks)
                state = SelectionState(target_ranks=ranks)
            case DateEntry() as chosen:
                return chosen
