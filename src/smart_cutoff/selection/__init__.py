"""Interactive cutoff selection."""

from smart_cutoff.selection.prompt import Prompt, PromptClosedError, TerminalPrompt
from smart_cutoff.selection.selector import DEFAULT_TARGET_RANKS, select_cutoff
from smart_cutoff.selection.transitions import find_transition

__all__ = [
    "DEFAULT_TARGET_RANKS",
    "Prompt",
    "PromptClosedError",
    "TerminalPrompt",
    "find_transition",
    "select_cutoff",
]
