"""Line-buffered terminal prompt."""

from typing import Protocol


class PromptClosedError(EOFError):
    """Raised when standard input is closed while waiting for a reply."""


class Prompt(Protocol):
    """Reads one trimmed line of user input after showing a prompt."""

    def read_line(self, prompt: str) -> str: ...


class TerminalPrompt:
    """Prompt on stdin/stdout."""

    def read_line(self, prompt: str) -> str:
        try:
            return input(f"\n{prompt} ").strip()
        except EOFError as e:
            raise PromptClosedError("standard input closed") from e
