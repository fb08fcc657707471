"""Smart playlist cutoff selector - CLI Entry Point."""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from smart_cutoff.beets import BeetQuery, ProcessRunner, QueryError
from smart_cutoff.config import ConfigError, Settings, load_settings
from smart_cutoff.models import DateEntry, FilterSpec
from smart_cutoff.selection import Prompt, PromptClosedError, TerminalPrompt, select_cutoff
from smart_cutoff.store import StoreError, read_json_file, store_cutoff

app = typer.Typer(help="Interactive cutoff date selection for beets smart playlists")
logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CutoffResult:
    """The chosen cutoff entry and how many items it keeps."""

    entry: DateEntry
    count: int


def parse_filter_spec(timeless_args: str) -> FilterSpec:
    """Parse TIMELESS_ARGS, reporting malformed input as a configuration error."""
    try:
        spec = FilterSpec.parse(timeless_args)
    except ValidationError as e:
        raise ConfigError(f"invalid timeless args {timeless_args!r}") from e
    logger.debug("Timeless filter groups: %s", spec.groups)
    return spec


def run(
    settings: Settings,
    runner: ProcessRunner | None = None,
    prompt: Prompt | None = None,
) -> CutoffResult | None:
    """Fetch recent entries, let the user choose a cutoff, and store it.

    Returns:
        The chosen cutoff, or None if the user quit.
    """
    beets = BeetQuery(
        settings.beet_command,
        parse_filter_spec(settings.timeless_args),
        settings.max_entries,
        runner=runner,
    )

    # Read the output file before querying so a bad file fails fast
    json_file = None
    if settings.output is not None:
        output_file, _ = settings.output
        try:
            json_file = read_json_file(output_file)
        except StoreError as e:
            raise StoreError("reading json file") from e

    try:
        entries = beets.fetch_recent()
    except QueryError as e:
        raise QueryError("query current items") from e

    chosen = select_cutoff(entries, settings.max_entries, prompt or TerminalPrompt())
    if chosen is None:
        return None

    try:
        count = beets.count_after(chosen.date)
    except QueryError as e:
        raise QueryError("counting entries with chosen date bound") from e

    print(f"Chose {chosen}, which gives {count} entries")

    if json_file is not None and settings.output is not None:
        _, output_key = settings.output
        store_cutoff(json_file, output_key, chosen.date)

    return CutoffResult(entry=chosen, count=count)


def error_chain(error: BaseException) -> list[str]:
    """Messages for an exception and each exception it was raised from."""
    messages = []
    current: BaseException | None = error
    while current is not None:
        messages.append(str(current) or type(current).__name__)
        current = current.__cause__
    return messages


@app.command()
def main(
    beet_command: Annotated[
        Path | None,
        typer.Option(help="Path to the `beet` command [env: BEET_COMMAND]"),
    ] = None,
    timeless_args: Annotated[
        str | None,
        typer.Option(
            help="Newline separated `beet list` filters, comma between groups [env: TIMELESS_ARGS]"
        ),
    ] = None,
    max_entries: Annotated[
        int | None,
        typer.Option(help="Number of recent entries to consider [default: 400]"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option(help="Output JSON file [env: OUTPUT_FILE]"),
    ] = None,
    output_key: Annotated[
        str | None,
        typer.Option(help="Key for the output file date [env: OUTPUT_KEY]"),
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v")] = False,
) -> None:
    """Pick a cutoff date among the most recently added beets items."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        settings = load_settings(
            beet_command=beet_command,
            timeless_args=timeless_args,
            max_entries=max_entries,
            output_file=output_file,
            output_key=output_key,
        )
        result = run(settings)
    except (ConfigError, QueryError, StoreError, PromptClosedError) as e:
        message, *causes = error_chain(e)
        logger.error("%s", message)
        for cause in causes:
            logger.error("  caused by: %s", cause)
        raise typer.Exit(1)

    if result is None:
        logger.info("No cutoff chosen")


if __name__ == "__main__":
    app()
