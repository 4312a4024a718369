import logging
from typing import Callable, List, Optional, Sequence, Set

import typer
from rich.console import Console

console = Console()
logger = logging.getLogger(__name__)

PromptFn = Callable[[str, Sequence[str]], List[int]]


def parse_font_list(value: str) -> List[str]:
    """Split a comma-separated font list. Names are kept exactly as given."""
    if value == "":
        return []
    return value.split(",")


def parse_choice(answer: str, count: int) -> List[int]:
    """
    Parse the answer to the multi-select prompt into 0-based indices.

    Accepts 1-based numbers and ranges like 3-5, separated by commas or
    spaces, or "all". Raises ValueError on anything else.
    """
    answer = answer.strip()
    if not answer:
        return []
    if answer.lower() == "all":
        return list(range(count))

    indices: List[int] = []
    for token in answer.replace(",", " ").split():
        if "-" in token:
            start_text, end_text = token.split("-", 1)
            start, end = int(start_text), int(end_text)
            if start > end:
                raise ValueError(f"Invalid range: {token}")
            numbers = range(start, end + 1)
        else:
            numbers = range(int(token), int(token) + 1)
        for number in numbers:
            if not 1 <= number <= count:
                raise ValueError(f"Choice out of range: {number}")
            indices.append(number - 1)
    return indices


def prompt_multi_select(label: str, candidates: Sequence[str]) -> List[int]:
    """Show a numbered list and let the user pick any number of entries."""
    if not candidates:
        console.print("[yellow]Nothing to choose from.[/yellow]")
        return []

    console.print(f"[bold]{label}[/bold]")
    width = len(str(len(candidates)))
    for i, candidate in enumerate(candidates):
        console.print(f"  {i + 1:>{width}}: {candidate}", highlight=False)
    answer = typer.prompt(
        "Choose (e.g. 1,3,5-7 or all; empty for none)",
        default="",
        show_default=False,
    )
    try:
        return parse_choice(answer, len(candidates))
    except ValueError as e:
        console.print(f"[red]Invalid choice: {e}[/red]")
        raise typer.Exit(1) from e


def resolve_selection(
    explicit: Optional[str],
    candidates: Callable[[], List[str]],
    prompt: PromptFn = prompt_multi_select,
    label: str = "Choose fonts",
) -> List[str]:
    """
    Decide which fonts a command acts on.

    An explicit list is used as is and the candidate source is never
    consulted. Otherwise the user picks from the candidates and the result
    keeps the candidates' order, not the order the user picked in.
    """
    if explicit is not None:
        selection = parse_font_list(explicit)
        logger.debug(f"Explicit selection: {selection}")
        return selection

    options = candidates()
    chosen: Set[int] = set(prompt(label, options))
    selection = [name for i, name in enumerate(options) if i in chosen]
    logger.debug(f"Interactive selection: {selection}")
    return selection
