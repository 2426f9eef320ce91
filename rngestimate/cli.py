"""ABOUTME: CLI entry point for rngestimate commands.
ABOUTME: Provides estimate and keys commands via Typer."""

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from rngestimate.config import EstimationRequest, load_estimation_request
from rngestimate.estimation.dataclasses import EstimationResult, KeySpec
from rngestimate.estimation.search_space import count_key_combinations
from rngestimate.logs import init_logging, set_package_log_level
from rngestimate.settings import settings
from rngestimate.utils.key_input import BUTTON_BIT_MASK, generate_key_codes

app = typer.Typer(
    name="rngestimate",
    help="Estimate result counts of Gen 5 RNG searches before running them.",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Initialize logging for every command."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path)
    if verbose:
        set_package_log_level(logging.DEBUG)


def _load_requests(paths: list[Path]) -> list[tuple[Path, EstimationRequest]]:
    """Load all request files, exiting on the first invalid one."""
    requests: list[tuple[Path, EstimationRequest]] = []
    for path in paths:
        try:
            requests.append((path, load_estimation_request(path)))
        except FileNotFoundError as e:
            console.print(f"[red]Error:[/] {e}")
            raise typer.Exit(1) from None
        except ValueError as e:
            console.print(f"[red]Invalid request {path}:[/] {e}")
            raise typer.Exit(1) from None
    return requests


def _result_row(name: str, result: EstimationResult) -> list[str]:
    """Format one estimation result as a table row."""
    status = "[yellow]warn[/]" if result.exceeds_threshold else "[green]ok[/]"
    return [
        name,
        f"{result.search_space_size:,}",
        f"{result.hit_rate:.3g}",
        f"{result.estimated_count:,}",
        status,
    ]


@app.command()
def estimate(
    requests: list[Path] = typer.Argument(..., help="YAML estimation request files"),
    threshold: int | None = typer.Option(None, "--threshold", "-t", help="Warning threshold override"),
) -> None:
    """Estimate the result count of one or more search requests."""
    default_threshold = threshold if threshold is not None else settings.RESULT_WARNING_THRESHOLD

    table = Table(title=f"Estimated results (default threshold {default_threshold:,})")
    for column in ("Request", "Search space", "Hit rate", "Estimated", "Status"):
        table.add_column(column)

    for path, request in _load_requests(requests):
        # An explicit --threshold beats the threshold stored in the file
        overrides = {"threshold": threshold} if threshold is not None else {}
        result = request.model_copy(update=overrides).estimate(default_threshold)
        table.add_row(*_result_row(path.name, result))

    console.print(table)


@app.command()
def keys(
    buttons: list[str] | None = typer.Argument(None, help="Buttons that may be held (e.g. A B Start)"),
    codes: bool = typer.Option(False, "--codes", "-c", help="Also print the key code of each combination"),
) -> None:
    """Count valid key combinations for the given buttons."""
    selected = buttons or []
    unknown = [b for b in selected if b not in BUTTON_BIT_MASK]
    if unknown:
        console.print(f"[red]Error:[/] Unknown buttons: {', '.join(unknown)}")
        console.print(f"Valid buttons: {', '.join(BUTTON_BIT_MASK)}")
        raise typer.Exit(1)

    try:
        count = count_key_combinations(KeySpec(available_buttons=tuple(selected)))  # type: ignore[arg-type]
    except ValueError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None
    console.print(f"Valid key combinations: {count}")

    if codes:
        for key_code in generate_key_codes(selected):
            console.print(f"  0x{key_code:04X}")


if __name__ == "__main__":
    app()
