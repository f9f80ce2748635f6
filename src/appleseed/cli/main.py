"""CLI entry point for appleseed.

Invoked as::

    appleseed [OPTIONS] COMMAND [ARGS]...

or, during development::

    python -m appleseed.cli.main

Commands
--------
version   Show version information
rank      Compute trust scores from a JSON edge file
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from appleseed.params import (
    DEFAULT_INITIAL_ENERGY,
    DEFAULT_SPREADING_FACTOR,
    DEFAULT_THRESHOLD,
)

console = Console()


# ------------------------------------------------------------------
# Root group
# ------------------------------------------------------------------


@click.group()
@click.version_option(package_name="appleseed-trust")
def cli() -> None:
    """Personalized trust ranking over directed, weighted trust graphs"""


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from appleseed import __version__

    console.print(f"[bold]appleseed[/bold] v{__version__}")


# ------------------------------------------------------------------
# rank
# ------------------------------------------------------------------


@cli.command(name="rank")
@click.argument("edge_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--source", "-s", required=True, help="Label of the node whose view is computed.")
@click.option(
    "--initial-energy",
    type=float,
    default=DEFAULT_INITIAL_ENERGY,
    show_default=True,
    help="Total energy injected at the source.",
)
@click.option(
    "--spreading-factor",
    type=float,
    default=DEFAULT_SPREADING_FACTOR,
    show_default=True,
    help="Fraction of energy forwarded each round.",
)
@click.option(
    "--threshold",
    type=float,
    default=DEFAULT_THRESHOLD,
    show_default=True,
    help="Stop once the largest per-round trust increase is at or below this.",
)
@click.option(
    "--max-rounds",
    type=int,
    default=None,
    help="Give up after this many rounds without convergence.",
)
@click.option("--json", "as_json", is_flag=True, default=False, help="Emit JSON instead of a table.")
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"]),
    default="WARNING",
    show_default=True,
    help="Logging level.",
)
def rank_command(
    edge_file: str,
    source: str,
    initial_energy: float,
    spreading_factor: float,
    threshold: float,
    max_rounds: int | None,
    as_json: bool,
    log_level: str,
) -> None:
    """Compute trust from SOURCE's perspective over the edges in EDGE_FILE.

    EDGE_FILE is a JSON list of {"source", "dest", "weight"} objects, or an
    object with such a list under "edges".
    """
    from appleseed.errors import NodeNotFoundError, NonConvergenceError
    from appleseed.graph.arena import TrustGraph
    from appleseed.params import AppleseedParams

    logging.basicConfig(level=getattr(logging, log_level))

    try:
        records = _load_edge_records(edge_file)
        graph = TrustGraph.from_records(records)
    except (ValueError, KeyError, TypeError) as exc:
        console.print(f"[red]Error:[/red] Could not load {edge_file}: {exc}")
        sys.exit(1)

    params = AppleseedParams(
        initial_energy=initial_energy,
        spreading_factor=spreading_factor,
        threshold=threshold,
        max_rounds=max_rounds,
    )

    try:
        stats = graph.run(source, params)
    except NodeNotFoundError:
        console.print(f"[red]Error:[/red] Source {source!r} does not appear in any edge.")
        sys.exit(1)
    except (ValueError, NonConvergenceError) as exc:
        console.print(f"[red]Error:[/red] {exc}")
        sys.exit(1)

    scores = graph.trust_scores()

    if as_json:
        click.echo(json.dumps({"source": source, "scores": scores, "stats": stats.to_dict()}, indent=2))
        return

    table = Table(title=f"Trust from {source} ({stats.rounds} rounds)")
    table.add_column("Node", style="bold")
    table.add_column("Trust", justify="right")
    for label, trust in scores.items():
        if label == source:
            continue
        table.add_row(label, f"{trust:.6f}")
    console.print(table)


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------


def _load_edge_records(edge_file: str) -> list[dict[str, object]]:
    """Read edge records from a JSON file."""
    data = json.loads(Path(edge_file).read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("edges")
    if not isinstance(data, list):
        raise ValueError("expected a list of edges or an object with an 'edges' list")
    return data


if __name__ == "__main__":
    cli()
