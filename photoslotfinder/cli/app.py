"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional, Sequence

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from ..adapters.json_roster import JsonRosterLoader, JsonScheduleWriter, default_output_path
from ..config import AppConfig, load_config
from ..domain.exceptions import PhotoSlotFinderError
from ..domain.gap_finder import GapFinder
from ..domain.models import Roster, Schedule
from ..services.slot_finder import SlotFinderService

app = typer.Typer(
    name="photoslotfinder",
    help="Find bookable time slots in photographers' calendars",
    add_completion=False
)

console = Console()

TIME_FORMAT = "YYYY-MM-DD HH:mm Z"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _load_config_or_exit(config_file: Optional[Path]) -> AppConfig:
    try:
        return load_config(config_file)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)


def print_roster(roster: Roster) -> None:
    """Print photographers with their availabilities and bookings."""
    if not roster.photographers:
        console.print("[yellow]No photographers in roster.[/yellow]")
        return

    for photographer in roster.photographers:
        table = Table(
            title=f"{photographer.display_name()} (id: {photographer.id})",
            show_header=True,
            header_style="bold cyan"
        )
        table.add_column("Kind", style="bold yellow")
        table.add_column("Id", style="dim")
        table.add_column("Starts")
        table.add_column("Ends")

        for slot in photographer.availabilities:
            table.add_row("availability", slot.id, slot.starts.format(TIME_FORMAT), slot.ends.format(TIME_FORMAT))
        for slot in photographer.bookings:
            table.add_row("booking", slot.id, slot.starts.format(TIME_FORMAT), slot.ends.format(TIME_FORMAT))

        console.print(table)


def print_schedules(schedules: Sequence[Schedule]) -> None:
    """Print the found schedules as a table."""
    table = Table(
        title="Available time slots",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Photographer id", style="dim")
    table.add_column("Name", style="bold yellow")
    table.add_column("Starts")
    table.add_column("Ends")

    for schedule in schedules:
        table.add_row(
            schedule.photographer.id,
            schedule.photographer.name,
            schedule.time_slot.starts.format(TIME_FORMAT),
            schedule.time_slot.ends.format(TIME_FORMAT),
        )

    console.print(table)


@app.command()
def find(
    input_file: Annotated[Path, typer.Argument(help="Input JSON file containing photographer availability and bookings")],
    duration: Annotated[Optional[int], typer.Option("--duration", "-d", min=1, help="Requested slot duration in minutes")] = None,
    output_file: Annotated[Optional[Path], typer.Option("--output", "-o", help="Output file. Defaults to the input path plus the configured suffix")] = None,
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./photoslotfinder.yaml")] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Print the roster and the found slots")] = False,
):
    """
    Find one free slot per availability window and save them as JSON.

    Examples:

        photoslotfinder find roster.json

        photoslotfinder find roster.json --duration 60 --debug
    """
    config = _load_config_or_exit(config_file)
    _configure_logging("DEBUG" if debug else config.log_level)

    min_duration = duration if duration is not None else config.defaults.duration_minutes
    output_path = output_file or default_output_path(input_file, config.output.suffix)

    service = SlotFinderService(
        roster_source=JsonRosterLoader(),
        gap_finder=GapFinder(duration_minutes=min_duration),
        schedule_sink=JsonScheduleWriter(indent=config.output.indent),
    )

    try:
        result = service.run(input_path=input_file, output_path=output_path)
    except PhotoSlotFinderError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    if debug:
        print_roster(result.roster)
        print_schedules(result.schedules)

    if not result.schedules:
        console.print(f"[yellow]No free {min_duration}-minute slots found.[/yellow]")
    console.print(f"[green]### Successfully saved output in => {result.output_path}[/green]", soft_wrap=True)


@app.command()
def show(
    input_file: Annotated[Path, typer.Argument(help="Input JSON file containing photographer availability and bookings")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file")] = None,
):
    """
    Print the photographers, availabilities and bookings of a roster.
    """
    config = _load_config_or_exit(config_file)
    _configure_logging(config.log_level)

    try:
        roster = JsonRosterLoader().load(input_file)
    except PhotoSlotFinderError as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(1)

    console.print()
    print_roster(roster)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]photoslotfinder[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
