from __future__ import annotations

from typing import Optional

from rich import box
from rich.console import Console
from rich.table import Table

from recorddemo.domain.models import Record
from recorddemo.orchestrator import DemoRun


def _plain(console: Console, text: str = "") -> None:
    # Record renderings contain brackets; never treat them as markup.
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def build_summary_table(record: Record) -> Table:
    """
    Render the record's fields as a two-column rich table.
    """
    table = Table(title="Final Record", box=box.ROUNDED)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("ID", str(record.id))
    table.add_row("Name", record.name)
    table.add_row("Tags", repr(record.tag_list))
    table.add_row("Meta", repr(record.meta_items))
    return table


def print_summary(record: Record, console: Optional[Console] = None) -> None:
    """Print the closing field-by-field summary."""
    console = console or Console()
    _plain(console)
    _plain(console, "Summary:")
    _plain(console, f"ID: {record.id}")
    _plain(console, f"Name: {record.name}")
    _plain(console, f"Tags: {record.tag_list!r}")
    _plain(console, f"Meta: {record.meta_items!r}")


def print_transcript(
    demo: DemoRun,
    console: Optional[Console] = None,
    show_expectations: bool = True,
    summary_table: bool = False,
) -> None:
    """
    Print the demonstration transcript: the initial state, one block per step
    and the final summary.

    Each step block reads `After <call>`, optionally `Expect: <sentence>`,
    then `State: <record>`. Steps whose by-copy change reached the original
    get an extra highlighted line.
    """
    console = console or Console()

    console.print(f"[bold]Copy vs reference demo[/bold] [dim](copy mode: {demo.copy_mode.value})[/dim]")
    _plain(console, f"Initial state: {demo.initial_state}")

    for step in demo.steps:
        _plain(console)
        _plain(console, f"After {step['title']}")
        if show_expectations:
            _plain(console, f"Expect: {step['expectation']}")
        _plain(console, f"State: {step['state']}")
        if step["leaked"] and not step["expected_leak"]:
            console.print(f"[bold red]LEAKED into the original:[/bold red] {', '.join(step['changed'])}")

    print_summary(demo.record, console)

    if summary_table:
        _plain(console)
        console.print(build_summary_table(demo.record))


def print_probe(demo: DemoRun, console: Optional[Console] = None) -> None:
    """
    Render leak probe results as a rich table, one row per step.
    """
    console = console or Console()

    table = Table(
        title=f"Leak Probe (copy mode: {demo.copy_mode.value})",
        box=box.ROUNDED,
        caption="A by-copy step leaks when its change shows up on the original",
    )
    table.add_column("Step", style="cyan")
    table.add_column("Mode", style="blue")
    table.add_column("Changed", style="yellow")
    table.add_column("Leaked", justify="center")

    for step in demo.steps:
        leaked = "[bold red]yes[/bold red]" if step["leaked"] else "[green]no[/green]"
        if step["mode"] != "copy":
            leaked = "[dim]-[/dim]"
        table.add_row(step["title"], step["mode"], ", ".join(step["changed"]) or "-", leaked)

    console.print(table)
    _plain(console, f"Final state: {demo.record.describe()}")


__all__ = ["build_summary_table", "print_probe", "print_summary", "print_transcript"]
