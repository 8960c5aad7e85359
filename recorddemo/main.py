from __future__ import annotations

import sys
from typing import Optional

import typer

from recorddemo.config import get_settings
from recorddemo.mutations.passing import CopyMode
from recorddemo.orchestrator import run_demo, run_leak_probe
from recorddemo.reporter import print_probe, print_transcript
from recorddemo.utils.logging import configure_logging

app = typer.Typer(help="Copy vs reference semantics demo for a composite record.")


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | copy_mode={settings.copy_mode} | "
        f"log_level={settings.log_level} json_logs={settings.log_json} "
        f"show_expectations={settings.show_expectations}"
    )


@app.command()
def run(
    copy_mode: Optional[CopyMode] = typer.Option(
        None,
        "--copy-mode",
        "-m",
        help="Duplication depth for by-copy operations (default from settings).",
    ),
    summary_table: bool = typer.Option(
        False,
        "--summary-table/--no-summary-table",
        help="Also render the final record as a table.",
    ),
) -> None:
    """
    Run the fixed demonstration sequence and print the transcript.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    demo = run_demo(copy_mode=copy_mode)
    print_transcript(
        demo,
        show_expectations=settings.show_expectations,
        summary_table=summary_table,
    )
    if demo.has_unexpected_leak:
        raise typer.Exit(code=1)


@app.command()
def probe(
    copy_mode: Optional[CopyMode] = typer.Option(
        None,
        "--copy-mode",
        "-m",
        help="Duplication depth for by-copy operations (default from settings).",
    ),
) -> None:
    """
    Mutate already allocated containers by copy to show when a copy leaks.
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)

    print_probe(run_leak_probe(copy_mode=copy_mode))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
