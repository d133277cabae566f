"""CLI for running Alexa requests through a skill handler locally."""

import importlib
import logging
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .config import settings
from .errors import SkillError
from .models.request import RequestEnvelope
from .services.dispatcher import RequestHandler, Skill
from .services.validation import verify_application_id, verify_timestamp

app = typer.Typer(help="Alexa skill developer CLI")
console = Console()


def _load_request(path: Path) -> RequestEnvelope:
    try:
        return RequestEnvelope.model_validate_json(path.read_text())
    except ValidationError as e:
        console.print(f"[red]Invalid request envelope in {escape(str(path))}[/red]")
        console.print(str(e), markup=False)
        raise typer.Exit(1)


def _load_handler(target: str) -> RequestHandler:
    """Import `module:attribute`; classes are instantiated with no arguments."""
    module_name, _, attr = target.partition(":")
    if not module_name or not attr:
        raise typer.BadParameter("expected module:attribute", param_hint="--handler")

    obj = getattr(importlib.import_module(module_name), attr)
    return obj() if isinstance(obj, type) else obj


@app.command()
def invoke(
    request_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Alexa request JSON"),
    handler: str = typer.Option(..., "--handler", help="Request handler as module:attribute"),
    application_id: str = typer.Option(None, "--application-id", "-a", help="Expected skill ID"),
    ignore_application_id: bool = typer.Option(False, "--ignore-application-id"),
    ignore_timestamp: bool = typer.Option(False, "--ignore-timestamp"),
    tolerance: int = typer.Option(None, "--tolerance", "-t", help="Timestamp tolerance in seconds"),
):
    """Run a request file through a handler and print the response envelope."""
    envelope = _load_request(request_file)

    skill = Skill(
        application_id=application_id or settings.application_id,
        request_handler=_load_handler(handler),
        ignore_application_id=ignore_application_id or settings.ignore_application_id,
        ignore_timestamp=ignore_timestamp or settings.ignore_timestamp,
        timestamp_tolerance=tolerance if tolerance is not None else settings.timestamp_tolerance,
    )

    try:
        response = skill.process_request(None, envelope)
    except SkillError as e:
        console.print(f"[red]Request rejected ({e.code}): {escape(str(e))}[/red]")
        raise typer.Exit(1)

    console.print_json(data=response.to_dict())


@app.command()
def validate(
    request_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Alexa request JSON"),
    application_id: str = typer.Option(None, "--application-id", "-a", help="Expected skill ID"),
    tolerance: int = typer.Option(None, "--tolerance", "-t", help="Timestamp tolerance in seconds"),
):
    """Run the application ID and timestamp checks on a request file."""
    envelope = _load_request(request_file)
    application_id = application_id or settings.application_id
    tolerance = tolerance if tolerance is not None else settings.timestamp_tolerance

    checks = [
        ("Application ID", lambda: verify_application_id(envelope, application_id)),
        ("Timestamp", lambda: verify_timestamp(envelope, tolerance)),
    ]

    table = Table(title=f"Request {envelope.request.requestId or request_file.name}")
    table.add_column("Check", style="cyan")
    table.add_column("Result")
    table.add_column("Reason")

    failed = 0
    for name, check in checks:
        try:
            check()
            table.add_row(name, "[green]PASS[/green]", "")
        except SkillError as e:
            failed += 1
            table.add_row(name, "[red]FAIL[/red]", escape(str(e)))

    console.print(table)

    if failed:
        raise typer.Exit(1)


def main():
    """Entry point."""
    logging.basicConfig(
        level=logging.INFO if not settings.debug else logging.DEBUG,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    app()


if __name__ == "__main__":
    main()
