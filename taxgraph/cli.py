"""Typer CLI interface for taxgraph."""

import logging
from decimal import Decimal
from pathlib import Path

import typer
from pydantic import ValidationError

from taxgraph.exceptions import DataValidationError, TaxComputationError
from taxgraph.forms.attachments import summarize
from taxgraph.forms.f1040 import F1040
from taxgraph.models.reports import ReturnSummary
from taxgraph.models.tax_forms import ReturnInput

app = typer.Typer(
    name="taxgraph",
    help="taxgraph — compute Form 1040 lines and attachments from W-2 data.",
)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """taxgraph — compute Form 1040 lines and attachments from W-2 data."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_return(file_path: Path) -> F1040:
    """Validate a return JSON document and build the Form 1040."""
    if not file_path.exists():
        raise DataValidationError("file", f"File not found: {file_path}")
    if not file_path.is_file():
        raise DataValidationError("file", f"Not a file: {file_path}")
    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise DataValidationError("file", f"Cannot read {file_path}: {exc.strerror}") from exc
    try:
        # Bytes so that invalid UTF-8 is reported by pydantic as invalid JSON.
        data = ReturnInput.model_validate_json(raw)
    except ValidationError as exc:
        first = exc.errors()[0]
        field = ".".join(str(p) for p in first["loc"]) or "document"
        raise DataValidationError(field, first["msg"]) from exc
    return F1040.from_input(data)


def _fmt(value: Decimal | None) -> str:
    if value is None:
        return "-"
    return f"${value:,.2f}"


def _print_summary(summary: ReturnSummary) -> None:
    status = summary.filing_status.value if summary.filing_status else "(not set)"
    typer.echo(f"Tax year {summary.tax_year} — filing status {status}")
    attachments = ", ".join(summary.attachments) or "none"
    typer.echo(f"Attachments: {attachments}")
    for form in summary.forms:
        typer.echo("")
        title = form.designation
        typer.echo(title if title.startswith("Schedule") else f"Form {title}")
        for name, value in form.lines.items():
            if value is None:
                continue
            typer.echo(f"  {name:<6} {_fmt(value):>16}")


@app.command()
def compute(
    return_file: Path = typer.Argument(..., help="JSON file with tax_year, filing_status and w2s"),
    as_json: bool = typer.Option(False, "--json", help="Print the full summary as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log line computations"),
) -> None:
    """Compute every line of the return and list the attached forms."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        f1040 = _load_return(return_file)
        summary = summarize(f1040)
    except TaxComputationError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(summary.model_dump_json(indent=2))
    else:
        _print_summary(summary)
