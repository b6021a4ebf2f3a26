"""Command-line interface for keymask."""

from __future__ import annotations

import json
import sys
from typing import Optional

import typer

from keymask.config import get_settings
from keymask.masking import (
    FormatDomain,
    UnknownFormatError,
    format_value,
    get_rule,
    list_rules,
)
from keymask.models.formats import FormatDescriptor

app = typer.Typer(help="Keystroke masking for identifiers, phone numbers, dates and amounts.")


def _fail_unknown(exc: UnknownFormatError) -> None:
    settings = get_settings()
    suggestions = exc.suggest(
        limit=settings.suggestion_limit,
        cutoff=settings.suggestion_cutoff,
    )
    typer.secho(f"Unknown format: {exc.format_id}", fg=typer.colors.RED, err=True)
    if suggestions:
        typer.secho(f"Did you mean: {', '.join(suggestions)}", err=True)
    raise typer.Exit(code=2)


@app.command("format")
def format_command(
    format_id: str = typer.Argument(..., help="Format id, e.g. cpf or phone-us."),
    value: Optional[str] = typer.Argument(
        None,
        help="Raw value to mask. Reads one value per line from stdin when omitted.",
    ),
    strict: Optional[bool] = typer.Option(
        None,
        "--strict/--lenient",
        help="Fail on unknown format ids instead of echoing the value back.",
    ),
) -> None:
    """Mask VALUE (or each stdin line) for FORMAT_ID."""

    strict_mode = get_settings().strict_formats if strict is None else strict
    values = [value] if value is not None else [line.rstrip("\r\n") for line in sys.stdin]
    try:
        for raw in values:
            typer.echo(format_value(format_id, raw, strict=strict_mode))
    except UnknownFormatError as exc:
        _fail_unknown(exc)


@app.command("formats")
def formats_command(
    domain: Optional[FormatDomain] = typer.Option(None, "--domain", help="Only list one domain."),
    as_json: bool = typer.Option(False, "--json", help="Emit descriptors as JSON."),
) -> None:
    """List every supported format id."""

    rules = list_rules(domain)
    if as_json:
        payload = [FormatDescriptor.from_rule(rule).model_dump() for rule in rules]
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return
    width = max((len(rule.format_id) for rule in rules), default=0)
    for rule in rules:
        typer.echo(f"{rule.format_id.ljust(width)}  {rule.domain.value:<12} {rule.label}")


@app.command("describe")
def describe_command(format_id: str = typer.Argument(..., help="Format id to describe.")) -> None:
    """Show the rule behind FORMAT_ID as JSON."""

    try:
        rule = get_rule(format_id)
    except UnknownFormatError as exc:
        _fail_unknown(exc)
        return
    descriptor = FormatDescriptor.from_rule(rule)
    typer.echo(json.dumps(descriptor.model_dump(), indent=2, sort_keys=True, ensure_ascii=False))


@app.command("serve")
def serve_command(
    host: Optional[str] = typer.Option(None, "--host", help="Override the bind address."),
    port: Optional[int] = typer.Option(None, "--port", help="Override the port."),
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes."),
) -> None:
    """Run the HTTP masking API."""

    from keymask.server.run import serve

    serve(host=host, port=port, reload=reload)


def main(argv: Optional[list[str]] = None) -> None:
    """Entry point for `python -m keymask`."""
    app(prog_name="keymask", args=argv)


if __name__ == "__main__":
    main()
