"""Main CLI entry point for ibanspec."""

from typing import Optional

import typer
from pydantic import ValidationError as SettingsValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ibanspec import __version__
from ibanspec import iban as iban_utils
from ibanspec.exceptions import ConfigurationError, ValidationError
from ibanspec.registry import CountryRegistry
from ibanspec.utils.config import Settings, get_settings
from ibanspec.utils.logging import LogPerformance, configure_logging, get_logger

app = typer.Typer(
    name="ibanspec",
    help="🏦 Validate, split and generate IBANs",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)
logger = get_logger(__name__)


def _load_settings() -> Settings:
    try:
        return get_settings()
    except SettingsValidationError as e:
        raise ConfigurationError(
            "Invalid ibanspec settings", expected="IBANSPEC_* environment", original_error=e
        ) from e


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"ibanspec {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Override IBANSPEC_LOG_LEVEL (DEBUG, INFO, ...)"
    ),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version"
    ),
) -> None:
    """Validate, split and generate International Bank Account Numbers."""
    try:
        settings = _load_settings()
    except ConfigurationError as e:
        err_console.print(f"[red]✗ {escape(str(e))}[/red]")
        raise typer.Exit(2) from e

    configure_logging(
        log_level=(log_level or settings.log_level).upper(),
        json_logs=settings.json_logs,
        dev_mode=settings.dev_mode,
    )


@app.command("validate")
def validate(
    values: list[str] = typer.Argument(..., metavar="IBAN...", help="IBANs to validate"),
) -> None:
    """Validate one or more IBANs."""
    separator = get_settings().print_separator
    table = Table(title="IBAN Validation", show_header=True)
    table.add_column("IBAN", style="cyan", no_wrap=True)
    table.add_column("Country", style="white")
    table.add_column("Valid", justify="center")

    invalid = 0
    with LogPerformance("batch_validation", logger):
        for raw in values:
            valid = iban_utils.is_valid(raw)
            country = CountryRegistry.get_country_name(iban_utils.electronic_format(raw)[:2])
            table.add_row(
                escape(iban_utils.print_format(raw, separator)),
                country or "[red]Unknown[/red]",
                "[green]✓[/green]" if valid else "[red]✗[/red]",
            )
            if not valid:
                invalid += 1

    console.print(table)
    if invalid:
        raise typer.Exit(1)


@app.command("bban")
def bban(
    iban: str = typer.Argument(..., help="IBAN to split"),
    separator: Optional[str] = typer.Option(
        None, "--separator", "-s", help="Separator between BBAN segments"
    ),
) -> None:
    """Extract the BBAN of a valid IBAN."""
    if not iban_utils.is_valid(iban):
        err_console.print(f"[red]✗ Invalid IBAN: {escape(iban)}[/red]")
        raise typer.Exit(1)

    sep = get_settings().bban_separator if separator is None else separator
    console.print(iban_utils.to_bban(iban, sep))


@app.command("generate")
def generate(
    country_code: str = typer.Argument(..., help="ISO 3166-1 alpha-2 country code"),
    bban_in: str = typer.Argument(..., metavar="BBAN", help="Basic bank account number"),
) -> None:
    """Generate an IBAN (check digits included) from a BBAN."""
    try:
        result = iban_utils.from_bban(country_code, bban_in)
    except ValidationError as e:
        err_console.print(f"[red]✗ {escape(e.message)}[/red]")
        raise typer.Exit(1) from e

    console.print(result)


@app.command("format")
def format_iban(
    iban: str = typer.Argument(..., help="IBAN in any format"),
    separator: Optional[str] = typer.Option(
        None, "--separator", "-s", help="Separator between 4-character groups"
    ),
) -> None:
    """Print an IBAN in groups of four characters."""
    sep = get_settings().print_separator if separator is None else separator
    console.print(iban_utils.print_format(iban, sep))


@app.command("countries")
def countries(
    sepa: bool = typer.Option(False, "--sepa", help="Only countries in the SEPA scheme"),
) -> None:
    """List supported countries."""
    table = Table(title="Supported Countries", show_header=True)
    table.add_column("Code", style="cyan", no_wrap=True)
    table.add_column("Country", style="white")
    table.add_column("Length", justify="right")
    table.add_column("Structure", style="magenta")
    table.add_column("SEPA", justify="center")

    for code in CountryRegistry.list_supported_countries():
        if sepa and not CountryRegistry.is_sepa(code):
            continue
        spec = CountryRegistry.require(code)
        table.add_row(
            code,
            CountryRegistry.get_country_name(code) or "",
            str(spec.length),
            spec.structure,
            "[green]Yes[/green]" if CountryRegistry.is_sepa(code) else "[dim]No[/dim]",
        )

    console.print(table)


@app.command("show")
def show(country_code: str = typer.Argument(..., help="ISO 3166-1 alpha-2 country code")) -> None:
    """Show the IBAN specification of one country."""
    spec = CountryRegistry.get(country_code)
    if spec is None:
        err_console.print(f"[red]✗ No country with code {escape(country_code)}[/red]")
        raise typer.Exit(1)

    table = Table(title=f"IBAN Specification: {spec.country_code}", show_header=True)
    table.add_column("Setting", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    table.add_row("Country", CountryRegistry.get_country_name(spec.country_code) or "")
    table.add_row("IBAN Length", str(spec.length))
    table.add_row("BBAN Length", str(spec.bban_length))
    table.add_row("Structure", spec.structure)
    table.add_row("Example", iban_utils.print_format(spec.example))
    table.add_row("Example BBAN", spec.to_bban(spec.example, " "))
    table.add_row("SEPA", "Yes" if CountryRegistry.is_sepa(spec.country_code) else "No")

    table.add_section()
    for index, token in enumerate(spec.matcher.tokens, start=1):
        table.add_row(f"Segment {index}", str(token))

    console.print(table)


if __name__ == "__main__":
    app()
