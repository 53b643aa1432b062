"""vcf-decoder: decode VCF records into JSON from the command line."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from . import __version__
from .config import ConfigValidationError, ParserConfig, load_config
from .errors import VCFDecodeError
from .parser import VCFParser
from .reader import read_header, read_vcf

logger = logging.getLogger(__name__)

DECLARED_CATEGORIES = ("INFO", "FORMAT", "FILTER", "ALT")


def version_callback(value: bool) -> None:
    if value:
        print(__version__)
        raise typer.Exit()


app = typer.Typer(name="vcf-decoder", help="Decode VCF header metadata and records into JSON")
console = Console()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version and exit"
        ),
    ] = None,
) -> None:
    pass


def setup_logging(verbose: bool, quiet: bool, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity flags."""
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = getattr(logging, default_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    )
    logging.getLogger("vcf_decoder").setLevel(level)


def _load_parser_config(config_path: Path | None, strict: bool) -> ParserConfig:
    if config_path is None:
        return ParserConfig(strict=strict)
    overrides = {} if strict else {"strict": False}
    return load_config(config_path, overrides=overrides)


def _check_exists(vcf_path: Path) -> None:
    if not vcf_path.exists():
        console.print(f"[red]Error: VCF file not found: {vcf_path}[/red]")
        raise typer.Exit(1)


def _build_parser(header_text: str, config: ParserConfig) -> VCFParser:
    try:
        return VCFParser.from_config(header_text, config)
    except VCFDecodeError as e:
        console.print(f"[red]Header Error: {e}[/red]")
        raise typer.Exit(1) from None


@app.command()
def header(
    vcf_path: Path = typer.Argument(..., help="Path to VCF file (.vcf, .vcf.gz)"),
    as_json: bool = typer.Option(False, "--json", help="Print the metadata catalog as JSON"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="Strict header validation"),
) -> None:
    """Show samples and declared metadata of a VCF header."""
    _check_exists(vcf_path)
    parser = _build_parser(read_header(vcf_path), ParserConfig(strict=strict))

    if as_json:
        typer.echo(json.dumps({"samples": parser.samples, "metadata": parser.metadata}))
        return

    console.print(f"[bold]Samples ({len(parser.samples)}):[/bold] {', '.join(parser.samples)}")

    table = Table(title="Declared fields")
    table.add_column("Category", style="cyan")
    table.add_column("ID")
    table.add_column("Number")
    table.add_column("Type")
    table.add_column("Description")
    for category in DECLARED_CATEGORIES:
        entries = parser.get_metadata(category)
        if not isinstance(entries, dict):
            continue
        for field_id, attrs in entries.items():
            if not isinstance(attrs, dict):
                continue
            table.add_row(
                category,
                field_id,
                str(attrs.get("Number", "")),
                str(attrs.get("Type") or ""),
                str(attrs.get("Description", "")),
            )
    console.print(table)


@app.command()
def parse(
    vcf_path: Path = typer.Argument(..., help="Path to VCF file (.vcf, .vcf.gz)"),
    limit: int | None = typer.Option(None, "--limit", "-n", help="Stop after N records"),
    samples: bool = typer.Option(False, "--samples", help="Include decoded FORMAT fields"),
    genotypes: bool = typer.Option(False, "--genotypes", help="Include GT per sample"),
    strict: bool = typer.Option(True, "--strict/--no-strict", help="Require INFO on every line"),
    config_path: Path | None = typer.Option(None, "--config", "-c", help="TOML config file"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
) -> None:
    """Decode data lines and print one JSON object per record."""
    try:
        config = _load_parser_config(config_path, strict)
    except (FileNotFoundError, ConfigValidationError) as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1) from None

    setup_logging(verbose, quiet, config.log_level)
    _check_exists(vcf_path)
    header_text, lines = read_vcf(vcf_path)
    emitted = 0
    skipped = 0
    try:
        parser = _build_parser(header_text, config)
        for line_number, line in enumerate(lines, start=1):
            if limit is not None and emitted >= limit:
                break
            try:
                variant = parser.parse_line(line)
            except VCFDecodeError as e:
                logger.warning("Skipping data line %d: %s", line_number, e)
                skipped += 1
                continue
            if variant is None:
                continue

            record = variant.to_dict()
            if samples:
                record["SAMPLES"] = variant.samples()
            if genotypes:
                record["GENOTYPES"] = variant.genotypes()
            typer.echo(json.dumps(record))
            emitted += 1
    finally:
        lines.close()

    logger.info("Decoded %d records, skipped %d", emitted, skipped)


if __name__ == "__main__":
    app()
