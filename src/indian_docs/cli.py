from __future__ import annotations

import logging
import pathlib
from typing import Dict, Optional
from enum import Enum

import typer
import structlog
from rich.console import Console
from rich.markup import escape
import yaml
from pydantic import ValidationError

from .config import load_config, IndianDocsConfig
from .core.checksums import gst_check_char, verhoeff_check_digit
from .core.errors import InvalidDocumentError
from .core.normalize import sanitize_input
from .engine.pipeline import Pipeline, ScanResult
from .validators import aadhaar, gstin, ifsc, pan, upi_vpa

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="indian-docs: offline validator for Indian ID and payment codes")


class Kind(str, Enum):
    pan = "pan"
    aadhaar = "aadhaar"
    gstin = "gstin"
    ifsc = "ifsc"
    upi = "upi"


class ChecksumKind(str, Enum):
    aadhaar = "aadhaar"
    gstin = "gstin"


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"indian-docs {__version__}")
        raise typer.Exit()


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .indian-docs.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(
        processors=[structlog.processors.add_log_level, structlog.processors.JSONRenderer()],
        wrapper_class=structlog.make_filtering_bound_logger(logging.INFO if verbose else logging.WARNING),
    )
    try:
        cfg = load_config(config) if config else IndianDocsConfig()
    except (OSError, yaml.YAMLError, ValidationError) as e:
        console.print(f"[red]Bad config {config}:[/red] {escape(str(e))}")
        raise typer.Exit(code=2)
    ctx.obj = {"config": cfg}
    if verbose:
        log.info("verbose_enabled")


def _details(kind: Kind, value: str) -> Dict[str, Optional[str]]:
    """Fields worth showing for a value that already passed validation."""
    if kind is Kind.pan:
        return {"Normalized": pan.normalize(value), "Masked": pan.mask(value)}
    if kind is Kind.aadhaar:
        return {"Formatted": aadhaar.format(value), "Masked": aadhaar.mask(value)}
    if kind is Kind.gstin:
        state = gstin.extract_state_code(value)
        return {
            "State": f"{state} ({gstin.get_state_name(state) or 'Unknown State'})",
            "PAN": gstin.extract_pan(value),
        }
    if kind is Kind.ifsc:
        bank = ifsc.extract_bank_code(value)
        return {
            "Bank": f"{bank} ({ifsc.get_bank_name(bank) or 'Unknown Bank'})",
            "Branch": ifsc.extract_branch_code(value),
        }
    provider = upi_vpa.extract_provider(value)
    return {
        "Username": upi_vpa.extract_username(value),
        "Provider": f"{provider} ({upi_vpa.get_provider_name(provider) or 'Unknown Provider'})",
    }


_DETAILED = {
    Kind.pan: pan.validate_detailed,
    Kind.aadhaar: aadhaar.validate_detailed,
    Kind.gstin: gstin.validate_detailed,
    Kind.ifsc: ifsc.validate_detailed,
    Kind.upi: upi_vpa.validate_detailed,
}


@app.command()
def validate(
    kind: Kind = typer.Argument(..., help="Document type", case_sensitive=False),
    value: str = typer.Argument(..., help="Value to validate"),
):
    """Validate one identifier and show its parts."""
    result = _DETAILED[kind](value)
    log.info("validated", kind=kind.value, valid=result.is_valid, reason=result.reason.value if result.reason else None)
    if not result.is_valid:
        console.print(f"[red]✗ Invalid {kind.value.upper()}:[/red] {result.error}")
        raise typer.Exit(code=1)
    console.print(f"[green]✓ Valid {kind.value.upper()}[/green]")
    for label, text in _details(kind, value).items():
        console.print(f"  {label}: {text}")


@app.command()
def checksum(
    kind: ChecksumKind = typer.Argument(..., help="aadhaar (11-digit base) or gstin (14-char base)", case_sensitive=False),
    base: str = typer.Argument(..., help="Identifier without its check character"),
):
    """Append the check digit/character to a base value."""
    norm = sanitize_input(base)
    try:
        if kind is ChecksumKind.aadhaar:
            if len(norm) != 11:
                raise InvalidDocumentError("Aadhaar base must be 11 digits")
            check = verhoeff_check_digit(norm)
            result = aadhaar.validate_detailed(norm + check)
            if not result.is_valid:
                raise InvalidDocumentError(result.error)
        else:
            check = gst_check_char(norm)
    except InvalidDocumentError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)
    console.print(f"{norm}{check}")


@app.command()
def scan(
    ctx: typer.Context,
    src: pathlib.Path = typer.Argument(..., exists=True, help="File or directory to scan"),
    report: Optional[pathlib.Path] = typer.Option(None, "--report", help="Write HTML report to this path"),
):
    """Find valid identifiers without modifying files."""
    cfg: IndianDocsConfig = ctx.obj["config"]
    pipeline = Pipeline(cfg)
    result: ScanResult = pipeline.scan_path(src)
    log.info("scan_complete", files=result.files, entities=result.entities)
    console.print(f"Scanned {result.files} files, {result.entities} identifiers found")
    if report:
        from .reporting.html import write_report
        write_report(result, report)
        console.print(f"[green]Report written:[/green] {report}")


@app.command()
def mask(
    ctx: typer.Context,
    src: pathlib.Path = typer.Argument(..., exists=True, help="File or directory to mask"),
    out: pathlib.Path = typer.Option(..., "--out", help="Destination directory for masked output"),
):
    """Write a masked mirror of the source to OUT."""
    cfg: IndianDocsConfig = ctx.obj["config"]
    Pipeline(cfg).mask_path(src, out)
    console.print(f"[green]Mask complete[/green] → {out}")
