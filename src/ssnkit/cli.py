from __future__ import annotations

import pathlib
import random
from enum import Enum
from itertools import islice
from typing import NoReturn, Optional

import typer
import structlog
from rich.console import Console
from rich.table import Table

from .config import GenerationOptions, SSNKitConfig, load_config
from .decoder import decode_ssn
from .errors import GenerationExhaustedError, SSNKitError
from .generator import SEQUENCE_MAX, generate_ssn, iter_ssns
from .validator import validate_ssn

console = Console()
log = structlog.get_logger()
app = typer.Typer(add_completion=False, no_args_is_help=True, help="ssnkit — birth-date SSN validator and test-data generator")


class SexChoice(str, Enum):
    male = "male"
    female = "female"


def version_callback(value: bool):
    if value:
        from . import __version__
        console.print(f"ssnkit {__version__}")
        raise typer.Exit()


def _fail(err: SSNKitError) -> NoReturn:
    console.print(f"[red]{err}[/red]")
    raise typer.Exit(code=2)


@app.callback()
def common(
    ctx: typer.Context,
    config: Optional[pathlib.Path] = typer.Option(None, "--config", help="Path to .ssnkit.yaml"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logs"),
    version: Optional[bool] = typer.Option(None, "--version", callback=version_callback, is_eager=True),
):
    """Global options (config, verbosity)."""
    structlog.configure(processors=[structlog.processors.JSONRenderer()])
    try:
        cfg = load_config(config) if config else SSNKitConfig()
    except SSNKitError as e:
        _fail(e)
    ctx.obj = {"config": cfg, "verbose": verbose}
    if verbose:
        log.info("verbose_enabled")


@app.command()
def validate(
    ctx: typer.Context,
    ssn: str = typer.Argument(..., help="10-digit identifier"),
    birth_date: str = typer.Argument(..., help="Birth date, YYYY-MM-DD"),
):
    """Check an identifier against a birth date (exit 1 when invalid)."""
    ok = validate_ssn(ssn, birth_date)
    if ctx.obj["verbose"]:
        log.info("validated", ssn=ssn, birth_date=birth_date, valid=ok)
    if ok:
        console.print("[green]valid[/green]")
    else:
        console.print("[red]invalid[/red]")
        raise typer.Exit(code=1)


@app.command()
def generate(
    ctx: typer.Context,
    birth_date: str = typer.Argument(..., help="Birth date, YYYY-MM-DD"),
    sex: Optional[SexChoice] = typer.Option(None, "--sex", case_sensitive=False, help="Random when omitted"),
    sequence: Optional[int] = typer.Option(None, "--sequence", min=1, max=999, help="Starting sequence"),
    count: int = typer.Option(1, "--count", "-n", min=1, help="How many identifiers to print"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
):
    """Print synthetic identifiers for BIRTH_DATE (sum-mod-10 check digit, never containing 666)."""
    defaults = ctx.obj["config"].generation
    opts: GenerationOptions = defaults.to_options()
    if sex is not None:
        opts.sex = sex.value
    if sequence is not None:
        opts.sequence = sequence
    seed = seed if seed is not None else defaults.seed
    rng = random.Random(seed) if seed is not None else None

    try:
        if count == 1:
            ssns = [generate_ssn(birth_date, opts, rng=rng)]
        else:
            ssns = list(islice(iter_ssns(birth_date, opts, rng=rng), count))
            if not ssns:
                raise GenerationExhaustedError(SEQUENCE_MAX)
    except SSNKitError as e:
        _fail(e)
    if ctx.obj["verbose"]:
        log.info("generated", birth_date=birth_date, requested=count, produced=len(ssns))
    for s in ssns:
        console.print(s)


@app.command()
def decode(ssn: str = typer.Argument(..., help="10-digit identifier")):
    """Show the sex, birth date and sequence encoded in SSN."""
    decoded = decode_ssn(ssn)
    if decoded is None:
        console.print("[red]not a decodable identifier[/red]")
        raise typer.Exit(code=1)
    table = Table(show_header=False)
    table.add_row("sex", decoded.sex)
    table.add_row("birth date", decoded.birth_date.isoformat())
    table.add_row("sequence", f"{decoded.sequence:03d}")
    table.add_row("check digit", decoded.check_digit)
    console.print(table)
