"""Command line interface for guidscan."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from guidscan.config import DEFAULT_BLOCK_SIZE, DEFAULT_CARRY_OVER_CHARS, ScanConfig, TextEncoding
from guidscan.errors import ScanError
from guidscan.models import ScanResult
from guidscan.scan.reader import scan_file
from guidscan.utils.files import FIXED_CODECS


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="guidscan - find and count GUID literals in text files")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _print_json(result: ScanResult, offsets: bool) -> None:
    for record in sorted(result.records, key=lambda item: str(item.guid)):
        row = {"path": str(result.path), "guid": str(record.guid), "count": record.count}
        if offsets:
            row["offsets"] = record.offsets
        typer.echo(json.dumps(row))


def _print_table(results: List[ScanResult], offsets: bool) -> None:
    show_file = len(results) > 1
    table = Table(show_header=True, header_style="bold magenta")
    if show_file:
        table.add_column("File")
    table.add_column("GUID", no_wrap=True, min_width=36)
    table.add_column("Count", justify="right")
    if offsets:
        table.add_column("Offsets")

    for result in results:
        for record in sorted(result.records, key=lambda item: str(item.guid)):
            row = [str(record.guid), str(record.count)]
            if show_file:
                row.insert(0, str(result.path))
            if offsets:
                row.append(", ".join(str(offset) for offset in record.offsets))
            table.add_row(*row)

    console.print(table)


@app.command()
def scan(
    paths: List[Path] = typer.Argument(..., help="Files to scan for GUID literals."),
    block_size: int = typer.Option(
        DEFAULT_BLOCK_SIZE, "--block-size", "-b", help="Characters decoded per read"
    ),
    encoding: TextEncoding = typer.Option(
        TextEncoding.AUTO_DETECT, "--encoding", "-e", case_sensitive=False, help="Text decoding"
    ),
    carry_over: int = typer.Option(
        DEFAULT_CARRY_OVER_CHARS, "--carry-over", help="Characters kept between blocks"
    ),
    offsets: bool = typer.Option(False, "--offsets", help="Report character offsets of matches"),
    as_json: bool = typer.Option(False, "--json", help="Emit one JSON object per GUID"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Scan files and count the distinct GUIDs found in each."""
    _setup_logging(verbose)
    config = ScanConfig(
        block_size=block_size,
        carry_over_max_chars=carry_over,
        encoding=encoding,
        track_offsets=offsets,
    )

    results: List[ScanResult] = []
    failed = 0
    for path in paths:
        try:
            result = scan_file(path, config)
        except ScanError as exc:
            err_console.print(str(exc), style="red", markup=False, highlight=False)
            failed += 1
            continue
        err_console.print(
            f"{path}: {len(result.records)} distinct GUIDs, "
            f"{len(result.malformed)} malformed candidates",
            markup=False,
            highlight=False,
        )
        if as_json:
            _print_json(result, offsets)
        else:
            results.append(result)

    if results and any(result.records for result in results):
        _print_table(results, offsets)
    elif results:
        console.print("[yellow]No GUIDs found.[/yellow]")

    if failed:
        raise typer.Exit(code=1)


@app.command()
def encodings() -> None:
    """List the supported text decodings."""
    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Encoding")
    table.add_column("Codec")
    table.add_row(TextEncoding.AUTO_DETECT.value, "byte-order mark, utf-8 fallback")
    for encoding, codec in FIXED_CODECS.items():
        table.add_row(encoding.value, codec)
    console.print(table)
