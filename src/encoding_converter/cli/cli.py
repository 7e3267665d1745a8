#!/usr/bin/env python3
"""
encoding_converter.cli.cli

Typer-based CLI that re-encodes the plain-text and subtitle files of a
directory.

Files already in the target encoding are skipped unless ``--copy`` is given;
everything else is transcoded into ``<dir>/processed/``.

Examples
--------
Convert the current directory to UTF-8:

    convert-encoding

Convert to Windows-1252, keep unchanged files, and zip the results:

    convert-encoding ./subs --encoding cp1252 --copy --compress --cleanup
"""

from __future__ import annotations

import logging
import traceback
from pathlib import Path

import typer

from encoding_converter.adapters.progress import NullProgressReporter, TqdmProgressReporter
from encoding_converter.application.results import RunResult
from encoding_converter.errors import EncodingConverterError

app = typer.Typer(
    name="convert-encoding",
    help="Convert plain-text and subtitle files to a target character encoding.",
    add_completion=False,
)

ENCODING_HELP = "Target encoding for written files."
COPY_HELP = "Copy files already in the target encoding into the output directory."
COMPRESS_HELP = "Bundle processed files into processed/archive.zip."
CLEANUP_HELP = "Delete processed files after a successful archive (needs --compress)."
WORKERS_HELP = "Maximum number of files converted concurrently."


def _configure_logging(verbose: bool) -> None:
    """Configure root logging for a CLI run."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error.

    Parameters
    ----------
    exc : Exception
        Exception raised during the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _print_summary(result: RunResult) -> None:
    typer.echo(
        f"\nProcessed {len(result.processed)}, "
        f"skipped {len(result.skipped)}, "
        f"failed {len(result.failures)}"
    )
    for failure in result.failures:
        typer.secho(
            f"✗ {failure.source_path.name}: {failure.reason}",
            fg=typer.colors.RED,
            err=True,
        )
    if result.archive_path is not None:
        typer.secho(f"✓ Archive: {result.archive_path}", fg=typer.colors.GREEN)


@app.command()
def convert_cmd(
    directory: Path = typer.Argument(
        Path("./"),
        help="Directory to scan (not recursive).",
    ),
    encoding: str = typer.Option("UTF-8", "--encoding", help=ENCODING_HELP),
    copy: bool = typer.Option(False, "--copy", help=COPY_HELP),
    compress: bool = typer.Option(False, "--compress", help=COMPRESS_HELP),
    cleanup: bool = typer.Option(False, "--cleanup", help=CLEANUP_HELP),
    workers: int = typer.Option(1, "--workers", min=1, help=WORKERS_HELP),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Hide progress output."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
) -> None:
    """Convert the text and subtitle files of DIRECTORY into DIRECTORY/processed.

    Parameters
    ----------
    directory : Path, default="./"
        Source directory.
    encoding : str, default="UTF-8"
        Target encoding.
    copy : bool, default=False
        Whether to copy files already in the target encoding.
    compress : bool, default=False
        Whether to write ``processed/archive.zip``.
    cleanup : bool, default=False
        Whether to delete processed files after archiving.

    Notes
    -----
    - Exits with 1 on an invalid or inaccessible directory, an archive
      failure, or when any file could not be converted.
    """
    _configure_logging(verbose)
    progress = NullProgressReporter() if quiet else TqdmProgressReporter()

    try:
        from encoding_converter.api import convert_directory

        result = convert_directory(
            source_dir=directory,
            target_encoding=encoding,
            copy_unchanged=copy,
            compress=compress,
            cleanup_after_compress=cleanup,
            max_workers=workers,
            progress=progress,
        )
    except EncodingConverterError as exc:
        raise typer.Exit(code=_print_error(exc, debug))
    except Exception as exc:
        # Unexpected crash: still show a clean message; debug prints traceback.
        raise typer.Exit(code=_print_error(exc, debug))

    _print_summary(result)
    if not result.ok:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
