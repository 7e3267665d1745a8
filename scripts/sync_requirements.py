#!/usr/bin/env python3
"""Write or check requirements.txt against the pyproject.toml dependencies.

    python scripts/sync_requirements.py           # regenerate
    python scripts/sync_requirements.py --check   # fail when out of date
"""

from __future__ import annotations

import tomllib
from pathlib import Path

import typer

ROOT = Path(__file__).resolve().parents[1]
REQUIREMENTS = ROOT / "requirements.txt"
EXTRAS = ("test",)
HEADER = (
    f"# Generated from pyproject.toml (runtime + extras: {','.join(EXTRAS)})\n"
    "# Do not edit manually; run: python scripts/sync_requirements.py\n"
)


def _declared() -> list[str]:
    project = tomllib.loads((ROOT / "pyproject.toml").read_text(encoding="utf-8"))["project"]
    requirements = set(project.get("dependencies", []))
    for extra in EXTRAS:
        requirements.update(project.get("optional-dependencies", {}).get(extra, []))
    return sorted(req.strip() for req in requirements if req.strip())


def _render(requirements: list[str]) -> str:
    return HEADER + "".join(f"{req}\n" for req in requirements)


def main(
    check: bool = typer.Option(False, "--check", help="Only verify requirements.txt."),
) -> None:
    """Regenerate requirements.txt, or verify it with ``--check``."""
    expected = _render(_declared())
    if not check:
        REQUIREMENTS.write_text(expected, encoding="utf-8")
        typer.echo(f"Wrote {REQUIREMENTS.name}")
        return
    current = REQUIREMENTS.read_text(encoding="utf-8") if REQUIREMENTS.exists() else ""
    if current != expected:
        typer.secho(
            "requirements.txt is out of sync with pyproject.toml; "
            "run: python scripts/sync_requirements.py",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    typer.echo("requirements.txt is up to date.")


if __name__ == "__main__":
    typer.run(main)
