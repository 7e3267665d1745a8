#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/encoding_converter"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    # The CLI only talks to the public API and the progress adapters.
    _assert_no_imports(
        PACKAGE / "cli/cli.py",
        ["import chardet", "import zipfile", "import codecs", "import shutil"],
    )

    for path in (PACKAGE / "application").glob("*.py"):
        if path.name == "use_cases.py":
            continue
        _assert_no_imports(
            path,
            ["import typer", "from typer", "import tqdm", "from tqdm", "import chardet"],
        )

    for name in ("classify.py", "convert.py", "validate.py"):
        _assert_no_imports(
            PACKAGE / name,
            ["import typer", "from typer", "import tqdm", "from tqdm", "import chardet"],
        )

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
