"""Shared pytest configuration, marker assignment and sample files."""

from __future__ import annotations

from pathlib import Path

import pytest

SUBTITLE_TEXT = (
    "1\n"
    "00:00:01,000 --> 00:00:04,000\n"
    "Où est le café ? À côté de l'église, près du marché.\n"
    "\n"
    "2\n"
    "00:00:04,500 --> 00:00:08,000\n"
    "Déjà l'été : les élèves français préfèrent la crème brûlée.\n"
    "\n"
    "3\n"
    "00:00:08,500 --> 00:00:12,000\n"
    "Garçon, un thé glacé et une pâtisserie, s'il vous plaît !\n"
)

NOTES_TEXT = (
    "Réunion de l'équipe : décisions prises à l'unanimité.\n"
    "Prochaine étape : vérifier les sous-titres été/hiver.\n"
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def subtitle_text() -> str:
    """French subtitle body with plenty of Latin-1 accented letters."""
    return SUBTITLE_TEXT


@pytest.fixture
def notes_text() -> str:
    """Short French note used as an already-UTF-8 file."""
    return NOTES_TEXT


@pytest.fixture
def scenario_dir(tmp_path: Path) -> Path:
    """Directory with a Latin-1 subtitle, a UTF-8 note and a JPEG.

    Layout: ``a.srt`` (ISO-8859-1), ``b.txt`` (UTF-8), ``c.jpg``.
    """
    source = tmp_path / "subs"
    source.mkdir()
    (source / "a.srt").write_bytes(SUBTITLE_TEXT.encode("latin-1"))
    (source / "b.txt").write_bytes(NOTES_TEXT.encode("utf-8"))
    (source / "c.jpg").write_bytes(b"\xff\xd8\xff\xe0\x00\x10JFIF\x00" + bytes(64))
    return source
