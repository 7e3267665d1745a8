"""Allow ``python -m encoding_converter``."""

from encoding_converter.cli.cli import app

app(prog_name="convert-encoding")
