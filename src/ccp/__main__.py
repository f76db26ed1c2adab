"""Allow ``python -m ccp``."""

from ccp.cli import app

app()
