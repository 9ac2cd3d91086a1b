"""Entry point for ``python -m pmreport``."""

from pmreport.cli import app

if __name__ == "__main__":
    app()
