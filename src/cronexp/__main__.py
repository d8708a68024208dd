"""Allow running the command-line interface with ``python -m cronexp``."""

from cronexp.cli import app

if __name__ == "__main__":
    app(prog_name="cronexp")
