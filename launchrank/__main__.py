"""Allow ``python -m launchrank``."""

from launchrank.cli import app

if __name__ == "__main__":
    app()
