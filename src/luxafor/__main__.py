"""Main entry point for luxafor."""

from luxafor.cli.main import cli

if __name__ == "__main__":
    cli()
