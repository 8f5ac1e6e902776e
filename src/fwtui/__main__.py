"""Main entry point for fwtui."""

from fwtui.cli.main import cli

if __name__ == "__main__":
    cli()
