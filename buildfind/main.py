# buildfind/main.py
"""Main entry point for the buildfind CLI application."""

from buildfind.cli.interface import main_cli


def entrypoint():
    """Function to be called by the script defined in pyproject.toml."""
    main_cli(prog_name="buildfind")

if __name__ == '__main__':
    entrypoint()
