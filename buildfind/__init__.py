"""buildfind: locate BUILD files in a workspace while honoring .bazelignore."""

__version__ = "0.1.0"
