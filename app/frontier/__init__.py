"""frontier - Declarative package installation from a TOML file."""

__version__ = "0.3.0"
