"""FlatWiki: a minimal personal wiki backed by flat text files."""

__version__ = "0.1.0"
