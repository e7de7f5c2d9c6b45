"""casebrowser: browsable, semantically searchable catalog of case records."""

__version__ = "0.1.0"
