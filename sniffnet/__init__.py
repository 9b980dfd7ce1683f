"""Network traffic monitoring helpers: languages, localized text, formatting and update checks."""

__version__ = "1.2.0"