"""Solutions to introductory and sorting-and-searching algorithm problems, with a command line front end."""

__version__ = "0.1.0"

__all__ = ["cli", "errors", "introductory", "sorting"]