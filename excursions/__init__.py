"""Manage club excursions from the console, stored in a plain text file."""

__version__ = "0.1.0"