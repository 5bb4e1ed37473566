"""Rules that recognise dates and times in English and Portuguese text."""

__version__ = "0.1.0"