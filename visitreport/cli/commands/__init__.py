"""Command modules for the visitreport CLI."""

# Import all command modules here for easy access
from visitreport.cli.commands import note, photo, report, visit

# Explicitly define what's exported
__all__ = ["note", "photo", "report", "visit"]
