"""Command line interface for visitreport."""
