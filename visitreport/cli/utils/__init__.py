"""Shared helpers for the visitreport CLI."""
