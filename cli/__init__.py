"""Faleproxy command-line interface."""
