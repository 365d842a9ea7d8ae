"""Typer sub-applications for the pomotask CLI."""
