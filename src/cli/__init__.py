"""Command-line entry points for sigrecon."""
