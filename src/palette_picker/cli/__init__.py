"""Command line interface and interactive terminal front end."""
