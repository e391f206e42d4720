"""Command line interface for savefile."""
