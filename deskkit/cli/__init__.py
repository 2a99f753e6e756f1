"""Command line interface for deskkit."""
