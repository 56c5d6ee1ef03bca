"""Command line interface for cut layout generation."""
