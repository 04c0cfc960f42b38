"""Command line interface for licensewalk."""
