"""Command line interface for gitstage."""
