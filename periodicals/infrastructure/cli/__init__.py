"""Command-line front end for the periodical registry."""
