"""Registry infrastructure: container adapters, logging and CLI."""
