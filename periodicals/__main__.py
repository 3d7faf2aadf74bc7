"""Run the registry CLI with ``python -m periodicals``."""
import sys

from periodicals.infrastructure.cli.registry_cli import main

if __name__ == "__main__":
    sys.exit(main())
