"""longmem entry point."""

import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv

from .cli import run_memory_cli


def main() -> None:
    """Main entry point."""
    load_dotenv(find_dotenv(usecwd=True))

    logging.basicConfig(
        level=os.getenv("LONGMEM_LOG_LEVEL", "WARNING").upper(),
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
    )

    sys.exit(run_memory_cli(sys.argv[1:]))


if __name__ == "__main__":
    main()
