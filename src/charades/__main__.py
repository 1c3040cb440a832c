"""Entry point for Charades."""

import logging
import sys

from .app import run_app
from .config import Config


def setup_logging(config: Config) -> None:
    """Send log records to a file; the TUI owns the terminal."""
    logging.basicConfig(
        filename=config.get_log_path(),
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    """Main entry point for Charades."""
    try:
        # Load configuration
        config = Config.load()

        setup_logging(config)

        # Run the application
        run_app(config)

        return 0
    except KeyboardInterrupt:
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
