"""
Main entry point for the Roster application.
"""

import argparse
import sys
from typing import List, Optional

from .config import load_config
from .console import RosterSession
from .core.exceptions import ConfigurationError
from .core.roll_counter import RollCounter
from .logging import get_logger, setup_logging
from .persistence import StudentRepository

logger = get_logger("main")


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Interactive student record manager")
    parser.add_argument("--config", type=str, help="Configuration file path (JSON)")
    parser.add_argument("--roll-seed", type=int, help="Auto-assigned rolls start after this value")
    parser.add_argument("--log-level", type=str, help="DEBUG, INFO, WARNING or ERROR")
    parser.add_argument("--log-file", type=str, help="Also write logs to this rotating file")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = create_parser().parse_args(argv)

    try:
        config = load_config(
            args.config,
            overrides={
                'roll_seed': args.roll_seed,
                'log_level': args.log_level,
                'log_file': args.log_file,
            },
        )
    except ConfigurationError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 2

    try:
        setup_logging(level=config.log_level, log_file=config.log_file)
    except OSError as e:
        print(f"Error: Cannot open log file {config.log_file}: {e.strerror or e}", file=sys.stderr)
        return 2
    logger.info("Starting roster session (roll seed %d)", config.roll_seed)

    session = RosterSession(StudentRepository(RollCounter(config.roll_seed)))
    try:
        session.run()
    except (KeyboardInterrupt, EOFError):
        print("\nShutting down...")
    return 0


if __name__ == "__main__":
    sys.exit(main())
