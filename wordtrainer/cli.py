"""Command-line entry point of the vocabulary trainer."""

from __future__ import annotations

import argparse
import logging
import sys

from . import config
from .machine import StateMachine
from .messages import error_message
from .models import TrainerError

_log = logging.getLogger("wordtrainer")


def main(argv: list[str] | None = None) -> int:
    """Run one training session; return the process exit status."""
    parser = argparse.ArgumentParser(prog="wordtrainer", description="Interactive vocabulary trainer.")
    parser.add_argument("--vocabulary", default=config.VOCABULARY, help="dictionary JSON file")
    parser.add_argument("--archive", default=config.ARCHIVE, help="archive file")
    args = parser.parse_args(argv)

    logging.basicConfig(stream=sys.stderr, level=logging.INFO,
                        format="%(asctime)s %(levelname)s %(message)s")
    _log.setLevel(logging.INFO)
    _log.info("Logger initialized successfully...")
    _log.info("Starting vocabulary trainer...")

    try:
        StateMachine(vocabulary=args.vocabulary, archive=args.archive).run()
    except TrainerError as exc:
        print(error_message("working flow error"))
        _log.error("state machine run failed: %s", exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())