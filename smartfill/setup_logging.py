from __future__ import annotations

import logging
import sys


def setup_logging(verbose: bool = False) -> None:
    """
    Configures the root logger for CLI runs: timestamped lines on stderr,
    DEBUG for our package when verbose, WARNING otherwise.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,  # drop handlers from earlier calls
    )
    logging.getLogger("smartfill").setLevel(level)
    logging.getLogger("PIL").setLevel(logging.WARNING)
