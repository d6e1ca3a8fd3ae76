#!/usr/bin/env python3
"""
Ethereum Vanity Address Search - command line entry point

Usage:
    eth-vanity -p 12,13,14 -s 89,678,56
    eth-vanity -s dead -t 8

Finds an address with prefix 12 and suffix 89, or prefix 13 and suffix 678,
or prefix 14 and suffix 56, and prints it with its private key.
"""

import logging
import sys
from typing import Optional, Sequence

from eth_vanity.config import load_config
from eth_vanity.console import (
    print_error,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from eth_vanity.coordinator import Coordinator, report_result
from eth_vanity.errors import VanityError
from eth_vanity.estimator import estimate, format_report


def setup_logging(verbose: bool):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(processName)s %(name)s %(levelname)s: %(message)s",
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Validate input, print estimates, run the search and report the match.

    Returns:
        Process exit code: 0 on success, 1 on invalid input or worker
        failure, 130 when interrupted.
    """
    try:
        config = load_config(argv)
        setup_logging(config.verbose)
        constraints = config.constraints()
        report = estimate(constraints, config.worker_count)
        coordinator = Coordinator(
            config.worker_count,
            backend=config.backend,
            progress_interval=config.progress_interval,
        )
    except (VanityError, ValueError) as e:
        print_error(str(e))
        return 1

    print_header("Ethereum Vanity Address Search")
    print(constraints.describe())
    for line in format_report(report):
        print(line)

    print_info(f"Starting {config.worker_count} {config.backend} workers (Press Ctrl+C to abort)")
    try:
        result = coordinator.run(constraints)
    except KeyboardInterrupt:
        print_warning("Aborted by user.")
        coordinator.terminate()
        return 130
    except VanityError as e:
        print_error(str(e))
        coordinator.terminate()
        return 1

    report_result(result)
    print_success(f"Checksum address: {result.checksum_address}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
