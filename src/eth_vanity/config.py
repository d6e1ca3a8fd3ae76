"""
Search configuration.

Values come from, in increasing order of precedence: built-in defaults, a
``.env`` file, the process environment, and command-line flags.

Environment variables:
    VANITY_PREFIXES           Comma-separated hex prefixes
    VANITY_SUFFIXES           Comma-separated hex suffixes
    VANITY_THREADS            Number of workers (default: 16)
    VANITY_PROGRESS_INTERVAL  Attempts between progress lines (0 disables)
    VANITY_BACKEND            "process" or "thread"
"""

import argparse
import os
from dataclasses import dataclass
from typing import Mapping, Optional, Sequence

from dotenv import dotenv_values, find_dotenv

from eth_vanity.constraints import ConstraintSet, normalize
from eth_vanity.coordinator import BACKENDS, DEFAULT_WORKER_COUNT
from eth_vanity.errors import InvalidWorkerCount, validate_worker_count
from eth_vanity.worker import DEFAULT_PROGRESS_INTERVAL

ENV_PREFIXES = "VANITY_PREFIXES"
ENV_SUFFIXES = "VANITY_SUFFIXES"
ENV_THREADS = "VANITY_THREADS"
ENV_PROGRESS_INTERVAL = "VANITY_PROGRESS_INTERVAL"
ENV_BACKEND = "VANITY_BACKEND"


@dataclass
class SearchConfig:
    prefixes: Optional[str] = None
    suffixes: Optional[str] = None
    worker_count: int = DEFAULT_WORKER_COUNT
    progress_interval: int = DEFAULT_PROGRESS_INTERVAL
    backend: str = "process"
    verbose: bool = False

    def constraints(self) -> ConstraintSet:
        return normalize(self.prefixes, self.suffixes)


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        prog="eth-vanity",
        description="Search for an Ethereum address matching one of several prefix/suffix pairs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    eth-vanity -p 12,13,14 -s 89,678,56   # 12...89 or 13...678 or 14...56
    eth-vanity -p cafe                    # any address starting with 0xcafe
    eth-vanity -s dead -t 8               # ending with dead, 8 workers

At least one of -p and -s must be given. If both are given they must have
the same number of elements. The search stops at the first match.
        """,
    )
    parser.add_argument(
        "-p",
        dest="prefixes",
        metavar="PREFIXES",
        help="Comma-separated list of prefixes",
    )
    parser.add_argument(
        "-s",
        dest="suffixes",
        metavar="SUFFIXES",
        help="Comma-separated list of suffixes",
    )
    parser.add_argument(
        "-t",
        dest="threads",
        metavar="N",
        help=f"Num threads (default: {DEFAULT_WORKER_COUNT})",
    )
    parser.add_argument(
        "--progress-interval",
        metavar="N",
        help=f"Attempts between progress lines per worker, 0 disables (default: {DEFAULT_PROGRESS_INTERVAL})",
    )
    parser.add_argument(
        "--backend",
        choices=BACKENDS,
        help="Run workers as processes or threads (default: process)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def _parse_worker_count(value) -> int:
    try:
        count = int(value)
    except (TypeError, ValueError):
        raise InvalidWorkerCount(value)
    return validate_worker_count(count)


def _parse_progress_interval(value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Progress interval must be an integer, got {value!r}")


def load_config(
    argv: Optional[Sequence[str]] = None,
    env_file: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SearchConfig:
    """Resolve the search configuration.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).
        env_file: Path to a .env file; by default the nearest .env found
            from the current directory is used, if any.
        environ: Process environment (defaults to os.environ).

    Returns:
        SearchConfig with every value resolved.

    Raises:
        InvalidWorkerCount: If the worker count is not a positive integer.
        ValueError: If the progress interval or backend is invalid.
    """
    args = build_parser().parse_args(argv)

    path = env_file or find_dotenv(usecwd=True)
    values = dict(dotenv_values(path)) if path else {}
    values.update(os.environ if environ is None else environ)

    def pick(arg_value, env_name):
        if arg_value is not None:
            return arg_value
        value = values.get(env_name)
        return value if value not in (None, "") else None

    config = SearchConfig(
        prefixes=pick(args.prefixes, ENV_PREFIXES),
        suffixes=pick(args.suffixes, ENV_SUFFIXES),
        verbose=args.verbose,
    )

    threads = pick(args.threads, ENV_THREADS)
    if threads is not None:
        config.worker_count = _parse_worker_count(threads)

    interval = pick(args.progress_interval, ENV_PROGRESS_INTERVAL)
    if interval is not None:
        config.progress_interval = _parse_progress_interval(interval)

    backend = pick(args.backend, ENV_BACKEND)
    if backend is not None:
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}', expected one of {BACKENDS}")
        config.backend = backend

    return config
