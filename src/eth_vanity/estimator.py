"""
Attempt-count estimates for a ConstraintSet.

Each pair of ``n`` nibbles matches a random address with probability
``2 ** -(4 * n)``. Pairs race against each other on every candidate, so the
per-attempt success probabilities are summed. This treats the events as
disjoint and is only an order-of-magnitude figure; "100% probability" here
means "expected number of attempts", not a guarantee.
"""

from dataclasses import dataclass
from typing import List, Tuple

from eth_vanity.constraints import ConstraintSet
from eth_vanity.errors import validate_worker_count


@dataclass(frozen=True)
class PairEstimate:
    prefix: str
    suffix: str
    bits: int
    attempts_full: float
    attempts_half: float


@dataclass(frozen=True)
class EstimateReport:
    pairs: Tuple[PairEstimate, ...]
    worker_count: int
    combined_probability: float
    attempts_full: float
    attempts_half: float


def estimate(constraints: ConstraintSet, worker_count: int = 1) -> EstimateReport:
    """Compute expected attempts per pair and across the whole set.

    Args:
        constraints: The pairs being searched for.
        worker_count: Number of concurrent workers; the combined figure is
            expressed as attempts per worker.

    Returns:
        EstimateReport with per-pair and combined figures.

    Raises:
        InvalidWorkerCount: If worker_count is not positive.

    Example:
        >>> report = estimate(normalize(["a"]))
        >>> report.pairs[0].attempts_full, report.pairs[0].attempts_half
        (16.0, 8.0)
    """
    validate_worker_count(worker_count)

    pairs = []
    harmonic_sum = 0.0
    for pair in constraints:
        bits = 4 * pair.nibbles
        attempts = 2.0 ** bits
        harmonic_sum += 1.0 / attempts
        pairs.append(PairEstimate(pair.prefix, pair.suffix, bits, attempts, attempts / 2))

    attempts_full = (1.0 / harmonic_sum) / worker_count
    return EstimateReport(
        pairs=tuple(pairs),
        worker_count=worker_count,
        combined_probability=harmonic_sum,
        attempts_full=attempts_full,
        attempts_half=attempts_full / 2,
    )


def format_report(report: EstimateReport) -> List[str]:
    """Render the report as the lines printed before a search starts."""
    lines = []
    for pair in report.pairs:
        lines.append(
            f"It will take {pair.attempts_full:.1f} attempts for finding a ETH address "
            f'matching (prefix: "{pair.prefix}",suffix: "{pair.suffix}") '
            "with 100% probability."
        )
        lines.append(
            f"\t{pair.attempts_half:.1f} attempts suffice for 50% probability "
            "of finding a match."
        )
    overall = int(report.attempts_full)
    lines.append(
        f"Overall number of attempts across all pairs is {overall} for 100% "
        f"probability and {overall // 2} for 50% probability"
    )
    return lines
