"""
Ethereum Vanity Address Search

Brute-force search for an Ethereum account whose address starts and/or ends
with one of several user-chosen hex patterns. Candidates are generated in
parallel workers; the first worker to find a match stops all the others.
"""

from eth_vanity.constraints import ConstraintPair, ConstraintSet, normalize
from eth_vanity.coordinator import Coordinator, SearchResult, run
from eth_vanity.errors import (
    InvalidConstraint,
    InvalidWorkerCount,
    MismatchedConstraintLengths,
    NoConstraintsProvided,
    VanityError,
    WorkerFailed,
)
from eth_vanity.estimator import EstimateReport, estimate
from eth_vanity.keygen import Candidate, generate_candidate
from eth_vanity.matcher import Matcher, matches

__version__ = "0.1.0"

__all__ = [
    "Candidate",
    "ConstraintPair",
    "ConstraintSet",
    "Coordinator",
    "EstimateReport",
    "InvalidConstraint",
    "InvalidWorkerCount",
    "Matcher",
    "MismatchedConstraintLengths",
    "NoConstraintsProvided",
    "SearchResult",
    "VanityError",
    "WorkerFailed",
    "estimate",
    "generate_candidate",
    "matches",
    "normalize",
    "run",
]
