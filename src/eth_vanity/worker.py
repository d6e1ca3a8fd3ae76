"""
Search worker.

IMPORTANT: Everything a worker holds (generator, matcher, progress callback)
must be picklable when the process backend is used, so keep them as
top-level functions or plain objects.
"""

import enum
import logging
import traceback
from dataclasses import dataclass
from typing import Callable, Optional

from eth_vanity.constraints import ConstraintSet
from eth_vanity.keygen import Candidate, generate_candidate
from eth_vanity.matcher import Matcher
from eth_vanity.termination import TerminationSignal

logger = logging.getLogger(__name__)

DEFAULT_PROGRESS_INTERVAL = 50000


class WorkerState(enum.Enum):
    IDLE = "idle"
    GENERATING = "generating"
    TESTING = "testing"
    DONE = "done"


@dataclass(frozen=True)
class SearchResult:
    """The single winning match of a search."""

    identifier: str
    private_key_hex: str
    matched_pair_index: int
    prefix: str = ""
    suffix: str = ""
    checksum_address: str = ""
    worker_id: int = -1
    attempts: int = 0


@dataclass(frozen=True)
class WorkerFailure:
    """Sent instead of a SearchResult when a worker crashes."""

    worker_id: int
    error: str
    details: str = ""


def print_progress(worker_id: int, attempts: int):
    print(f"Attempt: {attempts}", flush=True)


class SearchWorker:
    """Generate candidates and test them until someone finds a match.

    Args:
        worker_id: Non-negative id, reported as the winner id.
        constraints: Shared, read-only ConstraintSet.
        signal: TerminationSignal shared with sibling workers.
        results: Queue the winning SearchResult (or a WorkerFailure) is put on.
        generate: Callable returning a fresh Candidate on every call.
        matcher: Object with ``matches(identifier) -> Optional[int]``;
            defaults to a Matcher built from ``constraints``.
        progress_interval: Report every N attempts; 0 disables reporting.
        on_progress: Callable ``(worker_id, attempts)``; defaults to printing
            ``Attempt: <count>``.
    """

    def __init__(
        self,
        worker_id: int,
        constraints: ConstraintSet,
        signal: TerminationSignal,
        results,
        generate: Callable[[], Candidate] = generate_candidate,
        matcher=None,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        on_progress: Optional[Callable[[int, int], None]] = None,
    ):
        self.worker_id = worker_id
        self.constraints = constraints
        self.signal = signal
        self.results = results
        self.generate = generate
        self.matcher = matcher
        self.progress_interval = progress_interval
        self.on_progress = on_progress or print_progress
        self.state = WorkerState.IDLE
        self.attempts = 0
        self.result: Optional[SearchResult] = None

    def run(self) -> Optional[SearchResult]:
        """Search until a match is won or another worker stops the search.

        Returns:
            The SearchResult if this worker won the race, otherwise None.
        """
        matcher = self.matcher or Matcher(self.constraints)
        logger.debug("Worker %d started", self.worker_id)

        try:
            while not self.signal.is_set():
                if self.progress_interval > 0 and self.attempts % self.progress_interval == 0:
                    self.on_progress(self.worker_id, self.attempts)

                self.state = WorkerState.GENERATING
                candidate = self.generate()
                self.attempts += 1

                self.state = WorkerState.TESTING
                index = matcher.matches(candidate.identifier)
                if index is None:
                    self.state = WorkerState.IDLE
                    continue

                if not self.signal.try_set(self.worker_id):
                    # A sibling won first; this match is valid but superseded.
                    logger.debug("Worker %d match superseded", self.worker_id)
                    break

                pair = self.constraints[index]
                self.result = SearchResult(
                    identifier=candidate.identifier,
                    private_key_hex=candidate.private_key_hex,
                    matched_pair_index=index,
                    prefix=pair.prefix,
                    suffix=pair.suffix,
                    checksum_address=candidate.checksum_address,
                    worker_id=self.worker_id,
                    attempts=self.attempts,
                )
                logger.debug(
                    "Worker %d won after %d attempts (pair %d)",
                    self.worker_id,
                    self.attempts,
                    index,
                )
                self.results.put(self.result)
                break
        except Exception as e:
            logger.error("Worker %d failed: %s", self.worker_id, e)
            if self.signal.try_set(self.worker_id):
                self.results.put(
                    WorkerFailure(self.worker_id, repr(e), traceback.format_exc())
                )
            raise
        finally:
            self.state = WorkerState.DONE
            logger.debug("Worker %d done after %d attempts", self.worker_id, self.attempts)

        return self.result
