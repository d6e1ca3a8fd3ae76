"""
Coordinator

Spawns the search workers, waits for the first completion, and reports it.
"""

import logging
import multiprocessing
import queue
import signal
import threading
from typing import Callable, List, Optional

from eth_vanity.constraints import ConstraintSet
from eth_vanity.errors import WorkerFailed, validate_worker_count
from eth_vanity.keygen import Candidate, generate_candidate
from eth_vanity.termination import ABORTED, TerminationSignal
from eth_vanity.worker import (
    DEFAULT_PROGRESS_INTERVAL,
    SearchResult,
    SearchWorker,
    WorkerFailure,
)

logger = logging.getLogger(__name__)

DEFAULT_WORKER_COUNT = 16
BACKENDS = ("process", "thread")

# Seconds between liveness checks while waiting for the first result.
POLL_INTERVAL = 0.5


def _run_process_worker(worker: SearchWorker):
    # Ctrl+C is handled once, by the parent, which terminates the workers.
    signal.signal(signal.SIGINT, signal.SIG_IGN)
    worker.run()


class Coordinator:
    """Runs one search across ``worker_count`` parallel workers.

    The ``process`` backend gives true parallelism; its workers ignore SIGINT
    so Ctrl+C reaches only this process. The ``thread`` backend keeps the
    SearchWorker objects in this process (see ``workers``, empty for
    processes), which is what tests with injected generators or matchers use.
    """

    def __init__(
        self,
        worker_count: int = DEFAULT_WORKER_COUNT,
        backend: str = "process",
        generate: Callable[[], Candidate] = generate_candidate,
        matcher=None,
        progress_interval: int = DEFAULT_PROGRESS_INTERVAL,
        on_progress: Optional[Callable[[int, int], None]] = None,
    ):
        if backend not in BACKENDS:
            raise ValueError(f"Unknown backend '{backend}', expected one of {BACKENDS}")
        self.worker_count = validate_worker_count(worker_count)
        self.backend = backend
        self.generate = generate
        self.matcher = matcher
        self.progress_interval = progress_interval
        self.on_progress = on_progress
        self.workers: List[SearchWorker] = []
        self.signal: Optional[TerminationSignal] = None
        self._handles = []

    def run(self, constraints: ConstraintSet) -> SearchResult:
        """Search until one worker wins and return its result.

        Losing workers are not awaited; they stop on their own once they
        observe the termination signal. Use join() to wait for them.

        Raises:
            WorkerFailed: If a worker crashed before anyone found a match, or
                every worker exited without reporting.
        """
        if self.backend == "process":
            ctx = multiprocessing.get_context()
            results = ctx.Queue()
            self.signal = TerminationSignal(ctx)
            spawn = ctx.Process
            entry = _run_process_worker
        else:
            results = queue.Queue()
            self.signal = TerminationSignal()
            spawn = threading.Thread
            entry = None

        self.workers = []
        self._handles = []
        for worker_id in range(self.worker_count):
            worker = SearchWorker(
                worker_id,
                constraints,
                self.signal,
                results,
                generate=self.generate,
                matcher=self.matcher,
                progress_interval=self.progress_interval,
                on_progress=self.on_progress,
            )
            handle = spawn(
                target=entry or worker.run,
                args=(worker,) if entry else (),
                name=f"vanity-worker-{worker_id}",
                daemon=True,
            )
            handle.start()
            if self.backend == "thread":
                self.workers.append(worker)
            self._handles.append(handle)

        logger.debug("Started %d %s workers", self.worker_count, self.backend)

        message = self._wait_for_message(results)
        if isinstance(message, WorkerFailure):
            logger.error("Worker %d failed:\n%s", message.worker_id, message.details)
            raise WorkerFailed(message.worker_id, message.error)

        logger.debug("Worker %d reported the winning match", message.worker_id)
        return message

    def _wait_for_message(self, results):
        """Return the first message on the fan-in queue.

        Only the worker that wins the termination signal ever puts a message,
        so the first one is the only one.

        Raises:
            WorkerFailed: If every worker exited without putting a message.
        """
        while True:
            try:
                return results.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                pass
            if any(handle.is_alive() for handle in self._handles):
                continue
            # A worker may have flushed its message just before exiting.
            try:
                return results.get(timeout=POLL_INTERVAL)
            except queue.Empty:
                exit_codes = [getattr(h, "exitcode", None) for h in self._handles]
                logger.error("All workers exited without a result: %s", exit_codes)
                raise WorkerFailed(-1, "all workers exited without a result")

    def join(self, timeout: Optional[float] = None) -> bool:
        """Wait for every worker to finish.

        Args:
            timeout: Seconds to wait per worker, or None to wait indefinitely.

        Returns:
            True if all workers have exited.
        """
        for handle in self._handles:
            handle.join(timeout)
        return not any(handle.is_alive() for handle in self._handles)

    def terminate(self):
        """Stop process workers immediately (used on Ctrl+C)."""
        if self.signal is not None:
            self.signal.try_set(ABORTED)
        for handle in self._handles:
            if hasattr(handle, "terminate") and handle.is_alive():
                handle.terminate()


def run(
    constraints: ConstraintSet,
    worker_count: int = DEFAULT_WORKER_COUNT,
    **kwargs,
) -> SearchResult:
    """Run a search with a fresh Coordinator and return the winner."""
    return Coordinator(worker_count, **kwargs).run(constraints)


def report_result(result: SearchResult):
    """Print the winning address and private key."""
    print(
        f'[+] Address with prefix "{result.prefix}" and suffix "{result.suffix}" found.'
    )
    print(f"Address: 0x{result.identifier}")
    print(f"PrivateKey: {result.private_key_hex}\n")
