"""Exceptions raised while validating a search or running it."""


class VanityError(Exception):
    """Base class for all vanity search errors."""


class InvalidConstraint(VanityError, ValueError):
    """A prefix or suffix token is not usable hex or is too long."""


class MismatchedConstraintLengths(VanityError, ValueError):
    """Prefix and suffix lists were both given with different lengths."""

    def __init__(self, prefixes, suffixes):
        self.prefixes = list(prefixes)
        self.suffixes = list(suffixes)
        super().__init__(
            f"Length of prefix and suffix arrays doesn't match: "
            f"{self.prefixes} {self.suffixes}"
        )


class NoConstraintsProvided(VanityError, ValueError):
    """Neither prefixes nor suffixes were supplied."""

    def __init__(self, message="At least one of prefixes or suffixes must be provided"):
        super().__init__(message)


class InvalidWorkerCount(VanityError, ValueError):
    """Worker count is not a positive integer."""

    def __init__(self, value):
        self.value = value
        super().__init__(f"Worker count must be a positive integer, got {value!r}")


class WorkerFailed(VanityError):
    """A worker died with an exception before any match was reported."""

    def __init__(self, worker_id, error):
        self.worker_id = worker_id
        self.error = error
        super().__init__(f"Worker {worker_id} failed: {error}")


def validate_worker_count(worker_count) -> int:
    """Return worker_count if it is a positive int, else raise InvalidWorkerCount."""
    if isinstance(worker_count, bool) or not isinstance(worker_count, int) or worker_count <= 0:
        raise InvalidWorkerCount(worker_count)
    return worker_count
