"""
Constraint Set

Turns the raw prefix/suffix lists typed by the user into an immutable,
index-aligned list of (prefix, suffix) pairs that every worker shares.
"""

import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple, Union

from eth_vanity.errors import (
    InvalidConstraint,
    MismatchedConstraintLengths,
    NoConstraintsProvided,
)

# An Ethereum address is 20 bytes, i.e. 40 hex nibbles.
ADDRESS_NIBBLES = 40

_HEX_RE = re.compile(r"^[0-9a-f]*$")

RawTokens = Optional[Union[str, Sequence[str]]]


@dataclass(frozen=True)
class ConstraintPair:
    """A required prefix/suffix combination. Empty strings match anything."""

    prefix: str = ""
    suffix: str = ""

    @property
    def nibbles(self) -> int:
        return len(self.prefix) + len(self.suffix)


@dataclass(frozen=True)
class ConstraintSet:
    """Ordered, non-empty sequence of constraint pairs."""

    pairs: Tuple[ConstraintPair, ...]

    def __post_init__(self):
        if not self.pairs:
            raise NoConstraintsProvided()

    def __len__(self) -> int:
        return len(self.pairs)

    def __iter__(self) -> Iterator[ConstraintPair]:
        return iter(self.pairs)

    def __getitem__(self, index: int) -> ConstraintPair:
        return self.pairs[index]

    @property
    def prefixes(self) -> List[str]:
        return [pair.prefix for pair in self.pairs]

    @property
    def suffixes(self) -> List[str]:
        return [pair.suffix for pair in self.pairs]

    def describe(self) -> str:
        return (
            f"Finding matches with prefixes = {self.prefixes} "
            f"and suffixes = {self.suffixes}"
        )


def parse_token_list(raw: RawTokens) -> Optional[List[str]]:
    """Split a comma-separated string (or pass through a list) into tokens.

    Args:
        raw: Either ``None`` (side not supplied), a string such as ``"12,13"``,
            or an already split sequence of tokens.

    Returns:
        List of stripped tokens, or None if the side was not supplied.
    """
    if raw is None:
        return None
    if isinstance(raw, str):
        raw = raw.split(",")
    return [token.strip() for token in raw]


def validate_token(token: str, strip_0x: bool = False) -> str:
    """Case-fold and validate a single hex token.

    Args:
        token: Raw token from user input.
        strip_0x: Remove a leading ``0x`` (only meaningful for prefixes).

    Returns:
        The lowercase token.

    Raises:
        InvalidConstraint: If the token has non-hex characters or is longer
            than an address.
    """
    word = token.lower()
    if strip_0x and word.startswith("0x"):
        word = word[2:]
    if not _HEX_RE.match(word):
        raise InvalidConstraint(f"{token}: is not a valid hexadecimal.")
    if len(word) > ADDRESS_NIBBLES:
        raise InvalidConstraint(
            "You can't generate matching Ethereum address for more than "
            f"{ADDRESS_NIBBLES} characters (20 bytes): {token}"
        )
    return word


def normalize(raw_prefixes: RawTokens = None, raw_suffixes: RawTokens = None) -> ConstraintSet:
    """Build a validated ConstraintSet from raw prefix and suffix input.

    If only one side is supplied the other side is filled with empty strings
    of the same length, meaning "no constraint" for that side of each pair.

    Args:
        raw_prefixes: Prefix tokens (list or comma-separated string) or None.
        raw_suffixes: Suffix tokens (list or comma-separated string) or None.

    Returns:
        ConstraintSet with one pair per index.

    Raises:
        NoConstraintsProvided: If neither side was supplied.
        InvalidConstraint: On bad hex, an over-long token or pair, or a pair
            with both sides empty.
        MismatchedConstraintLengths: If both sides were supplied with
            different lengths.

    Example:
        >>> normalize(["AB"], None).pairs
        (ConstraintPair(prefix='ab', suffix=''),)
    """
    prefixes = parse_token_list(raw_prefixes)
    suffixes = parse_token_list(raw_suffixes)

    if prefixes is None and suffixes is None:
        raise NoConstraintsProvided()

    if prefixes is not None:
        prefixes = [validate_token(p, strip_0x=True) for p in prefixes]
    if suffixes is not None:
        suffixes = [validate_token(s) for s in suffixes]

    if suffixes is None:
        suffixes = [""] * len(prefixes)
    elif prefixes is None:
        prefixes = [""] * len(suffixes)
    elif len(prefixes) != len(suffixes):
        raise MismatchedConstraintLengths(prefixes, suffixes)

    if not prefixes:
        raise NoConstraintsProvided()

    pairs = []
    for prefix, suffix in zip(prefixes, suffixes):
        pair = ConstraintPair(prefix, suffix)
        if pair.nibbles == 0:
            raise InvalidConstraint(
                "A pair with an empty prefix and an empty suffix matches every address"
            )
        if pair.nibbles > ADDRESS_NIBBLES:
            raise InvalidConstraint(
                f'Prefix "{prefix}" and suffix "{suffix}" together exceed '
                f"{ADDRESS_NIBBLES} characters"
            )
        pairs.append(pair)

    return ConstraintSet(tuple(pairs))


def from_pairs(pairs: Iterable[Tuple[str, str]]) -> ConstraintSet:
    """Build a ConstraintSet from (prefix, suffix) tuples."""
    pairs = list(pairs)
    return normalize([p for p, _ in pairs], [s for _, s in pairs])
