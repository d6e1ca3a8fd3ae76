"""Prefix/suffix matching of generated addresses against a ConstraintSet."""

import re
from typing import Optional

from eth_vanity.constraints import ADDRESS_NIBBLES, ConstraintSet

_IDENTIFIER_RE = re.compile(r"^[0-9a-f]{40}$")


class Matcher:
    """Decides whether an identifier satisfies any pair of a ConstraintSet.

    Identifiers are 40-nibble lowercase hex strings without ``0x``. Pairs are
    tried in order and the index of the first matching pair is returned.
    When every prefix (or every suffix) has the same length the identifier is
    sliced once per attempt instead of once per pair.
    """

    __slots__ = (
        "constraints",
        "_prefixes",
        "_suffixes",
        "_prefix_lengths",
        "_suffix_starts",
        "_common_prefix_length",
        "_common_suffix_start",
    )

    def __init__(self, constraints: ConstraintSet):
        self.constraints = constraints
        self._prefixes = constraints.prefixes
        self._suffixes = constraints.suffixes
        self._prefix_lengths = [len(p) for p in self._prefixes]
        self._suffix_starts = [ADDRESS_NIBBLES - len(s) for s in self._suffixes]

        self._common_prefix_length = None
        if len(set(self._prefix_lengths)) == 1:
            self._common_prefix_length = self._prefix_lengths[0]

        self._common_suffix_start = None
        if len(set(self._suffix_starts)) == 1:
            self._common_suffix_start = self._suffix_starts[0]

    def matches(self, identifier: str) -> Optional[int]:
        """Return the index of the first matching pair, or None."""
        address_prefix = address_suffix = None
        if self._common_prefix_length is not None:
            address_prefix = identifier[: self._common_prefix_length]
        if self._common_suffix_start is not None:
            address_suffix = identifier[self._common_suffix_start:]

        for i, prefix in enumerate(self._prefixes):
            if self._common_prefix_length is None:
                address_prefix = identifier[: self._prefix_lengths[i]]
            if self._common_suffix_start is None:
                address_suffix = identifier[self._suffix_starts[i]:]
            if address_prefix == prefix and address_suffix == self._suffixes[i]:
                return i
        return None

    __call__ = matches

    def check(self, identifier: str) -> Optional[int]:
        """Like matches(), but rejects identifiers that are not 40 lowercase nibbles."""
        if not isinstance(identifier, str) or not _IDENTIFIER_RE.match(identifier):
            raise ValueError(f"Not a 40-nibble lowercase hex identifier: {identifier!r}")
        return self.matches(identifier)


def matches(identifier: str, constraints: ConstraintSet) -> Optional[int]:
    """Match a single identifier without keeping a Matcher around."""
    return Matcher(constraints).check(identifier)
