"""
Shamir Secret Reconstruction
Recover a secret from K-of-N shares whose values are written in mixed bases.

Each share is a point on a polynomial whose constant term is the secret.
Share values arrive as digit strings in base 2..16; they are decoded, sorted
by index, and the first K are interpolated at x=0.

Reconstruction here runs over the integers rather than a prime field. That
makes it a numeric recovery tool, not a hardened cryptographic primitive:
any K points reconstruct *some* integer, so a corrupted share is invisible to
plain reconstruction. check_consistency() looks across K-subsets to find it.
"""

import itertools
import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Iterable, Sequence

from cryptography.hazmat.primitives import hashes

from shamir_recover.errors import (
    InexactResult,
    InsufficientPoints,
    ReconstructionError,
    ResultOverflow,
    SharingError,
)
from shamir_recover.lagrange import Point, interpolate
from shamir_recover.precision import IntegerRange, UNBOUNDED
from shamir_recover.radix import decode

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Share:
    """A single encoded share of a secret."""
    index: int   # The x-coordinate (1-indexed, never 0)
    base: int    # Radix of the digit string, 2..16
    digits: str  # The y-coordinate, written in `base`

    def to_text(self) -> str:
        """Serialize to a portable "index:base:digits" string."""
        return f"{self.index}:{self.base}:{self.digits}"

    @classmethod
    def from_text(cls, text: str) -> "Share":
        """Deserialize from "index:base:digits"."""
        parts = text.strip().split(":")
        if len(parts) != 3:
            raise ValueError(f"Expected index:base:digits, got {text!r}")
        return cls(index=int(parts[0]), base=int(parts[1]), digits=parts[2])

    def decode(self, int_range: IntegerRange = UNBOUNDED) -> Point:
        """Decode this share into a point, tagging any error with the index."""
        try:
            y = decode(self.digits, self.base, int_range)
        except ReconstructionError as exc:
            raise exc.for_share(self.index)
        return Point(self.index, y)


@dataclass(frozen=True)
class ConsistencyReport:
    """Outcome of reconstructing over every K-subset of a point set."""
    secret: int | None          # Most common integer result, if any
    agreeing: int               # Subsets that produced `secret`
    total: int                  # Subsets tried
    suspects: tuple[int, ...]   # x-values that never appear in an agreeing subset
    secrets: Counter = field(default_factory=Counter)

    @property
    def consistent(self) -> bool:
        """True when every subset tried agreed on one secret."""
        return self.total > 0 and self.agreeing == self.total


def decode_shares(
    shares: Iterable[Share], int_range: IntegerRange = UNBOUNDED
) -> list[Point]:
    """Decode shares into points sorted by x."""
    return sorted(share.decode(int_range) for share in shares)


def fingerprint_points(points: Iterable[Point]) -> str:
    """
    Short SHA-256 fingerprint of a point set's x-coordinates.

    Identifies which shares took part in a reconstruction without putting
    any share value in a log line.
    """
    digest = hashes.Hash(hashes.SHA256())
    digest.update(",".join(str(p.x) for p in points).encode())
    return digest.finalize().hex()[:16]


def reconstruct_secret(
    shares: Iterable[Share],
    k: int,
    *,
    int_range: IntegerRange = UNBOUNDED,
    strict: bool = True,
) -> int:
    """
    Reconstruct a secret from K or more shares.

    Args:
        shares: At least K shares. Extras are decoded but not interpolated.
        k: Threshold — number of shares defining the polynomial.
        int_range: Range every decoded value and the secret must fit.
        strict: Reject a non-integer interpolation instead of rounding it.

    Returns:
        The reconstructed secret.

    Raises:
        ReconstructionError: Any decoding or interpolation failure. Decoding
            errors carry the offending share's index in `share_id`.
    """
    points = decode_shares(shares, int_range)
    if k < 1 or len(points) < k:
        raise InsufficientPoints(k, len(points))

    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(
            "Reconstructing with k=%d of n=%d points (set %s, range %s)",
            k, len(points), fingerprint_points(points[:k]), int_range,
        )
    return interpolate(points, k, int_range=int_range, strict=strict)


def check_consistency(
    points: Sequence[Point],
    k: int,
    *,
    int_range: IntegerRange = UNBOUNDED,
    max_subsets: int | None = None,
) -> ConsistencyReport:
    """
    Reconstruct over K-subsets and see whether they agree.

    On a genuine polynomial every K-subset yields the same secret. A single
    corrupted share makes each subset containing it disagree (or fail to be
    an integer at all), which exposes it as a suspect.

    Args:
        points: Decoded points; sorted here before subsets are formed.
        k: Threshold.
        int_range: Range each subset's secret must fit.
        max_subsets: Stop after this many subsets (in lexicographic order).

    Returns:
        A ConsistencyReport.

    Raises:
        InsufficientPoints: If fewer than k points are given.
        DegenerateInterpolation: If a subset contains a duplicate x.
    """
    ordered = sorted(points)
    if k < 1 or len(ordered) < k:
        raise InsufficientPoints(k, len(ordered))

    subsets = itertools.combinations(ordered, k)
    if max_subsets is not None:
        subsets = itertools.islice(subsets, max_subsets)

    results = []
    for subset in subsets:
        try:
            secret = interpolate(subset, k, int_range=int_range, strict=True)
        except (InexactResult, ResultOverflow):
            secret = None
        results.append((subset, secret))

    secrets = Counter(s for _, s in results if s is not None)
    if not secrets:
        consensus, agreeing = None, 0
        trusted = set()
    else:
        consensus, agreeing = secrets.most_common(1)[0]
        trusted = {p.x for subset, s in results if s == consensus for p in subset}

    suspects = tuple(p.x for p in ordered if p.x not in trusted)
    if suspects:
        logger.warning(
            "%d of %d subsets agree; suspect share(s): %s",
            agreeing, len(results), ", ".join(str(x) for x in suspects),
        )
    return ConsistencyReport(
        secret=consensus,
        agreeing=agreeing,
        total=len(results),
        suspects=suspects,
        secrets=secrets,
    )


def verify_shares(shares: Iterable[Share], k: int, secret: int) -> bool:
    """Verify that a set of shares correctly reconstructs the secret."""
    try:
        return reconstruct_secret(shares, k) == secret
    except SharingError:
        return False
