"""
Shamir Recover — Threshold Secret Reconstruction
Recover a secret from K-of-N shares written in mixed number bases.

Two steps, always in this order:
1. Radix decoding — each share's digit string (base 2..16) becomes an exact integer
2. Lagrange interpolation — the first K points, sorted by index, give f(0)

Arithmetic is exact: values are Python integers and the interpolation
accumulates rational terms, so nothing is lost to floating point. A fixed
integer width can be imposed with an IntegerRange to detect overflow.

Usage:
    from shamir_recover import Share, reconstruct_secret
    shares = [Share(1, 10, "4"), Share(2, 2, "111"), Share(3, 10, "12")]
    reconstruct_secret(shares, k=3)  # -> 3
"""

from shamir_recover.errors import (
    SharingError,
    ReconstructionError,
    InvalidBase,
    InvalidDigit,
    NumericOverflow,
    EmptyValue,
    InsufficientPoints,
    DegenerateInterpolation,
    InexactResult,
    ResultOverflow,
    MalformedInput,
)
from shamir_recover.precision import IntegerRange, UNBOUNDED, INT64, INT128, UINT64
from shamir_recover.radix import decode, encode, MIN_BASE, MAX_BASE
from shamir_recover.lagrange import Point, interpolate, lagrange_basis_at_zero
from shamir_recover.shamir import (
    Share,
    ConsistencyReport,
    decode_shares,
    reconstruct_secret,
    check_consistency,
    verify_shares,
    fingerprint_points,
)
from shamir_recover.records import ShareRecord, parse_record, reconstruct_record, load_record

__version__ = "0.1.0"
__all__ = [
    "SharingError",
    "ReconstructionError",
    "InvalidBase",
    "InvalidDigit",
    "NumericOverflow",
    "EmptyValue",
    "InsufficientPoints",
    "DegenerateInterpolation",
    "InexactResult",
    "ResultOverflow",
    "MalformedInput",
    "IntegerRange",
    "UNBOUNDED",
    "INT64",
    "INT128",
    "UINT64",
    "decode",
    "encode",
    "MIN_BASE",
    "MAX_BASE",
    "Point",
    "interpolate",
    "lagrange_basis_at_zero",
    "Share",
    "ConsistencyReport",
    "decode_shares",
    "reconstruct_secret",
    "check_consistency",
    "verify_shares",
    "fingerprint_points",
    "ShareRecord",
    "parse_record",
    "reconstruct_record",
    "load_record",
]
