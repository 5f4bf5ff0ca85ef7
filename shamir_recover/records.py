"""
Share Records
Validate external share records and hand them to the reconstruction core.

A record is an already-parsed mapping, normally loaded from JSON:

    {
        "keys": {"n": 4, "k": 3},
        "1": {"base": "10", "value": "4"},
        "2": {"base": "2", "value": "111"},
        ...
    }

The flat form {"threshold_n": 4, "threshold_k": 3, "shares": {...}} is
accepted too. Structural problems raise MalformedInput; everything about the
share values themselves is left to the core and raises its own errors.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from shamir_recover.errors import MalformedInput, ReconstructionError
from shamir_recover.precision import IntegerRange, UNBOUNDED
from shamir_recover.shamir import Share, reconstruct_secret

logger = logging.getLogger(__name__)

KEYS_FIELD = "keys"


@dataclass(frozen=True)
class ShareRecord:
    """A validated reconstruction request."""
    n: int
    k: int
    shares: tuple[Share, ...]


def _parse_decimal(text: str) -> int | None:
    """Plain ASCII decimal with an optional leading '-', else None."""
    text = text.strip()
    digits = text[1:] if text.startswith("-") else text
    if not (digits.isascii() and digits.isdigit()):
        return None
    return int(text)


def _as_int(value, what: str) -> int:
    """Accept an int or a decimal string, as JSON producers disagree on which."""
    if isinstance(value, bool):
        raise MalformedInput(f"{what} must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        parsed = _parse_decimal(value)
        if parsed is not None:
            return parsed
    raise MalformedInput(f"{what} must be an integer, got {value!r}")


def _split_record(record: dict) -> tuple[dict, dict]:
    """Return (thresholds, shares) for either record layout."""
    if "shares" in record:
        shares = record["shares"]
        if not isinstance(shares, dict):
            raise MalformedInput("'shares' must be an object")
        thresholds = {
            "n": record.get("threshold_n"),
            "k": record.get("threshold_k"),
        }
        return thresholds, shares

    if KEYS_FIELD not in record:
        raise MalformedInput("Missing 'keys' object in record")
    thresholds = record[KEYS_FIELD]
    if not isinstance(thresholds, dict):
        raise MalformedInput("'keys' must be an object")
    shares = {key: value for key, value in record.items() if key != KEYS_FIELD}
    return thresholds, shares


def parse_share(share_id, entry) -> Share:
    """
    Validate one share entry.

    An empty value string is structurally fine; it raises EmptyValue when
    the share is decoded, like any other bad digit string.

    Raises:
        MalformedInput: If the id is not a positive integer, or base or value
            is missing or of the wrong type.
    """
    index = _parse_decimal(str(share_id))
    if index is None:
        raise MalformedInput(f"Share id {share_id!r} is not an integer")
    if index < 1:
        raise MalformedInput(f"Share id {share_id!r} must be positive")

    if not isinstance(entry, dict) or "base" not in entry or "value" not in entry:
        raise MalformedInput("Missing base or value", share_id=index)

    base = _as_int(entry["base"], "base")
    value = entry["value"]
    if not isinstance(value, str):
        raise MalformedInput(f"value must be a string, got {value!r}", share_id=index)
    return Share(index=index, base=base, digits=value)


def parse_record(record: dict) -> ShareRecord:
    """
    Validate a record's thresholds and shares.

    Returns:
        A ShareRecord with shares in record order.

    Raises:
        MalformedInput: For structural problems or invalid thresholds.
    """
    if not isinstance(record, dict):
        raise MalformedInput("Record must be an object")

    thresholds, entries = _split_record(record)
    if thresholds.get("n") is None or thresholds.get("k") is None:
        raise MalformedInput("Record must define both n and k")
    n = _as_int(thresholds["n"], "n")
    k = _as_int(thresholds["k"], "k")
    if k <= 0 or n < k:
        raise MalformedInput(f"Invalid n or k values (n={n}, k={k})")

    shares = tuple(parse_share(share_id, entry) for share_id, entry in entries.items())
    if len(shares) != n:
        logger.warning("Record declares n=%d but carries %d shares", n, len(shares))
    return ShareRecord(n=n, k=k, shares=shares)


def reconstruct_record(
    record: dict,
    *,
    int_range: IntegerRange = UNBOUNDED,
    strict: bool = True,
    skip_invalid: bool = False,
) -> int:
    """
    Validate a record and reconstruct its secret.

    Args:
        record: Parsed record mapping.
        int_range: Range every decoded value and the secret must fit.
        strict: Reject a non-integer interpolation instead of rounding it.
        skip_invalid: Drop shares that fail to decode instead of aborting,
            as long as at least k shares remain.

    Raises:
        MalformedInput: If the record is structurally invalid.
        ReconstructionError: If the shares cannot produce a secret.
    """
    parsed = parse_record(record)
    shares = parsed.shares
    if skip_invalid:
        shares = []
        for share in parsed.shares:
            try:
                share.decode(int_range)
            except ReconstructionError as exc:
                # Error messages can quote digits; log the type only
                logger.warning("Dropping share %s (%s)", share.index, type(exc).__name__)
                continue
            shares.append(share)

    return reconstruct_secret(shares, parsed.k, int_range=int_range, strict=strict)


def load_record(path: str | Path) -> dict:
    """Read a record from a JSON file."""
    path = Path(path)
    try:
        record = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise MalformedInput(f"Failed to parse {path.name}: {exc}") from exc
    if not isinstance(record, dict):
        raise MalformedInput(f"{path.name} must contain a JSON object")
    return record
