"""
Shamir Recover — Basic Usage Example

Reconstructs the secret of each JSON share record given on the command line
(defaults to the records in tests/fixtures). Prints the secret, or the error,
and exits non-zero if any record fails.
"""

import logging
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent))

from shamir_recover import (
    SharingError,
    MalformedInput,
    check_consistency,
    decode_shares,
    load_record,
    parse_record,
    reconstruct_record,
)

DEFAULT_RECORDS = [
    Path(__file__).parent.parent / "tests" / "fixtures" / "three_of_four.json",
    Path(__file__).parent.parent / "tests" / "fixtures" / "seven_of_ten.json",
]


def report(path: Path) -> bool:
    """Reconstruct one record and print what happened."""
    try:
        record = load_record(path)
        secret = reconstruct_record(record)

        # Cross-check every K-subset to catch a corrupted share
        parsed = parse_record(record)
        consistency = check_consistency(decode_shares(parsed.shares), parsed.k)
    except MalformedInput as e:
        print(f"  {path.name}: Malformed input: {e}", file=sys.stderr)
        return False
    except SharingError as e:
        print(f"  {path.name}: Error: {e}", file=sys.stderr)
        return False

    print(f"  {path.name}: secret = {secret}")
    if consistency.consistent:
        print(f"    all {consistency.total} subsets agree")
    else:
        print(f"    {consistency.agreeing}/{consistency.total} subsets agree on {consistency.secret}")
        print(f"    suspect shares: {list(consistency.suspects)}")
    return True


def main():
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s")

    paths = [Path(p) for p in sys.argv[1:]] or DEFAULT_RECORDS

    print("=" * 50)
    print("  Shamir Recover — Secret Reconstruction")
    print("=" * 50)

    ok = all([report(path) for path in paths])
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
