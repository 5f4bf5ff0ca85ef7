"""
Reconstruction Errors
Typed failures for decoding shares and interpolating secrets.

Every error is terminal for the attempt that raised it. Nothing is retried.
The caller decides whether to drop a bad share and try again with another
point set, or abort the whole request.

Core errors derive from ReconstructionError. Problems with the shape of an
external record raise MalformedInput instead, so a caller can tell
"your file is broken" apart from "your shares don't reconstruct".
"""


class SharingError(ValueError):
    """Root of every error raised by this package."""

    share_id = None

    def __init__(self, message: str, share_id=None):
        super().__init__(message)
        self.message = message
        if share_id is not None:
            self.share_id = share_id

    def for_share(self, share_id) -> "SharingError":
        """Attach the offending share id and return self for re-raising."""
        self.share_id = share_id
        return self

    def __str__(self) -> str:
        if self.share_id is None:
            return self.message
        return f"Error processing point {self.share_id}: {self.message}"


class ReconstructionError(SharingError):
    """A share or point set cannot produce a secret."""


class InvalidBase(ReconstructionError):
    def __init__(self, base, share_id=None):
        super().__init__(f"Base must be between 2 and 16, got {base}", share_id)
        self.base = base


class InvalidDigit(ReconstructionError):
    def __init__(self, char: str, base: int, share_id=None):
        super().__init__(f"Invalid digit {char!r} for base {base}", share_id)
        self.char = char
        self.base = base


class NumericOverflow(ReconstructionError):
    def __init__(self, digits: str, base: int, share_id=None):
        super().__init__(
            f"Numeric overflow decoding {len(digits)}-digit value in base {base}",
            share_id,
        )
        self.digits = digits
        self.base = base


class EmptyValue(ReconstructionError):
    def __init__(self, share_id=None):
        super().__init__("Empty value string", share_id)


class InsufficientPoints(ReconstructionError):
    def __init__(self, required: int, found: int):
        super().__init__(
            f"Not enough valid points. Required: {required}, Found: {found}"
        )
        self.required = required
        self.found = found


class DegenerateInterpolation(ReconstructionError):
    def __init__(self, x: int):
        super().__init__(f"Duplicate x-coordinate {x}: interpolation is undefined")
        self.x = x


class InexactResult(ReconstructionError):
    """The interpolated value at x=0 is not an integer."""

    def __init__(self, value):
        super().__init__(f"Interpolated secret is not an integer: {value}")
        self.value = value


class ResultOverflow(ReconstructionError):
    def __init__(self, value: int):
        super().__init__("Result overflow in Lagrange interpolation")
        self.value = value


class MalformedInput(SharingError):
    """The external record is structurally invalid."""
