"""
Error kinds raised by the reconstruction core.

Every error is a ValueError so callers that already guard against bad
input with ``except ValueError`` keep working.
"""


class ReconstructionError(ValueError):
    """Base class for every failure raised while recovering a secret."""


class InvalidBaseError(ReconstructionError):
    """Base is not an integer in [2, 36]."""

    def __init__(self, base):
        self.base = base
        super().__init__(f"Invalid base {base!r}: must be an integer between 2 and 36")


class InvalidDigitError(ReconstructionError):
    """A value string holds a character that is not a digit of its base."""

    def __init__(self, digit: str, base: int, message: str = None):
        self.digit = digit
        self.base = base
        super().__init__(message or f"Invalid digit '{digit}' for base {base}")


class MalformedRecordError(ReconstructionError):
    """The input record does not have the expected shape."""


class InsufficientPointsError(ReconstructionError):
    """Fewer decodable points than the threshold requires."""

    def __init__(self, available: int, required: int):
        self.available = available
        self.required = required
        super().__init__(f"Need at least {required} points, got {available}")


class DuplicateAbscissaError(ReconstructionError):
    """Two points share an x-coordinate."""

    def __init__(self, x):
        self.x = x
        super().__init__(f"Duplicate x-coordinate {x}: interpolation is undefined")


class SingularSystemError(ReconstructionError):
    """Gaussian elimination hit an exactly-zero pivot."""

    def __init__(self, column: int):
        self.column = column
        super().__init__(f"Singular Vandermonde system: zero pivot in column {column}")


class EvaluationAtNodeError(ReconstructionError):
    """The evaluation point x = 0 coincides with a sample x-coordinate."""

    def __init__(self, x):
        self.x = x
        super().__init__(f"Evaluation point coincides with node x = {x}")


class FloatOverflowError(ReconstructionError):
    """A value does not fit a float when solving with exact=False."""

    def __init__(self, detail: str = None):
        message = "Value too large for float arithmetic; use exact arithmetic"
        super().__init__(f"{message} ({detail})" if detail else message)
