class LeapcalError(Exception):
    """Base error."""

class QuoModZeroDivisionError(LeapcalError, ZeroDivisionError):
    """Raised when quo_mod() is asked to divide by zero."""

class NormalizationError(LeapcalError, ArithmeticError):
    """Raised when day-offset normalization fails to converge."""
