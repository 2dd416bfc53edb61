"""
leapcal.core.quo_mod
--------------------
Floored integer division. The remainder always carries the sign of the
divisor, so negative day offsets map onto a non-negative residue plus a
whole-unit jump.
"""

from __future__ import annotations

from .errors import QuoModZeroDivisionError
from .types import QuoMod


def quo_mod(x: int, y: int) -> QuoMod:
    """
    Quotient and modulus of x by y with floor semantics.

    Guarantees x == y * quo + mod, with mod in [0, y) for positive y and
    in (y, 0] for negative y.
    """
    if y == 0:
        raise QuoModZeroDivisionError(f"quo_mod({x}, 0): division by zero")
    mod = x % y
    # quo is rebuilt from mod so that x == y * quo + mod exactly.
    return QuoMod(quo=(x - mod) // y, mod=mod)


def quo(x: int, y: int) -> int:
    return quo_mod(x, y).quo
