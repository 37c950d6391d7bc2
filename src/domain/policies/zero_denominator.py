"""Policy for ratios whose denominator may legitimately be zero."""

from enum import Enum


class ZeroDenominatorPolicy(str, Enum):
    """What a ratio returns when its denominator is zero.

    ZERO suits dashboards (a new user sees 0%), NONE lets callers tell
    "no income yet" apart from "0% saved", RAISE surfaces it as an error.
    """

    ZERO = "zero"
    NONE = "none"
    RAISE = "raise"


__all__ = ["ZeroDenominatorPolicy"]
