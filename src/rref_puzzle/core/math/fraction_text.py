"""
Fraction Text — Parser and Formatter for Rational values

Converts between Rational and the textual forms a player types or reads:
"3", "-1/2", "0.25", "1.5/2".

Parser accepts:
- optional leading sign
- integer literal ("7", "-3")
- decimal literal ("1.25", "-.5", "3."), converted exactly (0.1 → 1/10)
- "numerator/denominator", each side an optionally signed integer or decimal,
  whitespace allowed around "/"

Formatter renders integers as integer literals and other values as
"numerator/denominator". Denominators above MAX_DISPLAY_DENOMINATOR are shown
through a bounded continued-fraction approximation. The approximation is
display-only and is never written back into matrix state.
"""

import re
from enum import Enum
from typing import Final, Optional

from rref_puzzle.core.math.rational import Rational


# =============================================================================
# CONSTANTS
# =============================================================================

# Largest denominator shown to the player
MAX_DISPLAY_DENOMINATOR: Final[int] = 100

# Iteration cap for the continued-fraction expansion
MAX_CONVERGENT_ITERATIONS: Final[int] = 100

_NUMBER: Final[str] = r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)"
_FRACTION_RE: Final[re.Pattern] = re.compile(
    rf"(?P<num>{_NUMBER})(?:\s*/\s*(?P<den>{_NUMBER}))?"
)

_MALFORMED_MESSAGE: Final[str] = "Invalid multiplier format. Use a number or a fraction (e.g., 1/2)."


# =============================================================================
# ERRORS
# =============================================================================


class ParseErrorKind(str, Enum):
    """Why a text value could not be parsed."""

    MALFORMED = "MALFORMED"
    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"


class ParseError(ValueError):
    """
    Text could not be turned into a Rational.

    User-input mistake: the message is meant to be shown to the player as is.
    """

    def __init__(self, kind: ParseErrorKind, text: object, message: str):
        super().__init__(message)
        self.kind = kind
        self.text = text


# =============================================================================
# PARSER
# =============================================================================


def _decimal_to_rational(token: str) -> Rational:
    """Exact conversion of a signed integer/decimal literal."""
    sign = -1 if token.startswith("-") else 1
    body = token.lstrip("+-")

    int_part, _, frac_part = body.partition(".")
    digits = (int_part + frac_part) or "0"

    return Rational(sign * int(digits), 10 ** len(frac_part))


def parse_rational(text: str) -> Rational:
    """
    Parse a number typed by the player.

    Args:
        text: Integer, decimal or "a/b" string; surrounding whitespace ignored

    Returns:
        Exact Rational value

    Raises:
        ParseError: kind=MALFORMED for any other shape,
            kind=DIVISION_BY_ZERO when the denominator evaluates to zero

    Examples:
        >>> parse_rational("1/2")
        Rational(1, 2)
        >>> parse_rational(" -0.75 ")
        Rational(-3, 4)
        >>> parse_rational("1.5/3")
        Rational(1, 2)
    """
    if not isinstance(text, str):
        raise ParseError(ParseErrorKind.MALFORMED, text, _MALFORMED_MESSAGE)

    match = _FRACTION_RE.fullmatch(text.strip())
    if match is None:
        raise ParseError(ParseErrorKind.MALFORMED, text, _MALFORMED_MESSAGE)

    try:
        numerator = _decimal_to_rational(match.group("num"))
        denominator = (
            _decimal_to_rational(match.group("den"))
            if match.group("den") is not None
            else None
        )
    except ValueError as e:
        # int() refuses literals above sys.get_int_max_str_digits()
        raise ParseError(ParseErrorKind.MALFORMED, text, _MALFORMED_MESSAGE) from e

    if denominator is None:
        return numerator
    if denominator.is_zero():
        raise ParseError(
            ParseErrorKind.DIVISION_BY_ZERO,
            text,
            f"Division by zero in '{text.strip()}'",
        )

    return numerator.divide(denominator)


# =============================================================================
# FORMATTER
# =============================================================================


def approximate(
    value: Rational,
    max_denominator: int = MAX_DISPLAY_DENOMINATOR,
) -> Optional[Rational]:
    """
    Bounded rational approximation via continued fractions.

    Expands |value| into a continued fraction and tracks convergents h_k/k_k.
    Returns the value itself when its denominator already fits, otherwise the
    last convergent whose denominator is <= max_denominator.

    Args:
        value: Exact value
        max_denominator: Largest denominator allowed in the result

    Returns:
        Approximation with the sign of value, or None if no convergent
        crossed the bound within MAX_CONVERGENT_ITERATIONS steps

    Raises:
        ValueError: max_denominator < 1
    """
    if max_denominator < 1:
        raise ValueError(f"max_denominator must be >= 1, got {max_denominator}")

    if value.denominator <= max_denominator:
        return value

    p, q = abs(value.numerator), value.denominator

    # Convergent recurrences: h_k = a_k*h_{k-1} + h_{k-2}, same for k_k
    h_prev, h_curr = 0, 1
    k_prev, k_curr = 1, 0

    for _ in range(MAX_CONVERGENT_ITERATIONS):
        a = p // q
        h_next = a * h_curr + h_prev
        k_next = a * k_curr + k_prev

        if k_next > max_denominator:
            best = Rational(h_curr, k_curr)
            return best.negate() if value.is_negative() else best

        h_prev, h_curr = h_curr, h_next
        k_prev, k_curr = k_curr, k_next

        p, q = q, p - a * q
        if q == 0:
            # Expansion terminated; unreachable while denominator > bound
            best = Rational(h_curr, k_curr)
            return best.negate() if value.is_negative() else best

    return None


def format_rational(value: Rational) -> str:
    """
    Display string for a matrix entry or multiplier.

    Args:
        value: Exact value

    Returns:
        "n" for integers, "n/d" for d <= 100, otherwise the bounded
        approximation rendered the same way, or a 2-decimal string

    Examples:
        >>> format_rational(Rational(4, 2))
        '2'
        >>> format_rational(Rational(-1, 3))
        '-1/3'
        >>> format_rational(Rational(314159, 100000))
        '22/7'
    """
    approx = approximate(value, MAX_DISPLAY_DENOMINATOR)
    if approx is None:
        return f"{float(value):.2f}"
    return str(approx)
