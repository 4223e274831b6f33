"""
Core math modules for the RREF puzzle engine

Exact rational arithmetic and the text layer players interact with.
"""

# Rational value type
from rref_puzzle.core.math.rational import Rational, RationalLike

# Fraction text (parse / format)
from rref_puzzle.core.math.fraction_text import (
    MAX_CONVERGENT_ITERATIONS,
    MAX_DISPLAY_DENOMINATOR,
    ParseError,
    ParseErrorKind,
    approximate,
    format_rational,
    parse_rational,
)

__all__ = [
    # Rational
    "Rational",
    "RationalLike",
    # Fraction text: Constants
    "MAX_CONVERGENT_ITERATIONS",
    "MAX_DISPLAY_DENOMINATOR",
    # Fraction text: Errors
    "ParseError",
    "ParseErrorKind",
    # Fraction text: Functions
    "approximate",
    "format_rational",
    "parse_rational",
]
