"""
Operations — Elementary row operations as a tagged variant

Immutable Pydantic models discriminated by `kind`:
- SwapRows     {kind="swap", row_a, row_b}
- ScaleRow     {kind="scale", row, factor}
- AddMultiple  {kind="add_multiple", target, source, factor}

Row ranges and row distinctness depend on the matrix the operation is applied
to, so they are checked by the row operation engine (OperationError), not
here.

A malformed factor text fails model validation with error type
factor_malformed or factor_division_by_zero (ctx["kind"] holds the
ParseErrorKind value). Callers that want ParseError itself parse the text
first, as operation_from_request does.
"""

from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, Field, PlainSerializer, PlainValidator, TypeAdapter
from pydantic_core import PydanticCustomError

from rref_puzzle.core.math.fraction_text import ParseError, parse_rational
from rref_puzzle.core.math.rational import Rational


# =============================================================================
# FACTOR
# =============================================================================


def _coerce_factor(value: Any) -> Any:
    """Rational passthrough; int and fraction text converted exactly."""
    if isinstance(value, Rational):
        return value
    if isinstance(value, str):
        try:
            return parse_rational(value)
        except ParseError as e:
            # Keep the parse kind in the pydantic error (type and ctx)
            raise PydanticCustomError(
                f"factor_{e.kind.value.lower()}",
                "{message}",
                {"kind": e.kind.value, "message": str(e)},
            ) from e
    if isinstance(value, int) and not isinstance(value, bool):
        return Rational(value)
    raise ValueError(f"factor must be Rational, int or fraction text, got {type(value).__name__}")


# Exact multiplier; accepts Rational, int or fraction text, serializes as text
Factor = Annotated[
    Rational,
    PlainValidator(_coerce_factor),
    PlainSerializer(str, return_type=str),
]


# =============================================================================
# OPERATION MODELS
# =============================================================================


class SwapRows(BaseModel):
    """Exchange two rows verbatim."""

    kind: Literal["swap"] = Field("swap", description="Discriminator")
    row_a: int = Field(..., description="First row index (0-based)")
    row_b: int = Field(..., description="Second row index (0-based)")

    model_config = {"frozen": True}

    def describe(self) -> str:
        return f"R{self.row_a + 1} <-> R{self.row_b + 1}"


class ScaleRow(BaseModel):
    """Multiply every entry of a row by a non-zero factor."""

    kind: Literal["scale"] = Field("scale", description="Discriminator")
    row: int = Field(..., description="Row index (0-based)")
    factor: Factor = Field(..., description="Multiplier (zero is rejected on apply)")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def describe(self) -> str:
        return f"R{self.row + 1} -> ({self.factor})*R{self.row + 1}"


class AddMultiple(BaseModel):
    """target := target + factor * source"""

    kind: Literal["add_multiple"] = Field("add_multiple", description="Discriminator")
    target: int = Field(..., description="Row that is modified (0-based)")
    source: int = Field(..., description="Row whose multiple is added (0-based)")
    factor: Factor = Field(..., description="Multiplier of the source row")

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    def describe(self) -> str:
        return f"R{self.target + 1} -> R{self.target + 1} + ({self.factor})*R{self.source + 1}"


Operation = Annotated[
    Union[SwapRows, ScaleRow, AddMultiple],
    Field(discriminator="kind"),
]

_OPERATION_ADAPTER: TypeAdapter = TypeAdapter(Operation)


def operation_from_dict(data: dict[str, Any]) -> Union[SwapRows, ScaleRow, AddMultiple]:
    """
    Build an Operation from a plain dict, dispatching on `kind`.

    Args:
        data: e.g. {"kind": "scale", "row": 0, "factor": "1/2"}

    Returns:
        SwapRows, ScaleRow or AddMultiple

    Raises:
        pydantic.ValidationError: unknown kind, missing or mistyped fields
    """
    return _OPERATION_ADAPTER.validate_python(data)
