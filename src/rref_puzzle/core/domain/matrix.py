"""
Matrix — Immutable augmented matrix of Rational entries

`size` rows, each with `size + 1` entries; the last column is the augmented
(right-hand side) column. Instances are never mutated: row operations build
new matrices through `with_row` / `with_rows_swapped`.
"""

from dataclasses import dataclass
from typing import Final, Iterable, Iterator, Sequence, Union

from rref_puzzle.core.math.fraction_text import format_rational, parse_rational
from rref_puzzle.core.math.rational import Rational


# =============================================================================
# CONSTANTS
# =============================================================================

MIN_SIZE: Final[int] = 3
MAX_SIZE: Final[int] = 5

CellValue = Union[Rational, int, str]
Row = tuple[Rational, ...]


def _to_rational(value: CellValue) -> Rational:
    if isinstance(value, Rational):
        return value
    if isinstance(value, str):
        return parse_rational(value)
    return Rational(value)


def validate_size(size: int) -> None:
    """
    Check that a matrix size is supported.

    Raises:
        ValueError: size outside [MIN_SIZE, MAX_SIZE]
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"size must be int, got {type(size).__name__}")
    if not MIN_SIZE <= size <= MAX_SIZE:
        raise ValueError(f"size must be in [{MIN_SIZE}, {MAX_SIZE}], got {size}")


# =============================================================================
# MATRIX
# =============================================================================


@dataclass(frozen=True)
class Matrix:
    """
    Augmented matrix snapshot.

    Args:
        rows: Sequence of `size` rows of `size + 1` values each. Values may be
            Rational, int or fraction text; they are stored as Rational.

    Raises:
        ValueError: wrong row count / row length, or unsupported size
    """

    rows: tuple[Row, ...]

    def __post_init__(self) -> None:
        rows = tuple(tuple(_to_rational(v) for v in row) for row in self.rows)
        validate_size(len(rows))

        width = len(rows) + 1
        for i, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(
                    f"Row {i} has {len(row)} entries, expected {width} "
                    f"for a {len(rows)}x{len(rows)} augmented matrix"
                )

        object.__setattr__(self, "rows", rows)

    # -------------------------------------------------------------------------
    # Constructors
    # -------------------------------------------------------------------------

    @classmethod
    def from_values(cls, rows: Iterable[Iterable[CellValue]]) -> "Matrix":
        """Build from nested lists of ints, fraction strings or Rationals."""
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def identity(
        cls,
        size: int,
        augmented_column: Sequence[CellValue] | None = None,
    ) -> "Matrix":
        """
        size x size identity block with an arbitrary augmented column.

        Args:
            size: Matrix size
            augmented_column: Right-hand side values (zeros if omitted)
        """
        validate_size(size)
        rhs = list(augmented_column) if augmented_column is not None else [0] * size
        if len(rhs) != size:
            raise ValueError(f"augmented_column must have {size} values, got {len(rhs)}")

        return cls(
            tuple(
                tuple([1 if i == j else 0 for j in range(size)] + [rhs[i]])
                for i in range(size)
            )
        )

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def size(self) -> int:
        """Number of rows (and of coefficient columns)."""
        return len(self.rows)

    @property
    def width(self) -> int:
        """Number of columns including the augmented one."""
        return self.size + 1

    def row(self, index: int) -> Row:
        return self.rows[index]

    def cell(self, row: int, column: int) -> Rational:
        return self.rows[row][column]

    def coefficients(self, row: int) -> Row:
        """Row entries without the augmented column."""
        return self.rows[row][: self.size]

    def augmented(self, row: int) -> Rational:
        return self.rows[row][self.size]

    def has_row(self, index: int) -> bool:
        return isinstance(index, int) and not isinstance(index, bool) and 0 <= index < self.size

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __len__(self) -> int:
        return self.size

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    # -------------------------------------------------------------------------
    # Derived matrices
    # -------------------------------------------------------------------------

    def with_row(self, index: int, new_row: Sequence[Rational]) -> "Matrix":
        """New matrix with one row replaced."""
        rows = list(self.rows)
        rows[index] = tuple(new_row)
        return Matrix(tuple(rows))

    def with_rows_swapped(self, row_a: int, row_b: int) -> "Matrix":
        """New matrix with two rows exchanged."""
        rows = list(self.rows)
        rows[row_a], rows[row_b] = rows[row_b], rows[row_a]
        return Matrix(tuple(rows))

    # -------------------------------------------------------------------------
    # Export
    # -------------------------------------------------------------------------

    def to_lists(self) -> list[list[Rational]]:
        """Independent nested-list copy."""
        return [list(row) for row in self.rows]

    def formatted(self) -> list[list[str]]:
        """Display strings for every cell."""
        return [[format_rational(v) for v in row] for row in self.rows]

    def __str__(self) -> str:
        lines = []
        for row in self.formatted():
            lines.append(" ".join(row[:-1]) + " | " + row[-1])
        return "\n".join(lines)
