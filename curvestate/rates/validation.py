"""Shape and index checks shared by the curve-state transformations.

Every check raises :class:`CurveShapeError` before any output buffer is
touched, so a failed call never leaves a partially written result behind.
"""

from typing import Sized


class CurveShapeError(ValueError):
    """Raised when curve, accrual and output sequences have inconsistent sizes."""

    pass


def check_same_size(name: str, values: Sized, reference_name: str, reference: Sized) -> None:
    """Require ``len(values) == len(reference)``."""
    if len(values) != len(reference):
        raise CurveShapeError(
            f"len({name})={len(values)} != len({reference_name})={len(reference)}"
        )


def check_discount_size(ds: Sized, reference_name: str, reference: Sized) -> None:
    """Require one more discount ratio than there are rates."""
    if len(ds) != len(reference) + 1:
        raise CurveShapeError(
            f"len(ds)={len(ds)} != len({reference_name})+1={len(reference) + 1}"
        )


def check_first_valid_index(first_valid_index: int, number_of_rates: int) -> None:
    """Require ``0 <= first_valid_index <= number_of_rates``.

    ``first_valid_index == number_of_rates`` is accepted: the whole curve is
    already fixed and there is nothing left to compute.
    """
    if not 0 <= first_valid_index <= number_of_rates:
        raise CurveShapeError(
            f"first valid index {first_valid_index} outside [0, {number_of_rates}]"
        )


def check_spanning_forwards(spanning_forwards: int) -> None:
    """Reject negative window widths.

    A zero width is left through: it yields an empty annuity and NaN rates,
    which is a numerical degeneracy rather than a shape error.
    """
    if spanning_forwards < 0:
        raise CurveShapeError(f"negative spanning forwards: {spanning_forwards}")
