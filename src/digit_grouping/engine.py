"""Separator insertion engine.

Takes a pure-digit sequence and a :class:`GroupingSpec` and returns the digits
with separator tokens inserted between groups.  Groups are counted from the
least-significant digit outward, so the walk runs right to left and writes
into a pre-sized buffer from its tail.  Sign, decimal point and zero-padding
are left to the caller.
"""

from __future__ import annotations

from collections.abc import Sequence

from digit_grouping.errors import (
    BufferAccountingError,
    InvalidDigitSequence,
    InvalidGroupingSpec,
)
from digit_grouping.models.grouping import GroupingSpec
from digit_grouping.utils.logging import get_logger

logger = get_logger(__name__)


def validate_digits(digits: str | Sequence[str]) -> None:
    """Raise :class:`InvalidDigitSequence` at the first non ASCII digit."""
    for position, char in enumerate(digits):
        if not isinstance(char, str) or len(char) != 1 or not ("0" <= char <= "9"):
            raise InvalidDigitSequence(position, char)


def validate(spec: GroupingSpec) -> None:
    """Raise :class:`InvalidGroupingSpec` if *spec* cannot be applied."""
    spec.check()


def output_capacity(digit_count: int, spec: GroupingSpec) -> int:
    """Upper bound on the separated length of *digit_count* digits.

    Sized from the narrowest group so it holds whatever order the widths
    are consumed in.
    """
    min_width = min(spec.group_widths)
    sep_len = len(spec.separator_chars)
    return (-(-digit_count // min_width) + 1) * sep_len + digit_count


def apply(spec: GroupingSpec, digits: str | Sequence[str]) -> str:
    """Insert *spec*'s separator between the digit groups of *digits*.

    Digits are validated even when separation is disabled.  Empty input
    yields an empty string.
    """
    try:
        validate_digits(digits)
    except InvalidDigitSequence as exc:
        logger.debug(
            "digit_sequence_rejected",
            position=exc.position,
            char=exc.char,
        )
        raise

    pure = "".join(digits)

    if not spec.is_active:
        return pure

    try:
        validate(spec)
    except InvalidGroupingSpec as exc:
        logger.debug("grouping_spec_rejected", reason=exc.reason)
        raise

    if not pure:
        return ""

    return _insert_separators(spec, pure)


def _insert_separators(spec: GroupingSpec, pure: str) -> str:
    widths = spec.group_widths
    sep = spec.separator_chars
    last_width_idx = len(widths) - 1

    capacity = output_capacity(len(pure), spec)
    out: list[str] = [""] * capacity
    out_idx = capacity - 1

    group_count = 0
    width_idx = 0
    target = widths[0]
    separators = 0

    for i in range(len(pure) - 1, -1, -1):
        if out_idx < 0:
            raise BufferAccountingError(
                capacity, capacity + 1, "output buffer overrun while copying digits"
            )
        out[out_idx] = pure[i]
        out_idx -= 1
        group_count += 1

        if group_count == target and i > 0:
            if out_idx - len(sep) + 1 < 0:
                raise BufferAccountingError(
                    capacity,
                    capacity + len(sep),
                    "output buffer overrun while inserting separator",
                )
            # The token is written whole, ahead of the group just placed.
            for char in reversed(sep):
                out[out_idx] = char
                out_idx -= 1
            separators += 1
            group_count = 0

            if width_idx == last_width_idx:
                if spec.restart_on_exhaustion:
                    width_idx = 0
            else:
                width_idx += 1
            target = widths[width_idx]

    result = "".join(out[out_idx + 1 :])
    expected = len(pure) + separators * len(sep)
    if len(result) != expected:
        raise BufferAccountingError(expected, len(result))

    return result
