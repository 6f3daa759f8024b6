"""Grouping configuration for integer separators.

A ``GroupingSpec`` says which token separates digit groups, how wide each
group is (counted outward from the least-significant digit), and what happens
once the list of widths runs out: start over from the first width, or keep
repeating the last one.

Specs are frozen values.  The ``with_*`` helpers return updated copies.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from digit_grouping.errors import InvalidGroupingSpec

MAX_GROUP_WIDTH = 1_000_000


class IntegerSeparatorType(StrEnum):
    """The built-in grouping conventions a separator can be paired with."""

    NONE = "none"
    THOUSANDS = "thousands"
    INDIA_NUMBERING = "india_numbering"
    CHINESE_NUMBERING = "chinese_numbering"

    @classmethod
    def _missing_(cls, value: object) -> IntegerSeparatorType | None:
        # Accept "Thousands", "IndiaNumbering", "india-numbering", ...
        if not isinstance(value, str):
            return None
        key = value.strip().lower().replace("-", "").replace("_", "")
        for member in cls:
            if member.value.replace("_", "") == key:
                return member
        return None


class GroupingSpec(BaseModel):
    """Separator token, group widths and the policy for exhausted widths."""

    model_config = ConfigDict(frozen=True)

    separator_chars: str = ""
    group_widths: tuple[int, ...] = ()
    restart_on_exhaustion: bool = False
    separation_disabled: bool = False

    # -- state --------------------------------------------------------------

    @property
    def is_active(self) -> bool:
        """True when applying this spec inserts separators at all."""
        return not self.separation_disabled and self.separator_chars != ""

    def check(self) -> None:
        """Raise :class:`InvalidGroupingSpec` if an active spec is unusable.

        Inactive specs (disabled, or with an empty separator) always pass.
        """
        if not self.is_active:
            return
        if not self.group_widths:
            raise InvalidGroupingSpec("group widths are empty")
        for idx, width in enumerate(self.group_widths):
            if width < 1:
                raise InvalidGroupingSpec(
                    f"group width at index {idx} is {width}; widths must be at least 1"
                )
            if width > MAX_GROUP_WIDTH:
                raise InvalidGroupingSpec(
                    f"group width at index {idx} is {width}; "
                    f"widths must not exceed {MAX_GROUP_WIDTH:,}"
                )

    def is_valid(self) -> bool:
        try:
            self.check()
        except InvalidGroupingSpec:
            return False
        return True

    # -- constructors -------------------------------------------------------

    @classmethod
    def custom(
        cls,
        separator_chars: str,
        group_widths: list[int] | tuple[int, ...],
        restart_on_exhaustion: bool = False,
    ) -> GroupingSpec:
        """Build a spec for an arbitrary national convention.

        Unlike a disabled spec, a custom convention must name its separator.
        Invalid widths are rejected, never clamped.
        """
        if not separator_chars:
            raise InvalidGroupingSpec("separator characters are empty")
        spec = cls(
            separator_chars=separator_chars,
            group_widths=tuple(group_widths),
            restart_on_exhaustion=restart_on_exhaustion,
        )
        spec.check()
        return spec

    @classmethod
    def thousands(cls, sep: str) -> GroupingSpec:
        """Groups of three: ``1,000,000``."""
        return cls.custom(sep, (3,))

    @classmethod
    def usa(cls) -> GroupingSpec:
        return cls.thousands(",")

    @classmethod
    def france(cls) -> GroupingSpec:
        return cls.thousands(" ")

    @classmethod
    def germany(cls) -> GroupingSpec:
        return cls.thousands(".")

    @classmethod
    def india_numbering(cls, sep: str = ",") -> GroupingSpec:
        """Three digits, then pairs: ``6,78,90,00,00,00,00,000``."""
        return cls.custom(sep, (3, 2), restart_on_exhaustion=False)

    @classmethod
    def chinese_numbering(cls, sep: str = ",") -> GroupingSpec:
        """Groups of four: ``6,7890,0000,0000,0000``."""
        return cls.custom(sep, (4,))

    @classmethod
    def no_separation(cls) -> GroupingSpec:
        return cls(separation_disabled=True)

    @classmethod
    def from_separator_type(
        cls, sep: str, kind: IntegerSeparatorType | str
    ) -> GroupingSpec:
        """Pair *sep* with one of the built-in grouping conventions."""
        kind = IntegerSeparatorType(kind)
        match kind:
            case IntegerSeparatorType.NONE:
                return cls.no_separation()
            case IntegerSeparatorType.THOUSANDS:
                return cls.thousands(sep)
            case IntegerSeparatorType.INDIA_NUMBERING:
                return cls.india_numbering(sep)
            case IntegerSeparatorType.CHINESE_NUMBERING:
                return cls.chinese_numbering(sep)

    # -- record updates -----------------------------------------------------

    def _replace(self, **changes) -> GroupingSpec:
        # model_copy(update=...) would skip field validation
        return type(self).model_validate({**self.model_dump(), **changes})

    def with_separation_disabled(self) -> GroupingSpec:
        return self._replace(separation_disabled=True)

    def with_separation_enabled(self) -> GroupingSpec:
        return self._replace(separation_disabled=False)

    def with_separator(self, sep: str) -> GroupingSpec:
        return self._replace(separator_chars=sep)

    def with_restart(self, restart_on_exhaustion: bool) -> GroupingSpec:
        return self._replace(restart_on_exhaustion=restart_on_exhaustion)

    # -- display ------------------------------------------------------------

    def describe(self) -> str:
        """Multi-line summary, one setting per line."""
        return (
            f"Integer Separator Char(s)  = '{self.separator_chars}'\n"
            f"Integer Separator Grouping = {list(self.group_widths)}\n"
            f"Restart Grouping Sequence  = {self.restart_on_exhaustion}\n"
            f"Integer Separation Active  = {self.is_active}\n"
        )
