"""Named numbering conventions."""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from digit_grouping.models.grouping import GroupingSpec
from digit_grouping.utils.logging import get_logger

if TYPE_CHECKING:
    from digit_grouping.config import Settings

logger = get_logger(__name__)


class NumberingPreset(StrEnum):
    USA = "usa"
    FRANCE = "france"
    GERMANY = "germany"
    INDIA = "india"
    CHINA = "china"
    NONE = "none"


def resolve_preset(
    preset: NumberingPreset | str, separator: str | None = None
) -> GroupingSpec:
    """Return the spec for *preset*.

    *separator* replaces the default comma of the India and China presets.
    The national thousands presets fix their own separator and ignore it.
    """
    preset = NumberingPreset(preset)
    match preset:
        case NumberingPreset.USA:
            return GroupingSpec.usa()
        case NumberingPreset.FRANCE:
            return GroupingSpec.france()
        case NumberingPreset.GERMANY:
            return GroupingSpec.germany()
        case NumberingPreset.INDIA:
            return GroupingSpec.india_numbering(separator or ",")
        case NumberingPreset.CHINA:
            return GroupingSpec.chinese_numbering(separator or ",")
        case NumberingPreset.NONE:
            return GroupingSpec.no_separation()


def default_spec(settings: Settings | None = None) -> GroupingSpec:
    """Spec for the configured default preset."""
    if settings is None:
        from digit_grouping.config import Settings

        settings = Settings()
    logger.debug(
        "default_grouping_resolved",
        preset=str(settings.default_preset),
        separator=settings.default_separator,
    )
    return resolve_preset(settings.default_preset, settings.default_separator)
