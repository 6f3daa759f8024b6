"""Library configuration via environment variables with DIGIT_GROUPING_ prefix."""

from __future__ import annotations

from pydantic_settings import BaseSettings, SettingsConfigDict

from digit_grouping.presets import NumberingPreset


class Settings(BaseSettings):
    """Digit grouping defaults.

    All settings are read from environment variables prefixed with
    ``DIGIT_GROUPING_``.  The engine itself never reads them; only
    :func:`digit_grouping.presets.default_spec` and logging setup do.
    """

    model_config = SettingsConfigDict(env_prefix="DIGIT_GROUPING_")

    # ── Logging ────────────────────────────────────────────────────────────
    log_level: str = "INFO"

    # ── Default grouping ───────────────────────────────────────────────────
    default_preset: NumberingPreset = NumberingPreset.USA
    # Only India and China presets take a separator override
    default_separator: str | None = None
