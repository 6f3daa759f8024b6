"""Test structlog configuration over the stdlib logging backend."""
import json
import logging
import pytest
from digit_grouping.config import Settings
from digit_grouping.engine import apply
from digit_grouping.errors import InvalidDigitSequence
from digit_grouping.models.grouping import GroupingSpec
from digit_grouping.presets import default_spec
from digit_grouping.utils.logging import get_logger, setup_logging, setup_logging_from_settings


def _events(out):
    return [json.loads(line) for line in out.strip().splitlines() if line]


@pytest.mark.usefixtures("reset_logging")
class TestSetupLogging:
    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("test").info("hello", answer=42)
        event = _events(capsys.readouterr().out)[-1]
        assert event["event"] == "hello"
        assert event["answer"] == 42
        assert event["level"] == "info"
        assert event["logger"] == "test"
        assert "timestamp" in event

    def test_root_level_set(self):
        setup_logging("warning")
        assert logging.getLogger().level == logging.WARNING

    def test_successful_apply_logs_nothing(self, capsys):
        setup_logging("DEBUG")
        apply(GroupingSpec.usa(), "1234567")
        assert capsys.readouterr().out == ""

    def test_rejection_debug_event(self, capsys):
        setup_logging("DEBUG")
        with pytest.raises(InvalidDigitSequence):
            apply(GroupingSpec.usa(), "12a")
        events = _events(capsys.readouterr().out)
        assert events[0]["event"] == "digit_sequence_rejected"
        assert events[0]["position"] == 2
        assert events[0]["logger"] == "digit_grouping.engine"

    def test_debug_filtered_at_info(self, capsys, test_settings):
        setup_logging("INFO")
        default_spec(test_settings)
        with pytest.raises(InvalidDigitSequence):
            apply(GroupingSpec.usa(), "x")
        assert capsys.readouterr().out == ""

    def test_from_settings(self, capsys, clean_env):
        setup_logging_from_settings(Settings(log_level="WARNING"))
        get_logger("test").info("quiet")
        get_logger("test").warning("loud")
        out = capsys.readouterr().out
        assert "quiet" not in out
        assert "loud" in out
