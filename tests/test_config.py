import pytest

from focusbox.core.config import AppConfig
from focusbox.core.parsing import parse_duration


def test_defaults_match_first_run_values() -> None:
    config = AppConfig()

    assert config.tick_interval_ms == 200
    assert config.adjust_steps == (-300, -60, 60, 300)
    assert parse_duration(config.default_duration) == 25 * 60
    assert config.default_project == "The Big One"


def test_overrides_replace_only_given_fields() -> None:
    config = AppConfig().with_overrides(duration="90s", tick_interval_ms=500)

    assert config.default_duration == "90s"
    assert config.tick_interval_ms == 500
    assert config.default_task == "Piece of cake"


def test_invalid_values_are_rejected() -> None:
    with pytest.raises(ValueError):
        AppConfig(tick_interval_ms=0)
    with pytest.raises(ValueError):
        AppConfig(warning_ratio=0.95, critical_ratio=0.9)
