"""Tests for library configuration and initialization."""

from __future__ import annotations

import pytest

from adtkit import Config, Nothing, get_config, init, option, reset


@pytest.fixture(autouse=True)
def _restore(clean_config) -> None:
    """Every test here starts and ends on the default configuration."""


class TestConfig:
    def test_default_values(self) -> None:
        config = Config()
        assert config.log_level is None
        assert config.json_output is True

    def test_config_is_frozen(self) -> None:
        config = Config()
        with pytest.raises(AttributeError):
            config.log_level = "DEBUG"  # type: ignore[misc]

    def test_config_has_no_catch_setting(self) -> None:
        """What the conversions catch is chosen per call, not globally."""
        assert not hasattr(Config(), "catch")


class TestInit:
    def test_get_config_before_init_returns_defaults(self) -> None:
        assert get_config() == Config()

    def test_init_installs_config(self) -> None:
        config = init(log_level="INFO", json_output=False)
        assert get_config() is config
        assert config.log_level == "INFO"
        assert config.json_output is False

    def test_init_rejects_catch_argument(self) -> None:
        with pytest.raises(TypeError):
            init(catch=ValueError)  # type: ignore[call-arg]

    def test_reset_restores_defaults(self) -> None:
        init(log_level="DEBUG")
        reset()
        assert get_config() == Config()

    def test_init_does_not_change_conversions(self) -> None:
        """Installing a config never alters what from_throwable catches."""
        init(log_level="DEBUG")
        assert option.from_throwable(lambda: 1 / 0) is Nothing
