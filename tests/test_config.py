"""
Tests for event configuration loading.
"""

import pytest
import yaml

from multicast_events import ErrorPolicy, EventsConfig


class TestEventsConfig:
    """Test EventsConfig defaults and loading."""

    def test_defaults(self) -> None:
        """Config should default to propagating listener errors."""
        config = EventsConfig()

        assert config.error_policy is ErrorPolicy.PROPAGATE
        assert config.warn_on_duplicate_listener is False

    def test_from_dict(self) -> None:
        """Config should load from a dictionary."""
        config = EventsConfig.from_dict(
            {"error_policy": "collect", "warn_on_duplicate_listener": True}
        )

        assert config.error_policy is ErrorPolicy.COLLECT
        assert config.warn_on_duplicate_listener is True

    def test_from_dict_partial(self) -> None:
        """Missing keys should keep their defaults."""
        config = EventsConfig.from_dict({"warn_on_duplicate_listener": True})

        assert config.error_policy is ErrorPolicy.PROPAGATE

    def test_from_dict_invalid_policy(self) -> None:
        """Unknown error policies should be rejected."""
        with pytest.raises(ValueError):
            EventsConfig.from_dict({"error_policy": "ignore"})

    @pytest.mark.parametrize("value", ["false", "true", 0, 1, None])
    def test_from_dict_non_boolean_warning_flag(self, value) -> None:
        """Only real booleans should be accepted for the duplicate warning."""
        with pytest.raises(ValueError, match="must be a boolean"):
            EventsConfig.from_dict({"warn_on_duplicate_listener": value})

    def test_from_file_quoted_boolean(self, tmp_path) -> None:
        """A quoted YAML boolean should be rejected, not read as true."""
        path = tmp_path / "config.yaml"
        path.write_text('events:\n  warn_on_duplicate_listener: "false"\n')

        with pytest.raises(ValueError):
            EventsConfig.from_file(path)

    def test_to_dict(self) -> None:
        """Config should serialize to plain values."""
        config = EventsConfig(error_policy=ErrorPolicy.COLLECT)

        assert config.to_dict() == {
            "error_policy": "collect",
            "warn_on_duplicate_listener": False,
        }


class TestConfigFile:
    """Test YAML file loading and saving."""

    def test_missing_file_gives_defaults(self, tmp_path) -> None:
        """A missing file should produce the default config."""
        config = EventsConfig.from_file(tmp_path / "missing.yaml")

        assert config == EventsConfig()

    def test_from_file_with_section(self, tmp_path) -> None:
        """Settings under an events: key should be loaded."""
        path = tmp_path / "config.yaml"
        path.write_text("events:\n  error_policy: collect\n")

        config = EventsConfig.from_file(path)

        assert config.error_policy is ErrorPolicy.COLLECT

    def test_from_file_without_section(self, tmp_path) -> None:
        """Top-level settings should also be accepted."""
        path = tmp_path / "config.yaml"
        path.write_text("warn_on_duplicate_listener: true\n")

        config = EventsConfig.from_file(path)

        assert config.warn_on_duplicate_listener is True

    def test_empty_file(self, tmp_path) -> None:
        """An empty file should produce the default config."""
        path = tmp_path / "config.yaml"
        path.write_text("")

        assert EventsConfig.from_file(path) == EventsConfig()

    def test_save_and_reload(self, tmp_path) -> None:
        """A saved config should load back unchanged."""
        path = tmp_path / ".events" / "config.yaml"
        config = EventsConfig(
            error_policy=ErrorPolicy.COLLECT,
            warn_on_duplicate_listener=True,
        )

        config.save(path)

        assert yaml.safe_load(path.read_text()) == {"events": config.to_dict()}
        assert EventsConfig.from_file(path) == config
