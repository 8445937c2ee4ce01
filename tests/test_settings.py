import logging
from unittest.mock import patch

import pytest

from config.log import setup_logging
from config.settings import EnvSettings, StaticSettings, setting_definitions, to_bool


class TestToBool:
    @pytest.mark.parametrize("value", ["1", "true", "TRUE", " yes ", "on", True])
    def test_true_values(self, value):
        assert to_bool(value) is True

    @pytest.mark.parametrize("value", ["0", "false", "no", "off", "", False])
    def test_false_values(self, value):
        assert to_bool(value) is False

    def test_none_uses_default(self):
        assert to_bool(None) is False
        assert to_bool(None, default=True) is True

    def test_garbage_is_false(self):
        assert to_bool("maybe") is False


class TestEnvSettings:
    def test_reads_prefixed_variable(self, monkeypatch):
        monkeypatch.setenv("RUTUBE_NOCOOKIE", "1")

        assert EnvSettings().get("nocookie") == "1"
        assert EnvSettings().get_bool("nocookie") is True

    def test_absent_is_false(self, monkeypatch):
        monkeypatch.delenv("RUTUBE_NOCOOKIE", raising=False)

        assert EnvSettings().get_bool("nocookie") is False

    def test_custom_prefix(self, monkeypatch):
        monkeypatch.setenv("MEDIA_NOCOOKIE", "yes")

        assert EnvSettings(prefix="MEDIA_").get_bool("nocookie") is True


class TestStaticSettings:
    def test_values(self):
        settings = StaticSettings({"nocookie": True, "other": 0})

        assert settings.get_bool("nocookie") is True
        assert settings.get_bool("other") is False
        assert settings.get("missing") is None

    def test_empty(self):
        assert StaticSettings().get_bool("nocookie") is False


class TestSettingDefinitions:
    def test_nocookie_definition(self):
        definitions = setting_definitions()

        assert definitions == [
            {
                "name": "nocookie",
                "label": "No-cookie mode",
                "description": "Embed videos from a host that sets no cookies before playback starts.",
                "default": False,
            }
        ]

    def test_localized(self):
        assert setting_definitions("ru")[0]["label"] == "Режим без cookie"


class TestSetupLogging:
    def test_level_from_env(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "debug")

        with patch("config.log.logging.basicConfig") as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs["level"] == logging.DEBUG

    def test_default_level(self, monkeypatch):
        monkeypatch.delenv("LOG_LEVEL", raising=False)

        with patch("config.log.logging.basicConfig") as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs["level"] == logging.ERROR

    def test_unknown_level(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "chatty")

        with patch("config.log.logging.basicConfig") as basic_config:
            setup_logging()

        assert basic_config.call_args.kwargs["level"] == logging.ERROR
