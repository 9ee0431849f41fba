"""Tests for the command-line entry point."""

import json

import pytest

from translation_relay import config
from translation_relay.main import main


@pytest.fixture
def echo_config(monkeypatch):
    monkeypatch.setattr(config, "TRANSLATION_PROVIDER", "echo")
    monkeypatch.setattr(config, "SOURCE_LANG", "fr")
    monkeypatch.setattr(config, "TARGET_LANG", "en")


class TestMain:
    def test_prints_result(self, echo_config, capsys):
        main(["Bonjour"])
        body = json.loads(capsys.readouterr().out)
        assert body["code"] == 200
        assert body["data"] == "Bonjour"
        assert body["source_lang"] == "fr"
        assert body["target_lang"] == "en"
        assert body["method"] == "Echo"

    def test_no_texts_exits_with_usage(self, echo_config, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 2
        assert "usage" in capsys.readouterr().err

    def test_failure_exits_non_zero(self, monkeypatch, capsys):
        monkeypatch.setattr(config, "TRANSLATION_PROVIDER", "google")
        monkeypatch.setattr(config, "GOOGLE_API_KEY", "")
        monkeypatch.setattr(config, "PROXY_URL", "")

        with pytest.raises(SystemExit) as exc_info:
            main(["Hello"])

        assert exc_info.value.code == 1
        body = json.loads(capsys.readouterr().out)
        assert body["code"] == 400
        assert body["message"] == "API key is required"
