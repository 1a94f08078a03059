# ==============================================
# Tests for the command line entry point
# ==============================================

import json
import logging
import textwrap

import pytest

from propbind.cli import main
from propbind.config import configure_logging, get_config


@pytest.fixture
def settings_module(tmp_path, monkeypatch):
    """A throwaway importable module declaring a bindable class."""
    source = textwrap.dedent(
        """
        from typing import Annotated, Optional

        from propbind import Int16, Property


        class ServerSettings:
            host: Annotated[Optional[str], Property(default="localhost")]
            port: Annotated[Optional[Int16], Property()]
            tags: Annotated[Optional[list[str]], Property(default="")]
        """
    )
    (tmp_path / "cli_settings.py").write_text(source, encoding="utf-8")
    monkeypatch.syspath_prepend(str(tmp_path))
    return "cli_settings:ServerSettings"


class TestDescribe:

    def test_prints_registry(self, settings_module, capsys):
        assert main(["describe", settings_module]) == 0

        summary = json.loads(capsys.readouterr().out)
        assert list(summary) == ["host", "port", "tags"]
        assert summary["port"]["type"] == "int16"
        assert summary["port"]["required"] is True

    def test_bad_target(self, capsys):
        with pytest.raises(SystemExit):
            main(["describe", "no_colon_here"])


class TestCheck:

    def test_applies_file(self, settings_module, tmp_path, capsys):
        path = tmp_path / "server.properties"
        path.write_text("# server\nport = 8080\ntags = a,b\n", encoding="utf-8")

        assert main(["check", settings_module, str(path)]) == 0
        assert capsys.readouterr().out == "host=localhost\nport=8080\ntags=a,b\n"

    def test_reports_errors(self, settings_module, tmp_path, capsys):
        path = tmp_path / "server.properties"
        path.write_text("port = 99999\n", encoding="utf-8")

        assert main(["check", settings_module, str(path)]) == 1
        assert "ParseError" in capsys.readouterr().err


class TestVerbose:

    def test_verbose_leaves_shared_config_alone(self, settings_module, capsys):
        shared = get_config()
        level = shared.log_level

        assert main(["-v", "describe", settings_module]) == 0
        assert get_config() is shared
        assert shared.log_level == level
        assert logging.getLogger("propbind").level == logging.DEBUG

        configure_logging(shared)
