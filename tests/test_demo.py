#!/usr/bin/env python3
"""
Tests for the shellkit-demo command.
"""

from unittest.mock import patch

import pytest

from shellkit import Settings
from shellkit.cli import demo


# ============================================================================
# build_shell Tests
# ============================================================================

class TestBuildShell:
    """Tests for build_shell()."""

    def test_commands_registered(self, scripted_editor):
        shell = demo.build_shell(Settings(threaded=False), editor=scripted_editor())
        assert sorted(shell.registry.names()) == sorted(
            ["help", "exit", "kapitänsmützenabzeichen"]
        )

    def test_help_alignment(self, scripted_editor):
        """Test the long command name sets the help column."""
        shell = demo.build_shell(Settings(threaded=False), editor=scripted_editor())
        lines = shell.render_help().splitlines()

        assert len(lines) == 3
        width = len("kapitänsmützenabzeichen")
        assert all(line[width:width + 5] == "  -  " for line in lines)

    def test_session(self, scripted_editor, capsys):
        editor = scripted_editor(["help", "hello there", "exit see you"])
        shell = demo.build_shell(Settings(threaded=False), editor=editor)

        assert shell.run(demo.DEFAULT_PROMPT) == "see you"

        out = capsys.readouterr().out
        assert out.startswith(demo.GREETING)
        assert "prints this help message" in out
        assert "hello there" in out
        assert out.rstrip().endswith("see you")


# ============================================================================
# main Tests
# ============================================================================

class TestMain:
    """Tests for the argparse entry point."""

    def _run_main(self, argv, lines, scripted_editor):
        captured = {}
        real_build_shell = demo.build_shell

        def fake_build_shell(settings):
            captured["settings"] = settings
            return real_build_shell(settings, editor=scripted_editor(lines))

        with patch.object(demo, "build_shell", side_effect=fake_build_shell):
            demo.main(argv)
        return captured["settings"]

    def test_defaults(self, scripted_editor, capsys):
        settings = self._run_main([], ["exit"], scripted_editor)

        assert settings.get("threaded") is True
        assert settings.get("simple") is False
        assert settings.get("min_substring_length") == 0
        assert "only reached when the cli loop returns" in capsys.readouterr().out

    def test_options(self, scripted_editor, tmp_path):
        settings = self._run_main(
            [
                "--simple",
                "--no-threads",
                "--min-substring", "2",
                "--history-file", str(tmp_path / "hist"),
            ],
            ["kapitänsmützenabzeichen bye"],
            scripted_editor,
        )

        assert settings.simple is True
        assert settings.threaded is False
        assert settings.min_substring_length == 2
        assert settings.history_file == str(tmp_path / "hist")

    def test_negative_min_substring(self, scripted_editor):
        with pytest.raises(SystemExit):
            self._run_main(["--min-substring", "-1"], [], scripted_editor)
