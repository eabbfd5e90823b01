"""
Unit tests for the voice console.
"""

import pytest

from meditech_voice import cli


@pytest.fixture
def run_cli(tmp_path, monkeypatch):
    monkeypatch.setenv("PREFERENCES_PATH", str(tmp_path / "preferences.json"))
    monkeypatch.setattr(cli, "setup_logger", lambda *args, **kwargs: None)

    def run(*args):
        return cli.main(["--no-speech-output", "--no-speech-input", *args])

    return run


@pytest.mark.unit
class TestConsole:
    """Test scripted console sessions without audio devices."""

    def test_language_switch_and_translate(self, run_cli, capsys):
        assert run_cli("-c", "lang hi", "-c", "t welcome", "-c", "status") == 0

        out = capsys.readouterr().out
        assert "मेडीटेक में आपका स्वागत है" in out
        assert "disabled [hi]" in out

    def test_unsupported_language(self, run_cli, capsys):
        run_cli("-c", "lang fr")

        assert "Unsupported language: 'fr'" in capsys.readouterr().out

    def test_unsupported_startup_locale(self, run_cli):
        assert run_cli("--locale", "de", "-c", "status") == 2

    def test_voice_without_devices(self, run_cli, capsys):
        run_cli("--voice", "-c", "listen", "-c", "say hello")

        out = capsys.readouterr().out
        assert "Speech output not available" in out
        assert "Cannot listen now" in out
        assert "Nothing spoken" in out

    def test_list_languages(self, run_cli, capsys):
        run_cli("-c", "langs")

        out = capsys.readouterr().out
        for native_name in ("हिन्दी", "தமிழ்", "മലയാളം", "ਪੰਜਾਬੀ"):
            assert native_name in out

    def test_quit_stops_script(self, run_cli, capsys):
        run_cli("-c", "quit", "-c", "langs")

        assert "ਪੰਜਾਬੀ" not in capsys.readouterr().out

    def test_unknown_command(self, run_cli, capsys):
        run_cli("-c", "dance")

        assert "Unknown command: dance" in capsys.readouterr().out
