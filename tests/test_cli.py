"""Tests for the command-line interface."""

from __future__ import annotations

import io
import logging

import pytest

from wayfarer.cli import repl
from wayfarer.cli.output import ConsoleOutput
from wayfarer.cli.repl import GameREPL, main, run_game
from wayfarer.engine import EngineConfig, SessionState


class TestConsoleOutput:
    """Tests for word-wrapped console output."""

    def test_short_line(self):
        stream = io.StringIO()
        ConsoleOutput(stream, width=60).println("Courtyard")
        assert stream.getvalue() == "Courtyard\n"

    def test_blank_line(self):
        stream = io.StringIO()
        ConsoleOutput(stream, width=60).println()
        assert stream.getvalue() == "\n"

    def test_wraps_below_width(self):
        stream = io.StringIO()
        text = "You are standing on a long, windy path, leading from the mountains in the far east."
        ConsoleOutput(stream, width=20).println(text)

        lines = stream.getvalue().splitlines()
        assert len(lines) > 1
        assert all(len(line) < 20 for line in lines)
        assert " ".join(lines) == text

    def test_long_word_is_not_broken(self):
        stream = io.StringIO()
        ConsoleOutput(stream, width=10).println("Supercalifragilistic")
        assert stream.getvalue() == "Supercalifragilistic\n"

    def test_hyphenated_words_stay_whole(self):
        stream = io.StringIO()
        ConsoleOutput(stream, width=12).println("the Blood-Stained Room")
        assert "Blood-Stained" in stream.getvalue().splitlines()

    def test_collapses_runs_of_spaces(self):
        stream = io.StringIO()
        ConsoleOutput(stream, width=60).println("castle.  The drawbridge")
        assert stream.getvalue() == "castle. The drawbridge\n"

    def test_rejects_tiny_width(self):
        with pytest.raises(ValueError):
            ConsoleOutput(io.StringIO(), width=1)


class TestGameREPL:
    """Tests for the REPL wiring."""

    def test_scripted_game(self):
        stream = io.StringIO()
        commands = iter(["n", "quit"])

        session = GameREPL(stream=stream).run(lambda: next(commands))

        assert session.state == SessionState.ENDED
        text = stream.getvalue()
        assert text.startswith("Courtyard\n")
        assert "Farmhouse Entrance" in text
        assert text.rstrip().endswith("Okay. Bye!")

    def test_end_of_input_ends_quietly(self):
        stream = io.StringIO()
        commands = iter(["n"])

        def read_line() -> str:
            for line in commands:
                return line
            raise EOFError

        session = GameREPL(stream=stream).run(read_line)

        assert session.current_location.id == "farmhouse"
        assert stream.getvalue().endswith("\n\n")

    def test_keyboard_interrupt_ends_quietly(self):
        def read_line() -> str:
            raise KeyboardInterrupt

        session = GameREPL(stream=io.StringIO()).run(read_line)
        assert session.state == SessionState.EXPLORING

    def test_configured_start(self):
        stream = io.StringIO()
        config = EngineConfig(start_location_id="well")

        GameREPL(config, stream=stream).run(lambda: "quit")

        assert stream.getvalue().startswith("Bottom of the Well\n")

    def test_wrap_width_comes_from_config(self):
        config = EngineConfig(wrap_width=30)
        assert GameREPL(config).output.width == 30


class TestRunGame:
    """Tests for the process-level entry points."""

    def test_io_error_exits_with_status_1(self, monkeypatch: pytest.MonkeyPatch, caplog):
        def broken_input(prompt: str = "") -> str:
            raise OSError("stdin went away")

        monkeypatch.setattr("builtins.input", broken_input)

        with caplog.at_level(logging.ERROR, logger="wayfarer.cli.repl"):
            status = run_game(EngineConfig())

        assert status == 1
        assert "There was an error." in caplog.text

    def test_decode_error_exits_with_status_1(self, monkeypatch: pytest.MonkeyPatch, caplog):
        def undecodable_input(prompt: str = "") -> str:
            raise UnicodeDecodeError("utf-8", b"\xff", 0, 1, "invalid start byte")

        monkeypatch.setattr("builtins.input", undecodable_input)

        with caplog.at_level(logging.ERROR, logger="wayfarer.cli.repl"):
            status = run_game(EngineConfig())

        assert status == 1
        assert "There was an error." in caplog.text
        assert "Cannot start game" not in caplog.text

    def test_unknown_start_exits_with_status_2(self, caplog):
        with caplog.at_level(logging.ERROR, logger="wayfarer.cli.repl"):
            status = run_game(EngineConfig(start_location_id="nowhere"))

        assert status == 2
        assert "Unknown location" in caplog.text

    def test_log_level_is_case_insensitive(self):
        args = repl.build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_main_rejects_bad_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv("WAYFARER_WRAP_WIDTH", "wide")
        with pytest.raises(SystemExit) as excinfo:
            main([])
        assert excinfo.value.code == 2

    def test_main_plays_from_stdin(self, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO("quit\n"))
        monkeypatch.setattr(repl, "configure_logging", lambda level: None)

        with pytest.raises(SystemExit) as excinfo:
            main(["--width", "40"])

        assert excinfo.value.code == 0
        assert "Okay. Bye!" in capsys.readouterr().out
