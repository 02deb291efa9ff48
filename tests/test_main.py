"""
End-to-end tests for the command-line front end.

stdout is captured, so the game runs in its plain-text mode: one status line
per accepted guess, INVALID for rejected input, CORRECT/FAILED at the end.
"""

import io
import json

import pytest

from wordle.main import main
from wordle import report


@pytest.fixture
def play(monkeypatch, capsys):
    """Run the CLI with the given arguments and stdin, return (exit code, stdout lines, stderr)."""
    def _play(args, stdin=""):
        monkeypatch.setattr("sys.stdin", io.StringIO(stdin))
        code = main(args)
        captured = capsys.readouterr()
        return code, captured.out.splitlines(), captured.err
    return _play


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)
    return _write


class TestSingleGame:
    """Games with a fixed answer."""

    def test_win(self, play):
        code, out, _ = play(["-w", "crane"], "slate\ncrane\n")
        assert code == 0
        assert out == [
            "RRGRG GXXXGXXXXXXRXXXXXXRRXXXXXX",
            "GGGGG GXGXGXXXXXXRXGXXXGRRXXXXXX",
            "CORRECT 2",
        ]

    def test_invalid_input(self, play):
        code, out, _ = play(["-w", "crane"], "cran\nzzzzz\nCRANE\n")
        assert code == 0
        assert out[:2] == ["INVALID", "INVALID"]
        assert out[-1] == "CORRECT 1"

    def test_loss(self, play):
        guesses = "slate\ntrace\ngrace\nbrace\ncrate\nplant\n"
        code, out, _ = play(["--word", "CRANE"], guesses)
        assert code == 0
        assert len(out) == 7
        assert out[-1] == "FAILED CRANE"

    def test_difficult_mode(self, play):
        code, out, _ = play(["-w", "crane", "-D"], "trace\nslate\ngrace\ncrane\n")
        assert code == 0
        assert out[0].startswith("RGGYG ")
        assert out[1] == "INVALID"
        assert out[-1] == "CORRECT 3"

    def test_hint_does_not_use_a_round(self, play):
        code, out, _ = play(["-w", "crane"], "hint\ncrane\n")
        assert code == 0
        assert len(out[0]) == 5 and out[0].isalpha()
        assert out[-1] == "CORRECT 1"

    def test_eof_mid_game(self, play):
        code, out, _ = play(["-w", "crane"], "slate\n")
        assert code == 0
        assert len(out) == 1


class TestSessions:
    """Several games and statistics."""

    def test_answer_from_input(self, play):
        code, out, _ = play([], "zzzzz\ncrane\ncrane\n")
        assert code == 0
        assert out == ["INVALID", "GGGGG GXGXGXXXXXXXXGXXXGXXXXXXXX", "CORRECT 1"]

    def test_continue_with_stats(self, play):
        code, out, _ = play(["-w", "crane", "-t"], "slate\ncrane\nY\ncrane\nN\n")
        assert code == 0
        assert out == [
            "RRGRG GXXXGXXXXXXRXXXXXXRRXXXXXX",
            "GGGGG GXGXGXXXXXXRXGXXXGRRXXXXXX",
            "CORRECT 2",
            "1 0 2.00",
            "CRANE 1 SLATE 1",
            "GGGGG GXGXGXXXXXXXXGXXXGXXXXXXXX",
            "CORRECT 1",
            "2 0 1.50",
            "CRANE 2 SLATE 1",
        ]

    def test_random_with_custom_lists(self, play, write_file):
        final = write_file("final.txt", "crane\n")
        acceptable = write_file("acceptable.txt", "slate crane trace\n")
        code, out, _ = play(
            ["-r", "-s", "3", "-d", "1", "-f", final, "-a", acceptable],
            "trace\ncrane\nY\ncrane\n",
        )
        assert code == 0
        assert out[-1] == "CORRECT 1"
        assert out.count("CORRECT 1") == 1
        assert "CORRECT 2" in out

    def test_random_is_reproducible(self, play):
        """The same seed and day give the same answer."""
        results = []
        for _ in range(2):
            code, out, _ = play(["-r", "-s", "42", "-d", "7"], "abbey\n" * 6)
            assert code == 0
            results.append(out)
        assert results[0] == results[1]
        assert results[0][-1].startswith(("CORRECT", "FAILED"))


class TestStateFile:
    """Saving and restoring statistics."""

    def test_state_saved(self, play, tmp_path):
        path = tmp_path / "state.json"
        code, _, _ = play(["-w", "crane", "-S", str(path)], "slate\ncrane\n")
        assert code == 0
        assert json.loads(path.read_text()) == {
            "total_rounds": 1,
            "games": [{"answer": "CRANE", "guesses": ["SLATE", "CRANE"]}],
        }

    def test_state_restored_into_stats(self, play, write_file):
        path = write_file("state.json", json.dumps({
            "total_rounds": 1,
            "games": [{"answer": "SPEED", "guesses": ["ERASE"]}],
        }))
        code, out, _ = play(["-w", "crane", "-S", path, "-t"], "crane\n")
        assert code == 0
        assert out[-2:] == ["1 1 1.00", "CRANE 1 ERASE 1"]

    def test_broken_state(self, play, write_file):
        path = write_file("state.json", "{oops")
        code, out, err = play(["-w", "crane", "-S", path], "crane\n")
        assert code == 1
        assert out == []
        assert "broken" in err

    def test_state_is_a_directory(self, play, tmp_path):
        code, out, err = play(["-w", "crane", "-S", str(tmp_path)], "crane\n")
        assert code == 1
        assert out == []
        assert err.startswith("Error:")

    def test_state_cannot_be_written(self, play, write_file, tmp_path):
        """A finished game whose state cannot be saved ends the session with an error."""
        write_file("blocker", "")
        path = tmp_path / "blocker" / "state.json"
        code, out, err = play(["-w", "crane", "-S", str(path)], "crane\n")
        assert code == 1
        assert out == ["GGGGG GXGXGXXXXXXXXGXXXGXXXXXXXX"]
        assert err.startswith("Error: Failed to save stats")


class TestConfiguration:
    """Option validation and config files."""

    @pytest.mark.parametrize("args", [
        ["-w", "crane", "-r"],
        ["-s", "5"],
        ["-d", "2"],
        ["-r", "-d", "100000"],
        ["-w", "zzzzz"],
        ["-r", "-d", "0"],
    ])
    def test_invalid_arguments(self, play, args):
        code, out, err = play(args, "crane\n")
        assert code == 1
        assert out == []
        assert err.startswith("Error:")

    def test_final_not_subset(self, play, write_file):
        final = write_file("final.txt", "crane zzzzz")
        acceptable = write_file("acceptable.txt", "crane slate")
        code, _, err = play(["-f", final, "-a", acceptable], "crane\n")
        assert code == 1
        assert "subset" in err

    def test_invalid_word_list(self, play, write_file):
        acceptable = write_file("acceptable.txt", "crane slates")
        code, _, err = play(["-a", acceptable], "crane\n")
        assert code == 1
        assert "5 latin letters" in err

    def test_config_file(self, play, write_file):
        config = write_file("config.yaml", "word: crane\nstats: true\n")
        code, out, _ = play(["-c", config], "crane\n")
        assert code == 0
        assert out[-2:] == ["1 0 1.00", "CRANE 1"]

    def test_command_line_overrides_config(self, play, write_file):
        config = write_file("config.json", '{"word": "crane", "stats": true}')
        code, out, _ = play(["-c", config, "-w", "cigar"], "crane\ncigar\n")
        assert code == 0
        assert out[-3] == "CORRECT 2"

    def test_missing_config_file(self, play, tmp_path):
        code, _, err = play(["-c", str(tmp_path / "missing.yaml")], "")
        assert code == 1
        assert "Config file not found" in err


class TestReport:
    """The standalone statistics report."""

    def test_plain_report(self, write_file, capsys):
        path = write_file("state.json", json.dumps({
            "total_rounds": 2,
            "games": [
                {"answer": "CRANE", "guesses": ["SLATE", "CRANE"]},
                {"answer": "SPEED", "guesses": ["SLATE"]},
            ],
        }))
        assert report.main([path, "--plain"]) == 0
        assert capsys.readouterr().out.splitlines() == ["1 1 2.00", "SLATE 2 CRANE 1"]

    def test_missing_file(self, tmp_path, capsys):
        assert report.main([str(tmp_path / "state.json")]) == 1
        assert "not found" in capsys.readouterr().err
