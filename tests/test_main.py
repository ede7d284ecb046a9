from unittest.mock import Mock, patch
import pytest

from src.game import GameConfig, GameSession, Puzzle, Scheduler
from src.main import load_config, run_command, main


TODAY = "2026-10-18"
ALPHABET = list("ABCDEFGHIJKLMNOPQRSTUVWXY")


@pytest.fixture
def scheduler() -> Scheduler:
    return Scheduler()


@pytest.fixture
def game(lexicon, alphabet_puzzle, scheduler) -> GameSession:
    session = GameSession(scheduler=scheduler)
    session.start(lexicon, TODAY, puzzle=alphabet_puzzle)
    return session


class TestLoadConfig:

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("word_list: words.txt\nswap_delay: 0.25\nmode: hard\n")
        config = load_config(str(path))
        assert config.word_list == "words.txt"
        assert config.swap_delay == 0.25
        assert config.mode == "hard"
        assert config.common_fraction == 0.25

    def test_empty_yaml_uses_defaults(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("")
        assert load_config(str(path)) == GameConfig()

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(str(tmp_path / "missing.yaml"))

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("common_fraction: 2\n")
        with pytest.raises(ValueError):
            load_config(str(path))


class TestRunCommand:

    def test_word_submitted_at_five_cells(self, game, scheduler):
        output = run_command(game, scheduler, "5 6 7 8 9")
        assert "✓ FGHIJ" in output
        assert game.words == ["FGHIJ"]
        assert game.selected_indices == []

    def test_rejected_word_reported(self, game, scheduler):
        output = run_command(game, scheduler, "0,1,2,3,5")
        assert any(line.startswith("✗ ABCDF") for line in output)
        assert game.selected_indices == []

    def test_partial_selection_kept(self, game, scheduler):
        run_command(game, scheduler, "0 1")
        run_command(game, scheduler, "2")
        assert game.selected_indices == [0, 1, 2]
        run_command(game, scheduler, "b")
        assert game.selected_indices == [0, 1]
        run_command(game, scheduler, "c")
        assert game.selected_indices == []

    def test_locked_cell_reported(self, game, scheduler):
        run_command(game, scheduler, "5 6 7 8 9")
        output = run_command(game, scheduler, "0")
        assert "Cell 0 can't be selected." in output

    def test_unknown_command(self, game, scheduler):
        output = run_command(game, scheduler, "jump")
        assert output[0].startswith("Unknown command")

    def test_hard_mode_exchange(self, lexicon, scheduler):
        letters = list(ALPHABET)
        letters[0], letters[1] = letters[1], letters[0]
        session = GameSession(mode="hard", scheduler=scheduler, swap_delay=0.5)
        session.start(lexicon, TODAY, puzzle=Puzzle(id=TODAY, letters=letters))
        wait = Mock()

        output = run_command(session, scheduler, "0 1", wait=wait)

        wait.assert_called_once_with(0.5)
        assert session.letters == ALPHABET
        assert "COMPLETE!" in output[-1]

    def test_mode_and_reset(self, game, scheduler):
        run_command(game, scheduler, "5 6 7 8 9")
        output = run_command(game, scheduler, "reset")
        assert output[0] == "Progress reset."
        assert game.words == []
        output = run_command(game, scheduler, "mode")
        assert output[0] == "Switched to hard mode."


class TestMain:

    def test_plays_from_stdin(self, tmp_path, capsys):
        words = tmp_path / "dictionary.txt"
        words.write_text("crane\nslate\ntrace\nplumb\nfjord\ngawky\n")
        state = tmp_path / "state.json"

        with patch("builtins.input", side_effect=["show", "quit"]):
            code = main([
                "--words", str(words),
                "--date", TODAY,
                "--state", str(state),
                "--verbose",
            ])

        assert code == 0
        out = capsys.readouterr().out
        assert f"Puzzle: {TODAY}" in out
        assert "SCORE: 0" in out

    def test_missing_word_list(self, tmp_path, capsys):
        code = main(["--words", str(tmp_path / "missing.txt")])
        assert code == 1
        assert "Error loading word list" in capsys.readouterr().err
