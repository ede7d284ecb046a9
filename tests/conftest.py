import pytest

from src.game import GameSession, Puzzle
from src.verifiers import Lexicon


TODAY = "2026-10-18"

ROW_WORDS = ["ABCDE", "FGHIJ", "KLMNO", "PQRST", "UVWXY"]


@pytest.fixture
def alphabet_puzzle() -> Puzzle:
    """Puzzle whose cells read A through Y in order."""
    return Puzzle(id=TODAY, letters=list("ABCDEFGHIJKLMNOPQRSTUVWXY"), seed_words=ROW_WORDS)


@pytest.fixture
def lexicon() -> Lexicon:
    words = ROW_WORDS + ["AGCIE", "BADGE", "FACED", "HIKED"]
    return Lexicon(all_words=frozenset(words), common_words=tuple(words))


@pytest.fixture
def session(lexicon, alphabet_puzzle) -> GameSession:
    game = GameSession()
    game.start(lexicon, TODAY, puzzle=alphabet_puzzle)
    return game
