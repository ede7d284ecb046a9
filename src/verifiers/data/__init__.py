"""Word-list handling."""

from .lexicon import (
    Lexicon,
    ALPHABET,
    COMMON_FRACTION,
    parse_word_lines,
    select_common_words,
    build_lexicon,
    load_lexicon,
    extract_raw_words,
)

__all__ = [
    "Lexicon",
    "ALPHABET",
    "COMMON_FRACTION",
    "parse_word_lines",
    "select_common_words",
    "build_lexicon",
    "load_lexicon",
    "extract_raw_words",
]
