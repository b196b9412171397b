# -*- coding: utf-8 -*-
"""
Game configuration for the Wordle core.

@author: rhybiq
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

BUNDLED_WORDS_FILE = "resources/words.txt"
WORD_SOURCES = ("file", "nltk")


@dataclass(frozen=True)
class GameConfiguration:
    number_of_letters: int = 5
    number_of_guesses: int = 6
    # None means the word list bundled with the package
    words_file: str = None
    word_source: str = "file"

    def __post_init__(self):
        for name in ("number_of_letters", "number_of_guesses"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ValueError(f"{name} must be a positive integer, got {value!r}")
        if self.word_source not in WORD_SOURCES:
            raise ValueError(f"Unknown word source {self.word_source!r}, expected one of {WORD_SOURCES}")

    @classmethod
    def from_env(cls):
        """
        Build a configuration from WORDLE_* environment variables (and a .env file if present).
        """
        load_dotenv()
        return cls(
            number_of_letters=_int_from_env("WORDLE_NUMBER_OF_LETTERS", 5),
            number_of_guesses=_int_from_env("WORDLE_NUMBER_OF_GUESSES", 6),
            words_file=os.getenv("WORDLE_WORDS_FILE") or None,
            word_source=os.getenv("WORDLE_WORD_SOURCE", "file").strip().lower(),
        )


DEFAULT_CONFIGURATION = GameConfiguration()


def _int_from_env(name, default):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None
