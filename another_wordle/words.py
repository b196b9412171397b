# -*- coding: utf-8 -*-
"""
Word list loading and lookup.

@author: rhybiq
"""

import logging
import random
from importlib import resources

import nltk
from nltk.corpus import words as nltk_words

from another_wordle.configuration import BUNDLED_WORDS_FILE, DEFAULT_CONFIGURATION


def is_word(word, length):
    return len(word) == length and word.isalpha() and word.isascii()


class WordList:
    """
    Immutable set of lowercase words of a single length.

    Loaders never raise on a bad source: they log and hand back an empty list,
    and it is up to the caller to decide whether an empty list is fatal.
    """

    def __init__(self, words=(), length=DEFAULT_CONFIGURATION.number_of_letters):
        self.length = length
        self._words = frozenset(word.lower() for word in words if is_word(word, length))
        # frozenset order is arbitrary, keep a sorted copy so a seeded rng is reproducible
        self._ordered = tuple(sorted(self._words))

    @classmethod
    def load(cls, text, length=DEFAULT_CONFIGURATION.number_of_letters):
        if not isinstance(text, str):
            logging.error(f"Cannot load word list from {type(text).__name__}, using an empty list")
            return cls(length=length)

        entries = {line.strip() for line in text.splitlines()}
        entries.discard("")
        dropped = [entry for entry in entries if not is_word(entry, length)]
        if dropped:
            logging.debug(f"Dropped {len(dropped)} entries that are not {length}-letter words")
        return cls(entries, length=length)

    @classmethod
    def load_file(cls, path, length=DEFAULT_CONFIGURATION.number_of_letters):
        try:
            with open(path, "r", encoding="utf-8") as file:
                text = file.read()
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Could not read word list {path}: {e}")
            return cls(length=length)

        word_list = cls.load(text, length=length)
        logging.info(f"Loaded {len(word_list)} {length}-letter words from {path}")
        return word_list

    @classmethod
    def load_bundled(cls, length=DEFAULT_CONFIGURATION.number_of_letters):
        """Load the word list shipped inside the package."""
        try:
            text = resources.files("another_wordle").joinpath(BUNDLED_WORDS_FILE).read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logging.error(f"Could not read bundled word list: {e}")
            return cls(length=length)

        word_list = cls.load(text, length=length)
        logging.info(f"Loaded {len(word_list)} {length}-letter words from the bundled list")
        return word_list

    @classmethod
    def load_nltk(cls, length=DEFAULT_CONFIGURATION.number_of_letters):
        """
        Build the list from the nltk `words` corpus, downloading it if needed.
        """
        try:
            try:
                corpus = nltk_words.words()
            except LookupError:
                nltk.download("words", quiet=True)
                corpus = nltk_words.words()
        except (LookupError, OSError) as e:
            logging.error(f"nltk words corpus unavailable: {e}")
            return cls(length=length)

        word_list = cls(corpus, length=length)
        logging.info(f"Loaded {len(word_list)} {length}-letter words from the nltk corpus")
        return word_list

    @classmethod
    def from_configuration(cls, configuration=DEFAULT_CONFIGURATION):
        if configuration.word_source == "nltk":
            return cls.load_nltk(length=configuration.number_of_letters)
        if configuration.words_file is None:
            return cls.load_bundled(length=configuration.number_of_letters)
        return cls.load_file(configuration.words_file, length=configuration.number_of_letters)

    def contains(self, word):
        if not isinstance(word, str):
            return False
        return word.lower() in self._words

    def random_element(self, rng=None):
        """Uniformly random member, or "" when the list is empty."""
        if not self._words:
            return ""
        return (rng or random).choice(self._ordered)

    @property
    def is_empty(self):
        return not self._words

    def __contains__(self, word):
        return self.contains(word)

    def __len__(self):
        return len(self._words)

    def __iter__(self):
        return iter(self._ordered)

    def __repr__(self):
        return f"<WordList length={self.length} size={len(self._words)}>"
