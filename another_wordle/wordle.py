# -*- coding: utf-8 -*-
"""
Guess scoring and turn tracking for the Wordle core.

@author: rhybiq
"""

import logging
from dataclasses import dataclass
from enum import Enum

from another_wordle.configuration import DEFAULT_CONFIGURATION, GameConfiguration
from another_wordle.words import WordList


class LetterVerdict(Enum):
    CORRECT_POSITION = "🟩"
    PRESENT_ELSEWHERE = "🟨"
    ABSENT = "⬛"

    @property
    def emoji(self):
        return self.value


class GuessOutcome(Enum):
    INVALID_WORD = "invalid_word"
    WRONG_LENGTH = "wrong_length"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class GameState(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class GameOverError(RuntimeError):
    pass


@dataclass(frozen=True)
class GuessResult:
    guess: str
    outcome: GuessOutcome
    verdicts: tuple = ()

    @property
    def is_correct(self):
        return self.outcome is GuessOutcome.CORRECT

    @property
    def is_scored(self):
        return self.outcome in (GuessOutcome.CORRECT, GuessOutcome.INCORRECT)

    @property
    def emoji(self):
        return "".join(verdict.emoji for verdict in self.verdicts)


def evaluate(secret, guess, dictionary):
    """
    Score `guess` against `secret`.

    Exact matches are credited first and consume their secret index. Only then
    is each remaining guess letter matched, left to right, against the first
    unconsumed occurrence in the secret, so a letter is never marked present
    more times than the secret still holds it.
    """
    secret = secret.lower()
    guess = guess.lower()

    if len(guess) != len(secret):
        return GuessResult(guess, GuessOutcome.WRONG_LENGTH)

    if not dictionary.contains(guess):
        return GuessResult(guess, GuessOutcome.INVALID_WORD)

    verdicts = [None] * len(guess)
    used = [False] * len(secret)

    # exact matches consume their secret index before any loose match
    for i in range(len(guess)):
        if guess[i] == secret[i]:
            verdicts[i] = LetterVerdict.CORRECT_POSITION
            used[i] = True

    # loose matches take the leftmost unconsumed index, else ABSENT
    for i in range(len(guess)):
        if verdicts[i] is not None:
            continue
        verdicts[i] = LetterVerdict.ABSENT
        for j in range(len(secret)):
            if guess[i] == secret[j] and not used[j]:
                verdicts[i] = LetterVerdict.PRESENT_ELSEWHERE
                used[j] = True
                break

    if all(verdict is LetterVerdict.CORRECT_POSITION for verdict in verdicts):
        outcome = GuessOutcome.CORRECT
    else:
        outcome = GuessOutcome.INCORRECT
    return GuessResult(guess, outcome, tuple(verdicts))


class GuessEvaluator:
    """Scores guesses against a dictionary and configuration fixed at construction."""

    def __init__(self, dictionary, configuration=DEFAULT_CONFIGURATION):
        self.dictionary = dictionary
        self.configuration = configuration

    def evaluate(self, secret, guess):
        if len(guess) != self.configuration.number_of_letters:
            return GuessResult(guess.lower(), GuessOutcome.WRONG_LENGTH)
        return evaluate(secret, guess, self.dictionary)


class WordleGame:
    """
    One player's game: the secret, the guesses made so far and whether the game is over.

    Rejected guesses (wrong length, unknown word) do not use up a turn.
    """

    def __init__(self, word_list, configuration=DEFAULT_CONFIGURATION, secret=None, rng=None):
        self.word_list = word_list
        self.configuration = configuration
        self.word_length = configuration.number_of_letters
        self.allowed_guesses = configuration.number_of_guesses
        self.evaluator = GuessEvaluator(word_list, configuration)
        self.rng = rng
        self._start(secret)

    def _start(self, secret=None):
        if secret is None:
            secret = self.word_list.random_element(self.rng)
            if not secret:
                raise ValueError("Word list is empty, cannot pick a secret word.")
        secret = secret.lower()
        if len(secret) != self.word_length:
            raise ValueError(f"Secret word must be {self.word_length} letters long, got {secret!r}.")

        self.secret_word = secret
        self.remaining_guesses = self.allowed_guesses
        self.history = []
        self.state = GameState.IN_PROGRESS
        logging.debug(f"Current word is: {self.secret_word}")

    @property
    def current_row(self):
        return len(self.history)

    def guess(self, word):
        if self.is_over():
            raise GameOverError(f"The game is already {self.state.value}.")

        result = self.evaluator.evaluate(self.secret_word, word)
        if not result.is_scored:
            logging.debug(f"Rejected guess {word!r}: {result.outcome.value}")
            return result

        self.remaining_guesses -= 1
        self.history.append(result)

        if result.is_correct:
            self.state = GameState.WON
        elif self.remaining_guesses == 0:
            self.state = GameState.LOST
        return result

    def is_solved(self):
        return self.state is GameState.WON

    def is_over(self):
        return self.state is not GameState.IN_PROGRESS

    def reset(self, secret=None):
        """Start a new game against a fresh secret."""
        self._start(secret)

    def format_history(self):
        rows = [f"{result.guess}: {result.emoji}" for result in self.history]
        return "```\n" + "\n".join(rows) + "\n```"

    def share_text(self):
        if self.state is GameState.WON:
            title = "You Win!"
        elif self.state is GameState.LOST:
            title = "You Lose!"
        else:
            title = f"{self.current_row}/{self.allowed_guesses}"
        rows = [result.emoji for result in self.history]
        return "\n".join([title] + rows)


def new_game(configuration=None, rng=None):
    """Load the configured word list and start a game with it."""
    configuration = configuration or GameConfiguration.from_env()
    word_list = WordList.from_configuration(configuration)
    return WordleGame(word_list, configuration, rng=rng)
