import random

import pytest

from another_wordle.configuration import GameConfiguration
from another_wordle.words import WordList

WORDS = """
erase
speed
crane
apple
grape
train
plant
beach
geese
eerie
"""


@pytest.fixture
def dictionary():
    return WordList.load(WORDS)


@pytest.fixture
def configuration():
    return GameConfiguration(number_of_letters=5, number_of_guesses=6)


@pytest.fixture
def rng():
    return random.Random(1234)
