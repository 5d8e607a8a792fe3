"""Shared test fixtures."""

import pytest

from food_diary.config import Settings
from food_diary.containers import AppContainer, build_container
from food_diary.parser.vocabulary import DEFAULT_VOCABULARY, Vocabulary

SAMPLE_DIARY = """\
2024-03-01
breakfast
oatmeal 80g protein=10
lunch
chicken 150g calories=250
"""

LONG_DIARY = """\
2024-03-01
Breakfast:
  oatmeal 80g protein=10 carbs=54.5
  banana 1 pcs

Second breakfast
  greek yogurt 0.150 kg fat=2.50

2024-03-02
dinner
  soda 330 ml kcal=140
  salted nuts 30 g sodium=0.0012
2024-03-01
snack
  apple 1
"""


@pytest.fixture
def vocabulary() -> Vocabulary:
    return DEFAULT_VOCABULARY


@pytest.fixture
def settings() -> Settings:
    return Settings(environment="test", max_input_bytes=4096)


@pytest.fixture
def container(settings: Settings) -> AppContainer:
    return build_container(settings)
