import pytest

from powersnake.game import GameEngine
from powersnake.snake import Snake

FAR_FOOD = (0, 0)  # never on row 10, where the initial snake travels


@pytest.fixture
def engine():
    """Engine with a fixed seed and its food parked out of the snake's path."""
    eng = GameEngine(seed=1234)
    eng.session.foods = {FAR_FOOD}
    return eng


def curl_into_self(engine):
    """Replace the snake with a hook whose next RIGHT step lands on its own body."""
    engine.session.snake = Snake([(5, 5), (5, 4), (6, 4), (6, 5), (6, 6)])
    engine.session.direction = (1, 0)
