from powersnake.config import GHOST, GREEN, HEAD_GREEN, RED
from powersnake.powerups import Skill
from powersnake.render import cell_colors, window_size


class TestCellColors:
    """Tests for turning a snapshot's occupancy board into colored cells."""

    def test_initial_board(self, engine):
        colors = {(x, y): c for x, y, c in cell_colors(engine.snapshot())}
        assert colors == {
            (8, 10): HEAD_GREEN,
            (7, 10): GREEN,
            (6, 10): GREEN,
            (0, 0): RED,
        }

    def test_body_tinted_while_ghost_active(self, engine):
        engine.activate_skill(Skill.GHOST)
        colors = {(x, y): c for x, y, c in cell_colors(engine.snapshot())}
        assert colors[(7, 10)] == GHOST
        assert colors[(8, 10)] == HEAD_GREEN

    def test_every_food_is_drawn(self, engine):
        engine.activate_skill(Skill.MULTI_FOOD)
        reds = [(x, y) for x, y, c in cell_colors(engine.snapshot()) if c == RED]
        assert set(reds) == engine.session.foods

    def test_window_size_leaves_room_for_hud(self):
        width, height = window_size(20, cell_size=10)
        assert width == 200
        assert height > 200
