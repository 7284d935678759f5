from powersnake.collision import CollisionResolver
from powersnake.powerups import PowerUpManager, Skill
from powersnake.snake import Snake

HOOK = [(5, 5), (5, 4), (6, 4), (6, 5), (6, 6)]


class TestSelfCollision:
    """Tests for ghost-aware self-collision handling."""

    def test_free_cell_is_harmless(self):
        outcome = CollisionResolver(PowerUpManager()).resolve(Snake(HOOK), (4, 5), set())
        assert not outcome.self_hit
        assert not outcome.fatal
        assert not outcome.grow

    def test_first_hit_auto_activates_ghost(self):
        """The first self-hit ever spends ghost instead of ending the game."""
        mgr = PowerUpManager()
        outcome = CollisionResolver(mgr).resolve(Snake(HOOK), (6, 5), set())
        assert outcome.self_hit
        assert outcome.ghost_saved
        assert not outcome.fatal
        assert mgr.is_active(Skill.GHOST)
        assert mgr.was_used(Skill.GHOST)

    def test_active_ghost_passes_through(self):
        mgr = PowerUpManager()
        mgr.activate(Skill.GHOST)
        outcome = CollisionResolver(mgr).resolve(Snake(HOOK), (6, 5), set())
        assert outcome.self_hit
        assert not outcome.ghost_saved
        assert not outcome.fatal

    def test_spent_ghost_means_game_over(self):
        """Once ghost has been used and expired, a self-hit is fatal."""
        mgr = PowerUpManager(duration=1)
        mgr.activate(Skill.GHOST)
        mgr.on_tick()
        outcome = CollisionResolver(mgr).resolve(Snake(HOOK), (6, 5), {(6, 5)})
        assert outcome.fatal
        assert outcome.food is None

    def test_manual_ghost_consumes_the_save(self):
        """A player who spent ghost manually gets no automatic save later."""
        mgr = PowerUpManager(duration=5)
        mgr.activate(Skill.GHOST)
        for _ in range(5):
            mgr.on_tick()
        outcome = CollisionResolver(mgr).resolve(Snake(HOOK), (5, 4), set())
        assert outcome.fatal


class TestFoodPickup:
    """Tests for food detection and points."""

    def test_single_point(self):
        outcome = CollisionResolver(PowerUpManager()).resolve(Snake(HOOK), (4, 5), {(4, 5)})
        assert outcome.food == (4, 5)
        assert outcome.grow
        assert outcome.points == 1

    def test_double_points(self):
        mgr = PowerUpManager()
        mgr.activate(Skill.DOUBLE)
        outcome = CollisionResolver(mgr).resolve(Snake(HOOK), (4, 5), {(4, 5)})
        assert outcome.points == 2

    def test_hit_among_many_foods(self):
        foods = {(1, 1), (4, 5), (9, 9)}
        outcome = CollisionResolver(PowerUpManager()).resolve(Snake(HOOK), (4, 5), foods)
        assert outcome.food == (4, 5)

    def test_miss(self):
        outcome = CollisionResolver(PowerUpManager()).resolve(Snake(HOOK), (4, 5), {(1, 1)})
        assert outcome.food is None
        assert outcome.points == 0
