"""
Unit tests for GameClock.
"""
from minesweeper.game import GameClock


class TestGameClock:
    """Test arming, stopping and elapsed time."""

    def test_starts_at_zero(self, fake_time) -> None:
        clock = GameClock(fake_time)
        assert clock.elapsed_ms() == 0
        assert clock.is_running is True

    def test_elapsed_in_whole_milliseconds(self, fake_time) -> None:
        clock = GameClock(fake_time)
        fake_time.advance(1.2345)
        assert clock.elapsed_ms() == 1234

    def test_arm_restarts_from_now(self, fake_time) -> None:
        """Re-arming discards time already elapsed."""
        clock = GameClock(fake_time)
        fake_time.advance(10)
        clock.arm()
        fake_time.advance(0.5)
        assert clock.elapsed_ms() == 500

    def test_stop_freezes_elapsed(self, fake_time) -> None:
        clock = GameClock(fake_time)
        fake_time.advance(2)
        clock.stop()
        fake_time.advance(30)
        assert clock.elapsed_ms() == 2000
        assert clock.is_running is False

    def test_second_stop_keeps_first_mark(self, fake_time) -> None:
        clock = GameClock(fake_time)
        fake_time.advance(1)
        clock.stop()
        fake_time.advance(1)
        clock.stop()
        assert clock.elapsed_ms() == 1000

    def test_arm_after_stop_runs_again(self, fake_time) -> None:
        clock = GameClock(fake_time)
        clock.stop()
        clock.arm()
        fake_time.advance(0.25)
        assert clock.elapsed_ms() == 250
