import pytest

from invaders.stopwatch import TICKS_PER_SECOND, Stopwatch


def test_new_stopwatch_is_idle_and_not_done():
    sw = Stopwatch(1.0)
    assert not sw.is_running()
    assert not sw.is_done()
    assert sw.total_ticks == TICKS_PER_SECOND


def test_update_without_start_does_not_advance():
    sw = Stopwatch(1.0)
    for _ in range(TICKS_PER_SECOND * 2):
        sw.update()
    assert sw.ticks == 0
    assert not sw.is_done()


def test_runs_to_completion_after_total_ticks():
    sw = Stopwatch(0.5)
    sw.start()
    updates = 0
    while not sw.is_done():
        sw.update()
        updates += 1
        assert updates <= sw.total_ticks
    assert updates == sw.total_ticks
    assert sw.is_running()


def test_ticks_do_not_exceed_total():
    sw = Stopwatch(0.1)
    sw.start()
    for _ in range(sw.total_ticks + 20):
        sw.update()
    assert sw.ticks == sw.total_ticks


def test_reset_rewinds_but_keeps_running_state():
    sw = Stopwatch(0.1)
    sw.start()
    for _ in range(sw.total_ticks):
        sw.update()
    assert sw.is_done()
    sw.reset()
    assert not sw.is_done()
    assert sw.ticks == 0
    assert sw.is_running()


def test_stop_freezes_progress():
    sw = Stopwatch(1.0)
    sw.start()
    sw.update()
    sw.stop()
    for _ in range(5):
        sw.update()
    assert sw.ticks == 1
    assert not sw.is_running()


def test_zero_duration_is_done_immediately():
    assert Stopwatch(0).is_done()


def test_custom_tick_rate():
    sw = Stopwatch(2, tps=10)
    assert sw.total_ticks == 20


def test_negative_duration_rejected():
    with pytest.raises(ValueError):
        Stopwatch(-1)