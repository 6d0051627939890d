from ledgenet.util.timer import Timer


class FakeClock:
    def __init__(self, now=1000):
        self.now = now

    def __call__(self):
        return self.now


def test_new_timer_is_stopped_at_zero():
    timer = Timer(FakeClock())
    assert not timer.is_running
    assert timer.elapsed_ms() == 0


def test_running_timer_tracks_clock():
    clock = FakeClock(1000)
    timer = Timer(clock)
    timer.start()
    clock.now = 1250
    assert timer.is_running
    assert timer.elapsed_ms() == 250


def test_seconds_agree_with_milliseconds():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 1500
    assert timer.elapsed_seconds() * 1000 == timer.elapsed_ms()


def test_stop_freezes_elapsed_time():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 40
    timer.stop()
    frozen = timer.elapsed_ms()
    clock.now = 900
    assert timer.elapsed_ms() == frozen
    assert not timer.is_running


def test_resume_continues_from_stopped_time():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 30
    timer.stop()
    clock.now = 500
    timer.start()
    clock.now = 520
    assert timer.elapsed_ms() == 50


def test_reset_while_running_restarts_from_now():
    clock = FakeClock(100)
    timer = Timer(clock)
    timer.start()
    clock.now = 300
    timer.reset()
    assert timer.elapsed_ms() == 0
    assert timer.is_running


def test_reset_while_stopped_zeroes():
    clock = FakeClock(0)
    timer = Timer(clock)
    timer.start()
    clock.now = 70
    timer.stop()
    timer.reset()
    assert timer.elapsed_ms() == 0


def test_default_clock_is_monotone_enough():
    timer = Timer()
    timer.start()
    assert timer.elapsed_ms() >= 0