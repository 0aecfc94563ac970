import io

from galaxyguard.timer import Timer


class FakeClock:
    def __init__(self, now=0.0):
        self.now = now

    def __call__(self):
        return self.now


def test_elapsed_ms_truncates():
    clock = FakeClock(10.0)
    timer = Timer(100, clock)
    clock.now = 10.2509
    assert timer.elapsed_ms() == 250


def test_not_over_before_delay():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 0.1
    assert timer.time_over() is False


def test_over_after_delay_and_restarts():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 0.2
    assert timer.time_over() is True
    assert timer.elapsed_ms() == 0
    assert timer.time_over() is False


def test_reset_changes_delay_and_restarts():
    clock = FakeClock()
    timer = Timer(100, clock)
    clock.now = 5.0
    timer.reset(2000)
    assert timer.delay_ms == 2000
    assert timer.elapsed_ms() == 0
    clock.now = 6.0
    assert timer.time_over() is False


def test_destroy_makes_timer_always_over():
    clock = FakeClock()
    timer = Timer(1000, clock)
    timer.destroy()
    assert timer.delay_ms == -1
    assert timer.time_over() is True


def test_report_writes_elapsed():
    clock = FakeClock()
    timer = Timer(0, clock)
    clock.now = 0.25
    stream = io.StringIO()
    timer.report(stream)
    assert stream.getvalue() == "Timer:  250"


def test_default_clock_elapsed_is_non_negative():
    timer = Timer(10_000)
    assert timer.elapsed_ms() >= 0
    assert timer.time_over() is False