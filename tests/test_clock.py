from noether.clock import Clock


def _fake_times(values):
    iterator = iter(values)
    return lambda: next(iterator)


def test_tick_before_start_is_zero_and_reads_no_time():
    calls = []

    def source():
        calls.append(1)
        return 5.0

    clock = Clock(source)
    assert clock.tick() == 0.0
    assert calls == []
    assert not clock.started


def test_tick_reports_elapsed_between_ticks():
    clock = Clock(_fake_times([1.0, 1.5, 2.25]))
    clock.start()
    assert clock.started
    assert clock.tick() == 1.5 - 1.0
    assert clock.tick() == 2.25 - 1.5


def test_real_clock_is_non_negative():
    clock = Clock()
    clock.start()
    assert clock.tick() >= 0.0