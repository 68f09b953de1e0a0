from ostepdemos.common import get_time, spin


def test_get_time_is_monotonic_enough():
    first = get_time()
    second = get_time()
    assert second >= first


def test_get_time_is_epoch_seconds():
    # Any sane clock is well past one billion seconds after the epoch.
    assert get_time() > 1_000_000_000


def test_spin_waits_at_least_requested_time():
    start = get_time()
    spin(0.05)
    assert get_time() - start >= 0.05


def test_spin_zero_returns_promptly():
    start = get_time()
    spin(0)
    assert get_time() - start < 1.0