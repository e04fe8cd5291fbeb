import pytest

from vampire_hunters.fps import LIST_LEN_MAX, UPDATE_INTERVAL, Fps


class FakeClock:
    def __init__(self):
        self.now = 0
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, ms):
        self.sleeps.append(ms)
        self.now += ms


def make_fps():
    clock = FakeClock()
    return Fps(clock=clock, sleep=clock.sleep), clock


def test_wait_time_zero_when_empty():
    fps, _ = make_fps()
    assert fps.wait_time() == 0


def test_wait_time_never_negative():
    fps, clock = make_fps()
    fps.register()
    clock.now += 10_000
    assert fps.wait_time() == 0


def test_wait_sleeps_with_non_negative_amounts():
    fps, clock = make_fps()
    for _ in range(10):
        fps.wait()
    assert all(ms >= 0 for ms in clock.sleeps)
    assert clock.sleeps[0] == 0


def test_fps_stays_zero_before_window_is_full():
    fps, _ = make_fps()
    for _ in range(UPDATE_INTERVAL):
        fps.wait()
    assert fps.fps == 0.0


def test_paced_frames_average_sixty():
    fps, _ = make_fps()
    for _ in range(LIST_LEN_MAX):
        fps.wait()
    assert fps.fps == pytest.approx(60.0)


def test_update_average_ignores_zero_elapsed():
    fps, _ = make_fps()
    for _ in range(LIST_LEN_MAX):
        fps.register()
    fps.update_average()
    assert fps.fps == 0.0


def test_register_keeps_window_bounded():
    fps, clock = make_fps()
    for _ in range(LIST_LEN_MAX + 5):
        fps.register()
        clock.now += 1
    clock.now = 10_000
    # With the window capped, the expected wait is bounded by a full window.
    assert fps.wait_time() <= int(1000 / 60 * LIST_LEN_MAX)