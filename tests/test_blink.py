from raycube.blink import Blink


def test_no_blink_without_trigger():
    blink = Blink()
    assert [blink.step(1) for _ in range(20)] == [0] * 20
    assert not blink.active


def test_full_blink_sequence():
    blink = Blink()
    frames = [blink.step(0)] + [blink.step(1) for _ in range(6)]
    assert frames == [0, 1, 2, 3, 2, 1, 0]
    assert not blink.active
    assert blink.counter == 0


def test_blink_continues_regardless_of_rolls():
    blink = Blink()
    blink.step(200)
    assert blink.active
    frames = [blink.step(7) for _ in range(3)]
    assert frames == [1, 2, 3]


def test_trigger_during_blink_does_not_restart():
    blink = Blink()
    blink.step(0)
    blink.step(0)
    assert blink.frame == 1
    assert blink.step(0) == 2


def test_blinks_can_repeat():
    blink = Blink()
    first = [blink.step(0) for _ in range(7)]
    second = [blink.step(0) for _ in range(7)]
    assert first == second


def test_random_roll_stays_in_range():
    blink = Blink()
    frames = {blink.step() for _ in range(500)}
    assert frames <= {0, 1, 2, 3}
    assert 0 <= blink.counter < 7