import pytest

from binauralpan.binaural import (
    DELTA_CUTOFF,
    MAX_DIST,
    MIN_CUTOFF,
    MIN_DIST,
    BinauralPanner,
    cos_scale,
)

SIGNAL = [1.0, -0.5, 0.25, 0.75, -1.0] + [0.0] * 60 + [0.3, 0.6]


def test_cos_scale_full_weight_at_side():
    assert cos_scale(90.0, True) == pytest.approx(1.0)


@pytest.mark.parametrize("angle", [0.0, 15.0, 45.0, 90.0, 135.0, 180.0])
def test_cos_scale_is_mirror_symmetric(angle):
    assert cos_scale(angle, True) == pytest.approx(cos_scale(-angle, False))


@pytest.mark.parametrize("angle", [10.0, 45.0, 90.0, 170.0])
def test_cos_scale_zero_on_unselected_side(angle):
    assert cos_scale(-angle, True) == 0.0
    assert cos_scale(angle, False) == 0.0


@pytest.mark.parametrize("angle", [-180.0, -60.0, 0.0, 30.0, 120.0])
def test_cos_scale_stays_in_unit_range(angle):
    for side in (True, False):
        assert 0.0 <= cos_scale(angle, side) <= 1.0


def test_distance_is_clamped_to_range():
    panner = BinauralPanner()
    panner.dist = 5.0
    panner.process(0.0)
    assert panner.dist == MAX_DIST
    panner.dist = 0.0
    panner.process(0.0)
    assert panner.dist == MIN_DIST


def test_silence_stays_silent():
    panner = BinauralPanner()
    panner.angle = 40.0
    assert all(pair == (0.0, 0.0) for pair in (panner.process(0.0) for _ in range(50)))


def test_mirrored_angles_swap_channels():
    left_panner = BinauralPanner()
    left_panner.angle = -30.0
    right_panner = BinauralPanner()
    right_panner.angle = 30.0
    for sample in SIGNAL:
        l1, r1 = left_panner.process(sample)
        l2, r2 = right_panner.process(sample)
        assert l1 == pytest.approx(r2)
        assert r1 == pytest.approx(l2)


def test_farther_source_is_quieter():
    near = BinauralPanner()
    far = BinauralPanner()
    far.dist = MAX_DIST
    near_energy = sum(abs(v) for s in SIGNAL for v in near.process(s))
    far_energy = sum(abs(v) for s in SIGNAL for v in far.process(s))
    assert 0.0 < far_energy < near_energy


def test_update_sets_angle_and_cutoffs():
    panner = BinauralPanner()
    panner.update(90.0)
    assert panner.angle == 90.0
    assert panner.filter_left.cutoff == pytest.approx(MIN_CUTOFF + DELTA_CUTOFF)
    assert panner.filter_right.cutoff == pytest.approx(MIN_CUTOFF + DELTA_CUTOFF)
    panner.update(0.0)
    assert panner.filter_left.cutoff == pytest.approx(MIN_CUTOFF)


def test_centre_marker_is_on_vertical_axis():
    panner = BinauralPanner()
    x, y = panner.marker_position(200.0)
    assert x == pytest.approx(100.0)
    assert y < 100.0


@pytest.mark.parametrize("angle,dist", [(30.0, 0.6), (-45.0, 0.9), (0.0, 0.5)])
def test_pointer_round_trips_marker(angle, dist):
    placed = BinauralPanner()
    placed.angle = angle
    placed.dist = dist
    x, y = placed.marker_position(200.0)
    moved = BinauralPanner()
    moved.set_from_pointer(x, y, 200.0)
    assert moved.angle == pytest.approx(angle, abs=1e-6)
    assert moved.dist == pytest.approx(dist, abs=1e-6)


def test_pointer_below_centre_is_clipped_to_front():
    panner = BinauralPanner()
    panner.set_from_pointer(150.0, 190.0, 200.0)
    assert panner.angle == pytest.approx(90.0)


def test_pointer_needs_positive_panel():
    with pytest.raises(ValueError):
        BinauralPanner().set_from_pointer(0.0, 0.0, 0.5)