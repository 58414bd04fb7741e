import pytest

from sample_slicer.velocity import VelocityRange, _round_half_up, velocity_ranges


def labels(layers):
    return [v.tag for v in velocity_ranges(layers)]


def test_three_layers():
    assert labels(3) == ["v0-42", "v43-84", "v85-127"]


def test_five_layers():
    assert labels(5) == ["v0-25", "v26-50", "v51-76", "v77-101", "v102-127"]


def test_single_layer_covers_everything():
    assert velocity_ranges(1) == [VelocityRange(0, 127)]


def test_power_of_two_layers_are_contiguous():
    ranges = velocity_ranges(4)
    assert [r.label for r in ranges] == ["0-31", "32-63", "64-95", "96-127"]


@pytest.mark.parametrize("layers", range(1, 129))
def test_partition_bounds(layers):
    ranges = velocity_ranges(layers)
    assert len(ranges) == layers
    assert ranges[0].low == 0
    assert ranges[-1].high == 127
    for r in ranges:
        assert 0 <= r.low <= r.high <= 127


@pytest.mark.parametrize("layers", [0, -1, 129])
def test_invalid_layer_count(layers):
    with pytest.raises(ValueError):
        velocity_ranges(layers)


def test_halves_round_away_from_zero():
    assert _round_half_up(0.5) == 1
    assert _round_half_up(2.5) == 3
    assert _round_half_up(42.4) == 42


def test_label_and_tag():
    r = VelocityRange(low=43, high=84)
    assert r.label == "43-84"
    assert r.tag == "v43-84"
