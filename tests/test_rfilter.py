import pytest

from nori.object import ClassType, ObjectFactory
from nori.proplist import PropertyList, PropertyType
from nori.rfilter import (
    BoxFilter,
    GaussianFilter,
    MitchellNetravaliFilter,
    ReconstructionFilter,
    TentFilter,
)


def _props(**floats):
    props = PropertyList()
    for name, value in floats.items():
        props.set(name, PropertyType.FLOAT, value)
    return props


@pytest.mark.parametrize(
    "name, cls",
    [
        ("gaussian", GaussianFilter),
        ("mitchell", MitchellNetravaliFilter),
        ("tent", TentFilter),
        ("box", BoxFilter),
    ],
)
def test_factory_builds_filters(name, cls):
    rfilter = ObjectFactory.create(name, PropertyList())
    assert type(rfilter) is cls
    assert rfilter.class_type is ClassType.RECONSTRUCTION_FILTER


def test_base_is_abstract():
    with pytest.raises(TypeError):
        ReconstructionFilter()


def test_box_filter():
    box = BoxFilter(PropertyList())
    assert box.radius == 0.5
    assert box.eval(0.0) == 1.0
    assert box.eval(0.4) == 1.0
    assert str(box) == "BoxFilter[]"


def test_tent_filter():
    tent = TentFilter(PropertyList())
    assert tent.radius == 1.0
    assert tent.eval(0.0) == 1.0
    assert tent.eval(0.5) == pytest.approx(0.5)
    assert tent.eval(-0.5) == tent.eval(0.5)
    assert tent.eval(1.0) == 0.0
    assert tent.eval(3.0) == 0.0
    assert str(tent) == "TentFilter[]"


def test_gaussian_defaults():
    gauss = GaussianFilter(PropertyList())
    assert gauss.radius == 2.0
    assert gauss.stddev == 0.5
    assert str(gauss) == "GaussianFilter[radius=2.000000, stddev=0.500000]"


def test_gaussian_vanishes_at_and_beyond_radius():
    gauss = GaussianFilter(_props(radius=1.5, stddev=0.7))
    assert gauss.eval(1.5) == 0.0
    assert gauss.eval(-1.5) == 0.0
    assert gauss.eval(4.0) == 0.0


def test_gaussian_symmetric_and_decreasing():
    gauss = GaussianFilter(_props(stddev=1.0))
    values = [gauss.eval(x / 10) for x in range(0, 20)]
    assert values == sorted(values, reverse=True)
    assert all(v > 0 for v in values)
    assert gauss.eval(-0.3) == gauss.eval(0.3)


def test_mitchell_defaults_and_str():
    mitchell = MitchellNetravaliFilter(PropertyList())
    assert mitchell.radius == 2.0
    assert mitchell.b == pytest.approx(1.0 / 3.0)
    assert mitchell.c == pytest.approx(1.0 / 3.0)
    assert str(mitchell) == (
        "MitchellNetravaliFilter[radius=2.000000, B=0.333333, C=0.333333]"
    )


def test_mitchell_zero_outside_radius():
    mitchell = MitchellNetravaliFilter(_props(radius=3.0))
    assert mitchell.eval(3.0) == 0.0
    assert mitchell.eval(-5.0) == 0.0


def test_mitchell_continuous_between_pieces():
    mitchell = MitchellNetravaliFilter(PropertyList())
    eps = 1e-9
    assert mitchell.eval(1.0 - eps) == pytest.approx(mitchell.eval(1.0 + eps), abs=1e-6)
    assert mitchell.eval(2.0 - eps) == pytest.approx(0.0, abs=1e-6)


@pytest.mark.parametrize("offset", [0.0, 0.1, 0.3, 0.5, 0.77])
def test_mitchell_partition_of_unity(offset):
    # With B + 2C = 1 the taps at unit spacing (radius 2) sum to one.
    mitchell = MitchellNetravaliFilter(PropertyList())
    total = sum(mitchell.eval(offset + k) for k in range(-3, 4))
    assert total == pytest.approx(1.0, abs=1e-9)


def test_mitchell_symmetric():
    mitchell = MitchellNetravaliFilter(_props(B=0.5, C=0.25))
    for x in (0.2, 0.9, 1.4):
        assert mitchell.eval(-x) == mitchell.eval(x)