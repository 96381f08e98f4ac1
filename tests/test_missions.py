import pytest

from campus.constants import BuildingType
from campus.missions import MISSIONS, Mission, TargetType, is_met, next_mission


def _check(mission, money=0, population=0, wellbeing=0, counts=None):
    return is_met(
        mission,
        money=money,
        population=population,
        wellbeing=wellbeing,
        counts=counts or {},
    )


def test_catalog_order_and_ids():
    assert [m.id for m in MISSIONS] == [f"m{i}" for i in range(1, 11)]


def test_next_mission_skips_completed():
    assert next_mission(()).id == "m1"
    assert next_mission(("m1", "m2")).id == "m3"
    assert next_mission([m.id for m in MISSIONS]) is None


def test_dispensed_mission_is_pending():
    assert next_mission(()).completed is False


def test_oak_target_counts_saplings():
    m1 = MISSIONS[0]
    counts = {BuildingType.OAK_TREE: 1, BuildingType.OAK_SAPLING: 2}
    assert _check(m1, counts=counts)
    assert not _check(m1, counts={BuildingType.OAK_SEED: 5})


def test_pine_target_does_not_count_saplings():
    m10 = MISSIONS[-1]
    counts = {BuildingType.PINE_TREE: 29, BuildingType.PINE_SAPLING: 10}
    assert not _check(m10, counts=counts)


def test_scalar_predicates():
    money = next(m for m in MISSIONS if m.target_type is TargetType.MONEY)
    assert _check(money, money=2_000_000)
    assert not _check(money, money=1_999_999)
    nature = next(m for m in MISSIONS if m.target_type is TargetType.POPULATION)
    assert _check(nature, population=100)
    wellbeing = next(m for m in MISSIONS if m.target_type is TargetType.WELLBEING)
    assert _check(wellbeing, wellbeing=90)
    assert not _check(wellbeing, wellbeing=89.9)


def test_building_qualifier_required_only_for_counts():
    with pytest.raises(ValueError):
        Mission("x", "bad", TargetType.BUILDING_COUNT, 1, 0)
    with pytest.raises(ValueError):
        Mission("y", "bad", TargetType.MONEY, 1, 0, BuildingType.PATH)
