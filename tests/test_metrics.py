import pytest

from campus.constants import BuildingType, SchoolType, StatCategory
from campus.metrics import compute_metrics


def test_engineering_quad_metrics():
    metrics, schools = compute_metrics({BuildingType.ENGINEERING_QUAD: 1}, 100)
    assert metrics[StatCategory.INNOVATION] == 40
    assert metrics[StatCategory.RESEARCH] == 40
    assert metrics[StatCategory.PRESTIGE] == 20
    assert metrics[StatCategory.WELLBEING] == 100
    # 10 per building, 50 flagship bonus, 0.5 x Innovation
    assert schools[SchoolType.ENGINEERING] == pytest.approx(80)
    assert schools[SchoolType.MEDICINE] == pytest.approx(20)
    assert schools[SchoolType.BUSINESS] == pytest.approx(6)
    assert schools[SchoolType.EDUCATION] == pytest.approx(32)
    assert schools[SchoolType.LAW] == pytest.approx(4)
    assert schools[SchoolType.HUMANITIES] == 0


def test_metrics_and_schools_are_capped():
    metrics, schools = compute_metrics({BuildingType.ENGINEERING_QUAD: 5}, 50)
    assert metrics[StatCategory.INNOVATION] == 100
    assert schools[SchoolType.ENGINEERING] == 100
    for value in list(metrics.values()) + list(schools.values()):
        assert value >= 0


def test_negative_bonuses_floor_at_zero():
    metrics, _ = compute_metrics({BuildingType.VAPE_STORE: 3}, 100)
    assert metrics[StatCategory.CULTURE] == 0
    # Wellbeing mirrors the wellbeing value plus building bonuses, uncapped
    assert metrics[StatCategory.WELLBEING] == 70


def test_empty_counts():
    metrics, schools = compute_metrics({}, 100)
    assert metrics[StatCategory.WELLBEING] == 100
    assert schools[SchoolType.EDUCATION] == pytest.approx(20)
    assert all(v == 0 for k, v in metrics.items() if k is not StatCategory.WELLBEING)
