from __future__ import annotations

from typing import Dict, Mapping, Tuple

from .blueprints import blueprint_for
from .constants import (
    METRIC_CAP,
    SCHOOL_POINTS_PER_BUILDING,
    BuildingType,
    SchoolType,
    StatCategory,
)

# Flagship buildings add a flat bonus to their own school on top of the
# per-building points.
FLAGSHIP_SCHOOL_BONUSES: Dict[BuildingType, Tuple[SchoolType, int]] = {
    BuildingType.ENGINEERING_QUAD: (SchoolType.ENGINEERING, 50),
}

# School -> weighted metric boosts.  ``StatCategory.WELLBEING`` reads the
# final wellbeing value.
SCHOOL_METRIC_WEIGHTS: Dict[SchoolType, Tuple[Tuple[StatCategory, float], ...]] = {
    SchoolType.ENGINEERING: ((StatCategory.INNOVATION, 0.5),),
    SchoolType.MEDICINE: ((StatCategory.RESEARCH, 0.5),),
    SchoolType.BUSINESS: ((StatCategory.PRESTIGE, 0.3),),
    SchoolType.HUMANITIES: ((StatCategory.CULTURE, 0.5),),
    SchoolType.SUSTAINABILITY: ((StatCategory.NATURE, 0.5),),
    SchoolType.EDUCATION: ((StatCategory.RESEARCH, 0.3), (StatCategory.WELLBEING, 0.2)),
    SchoolType.LAW: ((StatCategory.PRESTIGE, 0.2), (StatCategory.CULTURE, 0.2)),
}


def _cap(value: float) -> float:
    return max(0, min(METRIC_CAP, value))


def compute_metrics(
    counts: Mapping[BuildingType, int], wellbeing: float
) -> Tuple[Dict[StatCategory, float], Dict[SchoolType, float]]:
    """Return the reputation metrics and school scores for ``counts``."""
    metrics: Dict[StatCategory, float] = {cat: 0 for cat in StatCategory}
    metrics[StatCategory.WELLBEING] = wellbeing
    schools: Dict[SchoolType, float] = {school: 0 for school in SchoolType}

    for building, count in counts.items():
        if building is BuildingType.NONE:
            continue
        bp = blueprint_for(building)
        for stat, bonus in bp.stat_bonuses.items():
            metrics[stat] += bonus * count
        if bp.school is not None:
            schools[bp.school] += SCHOOL_POINTS_PER_BUILDING * count
        flagship = FLAGSHIP_SCHOOL_BONUSES.get(building)
        if flagship is not None and flagship[0] is bp.school:
            schools[flagship[0]] += flagship[1]

    for school, weights in SCHOOL_METRIC_WEIGHTS.items():
        boost = 0.0
        for stat, weight in weights:
            source = wellbeing if stat is StatCategory.WELLBEING else metrics[stat]
            boost += source * weight
        schools[school] = _cap(schools[school] + boost)

    # Wellbeing is already bounded by the wellbeing engine
    for stat in metrics:
        if stat is not StatCategory.WELLBEING:
            metrics[stat] = _cap(metrics[stat])

    return metrics, schools
