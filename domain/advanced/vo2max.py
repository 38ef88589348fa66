from __future__ import annotations

from dataclasses import dataclass

from domain import reference_tables as rt
from domain.dtos import VO2MaxEstimate
from domain.entities import ActivityLevel, Gender, UserProfile
from domain.errors import InvalidInputError, MissingFieldError


# (age upper bound, (excellent, good, above average, average)) in ml/kg/min
_MALE_TABLE = (
    (30, (60, 52, 45, 38)),
    (40, (56, 49, 43, 36)),
    (50, (52, 46, 40, 34)),
    (60, (48, 43, 37, 31)),
    (None, (44, 39, 34, 28)),
)
_FEMALE_TABLE = (
    (30, (56, 47, 40, 33)),
    (40, (52, 45, 38, 31)),
    (50, (48, 42, 36, 29)),
    (60, (44, 38, 33, 27)),
    (None, (40, 35, 30, 25)),
)

_BANDS = (
    ("Excellent", 95),
    ("Good", 75),
    ("Above Average", 50),
    ("Average", 30),
)
_BELOW_AVERAGE = ("Below Average", 15)

_HIGH_RECS = (
    "Maintain current fitness level with consistent training",
    "Consider performance-focused goals",
    "High-intensity interval training (HIIT) to push limits",
    "Monitor and maintain cardiovascular health",
)
_RECOMMENDATIONS = {
    "Excellent": _HIGH_RECS,
    "Good": _HIGH_RECS,
    "Above Average": (
        "Continue regular cardiovascular exercise",
        "Aim for 150-300 minutes moderate cardio per week",
        "Include some high-intensity intervals",
    ),
    "Average": (
        "Increase cardio frequency to 4-5 days per week",
        "Build aerobic base with Zone 2 training",
        "Gradual progression in intensity and duration",
    ),
    "Below Average": (
        "Start with low-intensity aerobic exercise",
        "Build base with walking, swimming, or cycling",
        "Gradually increase duration before intensity",
        "Consult healthcare provider before intense exercise",
    ),
}


@dataclass(frozen=True)
class ImprovementPotential:
    potential_6_months: float
    potential_1_year: float
    improvement_percent: int


def _male_estimate(ai: int, age: float, rhr: float) -> float:
    return 56.363 + 1.921 * ai - 0.381 * age - 0.754 * (rhr / 10) + 10.987


def _female_estimate(ai: int, age: float, rhr: float) -> float:
    return 50.513 + 1.589 * ai - 0.289 * age - 0.552 * (rhr / 10)


def classify_vo2max(vo2max: float, age: int, gender: Gender | None) -> tuple[str, int]:
    table = _FEMALE_TABLE if gender == Gender.FEMALE else _MALE_TABLE
    thresholds = next(t for upper, t in table if upper is None or age < upper)
    for (name, percentile), threshold in zip(_BANDS, thresholds):
        if vo2max >= threshold:
            return name, percentile
    return _BELOW_AVERAGE


def estimate_vo2max(profile: UserProfile, resting_hr: int) -> VO2MaxEstimate:
    """Non-exercise VO2max estimate (Jurca et al. 2005), accurate to about ±5-7 ml/kg/min."""
    if profile.age is None or profile.age <= 0:
        raise MissingFieldError("age")
    if resting_hr is None or resting_hr <= 0:
        raise InvalidInputError("Resting heart rate must be positive")

    ai = rt.VO2_ACTIVITY_INDEX[profile.activity_level]
    male = _male_estimate(ai, profile.age, resting_hr)
    female = _female_estimate(ai, profile.age, resting_hr)
    if profile.gender == Gender.MALE:
        raw = male
    elif profile.gender == Gender.FEMALE:
        raw = female
    else:
        raw = (male + female) / 2

    vo2max = round(raw, 1)
    classification, percentile = classify_vo2max(vo2max, profile.age, profile.gender)
    return VO2MaxEstimate(
        vo2max=vo2max,
        classification=classification,
        percentile=percentile,
        description=(
            f"VO2 max estimated at {vo2max} ml/kg/min using non-exercise prediction "
            "(±5-7 ml/kg/min accuracy)"
        ),
        recommendations=_RECOMMENDATIONS[classification],
    )


def estimate_improvement_potential(vo2max: float, activity: ActivityLevel) -> ImprovementPotential:
    pct = rt.VO2_IMPROVEMENT_PERCENT[activity]
    gain = vo2max * pct / 100
    return ImprovementPotential(
        potential_6_months=round(vo2max + gain * 0.6, 1),
        potential_1_year=round(vo2max + gain, 1),
        improvement_percent=pct,
    )
