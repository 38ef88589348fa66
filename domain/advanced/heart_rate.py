from __future__ import annotations

from dataclasses import dataclass

from domain.dtos import HeartRateZone, HeartRateZones, RestingHeartRateAssessment
from domain.entities import Gender
from domain.errors import InvalidInputError, MissingFieldError


# (name, lower %, upper %, purpose) of heart-rate reserve
_ZONES = (
    ("Recovery", 50, 60, "Active recovery, warm-up"),
    ("Aerobic", 60, 70, "Steady cardio, fat burn"),
    ("Tempo", 70, 80, "Tempo runs, moderate intensity"),
    ("Threshold", 80, 90, "Intervals, hard efforts"),
    ("VO2 Max", 90, 100, "Max intervals, sprints"),
)

# upper bounds (inclusive) for Excellent / Good / Average / Below Average
_RHR_THRESHOLDS_FEMALE = (60, 65, 75, 82)
_RHR_THRESHOLDS_DEFAULT = (55, 60, 70, 78)

_RHR_CLASSES = (
    RestingHeartRateAssessment(
        "Excellent",
        "Athletic heart rate",
        "Indicates excellent cardiovascular fitness and heart health.",
    ),
    RestingHeartRateAssessment(
        "Good",
        "Above average fitness",
        "Good cardiovascular fitness. Heart is efficient.",
    ),
    RestingHeartRateAssessment(
        "Average",
        "Normal heart rate",
        "Average cardiovascular fitness. Room for improvement through exercise.",
    ),
    RestingHeartRateAssessment(
        "Below Average",
        "Higher than ideal",
        "Consider increasing cardiovascular exercise to improve heart efficiency.",
    ),
    RestingHeartRateAssessment(
        "Poor",
        "Elevated resting heart rate",
        "Consult healthcare provider. May indicate deconditioning or health issues.",
    ),
)

_FITNESS_SCORES = {
    "Excellent": 95,
    "Good": 80,
    "Average": 60,
    "Below Average": 40,
    "Poor": 20,
}


@dataclass(frozen=True)
class TargetHeartRate:
    target: int
    range_min: int
    range_max: int
    zone: str


@dataclass(frozen=True)
class RestingHeartRateFitness:
    fitness_level: str
    score: int


def default_resting_hr(gender: Gender | None) -> int:
    return 75 if gender == Gender.FEMALE else 70


def max_hr_formula(gender: Gender | None, measured: int | None = None) -> str:
    if measured is not None and measured > 0:
        return "Measured"
    return "Gulati" if gender == Gender.FEMALE else "Tanaka"


def calculate_max_hr(age: int | None, gender: Gender | None, measured: int | None = None) -> int:
    if measured is not None and measured > 0:
        return measured
    if age is None or age <= 0:
        raise MissingFieldError("age")
    if gender == Gender.FEMALE:
        return round(206 - 0.88 * age)
    return round(208 - 0.7 * age)


def _karvonen(resting: int, reserve: int, pct: float) -> int:
    return round(resting + reserve * pct / 100)


def calculate_zones(
    age: int | None,
    gender: Gender | None,
    resting: int | None = None,
    max_hr: int | None = None,
) -> HeartRateZones:
    top = calculate_max_hr(age, gender, max_hr)
    rest = resting if resting is not None and resting > 0 else default_resting_hr(gender)
    if rest >= top:
        raise InvalidInputError(f"Resting heart rate {rest} must be below max heart rate {top}")
    reserve = top - rest

    zones = tuple(
        HeartRateZone(
            name=name,
            min_bpm=_karvonen(rest, reserve, lo),
            max_bpm=top if hi == 100 else _karvonen(rest, reserve, hi),
            intensity=f"{lo}-{hi}%",
            purpose=purpose,
        )
        for name, lo, hi, purpose in _ZONES
    )
    return HeartRateZones(
        zones=zones,
        max_heart_rate=top,
        resting_heart_rate=rest,
        max_hr_formula=max_hr_formula(gender, max_hr),
    )


def classify_resting_hr(rhr: int, gender: Gender | None) -> RestingHeartRateAssessment:
    thresholds = _RHR_THRESHOLDS_FEMALE if gender == Gender.FEMALE else _RHR_THRESHOLDS_DEFAULT
    for upper, assessment in zip(thresholds, _RHR_CLASSES):
        if rhr <= upper:
            return assessment
    return _RHR_CLASSES[-1]


def zone_for_intensity(intensity_percent: float) -> str:
    for name, _lo, hi, _purpose in _ZONES[:-1]:
        if intensity_percent < hi:
            return name
    return _ZONES[-1][0]


def calculate_target_hr(
    age: int | None,
    gender: Gender | None,
    intensity_percent: float,
    resting: int | None = None,
    max_hr: int | None = None,
) -> TargetHeartRate:
    top = calculate_max_hr(age, gender, max_hr)
    rest = resting if resting is not None and resting > 0 else default_resting_hr(gender)
    reserve = top - rest
    return TargetHeartRate(
        target=_karvonen(rest, reserve, intensity_percent),
        range_min=_karvonen(rest, reserve, intensity_percent - 5),
        range_max=_karvonen(rest, reserve, intensity_percent + 5),
        zone=zone_for_intensity(intensity_percent),
    )


def estimate_fitness_from_rhr(rhr: int, gender: Gender | None) -> RestingHeartRateFitness:
    classification = classify_resting_hr(rhr, gender).classification
    return RestingHeartRateFitness(
        fitness_level=classification,
        score=_FITNESS_SCORES[classification],
    )
