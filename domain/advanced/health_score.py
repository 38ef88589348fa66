"""Composite 0-100 health score.

Five components: BMI (20), activity (20), hydration (15), nutrition (25) and
cardio (20). Hydration and nutrition are scored only when a target is known;
without one they are left out of the total rather than guessed.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from domain import reference_tables as rt
from domain.dtos import HealthRating, HealthScore, ScoreComponent
from domain.entities import Gender, UserProfile


BMI_CATEGORY = "BMI/Body Composition"
ACTIVITY_CATEGORY = "Physical Activity"
HYDRATION_CATEGORY = "Hydration"
NUTRITION_CATEGORY = "Nutrition Quality"
CARDIO_CATEGORY = "Cardiovascular Fitness"

MAX_RECOMMENDATIONS = 5

_COMPONENT_RECOMMENDATIONS = {
    BMI_CATEGORY: (
        "Improve body composition through balanced nutrition and exercise",
        "Consider consulting a healthcare provider about healthy weight goals",
    ),
    ACTIVITY_CATEGORY: (
        "Increase physical activity to at least 150 minutes moderate exercise per week",
        "Start with small, achievable increases in daily movement",
    ),
    HYDRATION_CATEGORY: (
        "Increase water intake to meet daily hydration goals",
        "Set reminders to drink water throughout the day",
    ),
    NUTRITION_CATEGORY: (
        "Prioritize protein intake to meet daily targets",
        "Focus on whole foods and balanced macronutrient distribution",
    ),
    CARDIO_CATEGORY: (
        "Build aerobic capacity with regular cardio exercise",
        "Gradually increase cardio intensity and duration",
    ),
}

_ALL_GOOD = (
    "Excellent health! Continue current habits",
    "Focus on consistency and gradual progression",
    "Consider setting performance-based goals",
)

# (age upper bound, (excellent, good, average))
_CARDIO_MALE = ((30, (60, 52, 45)), (50, (52, 46, 40)), (None, (44, 39, 34)))
_CARDIO_OTHER = ((30, (56, 47, 40)), (50, (48, 42, 36)), (None, (40, 35, 30)))

# (min score, rating, grade)
_RATINGS: tuple[tuple[int, HealthRating, str], ...] = (
    (90, "excellent", "A"),
    (80, "very_good", "B"),
    (70, "good", "C"),
    (60, "fair", "D"),
    (0, "poor", "F"),
)


@dataclass(frozen=True)
class HealthScoreInputs:
    bmi: float | None = None
    water_intake_ml: float | None = None
    water_target_ml: float | None = None
    protein_g: float | None = None
    protein_target_g: float | None = None
    vo2max: float | None = None


@dataclass(frozen=True)
class ScoreTrend:
    trend: Literal["improving", "stable", "declining"]
    change: int
    message: str


def score_bmi(bmi: float | None) -> int:
    if bmi is None or bmi <= 0:
        return 10
    if 18.5 <= bmi < 25:
        return 20
    if 25 <= bmi < 27 or 17 <= bmi < 18.5:
        return 15
    if 27 <= bmi < 30 or 15 <= bmi < 17:
        return 10
    if 30 <= bmi <= 35:
        return 5
    return 0


def score_hydration(intake_ml: float, target_ml: float) -> int:
    pct = intake_ml / target_ml * 100
    if pct >= 100:
        return 15
    if pct >= 80:
        return 12
    if pct >= 60:
        return 9
    if pct >= 40:
        return 6
    return 3


def score_nutrition(protein_g: float, target_g: float) -> int:
    pct = protein_g / target_g * 100
    if 90 <= pct <= 120:
        return 25
    if 80 <= pct < 90 or 120 < pct <= 130:
        return 20
    if 70 <= pct < 80 or 130 < pct <= 150:
        return 15
    if 50 <= pct < 70 or 150 < pct <= 200:
        return 10
    return 5


def score_cardio(vo2max: float | None, age: int | None, gender: Gender | None) -> int:
    if vo2max is None or vo2max <= 0:
        return 10
    table = _CARDIO_MALE if gender == Gender.MALE else _CARDIO_OTHER
    years = age or 0
    excellent, good, average = next(t for upper, t in table if upper is None or years < upper)
    if vo2max >= excellent:
        return 20
    if vo2max >= good:
        return 16
    if vo2max >= average:
        return 12
    if vo2max >= average * 0.8:
        return 8
    return 4


def _rating(score: int) -> tuple[HealthRating, str]:
    for floor, rating, grade in _RATINGS:
        if score >= floor:
            return rating, grade
    return "poor", "F"


def _recommendations(components: tuple[ScoreComponent, ...]) -> tuple[str, ...]:
    recs: list[str] = []
    for c in components:
        if c.score / c.max_score * 100 < 70:
            recs.extend(_COMPONENT_RECOMMENDATIONS[c.category])
    if not recs:
        return _ALL_GOOD
    return tuple(recs[:MAX_RECOMMENDATIONS])


def calculate_health_score(profile: UserProfile, inputs: HealthScoreInputs) -> HealthScore:
    components = [
        ScoreComponent(BMI_CATEGORY, score_bmi(inputs.bmi), 20),
        ScoreComponent(
            ACTIVITY_CATEGORY, rt.HEALTH_SCORE_ACTIVITY_POINTS[profile.activity_level], 20
        ),
    ]

    if inputs.water_target_ml is not None and inputs.water_target_ml > 0:
        components.append(
            ScoreComponent(
                HYDRATION_CATEGORY,
                score_hydration(inputs.water_intake_ml or 0, inputs.water_target_ml),
                15,
            )
        )

    if inputs.protein_target_g is not None and inputs.protein_target_g > 0:
        components.append(
            ScoreComponent(
                NUTRITION_CATEGORY,
                score_nutrition(inputs.protein_g or 0, inputs.protein_target_g),
                25,
            )
        )

    components.append(
        ScoreComponent(CARDIO_CATEGORY, score_cardio(inputs.vo2max, profile.age, profile.gender), 20)
    )

    total = max(0, min(100, sum(c.score for c in components)))
    rating, grade = _rating(total)
    frozen = tuple(components)
    return HealthScore(
        total_score=total,
        rating=rating,
        grade=grade,
        components=frozen,
        recommendations=_recommendations(frozen),
    )


def analyze_trend(current: float, previous: float | None = None) -> ScoreTrend:
    if previous is None:
        return ScoreTrend("stable", 0, "Baseline health score established")

    change = round(current - previous)
    if current - previous >= 5:
        return ScoreTrend(
            "improving", change, f"Health score improved by {change} points! Keep up the great work."
        )
    if current - previous <= -5:
        return ScoreTrend(
            "declining",
            change,
            f"Health score declined by {abs(change)} points. Review your habits and make adjustments.",
        )
    return ScoreTrend("stable", change, "Health score is stable. Focus on consistency.")
