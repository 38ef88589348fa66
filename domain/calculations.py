from __future__ import annotations

from typing import assert_never

from domain import reference_tables as rt
from domain.dtos import (
    BMRBreakdown,
    BMRFormulaSelection,
    HydrationAssessment,
    TDEEBreakdown,
    WaterBreakdown,
)
from domain.entities import (
    ActivityLevel,
    BMRFormula,
    ClimateZone,
    FitnessGoal,
    Gender,
    Occupation,
    UserProfile,
)
from domain.errors import InvalidInputError, MissingFieldError


# ── BMR ──────────────────────────────────────────────────────────────
_MIFFLIN_GENDER_OFFSET = {
    Gender.MALE: 5.0,
    Gender.FEMALE: -161.0,
}
# other / unspecified: mean of the male and female offsets
_MIFFLIN_NEUTRAL_OFFSET = -78.0


def _require_positive(value: float | None, field: str) -> float:
    if value is None or value <= 0:
        raise MissingFieldError(field)
    return value


def _require_base_fields(profile: UserProfile) -> tuple[float, float, float, Gender]:
    weight = _require_positive(profile.weight_kg, "weight_kg")
    height = _require_positive(profile.height_cm, "height_cm")
    age = _require_positive(profile.age, "age")
    if profile.gender is None:
        raise MissingFieldError("gender")
    return weight, height, age, profile.gender


def lean_body_mass(weight_kg: float, body_fat_percent: float) -> float:
    return weight_kg * (1.0 - body_fat_percent / 100.0)


def bmr_mifflin(profile: UserProfile) -> float:
    weight, height, age, gender = _require_base_fields(profile)
    offset = _MIFFLIN_GENDER_OFFSET.get(gender, _MIFFLIN_NEUTRAL_OFFSET)
    return 10 * weight + 6.25 * height - 5 * age + offset


def bmr_harris_benedict(profile: UserProfile) -> float:
    """Revised Harris-Benedict (Roza & Shizgal, 1984)."""
    weight, height, age, gender = _require_base_fields(profile)
    male = 88.362 + 13.397 * weight + 4.799 * height - 5.677 * age
    female = 447.593 + 9.247 * weight + 3.098 * height - 4.330 * age
    if gender == Gender.MALE:
        return male
    if gender == Gender.FEMALE:
        return female
    return (male + female) / 2


def _lbm_or_none(profile: UserProfile) -> float | None:
    bf = profile.body_fat_percent
    if bf is None or bf <= 0:
        return None
    weight = _require_positive(profile.weight_kg, "weight_kg")
    return lean_body_mass(weight, bf)


def bmr_katch_mcardle(profile: UserProfile) -> float:
    lbm = _lbm_or_none(profile)
    if lbm is None:
        return bmr_mifflin(profile)
    return 370 + 21.6 * lbm


def bmr_cunningham(profile: UserProfile) -> float:
    lbm = _lbm_or_none(profile)
    if lbm is None:
        return bmr_mifflin(profile)
    return 500 + 22 * lbm


def calculate_bmr(formula: BMRFormula, profile: UserProfile) -> float:
    """kcal/day for the given formula; LBM-based formulas fall back to Mifflin-St Jeor without body fat."""
    match formula:
        case BMRFormula.MIFFLIN_ST_JEOR:
            return bmr_mifflin(profile)
        case BMRFormula.KATCH_MCARDLE:
            return bmr_katch_mcardle(profile)
        case BMRFormula.CUNNINGHAM:
            return bmr_cunningham(profile)
        case BMRFormula.HARRIS_BENEDICT:
            return bmr_harris_benedict(profile)
        case _:
            assert_never(formula)


def calculate_bmr_detailed(selection: BMRFormulaSelection, profile: UserProfile) -> BMRBreakdown:
    raw = calculate_bmr(selection.formula, profile)
    return BMRBreakdown(
        formula=selection.formula,
        raw_bmr=raw,
        value=round(raw),
        accuracy=selection.accuracy,
    )


def validate_bmr_inputs(
    *,
    weight_kg: float | None,
    height_cm: float | None,
    age: int | None,
    gender: Gender | None,
) -> list[str]:
    errors: list[str] = []

    if not weight_kg:
        errors.append("Weight is required")
    elif not 30 <= weight_kg <= 300:
        errors.append("Weight must be between 30-300 kg")

    if not height_cm:
        errors.append("Height is required")
    elif not 100 <= height_cm <= 250:
        errors.append("Height must be between 100-250 cm")

    if not age:
        errors.append("Age is required")
    elif not 13 <= age <= 120:
        errors.append("Age must be between 13-120 years")

    if gender is None:
        errors.append("Gender is required")

    return errors


# ── TDEE ─────────────────────────────────────────────────────────────
def _require_bmr(bmr: float) -> None:
    if bmr is None or bmr <= 0:
        raise InvalidInputError("Valid BMR required for TDEE calculation")


def calculate_tdee(bmr: float, activity: ActivityLevel, climate: ClimateZone) -> int:
    _require_bmr(bmr)
    activity_mult = rt.ACTIVITY_MULTIPLIERS[activity]
    climate_mult = rt.CLIMATE_CHARACTERISTICS[climate].tdee_multiplier
    return round(bmr * activity_mult * climate_mult)


def calculate_tdee_detailed(bmr: float, activity: ActivityLevel, climate: ClimateZone) -> TDEEBreakdown:
    _require_bmr(bmr)
    activity_mult = rt.ACTIVITY_MULTIPLIERS[activity]
    climate_mult = rt.CLIMATE_CHARACTERISTICS[climate].tdee_multiplier
    activity_tdee = bmr * activity_mult
    return TDEEBreakdown(
        bmr=bmr,
        activity_multiplier=activity_mult,
        climate_multiplier=climate_mult,
        activity_tdee=round(activity_tdee),
        final_tdee=round(activity_tdee * climate_mult),
    )


def calculate_base_tdee(bmr: float, occupation: Occupation) -> int:
    """Occupational NEAT only, before any exercise."""
    _require_bmr(bmr)
    return round(bmr * rt.OCCUPATION_MULTIPLIERS[occupation])


def calorie_target(tdee: float, goal: FitnessGoal, rate_kg_per_week: float = 0.5) -> int:
    daily_adjustment = rate_kg_per_week * rt.KCAL_PER_KG_FAT / 7
    if goal == FitnessGoal.FAT_LOSS:
        return round(tdee - min(daily_adjustment, 1000))
    if goal == FitnessGoal.MUSCLE_GAIN:
        return round(tdee + min(daily_adjustment, 500))
    return round(tdee)


def describe_activity(activity: ActivityLevel) -> str:
    return rt.ACTIVITY_DESCRIPTIONS[activity]


def describe_climate(climate: ClimateZone) -> str:
    return rt.CLIMATE_DESCRIPTIONS[climate]


# ── water ────────────────────────────────────────────────────────────
def round_to_50(ml: float) -> int:
    return int(round(ml / 50) * 50)


def calculate_water_detailed(
    weight_kg: float, activity: ActivityLevel, climate: ClimateZone
) -> WaterBreakdown:
    weight = _require_positive(weight_kg, "weight_kg")
    base = weight * rt.WATER_BASE_ML_PER_KG
    bonus = rt.WATER_ACTIVITY_BONUS_ML[activity]
    mult = rt.CLIMATE_CHARACTERISTICS[climate].water_multiplier
    before_climate = base + bonus
    return WaterBreakdown(
        base_ml=round(base),
        activity_ml=bonus,
        before_climate_ml=round(before_climate),
        climate_multiplier=mult,
        final_ml=round_to_50(before_climate * mult),
    )


def calculate_water(weight_kg: float, activity: ActivityLevel, climate: ClimateZone) -> int:
    """ml/day: 35 ml/kg plus an activity bonus, scaled by climate and rounded to 50 ml."""
    return calculate_water_detailed(weight_kg, activity, climate).final_ml


_HYDRATION_BASE_TIPS = (
    "Drink water regularly throughout the day",
    "Monitor urine color (pale yellow is ideal)",
    "Increase intake during exercise",
    "Don't wait until you're thirsty",
)

_HYDRATION_CLIMATE_TIPS = {
    ClimateZone.TROPICAL: (
        "Drink extra during outdoor activities",
        "Consider electrolyte drinks for prolonged exercise",
        "Pre-hydrate before going outside",
        "Avoid caffeine and alcohol in heat",
    ),
    ClimateZone.TEMPERATE: (
        "Adjust intake based on seasonal changes",
        "Increase during summer months",
    ),
    ClimateZone.COLD: (
        "Don't reduce water despite less thirst",
        "Warm beverages count toward hydration",
        "Indoor heating increases water needs",
    ),
    ClimateZone.ARID: (
        "Increase intake significantly",
        "Electrolyte replacement critical",
        "Humidity is very low - rapid dehydration risk",
        "Monitor for signs of dehydration closely",
    ),
}


def hydration_recommendations(climate: ClimateZone) -> tuple[str, ...]:
    return _HYDRATION_BASE_TIPS + _HYDRATION_CLIMATE_TIPS[climate]


def assess_hydration(intake_ml: float, target_ml: float) -> HydrationAssessment:
    if target_ml <= 0:
        raise InvalidInputError("Hydration target must be positive")
    pct = intake_ml / target_ml * 100
    if pct >= 90:
        return HydrationAssessment(True, round(pct), "Excellent hydration!")
    if pct >= 70:
        return HydrationAssessment(True, round(pct), "Good hydration, try to reach 100%")
    if pct >= 50:
        return HydrationAssessment(False, round(pct), "Below recommended intake - drink more water")
    return HydrationAssessment(False, round(pct), "Critically low - increase water intake immediately")


# ml lost per minute of exercise
_SWEAT_RATES = {"low": 5, "medium": 10, "high": 15}


def exercise_water_bonus(duration_min: float, intensity: str) -> int:
    try:
        rate = _SWEAT_RATES[intensity]
    except KeyError:
        raise InvalidInputError(f"Unknown exercise intensity: {intensity}") from None
    # replace 150% of what is lost
    return round_to_50(duration_min * rate * 1.5)
