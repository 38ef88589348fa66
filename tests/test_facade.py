# tests/test_facade.py
from __future__ import annotations

import json
from dataclasses import replace
from datetime import datetime, timezone

import pytest

from domain.advanced.health_score import CARDIO_CATEGORY
from domain.entities import (
    ActivityLevel,
    BMIPopulation,
    BMRFormula,
    ClimateZone,
    Ethnicity,
    FitnessGoal,
    FitnessLevel,
    GoalInput,
    GoalKind,
    Gender,
    Occupation,
    Severity,
    UserProfile,
)
from domain.errors import MissingFieldError
from domain.use_cases import (
    DailyIntake,
    calculate_all_metrics,
    export_metrics,
    recalculate_metrics,
    validate_goal,
)

NOW = datetime(2025, 3, 1, 8, 30, tzinfo=timezone.utc)

# Kerala, India: tropical climate, Asian BMI cutoffs, Mifflin-St Jeor
KERALA_MALE = UserProfile(
    age=30,
    gender=Gender.MALE,
    weight_kg=70,
    height_cm=175,
    country="IN",
    state="KL",
    activity_level=ActivityLevel.MODERATE,
)


# ── pipeline ─────────────────────────────────────────────────────────
def test_core_numbers():
    m = calculate_all_metrics(KERALA_MALE, calculated_at=NOW)
    assert m.bmr_formula.formula == BMRFormula.MIFFLIN_ST_JEOR
    assert m.breakdown.bmr.raw_bmr == pytest.approx(1648.75)
    assert m.bmr == 1649
    # 1648.75 x 1.55 x 1.05
    assert m.tdee == 2683
    assert m.daily_calories == m.tdee
    assert m.breakdown.tdee.activity_tdee == 2556
    # (2450 + 1000) x 1.5 = 5175
    assert m.water_ml == 5200
    assert m.bmi == 22.9
    assert m.calculated_at == NOW


def test_context_detection():
    m = calculate_all_metrics(KERALA_MALE, calculated_at=NOW)
    assert m.climate.climate == ClimateZone.TROPICAL
    assert m.climate.source == "state_table"
    assert m.ethnicity.ethnicity == Ethnicity.ASIAN
    assert m.bmi_classification.population == BMIPopulation.ASIAN
    assert m.bmi_classification.category == "Normal"
    assert m.notes == ()


def test_macros_follow_tdee():
    m = calculate_all_metrics(KERALA_MALE, calculated_at=NOW)
    assert m.macros.calories == m.tdee
    assert (m.macros.protein_g, m.macros.fat_g, m.macros.carbs_g) == (126, 73, 381)
    assert (m.macros.protein_percent, m.macros.carbs_percent, m.macros.fat_percent) == (19, 57, 24)


def test_optional_sections_absent_by_default():
    m = calculate_all_metrics(KERALA_MALE, calculated_at=NOW)
    assert m.heart_rate_zones is None
    assert m.resting_heart_rate is None
    assert m.vo2max is None
    assert m.muscle_gain_limits is None
    assert m.activity_validation is None
    # targets met, neutral cardio
    assert m.health_score.total_score == 85
    assert (m.health_score.rating, m.health_score.grade) == ("very_good", "B")


def test_optional_sections_present():
    p = replace(
        KERALA_MALE,
        resting_heart_rate=60,
        goal=FitnessGoal.MUSCLE_GAIN,
        occupation=Occupation.HEAVY_LABOR,
    )
    m = calculate_all_metrics(p, calculated_at=NOW)
    assert m.heart_rate_zones is not None
    assert m.heart_rate_zones.max_heart_rate == 187
    assert m.resting_heart_rate.classification == "Good"
    assert m.vo2max.vo2max == 59.1
    assert m.muscle_gain_limits is not None
    assert not m.activity_validation.is_valid
    assert m.activity_validation.minimum_level == ActivityLevel.ACTIVE


def test_implausible_resting_hr_skips_cardio_only():
    # 85-year-old woman: estimated max HR is 131
    p = UserProfile(age=85, gender=Gender.FEMALE, weight_kg=60, height_cm=160, country="GB", resting_heart_rate=132)
    m = calculate_all_metrics(p, calculated_at=NOW)
    assert m.heart_rate_zones is None
    assert m.resting_heart_rate is None
    assert m.vo2max is None
    assert m.bmr > 0 and m.tdee > 0 and m.water_ml > 0
    cardio = next(c for c in m.health_score.components if c.category == CARDIO_CATEGORY)
    assert cardio.score == 10


def test_tracked_intake_lowers_score():
    full = calculate_all_metrics(KERALA_MALE, calculated_at=NOW)
    short = calculate_all_metrics(
        KERALA_MALE, intake=DailyIntake(water_ml=1000, protein_g=50), calculated_at=NOW
    )
    assert short.health_score.total_score < full.health_score.total_score


def test_deterministic_for_fixed_timestamp():
    assert calculate_all_metrics(KERALA_MALE, calculated_at=NOW) == calculate_all_metrics(
        KERALA_MALE, calculated_at=NOW
    )


def test_default_timestamp_is_utc():
    m = calculate_all_metrics(KERALA_MALE)
    assert m.calculated_at.tzinfo is not None


def test_uncertain_location_adds_notes():
    m = calculate_all_metrics(replace(KERALA_MALE, country="US", state=None), calculated_at=NOW)
    assert m.climate.should_ask_user
    assert m.ethnicity.ethnicity == Ethnicity.MIXED
    assert m.bmi_classification.population == BMIPopulation.STANDARD
    assert len(m.notes) == 2


def test_elite_without_body_fat():
    p = replace(KERALA_MALE, fitness_level=FitnessLevel.ELITE)
    m = calculate_all_metrics(p, calculated_at=NOW)
    assert m.bmr_formula.formula == BMRFormula.CUNNINGHAM
    assert m.breakdown.bmr.raw_bmr == pytest.approx(1648.75)
    assert m.bmi_classification.population == BMIPopulation.ATHLETIC
    assert "Body fat not provided; BMR uses Mifflin-St Jeor values" in m.notes


def test_missing_weight_raises():
    with pytest.raises(MissingFieldError) as exc:
        calculate_all_metrics(replace(KERALA_MALE, weight_kg=None))
    assert exc.value.field == "weight_kg"


def test_recalculate_matches():
    assert recalculate_metrics(KERALA_MALE, calculated_at=NOW) == calculate_all_metrics(
        KERALA_MALE, calculated_at=NOW
    )


# ── export ───────────────────────────────────────────────────────────
def test_export_json():
    data = json.loads(export_metrics(calculate_all_metrics(KERALA_MALE, calculated_at=NOW)))
    assert data["summary"] == {
        "dailyCalories": 2683,
        "protein": 126,
        "carbs": 381,
        "fat": 73,
        "water": "5.2L",
        "bmi": "22.9",
        "bmr": 1649,
    }
    assert data["context"] == {"climate": "tropical", "ethnicity": "asian", "formula": "mifflin_st_jeor"}
    assert data["calculationDate"] == NOW.isoformat()


# ── goal dispatch ────────────────────────────────────────────────────
HEAVIER = replace(KERALA_MALE, weight_kg=80)


def test_fat_loss_goal():
    r = validate_goal(HEAVIER, GoalInput(GoalKind.FAT_LOSS, target_weight_kg=76, timeline_weeks=8))
    assert r.valid
    assert r.severity == Severity.SUCCESS


def test_fat_loss_goal_with_decimal_weights():
    r = validate_goal(
        replace(KERALA_MALE, weight_kg=40.2),
        GoalInput(GoalKind.FAT_LOSS, target_weight_kg=30.2, timeline_weeks=10),
    )
    assert r.valid
    assert r.severity == Severity.SUCCESS
    assert r.weekly_rate == 1.0


def test_fat_loss_goal_incomplete():
    r = validate_goal(HEAVIER, GoalInput(GoalKind.FAT_LOSS, target_weight_kg=76))
    assert not r.valid
    assert r.message == "Fat loss goal requires target weight and timeline"


def test_fat_loss_goal_without_height():
    r = validate_goal(
        replace(HEAVIER, height_cm=None),
        GoalInput(GoalKind.FAT_LOSS, target_weight_kg=76, timeline_weeks=8),
    )
    assert not r.valid
    assert r.severity == Severity.ERROR


def test_muscle_gain_goal():
    r = validate_goal(HEAVIER, GoalInput(GoalKind.MUSCLE_GAIN, target_gain_kg=10, timeline_months=10))
    assert r.severity == Severity.SUCCESS


def test_muscle_gain_goal_incomplete():
    r = validate_goal(HEAVIER, GoalInput(GoalKind.MUSCLE_GAIN, timeline_months=10))
    assert r.message == "Muscle gain goal requires target gain and timeline"


@pytest.mark.parametrize("kind", [GoalKind.MAINTENANCE, GoalKind.RECOMP])
def test_other_goals_always_valid(kind):
    r = validate_goal(HEAVIER, GoalInput(kind))
    assert r.valid
    assert r.message == "Valid goal!"

