# tests/test_tdee_water.py
from __future__ import annotations

import pytest

from domain.calculations import (
    assess_hydration,
    calculate_base_tdee,
    calculate_tdee,
    calculate_tdee_detailed,
    calculate_water,
    calculate_water_detailed,
    calorie_target,
    describe_activity,
    describe_climate,
    exercise_water_bonus,
    hydration_recommendations,
    round_to_50,
)
from domain.entities import ActivityLevel, ClimateZone, FitnessGoal, Occupation
from domain.errors import InvalidInputError, MissingFieldError

LEVELS = [
    ActivityLevel.SEDENTARY,
    ActivityLevel.LIGHT,
    ActivityLevel.MODERATE,
    ActivityLevel.ACTIVE,
    ActivityLevel.VERY_ACTIVE,
]


# ── TDEE ─────────────────────────────────────────────────────────────
def test_tdee_tropical_moderate():
    # 1700 x 1.55 x 1.05 = 2766.75
    assert calculate_tdee(1700, ActivityLevel.MODERATE, ClimateZone.TROPICAL) == 2767


def test_tdee_sedentary_temperate():
    assert calculate_tdee(1500, ActivityLevel.SEDENTARY, ClimateZone.TEMPERATE) == 1800


@pytest.mark.parametrize("climate", list(ClimateZone))
def test_tdee_monotonic_in_activity(climate):
    values = [calculate_tdee(1600, level, climate) for level in LEVELS]
    assert values == sorted(values)
    assert len(set(values)) == len(values)


def test_tdee_cold_beats_temperate():
    cold = calculate_tdee(1600, ActivityLevel.LIGHT, ClimateZone.COLD)
    temperate = calculate_tdee(1600, ActivityLevel.LIGHT, ClimateZone.TEMPERATE)
    assert cold > temperate


@pytest.mark.parametrize("bmr", [0, -100, None])
def test_tdee_requires_bmr(bmr):
    with pytest.raises(InvalidInputError, match="Valid BMR required"):
        calculate_tdee(bmr, ActivityLevel.MODERATE, ClimateZone.TEMPERATE)


def test_tdee_breakdown():
    b = calculate_tdee_detailed(1700, ActivityLevel.MODERATE, ClimateZone.TROPICAL)
    assert b.bmr == 1700
    assert b.activity_multiplier == 1.55
    assert b.climate_multiplier == 1.05
    assert b.activity_tdee == 2635
    assert b.final_tdee == 2767


def test_base_tdee_from_occupation():
    assert calculate_base_tdee(1700, Occupation.DESK_JOB) == 2125
    assert calculate_base_tdee(1700, Occupation.VERY_ACTIVE) == 2890


def test_calorie_target_by_goal():
    assert calorie_target(2500, FitnessGoal.MAINTENANCE) == 2500
    assert calorie_target(2500, FitnessGoal.FAT_LOSS) == 1950
    assert calorie_target(2500, FitnessGoal.MUSCLE_GAIN) == 3000
    # deficit capped at 1000 kcal
    assert calorie_target(2500, FitnessGoal.FAT_LOSS, rate_kg_per_week=1.0) == 1500


def test_descriptions():
    assert describe_activity(ActivityLevel.SEDENTARY) == "Little to no exercise, desk job"
    assert "+5%" in describe_climate(ClimateZone.TROPICAL)


# ── water ────────────────────────────────────────────────────────────
def test_round_to_50():
    assert round_to_50(2449) == 2450
    assert round_to_50(2474) == 2450
    assert round_to_50(2476) == 2500


def test_water_arid_very_active():
    # (70 x 35 + 2000) x 1.7 = 7565 -> 7550
    assert calculate_water(70, ActivityLevel.VERY_ACTIVE, ClimateZone.ARID) == 7550


def test_water_sedentary_temperate():
    assert calculate_water(70, ActivityLevel.SEDENTARY, ClimateZone.TEMPERATE) == 2450


def test_water_breakdown():
    w = calculate_water_detailed(70, ActivityLevel.VERY_ACTIVE, ClimateZone.ARID)
    assert w.base_ml == 2450
    assert w.activity_ml == 2000
    assert w.before_climate_ml == 4450
    assert w.climate_multiplier == 1.70
    assert w.final_ml == 7550


@pytest.mark.parametrize("climate", list(ClimateZone))
def test_water_is_multiple_of_50(climate):
    for level in LEVELS:
        assert calculate_water(63.3, level, climate) % 50 == 0


def test_water_requires_weight():
    with pytest.raises(MissingFieldError):
        calculate_water(0, ActivityLevel.MODERATE, ClimateZone.TEMPERATE)


def test_hydration_recommendations_extend_base_tips():
    tips = hydration_recommendations(ClimateZone.ARID)
    assert tips[0] == "Drink water regularly throughout the day"
    assert "Electrolyte replacement critical" in tips
    assert len(hydration_recommendations(ClimateZone.TEMPERATE)) == 6


@pytest.mark.parametrize(
    "intake,adequate,message",
    [
        (2700, True, "Excellent hydration!"),
        (2100, True, "Good hydration, try to reach 100%"),
        (1500, False, "Below recommended intake - drink more water"),
        (1400, False, "Critically low - increase water intake immediately"),
    ],
)
def test_assess_hydration(intake, adequate, message):
    r = assess_hydration(intake, 3000)
    assert r.adequate is adequate
    assert r.message == message
    assert r.percentage == round(intake / 3000 * 100)


def test_assess_hydration_needs_target():
    with pytest.raises(InvalidInputError):
        assess_hydration(1000, 0)


def test_exercise_water_bonus():
    assert exercise_water_bonus(60, "medium") == 900
    assert exercise_water_bonus(30, "high") == 700   # 675 -> 700
    with pytest.raises(InvalidInputError):
        exercise_water_bonus(30, "extreme")
