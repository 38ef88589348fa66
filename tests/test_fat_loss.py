# tests/test_fat_loss.py
from __future__ import annotations

import pytest

from domain.advanced.fat_loss import (
    MIN_DEFICIT,
    calculate_protein_requirements,
    calculate_safe_deficit,
    validate_goal,
    validate_timeline,
)
from domain.entities import ActivityLevel, Severity


# ── goal grading ─────────────────────────────────────────────────────
def test_sustainable_rate():
    r = validate_goal(80, 76, 8, 25)
    assert r.valid
    assert r.severity == Severity.SUCCESS
    assert r.achievement_probability == 85
    assert r.weekly_rate == 0.5


def test_aggressive_rate():
    r = validate_goal(80, 70, 8, 25)
    assert r.severity == Severity.INFO
    assert r.achievement_probability == 60


def test_very_aggressive_rate():
    r = validate_goal(80, 66, 8, 25)
    assert r.valid
    assert r.severity == Severity.WARNING
    assert r.achievement_probability == 40
    assert r.adjusted_timeline == 14
    assert not r.allow_override


def test_extreme_rate_tolerated_at_high_bmi():
    r = validate_goal(120, 96, 8, 38)
    assert r.valid
    assert r.severity == Severity.WARNING
    assert r.achievement_probability == 30
    assert r.allow_override
    assert r.adjusted_timeline == 16


def test_extreme_rate_rejected():
    r = validate_goal(80, 56, 8, 25)
    assert not r.valid
    assert r.severity == Severity.ERROR
    assert r.allow_override
    assert r.adjusted_timeline == 24
    assert r.suggestions == ("Consider 24 weeks at 1kg/week", "Consider 32 weeks at 0.75kg/week")


@pytest.mark.parametrize("target,weeks", [(85, 8), (80, 8), (70, 0)])
def test_invalid_goal(target, weeks):
    r = validate_goal(80, target, weeks, 25)
    assert not r.valid
    assert r.severity == Severity.ERROR


# ── deficit / timeline / protein ─────────────────────────────────────
def test_safe_deficit_normal_bmi():
    d = calculate_safe_deficit(25, 2500, ActivityLevel.MODERATE)
    assert d.min_deficit == MIN_DEFICIT
    assert d.max_deficit == 750
    assert d.recommended_deficit == 500


def test_safe_deficit_capped_by_tdee():
    d = calculate_safe_deficit(36, 2000, ActivityLevel.VERY_ACTIVE)
    assert d.max_deficit == 800
    assert d.recommended_deficit == 500


def test_safe_deficit_sedentary_lean():
    d = calculate_safe_deficit(22, 1800, ActivityLevel.SEDENTARY)
    assert d.max_deficit == 600
    assert d.recommended_deficit == 420


def test_recommended_deficit_never_exceeds_cap():
    # 40% of a 1000 kcal TDEE is below the usual 500 kcal recommendation
    d = calculate_safe_deficit(22, 1000, ActivityLevel.MODERATE)
    assert d.max_deficit == 400
    assert d.recommended_deficit == 400


def test_timeline_options():
    t = validate_timeline(100, 85, 32)
    assert (t.min_weeks, t.optimal_weeks, t.max_weeks) == (10, 20, 30)
    assert validate_timeline(100, 85, 25).min_weeks == 15


def test_timeline_no_loss():
    t = validate_timeline(80, 85, 25)
    assert (t.min_weeks, t.optimal_weeks, t.max_weeks) == (0, 0, 0)


def test_protein_requirements_scale_with_rate():
    p = calculate_protein_requirements(60, 0.8)
    assert (p.minimum, p.optimal, p.maximum) == (114, 132, 150)
    assert calculate_protein_requirements(60, 2.0).optimal == 180
    assert calculate_protein_requirements(60, 0.4).optimal == 120


# ── decimal weights on tier boundaries ───────────────────────────────
def test_decimal_weights_on_warning_boundary():
    # 8.0 kg in 4 weeks is exactly 2.0 kg/week
    r = validate_goal(64.4, 56.4, 4, 22.0)
    assert r.valid
    assert r.severity == Severity.WARNING
    assert r.weekly_rate == 2.0
    assert r.adjusted_timeline == 8


@pytest.mark.parametrize(
    "current,target,weeks,severity",
    [
        (40.2, 30.2, 10, Severity.SUCCESS),
        (70.3, 64.3, 4, Severity.INFO),
    ],
)
def test_decimal_weights_stay_in_their_tier(current, target, weeks, severity):
    assert validate_goal(current, target, weeks, 22.0).severity == severity


def test_timeline_with_decimal_weights():
    t = validate_timeline(64.4, 56.4, 22.0)
    assert (t.min_weeks, t.optimal_weeks, t.max_weeks) == (8, 11, 16)

