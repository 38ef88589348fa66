from __future__ import annotations

import math
from dataclasses import dataclass

from domain import reference_tables as rt
from domain.dtos import GoalValidationResult, SafeDeficit
from domain.entities import ActivityLevel, Severity


MIN_DEFICIT = 300
MAX_TDEE_SHARE = 0.4


@dataclass(frozen=True)
class TimelineOptions:
    min_weeks: int
    optimal_weeks: int
    max_weeks: int


@dataclass(frozen=True)
class ProteinRange:
    minimum: int
    optimal: int
    maximum: int


def validate_goal(
    current_kg: float, target_kg: float, weeks: float, bmi: float
) -> GoalValidationResult:
    """Grade a fat-loss goal by its weekly rate; BMI above 35 tolerates faster loss."""
    # graded at 0.01 kg so decimal weights land on the tier they name
    loss = round(current_kg - target_kg, 2)
    if loss <= 0 or weeks is None or weeks <= 0:
        return GoalValidationResult(
            valid=False,
            severity=Severity.ERROR,
            message="Target weight must be below current weight and the timeline must be positive",
        )

    rate = round(loss / weeks, 2)
    weekly_rate = rate

    if rate <= 1.0:
        return GoalValidationResult(
            valid=True,
            severity=Severity.SUCCESS,
            message=(
                f"{rate:.1f}kg/week is sustainable and healthy. Excellent goal! "
                "This rate maximizes fat loss while preserving muscle mass."
            ),
            achievement_probability=85,
            recommendations=(
                "Maintain high protein (2.0-2.4g/kg bodyweight)",
                "Include resistance training 3-4x/week",
                "Expect steady, sustainable progress",
            ),
            weekly_rate=weekly_rate,
        )

    if rate <= 1.5:
        return GoalValidationResult(
            valid=True,
            severity=Severity.INFO,
            message=(
                f"{rate:.1f}kg/week is aggressive but achievable. "
                "Requires strict adherence and may be challenging to maintain long-term."
            ),
            achievement_probability=60,
            recommendations=(
                "Very high protein (2.5g/kg bodyweight)",
                "Aggressive resistance training 4-5x/week",
                "Consider diet breaks every 8-12 weeks",
                "Track strength to monitor muscle loss",
            ),
            weekly_rate=weekly_rate,
        )

    if rate <= 2.0:
        suggested = math.ceil(loss / 1.0)
        return GoalValidationResult(
            valid=True,
            severity=Severity.WARNING,
            message=(
                f"{rate:.1f}kg/week is very aggressive. Recommended only for 8-12 weeks maximum. "
                "Significant risk of muscle loss and metabolic adaptation."
            ),
            achievement_probability=40,
            suggestions=(f"Consider {suggested} weeks at 1kg/week for better muscle preservation.",),
            recommendations=(
                "Maximum protein (2.5-3.0g/kg bodyweight)",
                "Heavy resistance training mandatory (prevent muscle loss)",
                "Plan diet breaks every 8-12 weeks",
                "Monitor strength loss carefully",
            ),
            adjusted_timeline=suggested,
            weekly_rate=weekly_rate,
        )

    if bmi > 35:
        suggested = math.ceil(loss / 1.5)
        return GoalValidationResult(
            valid=True,
            severity=Severity.WARNING,
            message=(
                f"{rate:.1f}kg/week is extreme but may be appropriate given your current BMI "
                f"({bmi:.1f}). Medical supervision strongly recommended."
            ),
            achievement_probability=30,
            suggestions=(
                "As BMI improves, plan to reduce rate to 1-1.5kg/week for final 10-15kg.",
                f"Consider {suggested} weeks at 1.5kg/week.",
            ),
            recommendations=(
                "Medical consultation strongly advised",
                "Frequent monitoring (weekly check-ins)",
                "Aggressive resistance training essential",
                "Blood work to monitor health markers",
            ),
            adjusted_timeline=suggested,
            weekly_rate=weekly_rate,
            allow_override=True,
        )

    at_one = math.ceil(loss / 1.0)
    at_three_quarters = math.ceil(loss / 0.75)
    return GoalValidationResult(
        valid=False,
        severity=Severity.ERROR,
        message=(
            f"{rate:.1f}kg/week is extremely aggressive and likely unsustainable. "
            "Strong risk of muscle loss, metabolic damage, and rebound weight gain."
        ),
        achievement_probability=10,
        suggestions=(
            f"Consider {at_one} weeks at 1kg/week",
            f"Consider {at_three_quarters} weeks at 0.75kg/week",
        ),
        recommendations=(
            "Strongly reconsider timeline",
            "Focus on sustainable approach",
            "Preserve lean mass priority",
            "Consider professional guidance",
        ),
        adjusted_timeline=at_one,
        weekly_rate=weekly_rate,
        allow_override=True,
    )


def _bmi_ceiling(bmi: float) -> int:
    if bmi > 35:
        return 1500
    if bmi > 30:
        return 1200
    if bmi > 27:
        return 1000
    return 750


def calculate_safe_deficit(bmi: float, tdee: float, activity: ActivityLevel) -> SafeDeficit:
    adjusted = round(_bmi_ceiling(bmi) * rt.DEFICIT_ACTIVITY_FACTORS[activity])
    max_deficit = round(min(adjusted, tdee * MAX_TDEE_SHARE))
    return SafeDeficit(
        min_deficit=MIN_DEFICIT,
        max_deficit=max_deficit,
        recommended_deficit=min(round(min(500, adjusted * 0.7)), max_deficit),
    )


def validate_timeline(current_kg: float, target_kg: float, bmi: float) -> TimelineOptions:
    loss = max(0.0, round(current_kg - target_kg, 2))
    aggressive_rate = 1.5 if bmi > 30 else 1.0
    return TimelineOptions(
        min_weeks=math.ceil(loss / aggressive_rate),
        optimal_weeks=math.ceil(loss / 0.75),
        max_weeks=math.ceil(loss / 0.5),
    )


def calculate_protein_requirements(lean_mass_kg: float, weekly_rate: float) -> ProteinRange:
    # faster loss needs more protein to hold on to lean mass
    if weekly_rate <= 0.5:
        mult = 2.0
    elif weekly_rate <= 1.0:
        mult = 2.2
    elif weekly_rate <= 1.5:
        mult = 2.5
    else:
        mult = 3.0
    return ProteinRange(
        minimum=round(lean_mass_kg * (mult - 0.3)),
        optimal=round(lean_mass_kg * mult),
        maximum=round(lean_mass_kg * (mult + 0.3)),
    )
