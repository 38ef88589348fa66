from __future__ import annotations

import math
from dataclasses import dataclass

from domain import reference_tables as rt
from domain.dtos import GoalValidationResult, MuscleGainLimits
from domain.entities import FitnessLevel, Gender, Severity, UserProfile


WEEKS_PER_MONTH = 4.33

_CONFIDENCE = {
    FitnessLevel.BEGINNER: "medium",
    FitnessLevel.INTERMEDIATE: "high",
    FitnessLevel.ADVANCED: "high",
    FitnessLevel.ELITE: "low",
}

_TIER_RECOMMENDATION = {
    FitnessLevel.BEGINNER: "Newbie gains phase: progressive overload on compound lifts drives the fastest progress.",
    FitnessLevel.INTERMEDIATE: "Gains are slowing: structured periodization and a modest surplus keep progress steady.",
    FitnessLevel.ADVANCED: "Progress is slow: prioritize training volume, recovery and a small surplus.",
    FitnessLevel.ELITE: "Near genetic potential: small, hard-won gains; focus on weak points and longevity.",
}

# years 1..5 of consistent training
_CAREER_TIERS = (
    FitnessLevel.BEGINNER,
    FitnessLevel.INTERMEDIATE,
    FitnessLevel.ADVANCED,
    FitnessLevel.ADVANCED,
    FitnessLevel.ELITE,
)


@dataclass(frozen=True)
class FirstYearPotential:
    realistic: float
    optimistic: float
    conservative: float


@dataclass(frozen=True)
class CareerPotential:
    total_potential: float
    yearly_breakdown: tuple[float, ...]
    time_to_reach: int


def resolve_tier(profile: UserProfile) -> FitnessLevel:
    if profile.fitness_level is not None:
        return profile.fitness_level
    years = profile.training_years or 0
    if years < 1:
        return FitnessLevel.BEGINNER
    if years < 3:
        return FitnessLevel.INTERMEDIATE
    if years < 5:
        return FitnessLevel.ADVANCED
    return FitnessLevel.ELITE


def _base_monthly(tier: FitnessLevel, gender: Gender | None) -> float:
    male, female = rt.MUSCLE_GAIN_MONTHLY_KG[tier]
    if gender == Gender.MALE:
        return male
    if gender == Gender.FEMALE:
        return female
    return (male + female) / 2


def age_factor(age: int | None) -> float:
    if age is None:
        return 1.0
    if age < 20:
        return 1.15
    if age >= 60:
        return 0.7
    if age >= 50:
        return 0.8
    if age >= 40:
        return 0.9
    return 1.0


def calculate_max_gain_rate(profile: UserProfile) -> MuscleGainLimits:
    tier = resolve_tier(profile)
    monthly = _base_monthly(tier, profile.gender) * age_factor(profile.age)
    return MuscleGainLimits(
        max_monthly_kg=round(monthly, 3),
        max_weekly_kg=round(monthly / WEEKS_PER_MONTH, 3),
        max_yearly_kg=round(monthly * 12, 2),
        experience_level=tier.value.capitalize(),
        confidence_level=_CONFIDENCE[tier],  # type: ignore[arg-type]
        recommendation=_TIER_RECOMMENDATION[tier],
    )


def validate_goal(target_gain_kg: float, months: float, profile: UserProfile) -> GoalValidationResult:
    if target_gain_kg is None or target_gain_kg <= 0 or months is None or months <= 0:
        return GoalValidationResult(
            valid=False,
            severity=Severity.ERROR,
            message="Target gain and timeline must both be positive",
        )

    limit = calculate_max_gain_rate(profile).max_monthly_kg
    # compared at the same 3-decimal precision the limit is reported in
    requested = round(target_gain_kg / months, 3)
    realistic_months = math.ceil(round(target_gain_kg / limit, 6))

    if requested <= limit:
        return GoalValidationResult(
            valid=True,
            severity=Severity.SUCCESS,
            message=(
                f"{requested:.2f}kg/month is within your natural limit of {limit:.2f}kg/month. "
                "Realistic goal!"
            ),
            achievement_probability=80,
            weekly_rate=round(requested / WEEKS_PER_MONTH, 3),
        )

    if requested <= round(limit * 1.3, 3):
        return GoalValidationResult(
            valid=True,
            severity=Severity.INFO,
            message=(
                f"{requested:.2f}kg/month is slightly above your natural limit of {limit:.2f}kg/month. "
                "Achievable with optimal training, nutrition and sleep."
            ),
            achievement_probability=50,
            suggestions=(f"Consider {realistic_months} months for a more realistic timeline.",),
            adjusted_timeline=realistic_months,
            weekly_rate=round(requested / WEEKS_PER_MONTH, 3),
        )

    return GoalValidationResult(
        valid=True,
        severity=Severity.WARNING,
        message=(
            f"{requested:.2f}kg/month exceeds your natural limit of {limit:.2f}kg/month. "
            "Much of the extra weight would likely be fat."
        ),
        achievement_probability=20,
        suggestions=(f"Consider {realistic_months} months to gain {target_gain_kg:g}kg of lean mass.",),
        recommendations=(
            "Extend the timeline to match natural muscle gain rates",
            "Keep the surplus modest (250-500 kcal/day)",
            "Track body composition, not just scale weight",
            "Prioritize progressive overload and sleep",
        ),
        adjusted_timeline=realistic_months,
        weekly_rate=round(requested / WEEKS_PER_MONTH, 3),
    )


def estimate_first_year_potential(profile: UserProfile) -> FirstYearPotential:
    realistic = calculate_max_gain_rate(profile).max_monthly_kg * 12
    return FirstYearPotential(
        realistic=round(realistic, 1),
        optimistic=round(realistic * 1.2, 1),
        conservative=round(realistic * 0.75, 1),
    )


def calculate_career_potential(profile: UserProfile) -> CareerPotential:
    factor = age_factor(profile.age)
    yearly = tuple(
        round(_base_monthly(tier, profile.gender) * factor * 12, 2) for tier in _CAREER_TIERS
    )
    return CareerPotential(
        total_potential=round(sum(yearly), 1),
        yearly_breakdown=yearly,
        time_to_reach=len(_CAREER_TIERS),
    )
