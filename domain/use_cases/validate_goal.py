from __future__ import annotations

import structlog

from domain.advanced import fat_loss, muscle_gain
from domain.bmi import calculate_bmi
from domain.dtos import GoalValidationResult
from domain.entities import GoalInput, GoalKind, Severity, UserProfile
from domain.errors import MissingFieldError


log = structlog.get_logger(__name__)


def _error(message: str) -> GoalValidationResult:
    return GoalValidationResult(valid=False, severity=Severity.ERROR, message=message)


def validate_goal(profile: UserProfile, goal: GoalInput) -> GoalValidationResult:
    log.info("goal_validation_requested", kind=goal.kind.value)

    if goal.kind == GoalKind.FAT_LOSS:
        if not goal.target_weight_kg or not goal.timeline_weeks:
            return _error("Fat loss goal requires target weight and timeline")
        try:
            bmi = calculate_bmi(profile.weight_kg, profile.height_cm)
        except MissingFieldError as e:
            return _error(str(e))
        result = fat_loss.validate_goal(profile.weight_kg, goal.target_weight_kg, goal.timeline_weeks, bmi)

    elif goal.kind == GoalKind.MUSCLE_GAIN:
        if not goal.target_gain_kg or not goal.timeline_months:
            return _error("Muscle gain goal requires target gain and timeline")
        result = muscle_gain.validate_goal(goal.target_gain_kg, goal.timeline_months, profile)

    else:
        result = GoalValidationResult(valid=True, severity=Severity.SUCCESS, message="Valid goal!")

    log.info(
        "goal_validated",
        kind=goal.kind.value,
        severity=result.severity.value,
        valid=result.valid,
    )
    return result
