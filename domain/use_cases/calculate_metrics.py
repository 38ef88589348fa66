from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone

import structlog

from domain.advanced import heart_rate, muscle_gain, vo2max as vo2
from domain.advanced.health_score import HealthScoreInputs, calculate_health_score
from domain.bmi import calculate_bmi, get_bmi_calculator, population_for
from domain.calculations import (
    calculate_bmr_detailed,
    calculate_tdee_detailed,
    calculate_water_detailed,
)
from domain.detection import (
    detect_best_bmr_formula,
    is_athletic,
    resolve_climate,
    resolve_ethnicity,
    validate_activity_level,
)
from domain.dtos import CalculationBreakdown, ComprehensiveHealthMetrics
from domain.entities import BMRFormula, FitnessGoal, UserProfile
from domain.errors import InvalidInputError
from domain.macros import calculate_macro_split, calculate_protein


log = structlog.get_logger(__name__)


@dataclass(frozen=True)
class DailyIntake:
    # None means "not tracked" and scores as 0 against the target
    water_ml: float | None = None
    protein_g: float | None = None


def _notes(profile: UserProfile, formula: BMRFormula, climate_ask: bool, ethnicity_ask: bool) -> tuple[str, ...]:
    notes: list[str] = []
    if formula in (BMRFormula.KATCH_MCARDLE, BMRFormula.CUNNINGHAM) and not profile.body_fat_percent:
        notes.append("Body fat not provided; BMR uses Mifflin-St Jeor values")
    if climate_ask:
        notes.append("Climate was not detected with confidence; please confirm it")
    if ethnicity_ask:
        notes.append("Ethnicity was not detected with confidence; please confirm it")
    return tuple(notes)


def calculate_all_metrics(
    profile: UserProfile,
    *,
    intake: DailyIntake | None = None,
    calculated_at: datetime | None = None,
) -> ComprehensiveHealthMetrics:
    """Run the whole pipeline for one profile: context, core numbers, then the optional extras."""
    climate = resolve_climate(profile)
    ethnicity = resolve_ethnicity(profile)
    selection = detect_best_bmr_formula(profile)
    log.info(
        "metrics_context_resolved",
        climate=climate.climate.value,
        climate_source=climate.source,
        ethnicity=ethnicity.ethnicity.value,
        bmr_formula=selection.formula.value,
    )

    bmr = calculate_bmr_detailed(selection, profile)
    tdee = calculate_tdee_detailed(bmr.raw_bmr, profile.activity_level, climate.climate)

    bmi = round(calculate_bmi(profile.weight_kg, profile.height_cm), 1)
    population = population_for(ethnicity.ethnicity, is_athletic(profile))
    bmi_class = get_bmi_calculator(population).get_classification(bmi)

    water = calculate_water_detailed(profile.weight_kg, profile.activity_level, climate.climate)
    log.info(
        "metrics_core_calculated",
        bmr=bmr.value,
        tdee=tdee.final_tdee,
        bmi=bmi,
        bmi_population=population.value,
        water_ml=water.final_ml,
    )

    protein_g = calculate_protein(profile.weight_kg, profile.goal, profile.diet_type)
    macros = calculate_macro_split(tdee.final_tdee, protein_g, profile.diet_type)
    log.info("metrics_macros_calculated", protein_g=macros.protein_g, carbs_g=macros.carbs_g, fat_g=macros.fat_g)

    zones = rhr_assessment = vo2_estimate = None
    if profile.resting_heart_rate:
        try:
            zones = heart_rate.calculate_zones(
                profile.age,
                profile.gender,
                profile.resting_heart_rate,
                profile.measured_max_heart_rate,
            )
            rhr_assessment = heart_rate.classify_resting_hr(profile.resting_heart_rate, profile.gender)
            vo2_estimate = vo2.estimate_vo2max(profile, profile.resting_heart_rate)
        except InvalidInputError as e:
            # cardio extras are optional; the core targets still stand
            zones = rhr_assessment = vo2_estimate = None
            log.warning(
                "metrics_cardio_skipped",
                resting_heart_rate=profile.resting_heart_rate,
                error=str(e),
            )
        else:
            log.info("metrics_cardio_calculated", max_hr=zones.max_heart_rate, vo2max=vo2_estimate.vo2max)

    # an untracked day is scored as if the plan was followed
    intake = intake or DailyIntake(water_ml=water.final_ml, protein_g=protein_g)
    score = calculate_health_score(
        profile,
        HealthScoreInputs(
            bmi=bmi,
            water_intake_ml=intake.water_ml,
            water_target_ml=water.final_ml,
            protein_g=intake.protein_g,
            protein_target_g=protein_g,
            vo2max=vo2_estimate.vo2max if vo2_estimate else None,
        ),
    )

    gain_limits = None
    if profile.goal == FitnessGoal.MUSCLE_GAIN:
        gain_limits = muscle_gain.calculate_max_gain_rate(profile)

    activity_check = None
    if profile.occupation is not None:
        activity_check = validate_activity_level(profile.occupation, profile.activity_level)
        if not activity_check.is_valid:
            log.warning(
                "activity_below_occupation_minimum",
                occupation=profile.occupation.value,
                activity_level=profile.activity_level.value,
            )

    metrics = ComprehensiveHealthMetrics(
        bmr=bmr.value,
        bmi=bmi,
        bmi_classification=bmi_class,
        tdee=tdee.final_tdee,
        daily_calories=tdee.final_tdee,
        water_ml=water.final_ml,
        macros=macros,
        health_score=score,
        climate=climate,
        ethnicity=ethnicity,
        bmr_formula=selection,
        breakdown=CalculationBreakdown(bmr=bmr, tdee=tdee, water=water),
        calculated_at=calculated_at or datetime.now(timezone.utc),
        heart_rate_zones=zones,
        resting_heart_rate=rhr_assessment,
        vo2max=vo2_estimate,
        muscle_gain_limits=gain_limits,
        activity_validation=activity_check,
        notes=_notes(profile, selection.formula, climate.should_ask_user, ethnicity.should_ask_user),
    )
    log.info("metrics_calculated", health_score=score.total_score, rating=score.rating)
    return metrics


def recalculate_metrics(
    profile: UserProfile,
    *,
    intake: DailyIntake | None = None,
    calculated_at: datetime | None = None,
) -> ComprehensiveHealthMetrics:
    log.info("metrics_recalculation_requested")
    return calculate_all_metrics(profile, intake=intake, calculated_at=calculated_at)
