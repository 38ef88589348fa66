from __future__ import annotations

import structlog

from domain import reference_tables as rt
from domain.dtos import (
    ActivityValidation,
    BMRFormulaSelection,
    ClimateDetectionResult,
    EthnicityDetectionResult,
)
from domain.entities import (
    ActivityLevel,
    BMRFormula,
    BodyFatSource,
    ClimateZone,
    Ethnicity,
    FitnessLevel,
    Occupation,
    UserProfile,
)


log = structlog.get_logger(__name__)

STATE_CONFIDENCE = 90
COUNTRY_CONFIDENCE = 85
DEFAULT_CLIMATE_CONFIDENCE = 50
USER_CONFIDENCE = 100

GENERAL_ETHNICITY_MESSAGE = (
    "Please select your ethnicity for more accurate BMI classification and health metrics."
)

# checked top to bottom, first hit wins
_ETHNICITY_REGIONS: tuple[tuple[frozenset[str], Ethnicity, int], ...] = (
    (rt.SOUTH_ASIAN, Ethnicity.ASIAN, 90),
    (rt.EAST_ASIAN, Ethnicity.ASIAN, 90),
    (rt.SOUTHEAST_ASIAN, Ethnicity.ASIAN, 85),
    (rt.CAUCASIAN, Ethnicity.CAUCASIAN, 80),
    (rt.BLACK_AFRICAN, Ethnicity.BLACK_AFRICAN, 75),
    (rt.HISPANIC, Ethnicity.HISPANIC, 80),
    (rt.MIDDLE_EASTERN, Ethnicity.MIDDLE_EASTERN, 75),
    (rt.PACIFIC_ISLANDER, Ethnicity.PACIFIC_ISLANDER, 85),
)

_COUNTRY_CLIMATES: tuple[tuple[frozenset[str], ClimateZone], ...] = (
    (rt.TROPICAL_COUNTRIES, ClimateZone.TROPICAL),
    (rt.COLD_COUNTRIES, ClimateZone.COLD),
    (rt.ARID_COUNTRIES, ClimateZone.ARID),
)


def _norm(code: str | None) -> str:
    return (code or "").strip().upper()


def _climate_result(
    climate: ClimateZone,
    confidence: int,
    source: str,
    *,
    ask: bool = False,
    message: str | None = None,
) -> ClimateDetectionResult:
    return ClimateDetectionResult(
        climate=climate,
        confidence=confidence,
        source=source,  # type: ignore[arg-type]
        should_ask_user=ask,
        characteristics=rt.CLIMATE_CHARACTERISTICS[climate],
        message=message,
    )


def detect_climate(country: str | None, state: str | None = None) -> ClimateDetectionResult:
    """State table first (IN/US), then country lists, then a temperate default the user should confirm."""
    country_code = _norm(country)
    state_code = _norm(state)

    if state_code:
        zone = rt.STATE_CLIMATES.get(country_code, {}).get(state_code)
        if zone is not None:
            return _climate_result(zone, STATE_CONFIDENCE, "state_table")

    for countries, zone in _COUNTRY_CLIMATES:
        if country_code in countries:
            return _climate_result(zone, COUNTRY_CONFIDENCE, "country_table")

    return _climate_result(
        ClimateZone.TEMPERATE,
        DEFAULT_CLIMATE_CONFIDENCE,
        "default",
        ask=True,
        message="We couldn't determine your climate. Please confirm it for accurate water and calorie targets.",
    )


def detect_ethnicity(country: str | None, state: str | None = None) -> EthnicityDetectionResult:
    # state is accepted for symmetry with detect_climate; no table refines ethnicity by region yet
    country_code = _norm(country)

    if country_code in rt.HIGH_DIVERSITY:
        return EthnicityDetectionResult(
            ethnicity=Ethnicity.MIXED,
            confidence=50,
            should_ask_user=True,
            message=(
                f"Your location ({country_code}) has diverse populations. "
                "Please select your ethnicity for more accurate health calculations."
            ),
        )

    for countries, ethnicity, confidence in _ETHNICITY_REGIONS:
        if country_code in countries:
            return EthnicityDetectionResult(
                ethnicity=ethnicity, confidence=confidence, should_ask_user=False
            )

    return EthnicityDetectionResult(
        ethnicity=Ethnicity.GENERAL,
        confidence=40,
        should_ask_user=True,
        message=GENERAL_ETHNICITY_MESSAGE,
    )


def resolve_climate(profile: UserProfile) -> ClimateDetectionResult:
    if profile.climate_override is not None:
        return _climate_result(profile.climate_override, USER_CONFIDENCE, "user")
    return detect_climate(profile.country, profile.state)


def resolve_ethnicity(profile: UserProfile) -> EthnicityDetectionResult:
    if profile.ethnicity_override is not None:
        return EthnicityDetectionResult(
            ethnicity=profile.ethnicity_override,
            confidence=USER_CONFIDENCE,
            should_ask_user=False,
        )
    return detect_ethnicity(profile.country, profile.state)


def is_athletic(profile: UserProfile) -> bool:
    """Elite level, or at least 3 training years with body fat below 15%."""
    if profile.fitness_level == FitnessLevel.ELITE:
        return True
    return (
        profile.training_years is not None
        and profile.training_years >= 3
        and profile.body_fat_percent is not None
        and 0 < profile.body_fat_percent < 15
    )


def _has_body_fat(profile: UserProfile) -> bool:
    return profile.body_fat_percent is not None and profile.body_fat_percent > 0


def detect_best_bmr_formula(profile: UserProfile) -> BMRFormulaSelection:
    source = profile.body_fat_source

    if source in (BodyFatSource.DEXA, BodyFatSource.BODPOD):
        return BMRFormulaSelection(
            formula=BMRFormula.KATCH_MCARDLE,
            reason="Using Katch-McArdle formula due to accurate body fat measurement (DEXA/Bod Pod)",
            accuracy="±5%",
            confidence=95,
        )

    if is_athletic(profile):
        return BMRFormulaSelection(
            formula=BMRFormula.CUNNINGHAM,
            reason="Using Cunningham formula for advanced athlete with low body fat",
            accuracy="±5%",
            confidence=90,
        )

    if source == BodyFatSource.CALIPERS and _has_body_fat(profile):
        return BMRFormulaSelection(
            formula=BMRFormula.KATCH_MCARDLE,
            reason="Using Katch-McArdle formula based on caliper measurement",
            accuracy="±7%",
            confidence=80,
        )

    if source == BodyFatSource.AI_ESTIMATE and _has_body_fat(profile):
        return BMRFormulaSelection(
            formula=BMRFormula.KATCH_MCARDLE,
            reason="Using Katch-McArdle with AI-estimated body fat",
            accuracy="±10%",
            confidence=70,
        )

    return BMRFormulaSelection(
        formula=BMRFormula.MIFFLIN_ST_JEOR,
        reason="Using Mifflin-St Jeor formula (most accurate for general population without body fat data)",
        accuracy="±10%",
        confidence=85,
    )


def validate_activity_level(
    occupation: Occupation | str | None, level: ActivityLevel
) -> ActivityValidation:
    try:
        occ = Occupation(occupation) if occupation is not None else None
    except ValueError:
        log.debug("unknown_occupation", occupation=occupation)
        occ = None

    minimum = rt.OCCUPATION_MIN_ACTIVITY.get(occ) if occ is not None else None
    if minimum is None:
        return ActivityValidation(is_valid=True)

    if level.ordinal < minimum.ordinal:
        return ActivityValidation(
            is_valid=False,
            message=f'Your occupation requires at least "{minimum.value}" activity level. Please adjust.',
            minimum_level=minimum,
        )
    return ActivityValidation(is_valid=True, minimum_level=minimum)
