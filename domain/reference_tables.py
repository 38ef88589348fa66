"""Immutable lookup tables shared by the calculators.

Every multiplier the engine applies lives here, keyed by the closed enums from
``domain.entities``. Adding a climate, diet or goal means adding one row per
table below; the calculators never branch on the category names themselves.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

from domain.dtos import ClimateCharacteristics
from domain.entities import (
    ActivityLevel,
    ClimateZone,
    DietType,
    FitnessGoal,
    FitnessLevel,
    Occupation,
)


def _frozen(d: dict) -> Mapping:
    return MappingProxyType(d)


# ── activity ─────────────────────────────────────────────────────────
# WHO/FAO physical activity level multipliers
ACTIVITY_MULTIPLIERS: Mapping[ActivityLevel, float] = _frozen({
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
})

ACTIVITY_DESCRIPTIONS: Mapping[ActivityLevel, str] = _frozen({
    ActivityLevel.SEDENTARY: "Little to no exercise, desk job",
    ActivityLevel.LIGHT: "Light exercise 1-3 days/week",
    ActivityLevel.MODERATE: "Moderate exercise 3-5 days/week",
    ActivityLevel.ACTIVE: "Heavy exercise 6-7 days/week",
    ActivityLevel.VERY_ACTIVE: "Intense daily training or physical labor",
})

# ml/day on top of the 35 ml/kg base
WATER_ACTIVITY_BONUS_ML: Mapping[ActivityLevel, int] = _frozen({
    ActivityLevel.SEDENTARY: 0,
    ActivityLevel.LIGHT: 500,
    ActivityLevel.MODERATE: 1000,
    ActivityLevel.ACTIVE: 1500,
    ActivityLevel.VERY_ACTIVE: 2000,
})

WATER_BASE_ML_PER_KG = 35

# non-exercise VO2max regression index
VO2_ACTIVITY_INDEX: Mapping[ActivityLevel, int] = _frozen({
    ActivityLevel.SEDENTARY: 0,
    ActivityLevel.LIGHT: 2,
    ActivityLevel.MODERATE: 4,
    ActivityLevel.ACTIVE: 6,
    ActivityLevel.VERY_ACTIVE: 7,
})

HEALTH_SCORE_ACTIVITY_POINTS: Mapping[ActivityLevel, int] = _frozen({
    ActivityLevel.SEDENTARY: 5,
    ActivityLevel.LIGHT: 10,
    ActivityLevel.MODERATE: 15,
    ActivityLevel.ACTIVE: 18,
    ActivityLevel.VERY_ACTIVE: 20,
})

# active people tolerate a larger deficit
DEFICIT_ACTIVITY_FACTORS: Mapping[ActivityLevel, float] = _frozen({
    ActivityLevel.SEDENTARY: 0.8,
    ActivityLevel.LIGHT: 0.9,
    ActivityLevel.MODERATE: 1.0,
    ActivityLevel.ACTIVE: 1.1,
    ActivityLevel.VERY_ACTIVE: 1.15,
})

VO2_IMPROVEMENT_PERCENT: Mapping[ActivityLevel, int] = _frozen({
    ActivityLevel.SEDENTARY: 25,
    ActivityLevel.LIGHT: 20,
    ActivityLevel.MODERATE: 15,
    ActivityLevel.ACTIVE: 10,
    ActivityLevel.VERY_ACTIVE: 5,
})


# ── occupation ───────────────────────────────────────────────────────
OCCUPATION_MIN_ACTIVITY: Mapping[Occupation, ActivityLevel | None] = _frozen({
    Occupation.DESK_JOB: None,
    Occupation.LIGHT_ACTIVE: ActivityLevel.LIGHT,
    Occupation.MODERATE_ACTIVE: ActivityLevel.MODERATE,
    Occupation.HEAVY_LABOR: ActivityLevel.ACTIVE,
    Occupation.VERY_ACTIVE: ActivityLevel.VERY_ACTIVE,
})

# occupational NEAT without exercise
OCCUPATION_MULTIPLIERS: Mapping[Occupation, float] = _frozen({
    Occupation.DESK_JOB: 1.25,
    Occupation.LIGHT_ACTIVE: 1.35,
    Occupation.MODERATE_ACTIVE: 1.45,
    Occupation.HEAVY_LABOR: 1.6,
    Occupation.VERY_ACTIVE: 1.7,
})


# ── climate ──────────────────────────────────────────────────────────
CLIMATE_CHARACTERISTICS: Mapping[ClimateZone, ClimateCharacteristics] = _frozen({
    ClimateZone.TROPICAL: ClimateCharacteristics(
        avg_temp_c=28, avg_humidity=75, tdee_multiplier=1.05, water_multiplier=1.50
    ),
    ClimateZone.TEMPERATE: ClimateCharacteristics(
        avg_temp_c=15, avg_humidity=60, tdee_multiplier=1.00, water_multiplier=1.00
    ),
    ClimateZone.COLD: ClimateCharacteristics(
        avg_temp_c=5, avg_humidity=50, tdee_multiplier=1.15, water_multiplier=0.90
    ),
    ClimateZone.ARID: ClimateCharacteristics(
        avg_temp_c=32, avg_humidity=20, tdee_multiplier=1.05, water_multiplier=1.70
    ),
})

CLIMATE_DESCRIPTIONS: Mapping[ClimateZone, str] = _frozen({
    ClimateZone.TROPICAL: "Hot, humid climate (+5% for cooling)",
    ClimateZone.TEMPERATE: "Moderate climate (baseline)",
    ClimateZone.COLD: "Cold climate (+15% for heat production)",
    ClimateZone.ARID: "Hot, dry climate (+5% for heat stress)",
})

TROPICAL_COUNTRIES = frozenset({
    "IN", "TH", "MY", "SG", "ID", "PH", "VN", "LK", "BD", "MM", "LA", "KH",
    "NG", "KE", "TZ", "UG", "GH", "CI", "CM",
    "BR", "CO", "VE", "EC", "PE",
})

COLD_COUNTRIES = frozenset({
    "NO", "SE", "FI", "IS", "GL",
    "CA", "RU", "BY", "UA", "KZ",
    "MN", "EE", "LV", "LT",
})

ARID_COUNTRIES = frozenset({
    "AE", "SA", "QA", "OM", "KW", "BH",
    "EG", "LY", "DZ", "MA", "TN",
    "JO", "SY", "IQ", "YE",
})

_T, _A, _C, _M = ClimateZone.TROPICAL, ClimateZone.ARID, ClimateZone.COLD, ClimateZone.TEMPERATE

STATE_CLIMATES: Mapping[str, Mapping[str, ClimateZone]] = _frozen({
    "IN": _frozen({
        "KL": _T, "TN": _T, "AP": _T, "TS": _T, "GA": _T, "KA": _T,
        "MH": _T, "OR": _T, "WB": _T, "JH": _T, "BR": _T, "AS": _T,
        "RJ": _A, "GJ": _A,
        "UP": _M, "MP": _M, "HR": _M, "PB": _M, "DL": _M,
        "HP": _C, "UK": _C, "JK": _C, "SK": _C,
    }),
    "US": _frozen({
        "FL": _T, "HI": _T,
        "AZ": _A, "NV": _A, "NM": _A, "UT": _A,
        "AK": _C, "MN": _C, "WI": _C, "ND": _C, "SD": _C,
        "MT": _C, "WY": _C, "ME": _C, "VT": _C, "NH": _C,
        **{
            s: _M
            for s in (
                "CA", "NY", "TX", "PA", "IL", "OH", "GA", "NC", "MI", "NJ",
                "VA", "WA", "MA", "IN", "MO", "TN", "MD", "CO", "SC", "AL",
                "LA", "KY", "OR", "OK", "CT", "IA", "MS", "AR", "KS", "NE",
                "WV", "ID", "RI", "DE",
            )
        },
    }),
})


# ── population sets ──────────────────────────────────────────────────
SOUTH_ASIAN = frozenset({"IN", "PK", "BD", "LK", "NP", "BT", "MV"})
EAST_ASIAN = frozenset({"CN", "JP", "KR", "TW", "MN"})
SOUTHEAST_ASIAN = frozenset({"TH", "VN", "ID", "MY", "SG", "PH", "MM", "KH", "LA", "BN"})

CAUCASIAN = frozenset({
    "GB", "DE", "FR", "IT", "ES", "NL", "BE", "AT", "CH", "SE", "NO", "DK", "FI",
    "PL", "CZ", "SK", "HU", "RO", "BG", "HR", "SI", "RS",
    "RU", "UA", "BY",
    "GR", "PT", "IE", "AL", "MK", "BA", "ME",
    "AU", "NZ",
})

BLACK_AFRICAN = frozenset({
    "NG", "KE", "TZ", "UG", "GH", "CI", "CM", "ZM", "ZW", "MW",
    "SN", "ML", "BF", "NE", "TD", "CF", "SD", "SS", "ER", "ET", "SO",
    "CD", "CG", "GA", "AO", "MZ", "BW", "NA", "ZA", "LS", "SZ",
})

HISPANIC = frozenset({
    "MX", "CO", "AR", "PE", "VE", "CL", "EC", "GT", "CU", "BO", "DO", "HN",
    "PY", "SV", "NI", "CR", "PA", "UY", "PR",
})

MIDDLE_EASTERN = frozenset({
    "SA", "AE", "QA", "KW", "OM", "BH", "YE",
    "IR", "IQ", "SY", "JO", "LB", "IL", "PS", "TR",
    "EG", "LY", "TN", "DZ", "MA",
})

PACIFIC_ISLANDER = frozenset({"FJ", "TO", "WS", "PG", "SB", "VU", "NC", "PF"})

HIGH_DIVERSITY = frozenset({"US", "CA", "BR", "ZA"})


# ── nutrition ────────────────────────────────────────────────────────
# g protein per kg body weight
PROTEIN_GOAL_MULTIPLIERS: Mapping[FitnessGoal, float] = _frozen({
    FitnessGoal.FAT_LOSS: 2.4,
    FitnessGoal.MUSCLE_GAIN: 2.0,
    FitnessGoal.MAINTENANCE: 1.8,
    FitnessGoal.ATHLETIC: 2.2,
    FitnessGoal.ENDURANCE: 1.6,
    FitnessGoal.STRENGTH: 2.2,
})

# plant protein bioavailability compensation
PROTEIN_DIET_MULTIPLIERS: Mapping[DietType, float] = _frozen({
    DietType.OMNIVORE: 1.0,
    DietType.PESCATARIAN: 1.0,
    DietType.VEGETARIAN: 1.15,
    DietType.VEGAN: 1.25,
    DietType.KETO: 1.0,
    DietType.LOW_CARB: 1.0,
    DietType.PALEO: 1.0,
    DietType.MEDITERRANEAN: 1.0,
})

# share of *total* calories fixed as fat; diets absent here split the post-protein remainder
FAT_SHARE_OF_TOTAL: Mapping[DietType, float] = _frozen({
    DietType.LOW_CARB: 0.45,
    DietType.PALEO: 0.35,
    DietType.MEDITERRANEAN: 0.35,
})

KETO_FAT_SHARE = 0.70
KETO_CARB_SHARE = 0.05
BALANCED_FAT_SHARE_OF_REMAINDER = 0.30

KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARB = 4
KCAL_PER_G_FAT = 9
KCAL_PER_KG_FAT = 7700


# ── muscle gain ──────────────────────────────────────────────────────
# kg/month (male, female)
MUSCLE_GAIN_MONTHLY_KG: Mapping[FitnessLevel, tuple[float, float]] = _frozen({
    FitnessLevel.BEGINNER: (1.0, 0.5),
    FitnessLevel.INTERMEDIATE: (0.5, 0.25),
    FitnessLevel.ADVANCED: (0.25, 0.125),
    FitnessLevel.ELITE: (0.1, 0.05),
})
