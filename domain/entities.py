from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNSPECIFIED = "unspecified"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very_active"

    @property
    def ordinal(self) -> int:
        return list(ActivityLevel).index(self)


class DietType(str, Enum):
    OMNIVORE = "omnivore"
    VEGETARIAN = "vegetarian"
    VEGAN = "vegan"
    PESCATARIAN = "pescatarian"
    KETO = "keto"
    LOW_CARB = "low_carb"
    PALEO = "paleo"
    MEDITERRANEAN = "mediterranean"


class FitnessGoal(str, Enum):
    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    ATHLETIC = "athletic"
    ENDURANCE = "endurance"
    STRENGTH = "strength"


class FitnessLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"
    ELITE = "elite"


class BodyFatSource(str, Enum):
    DEXA = "dexa"  # gold standard
    BODPOD = "bodpod"
    CALIPERS = "calipers"
    AI_ESTIMATE = "ai_estimate"
    MANUAL = "manual"


class Occupation(str, Enum):
    DESK_JOB = "desk_job"
    LIGHT_ACTIVE = "light_active"
    MODERATE_ACTIVE = "moderate_active"
    HEAVY_LABOR = "heavy_labor"
    VERY_ACTIVE = "very_active"


class ClimateZone(str, Enum):
    TROPICAL = "tropical"
    TEMPERATE = "temperate"
    COLD = "cold"
    ARID = "arid"


class Ethnicity(str, Enum):
    ASIAN = "asian"
    CAUCASIAN = "caucasian"
    BLACK_AFRICAN = "black_african"
    HISPANIC = "hispanic"
    MIDDLE_EASTERN = "middle_eastern"
    PACIFIC_ISLANDER = "pacific_islander"
    MIXED = "mixed"
    GENERAL = "general"


class BMRFormula(str, Enum):
    MIFFLIN_ST_JEOR = "mifflin_st_jeor"
    KATCH_MCARDLE = "katch_mcardle"
    CUNNINGHAM = "cunningham"
    HARRIS_BENEDICT = "harris_benedict"


class BMIPopulation(str, Enum):
    ASIAN = "asian"
    AFRICAN = "african"
    STANDARD = "standard"
    ATHLETIC = "athletic"
    HISPANIC = "hispanic"


class HealthRisk(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class Severity(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class GoalKind(str, Enum):
    FAT_LOSS = "fat_loss"
    MUSCLE_GAIN = "muscle_gain"
    MAINTENANCE = "maintenance"
    RECOMP = "recomp"


@dataclass(frozen=True)
class UserProfile:
    # required for base BMR; kept optional so that absence surfaces as MissingFieldError
    age: int | None = None
    gender: Gender | None = None
    weight_kg: float | None = None
    height_cm: float | None = None

    country: str = ""
    state: str | None = None

    body_fat_percent: float | None = None
    body_fat_source: BodyFatSource | None = None

    activity_level: ActivityLevel = ActivityLevel.MODERATE
    occupation: Occupation | None = None
    diet_type: DietType = DietType.OMNIVORE
    goal: FitnessGoal = FitnessGoal.MAINTENANCE

    fitness_level: FitnessLevel | None = None
    training_years: float | None = None

    resting_heart_rate: int | None = None
    measured_max_heart_rate: int | None = None

    # user confirmations for auto-detected context
    ethnicity_override: Ethnicity | None = None
    climate_override: ClimateZone | None = None


@dataclass(frozen=True)
class GoalInput:
    kind: GoalKind
    target_weight_kg: float | None = None
    target_gain_kg: float | None = None
    timeline_weeks: float | None = None
    timeline_months: float | None = None
