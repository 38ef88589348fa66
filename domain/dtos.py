from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from domain.entities import (
    ActivityLevel,
    BMIPopulation,
    BMRFormula,
    ClimateZone,
    Ethnicity,
    HealthRisk,
    Severity,
)


DetectionSource = Literal["state_table", "country_table", "default", "user"]
HealthRating = Literal["poor", "fair", "good", "very_good", "excellent"]


# ── context detection ────────────────────────────────────────────────
@dataclass(frozen=True)
class ClimateCharacteristics:
    avg_temp_c: float
    avg_humidity: float
    tdee_multiplier: float
    water_multiplier: float


@dataclass(frozen=True)
class ClimateDetectionResult:
    climate: ClimateZone
    confidence: int
    source: DetectionSource
    should_ask_user: bool
    characteristics: ClimateCharacteristics
    message: str | None = None


@dataclass(frozen=True)
class EthnicityDetectionResult:
    ethnicity: Ethnicity
    confidence: int
    should_ask_user: bool
    message: str | None = None


@dataclass(frozen=True)
class BMRFormulaSelection:
    formula: BMRFormula
    reason: str
    accuracy: str
    confidence: int


@dataclass(frozen=True)
class ActivityValidation:
    is_valid: bool
    message: str | None = None
    minimum_level: ActivityLevel | None = None


# ── core calculators ─────────────────────────────────────────────────
@dataclass(frozen=True)
class BMICutoffs:
    underweight_max: float
    normal_max: float
    overweight_max: float
    obese_class_ii_min: float | None = None
    obese_class_iii_min: float | None = None
    source: str = ""
    notes: str = ""

    @property
    def obese_min(self) -> float:
        return self.overweight_max


@dataclass(frozen=True)
class BMIClassification:
    category: str
    health_risk: HealthRisk
    population: BMIPopulation
    cutoffs: BMICutoffs
    message: str
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class TDEEBreakdown:
    bmr: float
    activity_multiplier: float
    climate_multiplier: float
    activity_tdee: int
    final_tdee: int


@dataclass(frozen=True)
class WaterBreakdown:
    base_ml: int
    activity_ml: int
    before_climate_ml: int
    climate_multiplier: float
    final_ml: int


@dataclass(frozen=True)
class BMRBreakdown:
    formula: BMRFormula
    raw_bmr: float
    value: int
    accuracy: str


@dataclass(frozen=True)
class CalculationBreakdown:
    bmr: BMRBreakdown
    tdee: TDEEBreakdown
    water: WaterBreakdown


@dataclass(frozen=True)
class HydrationAssessment:
    adequate: bool
    percentage: int
    message: str


@dataclass(frozen=True)
class MacroSplit:
    protein_g: int
    carbs_g: int
    fat_g: int
    calories: int
    protein_percent: int
    carbs_percent: int
    fat_percent: int


@dataclass(frozen=True)
class MacroValidation:
    valid: bool
    issues: tuple[str, ...]
    total_calories: int
    variance: int


@dataclass(frozen=True)
class MealMacros:
    meal: str
    protein_g: int
    carbs_g: int
    fat_g: int


@dataclass(frozen=True)
class DietRecommendations:
    protein_sources: tuple[str, ...]
    fat_sources: tuple[str, ...]
    carb_sources: tuple[str, ...]
    tips: tuple[str, ...]


# ── advanced metrics ─────────────────────────────────────────────────
@dataclass(frozen=True)
class MuscleGainLimits:
    max_monthly_kg: float
    max_weekly_kg: float
    max_yearly_kg: float
    experience_level: str
    confidence_level: Literal["low", "medium", "high"]
    recommendation: str


@dataclass(frozen=True)
class SafeDeficit:
    min_deficit: int
    max_deficit: int
    recommended_deficit: int


@dataclass(frozen=True)
class HeartRateZone:
    name: str
    min_bpm: int
    max_bpm: int
    intensity: str
    purpose: str


@dataclass(frozen=True)
class HeartRateZones:
    zones: tuple[HeartRateZone, ...]
    max_heart_rate: int
    resting_heart_rate: int
    max_hr_formula: str
    method: str = "Karvonen"


@dataclass(frozen=True)
class RestingHeartRateAssessment:
    classification: str
    description: str
    health_implications: str


@dataclass(frozen=True)
class VO2MaxEstimate:
    vo2max: float
    classification: str
    percentile: int
    description: str
    recommendations: tuple[str, ...] = ()


@dataclass(frozen=True)
class ScoreComponent:
    category: str
    score: int
    max_score: int


@dataclass(frozen=True)
class HealthScore:
    total_score: int
    rating: HealthRating
    grade: str
    components: tuple[ScoreComponent, ...]
    recommendations: tuple[str, ...]


# ── goals ────────────────────────────────────────────────────────────
@dataclass(frozen=True)
class GoalValidationResult:
    valid: bool
    severity: Severity
    message: str
    achievement_probability: int | None = None
    suggestions: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    adjusted_timeline: int | None = None
    weekly_rate: float | None = None
    allow_override: bool = False


# ── aggregate ────────────────────────────────────────────────────────
@dataclass(frozen=True)
class ComprehensiveHealthMetrics:
    bmr: int
    bmi: float
    bmi_classification: BMIClassification
    tdee: int
    daily_calories: int
    water_ml: int
    macros: MacroSplit
    health_score: HealthScore

    climate: ClimateDetectionResult
    ethnicity: EthnicityDetectionResult
    bmr_formula: BMRFormulaSelection
    breakdown: CalculationBreakdown
    calculated_at: datetime

    heart_rate_zones: HeartRateZones | None = None
    resting_heart_rate: RestingHeartRateAssessment | None = None
    vo2max: VO2MaxEstimate | None = None
    muscle_gain_limits: MuscleGainLimits | None = None
    activity_validation: ActivityValidation | None = None
    notes: tuple[str, ...] = field(default_factory=tuple)
