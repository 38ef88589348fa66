"""Population-specific BMI classification.

Each population is a table of half-open bands ``[lower, upper)`` over BMI; the
first band whose upper bound exceeds the value wins. Tables share one
calculator class and differ only in data.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from types import MappingProxyType

from domain.dtos import BMIClassification, BMICutoffs
from domain.entities import BMIPopulation, Ethnicity, HealthRisk
from domain.errors import InvalidInputError, MissingFieldError


@dataclass(frozen=True)
class _Band:
    upper: float
    category: str
    health_risk: HealthRisk
    message: str
    recommendations: tuple[str, ...]


def calculate_bmi(weight_kg: float | None, height_cm: float | None) -> float:
    if weight_kg is None or weight_kg <= 0:
        raise MissingFieldError("weight_kg")
    if height_cm is None or height_cm <= 0:
        raise MissingFieldError("height_cm")
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


@dataclass(frozen=True)
class BMICalculator:
    population: BMIPopulation
    cutoffs: BMICutoffs
    bands: tuple[_Band, ...]

    def calculate(self, weight_kg: float | None, height_cm: float | None) -> float:
        return calculate_bmi(weight_kg, height_cm)

    def get_cutoffs(self) -> BMICutoffs:
        return self.cutoffs

    def get_classification(self, bmi: float) -> BMIClassification:
        if bmi <= 0 or math.isnan(bmi):
            raise InvalidInputError(f"BMI must be positive, got {bmi}")
        band = next(b for b in self.bands if bmi < b.upper)
        return BMIClassification(
            category=band.category,
            health_risk=band.health_risk,
            population=self.population,
            cutoffs=self.cutoffs,
            message=band.message,
            recommendations=band.recommendations,
        )


_BELOW = "Below healthy weight range"
_HEALTHY = "Healthy weight range"
_ABOVE = "Above healthy weight range"
_WELL_ABOVE = "Significantly above healthy range"

_ASIAN = BMICalculator(
    population=BMIPopulation.ASIAN,
    cutoffs=BMICutoffs(
        underweight_max=18.5,
        normal_max=23.0,
        overweight_max=27.5,
        source="WHO Asian-specific cutoffs",
        notes="Lower thresholds for Asian populations due to higher health risks at lower BMI",
    ),
    bands=(
        _Band(18.5, "Underweight", HealthRisk.MODERATE, _BELOW, (
            "Consult healthcare provider",
            "Increase calorie intake gradually",
            "Focus on strength training to build muscle",
            "Monitor for nutritional deficiencies",
        )),
        _Band(23.0, "Normal", HealthRisk.LOW, _HEALTHY, (
            "Maintain current weight",
            "Continue regular exercise",
            "Eat balanced, nutritious meals",
            "Monitor weight quarterly",
        )),
        _Band(27.5, "Overweight", HealthRisk.MODERATE, _ABOVE, (
            "Weight loss recommended (5-10% of body weight)",
            "Increase physical activity to 150+ min/week",
            "Reduce calorie intake by 300-500 kcal/day",
            "Monitor blood pressure and blood sugar",
        )),
        _Band(math.inf, "Obese", HealthRisk.HIGH, _WELL_ABOVE, (
            "Medical consultation strongly advised",
            "Structured weight loss plan needed",
            "Screen for diabetes and cardiovascular disease",
            "Consider registered dietitian consultation",
        )),
    ),
)

_AFRICAN = BMICalculator(
    population=BMIPopulation.AFRICAN,
    cutoffs=BMICutoffs(
        underweight_max=18.5,
        normal_max=27.0,
        overweight_max=32.0,
        source="Population studies on body composition in African populations",
        notes="Higher thresholds reflect greater average lean mass",
    ),
    bands=(
        _Band(18.5, "Underweight", HealthRisk.MODERATE, _BELOW, (
            "Consult healthcare provider",
            "Increase calorie intake",
            "Focus on nutrient-dense foods",
            "Strength training to build muscle",
        )),
        _Band(27.0, "Normal", HealthRisk.LOW, _HEALTHY, (
            "Maintain current weight",
            "Regular physical activity",
            "Balanced nutrition",
            "Annual health checkups",
        )),
        _Band(32.0, "Overweight", HealthRisk.MODERATE, _ABOVE, (
            "Consider gradual weight loss",
            "Increase activity level",
            "Monitor waist circumference",
            "Check blood pressure regularly",
        )),
        _Band(math.inf, "Obese", HealthRisk.HIGH, _WELL_ABOVE, (
            "Medical consultation advised",
            "Comprehensive weight management plan",
            "Screen for metabolic conditions",
            "Consider dietitian support",
        )),
    ),
)

_STANDARD_OBESE_RECS = (
    "Medical consultation strongly advised",
    "Structured weight loss program",
    "Screen for diabetes, heart disease",
    "Consider professional support",
)

_STANDARD = BMICalculator(
    population=BMIPopulation.STANDARD,
    cutoffs=BMICutoffs(
        underweight_max=18.5,
        normal_max=25.0,
        overweight_max=30.0,
        obese_class_ii_min=35.0,
        obese_class_iii_min=40.0,
        source="WHO international classification",
    ),
    bands=(
        _Band(18.5, "Underweight", HealthRisk.MODERATE, _BELOW, (
            "Consult healthcare provider",
            "Increase calorie intake",
            "Build muscle through resistance training",
            "Address potential underlying conditions",
        )),
        _Band(25.0, "Normal", HealthRisk.LOW, _HEALTHY, (
            "Maintain current weight",
            "Regular exercise (150 min/week)",
            "Balanced diet",
            "Regular health screenings",
        )),
        _Band(30.0, "Overweight", HealthRisk.MODERATE, _ABOVE, (
            "Weight loss recommended (5-10% reduction)",
            "Increase physical activity",
            "Reduce calorie intake",
            "Monitor cardiovascular health",
        )),
        _Band(35.0, "Obese Class I", HealthRisk.HIGH, _WELL_ABOVE, _STANDARD_OBESE_RECS),
        _Band(40.0, "Obese Class II", HealthRisk.VERY_HIGH, _WELL_ABOVE, _STANDARD_OBESE_RECS),
        _Band(math.inf, "Obese Class III", HealthRisk.VERY_HIGH, _WELL_ABOVE, _STANDARD_OBESE_RECS),
    ),
)

_ATHLETIC = BMICalculator(
    population=BMIPopulation.ATHLETIC,
    cutoffs=BMICutoffs(
        underweight_max=18.5,
        normal_max=27.0,
        overweight_max=32.0,
        source="Adjusted for high lean mass",
        notes="BMI overestimates adiposity in muscular individuals; prefer body fat assessment",
    ),
    bands=(
        _Band(18.5, "Underweight", HealthRisk.MODERATE, "Below optimal weight for athletes", (
            "Increase calorie intake to support training",
            "Focus on protein and carbohydrate timing",
            "Monitor performance metrics",
            "Consider sports nutritionist consultation",
        )),
        _Band(27.0, "Normal", HealthRisk.LOW, "Healthy weight range for athletes", (
            "Maintain current weight",
            "Continue training program",
            "Adequate nutrition for recovery",
            "Monitor body composition, not just BMI",
        )),
        _Band(32.0, "Overweight", HealthRisk.LOW, "BMI may be misleading due to muscle mass", (
            "Use body fat percentage instead of BMI",
            "Waist-to-height ratio recommended",
            "DEXA scan for accurate body composition",
            "BMI unreliable for muscular individuals",
        )),
        _Band(math.inf, "Obese", HealthRisk.MODERATE, "High BMI - verify with body composition", (
            "Body fat measurement essential",
            "BMI likely overestimating fat mass",
            "Use alternative metrics (waist circumference)",
            "Consult sports medicine professional",
        )),
    ),
)

_HISPANIC = BMICalculator(
    population=BMIPopulation.HISPANIC,
    cutoffs=BMICutoffs(
        underweight_max=18.5,
        normal_max=25.0,
        overweight_max=30.0,
        source="WHO international classification",
        notes="Standard cutoffs with elevated diabetes risk at lower BMI",
    ),
    bands=(
        _Band(18.5, "Underweight", HealthRisk.MODERATE, _BELOW, (
            "Consult healthcare provider",
            "Increase calorie intake",
            "Build muscle mass",
            "Monitor nutritional status",
        )),
        _Band(25.0, "Normal", HealthRisk.LOW, _HEALTHY, (
            "Maintain current weight",
            "Regular physical activity",
            "Balanced diet",
            "Screen for diabetes (higher risk)",
        )),
        _Band(30.0, "Overweight", HealthRisk.MODERATE, _ABOVE, (
            "Weight loss recommended",
            "Increase activity level",
            "Diabetes screening important",
            "Monitor cardiovascular health",
        )),
        _Band(math.inf, "Obese", HealthRisk.HIGH, _WELL_ABOVE, (
            "Medical consultation strongly advised",
            "Comprehensive diabetes screening",
            "Structured weight loss program",
            "Consider cultural dietary modifications",
        )),
    ),
)

BMI_CALCULATORS = MappingProxyType({
    BMIPopulation.ASIAN: _ASIAN,
    BMIPopulation.AFRICAN: _AFRICAN,
    BMIPopulation.STANDARD: _STANDARD,
    BMIPopulation.ATHLETIC: _ATHLETIC,
    BMIPopulation.HISPANIC: _HISPANIC,
})

_ETHNICITY_POPULATIONS = {
    Ethnicity.ASIAN: BMIPopulation.ASIAN,
    Ethnicity.BLACK_AFRICAN: BMIPopulation.AFRICAN,
    Ethnicity.HISPANIC: BMIPopulation.HISPANIC,
}


def get_bmi_calculator(population: BMIPopulation) -> BMICalculator:
    return BMI_CALCULATORS.get(population, _STANDARD)


def population_for(ethnicity: Ethnicity, athletic: bool = False) -> BMIPopulation:
    if athletic:
        return BMIPopulation.ATHLETIC
    return _ETHNICITY_POPULATIONS.get(ethnicity, BMIPopulation.STANDARD)


def healthy_weight_range(height_cm: float, population: BMIPopulation) -> tuple[float, float]:
    """kg range spanning the population's Normal band, rounded to 0.1."""
    if height_cm is None or height_cm <= 0:
        raise MissingFieldError("height_cm")
    cutoffs = get_bmi_calculator(population).get_cutoffs()
    height_m2 = (height_cm / 100) ** 2
    return (
        round(cutoffs.underweight_max * height_m2, 1),
        round(cutoffs.normal_max * height_m2, 1),
    )
