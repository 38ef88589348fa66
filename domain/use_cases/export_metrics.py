from __future__ import annotations

import json

from domain.dtos import ComprehensiveHealthMetrics


def export_metrics(metrics: ComprehensiveHealthMetrics) -> str:
    """Compact JSON summary for sharing; camelCase keys as consumed by the client apps."""
    payload = {
        "summary": {
            "dailyCalories": metrics.daily_calories,
            "protein": metrics.macros.protein_g,
            "carbs": metrics.macros.carbs_g,
            "fat": metrics.macros.fat_g,
            "water": f"{metrics.water_ml / 1000:.1f}L",
            "bmi": f"{metrics.bmi:.1f}",
            "bmr": round(metrics.bmr),
        },
        "context": {
            "climate": metrics.climate.climate.value,
            "ethnicity": metrics.ethnicity.ethnicity.value,
            "formula": metrics.bmr_formula.formula.value,
        },
        "calculationDate": metrics.calculated_at.isoformat(),
    }
    return json.dumps(payload, indent=2, ensure_ascii=False)
