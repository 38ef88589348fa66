from domain.use_cases.calculate_metrics import DailyIntake, calculate_all_metrics, recalculate_metrics
from domain.use_cases.export_metrics import export_metrics
from domain.use_cases.validate_goal import validate_goal

__all__ = [
    "DailyIntake",
    "calculate_all_metrics",
    "export_metrics",
    "recalculate_metrics",
    "validate_goal",
]
