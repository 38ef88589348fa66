from __future__ import annotations

from domain import reference_tables as rt
from domain.dtos import DietRecommendations, MacroSplit, MacroValidation, MealMacros
from domain.entities import DietType, FitnessGoal
from domain.errors import InvalidInputError, MacroConfigurationError, MissingFieldError


def calculate_protein(weight_kg: float, goal: FitnessGoal, diet: DietType) -> int:
    """Daily protein grams: body weight x goal factor x plant-protein compensation."""
    if weight_kg is None or weight_kg <= 0:
        raise MissingFieldError("weight_kg")
    return round(weight_kg * rt.PROTEIN_GOAL_MULTIPLIERS[goal] * rt.PROTEIN_DIET_MULTIPLIERS[diet])


def minimum_protein(weight_kg: float) -> int:
    # floor that prevents muscle wasting
    return round(weight_kg * 1.2)


def _pct(part_kcal: float, total_kcal: float) -> int:
    return round(part_kcal / total_kcal * 100)


def _split(calories: int, protein_kcal: float, fat_kcal: float, carb_kcal: float) -> MacroSplit:
    return MacroSplit(
        protein_g=round(protein_kcal / rt.KCAL_PER_G_PROTEIN),
        carbs_g=round(carb_kcal / rt.KCAL_PER_G_CARB),
        fat_g=round(fat_kcal / rt.KCAL_PER_G_FAT),
        calories=calories,
        protein_percent=_pct(protein_kcal, calories),
        carbs_percent=_pct(carb_kcal, calories),
        fat_percent=_pct(fat_kcal, calories),
    )


def calculate_macro_split(calories: float, protein_g: float, diet: DietType) -> MacroSplit:
    if calories is None or calories <= 0:
        raise InvalidInputError("Calories must be positive")
    calories = round(calories)
    protein_kcal = protein_g * rt.KCAL_PER_G_PROTEIN
    if protein_kcal >= calories:
        raise MacroConfigurationError(
            f"Protein calories ({protein_kcal:.0f}) exceed total calories ({calories})"
        )

    if diet == DietType.KETO:
        fat_kcal = calories * rt.KETO_FAT_SHARE
        carb_kcal = calories * rt.KETO_CARB_SHARE
        # protein absorbs whatever is left
        return _split(calories, calories - fat_kcal - carb_kcal, fat_kcal, carb_kcal)

    fat_share = rt.FAT_SHARE_OF_TOTAL.get(diet)
    if fat_share is not None:
        fat_kcal = calories * fat_share
        carb_kcal = max(0.0, calories - protein_kcal - fat_kcal)
        return _split(calories, protein_kcal, fat_kcal, carb_kcal)

    remaining = calories - protein_kcal
    fat_kcal = remaining * rt.BALANCED_FAT_SHARE_OF_REMAINDER
    carb_kcal = remaining - fat_kcal
    return _split(calories, protein_kcal, fat_kcal, carb_kcal)


def validate_macros(split: MacroSplit, calories: float) -> MacroValidation:
    issues: list[str] = []
    total = (
        split.protein_g * rt.KCAL_PER_G_PROTEIN
        + split.fat_g * rt.KCAL_PER_G_FAT
        + split.carbs_g * rt.KCAL_PER_G_CARB
    )
    variance = abs(total - calories)

    if calories > 0 and variance / calories * 100 > 5:
        issues.append(f"Macro calories ({total}) don't match target ({round(calories)})")
    if split.protein_g < 40:
        issues.append("Protein too low (minimum 40g recommended)")
    if split.fat_g < 20:
        issues.append("Fat too low (minimum 20g for hormone production)")
    if split.carbs_g < 0:
        issues.append("Carbs cannot be negative")

    return MacroValidation(
        valid=not issues,
        issues=tuple(issues),
        total_calories=round(total),
        variance=round(variance),
    )


def meal_distribution(split: MacroSplit, meals: int = 3) -> list[MealMacros]:
    if meals < 1:
        raise InvalidInputError("At least one meal is required")
    return [
        MealMacros(
            meal=f"Meal {i}",
            protein_g=round(split.protein_g / meals),
            carbs_g=round(split.carbs_g / meals),
            fat_g=round(split.fat_g / meals),
        )
        for i in range(1, meals + 1)
    ]


_DIET_RECOMMENDATIONS = {
    DietType.OMNIVORE: DietRecommendations(
        protein_sources=("Chicken", "Fish", "Eggs", "Greek yogurt", "Lean beef"),
        fat_sources=("Olive oil", "Avocado", "Nuts", "Fatty fish"),
        carb_sources=("Brown rice", "Oats", "Sweet potato", "Quinoa", "Fruits"),
        tips=("Balance animal and plant proteins", "Choose lean cuts of meat"),
    ),
    DietType.PESCATARIAN: DietRecommendations(
        protein_sources=("Salmon", "Tuna", "Shrimp", "Eggs", "Greek yogurt"),
        fat_sources=("Fatty fish", "Olive oil", "Avocado", "Nuts"),
        carb_sources=("Brown rice", "Quinoa", "Oats", "Legumes", "Fruits"),
        tips=("Eat fish 2-3 times per week", "Include omega-3 rich fish"),
    ),
    DietType.VEGETARIAN: DietRecommendations(
        protein_sources=("Eggs", "Greek yogurt", "Cottage cheese", "Legumes", "Tofu"),
        fat_sources=("Nuts", "Seeds", "Avocado", "Olive oil", "Cheese"),
        carb_sources=("Quinoa", "Brown rice", "Oats", "Legumes", "Fruits"),
        tips=("Combine different plant proteins", "Consider protein powder supplement"),
    ),
    DietType.VEGAN: DietRecommendations(
        protein_sources=("Tempeh", "Tofu", "Legumes", "Seitan", "Quinoa", "Protein powder"),
        fat_sources=("Nuts", "Seeds", "Avocado", "Olive oil", "Nut butter"),
        carb_sources=("Brown rice", "Oats", "Quinoa", "Sweet potato", "Fruits"),
        tips=(
            "Combine complementary proteins (rice + beans)",
            "Consider B12 and iron supplementation",
            "Eat 25% more protein than omnivores",
        ),
    ),
    DietType.KETO: DietRecommendations(
        protein_sources=("Fatty fish", "Eggs", "Meat", "Cheese", "Greek yogurt"),
        fat_sources=("MCT oil", "Butter", "Avocado", "Nuts", "Fatty cuts of meat"),
        carb_sources=("Leafy greens", "Avocado", "Berries (limited)", "Nuts"),
        tips=("Stay under 50g carbs per day", "Prioritize healthy fats", "Monitor ketone levels"),
    ),
    DietType.LOW_CARB: DietRecommendations(
        protein_sources=("Chicken", "Fish", "Eggs", "Lean beef", "Greek yogurt"),
        fat_sources=("Olive oil", "Avocado", "Nuts", "Fatty fish"),
        carb_sources=("Vegetables", "Berries", "Small portions of whole grains"),
        tips=("Limit carbs to 50-150g/day", "Focus on non-starchy vegetables"),
    ),
    DietType.PALEO: DietRecommendations(
        protein_sources=("Grass-fed meat", "Wild fish", "Eggs", "Poultry"),
        fat_sources=("Coconut oil", "Avocado", "Nuts", "Olive oil"),
        carb_sources=("Sweet potato", "Fruits", "Vegetables", "Nuts"),
        tips=("Avoid processed foods", "No grains or legumes", "Focus on whole foods"),
    ),
    DietType.MEDITERRANEAN: DietRecommendations(
        protein_sources=("Fish", "Chicken", "Eggs", "Legumes", "Greek yogurt"),
        fat_sources=("Olive oil", "Nuts", "Fatty fish", "Avocado"),
        carb_sources=("Whole grains", "Fruits", "Vegetables", "Legumes"),
        tips=(
            "Use olive oil as primary fat",
            "Eat fish 2-3 times per week",
            "Include plenty of vegetables",
        ),
    ),
}


def diet_recommendations(diet: DietType) -> DietRecommendations:
    return _DIET_RECOMMENDATIONS[diet]
