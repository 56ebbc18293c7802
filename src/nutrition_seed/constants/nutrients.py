"""
Micronutrient reference data: the single source for every nutrient table.

SEED_NUTRIENTS gives each tracked nutrient a target (adult male 19-30y)
and a persona: the mean and spread of the simulated user's daily intake as
a percent of that target. Some nutrients sit comfortably above target,
some are chronically low, some swing day to day.

FOOD_NUTRIENT_PROFILES gives nutrient amounts per catalog serving for the
foods that carry a ``profile`` key in constants.catalog. Food-item
nutrients and contributor rows are both derived from these profiles.
"""

SEED_NUTRIENTS = [
    # Vitamins
    {"id": "vitamin_a", "name": "Vitamin A", "target": 900, "unit": "mcg", "mean_percent": 85, "std_dev_percent": 20, "per_food_range": (50, 400)},
    {"id": "vitamin_c", "name": "Vitamin C", "target": 90, "unit": "mg", "mean_percent": 110, "std_dev_percent": 30, "per_food_range": (5, 60)},
    {"id": "vitamin_d", "name": "Vitamin D", "target": 15, "unit": "mcg", "mean_percent": 45, "std_dev_percent": 20, "per_food_range": (0.5, 5)},
    {"id": "vitamin_e", "name": "Vitamin E", "target": 15, "unit": "mg", "mean_percent": 75, "std_dev_percent": 25, "per_food_range": (0.5, 5)},
    {"id": "vitamin_k", "name": "Vitamin K", "target": 120, "unit": "mcg", "mean_percent": 90, "std_dev_percent": 35, "per_food_range": (5, 80)},
    {"id": "thiamin", "name": "Thiamin (B1)", "target": 1.2, "unit": "mg", "mean_percent": 105, "std_dev_percent": 20, "per_food_range": (0.05, 0.4)},
    {"id": "riboflavin", "name": "Riboflavin (B2)", "target": 1.3, "unit": "mg", "mean_percent": 110, "std_dev_percent": 20, "per_food_range": (0.05, 0.5)},
    {"id": "niacin", "name": "Niacin (B3)", "target": 16, "unit": "mg", "mean_percent": 120, "std_dev_percent": 25, "per_food_range": (1, 8)},
    {"id": "vitamin_b6", "name": "Vitamin B6", "target": 1.3, "unit": "mg", "mean_percent": 100, "std_dev_percent": 25, "per_food_range": (0.05, 0.5)},
    {"id": "folate", "name": "Folate (B9)", "target": 400, "unit": "mcg", "mean_percent": 70, "std_dev_percent": 25, "per_food_range": (10, 150)},
    {"id": "vitamin_b12", "name": "Vitamin B12", "target": 2.4, "unit": "mcg", "mean_percent": 130, "std_dev_percent": 30, "per_food_range": (0.2, 2)},
    # Minerals
    {"id": "calcium", "name": "Calcium", "target": 1000, "unit": "mg", "mean_percent": 65, "std_dev_percent": 20, "per_food_range": (20, 300)},
    {"id": "iron", "name": "Iron", "target": 8, "unit": "mg", "mean_percent": 95, "std_dev_percent": 25, "per_food_range": (0.5, 4)},
    {"id": "magnesium", "name": "Magnesium", "target": 400, "unit": "mg", "mean_percent": 60, "std_dev_percent": 20, "per_food_range": (10, 100)},
    {"id": "zinc", "name": "Zinc", "target": 11, "unit": "mg", "mean_percent": 90, "std_dev_percent": 20, "per_food_range": (0.5, 5)},
    {"id": "potassium", "name": "Potassium", "target": 3400, "unit": "mg", "mean_percent": 55, "std_dev_percent": 15, "per_food_range": (50, 500)},
    {"id": "sodium", "name": "Sodium", "target": 1500, "unit": "mg", "mean_percent": 160, "std_dev_percent": 30, "per_food_range": (50, 600)},
    {"id": "selenium", "name": "Selenium", "target": 55, "unit": "mcg", "mean_percent": 110, "std_dev_percent": 25, "per_food_range": (5, 30)},
    # Other
    {"id": "fiber", "name": "Fiber", "target": 38, "unit": "g", "mean_percent": 55, "std_dev_percent": 20, "per_food_range": (0.5, 8)},
    {"id": "omega_3_ala", "name": "Omega-3 ALA", "target": 1.6, "unit": "g", "mean_percent": 50, "std_dev_percent": 30, "per_food_range": (0.05, 0.5)},
    {"id": "choline", "name": "Choline", "target": 550, "unit": "mg", "mean_percent": 65, "std_dev_percent": 20, "per_food_range": (10, 120)},
]

NUTRIENTS_BY_ID = {nutrient["id"]: nutrient for nutrient in SEED_NUTRIENTS}

# Amounts per catalog serving, in each nutrient's unit
FOOD_NUTRIENT_PROFILES: dict[str, dict[str, float]] = {
    "chicken_breast": {"vitamin_b6": 0.5, "niacin": 10, "vitamin_b12": 0.3, "iron": 1.0, "zinc": 1.0, "selenium": 25, "choline": 85, "sodium": 75},
    "salmon": {"vitamin_d": 12, "vitamin_b12": 2.5, "niacin": 8, "omega_3_ala": 0.4, "selenium": 35, "potassium": 400, "iron": 0.8},
    "spinach": {"vitamin_a": 141, "vitamin_c": 8.4, "vitamin_k": 145, "folate": 58, "magnesium": 24, "iron": 0.8, "potassium": 167, "fiber": 0.7},
    "eggs": {"vitamin_a": 80, "vitamin_d": 1, "vitamin_b12": 0.55, "riboflavin": 0.25, "selenium": 15, "choline": 150, "iron": 0.9, "zinc": 0.65},
    "greek_yogurt": {"calcium": 250, "vitamin_b12": 1.3, "riboflavin": 0.3, "potassium": 350, "zinc": 1.5, "vitamin_d": 1.5},
    "banana": {"vitamin_b6": 0.4, "vitamin_c": 10, "potassium": 420, "magnesium": 32, "fiber": 3.1},
    "almonds": {"vitamin_e": 26, "magnesium": 285, "calcium": 268, "fiber": 12.5, "iron": 3.6, "zinc": 3.2, "omega_3_ala": 0.07},
    "sweet_potato": {"vitamin_a": 1100, "vitamin_c": 20, "potassium": 540, "fiber": 4, "magnesium": 30, "vitamin_b6": 0.3},
    "broccoli": {"vitamin_c": 90, "vitamin_k": 100, "folate": 60, "fiber": 5.1, "potassium": 290, "calcium": 45, "iron": 0.7},
    "brown_rice": {"thiamin": 0.2, "niacin": 2.6, "magnesium": 85, "selenium": 20, "fiber": 3.5, "iron": 0.8, "zinc": 1.2},
    "beef_steak": {"vitamin_b12": 2.5, "zinc": 5.5, "iron": 3.0, "niacin": 6, "selenium": 28, "vitamin_b6": 0.4, "potassium": 320, "choline": 90},
    "orange": {"vitamin_c": 70, "folate": 40, "potassium": 240, "thiamin": 0.1, "fiber": 3.1, "calcium": 50},
    "lentils": {"folate": 180, "iron": 3.3, "fiber": 7.9, "potassium": 370, "magnesium": 35, "thiamin": 0.2, "zinc": 1.3},
    "milk": {"calcium": 300, "vitamin_d": 3, "vitamin_b12": 1.2, "riboflavin": 0.4, "potassium": 350, "vitamin_a": 150},
    "avocado": {"vitamin_k": 28, "folate": 120, "potassium": 980, "vitamin_c": 20, "vitamin_e": 4.2, "fiber": 10, "magnesium": 60, "omega_3_ala": 0.2},
    "oatmeal": {"thiamin": 0.6, "iron": 4.2, "magnesium": 110, "fiber": 8, "zinc": 3.0, "selenium": 26},
    "tuna": {"vitamin_b12": 2.5, "niacin": 12, "selenium": 65, "vitamin_d": 1.5, "iron": 1.4, "omega_3_ala": 0.2},
    "bell_pepper_red": {"vitamin_c": 150, "vitamin_a": 190, "vitamin_e": 1.6, "folate": 50, "potassium": 210, "vitamin_k": 5},
    "cheddar": {"calcium": 667, "vitamin_a": 333, "vitamin_b12": 1.3, "zinc": 3.3, "sodium": 600},
    "whole_wheat_bread": {"thiamin": 0.15, "niacin": 1.25, "iron": 1.0, "folate": 25, "fiber": 1.9, "magnesium": 20, "selenium": 9, "sodium": 140},
}

# (upper bound exclusive of the next band, status); see intake_status()
_STATUS_BANDS = [
    (50, "deficient"),
    (75, "low"),
    (100, "adequate"),
]


def intake_status(percent_of_target: float) -> str:
    """
    Classify a daily intake by percent of target.

    <50 deficient, <75 low, <100 adequate, <=150 optimal, <=200 high,
    otherwise excessive.
    """
    for upper, status in _STATUS_BANDS:
        if percent_of_target < upper:
            return status
    if percent_of_target <= 150:
        return "optimal"
    if percent_of_target <= 200:
        return "high"
    return "excessive"
