"""
Bundled reference catalog: foods, restaurants and restaurant menu items.

These rows ship with the app (source='bundled') and are never deleted by
the clear engine. Meal templates, favorites and nutrient profiles refer to
foods by the ids below.

Nutrition is per serving (serving_size x serving_unit).
"""

BUNDLED_FOODS = [
    # Proteins
    {"id": "seed-001", "name": "Chicken Breast, grilled", "calories": 165, "protein": 31.0, "carbs": 0.0, "fat": 3.6, "serving_size": 100, "serving_unit": "g", "profile": "chicken_breast"},
    {"id": "seed-002", "name": "Chicken Thigh, roasted", "calories": 209, "protein": 26.0, "carbs": 0.0, "fat": 10.9, "serving_size": 100, "serving_unit": "g", "profile": None},
    {"id": "seed-004", "name": "Egg, large", "calories": 72, "protein": 6.3, "carbs": 0.4, "fat": 4.8, "serving_size": 1, "serving_unit": "egg", "profile": "eggs"},
    {"id": "seed-008", "name": "Beef Sirloin Steak", "calories": 206, "protein": 29.0, "carbs": 0.0, "fat": 9.2, "serving_size": 100, "serving_unit": "g", "profile": "beef_steak"},
    {"id": "seed-011", "name": "Turkey Breast, sliced", "calories": 104, "protein": 17.0, "carbs": 4.2, "fat": 1.7, "serving_size": 100, "serving_unit": "g", "profile": None},
    {"id": "seed-012", "name": "Ground Turkey, 93% lean", "calories": 170, "protein": 21.0, "carbs": 0.0, "fat": 9.4, "serving_size": 100, "serving_unit": "g", "profile": None},
    {"id": "seed-013", "name": "Salmon, wild", "calories": 182, "protein": 25.4, "carbs": 0.0, "fat": 8.1, "serving_size": 100, "serving_unit": "g", "profile": "salmon"},
    {"id": "seed-015", "name": "Tuna, canned in water", "calories": 116, "protein": 25.5, "carbs": 0.0, "fat": 0.8, "serving_size": 100, "serving_unit": "g", "profile": "tuna"},
    # Fruit
    {"id": "seed-024", "name": "Banana, medium", "calories": 105, "protein": 1.3, "carbs": 27.0, "fat": 0.4, "serving_size": 1, "serving_unit": "medium", "profile": "banana"},
    {"id": "seed-025", "name": "Apple, medium", "calories": 95, "protein": 0.5, "carbs": 25.1, "fat": 0.3, "serving_size": 1, "serving_unit": "medium", "profile": None},
    {"id": "seed-026", "name": "Orange", "calories": 62, "protein": 1.2, "carbs": 15.4, "fat": 0.2, "serving_size": 1, "serving_unit": "medium", "profile": "orange"},
    {"id": "seed-028", "name": "Blueberries", "calories": 84, "protein": 1.1, "carbs": 21.4, "fat": 0.5, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-034", "name": "Avocado", "calories": 240, "protein": 3.0, "carbs": 12.8, "fat": 22.0, "serving_size": 1, "serving_unit": "whole", "profile": "avocado"},
    # Vegetables
    {"id": "seed-036", "name": "Broccoli, raw", "calories": 31, "protein": 2.5, "carbs": 6.0, "fat": 0.3, "serving_size": 1, "serving_unit": "cup", "profile": "broccoli"},
    {"id": "seed-037", "name": "Broccoli, steamed", "calories": 55, "protein": 3.7, "carbs": 11.2, "fat": 0.6, "serving_size": 1, "serving_unit": "cup", "profile": "broccoli"},
    {"id": "seed-038", "name": "Spinach, raw", "calories": 7, "protein": 0.9, "carbs": 1.1, "fat": 0.1, "serving_size": 1, "serving_unit": "cup", "profile": "spinach"},
    {"id": "seed-041", "name": "Red Bell Pepper", "calories": 37, "protein": 1.2, "carbs": 7.2, "fat": 0.4, "serving_size": 1, "serving_unit": "medium", "profile": "bell_pepper_red"},
    {"id": "seed-043", "name": "Tomato", "calories": 22, "protein": 1.1, "carbs": 4.8, "fat": 0.2, "serving_size": 1, "serving_unit": "medium", "profile": None},
    {"id": "seed-044", "name": "Sweet Potato, baked", "calories": 103, "protein": 2.3, "carbs": 23.6, "fat": 0.2, "serving_size": 1, "serving_unit": "medium", "profile": "sweet_potato"},
    {"id": "seed-045", "name": "Potato, baked", "calories": 161, "protein": 4.3, "carbs": 36.6, "fat": 0.2, "serving_size": 1, "serving_unit": "medium", "profile": None},
    {"id": "seed-046", "name": "Asparagus", "calories": 27, "protein": 2.9, "carbs": 5.2, "fat": 0.2, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-047", "name": "Green Beans", "calories": 44, "protein": 2.4, "carbs": 9.9, "fat": 0.4, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-049", "name": "Zucchini", "calories": 33, "protein": 2.4, "carbs": 6.1, "fat": 0.6, "serving_size": 1, "serving_unit": "medium", "profile": None},
    # Grains and legumes
    {"id": "seed-052", "name": "Lentils, cooked", "calories": 230, "protein": 17.9, "carbs": 39.9, "fat": 0.8, "serving_size": 1, "serving_unit": "cup", "profile": "lentils"},
    {"id": "seed-054", "name": "Brown Rice, cooked", "calories": 216, "protein": 5.0, "carbs": 44.8, "fat": 1.8, "serving_size": 1, "serving_unit": "cup", "profile": "brown_rice"},
    {"id": "seed-055", "name": "Quinoa, cooked", "calories": 222, "protein": 8.1, "carbs": 39.4, "fat": 3.6, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-057", "name": "Rolled Oats", "calories": 307, "protein": 10.7, "carbs": 54.8, "fat": 5.3, "serving_size": 1, "serving_unit": "cup", "profile": "oatmeal"},
    {"id": "seed-058", "name": "Pasta, cooked", "calories": 221, "protein": 8.1, "carbs": 43.2, "fat": 1.3, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-059", "name": "Whole Wheat Bread", "calories": 81, "protein": 4.0, "carbs": 13.8, "fat": 1.1, "serving_size": 1, "serving_unit": "slice", "profile": "whole_wheat_bread"},
    {"id": "seed-061", "name": "Flour Tortilla", "calories": 146, "protein": 3.9, "carbs": 24.6, "fat": 3.6, "serving_size": 1, "serving_unit": "tortilla", "profile": None},
    # Dairy
    {"id": "seed-063", "name": "Greek Yogurt, nonfat", "calories": 100, "protein": 17.3, "carbs": 6.1, "fat": 0.7, "serving_size": 170, "serving_unit": "g", "profile": "greek_yogurt"},
    {"id": "seed-066", "name": "Milk, 2%", "calories": 122, "protein": 8.1, "carbs": 11.7, "fat": 4.8, "serving_size": 1, "serving_unit": "cup", "profile": "milk"},
    {"id": "seed-071", "name": "Cheddar Cheese", "calories": 403, "protein": 24.9, "carbs": 1.3, "fat": 33.1, "serving_size": 100, "serving_unit": "g", "profile": "cheddar"},
    {"id": "seed-074", "name": "Cream Cheese", "calories": 342, "protein": 5.9, "carbs": 4.1, "fat": 34.2, "serving_size": 100, "serving_unit": "g", "profile": None},
    # Nuts and fats
    {"id": "seed-076", "name": "Almonds", "calories": 579, "protein": 21.2, "carbs": 21.6, "fat": 49.9, "serving_size": 100, "serving_unit": "g", "profile": "almonds"},
    {"id": "seed-080", "name": "Peanut Butter", "calories": 588, "protein": 25.1, "carbs": 19.6, "fat": 50.4, "serving_size": 100, "serving_unit": "g", "profile": None},
    {"id": "seed-082", "name": "Olive Oil", "calories": 119, "protein": 0.0, "carbs": 0.0, "fat": 13.5, "serving_size": 1, "serving_unit": "tbsp", "profile": None},
    # Prepared and packaged
    {"id": "seed-103", "name": "Caesar Salad with Chicken", "calories": 130, "protein": 11.0, "carbs": 5.0, "fat": 7.5, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-104", "name": "Protein Shake", "calories": 160, "protein": 30.0, "carbs": 4.0, "fat": 2.5, "serving_size": 1, "serving_unit": "scoop", "profile": None},
    {"id": "seed-105", "name": "Protein Bar", "calories": 200, "protein": 20.0, "carbs": 22.0, "fat": 7.0, "serving_size": 1, "serving_unit": "bar", "profile": None},
    {"id": "seed-106", "name": "Granola", "calories": 489, "protein": 10.0, "carbs": 64.0, "fat": 20.0, "serving_size": 100, "serving_unit": "g", "profile": None},
    {"id": "seed-115", "name": "Plain Bagel", "calories": 277, "protein": 11.0, "carbs": 55.0, "fat": 1.4, "serving_size": 1, "serving_unit": "bagel", "profile": None},
    # Drinks
    {"id": "seed-120", "name": "Coffee, black", "calories": 2, "protein": 0.3, "carbs": 0.0, "fat": 0.0, "serving_size": 1, "serving_unit": "cup", "profile": None},
    {"id": "seed-121", "name": "Latte, whole milk", "calories": 190, "protein": 10.0, "carbs": 15.0, "fat": 10.0, "serving_size": 16, "serving_unit": "fl oz", "profile": None},
]

FOODS_BY_ID = {food["id"]: food for food in BUNDLED_FOODS}

BUNDLED_RESTAURANTS = [
    {"id": "rest-chipotle", "name": "Chipotle", "slug": "chipotle"},
    {"id": "rest-panera", "name": "Panera Bread", "slug": "panera-bread"},
    {"id": "rest-subway", "name": "Subway", "slug": "subway"},
]

BUNDLED_RESTAURANT_FOODS = [
    {"id": "rf-chipotle-1", "restaurant_id": "rest-chipotle", "name": "Chicken Burrito Bowl", "calories": 665, "protein": 45, "carbohydrates": 68, "fat": 24},
    {"id": "rf-chipotle-2", "restaurant_id": "rest-chipotle", "name": "Steak Salad", "calories": 480, "protein": 38, "carbohydrates": 22, "fat": 27},
    {"id": "rf-chipotle-3", "restaurant_id": "rest-chipotle", "name": "Chips & Guacamole", "calories": 770, "protein": 9, "carbohydrates": 81, "fat": 47},
    {"id": "rf-panera-1", "restaurant_id": "rest-panera", "name": "Fuji Apple Salad with Chicken", "calories": 550, "protein": 32, "carbohydrates": 34, "fat": 32},
    {"id": "rf-panera-2", "restaurant_id": "rest-panera", "name": "Broccoli Cheddar Soup (cup)", "calories": 230, "protein": 9, "carbohydrates": 16, "fat": 14},
    {"id": "rf-panera-3", "restaurant_id": "rest-panera", "name": "Turkey Avocado BLT", "calories": 720, "protein": 41, "carbohydrates": 55, "fat": 37},
    {"id": "rf-subway-1", "restaurant_id": "rest-subway", "name": "6\" Turkey Breast Sub", "calories": 270, "protein": 18, "carbohydrates": 41, "fat": 3.5},
    {"id": "rf-subway-2", "restaurant_id": "rest-subway", "name": "6\" Steak & Cheese Sub", "calories": 340, "protein": 24, "carbohydrates": 41, "fat": 10},
    {"id": "rf-subway-3", "restaurant_id": "rest-subway", "name": "Rotisserie Chicken Salad", "calories": 140, "protein": 21, "carbohydrates": 7, "fat": 3.5},
]
