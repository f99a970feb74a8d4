FOODS_DATA = [
    # Breakfast
    {"name": "Idli", "category": "Breakfast", "calories": 39, "protein_g": 1.5, "carbs_g": 8, "fats_g": 0.2, "fiber_g": 0.3, "sodium_mg": 120, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["south_indian"], "meal_suitability_tags": []},
    {"name": "Dosa", "category": "Breakfast", "calories": 89, "protein_g": 2, "carbs_g": 12, "fats_g": 3.5, "fiber_g": 0.5, "sodium_mg": 150, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["south_indian"], "meal_suitability_tags": []},
    {"name": "Upma", "category": "Breakfast", "calories": 110, "protein_g": 3, "carbs_g": 17, "fats_g": 3.5, "fiber_g": 1, "sodium_mg": 220, "dietary_category": "vegetarian", "processing_level": "minimally_processed", "cuisine_tags": ["south_indian"], "meal_suitability_tags": []},
    {"name": "Poha", "category": "Breakfast", "calories": 130, "protein_g": 2.5, "carbs_g": 20, "fats_g": 4, "fiber_g": 1, "sodium_mg": 180, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Aloo Paratha", "category": "Breakfast", "calories": 280, "protein_g": 6, "carbs_g": 35, "fats_g": 13, "fiber_g": 2.5, "sodium_mg": 350, "dietary_category": "vegetarian", "processing_level": "processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Egg Omelette", "category": "Breakfast", "calories": 154, "protein_g": 11, "carbs_g": 1, "fats_g": 12, "sodium_mg": 310, "dietary_category": "veg_with_egg", "processing_level": "minimally_processed", "cuisine_tags": ["continental"], "meal_suitability_tags": []},
    {"name": "Boiled Eggs (2)", "category": "Breakfast", "calories": 155, "protein_g": 13, "carbs_g": 1.1, "fats_g": 11, "sodium_mg": 124, "dietary_category": "veg_with_egg", "processing_level": "whole", "cuisine_tags": ["continental"], "meal_suitability_tags": []},
    {"name": "Besan Cheela", "category": "Breakfast", "calories": 180, "protein_g": 7, "carbs_g": 18, "fats_g": 8, "fiber_g": 3, "sodium_mg": 200, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Oatmeal with Berries", "category": "Breakfast", "calories": 320, "protein_g": 12, "carbs_g": 58, "fats_g": 6, "fiber_g": 8, "sugar_g": 12, "sodium_mg": 90, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["continental"], "meal_suitability_tags": []},

    # Grains
    {"name": "Brown Rice (Cooked)", "category": "Grains", "calories": 111, "protein_g": 2.6, "carbs_g": 23, "fats_g": 0.9, "fiber_g": 1.8, "sodium_mg": 5, "dietary_category": "vegan", "processing_level": "whole", "cuisine_tags": [], "meal_suitability_tags": []},
    {"name": "Chapati (Wheat Roti)", "category": "Grains", "calories": 71, "protein_g": 2.7, "carbs_g": 15, "fats_g": 0.4, "fiber_g": 1.9, "sodium_mg": 120, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Butter Naan", "category": "Grains", "calories": 310, "protein_g": 8, "carbs_g": 45, "fats_g": 10, "fiber_g": 2, "sodium_mg": 480, "dietary_category": "vegetarian", "processing_level": "processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Veg Fried Rice", "category": "Grains", "calories": 330, "protein_g": 7, "carbs_g": 52, "fats_g": 11, "fiber_g": 2, "sodium_mg": 620, "dietary_category": "vegan", "processing_level": "processed", "cuisine_tags": ["chinese"], "meal_suitability_tags": []},

    # Legumes
    {"name": "Dal Tadka", "category": "Legumes", "calories": 116, "protein_g": 6.5, "carbs_g": 16, "fats_g": 3, "fiber_g": 4, "sodium_mg": 300, "dietary_category": "vegetarian", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Chana Masala", "category": "Legumes", "calories": 180, "protein_g": 8.5, "carbs_g": 26, "fats_g": 4.5, "fiber_g": 6, "sodium_mg": 380, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": []},
    {"name": "Rajma", "category": "Legumes", "calories": 140, "protein_g": 7, "carbs_g": 22, "fats_g": 2.5, "fiber_g": 5, "sodium_mg": 290, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Sambhar", "category": "Legumes", "calories": 65, "protein_g": 3, "carbs_g": 10, "fats_g": 1.5, "fiber_g": 2.5, "sodium_mg": 260, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["south_indian"], "meal_suitability_tags": []},

    # Vegetables
    {"name": "Aloo Gobi", "category": "Vegetables", "calories": 90, "protein_g": 2, "carbs_g": 12, "fats_g": 4, "fiber_g": 2.5, "sodium_mg": 240, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Palak Paneer", "category": "Vegetables", "calories": 200, "protein_g": 10, "carbs_g": 8, "fats_g": 15, "fiber_g": 2, "sodium_mg": 350, "dietary_category": "vegetarian", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": []},
    {"name": "Paneer Butter Masala", "category": "Vegetables", "calories": 280, "protein_g": 12, "carbs_g": 10, "fats_g": 22, "fiber_g": 1, "sodium_mg": 520, "dietary_category": "vegetarian", "processing_level": "processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Baingan Bharta", "category": "Vegetables", "calories": 110, "protein_g": 2, "carbs_g": 10, "fats_g": 7, "fiber_g": 3, "sodium_mg": 280, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": []},
    {"name": "Mushroom Masala", "category": "Vegetables", "calories": 120, "protein_g": 4, "carbs_g": 8, "fats_g": 8, "fiber_g": 2, "sodium_mg": 330, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},

    # Non-veg
    {"name": "Butter Chicken", "category": "Non-Veg", "calories": 245, "protein_g": 16, "carbs_g": 6, "fats_g": 18, "sodium_mg": 560, "dietary_category": "non_veg", "processing_level": "processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Chicken Curry", "category": "Non-Veg", "calories": 180, "protein_g": 18, "carbs_g": 4, "fats_g": 10, "sodium_mg": 420, "dietary_category": "non_veg", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Mutton Curry", "category": "Meat", "calories": 250, "protein_g": 20, "carbs_g": 5, "fats_g": 17, "sodium_mg": 450, "dietary_category": "non_veg", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian", "mutton"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Fish Curry", "category": "Non-Veg", "calories": 135, "protein_g": 18, "carbs_g": 3, "fats_g": 5.5, "sodium_mg": 390, "dietary_category": "non_veg", "processing_level": "minimally_processed", "cuisine_tags": ["coastal", "bengali"], "meal_suitability_tags": []},
    {"name": "Egg Curry", "category": "Non-Veg", "calories": 150, "protein_g": 10, "carbs_g": 5, "fats_g": 10, "sodium_mg": 400, "dietary_category": "non_veg", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Tandoori Chicken", "category": "Non-Veg", "calories": 165, "protein_g": 25, "carbs_g": 3, "fats_g": 6, "sodium_mg": 540, "dietary_category": "non_veg", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian", "punjabi"], "meal_suitability_tags": []},
    {"name": "Grilled Salmon", "category": "Non-Veg", "calories": 280, "protein_g": 30, "carbs_g": 0, "fats_g": 17, "sodium_mg": 90, "dietary_category": "non_veg", "processing_level": "whole", "cuisine_tags": ["continental"], "meal_suitability_tags": []},

    # Snacks
    {"name": "Samosa (1 pc)", "category": "Fried", "calories": 260, "protein_g": 4, "carbs_g": 30, "fats_g": 14, "fiber_g": 2, "sodium_mg": 420, "dietary_category": "vegan", "processing_level": "fried", "cuisine_tags": ["north_indian", "street_food"], "meal_suitability_tags": ["too_heavy_for_breakfast", "avoid_before_workout"]},
    {"name": "Pakora", "category": "Fried", "calories": 240, "protein_g": 6, "carbs_g": 20, "fats_g": 15, "fiber_g": 2, "sodium_mg": 380, "dietary_category": "vegan", "processing_level": "fried", "cuisine_tags": ["north_indian", "street_food"], "meal_suitability_tags": ["avoid_before_workout"]},
    {"name": "Vada Pav", "category": "Snacks", "calories": 290, "protein_g": 5, "carbs_g": 35, "fats_g": 14, "sodium_mg": 510, "dietary_category": "vegetarian", "processing_level": "fried", "cuisine_tags": ["maharashtrian", "street_food", "fast_food"], "meal_suitability_tags": ["too_heavy_for_night"]},
    {"name": "Roasted Makhana", "category": "Snacks", "calories": 90, "protein_g": 3, "carbs_g": 15, "fats_g": 1.5, "fiber_g": 1.5, "sodium_mg": 60, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Peanut Chaat", "category": "Snacks", "calories": 210, "protein_g": 9, "carbs_g": 12, "fats_g": 14, "fiber_g": 3, "sodium_mg": 250, "dietary_category": "vegan", "processing_level": "minimally_processed", "cuisine_tags": ["street_food"], "meal_suitability_tags": []},

    # Dairy
    {"name": "Curd (Dahi)", "category": "Dairy", "calories": 60, "protein_g": 3.4, "carbs_g": 5, "fats_g": 3.3, "sugar_g": 4, "sodium_mg": 45, "dietary_category": "vegetarian", "processing_level": "minimally_processed", "cuisine_tags": [], "meal_suitability_tags": []},
    {"name": "Sweet Lassi", "category": "Dairy", "calories": 100, "protein_g": 3, "carbs_g": 18, "fats_g": 2, "sugar_g": 15, "sodium_mg": 50, "dietary_category": "vegetarian", "processing_level": "processed", "cuisine_tags": ["punjabi", "sugary"], "meal_suitability_tags": []},
    {"name": "Buttermilk (Chaas)", "category": "Dairy", "calories": 25, "protein_g": 2, "carbs_g": 3, "fats_g": 0.5, "sugar_g": 2, "sodium_mg": 180, "dietary_category": "vegetarian", "processing_level": "minimally_processed", "cuisine_tags": ["gujarati"], "meal_suitability_tags": []},

    # Sweets and drinks
    {"name": "Gulab Jamun (1 pc)", "category": "Sweets", "calories": 175, "protein_g": 2, "carbs_g": 28, "fats_g": 6, "sugar_g": 22, "sodium_mg": 40, "dietary_category": "vegetarian", "processing_level": "fried", "cuisine_tags": ["north_indian"], "meal_suitability_tags": ["too_heavy_for_breakfast"]},
    {"name": "Rice Kheer", "category": "Desserts", "calories": 210, "protein_g": 5, "carbs_g": 34, "fats_g": 6, "sugar_g": 24, "sodium_mg": 70, "dietary_category": "vegetarian", "processing_level": "processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
    {"name": "Cola", "category": "Beverages", "calories": 140, "protein_g": 0, "carbs_g": 39, "fats_g": 0, "sugar_g": 39, "sodium_mg": 45, "dietary_category": "vegan", "processing_level": "ultra_processed", "cuisine_tags": ["sugary"], "meal_suitability_tags": ["avoid_before_workout"]},
    {"name": "Masala Chai", "category": "Beverages", "calories": 90, "protein_g": 3, "carbs_g": 12, "fats_g": 3, "sugar_g": 10, "sodium_mg": 40, "dietary_category": "vegetarian", "processing_level": "minimally_processed", "cuisine_tags": ["north_indian"], "meal_suitability_tags": []},
]
