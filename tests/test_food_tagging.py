"""Tests for the food auto-tagger."""

from services.food_tagging import FoodTagger

tagger = FoodTagger()


def test_dietary_category_priority():
    """Test dietary category detection and the fallback to an existing category."""
    assert tagger.detect_dietary_category("Vegan Paneer Tikka") == "vegan"
    assert tagger.detect_dietary_category("Butter Chicken") == "non_veg"
    assert tagger.detect_dietary_category("Masala Omelette") == "veg_with_egg"
    assert tagger.detect_dietary_category("Mango Lassi") == "vegetarian"
    assert tagger.detect_dietary_category("Sprouts Salad", "vegan") == "vegan"
    assert tagger.detect_dietary_category("Sprouts Salad") == "vegetarian"


def test_egg_keyword_does_not_hit_eggplant():
    """Test that "egg" matches whole words only."""
    assert tagger.detect_dietary_category("Eggplant Curry", "vegan") == "vegan"
    assert "eggs" not in tagger.detect_allergens("Eggplant Curry")


def test_allergens_merge_with_existing():
    """Test that detected allergens are merged with existing flags."""
    flags = tagger.detect_allergens("Peanut Butter Toast", ["Soy"])
    assert "soy" in flags
    assert "peanuts" in flags
    assert "milk" in flags
    assert flags == sorted(flags)


def test_nutrition_tags_from_thresholds():
    """Test nutrition tags derived from macro thresholds."""
    tags = tagger.calculate_nutrition_tags({
        "calories": 450, "protein_g": 25, "carbs_g": 8, "sugar_g": None, "sodium_mg": 650,
    })
    assert set(tags) == {"high_calorie", "high_protein", "low_carb", "high_sodium"}


def test_health_flags():
    """Test health flags derived from name keywords and macros."""
    flags = tagger.calculate_health_flags({
        "name": "Egg Curry", "sugar_g": 2, "carbs_g": 5, "fats_g": 18, "sodium_mg": 300, "protein_g": 10,
    })
    assert "heart_caution" in flags
    assert "cholesterol_caution" in flags
    assert "vitamin_d_rich" in flags
    assert "diabetic_caution" not in flags
    assert "kidney_caution" not in flags


def test_auto_tag_returns_all_columns():
    """Test that auto_tag fills every tag column."""
    tags = tagger.auto_tag({"name": "Sweet Lassi", "sugar_g": 18, "calories": 100})
    assert tags["dietary_category"] == "vegetarian"
    assert "milk" in tags["allergen_flags"]
    assert "high_sugar" in tags["nutrition_tags"]
    assert "diabetic_caution" in tags["health_flags"]
