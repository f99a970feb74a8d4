"""Food auto-tagging service.

Derives the tags the validation engine consumes (dietary category, allergen
flags, nutrition tags, health flags) from a food's name and per-serving
nutrition values. Name keywords are matched as whole words, so "egg" does not
tag "Eggplant Bharta".
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from core.logger import get_logger
from services.word_match import phrase_matches, tokenize

logger = get_logger("services.food_tagging")


NON_VEG_KEYWORDS = [
    'chicken', 'mutton', 'lamb', 'beef', 'pork', 'fish', 'prawn', 'shrimp',
    'crab', 'lobster', 'salmon', 'tuna', 'meat', 'bacon', 'ham', 'sausage',
    'turkey', 'duck', 'goat', 'keema', 'tikka', 'tandoori', 'kebab',
]

EGG_KEYWORDS = ['egg', 'omelette', 'omelet', 'scrambled', 'bhurji']

DAIRY_KEYWORDS = [
    'milk', 'cheese', 'paneer', 'curd', 'dahi', 'yogurt', 'yoghurt', 'butter',
    'ghee', 'cream', 'kheer', 'lassi', 'raita', 'shrikhand', 'kulfi',
]

VEGAN_INDICATORS = ['vegan', 'plant-based', 'dairy-free', 'no milk', 'no cheese']

ALLERGEN_KEYWORDS: Dict[str, List[str]] = {
    'eggs': ['egg', 'omelette', 'omelet', 'mayonnaise', 'mayo', 'bhurji'],
    'milk': ['milk', 'cheese', 'paneer', 'curd', 'dahi', 'yogurt', 'cream', 'butter', 'ghee', 'kheer', 'kulfi', 'lassi'],
    'peanuts': ['peanut', 'groundnut', 'mungfali'],
    'tree_nuts': ['almond', 'cashew', 'walnut', 'pistachio', 'badam', 'kaju'],
    'wheat': ['wheat', 'roti', 'chapati', 'paratha', 'naan', 'bread', 'pasta', 'maida'],
    'gluten': ['wheat', 'barley', 'rye', 'bread', 'pasta', 'noodles', 'roti', 'chapati', 'paratha', 'naan'],
    'soy': ['soy', 'soya', 'tofu', 'tempeh'],
    'fish': ['fish', 'salmon', 'tuna', 'mackerel', 'sardine'],
    'shellfish': ['prawn', 'shrimp', 'crab', 'lobster', 'mussel', 'oyster'],
    'sesame': ['sesame', 'til', 'tahini'],
    'lactose': ['milk', 'cream', 'ice cream', 'cheese', 'kheer', 'lassi'],
}

# tag -> (nutrition field, "min" or "max", threshold)
NUTRITION_THRESHOLDS = {
    'high_protein': ('protein_g', 'min', 20),
    'low_protein': ('protein_g', 'max', 5),
    'high_carb': ('carbs_g', 'min', 50),
    'low_carb': ('carbs_g', 'max', 10),
    'high_fat': ('fats_g', 'min', 20),
    'low_fat': ('fats_g', 'max', 3),
    'high_fiber': ('fiber_g', 'min', 5),
    'high_sugar': ('sugar_g', 'min', 15),
    'low_sugar': ('sugar_g', 'max', 2),
    'high_sodium': ('sodium_mg', 'min', 500),
    'low_sodium': ('sodium_mg', 'max', 100),
    'high_calorie': ('calories', 'min', 400),
    'low_calorie': ('calories', 'max', 100),
}

NUTRIENT_RICH_KEYWORDS: Dict[str, List[str]] = {
    'vitamin_d_rich': ['salmon', 'tuna', 'mackerel', 'sardine', 'egg', 'mushroom'],
    'b12_rich': ['egg', 'milk', 'curd', 'dahi', 'paneer', 'fish', 'chicken', 'mutton'],
    'iron_rich': ['spinach', 'palak', 'rajma', 'chana', 'dal', 'mutton', 'jaggery'],
}


def _number(food: Mapping[str, Any], field: str) -> Optional[float]:
    value = food.get(field)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _any_keyword(tokens: List[str], keywords: Iterable[str]) -> bool:
    return any(phrase_matches(tokens, keyword) for keyword in keywords)


class FoodTagger:
    """Class-based tagger turning raw food attributes into validation tags."""

    def detect_dietary_category(self, name: str, current: Optional[str] = None) -> str:
        """Guess the dietary category from the food name.

        Vegan markers win, then meat/fish, then egg, then dairy. Names with no
        signal keep `current` or fall back to 'vegetarian'.
        """
        tokens = tokenize(name)
        if _any_keyword(tokens, VEGAN_INDICATORS):
            return 'vegan'
        if _any_keyword(tokens, NON_VEG_KEYWORDS):
            return 'non_veg'
        if _any_keyword(tokens, EGG_KEYWORDS):
            return 'veg_with_egg'
        if _any_keyword(tokens, DAIRY_KEYWORDS):
            return 'vegetarian'
        return current or 'vegetarian'

    def detect_allergens(self, name: str, existing: Optional[Iterable[str]] = None) -> List[str]:
        """Union of `existing` allergen flags and those implied by the name."""
        tokens = tokenize(name)
        detected = {str(a).lower() for a in (existing or [])}
        for allergen, keywords in ALLERGEN_KEYWORDS.items():
            if _any_keyword(tokens, keywords):
                detected.add(allergen)
        return sorted(detected)

    def calculate_nutrition_tags(self, food: Mapping[str, Any]) -> List[str]:
        """Threshold-based tags such as high_protein or low_sodium.

        Missing values never produce a tag.
        """
        tags = []
        for tag, (field, bound, threshold) in NUTRITION_THRESHOLDS.items():
            value = _number(food, field)
            if value is None:
                continue
            if bound == 'min' and value >= threshold:
                tags.append(tag)
            elif bound == 'max' and value <= threshold:
                tags.append(tag)
        return tags

    def calculate_health_flags(self, food: Mapping[str, Any]) -> List[str]:
        """Caution flags from macros and name, plus nutrient-rich markers."""
        sugar = _number(food, 'sugar_g') or 0
        carbs = _number(food, 'carbs_g') or 0
        fats = _number(food, 'fats_g') or 0
        sodium = _number(food, 'sodium_mg') or 0
        protein = _number(food, 'protein_g') or 0
        tokens = tokenize(food.get('name') or '')

        flags = []
        if sugar > 10 or carbs > 40:
            flags.append('diabetic_caution')
        if fats > 15 or sodium > 400:
            flags.append('heart_caution')
        if _any_keyword(tokens, ['egg', 'butter', 'ghee', 'mutton']):
            flags.append('cholesterol_caution')
        if sodium > 500 or protein > 25:
            flags.append('kidney_caution')
        for flag, keywords in NUTRIENT_RICH_KEYWORDS.items():
            if _any_keyword(tokens, keywords):
                flags.append(flag)
        return flags

    def auto_tag(self, food: Mapping[str, Any]) -> Dict[str, Any]:
        """Compute the tag columns for a food record.

        Args:
            food: Mapping with at least 'name'; optionally 'dietary_category',
                'allergen_flags' and the nutrition fields.

        Returns:
            Dict with dietary_category, allergen_flags, nutrition_tags and
            health_flags, ready to be written back to the food record.
        """
        name = food.get('name') or ''
        tags = {
            'dietary_category': self.detect_dietary_category(name, food.get('dietary_category')),
            'allergen_flags': self.detect_allergens(name, food.get('allergen_flags')),
            'nutrition_tags': self.calculate_nutrition_tags(food),
            'health_flags': self.calculate_health_flags(food),
        }
        logger.debug("Auto-tagged %s: %s", name, tags)
        return tags


# export singleton
food_tagger = FoodTagger()
__all__ = ["FoodTagger", "food_tagger"]
