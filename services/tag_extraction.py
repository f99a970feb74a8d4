"""Tag extraction for clients and food items.

Raw client and food records (plain mappings, as produced by the stores in
`services.stores`) are turned into immutable tag sets. Every free-text value
is lower-cased here, once, so rule bodies can rely on plain set membership
and never normalise again. Missing or null fields become empty sets.
"""

from dataclasses import dataclass
from typing import Any, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from core.logger import get_logger
from schemas.restriction_schema import FoodRestriction, InvalidRestrictionError, normalize_id, parse_restriction
from services.word_match import tokenize

logger = get_logger("services.tag_extraction")


@dataclass(frozen=True)
class ClientTagSet:
    """Normalised view of everything the rules need to know about a client."""

    client_id: str
    # hard safety constraints
    allergies: FrozenSet[str] = frozenset()
    intolerances: FrozenSet[str] = frozenset()
    # dietary pattern
    diet_pattern: Optional[str] = None
    egg_allowed: bool = True
    egg_avoid_days: FrozenSet[str] = frozenset()
    # dietitian-authored restrictions
    food_restrictions: Tuple[FoodRestriction, ...] = ()
    # soft preferences
    dislikes: FrozenSet[str] = frozenset()
    avoid_categories: FrozenSet[str] = frozenset()
    # medical advisories
    medical_conditions: FrozenSet[str] = frozenset()
    lab_derived_tags: FrozenSet[str] = frozenset()
    # positive signals; liked_foods holds normalised ids, liked_phrases the
    # entries that are not numeric ids
    liked_foods: FrozenSet[str] = frozenset()
    liked_phrases: FrozenSet[str] = frozenset()
    preferred_cuisines: FrozenSet[str] = frozenset()


@dataclass(frozen=True)
class FoodTagSet:
    """Normalised view of a food item."""

    id: str
    name: str
    name_lower: str = ""
    name_tokens: Tuple[str, ...] = ()
    category: Optional[str] = None
    allergen_flags: FrozenSet[str] = frozenset()
    dietary_category: Optional[str] = None
    nutrition_tags: FrozenSet[str] = frozenset()
    health_flags: FrozenSet[str] = frozenset()
    cuisine_tags: FrozenSet[str] = frozenset()
    processing_level: Optional[str] = None
    meal_suitability_tags: FrozenSet[str] = frozenset()
    calories: Optional[float] = None
    protein_g: Optional[float] = None
    carbs_g: Optional[float] = None
    fats_g: Optional[float] = None


def _field(record: Mapping[str, Any], name: str, alias: Optional[str] = None, default: Any = None) -> Any:
    """Read `name` (or its camelCase alias) from a raw record."""
    if name in record:
        return record[name]
    if alias and alias in record:
        return record[alias]
    return default


def _lower_set(values: Optional[Iterable[Any]]) -> FrozenSet[str]:
    if not values:
        return frozenset()
    if isinstance(values, str):
        values = [values]
    return frozenset(str(v).strip().lower() for v in values if v is not None and str(v).strip())


def _is_numeric_id(value: Any) -> bool:
    text = str(value).strip()
    return text.isascii() and text.isdigit()


def _lower_or_none(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip().lower()
    return value or None


def _number_or_none(value: Any) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _parse_restrictions(client_id: str, raw: Any) -> Tuple[FoodRestriction, ...]:
    if not raw:
        return ()
    if not isinstance(raw, (list, tuple)):
        logger.warning("Client %s: food restrictions are not a list, ignoring", client_id)
        return ()
    parsed: List[FoodRestriction] = []
    for index, entry in enumerate(raw):
        try:
            parsed.append(parse_restriction(entry))
        except InvalidRestrictionError as exc:
            logger.warning("Client %s: dropping restriction #%s: %s", client_id, index, exc)
    return tuple(parsed)


def extract_client_tags(record: Mapping[str, Any]) -> ClientTagSet:
    """Build a `ClientTagSet` from a raw client record."""
    client_id = normalize_id(_field(record, "id", default=""))
    egg_allowed = _field(record, "egg_allowed", "eggAllowed", True)
    liked = _field(record, "liked_foods", "likedFoods") or []
    if isinstance(liked, str):
        liked = [liked]

    return ClientTagSet(
        client_id=client_id,
        allergies=_lower_set(_field(record, "allergies")),
        intolerances=_lower_set(_field(record, "intolerances")),
        diet_pattern=_lower_or_none(_field(record, "diet_pattern", "dietPattern")),
        egg_allowed=True if egg_allowed is None else bool(egg_allowed),
        egg_avoid_days=_lower_set(_field(record, "egg_avoid_days", "eggAvoidDays")),
        food_restrictions=_parse_restrictions(client_id, _field(record, "food_restrictions", "foodRestrictions")),
        dislikes=_lower_set(_field(record, "dislikes")),
        avoid_categories=_lower_set(_field(record, "avoid_categories", "avoidCategories")),
        medical_conditions=_lower_set(_field(record, "medical_conditions", "medicalConditions")),
        lab_derived_tags=_lower_set(_field(record, "lab_derived_tags", "labDerivedTags")),
        liked_foods=frozenset(normalize_id(v) for v in liked if v is not None),
        liked_phrases=_lower_set(v for v in liked if v is not None and not _is_numeric_id(v)),
        preferred_cuisines=_lower_set(_field(record, "preferred_cuisines", "preferredCuisines")),
    )


def extract_food_tags(record: Mapping[str, Any]) -> FoodTagSet:
    """Build a `FoodTagSet` from a raw food record."""
    name = str(_field(record, "name", default="") or "")
    calories = _number_or_none(_field(record, "calories"))
    protein = _number_or_none(_field(record, "protein_g", "proteinG"))
    carbs = _number_or_none(_field(record, "carbs_g", "carbsG"))
    fats = _number_or_none(_field(record, "fats_g", "fatsG"))

    return FoodTagSet(
        id=normalize_id(_field(record, "id", default="")),
        name=name,
        name_lower=name.lower(),
        name_tokens=tuple(tokenize(name)),
        category=_lower_or_none(_field(record, "category")),
        allergen_flags=_lower_set(_field(record, "allergen_flags", "allergenFlags")),
        dietary_category=_lower_or_none(_field(record, "dietary_category", "dietaryCategory")),
        nutrition_tags=_lower_set(_field(record, "nutrition_tags", "nutritionTags")),
        health_flags=_lower_set(_field(record, "health_flags", "healthFlags")),
        cuisine_tags=_lower_set(_field(record, "cuisine_tags", "cuisineTags")),
        processing_level=_lower_or_none(_field(record, "processing_level", "processingLevel")),
        meal_suitability_tags=_lower_set(_field(record, "meal_suitability_tags", "mealSuitabilityTags")),
        calories=calories,
        protein_g=protein,
        carbs_g=carbs,
        fats_g=fats,
    )
