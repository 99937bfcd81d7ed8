"""Dietary flag normalization, inference and merging.

Flag mappings use the snake_case field names of `DietaryFlags`. The merge is
right-biased: whatever the user asked for wins over what a generator inferred.
"""

from typing import Iterable, Mapping, Sequence

from pydantic.alias_generators import to_camel

from recipe_suggester.engine import data
from recipe_suggester.models.models import DietaryFlags
from recipe_suggester.utils.logger import logger

FLAG_NAMES = tuple(DietaryFlags.model_fields)

_TAG_LOOKUP = {
    synonym: flag for flag, synonyms in data.DIETARY_SYNONYMS.items() for synonym in synonyms
}

_KEY_LOOKUP: dict[str, str] = {}
for _name in FLAG_NAMES:
    _KEY_LOOKUP[_name] = _name
    _KEY_LOOKUP[to_camel(_name)] = _name
    _KEY_LOOKUP[to_camel(_name).lower()] = _name


def normalize_dietary_tags(tags: Iterable[str]) -> dict[str, bool]:
    """Map free-text dietary tags to flags.

    Matching is exact after trimming and lowercasing ("Gluten-Free" ->
    gluten_free). Unknown tags are ignored.
    """
    flags: dict[str, bool] = {}
    for tag in tags or ():
        flag = _TAG_LOOKUP.get(str(tag).strip().lower())
        if flag is None:
            logger.debug(f"Ignoring unknown dietary tag: {tag!r}")
            continue
        flags[flag] = True
    return flags


def _mentions(lowered: Sequence[str], terms: Sequence[str]) -> bool:
    return any(term in item for item in lowered for term in terms)


def infer_dietary_flags(ingredients: Sequence[str]) -> dict[str, bool]:
    """Infer all six flags from an ingredient list by substring matching."""
    lowered = [item.lower() for item in ingredients]

    vegetarian = not _mentions(lowered, data.MEAT_TERMS)
    low_carb = not _mentions(lowered, data.HIGH_CARB_TERMS)
    return {
        "vegetarian": vegetarian,
        "vegan": vegetarian and not _mentions(lowered, data.ANIMAL_PRODUCT_TERMS),
        "gluten_free": not _mentions(lowered, data.GLUTEN_TERMS),
        "low_carb": low_carb,
        "dairy_free": not _mentions(lowered, data.DAIRY_TERMS),
        "keto": low_carb
        and not _mentions(lowered, data.NON_KETO_TERMS)
        and not _mentions(lowered, data.SWEET_TERMS),
    }


def coerce_flag_keys(mapping: Mapping) -> dict[str, bool]:
    """Normalize camelCase or snake_case flag keys; drop unknown keys and non-boolean values."""
    flags: dict[str, bool] = {}
    for key, value in (mapping or {}).items():
        name = _KEY_LOOKUP.get(key) or _KEY_LOOKUP.get(str(key).lower())
        if name is None or not isinstance(value, bool):
            continue
        flags[name] = value
    return flags


def merge_dietary_flags(generator_flags: Mapping[str, bool], user_flags: Mapping[str, bool]) -> dict[str, bool]:
    """Right-biased merge: user flags overwrite generator flags for the same key."""
    return {**generator_flags, **user_flags}
