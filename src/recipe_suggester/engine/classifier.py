"""Ingredient classification by case-insensitive substring matching.

An ingredient is checked independently against four term lists (protein,
vegetable, grain, spice/herb), so it may belong to several categories at
once. Matching is plain containment with no tokenization: "eggplant" counts
as a protein because it contains "egg".

All callers go through `SubstringClassifier` (or the module helpers bound to
the default instance) so the matching strategy can be replaced in one place.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable

from recipe_suggester.engine import data


class IngredientCategory(str, Enum):
    """Primary category of an ingredient. Only PROTEIN has ordering priority."""

    PROTEIN = "protein"
    VEGETABLE = "vegetable"
    GRAIN = "grain"
    SPICE = "spice"
    UNCLASSIFIED = "unclassified"


@dataclass(frozen=True)
class IngredientProfile:
    """Independent category predicates for one ingredient."""

    is_protein: bool = False
    is_vegetable: bool = False
    is_grain: bool = False
    is_spice_or_herb: bool = False

    @property
    def is_classified(self) -> bool:
        return self.is_protein or self.is_vegetable or self.is_grain or self.is_spice_or_herb


def _contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)


class SubstringClassifier:
    """Classifies ingredient text against static term lists."""

    def __init__(
        self,
        protein_terms: tuple[str, ...] = data.PROTEIN_TERMS,
        vegetable_terms: tuple[str, ...] = data.VEGETABLE_TERMS,
        grain_terms: tuple[str, ...] = data.GRAIN_TERMS,
        spice_terms: tuple[str, ...] = data.SPICE_HERB_TERMS,
    ) -> None:
        self.protein_terms = protein_terms
        self.vegetable_terms = vegetable_terms
        self.grain_terms = grain_terms
        self.spice_terms = spice_terms

    def classify(self, ingredient: str) -> IngredientProfile:
        """Classify one ingredient. Never raises; unknown text yields an all-false profile."""
        text = (ingredient or "").lower()
        return IngredientProfile(
            is_protein=_contains_any(text, self.protein_terms),
            is_vegetable=_contains_any(text, self.vegetable_terms),
            is_grain=_contains_any(text, self.grain_terms),
            is_spice_or_herb=_contains_any(text, self.spice_terms),
        )

    def primary_category(self, ingredient: str) -> IngredientCategory:
        profile = self.classify(ingredient)
        if profile.is_protein:
            return IngredientCategory.PROTEIN
        if profile.is_vegetable:
            return IngredientCategory.VEGETABLE
        if profile.is_grain:
            return IngredientCategory.GRAIN
        if profile.is_spice_or_herb:
            return IngredientCategory.SPICE
        return IngredientCategory.UNCLASSIFIED

    def sort_protein_first(self, ingredients: Iterable[str]) -> list[str]:
        """Move proteins to the front. Stable: relative order is otherwise kept."""
        return sorted(ingredients, key=lambda item: 0 if self.classify(item).is_protein else 1)


default_classifier = SubstringClassifier()


def classify(ingredient: str) -> IngredientProfile:
    return default_classifier.classify(ingredient)


def primary_category(ingredient: str) -> IngredientCategory:
    return default_classifier.primary_category(ingredient)


def sort_protein_first(ingredients: Iterable[str]) -> list[str]:
    return default_classifier.sort_protein_first(ingredients)
