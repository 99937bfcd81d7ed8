"""Step-by-step instruction synthesis.

Picks a hand-written procedure by recipe type first, then by cuisine, and
falls back to a generic eight-step procedure. The user's proteins and the
remaining vegetables are interpolated into the step text.
"""

from typing import Callable, Sequence

from recipe_suggester.engine import data
from recipe_suggester.engine.classifier import default_classifier


def _display_name(ingredient: str) -> str:
    return ingredient.split(",", 1)[0].strip()


def _join(items: Sequence[str]) -> str:
    """Join names as prose: "a", "a and b", "a, b and c"."""
    names = [_display_name(item) for item in items]
    if not names:
        return ""
    if len(names) == 1:
        return names[0]
    return f"{', '.join(names[:-1])} and {names[-1]}"


def _is_staple(ingredient: str) -> bool:
    text = ingredient.strip().lower()
    return text in data.STAPLE_NAMES or any(term in text for term in data.STAPLE_TERMS)


def split_ingredients(
    user_ingredients: Sequence[str], full_ingredients: Sequence[str]
) -> tuple[list[str], list[str], list[str]]:
    """Return (proteins, grains, other vegetables) used by the templates.

    Proteins and grains come from the user's ingredients. Other vegetables are
    the full list minus proteins, grains and aromatics or pantry staples.
    """
    proteins = [item for item in user_ingredients if default_classifier.classify(item).is_protein]
    grains = [
        item for item in user_ingredients
        if default_classifier.classify(item).is_grain and not default_classifier.classify(item).is_protein
    ]
    vegetables = []
    for item in full_ingredients:
        profile = default_classifier.classify(item)
        if profile.is_protein or profile.is_grain or _is_staple(item):
            continue
        vegetables.append(item)
    return proteins, grains, vegetables


def _curry_steps(recipe_type: str, proteins: list[str], grains: list[str], vegetables: list[str]) -> list[str]:
    steps = [
        "Prepare all ingredients: wash, chop and measure everything before you start cooking.",
        "Heat oil in a heavy-bottomed pan over medium heat and add the cumin seeds; let them splutter for 30 seconds.",
        "Add the onion and sauté until golden brown, about 8-10 minutes.",
        "Stir in the ginger-garlic paste and cook for 1 minute until the raw smell disappears.",
        "Add turmeric, coriander powder and garam masala and cook the spices for 1-2 minutes, "
        "adding a splash of water if they stick.",
    ]
    if proteins:
        steps.append(f"Add {_join(proteins)} and cook until sealed on all sides, about 5-6 minutes.")
    if vegetables:
        steps.append(f"Add {_join(vegetables)} and cook for 4-5 minutes, stirring to coat in the masala.")
    if recipe_type == "biryani":
        rice = _join(grains) or "rice"
        steps.extend([
            f"Parboil the {rice} in salted water until 70% cooked, then drain.",
            "Layer the rice over the masala, sprinkle with fried onions, mint and saffron milk.",
            "Cover tightly and cook on the lowest heat for 20-25 minutes (dum) until the rice is fluffy.",
        ])
    else:
        steps.append("Pour in the tomatoes or a cup of water, cover and simmer for 15-20 minutes until cooked through.")
    steps.append("Season with salt to taste and garnish with fresh coriander before serving.")
    return steps


def _stir_fry_steps(recipe_type: str, proteins: list[str], grains: list[str], vegetables: list[str]) -> list[str]:
    steps = ["Mix the soy sauce with a splash of water and a pinch of sugar to make the sauce."]
    if proteins:
        steps.append(f"Cut {_join(proteins)} into bite-sized pieces and pat dry.")
    steps.append("Heat a wok or large skillet over high heat until smoking, then add oil.")
    if proteins:
        steps.append(f"Add {_join(proteins)} and stir-fry for 3-4 minutes until cooked through; set aside.")
    steps.append("Add the garlic and ginger and stir-fry for 30 seconds until fragrant.")
    if vegetables:
        steps.append(f"Add {_join(vegetables)} and stir-fry for 3-4 minutes until crisp-tender.")
    if recipe_type == "fried rice":
        steps.append(f"Add the cooked {_join(grains) or 'rice'}, breaking up any clumps, and toss for 2-3 minutes.")
    elif recipe_type == "lo mein":
        steps.append(f"Add the cooked {_join(grains) or 'noodles'} and toss to coat.")
    steps.append("Return everything to the wok, pour in the sauce and toss for 1 minute until glossy.")
    steps.append("Finish with a drizzle of sesame oil and sliced scallions and serve hot.")
    return steps


def _pasta_steps(recipe_type: str, proteins: list[str], grains: list[str], vegetables: list[str]) -> list[str]:
    noodles = [item for item in grains if any(term in item.lower() for term in data.PASTA_KEYWORDS)]
    pasta = _join(noodles) or "pasta"
    steps = [
        "Bring a large pot of generously salted water to a boil.",
        f"Cook the {pasta} until al dente according to the package directions; "
        "reserve half a cup of pasta water before draining.",
        "Meanwhile, heat olive oil in a large skillet over medium heat.",
    ]
    if proteins:
        steps.append(f"Add {_join(proteins)} and cook until golden and cooked through, 5-7 minutes.")
    steps.append("Add the garlic and cook for 30 seconds until fragrant.")
    if vegetables:
        steps.append(f"Add {_join(vegetables)} and sauté for 4-5 minutes until tender.")
    steps.append("Toss the drained pasta into the skillet with a splash of pasta water until the sauce coats it.")
    steps.append("Season with salt, pepper and oregano, then finish with fresh basil and grated parmesan.")
    return steps


def _bread_steps(recipe_type: str, proteins: list[str], grains: list[str], vegetables: list[str]) -> list[str]:
    dough = _join(grains) or "flour"
    topped = recipe_type in data.TOPPED_BREAD_TYPES
    if vegetables and not topped:
        steps = [f"Mix the {dough} with {_join(vegetables)}, a pinch of salt and enough warm water to form a soft dough."]
    else:
        steps = [f"Mix the {dough} with a pinch of salt and enough warm water to form a soft dough."]
    steps.append("Knead for 5-8 minutes until smooth, then cover and rest for 30 minutes.")
    if proteins:
        steps.append(f"Meanwhile, cook {_join(proteins)} in a little oil until browned and cooked through.")
    if vegetables and topped:
        steps.append(f"Slice {_join(vegetables)} for the topping.")
    steps.append(f"Divide the dough and roll or stretch it into the shape of your {recipe_type}.")
    if topped:
        steps.append("Layer the toppings over the dough and bake in a very hot oven until golden and bubbling.")
    else:
        steps.append("Cook on a hot griddle or in a very hot oven until puffed and golden in spots.")
    steps.append("Brush with a little oil or butter and serve warm.")
    return steps


def _generic_steps(
    recipe_type: str, cuisine: str, proteins: list[str], grains: list[str], vegetables: list[str]
) -> list[str]:
    if proteins:
        protein_step = f"Add {_join(proteins)} and cook until browned and cooked through."
    else:
        protein_step = "Add the firmest ingredients first and cook for 3-4 minutes."
    mains = _join([*vegetables, *grains]) or "the remaining ingredients"
    return [
        "Prepare all ingredients: wash, peel and chop as needed.",
        "Heat oil in a large pan over medium heat.",
        protein_step,
        "Add the aromatics and cook for 1-2 minutes until fragrant.",
        f"Add {mains} and cook, stirring occasionally, for 5-8 minutes.",
        f"Season with salt, pepper and your favorite {cuisine.strip() or 'house'} spices.",
        f"Add a splash of water or stock, cover and simmer for 10 minutes to bring the {recipe_type} together.",
        "Garnish, adjust the seasoning and serve hot.",
    ]


_TEMPLATES_BY_TYPE: dict[frozenset, Callable[..., list[str]]] = {
    data.CURRY_FAMILY: _curry_steps,
    data.STIR_FRY_FAMILY: _stir_fry_steps,
    data.PASTA_FAMILY: _pasta_steps,
    data.BREAD_FAMILY: _bread_steps,
}

_TEMPLATES_BY_CUISINE: dict[str, Callable[..., list[str]]] = {
    "indian": _curry_steps,
    "chinese": _stir_fry_steps,
    "italian": _pasta_steps,
}


def synthesize_instructions(
    user_ingredients: Sequence[str],
    cuisine: str,
    recipe_type: str,
    full_ingredients: Sequence[str],
) -> list[str]:
    """Build ordered cooking steps. Always returns at least one step."""
    proteins, grains, vegetables = split_ingredients(user_ingredients, full_ingredients)

    for family, template in _TEMPLATES_BY_TYPE.items():
        if recipe_type in family:
            return template(recipe_type, proteins, grains, vegetables)

    # Soups would otherwise pick up a cuisine template
    if recipe_type in data.SOUP_FAMILY:
        return _generic_steps(recipe_type, cuisine or "", proteins, grains, vegetables)

    template = _TEMPLATES_BY_CUISINE.get((cuisine or "").strip().lower())
    if template is not None:
        return template(recipe_type, proteins, grains, vegetables)

    return _generic_steps(recipe_type, cuisine or "", proteins, grains, vegetables)
