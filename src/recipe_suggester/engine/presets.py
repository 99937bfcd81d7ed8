"""Style preset descriptors for the recipe assembler.

A preset only changes cosmetics: the title prefix and suffix, the wording of
the description and chef note, an optional closing tip, and small fixed
offsets on calories and cook time. Each family holds exactly three presets,
one per generated recipe.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional

DEFAULT_STYLE = "classic"


@dataclass(frozen=True)
class StylePreset:
    """Descriptor for one of the three recipes in a request."""

    name: str
    title_prefix: str
    descriptions: tuple[str, ...]
    chef_notes: tuple[str, ...]
    calorie_offset: int = 0
    minutes_offset: int = 0
    closing_tip: Optional[str] = None
    # cuisine -> text appended to the title
    title_suffixes: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def suffix_for(self, cuisine: str) -> str:
        return self.title_suffixes.get(cuisine.strip().lower(), "")


# Description templates accept {cuisine}, {recipe_type} and {ingredients}
_TRADITIONAL = StylePreset(
    name="traditional",
    title_prefix="Traditional",
    descriptions=(
        "A time-honored {cuisine} {recipe_type} built around {ingredients}, cooked the way it has been for generations.",
        "Classic {cuisine} flavors come together in this comforting {recipe_type} featuring {ingredients}.",
        "An authentic take on {cuisine} home cooking: a hearty {recipe_type} with {ingredients}.",
    ),
    chef_notes=(
        "Let the dish rest for five minutes before serving so the flavors settle.",
        "Toast your spices gently; they carry most of the flavor in this dish.",
        "Taste and adjust the salt right at the end, once everything has reduced.",
    ),
)

_FUSION = StylePreset(
    name="fusion",
    title_prefix="Fusion",
    descriptions=(
        "A playful twist on a {cuisine} {recipe_type} that pairs {ingredients} with bright, unexpected accents.",
        "{cuisine} technique meets global flavors in this {recipe_type} starring {ingredients}.",
        "Bold and modern: {ingredients} reimagined as a cross-cultural {recipe_type}.",
    ),
    chef_notes=(
        "A squeeze of citrus at the end lifts all the flavors.",
        "Try a drizzle of chili oil for extra heat and color.",
        "Serve with a crisp side salad to balance the richness.",
    ),
    calorie_offset=25,
    minutes_offset=5,
)

_QUICK = StylePreset(
    name="quick",
    title_prefix="Quick",
    descriptions=(
        "A weeknight-friendly {cuisine} {recipe_type} with {ingredients}, on the table in no time.",
        "Fast, simple and satisfying: {ingredients} in an easy {cuisine} {recipe_type}.",
        "Minimal prep and maximum flavor make this {recipe_type} with {ingredients} a busy-day favorite.",
    ),
    chef_notes=(
        "Chop everything before you turn on the heat to keep things moving.",
        "Leftovers keep well in the fridge for up to two days.",
        "Use a wide pan so everything cooks evenly and quickly.",
    ),
    calorie_offset=-25,
    minutes_offset=-10,
    closing_tip="Tip: prep all ingredients before you start cooking to keep this recipe quick.",
)

_BEGINNER = StylePreset(
    name="beginner",
    title_prefix="Easy",
    descriptions=(
        "A forgiving {cuisine} {recipe_type} with {ingredients}, perfect if you are just starting out.",
        "Simple steps and familiar ingredients: an easy {recipe_type} made with {ingredients}.",
        "Build your confidence with this straightforward {cuisine} {recipe_type} featuring {ingredients}.",
    ),
    chef_notes=(
        "Keep the heat at medium; it is easier to control and harder to burn.",
        "Read the whole recipe once before you start.",
        "Do not worry about perfect cuts; even pieces matter more than neat ones.",
    ),
    calorie_offset=-15,
    minutes_offset=-5,
    closing_tip="Tip: if anything starts to stick, lower the heat and add a splash of water.",
)

_INTERMEDIATE = StylePreset(
    name="intermediate",
    title_prefix="Home-Style",
    descriptions=(
        "A well-rounded {cuisine} {recipe_type} with {ingredients} that rewards a little extra care.",
        "Layered flavors and proper technique turn {ingredients} into a memorable {recipe_type}.",
        "A satisfying {cuisine} {recipe_type} that balances {ingredients} with classic seasoning.",
    ),
    chef_notes=(
        "Brown the protein in batches so the pan stays hot.",
        "Deglaze the pan with a splash of water to pick up all the browned bits.",
        "Season in layers rather than all at once.",
    ),
)

_ADVANCED = StylePreset(
    name="advanced",
    title_prefix="Chef's",
    descriptions=(
        "A restaurant-style {cuisine} {recipe_type} that showcases {ingredients} with refined technique.",
        "Precise timing and careful seasoning elevate {ingredients} into an impressive {recipe_type}.",
        "An ambitious {cuisine} {recipe_type} for cooks ready to take {ingredients} to the next level.",
    ),
    chef_notes=(
        "Finish with a knob of cold butter or a drizzle of good oil for a glossy sauce.",
        "Plate on warmed dishes so the food stays hot longer.",
        "Make the sauce a day ahead; the flavors deepen overnight.",
    ),
    calorie_offset=30,
    minutes_offset=15,
    closing_tip="Tip: let the finished dish rest briefly, then plate and garnish just before serving.",
)

_CULTURAL_TRADITIONAL = StylePreset(
    name="traditional",
    title_prefix="Authentic",
    descriptions=(
        "A heritage {cuisine} {recipe_type} with {ingredients}, inspired by recipes passed down through families.",
        "This {recipe_type} honors {cuisine} tradition, letting {ingredients} shine with time-tested methods.",
        "Rooted in {cuisine} home kitchens: a soulful {recipe_type} featuring {ingredients}.",
    ),
    chef_notes=(
        "Cook it slowly; patience is the secret ingredient in family recipes.",
        "Serve family-style in the middle of the table.",
        "A pinch more salt at the end brings the whole dish together.",
    ),
    calorie_offset=20,
    minutes_offset=10,
    title_suffixes=MappingProxyType({
        "italian": " alla Nonna",
        "indian": " Ghar-Style",
        "mexican": " de la Abuela",
        "chinese": " Jia Chang",
        "japanese": " Katei-Style",
        "american": " Like Grandma Made",
    }),
)

_REGIONAL = StylePreset(
    name="regional",
    title_prefix="Regional",
    descriptions=(
        "A regional {cuisine} {recipe_type} with {ingredients}, shaped by local ingredients and customs.",
        "Explore the flavors of a specific {cuisine} region with this {recipe_type} built on {ingredients}.",
        "A lesser-known regional {recipe_type} that brings out the best in {ingredients}.",
    ),
    chef_notes=(
        "Look for local produce; regional dishes depend on what is fresh.",
        "Adjust the spice level to match the region's style.",
        "Pair with a regional bread or rice to complete the meal.",
    ),
    minutes_offset=5,
    title_suffixes=MappingProxyType({
        "italian": " alla Toscana",
        "indian": " Punjabi-Style",
        "mexican": " Oaxaqueño",
        "chinese": " Sichuan-Style",
        "japanese": " Osaka-Style",
        "american": " Southern-Style",
    }),
)

_CONTEMPORARY = StylePreset(
    name="contemporary",
    title_prefix="Modern",
    descriptions=(
        "A contemporary {cuisine} {recipe_type} that presents {ingredients} in a light, modern way.",
        "Fresh ideas meet {cuisine} roots in this updated {recipe_type} with {ingredients}.",
        "Clean flavors and bright colors define this modern {recipe_type} featuring {ingredients}.",
    ),
    chef_notes=(
        "Plate with plenty of negative space for a modern look.",
        "Finish with microgreens or fresh herbs for color.",
        "Keep vegetables slightly crisp for texture.",
    ),
    calorie_offset=-20,
    minutes_offset=-5,
    closing_tip="Tip: garnish with fresh herbs right before serving for a bright, modern finish.",
)

PRESET_FAMILIES: Mapping[str, tuple[StylePreset, StylePreset, StylePreset]] = MappingProxyType({
    "classic": (_TRADITIONAL, _FUSION, _QUICK),
    "skill": (_BEGINNER, _INTERMEDIATE, _ADVANCED),
    "cultural": (_CULTURAL_TRADITIONAL, _REGIONAL, _CONTEMPORARY),
})
