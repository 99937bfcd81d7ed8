"""Static lookup tables for the rule-based recipe engine.

Everything here is built once at import time and exposed as tuples or
read-only mappings. Terms are lowercase; matching is substring based.
"""

from types import MappingProxyType

# ============================================================================
# Ingredient classification terms
# ============================================================================

PROTEIN_TERMS = (
    "chicken", "beef", "pork", "lamb", "mutton", "goat", "turkey", "duck",
    "bacon", "sausage", "ham", "fish", "salmon", "tuna", "cod", "tilapia",
    "shrimp", "prawn", "crab", "lobster", "egg", "tofu", "tempeh", "seitan",
    "paneer", "lentil", "chickpea", "bean", "dal",
)

VEGETABLE_TERMS = (
    "onion", "tomato", "potato", "carrot", "bell pepper", "capsicum",
    "broccoli", "spinach", "cabbage", "cauliflower", "mushroom", "zucchini",
    "eggplant", "aubergine", "cucumber", "lettuce", "kale", "pea", "corn",
    "celery", "okra", "bok choy", "squash", "pumpkin", "asparagus", "leek",
    "radish", "beet", "avocado", "green bean",
)

GRAIN_TERMS = (
    "rice", "pasta", "noodle", "spaghetti", "macaroni", "fettuccine", "penne",
    "bread", "flour", "maida", "dough", "tortilla", "quinoa", "oat", "barley",
    "couscous", "wheat", "semolina",
)

SPICE_HERB_TERMS = (
    "cumin", "coriander", "turmeric", "garam masala", "masala", "chili",
    "chilli", "paprika", "cinnamon", "cardamom", "clove", "nutmeg", "saffron",
    "fennel", "mustard seed", "oregano", "basil", "thyme", "rosemary",
    "parsley", "cilantro", "mint", "dill", "bay leaf", "sage", "garlic",
    "ginger", "black pepper", "curry",
)

# ============================================================================
# Recipe-type inference keywords and labels
# ============================================================================

RICE_KEYWORDS = ("rice",)
PASTA_KEYWORDS = ("pasta", "noodle", "spaghetti", "macaroni", "fettuccine")
SOUP_KEYWORDS = ("broth", "stock", "soup")
BREAD_KEYWORDS = ("bread", "dough", "flour", "maida")

SOUP_LABELS = MappingProxyType({
    "indian": "shorba",
    "chinese": "hot and sour soup",
    "italian": "minestrone",
    "mexican": "tortilla soup",
    "japanese": "miso soup",
    "american": "chowder",
})

VEGETABLE_DISH_LABELS = MappingProxyType({
    "indian": "sabzi",
    "chinese": "vegetable stir-fry",
    "italian": "primavera",
    "mexican": "fajitas",
    "japanese": "tempura",
    "american": "roasted vegetables",
})

APPETIZER_LABELS = MappingProxyType({
    "indian": "chutney",
    "chinese": "dipping sauce",
    "italian": "bruschetta",
    "mexican": "salsa",
    "japanese": "furikake",
    "american": "spice rub",
})

RICE_DISH_TYPES = frozenset({"biryani", "fried rice", "rice bowl", "rice casserole", "rice dish"})

# ============================================================================
# Estimator tables
# ============================================================================

BASE_CALORIES = MappingProxyType({
    "biryani": 550, "fried rice": 500, "rice bowl": 480, "rice casserole": 520, "rice dish": 450,
    "pasta": 520, "lo mein": 480, "ramen": 500, "mac and cheese": 600, "noodle dish": 450,
    "shorba": 220, "hot and sour soup": 200, "minestrone": 250, "tortilla soup": 280,
    "miso soup": 180, "chowder": 350, "soup": 250,
    "pizza": 650, "flatbread": 420, "naan": 380, "tortilla": 350, "sandwich": 450, "bread dish": 400,
    "curry": 450, "masala": 420, "stir-fry": 380, "roast": 500, "sauté": 400,
    "taco filling": 420, "teriyaki": 450, "grill": 480, "main dish": 450,
    "sabzi": 250, "vegetable stir-fry": 220, "primavera": 300, "fajitas": 320,
    "tempura": 350, "roasted vegetables": 250, "vegetable medley": 230,
    "chutney": 150, "dipping sauce": 150, "bruschetta": 200, "salsa": 150,
    "furikake": 150, "spice rub": 150, "spice blend": 150,
})
DEFAULT_CALORIES = 400

BASE_COOK_MINUTES = MappingProxyType({
    "biryani": 60, "fried rice": 25, "rice bowl": 30, "rice casserole": 55, "rice dish": 35,
    "pasta": 25, "lo mein": 20, "ramen": 40, "mac and cheese": 30, "noodle dish": 25,
    "shorba": 35, "hot and sour soup": 25, "minestrone": 45, "tortilla soup": 35,
    "miso soup": 15, "chowder": 45, "soup": 35,
    "pizza": 45, "flatbread": 30, "naan": 40, "tortilla": 30, "sandwich": 15, "bread dish": 40,
    "curry": 40, "masala": 35, "stir-fry": 20, "roast": 60, "sauté": 25,
    "taco filling": 25, "teriyaki": 25, "grill": 30, "main dish": 35,
    "sabzi": 25, "vegetable stir-fry": 15, "primavera": 25, "fajitas": 25,
    "tempura": 30, "roasted vegetables": 40, "vegetable medley": 20,
    "chutney": 10, "dipping sauce": 5, "bruschetta": 15, "salsa": 10,
    "furikake": 10, "spice rub": 5, "spice blend": 5,
})
DEFAULT_COOK_MINUTES = 30

LEAN_PROTEIN_TERMS = ("chicken breast", "fish", "egg white", "tofu", "shrimp")
FATTY_PROTEIN_TERMS = ("beef", "pork", "lamb", "duck", "bacon", "sausage")
RICH_FAT_TERMS = ("cream", "butter", "cheese", "ghee", "oil", "mayonnaise")
SWEET_TERMS = ("sugar", "honey", "syrup", "chocolate", "caramel")
SLOW_COOK_TERMS = ("beef", "lamb")
QUICK_COOK_TERMS = ("shrimp", "fish")

# ============================================================================
# Ingredient list completion
# ============================================================================

BASE_SEASONINGS = ("salt", "pepper")

CUISINE_SUPPORT_INGREDIENTS = MappingProxyType({
    "indian": ("cumin seeds", "coriander powder", "turmeric", "garam masala", "oil"),
    "chinese": ("soy sauce", "sesame oil", "garlic, minced", "ginger, grated", "scallion, sliced"),
    "italian": ("olive oil", "garlic, minced", "fresh basil", "dried oregano"),
    "mexican": ("cumin", "chili powder", "lime, juiced", "cilantro, chopped", "onion, diced"),
    "japanese": ("soy sauce", "mirin", "rice vinegar", "sesame seeds", "ginger, grated"),
    "american": ("butter", "garlic powder", "onion powder", "smoked paprika"),
})
DEFAULT_SUPPORT_INGREDIENTS = ("olive oil", "garlic, minced", "onion, chopped")

RECIPE_TYPE_EXTRAS = MappingProxyType({
    "curry": ("onion, finely chopped", "tomatoes, pureed", "ginger-garlic paste", "fresh coriander, chopped"),
    "masala": ("onion, sliced", "tomatoes, chopped", "ginger-garlic paste"),
    "biryani": ("yogurt", "fried onions", "mint leaves", "saffron, soaked in warm milk", "whole spices"),
    "naan": ("yogurt", "baking powder", "ghee"),
    "stir-fry": ("cornstarch", "rice vinegar", "chili flakes"),
    "vegetable stir-fry": ("cornstarch", "rice vinegar"),
    "fried rice": ("frozen peas", "eggs, beaten"),
    "lo mein": ("oyster sauce", "shredded cabbage"),
    "pasta": ("parmesan, grated", "red pepper flakes", "pasta water"),
    "pizza": ("mozzarella, torn", "tomato sauce"),
    "flatbread": ("mozzarella, torn", "cherry tomatoes, halved"),
    "taco filling": ("corn tortillas", "salsa"),
    "teriyaki": ("sake", "brown sugar", "cornstarch"),
    "ramen": ("dashi", "nori", "soft-boiled egg"),
    "grill": ("bbq sauce",),
    "sandwich": ("mayonnaise", "lettuce leaves"),
    "mac and cheese": ("milk", "cheddar cheese, shredded"),
    "rice casserole": ("chicken broth", "cheddar cheese, shredded"),
})

# ============================================================================
# Instruction synthesis
# ============================================================================

CURRY_FAMILY = frozenset({"curry", "masala", "biryani"})
STIR_FRY_FAMILY = frozenset({"stir-fry", "fried rice", "lo mein", "vegetable stir-fry"})
PASTA_FAMILY = frozenset({"pasta"})
BREAD_FAMILY = frozenset({"pizza", "flatbread", "naan", "tortilla", "sandwich", "bread dish"})
TOPPED_BREAD_TYPES = frozenset({"pizza", "sandwich"})
SOUP_FAMILY = frozenset({*SOUP_LABELS.values(), "soup"})

# Aromatics and pantry staples never listed as "other vegetables"
STAPLE_NAMES = frozenset({"salt", "pepper", "oil", "water"})
STAPLE_TERMS = (
    "oil", "garlic", "ginger", "onion", "scallion", "black pepper", "white pepper",
    "pepper flakes", "cumin", "coriander", "turmeric", "masala", "chili", "paprika",
    "oregano", "basil", "cilantro", "mint", "soy sauce", "sesame", "vinegar",
    "mirin", "sake", "sugar", "cornstarch", "butter", "ghee", "lime", "lemon",
    "paste", "sauce", "broth", "stock", "seeds", "powder", "spices", "parmesan",
    "mozzarella", "cheese", "yogurt", "saffron", "dashi", "nori", "salsa",
    "tortilla", "fried onions", "milk", "mayonnaise", "pasta water",
)

# ============================================================================
# Dietary inference
# ============================================================================

MEAT_TERMS = (
    "chicken", "beef", "pork", "lamb", "mutton", "goat", "turkey", "duck", "bacon",
    "sausage", "ham", "fish", "salmon", "tuna", "cod", "tilapia", "shrimp", "prawn",
    "crab", "lobster", "anchovy", "oyster sauce",
)
ANIMAL_PRODUCT_TERMS = (
    "egg", "milk", "cheese", "butter", "cream", "yogurt", "ghee", "paneer",
    "honey", "mayonnaise", "mozzarella", "parmesan",
)
DAIRY_TERMS = ("milk", "cheese", "butter", "cream", "yogurt", "ghee", "paneer", "mozzarella", "parmesan")
GLUTEN_TERMS = (
    "flour", "bread", "pasta", "noodle", "spaghetti", "macaroni", "fettuccine",
    "penne", "maida", "wheat", "barley", "couscous", "semolina", "seitan",
    "soy sauce", "naan", "dough",
)
HIGH_CARB_TERMS = (
    "rice", "pasta", "noodle", "spaghetti", "macaroni", "bread", "flour", "maida",
    "potato", "tortilla", "corn", "oat", "quinoa", "couscous", "sugar", "honey",
    "syrup", "naan", "dough",
)
NON_KETO_TERMS = ("bean", "lentil", "chickpea", "dal", "mirin", "sake", "carrot")

# Exact-match synonym table for user supplied dietary tags
DIETARY_SYNONYMS = MappingProxyType({
    "vegetarian": ("vegetarian",),
    "vegan": ("vegan",),
    "gluten_free": ("glutenfree", "gluten-free", "gluten free"),
    "low_carb": ("lowcarb", "low-carb", "low carb"),
    "dairy_free": ("dairyfree", "dairy-free", "dairy free", "lactose-free"),
    "keto": ("keto", "ketogenic"),
})

# ============================================================================
# Images
# ============================================================================

_UNSPLASH = "https://images.unsplash.com/{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=500&q=80"

IMAGES_BY_CUISINE = MappingProxyType({
    "italian": tuple(_UNSPLASH.format(photo) for photo in (
        "photo-1551183053-bf91a1d81141",
        "photo-1604068549290-dea0e4a305ca",
        "photo-1579349443343-73da56a71a20",
    )),
    "indian": tuple(_UNSPLASH.format(photo) for photo in (
        "photo-1534939561126-855b8675edd7",
        "photo-1505253758473-96b7015fcd40",
        "photo-1565557623262-b51c2513a641",
    )),
    "chinese": tuple(_UNSPLASH.format(photo) for photo in (
        "photo-1563245372-f21724e3856d",
        "photo-1582878826629-29b7ad1cdc43",
        "photo-1557872943-16a5ac26437e",
    )),
    "japanese": tuple(_UNSPLASH.format(photo) for photo in (
        "photo-1579871494447-9811cf80d66c",
        "photo-1557872943-16a5ac26437e",
        "photo-1617196035154-421e3b3ab46e",
    )),
    "american": tuple(_UNSPLASH.format(photo) for photo in (
        "photo-1550317138-10000687a72b",
        "photo-1576026756048-4f0e2b808858",
        "photo-1546549032-9571cd6b27df",
    )),
    "mexican": tuple(_UNSPLASH.format(photo) for photo in (
        "photo-1599974579688-8dbdd335c77f",
        "photo-1613514785940-daed07799d9b",
        "photo-1640389576537-5915ad736258",
    )),
})

DEFAULT_IMAGES = tuple(_UNSPLASH.format(photo) for photo in (
    "photo-1512621776951-a57141f2eefd",
    "photo-1546069901-ba9599a7e63c",
    "photo-1565958011703-44f9829ba187",
))
