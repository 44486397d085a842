"""Keyword rules used to classify free and speed foods.

Names are matched lower-cased. Exclusions are checked before inclusions, so a
name that carries both a free ingredient and a disqualifying word (for
example "chicken caesar salad") is never free.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class KeywordRule:
    """A named group of keywords matched against a food name."""

    category: str
    keywords: tuple[str, ...]
    whole_word: tuple[str, ...] = ()

    def matches(self, lower_name: str) -> bool:
        """Return True when any keyword appears in the lower-cased name."""
        if any(keyword in lower_name for keyword in self.keywords):
            return True
        words = _words(lower_name)
        return any(
            keyword in words or f"{keyword}s" in words for keyword in self.whole_word
        )


def _words(lower_name: str) -> set[str]:
    cleaned = "".join(char if char.isalnum() else " " for char in lower_name)
    return set(cleaned.split())


def first_match(rules: tuple[KeywordRule, ...], lower_name: str) -> str | None:
    """Return the category of the first matching rule, if any."""
    for rule in rules:
        if rule.matches(lower_name):
            return rule.category
    return None


# "oil" and "pie" only disqualify as whole words, so "boiled" and
# "pieces" stay eligible.
FREE_FOOD_EXCLUSIONS: tuple[KeywordRule, ...] = (
    KeywordRule(
        "prepared dish",
        (
            "quiche",
            "tart",
            "pastry",
            "soup",
            "sauce",
            "cream",
            "creamy",
            "fried",
            "battered",
            "breaded",
            "crispy",
            "chips",
            "fries",
            "deep fried",
        ),
        whole_word=("pie",),
    ),
    KeywordRule(
        "dressed salad",
        (
            "salad dressing",
            "coleslaw",
            "caesar",
            "waldorf",
            "potato salad",
            "pasta salad",
            "egg salad",
            "chicken salad",
            "tuna salad",
            "coronation",
            "nicoise",
        ),
    ),
    KeywordRule(
        "cheese",
        (
            "cheese",
            "cheddar",
            "brie",
            "parmesan",
            "feta",
            "mozzarella",
            "stilton",
        ),
    ),
    KeywordRule(
        "fat",
        (
            "mayo",
            "mayonnaise",
            "butter",
            "buttered",
            "roasted in",
            "cooked in oil",
            "oily",
        ),
        whole_word=("oil",),
    ),
    KeywordRule(
        "fruit drink",
        ("juice", "smoothie", "puree", "purée", "puréed", "fruit drink"),
    ),
    KeywordRule(
        "processed meat",
        ("sausage", "bacon", "salami", "chorizo", "pepperoni"),
    ),
)

FRUIT_KEYWORDS: tuple[str, ...] = (
    "apple",
    "banana",
    "orange",
    "strawberry",
    "strawberries",
    "grape",
    "grapes",
    "melon",
    "watermelon",
    "honeydew",
    "cantaloupe",
    "pineapple",
    "blueberry",
    "blueberries",
    "raspberry",
    "raspberries",
    "blackberry",
    "blackberries",
    "pear",
    "peach",
    "nectarine",
    "plum",
    "apricot",
    "cherry",
    "cherries",
    "kiwi",
    "mango",
    "papaya",
    "passion fruit",
    "pomegranate",
    "fig",
    "grapefruit",
    "tangerine",
    "clementine",
    "satsuma",
)

VEGETABLE_KEYWORDS: tuple[str, ...] = (
    "broccoli",
    "carrot",
    "cauliflower",
    "spinach",
    "tomato",
    "pepper",
    "bell pepper",
    "courgette",
    "zucchini",
    "mushroom",
    "lettuce",
    "cucumber",
    "cabbage",
    "kale",
    "sprouts",
    "brussels",
    "asparagus",
    "green beans",
    "runner beans",
    "aubergine",
    "eggplant",
    "onion",
    "leek",
    "shallot",
    "sweetcorn",
    "peas",
    "mangetout",
    "sugar snap",
    "beetroot",
    "turnip",
    "swede",
    "radish",
    "fennel",
    "artichoke",
    "chard",
    "pak choi",
    "bok choy",
    "watercress",
    "rocket",
    "butternut squash",
    "pumpkin",
    "celery",
)

FREE_FOOD_INCLUSIONS: tuple[KeywordRule, ...] = (
    KeywordRule(
        "meat and poultry",
        (
            "chicken breast",
            "chicken",
            "turkey breast",
            "turkey",
            "lean beef",
            "beef mince",
            "pork tenderloin",
            "pork fillet",
            "lean pork",
            "ham",
            "gammon",
            "lean lamb",
            "venison",
            "rabbit",
            "pheasant",
            "duck breast",
        ),
    ),
    KeywordRule(
        "fat-free dairy",
        (
            "fat-free yogurt",
            "fat free yogurt",
            "fat-free natural yogurt",
            "fat free natural yogurt",
            "fat-free yoghurt",
            "fat free yoghurt",
            "fat-free natural yoghurt",
            "fat free natural yoghurt",
            "fat free greek yogurt",
            "fat-free greek yogurt",
            "fat free greek yoghurt",
            "fat-free greek yoghurt",
            "fat free authentic greek",
            "0% fat yogurt",
            "0% fat yoghurt",
            "0% yogurt",
            "0% yoghurt",
            "skyr",
            "plain quark",
            "quark",
            "fat-free fromage frais",
            "fat free fromage frais",
            "soya yogurt",
            "soya yoghurt",
            "plain soya",
        ),
    ),
    KeywordRule(
        "plant protein",
        (
            "seitan",
            "quorn",
            "textured soya",
            "tvp",
            "textured vegetable protein",
            "tofu",
        ),
    ),
    KeywordRule(
        "fish and seafood",
        (
            "white fish",
            "cod",
            "haddock",
            "plaice",
            "sole",
            "sea bass",
            "sea bream",
            "salmon",
            "trout",
            "mackerel",
            "tuna",
            "swordfish",
            "halibut",
            "monkfish",
            "prawns",
            "shrimp",
            "crab",
            "lobster",
            "mussels",
            "clams",
            "scallops",
            "squid",
            "fish fillet",
            "smoked fish",
            "kippers",
        ),
    ),
    KeywordRule("eggs", ("egg", "eggs")),
    KeywordRule(
        "vegetables",
        VEGETABLE_KEYWORDS
        + (
            "garlic",
            "parsnip",
            "arugula",
            "spring onion",
            "salad",
            "mixed leaves",
            "corn on the cob",
        ),
    ),
    KeywordRule(
        "fruit",
        FRUIT_KEYWORDS
        + (
            "figs",
            "lime",
            "lemon",
            "frozen fruit",
            "fresh fruit",
            "mixed berries",
        ),
    ),
    KeywordRule(
        "potatoes",
        ("potato", "potatoes", "sweet potato", "jacket potato"),
    ),
    KeywordRule(
        "beans, peas and lentils",
        (
            "beans",
            "cannellini",
            "haricot",
            "borlotti",
            "edamame",
            "mushy peas",
            "garden peas",
            "chickpea",
            "lentils",
        ),
    ),
    KeywordRule(
        "pasta, rice and grains",
        (
            "pasta",
            "spaghetti",
            "penne",
            "fusilli",
            "tagliatelle",
            "linguine",
            "macaroni",
            "rice",
            "basmati",
            "long grain",
            "noodles",
            "udon",
            "soba",
            "couscous",
            "bulgur",
            "quinoa",
            "pearl barley",
            "freekeh",
        ),
    ),
)

# Plain yogurts that are not labelled fat free still count when they are
# genuinely low in calories.
LOW_CALORIE_YOGURT = KeywordRule("low-calorie yogurt", ("yogurt", "yoghurt"))

SPEED_FOOD_EXCLUSIONS = KeywordRule(
    "processed fruit", ("juice", "smoothie", "puree", "purée", "dried")
)

SPEED_FOOD_INCLUSIONS: tuple[KeywordRule, ...] = (
    KeywordRule("fruit", FRUIT_KEYWORDS),
    KeywordRule("vegetables", VEGETABLE_KEYWORDS),
)

SPEED_FOOD_CATEGORIES = frozenset({"fruit", "fruits", "vegetable", "vegetables"})
