"""Starter foods loaded into an empty catalog."""


def _food(  # noqa: PLR0913
    name: str,
    syn_value: float,
    category: str,
    portion_size: float,
    portion_unit: str,
    *,
    free: bool = False,
    speed: bool = False,
    healthy_extra: str | None = None,
) -> dict[str, object]:
    return {
        "name": name,
        "syn_value": syn_value,
        "is_free_food": free,
        "is_speed_food": speed,
        "healthy_extra_type": healthy_extra,
        "portion_size": portion_size,
        "portion_unit": portion_unit,
        "category": category,
    }


def _free(name: str, category: str, portion_size: float, unit: str = "g") -> dict:
    return _food(name, 0, category, portion_size, unit, free=True)


def _speed(name: str, category: str, portion_size: float, unit: str = "g") -> dict:
    return _food(name, 0, category, portion_size, unit, free=True, speed=True)


STARTER_FOODS: list[dict[str, object]] = [
    _free("Chicken Breast (skinless)", "protein", 100),
    _free("Turkey Breast", "protein", 100),
    _free("Eggs", "protein", 1, "egg"),
    _free("White Fish (cod, haddock)", "protein", 100),
    _free("Salmon", "protein", 100),
    _free("Tuna (in brine)", "protein", 100),
    _free("Prawns", "protein", 100),
    _free("Tofu", "protein", 100),
    _free("Lean Beef Mince (5% fat)", "protein", 100),
    _free("Pork Tenderloin (lean)", "protein", 100),
    _free("Pasta (dried)", "carbs", 75),
    _free("Rice (dried)", "carbs", 75),
    _free("Potatoes", "carbs", 150),
    _free("Sweet Potatoes", "carbs", 150),
    _free("Couscous (dried)", "carbs", 60),
    _free("Beans (kidney, black, etc)", "carbs", 100),
    _free("Lentils", "carbs", 100),
    _speed("Broccoli", "vegetables", 80),
    _speed("Carrots", "vegetables", 80),
    _speed("Cauliflower", "vegetables", 80),
    _speed("Spinach", "vegetables", 80),
    _speed("Tomatoes", "vegetables", 80),
    _speed("Peppers", "vegetables", 80),
    _speed("Courgette (zucchini)", "vegetables", 80),
    _speed("Mushrooms", "vegetables", 80),
    _speed("Green Beans", "vegetables", 80),
    _speed("Cabbage", "vegetables", 80),
    _speed("Lettuce", "vegetables", 80),
    _speed("Cucumber", "vegetables", 80),
    _speed("Apple", "fruit", 1, "medium"),
    _speed("Banana", "fruit", 1, "medium"),
    _speed("Orange", "fruit", 1, "medium"),
    _speed("Strawberries", "fruit", 100),
    _speed("Grapes", "fruit", 100),
    _speed("Blueberries", "fruit", 100),
    _speed("Raspberries", "fruit", 100),
    _speed("Melon", "fruit", 150),
    _speed("Pineapple", "fruit", 100),
    _food("Semi-skimmed Milk", 0, "dairy", 250, "ml", healthy_extra="A"),
    _food("Skimmed Milk", 0, "dairy", 350, "ml", healthy_extra="A"),
    _food("Cheddar Cheese (reduced fat)", 0, "dairy", 30, "g", healthy_extra="A"),
    _food("Cottage Cheese", 0, "dairy", 120, "g", healthy_extra="A"),
    _food("Wholemeal Bread", 0, "bread", 2, "slices", healthy_extra="B"),
    _food("Weetabix", 0, "cereal", 2, "biscuits", healthy_extra="B"),
    _food("Porridge Oats", 0, "cereal", 35, "g", healthy_extra="B"),
    _food("All-Bran", 0, "cereal", 40, "g", healthy_extra="B"),
    _food("Olive Oil (Healthy Extra)", 0, "oils", 1, "tbsp", healthy_extra="C"),
    _food("Chocolate Bar", 12, "snacks", 50, "g"),
    _food("Crisps (regular)", 8.5, "snacks", 30, "g"),
    _food("Biscuit (digestive)", 4, "snacks", 1, "biscuit"),
    _food("White Bread", 5, "bread", 2, "slices"),
    _food("Butter", 6, "spreads", 10, "g"),
    _food("Olive Oil", 6, "oils", 1, "tbsp"),
    _food("Mayonnaise", 6, "condiments", 1, "tbsp"),
    _food("Sugar", 1, "sweeteners", 1, "tsp"),
    _food("Wine (red/white)", 5, "alcohol", 125, "ml"),
    _food("Beer (regular)", 5, "alcohol", 330, "ml"),
    _food("Pizza (cheese & tomato)", 18, "meals", 1, "slice"),
    _food("Burger (beef)", 15, "meals", 1, "burger"),
    _food("Ice Cream", 4, "desserts", 1, "scoop"),
    _food("Cake (sponge)", 10, "desserts", 1, "slice"),
    _food("Fat Free Yogurt", 0.5, "dairy", 100, "g"),
    _free("Low Calorie Cooking Spray", "oils", 5, "sprays"),
    _free("Diet Coke", "drinks", 330, "ml"),
]
