"""Tests for the syn estimator."""

import logging
import math

import pytest

from slimming_tracker.domain.nutrition import NutritionFacts
from slimming_tracker.services.syns import (
    SynThresholds,
    calculate_syns_per_100g,
    classify_food,
    is_free_food,
    is_speed_food,
    parse_serving_grams,
    round_to_half,
    scale_syns,
)


def test_zero_nutrition_costs_nothing() -> None:
    assert calculate_syns_per_100g(NutritionFacts()) == 0


def test_syns_use_the_larger_formula() -> None:
    lean = NutritionFacts(calories=100)
    assert calculate_syns_per_100g(lean) == 5

    sugary = NutritionFacts(calories=100, saturated_fat=10, sugars=80)
    assert calculate_syns_per_100g(sugary) == pytest.approx(6.0)


def test_syns_are_monotone_in_each_input() -> None:
    base = NutritionFacts(calories=200, saturated_fat=2, sugars=10)
    baseline = calculate_syns_per_100g(base)

    assert calculate_syns_per_100g(NutritionFacts(250, 2, 10)) >= baseline
    assert calculate_syns_per_100g(NutritionFacts(200, 20, 10)) >= baseline
    assert calculate_syns_per_100g(NutritionFacts(200, 2, 90)) >= baseline


def test_negative_and_non_finite_amounts_count_as_zero() -> None:
    broken = NutritionFacts(calories=-50, saturated_fat=math.nan, sugars=math.inf)
    assert calculate_syns_per_100g(broken) == 0


@pytest.mark.parametrize(
    ("value", "expected"),
    [(0.25, 0.5), (0.24, 0.0), (1.75, 2.0), (2.5, 2.5), (11.0025, 11.0)],
)
def test_round_to_half_rounds_halves_up(value: float, expected: float) -> None:
    assert round_to_half(value) == expected


def test_round_to_half_rejects_invalid_values() -> None:
    assert round_to_half(math.nan) == 0
    assert round_to_half(math.inf) == 0
    assert round_to_half(-3.2) == 0


@pytest.mark.parametrize(
    ("serving", "grams"),
    [
        ("1 serving (14 g)", 14),
        ("20 g", 20),
        ("2 biscuits (25g)", 25),
        ("1 pot 125 g (125 g)", 125),
        ("12,5 g", 12.5),
        ("30 grams", 30),
        ("", 100),
        (None, 100),
        ("1 slice", 100),
        ("330 ml", 100),
        ("0 g", 100),
    ],
)
def test_parse_serving_grams(serving: str | None, grams: float) -> None:
    assert parse_serving_grams(serving) == grams


def test_implausible_serving_falls_back_and_warns(caplog) -> None:
    logger = logging.getLogger("slimming_tracker.services.syns")
    logger.addHandler(caplog.handler)
    try:
        assert parse_serving_grams("1 quiche (550 g)") == 100
    finally:
        logger.removeHandler(caplog.handler)

    assert "implausible serving size" in caplog.text


def test_serving_cap_is_configurable() -> None:
    assert parse_serving_grams("1 quiche (550 g)", max_grams=600) == 550


def test_scale_syns_follows_portion() -> None:
    assert scale_syns(10, 45) == 4.5
    assert scale_syns(7.3, 100) == 7.5


def test_very_low_calorie_foods_are_free() -> None:
    assert is_free_food(NutritionFacts(calories=15), "Diet Cola")
    assert is_free_food(NutritionFacts(calories=19.9), "Cheese Puffs Light")


def test_exclusions_beat_inclusions() -> None:
    salad = NutritionFacts(calories=150, saturated_fat=2)
    assert not is_free_food(salad, "Chicken Caesar Salad")
    assert not is_free_food(NutritionFacts(calories=120), "Cod in Batter Sauce")
    assert not is_free_food(NutritionFacts(calories=300), "Chicken Pie")


def test_whole_word_exclusions_do_not_catch_longer_words() -> None:
    eggs = NutritionFacts(calories=143, saturated_fat=3.3)
    assert is_free_food(eggs, "Boiled Eggs")
    assert is_free_food(NutritionFacts(calories=110), "Chicken Breast Pieces")
    assert not is_free_food(NutritionFacts(calories=200), "Tuna in Sunflower Oil")


def test_free_food_guards() -> None:
    assert not is_free_food(NutritionFacts(calories=251), "Chicken Breast")
    assert not is_free_food(
        NutritionFacts(calories=200, saturated_fat=5.1), "Lean Beef Mince"
    )
    assert is_free_food(
        NutritionFacts(calories=250, saturated_fat=5), "Lean Beef Mince"
    )


def test_unlisted_foods_are_not_free() -> None:
    assert not is_free_food(NutritionFacts(calories=90), "Rich Tea Biscuit")


def test_low_calorie_yogurt_carve_out() -> None:
    assert is_free_food(NutritionFacts(calories=55), "Natural Yogurt")
    assert not is_free_food(NutritionFacts(calories=95), "Natural Yogurt")
    assert is_free_food(NutritionFacts(calories=57), "Fat Free Greek Yoghurt")


def test_free_food_thresholds_are_configurable() -> None:
    strict = SynThresholds(free_food_max_calories=100)
    assert not is_free_food(NutritionFacts(calories=110), "Chicken Breast", strict)


def test_speed_foods() -> None:
    assert is_speed_food("Fresh Orange")
    assert is_speed_food("Tenderstem Broccoli")
    assert not is_speed_food("Orange Juice")
    assert not is_speed_food("Dried Apricots")
    assert not is_speed_food("Rich Tea Biscuit")


def test_speed_food_categories_strip_language_prefix() -> None:
    assert is_speed_food("Mystery Mix", ["en:frozen-foods", "en:vegetables"])
    assert is_speed_food("Mystery Mix", ["Fruits"])
    assert not is_speed_food("Mystery Mix", ["en:snacks"])


def test_speed_food_is_independent_of_free_food() -> None:
    result = classify_food(
        NutritionFacts(calories=47, sugars=9), "Fresh Orange", serving_size="1 (130 g)"
    )

    assert result.is_free_food
    assert result.is_speed_food
    assert result.syn_value == 0


def test_chocolate_bar_serving() -> None:
    result = classify_food(
        NutritionFacts(calories=489, saturated_fat=3.1, sugars=33),
        "Chocolate Bar",
        serving_size="45 g",
    )

    assert result.syn_value == 11.0
    assert not result.is_free_food
    assert result.portion_size_grams == 45


def test_diet_cola_is_free() -> None:
    result = classify_food(NutritionFacts(calories=15), "Diet Cola")

    assert result.is_free_food
    assert result.syn_value == 0
    assert result.portion_size_grams == 100


def test_final_syns_are_half_multiples() -> None:
    for calories in (33, 117, 250, 401, 999):
        result = classify_food(
            NutritionFacts(calories=calories, saturated_fat=4.4, sugars=12.3),
            "Biscuit",
            serving_size="1 biscuit (17 g)",
        )
        assert (result.syn_value * 2).is_integer()
        assert result.syn_value == round_to_half(
            calculate_syns_per_100g(
                NutritionFacts(calories=calories, saturated_fat=4.4, sugars=12.3)
            )
            * 17
            / 100
        )


def test_oily_names_are_excluded() -> None:
    fillet = NutritionFacts(calories=180, saturated_fat=2)
    assert is_free_food(fillet, "Fish Fillet")
    assert not is_free_food(fillet, "Oily Fish Fillet")


def test_branded_pies_still_hit_the_nutrition_guard() -> None:
    # "pie" only matches as a word, so the calorie guard has to catch these.
    pie = NutritionFacts(calories=265, saturated_fat=7.9, sugars=1.8)
    assert not is_free_food(pie, "Pieminister Chicken")
