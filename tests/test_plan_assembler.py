"""
End-to-end (no DB) – assemble whole weeks from small catalogues.
"""
from __future__ import annotations

import random

import pytest

from core.catalog import MealCatalog
from core.day_planner import first_chooser, slot_template
from core.models.meal import Meal
from core.models.plan import DAYS_OF_WEEK, PreferenceSpec
from core.plan_assembler import assemble_week, generate_plan
from core.static_catalog import STATIC_MEALS

STATIC = MealCatalog.merge([], STATIC_MEALS)

# --- the four-meal scenario -------------------------------------------
BREAKFAST = Meal(id="b", name="Oats", type="breakfast", price=3, calories=300)
LUNCH = Meal(id="l", name="Soup", type="lunch", price=4, calories=500)
DINNER = Meal(id="d", name="Stew", type="dinner", price=6, calories=600)
SNACK = Meal(id="s", name="Apple", type="snack", price=2, calories=150)
FOUR = [BREAKFAST, LUNCH, DINNER, SNACK]

PREFS = PreferenceSpec(
    budget=70,
    budget_period="weekly",
    dietary_preference="none",
    calorie_goal=1400,
    meals_per_day=3,
    selected_recipe_ids=[],
)


def test_four_meal_week_follows_fallback_cascade():
    plan = assemble_week(PREFS, FOUR, chooser=first_chooser)

    assert PREFS.daily_budget == 10
    assert [d.day for d in plan.weekly_plan] == list(DAYS_OF_WEEK)
    for day in plan.weekly_plan:
        # dinner (6) no longer fits the 3 left after 3 + 4, so the
        # any-type fallback takes the snack
        assert [m.id for m in day.meals] == ["b", "l", "s"]
        assert day.total_cost == 9
        assert day.total_calories == 950
    assert plan.total_weekly_cost == 63
    assert plan.total_weekly_calories == 7 * 950
    assert plan.within_budget


def test_days_hold_references_not_copies():
    plan = assemble_week(PREFS, FOUR, chooser=first_chooser)
    assert plan.weekly_plan[0].meals[0] is BREAKFAST


# --- slot counts ------------------------------------------------------
@pytest.mark.parametrize("n, expected", [(1, 2), (2, 2), (3, 3), (4, 4), (5, 5), (6, 5)])
def test_slot_count_with_enough_meals(n, expected):
    prefs = PreferenceSpec(budget=500, budget_period="weekly", meals_per_day=n)
    plan = assemble_week(prefs, list(STATIC), chooser=random.Random(n).choice)
    assert len(slot_template(prefs.meals_per_day)) == expected
    assert all(len(d.meals) == expected for d in plan.weekly_plan)


def test_catalog_meals_may_repeat_across_days():
    prefs = PreferenceSpec(budget=20, budget_period="daily", meals_per_day=3)
    plan = assemble_week(prefs, FOUR, chooser=first_chooser)
    assert prefs.daily_budget == 20
    assert all([m.id for m in d.meals] == ["b", "l", "d"] for d in plan.weekly_plan)
    assert plan.total_weekly_cost == 7 * 13
    assert plan.within_budget


# --- selected pool ----------------------------------------------------
def test_selected_recipes_scheduled_once_per_week():
    picks = ["b3", "l4", "d3"]
    prefs = PreferenceSpec(budget=30, budget_period="daily", meals_per_day=3, selected_recipe_ids=picks)
    plan = generate_plan(prefs, STATIC, chooser=random.Random(3).choice)

    placed = [m.id for d in plan.weekly_plan for m in d.meals if m.id in picks]
    assert sorted(placed) == sorted(picks)
    assert [m.id for m in plan.weekly_plan[0].meals] == picks


def test_selected_pool_ignores_dietary_filter():
    prefs = PreferenceSpec(
        budget=40, budget_period="daily", dietary_preference="vegan",
        meals_per_day=3, selected_recipe_ids=["d1"],
    )
    plan = generate_plan(prefs, STATIC, chooser=first_chooser)
    monday = plan.weekly_plan[0].meals
    assert monday[-1].id == "d1"
    others = [m for d in plan.weekly_plan for m in d.meals if m.id != "d1"]
    assert all("vegan" in m.tags for m in others)


# --- degradation ------------------------------------------------------
def test_empty_catalog_gives_empty_days():
    plan = assemble_week(PREFS, [], [])
    assert len(plan.weekly_plan) == 7
    for d in plan.weekly_plan:
        assert d.meals == []
        assert d.total_calories == 0 and d.total_cost == 0
    assert plan.total_weekly_cost == 0


def test_unknown_preference_degrades_without_error():
    prefs = PreferenceSpec(budget=70, dietary_preference="keto")
    plan = generate_plan(prefs, STATIC)
    assert plan.total_weekly_calories == 0


# --- preference validation --------------------------------------------
def test_meals_per_day_clamped_to_two():
    assert PreferenceSpec(budget=10, meals_per_day=0).meals_per_day == 2
    assert PreferenceSpec(budget=10, meals_per_day=None).meals_per_day == 2


def test_budget_must_be_positive():
    with pytest.raises(ValueError):
        PreferenceSpec(budget=0)


def test_selected_ids_deduplicated_in_order():
    prefs = PreferenceSpec(budget=10, selected_recipe_ids=["a", "b", "a"])
    assert prefs.selected_recipe_ids == ["a", "b"]
