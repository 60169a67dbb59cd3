"""
core/day_planner.py
────────────────────────────────────────────────────────────────────────
Fills one day of a meal plan.

The day is a fixed sequence of slots (`slot_template`). Each slot is
tried against three tiers, first success wins:

  1. selected pool   → user-picked meals, first match, never scored
  2. scored search   → catalog meals of the slot type, top-k by score,
                       one picked by the injected chooser
  3. fallback        → first affordable catalog meal of *any* type

If all three come back empty the slot stays unfilled and the day is
shorter than the template. That is a valid result, not an error.

Running totals live in an immutable `DayState`; every tier returns a new
one, so nothing leaks between days.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field, replace
from typing import Callable, FrozenSet, List, Sequence, Tuple

import numpy as np

from core.models.meal import Meal

_LOG = logging.getLogger(__name__)

PRICE_EPSILON = 0.01
NEUTRAL_CALORIE_FIT = 0.5
TOP_K = 3

W_EFFICIENCY = 0.4
W_CALORIE_FIT = 0.4
W_BUDGET_FIT = 0.2

Chooser = Callable[[Sequence[Meal]], Meal]


def random_chooser(options: Sequence[Meal]) -> Meal:
    return random.choice(options)


def first_chooser(options: Sequence[Meal]) -> Meal:
    return options[0]


# ───────────────────────────── template ───────────────────────────── #
def slot_template(meals_per_day: int) -> Tuple[str, ...]:
    if meals_per_day >= 5:
        return ("breakfast", "snack", "lunch", "snack", "dinner")
    if meals_per_day == 4:
        return ("breakfast", "snack", "lunch", "dinner")
    if meals_per_day == 3:
        return ("breakfast", "lunch", "dinner")
    return ("breakfast", "dinner")


# ───────────────────────────── state ──────────────────────────────── #
@dataclass(frozen=True)
class DayState:
    remaining_budget: float
    total_calories: int = 0
    meals: Tuple[Meal, ...] = ()
    used_selected: FrozenSet[str] = field(default_factory=frozenset)
    selected_ids: FrozenSet[str] = field(default_factory=frozenset)

    def add(self, meal: Meal) -> "DayState":
        # a selected recipe counts as used whichever tier placed it
        selected = meal.id in self.selected_ids
        return replace(
            self,
            remaining_budget=self.remaining_budget - meal.price,
            total_calories=self.total_calories + meal.calories,
            meals=self.meals + (meal,),
            used_selected=(self.used_selected | {meal.id}) if selected else self.used_selected,
        )

    def has(self, meal: Meal) -> bool:
        return any(m.id == meal.id for m in self.meals)

    def can_take(self, meal: Meal) -> bool:
        """Affordable, not yet on today's menu, not a selected recipe already placed."""
        return (
            meal.price <= self.remaining_budget
            and not self.has(meal)
            and meal.id not in self.used_selected
        )


@dataclass(frozen=True)
class DayResult:
    meals: List[Meal]
    total_calories: int
    total_cost: float
    used_selected: FrozenSet[str]


# ───────────────────────────── scoring ────────────────────────────── #
def score_candidates(
    candidates: Sequence[Meal],
    state: DayState,
    calorie_goal: int,
    slot_count: int,
) -> np.ndarray:
    """
    score = 0.4 · calories/price
          + 0.4 · (1 − |calories − ideal| / ideal)
          + 0.2 · [price ≤ remaining budget]

    `ideal` is the calories still needed spread over the slots not yet
    filled. Calories-per-price is not normalised across candidates.
    """
    calories = np.array([m.calories for m in candidates], dtype=float)
    prices = np.array([m.price for m in candidates], dtype=float)

    efficiency = calories / np.maximum(prices, PRICE_EPSILON)

    slots_left = slot_count - len(state.meals)
    if slots_left > 0:
        ideal = (calorie_goal - state.total_calories) / slots_left
        calorie_fit = 1 - np.abs(calories - ideal) / (ideal or 1)
    else:
        calorie_fit = np.full_like(calories, NEUTRAL_CALORIE_FIT)

    budget_fit = (prices <= state.remaining_budget).astype(float)

    return W_EFFICIENCY * efficiency + W_CALORIE_FIT * calorie_fit + W_BUDGET_FIT * budget_fit


def top_candidates(candidates: Sequence[Meal], scores: np.ndarray, k: int = TOP_K) -> List[Meal]:
    # stable sort keeps catalog order among equal scores
    order = np.argsort(-scores, kind="stable")[:k]
    return [candidates[i] for i in order]


# ───────────────────────────── tiers ──────────────────────────────── #
def try_selected_pool(slot: str, pool: Sequence[Meal], state: DayState) -> DayState | None:
    for meal in pool:
        if meal.type == slot and meal.price <= state.remaining_budget and meal.id not in state.used_selected:
            return state.add(meal)
    return None


def try_scored(
    slot: str,
    catalog: Sequence[Meal],
    state: DayState,
    calorie_goal: int,
    slot_count: int,
    chooser: Chooser,
    top_k: int = TOP_K,
) -> DayState | None:
    candidates = [m for m in catalog if m.type == slot and state.can_take(m)]
    if not candidates:
        return None
    scores = score_candidates(candidates, state, calorie_goal, slot_count)
    return state.add(chooser(top_candidates(candidates, scores, top_k)))


def try_fallback(catalog: Sequence[Meal], state: DayState) -> DayState | None:
    for meal in catalog:
        if state.can_take(meal):
            return state.add(meal)
    return None


# ───────────────────────────── day ────────────────────────────────── #
def plan_day(
    slots: Sequence[str],
    catalog: Sequence[Meal],
    selected_pool: Sequence[Meal],
    used_selected: FrozenSet[str],
    daily_budget: float,
    calorie_goal: int,
    chooser: Chooser = random_chooser,
    top_k: int = TOP_K,
) -> DayResult:
    state = DayState(
        remaining_budget=daily_budget,
        used_selected=frozenset(used_selected),
        selected_ids=frozenset(m.id for m in selected_pool),
    )

    for slot in slots:
        nxt = try_selected_pool(slot, selected_pool, state)
        if nxt is None:
            nxt = try_scored(slot, catalog, state, calorie_goal, len(slots), chooser, top_k)
        if nxt is None:
            nxt = try_fallback(catalog, state)
        if nxt is None:
            _LOG.debug("slot %s left unfilled (budget left %.2f)", slot, state.remaining_budget)
            continue
        state = nxt

    return DayResult(
        meals=list(state.meals),
        total_calories=state.total_calories,
        total_cost=sum(m.price for m in state.meals),
        used_selected=state.used_selected,
    )
