"""
core/catalog.py
────────────────────────────────────────────────────────────────────────
Candidate meals for the planner.

Responsibilities
----------------
1.   `recipe_to_meal()` – normalise a raw recipe document (community
     submission or static seed) into a planner-facing `Meal`.
2.   `filter_by_preference()` – keep meals carrying a dietary tag.
3.   `MealCatalog` – immutable, ordered collection merged from the
     published recipes (first) and the static fallback meals.

Everything here is pure; loading recipes from the database lives in
`services.catalog_source`.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Iterator, List, Sequence

from core.models.meal import MEAL_TYPES, Ingredient, Meal

_LOG = logging.getLogger(__name__)

# recipe types with no planner slot of their own
_TYPE_ALIASES = {"dessert": "snack"}
_PRICE_KEYS = ("price", "priceEstimate", "budgetPrice")


# ─────────────────────────── normalisation ────────────────────────── #
def _number(raw: Dict[str, Any], *keys: str) -> float:
    for k in keys:
        v = raw.get(k)
        if v not in (None, ""):
            return float(v)
    return 0.0


def _ingredients(items: Iterable[Any] | None) -> tuple[Ingredient, ...]:
    out = []
    for ing in items or []:
        if isinstance(ing, str):
            out.append(Ingredient(name=ing))
            continue
        out.append(
            Ingredient(
                name=(ing.get("name") or ing.get("item") or "").strip(),
                quantity=str(ing.get("quantity") or ing.get("amount") or "").strip(),
                price=_number(ing, "price"),
            )
        )
    return tuple(out)


def _tags(raw: Any) -> frozenset[str]:
    # a lone tag stored as a plain string
    if isinstance(raw, str):
        return frozenset([raw]) if raw else frozenset()
    return frozenset(raw or ())


def recipe_to_meal(raw: Dict[str, Any]) -> Meal:
    """
    Map a recipe document onto `Meal`.

    * `title` is accepted when `name` is missing
    * `dessert` is planned as a `snack`
    * missing numbers (nutrition, price, prep time) default to 0
    * missing tags default to an empty set
    """
    meal_type = str(raw.get("type") or "").lower()
    meal_type = _TYPE_ALIASES.get(meal_type, meal_type)
    if meal_type not in MEAL_TYPES:
        raise ValueError(f"recipe {raw.get('id')!r} has unknown meal type {raw.get('type')!r}")

    return Meal(
        id=str(raw["id"]),
        name=raw.get("name") or raw.get("title") or "Untitled recipe",
        type=meal_type,
        calories=int(round(_number(raw, "calories"))),
        protein=_number(raw, "protein"),
        carbs=_number(raw, "carbs"),
        fat=_number(raw, "fat"),
        fiber=_number(raw, "fiber"),
        price=_number(raw, *_PRICE_KEYS),
        prep_time=int(_number(raw, "prep_time", "prepTime")),
        tags=_tags(raw.get("tags")),
        ingredients=_ingredients(raw.get("ingredients")),
    )


# ───────────────────────────── filter ─────────────────────────────── #
def filter_by_preference(meals: Sequence[Meal], preference: str) -> List[Meal]:
    """`none` keeps everything; any other value is an exact tag match."""
    if preference == "none":
        return list(meals)
    return [m for m in meals if preference in m.tags]


# ───────────────────────────── catalog ────────────────────────────── #
class MealCatalog:
    def __init__(self, meals: Iterable[Meal]) -> None:
        seen: set[str] = set()
        ordered = []
        for m in meals:
            # first occurrence wins, so recipes shadow static meals sharing an id
            if m.id in seen:
                continue
            seen.add(m.id)
            ordered.append(m)
        self._meals: tuple[Meal, ...] = tuple(ordered)
        self._by_id = {m.id: m for m in self._meals}

    @classmethod
    def merge(cls, recipes: Iterable[Dict[str, Any]], static: Iterable[Dict[str, Any]] = ()) -> "MealCatalog":
        meals: List[Meal] = []
        for raw in list(recipes) + list(static):
            try:
                meals.append(recipe_to_meal(raw))
            except (KeyError, ValueError) as e:
                _LOG.warning("skipping recipe %s: %s", raw.get("id"), e)
        return cls(meals)

    def __iter__(self) -> Iterator[Meal]:
        return iter(self._meals)

    def __len__(self) -> int:
        return len(self._meals)

    @property
    def meals(self) -> tuple[Meal, ...]:
        return self._meals

    def get(self, meal_id: str) -> Meal | None:
        return self._by_id.get(meal_id)

    def filtered(self, preference: str) -> List[Meal]:
        return filter_by_preference(self.meals, preference)

    def select(self, meal_ids: Iterable[str]) -> List[Meal]:
        """Meals for `meal_ids` in the given order; unknown ids are skipped."""
        out = []
        for mid in meal_ids:
            meal = self.get(mid)
            if meal is None:
                _LOG.debug("selected id %s not in catalog", mid)
                continue
            out.append(meal)
        return out

