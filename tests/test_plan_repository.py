"""
Plan storage, notifications and the generate → save → notify flow,
against an in-memory SQLite database.
"""
from __future__ import annotations

import pytest
from sqlalchemy import func, select, text

from core.day_planner import first_chooser
from core.models.meal import Meal
from core.models.plan import PreferenceSpec
from core.plan_assembler import assemble_week
from services.db import MealPlan, Notification, Recipe
from services.notifications import list_notifications, notify
from services.plan_repository import PersistenceError, PlanRepository
from services.plan_service import generate_for_user

FOUR = [
    Meal(id="b", name="Oats", type="breakfast", price=3, calories=300),
    Meal(id="l", name="Soup", type="lunch", price=4, calories=500),
    Meal(id="d", name="Stew", type="dinner", price=6, calories=600),
    Meal(id="s", name="Apple", type="snack", price=2, calories=150),
]
PREFS = PreferenceSpec(budget=70, calorie_goal=1400, meals_per_day=3)


def _plan():
    return assemble_week(PREFS, FOUR, chooser=first_chooser)


# ── repository ──────────────────────────────────────────────────────
def test_save_makes_new_plan_the_only_current_one(run_db):
    async def scenario(maker):
        async with maker() as db:
            repo = PlanRepository(db)
            first = await repo.save_new_plan("u1", _plan())
            second = await repo.save_new_plan("u1", _plan())
            other = await repo.save_new_plan("u2", _plan())

            current = await repo.get_current_plan("u1")
            flags = {p.id: p.is_current for p in await repo.list_plans("u1")}
            return first, second, other, current.id, flags, (await repo.get_current_plan("u2")).id

    first, second, other, current, flags, u2_current = run_db(scenario)
    assert current == second
    assert flags == {first: False, second: True}
    assert u2_current == other


def test_saved_document_round_trips(run_db):
    async def scenario(maker):
        async with maker() as db:
            plan_id = await PlanRepository(db).save_new_plan("u1", _plan())
        async with maker() as db:
            return await PlanRepository(db).get(plan_id)

    row = run_db(scenario)
    assert row.total_weekly_cost == 63
    assert row.total_weekly_calories == 6650
    assert row.preferences["budget"] == 70
    assert [m["id"] for m in row.weekly_plan[0]["meals"]] == ["b", "l", "s"]
    assert row.created_at is not None


def test_duplicate_current_plans_repaired_on_read(run_db):
    async def scenario(maker):
        async with maker() as db:
            for _ in range(3):
                db.add(
                    MealPlan(
                        user_id="u1", is_current=True, preferences={}, weekly_plan=[],
                        total_weekly_cost=0, total_weekly_calories=0,
                    )
                )
            await db.commit()

            current = await PlanRepository(db).get_current_plan("u1")
        async with maker() as db:
            n = await db.scalar(
                select(func.count()).select_from(MealPlan).where(MealPlan.is_current.is_(True))
            )
        return current.id, n

    current_id, still_current = run_db(scenario)
    assert current_id == 3
    assert still_current == 1


def test_list_newest_first_and_missing_user(run_db):
    async def scenario(maker):
        async with maker() as db:
            repo = PlanRepository(db)
            ids = [await repo.save_new_plan("u1", _plan()) for _ in range(3)]
            listed = [p.id for p in await repo.list_plans("u1")]
            return ids, listed, await repo.get_current_plan("nobody"), await repo.list_plans("nobody")

    ids, listed, none_current, none_listed = run_db(scenario)
    assert listed == list(reversed(ids))
    assert none_current is None
    assert none_listed == []


def test_set_current_switches_flag(run_db):
    async def scenario(maker):
        async with maker() as db:
            repo = PlanRepository(db)
            old = await repo.save_new_plan("u1", _plan())
            await repo.save_new_plan("u1", _plan())
            await repo.set_current(old)
            missing = await repo.set_current(999)
            return old, (await repo.get_current_plan("u1")).id, missing

    old, current, missing = run_db(scenario)
    assert current == old
    assert missing is None


def test_delete_plan(run_db):
    async def scenario(maker):
        async with maker() as db:
            repo = PlanRepository(db)
            plan_id = await repo.save_new_plan("u1", _plan())
            return await repo.delete_plan(plan_id), await repo.delete_plan(plan_id), await repo.list_plans("u1")

    deleted, again, left = run_db(scenario)
    assert deleted is True
    assert again is False
    assert left == []


def test_save_without_schema_raises_persistence_error(run_db):
    async def scenario(maker):
        async with maker() as db:
            with pytest.raises(PersistenceError):
                await PlanRepository(db).save_new_plan("u1", _plan())

    run_db(scenario, tables=False)


def _block(statement: str):
    return text(
        f"CREATE TRIGGER block_{statement.lower()} BEFORE {statement} ON meal_plans "
        "BEGIN SELECT RAISE(ABORT, 'read only'); END"
    )


def test_failed_duplicate_repair_raises_persistence_error(run_db):
    async def scenario(maker):
        async with maker() as db:
            for _ in range(2):
                db.add(
                    MealPlan(
                        user_id="u1", is_current=True, preferences={}, weekly_plan=[],
                        total_weekly_cost=0, total_weekly_calories=0,
                    )
                )
            await db.commit()
            await db.execute(_block("UPDATE"))
            await db.commit()

            with pytest.raises(PersistenceError):
                await PlanRepository(db).get_current_plan("u1")

    run_db(scenario)


def test_failed_delete_raises_persistence_error(run_db):
    async def scenario(maker):
        async with maker() as db:
            plan_id = await PlanRepository(db).save_new_plan("u1", _plan())
            await db.execute(_block("DELETE"))
            await db.commit()

            with pytest.raises(PersistenceError):
                await PlanRepository(db).delete_plan(plan_id)
        async with maker() as db:
            return [p.id for p in await PlanRepository(db).list_plans("u1")], plan_id

    left, plan_id = run_db(scenario)
    assert left == [plan_id]


# ── notifications ───────────────────────────────────────────────────
def test_notify_and_list(run_db):
    async def scenario(maker):
        async with maker() as db:
            for i in range(55):
                await notify(db, "u1", title=f"n{i}", message="hello")
            assert await notify(db, "", title="lost", message="nobody") is False
            return await list_notifications(db, "u1")

    listed = run_db(scenario)
    assert len(listed) == 50
    assert listed[0].title == "n54"
    assert all(n.read is False for n in listed)


def test_notify_failure_is_swallowed(run_db):
    async def scenario(maker):
        async with maker() as db:
            return await notify(db, "u1", title="t", message="m")

    assert run_db(scenario, tables=False) is False


# ── generate → save → notify ────────────────────────────────────────
def test_generate_for_user_saves_and_notifies(run_db):
    async def scenario(maker):
        async with maker() as db:
            res = await generate_for_user(db, "u1", PREFS, chooser=first_chooser)
            notes = await list_notifications(db, "u1")
            return res, notes

    res, notes = run_db(scenario)
    assert res.saved and res.error is None
    assert res.plan.is_current
    assert len(res.plan.weekly_plan) == 7
    assert notes[0].title == "Meal Plan Generated"
    assert notes[0].plan_id == res.plan_id
    assert notes[0].message.endswith(f"Total cost: ${res.plan.total_weekly_cost:.2f}")


def test_generate_uses_published_recipes(run_db):
    async def scenario(maker):
        async with maker() as db:
            db.add(Recipe(id="r1", name="Cheap Porridge", type="breakfast", price=0.5,
                          calories=400, tags=["vegan"], status="published"))
            db.add(Recipe(id="r2", name="Secret Pancakes", type="breakfast", price=0.5,
                          calories=400, tags=["vegan"], status="pending"))
            await db.commit()
            prefs = PreferenceSpec(budget=70, meals_per_day=3, selected_recipe_ids=["r1", "r2"])
            return await generate_for_user(db, "u1", prefs, chooser=first_chooser)

    res = run_db(scenario)
    ids = [m.id for d in res.plan.weekly_plan for m in d.meals]
    assert ids[0] == "r1"
    assert "r2" not in ids


def test_generated_plan_returned_when_save_fails(run_db):
    async def scenario(maker):
        async with maker() as db:
            await db.execute(text("DROP TABLE meal_plans"))
            await db.commit()
            return await generate_for_user(db, "u1", PREFS, chooser=first_chooser)

    res = run_db(scenario)
    assert res.saved is False
    assert res.plan_id is None
    assert res.error
    assert res.plan.total_weekly_calories > 0
    assert not res.plan.is_current
