import json
import logging
from datetime import date, timedelta

import pytest

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.domain.ShoppingItem import ShoppingItem
from homechef.infra.Plan_Repository import PlanRepository
from homechef.infra.Recipe_Repository import RecipeRepository
from homechef.infra.Settings_Repository import SettingsRepository
from homechef.infra.Shopping_Repository import ShoppingRepository
from homechef.infra.seed import seed_if_empty
from homechef.utilities.export_import import DataExporter, DataImporter

TODAY = date(2026, 3, 2)


def test_missing_file_is_empty_collection(data_dir):
    repo = RecipeRepository()
    assert repo.get_all() == []
    assert repo.is_empty()
    assert repo.get(1) is None


def test_invalid_json_is_not_swallowed(data_dir):
    (data_dir / "recipes.json").write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        RecipeRepository().get_all()


def test_save_is_upsert_and_delete(data_dir):
    repo = RecipeRepository()
    repo.save(Recipe(id=1, title="Soup"))
    repo.save(Recipe(id=2, title="Stew"))
    repo.save(Recipe(id=1, title="Tomato Soup"))
    assert [r.title for r in repo.get_all()] == ["Tomato Soup", "Stew"]
    repo.delete(2)
    assert [r.id for r in repo.get_all()] == [1]
    # no temp files left behind
    assert sorted(p.name for p in data_dir.iterdir()) == ["recipes.json"]


def test_shopping_save_all_replaces(data_dir):
    repo = ShoppingRepository()
    repo.save(ShoppingItem(1, "Milk", 1, "l", "Dairy"))
    repo.save_all([ShoppingItem(2, "Eggs", 6, "pc", "Dairy")])
    assert [i.id for i in repo.get_all()] == [2]


def test_settings_default_and_overrides(data_dir):
    repo = SettingsRepository()
    assert "Salt" in repo.pantry_staples()
    repo.save({"pantry_staples": ["Rice"]})
    settings = repo.get()
    assert settings["pantry_staples"] == ["Rice"]
    assert settings["language"] == "en"


def test_plan_undo_restores_previous_snapshot(data_dir):
    repo = PlanRepository()
    first = MealPlanItem(1, TODAY, 1)
    repo.save(first)
    repo.push_history(repo.get_all())
    repo.save(MealPlanItem(2, TODAY + timedelta(days=1), 2))
    assert repo.history_depth() == 1

    restored = repo.undo()
    assert [p.id for p in restored] == [1]
    assert [p.id for p in repo.get_all()] == [1]
    assert repo.history_depth() == 0
    assert repo.undo() is None


def test_missing_undo_history_is_not_a_warning(data_dir, caplog):
    repo = PlanRepository()
    with caplog.at_level(logging.DEBUG, logger="homechef.infra.store"):
        assert repo.history_depth() == 0
        repo.push_history([MealPlanItem(1, TODAY, 1)])
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    assert any("plan_history.json" in r.getMessage() for r in caplog.records)


def test_missing_collection_still_warns(data_dir, caplog):
    with caplog.at_level(logging.WARNING, logger="homechef.infra.store"):
        RecipeRepository().get_all()
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_plan_undo_depth_is_capped(data_dir):
    repo = PlanRepository(undo_depth=3)
    for i in range(5):
        repo.push_history([MealPlanItem(i, TODAY, 1)])
    assert repo.history_depth() == 3
    assert [p.id for p in repo.undo()] == [4]


def test_seed_only_when_empty(data_dir):
    assert seed_if_empty(today=TODAY) is True
    recipes = RecipeRepository().get_all()
    assert len(recipes) == 4
    plan = PlanRepository().get_all()
    assert len(plan) == 7
    assert plan[0].date == TODAY
    names = [i.item_name for i in ShoppingRepository().get_all()]
    assert "Salt" not in names
    assert "Salt for seasoning" not in names
    assert "Cream" in names
    assert seed_if_empty(today=TODAY) is False


def test_import_recipes_merges_by_id(data_dir, tmp_path_factory):
    repo = RecipeRepository()
    repo.save(Recipe(id=1, title="Soup"))
    exported = DataExporter(data_dir).export_recipes(tmp_path_factory.mktemp("out") / "recipes.json")

    repo.save(Recipe(id=2, title="Stew"))
    repo.delete(1)
    added = DataImporter(data_dir).import_recipes(exported, merge=True)
    assert added == 1
    assert sorted(r.id for r in repo.get_all()) == [1, 2]

    assert DataImporter(data_dir).import_recipes(exported, merge=False) == 1
    assert [r.title for r in repo.get_all()] == ["Soup"]
