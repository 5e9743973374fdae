from fastapi import FastAPI, HTTPException, Query, Response
from fastapi.responses import JSONResponse

from datetime import date as _date, datetime
from typing import Optional
import logging

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.events.event_helpers import publish_plan_generated, publish_plan_undone
from homechef.events.web_observers import start as start_event_observers, get_events as get_web_events
from homechef.infra import paths
from homechef.infra.Plan_Repository import PlanRepository
from homechef.infra.Recipe_Repository import RecipeRepository
from homechef.infra.Settings_Repository import SettingsRepository
from homechef.infra.seed import seed_if_empty
from homechef.logic.planning.editing import (
    add_meal,
    clear_history,
    clear_reviews,
    find_by_date,
    find_by_id,
    move_meal,
    rate_meal,
    remove_meal,
    reorder_meal,
    update_servings,
)
from homechef.logic.planning.generator import fill_window
from homechef.logic.reporting.stats import MealPlannerStats
from homechef.utilities.export_import import DataExporter
from homechef.utilities.validators import (
    AddMealInput,
    GeneratePlanInput,
    MoveMealInput,
    RatingInput,
    ReorderMealInput,
    ServingsInput,
    SettingsInput,
)

# Routers
from homechef.api.routes import recipes, shopping

# Logging
logger = logging.getLogger("homechef_app")

# Initialize FastAPI app
app = FastAPI(title="HomeChef Hub API")

# Include routers
app.include_router(recipes.router)
app.include_router(shopping.router)


@app.on_event("startup")
def _startup():
    """Seed an empty store and register event bus subscribers when the app starts."""
    if seed_if_empty():
        logger.info("Sample recipes and a starter week were created")
    start_event_observers()
    logger.info("Web observers for planner events started")


# -------------------- Helpers --------------------
def _sorted_plan(plan):
    return [p.to_dict() for p in sorted(plan, key=lambda p: p.date)]


def _persist(repo: PlanRepository, changed):
    for item in changed:
        repo.save(item)


def _meal_or_404(plan, meal_id: int) -> MealPlanItem:
    meal = find_by_id(plan, meal_id)
    if meal is None:
        raise HTTPException(status_code=404, detail="Meal not found")
    return meal


# -------------------- API: Plan --------------------
@app.get("/api/plan")
def get_plan(start: Optional[_date] = Query(default=None), end: Optional[_date] = Query(default=None)):
    plan = PlanRepository().get_all()
    if start is not None:
        plan = [p for p in plan if p.date >= start]
    if end is not None:
        plan = [p for p in plan if p.date <= end]
    return _sorted_plan(plan)


@app.post("/api/plan/meals", status_code=201)
def api_add_meal(payload: AddMealInput):
    repo = PlanRepository()
    plan = repo.get_all()
    recipe = RecipeRepository().get(payload.recipe_id)
    if recipe is None:
        raise HTTPException(status_code=404, detail="Recipe not found")
    if find_by_date(plan, payload.date) is not None:
        raise HTTPException(status_code=400, detail=f"{payload.date.isoformat()} already has a meal")
    repo.push_history(plan)
    _, changed = add_meal(plan, recipe, payload.date)
    _persist(repo, changed)
    return changed[0].to_dict()


@app.post("/api/plan/generate")
def api_generate_plan(payload: GeneratePlanInput):
    repo = PlanRepository()
    plan = repo.get_all()
    created = fill_window(plan, RecipeRepository().get_all(), payload.start_date)
    if created:
        repo.push_history(plan)
        _persist(repo, created)
    logger.info(f"Generated {len(created)} meals from {payload.start_date.isoformat()}")
    publish_plan_generated(payload.start_date, created)
    return {"created": [p.to_dict() for p in created], "count": len(created)}


@app.post("/api/plan/move")
def api_move_meal(payload: MoveMealInput):
    repo = PlanRepository()
    plan = repo.get_all()
    if find_by_date(plan, payload.date) is None:
        raise HTTPException(status_code=404, detail="No meal planned on this date")
    _, changed = move_meal(plan, payload.date, payload.direction)
    if changed:
        repo.push_history(plan)
        _persist(repo, changed)
    return {"changed": [p.to_dict() for p in changed]}


@app.post("/api/plan/reorder")
def api_reorder_meal(payload: ReorderMealInput):
    repo = PlanRepository()
    plan = repo.get_all()
    _meal_or_404(plan, payload.meal_id)
    _, changed = reorder_meal(plan, payload.meal_id, payload.target_date)
    if changed:
        repo.push_history(plan)
        _persist(repo, changed)
    return {"changed": [p.to_dict() for p in changed]}


@app.delete("/api/plan/meals/{day}")
def api_remove_meal(day: _date):
    repo = PlanRepository()
    plan = repo.get_all()
    _, removed = remove_meal(plan, day)
    if removed is None:
        raise HTTPException(status_code=404, detail="No meal planned on this date")
    repo.push_history(plan)
    repo.delete(removed.id)
    return {"status": "deleted", "id": removed.id, "date": day.isoformat()}


@app.post("/api/plan/meals/{meal_id}/rate")
def api_rate_meal(meal_id: int, payload: RatingInput):
    repo = PlanRepository()
    plan = repo.get_all()
    _meal_or_404(plan, meal_id)
    _, changed = rate_meal(plan, meal_id, payload.rating, payload.comment)
    _persist(repo, changed)
    return changed[0].to_dict()


@app.put("/api/plan/meals/{meal_id}/servings")
def api_update_servings(meal_id: int, payload: ServingsInput):
    repo = PlanRepository()
    plan = repo.get_all()
    _meal_or_404(plan, meal_id)
    _, changed = update_servings(plan, meal_id, payload.servings)
    _persist(repo, changed)
    return changed[0].to_dict()


@app.get('/api/plan/undo/status')
def plan_undo_status():
    depth = PlanRepository().history_depth()
    return {'available': depth > 0, 'count': depth}


@app.post('/api/plan/undo')
def plan_undo():
    repo = PlanRepository()
    restored = repo.undo()
    if restored is None:
        raise HTTPException(status_code=400, detail='No plan change to undo')
    remaining = repo.history_depth()
    publish_plan_undone(len(restored), remaining)
    return {'undone': True, 'remaining': remaining, 'plan': _sorted_plan(restored)}


@app.post('/api/plan/clear-history')
def api_clear_history():
    repo = PlanRepository()
    plan = repo.get_all()
    kept = clear_history(plan)
    repo.replace_all(kept)
    logger.info(f"Cleared {len(plan) - len(kept)} past meals")
    return {'removed': len(plan) - len(kept), 'remaining': len(kept)}


@app.post('/api/plan/clear-reviews')
def api_clear_reviews():
    repo = PlanRepository()
    cleared = clear_reviews(repo.get_all())
    repo.replace_all(cleared)
    return {'cleared': len(cleared)}


# -------------------- API: Stats & Settings --------------------
@app.get('/api/stats')
def api_stats():
    stats = MealPlannerStats(PlanRepository().get_all(), RecipeRepository().get_all())
    return stats.generate_report()


@app.get('/api/settings')
def api_get_settings():
    return SettingsRepository().get()


@app.put('/api/settings')
def api_update_settings(payload: SettingsInput):
    repo = SettingsRepository()
    settings = repo.get()
    settings.update(payload.model_dump(exclude_unset=True))
    repo.save(settings)
    logger.info("Settings updated")
    return settings


# -------------------- API: Events --------------------
@app.get('/api/events')
def api_events(since: Optional[int] = Query(default=None, ge=0)):
    return get_web_events(since)


# -------------------- API: Export --------------------
def _attachment(kind: str, ext: str) -> dict:
    return {"Content-Disposition": f"attachment; filename=homechef_{kind}_{datetime.now().strftime('%Y-%m-%d')}.{ext}"}


@app.get('/api/export/recipes')
def api_export_recipes():
    return JSONResponse(content=DataExporter(paths.DATA_DIR).recipes_payload(), headers=_attachment("recipes", "json"))


@app.get('/api/export/history')
def api_export_history():
    return JSONResponse(content=DataExporter(paths.DATA_DIR).history_payload(), headers=_attachment("history", "json"))


@app.get('/api/export/all')
def api_export_all():
    return Response(
        content=DataExporter(paths.DATA_DIR).export_all_bytes(),
        media_type="application/zip",
        headers=_attachment("backup", "zip"),
    )
