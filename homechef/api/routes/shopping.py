from datetime import date
from typing import List

from fastapi import APIRouter, HTTPException, Query, Response
import logging

from homechef.domain.ShoppingItem import ShoppingItem
from homechef.events.event_helpers import publish_shopping_refreshed
from homechef.infra.pdf_utils import generate_pdf_for_shopping_list
from homechef.infra.Plan_Repository import PlanRepository
from homechef.infra.Recipe_Repository import RecipeRepository
from homechef.infra.Settings_Repository import SettingsRepository
from homechef.infra.Shopping_Repository import ShoppingRepository
from homechef.logic.shopping.editing import add_manual_item, clear_checked, toggle_item, update_item
from homechef.logic.shopping.list_builder import aggregate, plan_for_week, rows_to_store
from homechef.utilities.validators import ShoppingItemInput, ShoppingItemUpdate

router = APIRouter(prefix="/api/shopping-list")
logger = logging.getLogger(__name__)


def compute_shopping_list(week_offset: int = 0, today: date = None) -> List[ShoppingItem]:
    """Aggregate the stored list with the plan of the selected week (not persisted)."""
    plan = plan_for_week(PlanRepository().get_all(), today or date.today(), week_offset)
    return aggregate(
        ShoppingRepository().get_all(),
        plan,
        RecipeRepository().get_all(),
        SettingsRepository().pantry_staples(),
    )


def refresh_shopping_list(week_offset: int = 0) -> List[ShoppingItem]:
    """Compute the week's list and store it next to the generated rows of other weeks."""
    repo = ShoppingRepository()
    items = compute_shopping_list(week_offset)
    repo.save_all(rows_to_store(repo.get_all(), items))
    publish_shopping_refreshed(week_offset, items)
    return items


def _category_order() -> list:
    stores = SettingsRepository().get().get("stores") or []
    return stores[0].get("category_order") if stores else None


@router.get("")
def get_shopping_list(week_offset: int = Query(default=0, ge=-52, le=52)):
    items = refresh_shopping_list(week_offset)
    return {"week_offset": week_offset, "count": len(items), "items": [i.to_dict() for i in items]}


@router.post("/items", status_code=201)
def add_item(payload: ShoppingItemInput):
    repo = ShoppingRepository()
    item = add_manual_item(repo.get_all(), payload.item_name)
    repo.save(item)
    logger.info(f"Manual shopping item added: {item.item_name}")
    return item.to_dict()


@router.post("/items/{item_id}/toggle")
def toggle(item_id: int, week_offset: int = Query(default=0, ge=-52, le=52)):
    repo = ShoppingRepository()
    toggled = toggle_item(repo.get_all(), compute_shopping_list(week_offset), item_id)
    if toggled is None:
        raise HTTPException(status_code=404, detail="Shopping item not found")
    repo.save(toggled)
    return toggled.to_dict()


@router.put("/items/{item_id}")
def edit_item(item_id: int, payload: ShoppingItemUpdate):
    repo = ShoppingRepository()
    try:
        updated = update_item(repo.get_all(), item_id, payload.model_dump(exclude_unset=True))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    if updated is None:
        raise HTTPException(status_code=404, detail="Shopping item not found")
    repo.save(updated)
    return updated.to_dict()


@router.post("/clear-checked")
def clear_checked_items():
    repo = ShoppingRepository()
    kept, deleted = clear_checked(repo.get_all())
    for item in deleted:
        repo.delete(item.id)
    logger.info(f"Cleared {len(deleted)} checked shopping items")
    return {"deleted": len(deleted), "remaining": len(kept)}


@router.get("/pdf")
def export_pdf(week_offset: int = Query(default=0, ge=-52, le=52)):
    items = refresh_shopping_list(week_offset)
    pdf_bytes = generate_pdf_for_shopping_list(items, category_order=_category_order())

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": f"attachment; filename=shopping_list_{date.today().isoformat()}.pdf"
        },
    )
