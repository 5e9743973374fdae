"""Plan repository: meal plan items plus a capped undo history of plan snapshots."""
import logging
from typing import List, Optional, Sequence

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.infra import paths
from homechef.infra.paths import PLAN_FILE_NAME, PLAN_HISTORY_FILE_NAME
from homechef.infra.store import JsonCollection, atomic_write_json, read_json
from homechef.utilities.config import PLAN_UNDO_DEPTH

logger = logging.getLogger(__name__)


class PlanRepository(JsonCollection[MealPlanItem]):
    def __init__(self, path=None, history_path=None, undo_depth: int = PLAN_UNDO_DEPTH):
        super().__init__(PLAN_FILE_NAME, MealPlanItem.from_dict, path)
        self._history_path = history_path
        self.undo_depth = undo_depth

    @property
    def history_path(self):
        return self._history_path or paths.data_file(PLAN_HISTORY_FILE_NAME)

    def _load_history(self) -> List[list]:
        data = read_json(self.history_path, [], missing_ok=True)
        return data if isinstance(data, list) else []

    def push_history(self, plan: Sequence[MealPlanItem]) -> None:
        """Remember the plan as it is before an edit; only the last `undo_depth` snapshots are kept."""
        history = self._load_history()
        history.append([p.to_dict() for p in plan])
        atomic_write_json(self.history_path, history[-self.undo_depth:])

    def history_depth(self) -> int:
        return len(self._load_history())

    def undo(self) -> Optional[List[MealPlanItem]]:
        """Restore the most recent snapshot. Returns the restored plan, or None if there is nothing to undo.

        The plan is cleared and then saved item by item, mirroring how edits
        are persisted; a failure midway leaves a partially restored plan.
        """
        history = self._load_history()
        if not history:
            return None
        previous = [MealPlanItem.from_dict(row) for row in history.pop()]
        atomic_write_json(self.history_path, history)
        self.clear()
        for item in previous:
            self.save(item)
        logger.info(f"Plan restored from undo history ({len(history)} snapshots left)")
        return previous

    def replace_all(self, plan: Sequence[MealPlanItem]) -> None:
        """Clear then save each item (used by clear-history / clear-reviews)."""
        self.clear()
        for item in plan:
            self.save(item)
