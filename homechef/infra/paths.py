from pathlib import Path
from homechef.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth).
# DATA_DIR is read at call time so tests can point it at a temporary directory.
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()

RECIPES_FILE_NAME = 'recipes.json'
PLAN_FILE_NAME = 'plan.json'
SHOPPING_FILE_NAME = 'shopping.json'
SETTINGS_FILE_NAME = 'settings.json'
PLAN_HISTORY_FILE_NAME = 'plan_history.json'


def data_file(name: str) -> Path:
    return Path(DATA_DIR) / name


__all__ = ['DATA_DIR', 'data_file', 'RECIPES_FILE_NAME', 'PLAN_FILE_NAME', 'SHOPPING_FILE_NAME',
           'SETTINGS_FILE_NAME', 'PLAN_HISTORY_FILE_NAME']
