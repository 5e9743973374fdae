"""Configuration management for HomeChef Hub."""
import os
from typing import Final, Tuple
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)


def _parse_penalties(raw: str) -> Tuple[Tuple[int, float], ...]:
    """Parse 'days:penalty,days:penalty' into an ascending tuple of steps."""
    steps = []
    for chunk in raw.split(','):
        chunk = chunk.strip()
        if not chunk:
            continue
        days, _, penalty = chunk.partition(':')
        steps.append((int(days), float(penalty)))
    return tuple(sorted(steps))


# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('HOMECHEF_DATA_DIR', str(BASE_DIR / 'data')))

# Plan generator scoring (empirical constants, tune via env)
PLAN_WINDOW_DAYS: Final[int] = int(os.getenv('PLAN_WINDOW_DAYS', '7'))
PLAN_NEUTRAL_RATING: Final[float] = float(os.getenv('PLAN_NEUTRAL_RATING', '3.5'))
PLAN_NEVER_EATEN_DAYS: Final[int] = int(os.getenv('PLAN_NEVER_EATEN_DAYS', '100'))
PLAN_RECENCY_CAP_DAYS: Final[int] = int(os.getenv('PLAN_RECENCY_CAP_DAYS', '30'))
PLAN_RATING_WEIGHT: Final[float] = float(os.getenv('PLAN_RATING_WEIGHT', '10'))
PLAN_RECENCY_WEIGHT: Final[float] = float(os.getenv('PLAN_RECENCY_WEIGHT', '2'))
PLAN_JITTER: Final[float] = float(os.getenv('PLAN_JITTER', '10'))
PLAN_PENALTIES: Final[Tuple[Tuple[int, float], ...]] = _parse_penalties(
    os.getenv('PLAN_PENALTIES', '1:10000,2:5000,5:2000,7:500')
)

# Plan undo depth (number of snapshots kept)
PLAN_UNDO_DEPTH: Final[int] = int(os.getenv('PLAN_UNDO_DEPTH', '10'))
