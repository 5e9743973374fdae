"""Settings repository: a single JSON document with household preferences and pantry staples."""
import copy

from homechef.infra import paths
from homechef.infra.paths import SETTINGS_FILE_NAME
from homechef.infra.store import atomic_write_json, read_json
from homechef.utilities.constants import INITIAL_SETTINGS


class SettingsRepository:
    def __init__(self, path=None):
        self._path = path

    @property
    def path(self):
        return self._path or paths.data_file(SETTINGS_FILE_NAME)

    def get(self) -> dict:
        '''Stored settings layered over the defaults (missing keys fall back to INITIAL_SETTINGS).'''
        settings = copy.deepcopy(INITIAL_SETTINGS)
        if not self.path.exists():
            return settings
        stored = read_json(self.path, {})
        if isinstance(stored, dict):
            settings.update(stored)
        return settings

    def save(self, settings: dict) -> None:
        atomic_write_json(self.path, settings)

    def pantry_staples(self) -> list:
        return list(self.get().get("pantry_staples") or [])
