"""
Export and Import functionality for recipes and meal history.
"""
import io
import json
import zipfile
from datetime import datetime
from pathlib import Path
from typing import Optional
import logging

from homechef.domain.MealPlanItem import MealPlanItem
from homechef.domain.Recipe import Recipe
from homechef.infra.store import atomic_write_json, read_json

logger = logging.getLogger(__name__)


class DataExporter:
    """Export planner data as JSON documents or a ZIP archive."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def recipes_payload(self) -> list:
        """All recipes, including their version history."""
        return read_json(self.data_dir / "recipes.json", [])

    def history_payload(self) -> list:
        """The entire plan (past history and future), sorted by date."""
        plan = read_json(self.data_dir / "plan.json", [])
        return sorted(plan, key=lambda p: p.get("date", ""))

    def export_recipes(self, output_path: Optional[Path] = None) -> Path:
        """Export all recipes to JSON file."""
        if output_path is None:
            output_path = Path(f"homechef_recipes_{datetime.now().strftime('%Y-%m-%d')}.json")
        recipes = self.recipes_payload()
        atomic_write_json(output_path, recipes)
        logger.info(f"Exported {len(recipes)} recipes to {output_path}")
        return output_path

    def export_history(self, output_path: Optional[Path] = None) -> Path:
        """Export the meal plan (history and future) to JSON file."""
        if output_path is None:
            output_path = Path(f"homechef_history_{datetime.now().strftime('%Y-%m-%d')}.json")
        plan = self.history_payload()
        atomic_write_json(output_path, plan)
        logger.info(f"Exported {len(plan)} plan items to {output_path}")
        return output_path

    def export_all_bytes(self) -> bytes:
        """ZIP archive (in memory) of every JSON data file plus metadata."""
        buf = io.BytesIO()
        with zipfile.ZipFile(buf, 'w', zipfile.ZIP_DEFLATED) as zipf:
            files = sorted(self.data_dir.glob('*.json'))
            for json_file in files:
                zipf.write(json_file, arcname=json_file.name)
            metadata = {
                'export_date': datetime.now().isoformat(),
                'version': '1.0',
                'files': [f.name for f in files],
            }
            zipf.writestr('metadata.json', json.dumps(metadata, indent=2))
        return buf.getvalue()


class DataImporter:
    """Import recipes exported by DataExporter."""

    def __init__(self, data_dir: Path):
        self.data_dir = Path(data_dir)

    def import_recipes(self, input_path: Path, merge: bool = True) -> int:
        """
        Import recipes from JSON file. Returns the number of recipes added.

        Args:
            input_path: Path to JSON file containing recipes
            merge: If True, keep existing recipes and skip incoming ids that already exist;
                   if False, replace the collection.
        """
        incoming = [Recipe.from_dict(r).to_dict() for r in read_json(Path(input_path), [])]
        recipes_file = self.data_dir / "recipes.json"
        if merge:
            existing = read_json(recipes_file, [])
            known_ids = {r.get("id") for r in existing}
            added = [r for r in incoming if r["id"] not in known_ids]
            final = existing + added
            logger.info(f"Merged {len(added)} of {len(incoming)} recipes with existing data")
        else:
            added = incoming
            final = incoming
            logger.info(f"Importing {len(incoming)} recipes (replace mode)")
        atomic_write_json(recipes_file, final)
        return len(added)

    def import_history(self, input_path: Path) -> int:
        """Replace the plan with an exported history file. Returns the number of plan items."""
        plan = [MealPlanItem.from_dict(p).to_dict() for p in read_json(Path(input_path), [])]
        atomic_write_json(self.data_dir / "plan.json", plan)
        logger.info(f"Imported {len(plan)} plan items")
        return len(plan)


# CLI interface
if __name__ == "__main__":
    import argparse
    from homechef.infra.paths import DATA_DIR

    parser = argparse.ArgumentParser(description='Export/Import HomeChef data')
    parser.add_argument('action', choices=['export', 'import'], help='Action to perform')
    parser.add_argument('--type', choices=['recipes', 'history', 'all'], default='all', help='Data type')
    parser.add_argument('--file', help='Input/output file path')
    parser.add_argument('--merge', action='store_true', help='Merge with existing recipes on import')

    args = parser.parse_args()

    if args.action == 'export':
        exporter = DataExporter(DATA_DIR)
        target = Path(args.file) if args.file else None
        if args.type == 'recipes':
            result = exporter.export_recipes(target)
        elif args.type == 'history':
            result = exporter.export_history(target)
        else:
            result = target or Path(f"homechef_backup_{datetime.now().strftime('%Y%m%d_%H%M%S')}.zip")
            result.write_bytes(exporter.export_all_bytes())
        print(f"✓ Exported to: {result}")

    elif args.action == 'import':
        if not args.file:
            parser.error("--file is required for import")
        importer = DataImporter(DATA_DIR)
        if args.type == 'history':
            count = importer.import_history(Path(args.file))
        else:
            count = importer.import_recipes(Path(args.file), merge=args.merge)
        print(f"✓ Imported {count} entries from: {args.file}")
