# services/data_export.py

import json
from datetime import datetime
from typing import Any, Dict

from database.storage import WellnessStorage
from services.classifiers import mood_to_color


def build_export(storage: WellnessStorage, exported_at: datetime) -> Dict[str, Any]:
    moods = storage.load_moods()
    journal = storage.load_journal()
    return {
        "exported_at": exported_at.isoformat(),
        "moods": [{**entry.to_dict(), "color": mood_to_color(entry.mood)} for entry in moods],
        "journal": [entry.to_dict() for entry in journal],
    }


def export_to_json_bytes(data: Dict[str, Any]) -> bytes:
    return json.dumps(data, ensure_ascii=False, indent=2).encode("utf-8")


def export_filename(user_id: int, exported_at: datetime) -> str:
    return f"mindfulspace_export_{user_id}_{exported_at.strftime('%Y%m%d')}.json"
