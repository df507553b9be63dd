import json

from database.manager import DatabaseManager
from database.storage import (
    JOURNAL_KEY,
    MOODS_KEY,
    JsonFileStorage,
    MemoryStorage,
    WellnessStorage
)
from models import JournalEntry, Mood, MoodEntry


def test_memory_storage_roundtrip_and_clear():
    backend = MemoryStorage()
    assert backend.load("k") is None
    backend.save("k", [{"a": 1}])
    assert backend.load("k") == [{"a": 1}]
    backend.clear("k")
    backend.clear("k")
    assert backend.load("k") is None


def test_memory_storage_corrupt_value_is_absent():
    backend = MemoryStorage()
    backend.set_raw("k", "{not json")
    assert backend.load("k") is None
    backend.set_raw("k", '{"an": "object"}')
    assert backend.load("k") is None


def test_json_file_storage_writes_one_file_per_key(tmp_path):
    backend = JsonFileStorage(tmp_path / "user_1")
    backend.save(MOODS_KEY, [{"dateISO": "2026-10-19", "mood": "calm"}])

    path = tmp_path / "user_1" / f"{MOODS_KEY}.json"
    assert json.loads(path.read_text(encoding="utf-8")) == [{"dateISO": "2026-10-19", "mood": "calm"}]
    assert backend.load(MOODS_KEY) == [{"dateISO": "2026-10-19", "mood": "calm"}]
    assert list((tmp_path / "user_1").glob("*.tmp")) == []

    backend.clear(MOODS_KEY)
    assert not path.exists()
    assert backend.load(MOODS_KEY) is None


def test_json_file_storage_moves_corrupt_file_aside(tmp_path):
    directory = tmp_path / "user_1"
    directory.mkdir()
    (directory / f"{JOURNAL_KEY}.json").write_text("[{broken", encoding="utf-8")
    backend = JsonFileStorage(directory, backup_dir=tmp_path / "backups")

    assert backend.load(JOURNAL_KEY) is None
    assert not (directory / f"{JOURNAL_KEY}.json").exists()
    backups = list((tmp_path / "backups").glob(f"corrupted_{JOURNAL_KEY}_*.json"))
    assert len(backups) == 1


def test_json_file_storage_non_list_is_absent(tmp_path):
    directory = tmp_path / "user_1"
    directory.mkdir()
    (directory / f"{MOODS_KEY}.json").write_text('{"mood": "sad"}', encoding="utf-8")
    assert JsonFileStorage(directory).load(MOODS_KEY) is None


def test_json_file_storage_unreadable_path_is_absent(tmp_path):
    directory = tmp_path / "user_1"
    (directory / f"{MOODS_KEY}.json").mkdir(parents=True)
    assert JsonFileStorage(directory).load(MOODS_KEY) is None


def test_wellness_storage_typed_collections(storage):
    moods = [MoodEntry("2026-10-19", Mood.HAPPY), MoodEntry("2026-10-18", Mood.SAD)]
    storage.save_moods(moods)
    assert storage.load_moods() == moods

    journal = [JournalEntry("1", "2026-10-19", "note", 1)]
    storage.save_journal(journal)
    assert storage.load_journal() == journal

    storage.clear_moods()
    assert storage.load_moods() == []
    assert storage.load_journal() == journal


def test_wellness_storage_skips_malformed_items(backend, storage):
    backend.save(MOODS_KEY, [
        {"dateISO": "2026-10-19", "mood": "calm"},
        {"dateISO": "2026-10-18", "mood": "furious"},
        "garbage",
        {"mood": "sad"},
    ])
    assert storage.load_moods() == [MoodEntry("2026-10-19", Mood.CALM)]


def test_wellness_storage_missing_collections_are_empty(storage):
    assert storage.load_moods() == []
    assert storage.load_journal() == []


def test_database_manager_isolates_users(tmp_path):
    db = DatabaseManager(tmp_path)
    db.user_storage(1).save_moods([MoodEntry("2026-10-19", Mood.HAPPY)])

    assert db.user_storage(2).load_moods() == []
    assert db.user_storage(1) is db.user_storage(1)
    assert db.get_users_count() == 1


def test_database_manager_delete_user_data(tmp_path):
    db = DatabaseManager(tmp_path)
    db.user_storage(1).save_moods([MoodEntry("2026-10-19", Mood.HAPPY)])

    assert db.delete_user_data(1) is True
    assert db.user_storage(1).load_moods() == []
    assert db.delete_user_data(1) is False
