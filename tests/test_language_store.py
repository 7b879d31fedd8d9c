from core.domain.constants import LANGUAGE_STORAGE_KEY
from infrastructure.storage import FileLanguageStore, MemoryLanguageStore


def test_memory_store_roundtrip():
    store = MemoryLanguageStore()
    assert store.get(LANGUAGE_STORAGE_KEY) is None
    store.set(LANGUAGE_STORAGE_KEY, "am")
    assert store.get(LANGUAGE_STORAGE_KEY) == "am"


def test_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "state" / "language.json"
    FileLanguageStore(str(path)).set(LANGUAGE_STORAGE_KEY, "am")
    assert FileLanguageStore(str(path)).get(LANGUAGE_STORAGE_KEY) == "am"


def test_file_store_treats_corrupt_file_as_empty(tmp_path):
    path = tmp_path / "language.json"
    path.write_text("{not json", encoding="utf-8")
    store = FileLanguageStore(str(path))
    assert store.get(LANGUAGE_STORAGE_KEY) is None
    store.set(LANGUAGE_STORAGE_KEY, "en")
    assert store.get(LANGUAGE_STORAGE_KEY) == "en"
