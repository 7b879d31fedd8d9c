from infrastructure.storage.language_store import FileLanguageStore, MemoryLanguageStore

__all__ = [
    "FileLanguageStore",
    "MemoryLanguageStore",
]
