from core.services import TranslationCache


def test_get_is_exact_match():
    cache = TranslationCache()
    cache.put("am", "Login", "ግባ")
    assert cache.get("am", "Login") == "ግባ"
    assert cache.get("am", "login") is None
    assert cache.get("am", "Login ") is None
    assert cache.get("en", "Login") is None


def test_put_overwrites():
    cache = TranslationCache()
    cache.put("am", "Save", "old")
    cache.put("am", "Save", "አስቀምጥ")
    assert cache.get("am", "Save") == "አስቀምጥ"
    assert cache.size() == 1


def test_clear_empties_every_language():
    cache = TranslationCache()
    cache.put("am", "Save", "አስቀምጥ")
    cache.put("en", "አስቀምጥ", "Save")
    cache.clear()
    assert cache.get("am", "Save") is None
    assert cache.get("en", "አስቀምጥ") is None
    assert cache.size() == 0


def test_stats_counts_per_language():
    cache = TranslationCache()
    cache.put("am", "Save", "አስቀምጥ")
    cache.put("am", "Edit", "አስተካክል")
    cache.put("en", "ውጣ", "Logout")
    assert cache.stats() == {"am": 2, "en": 1, "total": 3}
