from locales import get_language_name, is_supported, supported_languages


def test_language_names():
    assert get_language_name("en") == "English"
    assert get_language_name("AM") == "Amharic"
    assert get_language_name("fr") == "fr"


def test_supported_languages():
    assert is_supported("am")
    assert is_supported(" EN ")
    assert not is_supported("xx")
    assert not is_supported(None)
    assert [l["code"] for l in supported_languages()] == ["en", "am"]
