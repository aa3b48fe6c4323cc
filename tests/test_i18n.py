import json

from voiceform.i18n import TableTranslator, get_translator


def test_known_string_is_translated(translator):
    assert translator.translate("What is your full name?", "hi") == "आपका पूरा नाम क्या है?"

def test_region_tag_falls_back_to_language(translator):
    assert translator.translate("What is your full name?", "hi-IN") == "आपका पूरा नाम क्या है?"

def test_unknown_language_or_string_returns_source(translator):
    assert translator.translate("What is your full name?", "fr") == "What is your full name?"
    assert translator.translate("Hello", "hi") == "Hello"
    assert translator.translate("Hello", None) == "Hello"

def test_from_file(tmp_path):
    p = tmp_path / "t.json"
    p.write_text(json.dumps({"te": {"Download PDF": "PDF డౌన్‌లోడ్ చేయండి"}}), encoding="utf-8")
    t = TableTranslator.from_file(p)
    assert t.languages() == ["te"]
    assert t.translate("Download PDF", "te") == "PDF డౌన్‌లోడ్ చేయండి"

def test_packaged_table_covers_all_prompts():
    from voiceform.forms import DEFAULT_FIELDS
    t = get_translator()
    for lang in ("hi", "bn", "te"):
        for f in DEFAULT_FIELDS:
            assert t.translate(f.question, lang) != f.question

def test_broken_table_falls_back_to_source(tmp_path, monkeypatch):
    from voiceform import i18n
    bad = tmp_path / "broken.json"
    bad.write_text("{not json", encoding="utf-8")
    monkeypatch.setattr(i18n, "TRANSLATIONS_PATH", bad)
    i18n.get_translator.cache_clear()
    try:
        t = i18n.get_translator()
        assert t.translate("What is your full name?", "hi") == "What is your full name?"
    finally:
        i18n.get_translator.cache_clear()

def test_missing_table_falls_back_to_source(tmp_path, monkeypatch):
    from voiceform import i18n
    monkeypatch.setattr(i18n, "TRANSLATIONS_PATH", tmp_path / "nope.json")
    i18n.get_translator.cache_clear()
    try:
        assert i18n.get_translator().translate("Download PDF", "te") == "Download PDF"
    finally:
        i18n.get_translator.cache_clear()
