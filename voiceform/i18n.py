import json
import logging
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional, Protocol

from voiceform.settings import TRANSLATIONS_PATH

log = logging.getLogger(__name__)

Table = Dict[str, Dict[str, str]]  # language tag -> English source -> translation


class Translator(Protocol):
    def translate(self, text: str, language: str) -> str:
        """Return `text` in `language`, or `text` itself when unknown."""
        ...


class TableTranslator(Translator):
    """Lookup-table translator. Stands in for a machine-translation service."""
    def __init__(self, table: Table):
        self.table = table

    @classmethod
    def from_file(cls, path: Path) -> "TableTranslator":
        with open(path, encoding="utf-8") as fh:
            table = json.load(fh)
        log.info("loaded translations for %s from %s", sorted(table), path)
        return cls(table)

    def languages(self):
        return sorted(self.table)

    def translate(self, text: str, language: Optional[str]) -> str:
        if not language:
            return text
        # "hi-IN" falls back to "hi"
        lang = language.lower()
        strings = self.table.get(lang) or self.table.get(lang.split("-")[0]) or {}
        return strings.get(text, text)


@lru_cache(maxsize=1)
def get_translator() -> Translator:
    """
    FastAPI dependency; the table is read once per process.
    A missing or broken table is logged and replaced by an empty one, so
    every prompt falls back to its English source.
    """
    try:
        return TableTranslator.from_file(TRANSLATIONS_PATH)
    except (OSError, ValueError):
        log.exception("could not load translations from %s; serving English only", TRANSLATIONS_PATH)
        return TableTranslator({})
