from fastapi import Depends

from voiceform.i18n import Translator, get_translator
from voiceform.normalizers import Normalizer, get_default_normalizer
from voiceform.store import SessionStore, get_store
from voiceform.wizard import SessionWizard

def get_normalizer() -> Normalizer:
    return get_default_normalizer()

def get_wizard(
    store: SessionStore = Depends(get_store),
    normalizer: Normalizer = Depends(get_normalizer),
    translator: Translator = Depends(get_translator),
) -> SessionWizard:
    """Per-request wizard over the shared store."""
    return SessionWizard(store, normalizer, translator)
