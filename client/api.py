import os, requests
from dotenv import load_dotenv
load_dotenv()
API = os.getenv("API_BASE_URL", "http://localhost:8000")
S = requests.Session(); S.headers.update({"Content-Type":"application/json"})

def health():      r=S.get(f"{API}/api/health",timeout=10); r.raise_for_status(); return r.json()
def structure():   r=S.get(f"{API}/api/form-structure",timeout=10); r.raise_for_status(); return r.json()
def start(lang):   r=S.post(f"{API}/api/start",json={"language":lang},timeout=30); r.raise_for_status(); return r.json()
def session(sid):  r=S.get(f"{API}/api/session/{sid}",timeout=10); r.raise_for_status(); return r.json()
def translate(text, lang="en"):
    r=S.post(f"{API}/api/translate",json={"text":text,"language":lang},timeout=30); r.raise_for_status(); return r.json()

def question(sid: str, index: int, lang: str | None = None):
    body = {"sessionId": sid, "fieldIndex": int(index)}
    if lang:
        body["language"] = lang
    r = S.post(f"{API}/api/question", json=body, timeout=30)
    r.raise_for_status()
    return r.json()

def answer(text: str, field: str, field_type: str, lang: str = "en"):
    r = S.post(f"{API}/api/answer",
               json={"answer": text, "field": field, "fieldType": field_type, "language": lang}, timeout=30)
    r.raise_for_status()
    return r.json()

def commit(sid: str, field: str, value: str):
    r = S.post(f"{API}/api/commit", json={"sessionId": sid, "field": field, "value": value}, timeout=30)
    r.raise_for_status()
    return r.json()

def upload(name: str, data: bytes, mime: str):
    # multipart: don't send the session's JSON content-type
    r = requests.post(f"{API}/api/upload-form", files={"file": (name, data, mime)}, timeout=60)
    r.raise_for_status()
    return r.json()

def pdf(sid: str, lang: str = "en") -> bytes:
    r = S.post(f"{API}/api/generate-pdf", json={"sessionId": sid, "language": lang}, timeout=60)
    r.raise_for_status()
    return r.content
