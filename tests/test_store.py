from voiceform.forms import DEFAULT_FIELDS
from voiceform.models import Session
from voiceform.store import InMemorySessionStore


class FakeClock:
    def __init__(self):
        self.now = 1000.0
    def __call__(self):
        return self.now


def _session(sid="s1"):
    return Session(session_id=sid, fields=list(DEFAULT_FIELDS))


def test_put_get_delete():
    st = InMemorySessionStore(ttl_seconds=60)
    s = _session()
    st.put(s)
    assert st.get("s1") is s
    st.delete("s1")
    assert st.get("s1") is None
    st.delete("s1")  # deleting twice is fine

def test_expired_sessions_disappear():
    clock = FakeClock()
    st = InMemorySessionStore(ttl_seconds=60, clock=clock)
    st.put(_session())
    clock.now += 61
    assert st.get("s1") is None
    assert len(st) == 0

def test_get_extends_lifetime():
    clock = FakeClock()
    st = InMemorySessionStore(ttl_seconds=60, clock=clock)
    st.put(_session())
    clock.now += 50
    assert st.get("s1") is not None
    clock.now += 50
    assert st.get("s1") is not None

def test_put_purges_expired_entries():
    clock = FakeClock()
    st = InMemorySessionStore(ttl_seconds=60, clock=clock)
    st.put(_session("old"))
    clock.now += 120
    st.put(_session("new"))
    assert len(st) == 1
    assert st.purge_expired() == 0

def test_zero_ttl_never_expires():
    clock = FakeClock()
    st = InMemorySessionStore(ttl_seconds=0, clock=clock)
    st.put(_session())
    clock.now += 10 ** 9
    assert st.get("s1") is not None

def test_last_write_wins():
    st = InMemorySessionStore(ttl_seconds=60)
    a, b = _session(), _session()
    b.answers["email"] = "b@x.io"
    st.put(a)
    st.put(b)
    assert st.get("s1").answers == {"email": "b@x.io"}
