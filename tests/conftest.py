import pytest
from textual.events import Key

from booky.dispatcher import AppSession, handle_key_event
from booky.store import RecordStore, StoragePathProvider

SAMPLE_BOOKS = [
    ("Dune", "Frank Herbert"),
    ("Emma", "Jane Austen"),
    ("Ubik", "Philip K. Dick"),
]


@pytest.fixture
def paths(tmp_path):
    return StoragePathProvider("booky", base_dir=str(tmp_path / "config"))


@pytest.fixture
def store(paths):
    store = RecordStore(paths)
    store.initialize_if_absent()
    store.load()
    return store


@pytest.fixture
def filled_store(store):
    for title, author in SAMPLE_BOOKS:
        store.append(title, author)
    return store


@pytest.fixture
def session(store):
    return AppSession.open(store)


@pytest.fixture
def filled_session(filled_store):
    return AppSession.open(filled_store)


@pytest.fixture
def press():
    """Feed key names to a session, e.g. press(session, "a", "enter")."""
    def _press(session, *keys):
        for key in keys:
            handle_key_event(Key(key, None), session)
    return _press
