"""Session state and the key dispatcher that drives it.

Each key event goes to exactly one layer: the edit session while the overlay
is open, the global command table otherwise. Ctrl+C is the only key that
reaches past an open overlay.
"""

import logging
from enum import Enum
from typing import List, Optional

from booky.edit import EditOutcome, EditSession
from booky.errors import PersistenceReadError, PersistenceWriteError
from booky.selection import SelectionCursor
from booky.store import Book, RecordStore

logger = logging.getLogger(__name__)

QUIT_KEYS = ("q", "escape")
INTERRUPT_KEYS = ("ctrl+c",)
UP_KEYS = ("up", "k")
DOWN_KEYS = ("down", "j")


class InputMode(Enum):
    NORMAL = "normal"
    EDITING = "editing"


class AppSession:
    def __init__(self, store: RecordStore):
        self.running = True
        self.show_popup = False
        self.store = store
        self.selection = SelectionCursor()
        self.edit: Optional[EditSession] = None
        self.status: Optional[str] = None

    @classmethod
    def open(cls, store: RecordStore) -> "AppSession":
        """Load the store; a broken file leaves an empty list and a warning."""
        session = cls(store)
        try:
            store.load()
        except PersistenceReadError as e:
            logger.warning("starting with an empty list: %s", e)
            session.status = f"Warning: {e}"
        session.selection.clamp(len(store.books))
        return session

    @property
    def items(self) -> List[Book]:
        return self.store.books

    @property
    def input_mode(self) -> InputMode:
        return InputMode.EDITING if self.edit is not None else InputMode.NORMAL

    def quit(self):
        self.running = False

    def open_editor(self):
        self.edit = EditSession()
        self.show_popup = True

    def close_editor(self):
        self.edit = None
        self.show_popup = False

    def report(self, error: Exception):
        logger.error("%s", error)
        self.status = f"Error: {error}"


def handle_key_event(event, session: AppSession):
    """Apply one key event to the session."""
    session.status = None

    if event.key in INTERRUPT_KEYS:
        session.quit()
        return

    if session.edit is not None:
        _route_to_editor(event, session)
        return

    key = event.key
    count = len(session.items)
    if key in QUIT_KEYS:
        session.quit()
    elif key == "d":
        if count:
            _remove_selected(session)
    elif key == "a":
        session.open_editor()
    elif key in UP_KEYS:
        if count:
            session.selection.select_previous(count)
    elif key in DOWN_KEYS:
        if count:
            session.selection.select_next(count)


def handle_paste(text: str, session: AppSession):
    if session.edit is not None:
        session.edit.insert(text)


def _route_to_editor(event, session: AppSession):
    outcome = session.edit.route_key(event)
    if outcome == EditOutcome.COMMIT:
        title, author = session.edit.commit()
        session.close_editor()
        try:
            session.store.append(title, author)
        except PersistenceWriteError as e:
            session.report(e)
        session.selection.select(len(session.items) - 1)
    elif outcome == EditOutcome.CANCEL:
        session.close_editor()


def _remove_selected(session: AppSession):
    index = session.selection.selected
    try:
        session.store.remove_at(index)
    except PersistenceWriteError as e:
        session.report(e)
    session.selection.reclamp_after_removal(index, len(session.items))
