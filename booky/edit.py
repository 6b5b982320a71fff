"""State of the "new book" overlay: two text buffers and a focus ring."""

from enum import Enum, IntEnum
from typing import Tuple

FOCUS_COUNT = 4


class Focus(IntEnum):
    TITLE = 0
    AUTHOR = 1
    CONFIRM = 2
    CANCEL = 3

    def next(self) -> "Focus":
        return Focus((self + 1) % FOCUS_COUNT)

    def previous(self) -> "Focus":
        return Focus((self - 1) % FOCUS_COUNT)

    @property
    def is_field(self) -> bool:
        return self in (Focus.TITLE, Focus.AUTHOR)


class EditOutcome(Enum):
    KEEP = "keep"
    COMMIT = "commit"
    CANCEL = "cancel"


class EditSession:
    def __init__(self):
        self.title = ""
        self.author = ""
        self.focus = Focus.TITLE
        # reserved for editing an existing book in place
        self.is_edit = False

    def route_key(self, event) -> EditOutcome:
        key = event.key

        if key == "escape":
            return EditOutcome.CANCEL
        if key in ("tab", "down"):
            self.focus = self.focus.next()
            return EditOutcome.KEEP
        if key in ("shift+tab", "up"):
            self.focus = self.focus.previous()
            return EditOutcome.KEEP
        if key == "enter":
            if self.focus == Focus.CONFIRM:
                return EditOutcome.COMMIT
            if self.focus == Focus.CANCEL:
                return EditOutcome.CANCEL
            self.focus = self.focus.next()
            return EditOutcome.KEEP

        if not self.focus.is_field:
            if key in ("left", "right"):
                self.focus = Focus.CANCEL if self.focus == Focus.CONFIRM else Focus.CONFIRM
            return EditOutcome.KEEP

        if key == "backspace":
            self._set_buffer(self._buffer()[:-1])
        elif event.character and event.character.isprintable():
            self._set_buffer(self._buffer() + event.character)
        return EditOutcome.KEEP

    def insert(self, text: str):
        """Append pasted text to the focused field."""
        if not self.focus.is_field:
            return
        text = "".join(c for c in text if c.isprintable())
        self._set_buffer(self._buffer() + text)

    def commit(self) -> Tuple[str, str]:
        return self.title.strip(), self.author.strip()

    def _buffer(self) -> str:
        return self.title if self.focus == Focus.TITLE else self.author

    def _set_buffer(self, value: str):
        if self.focus == Focus.TITLE:
            self.title = value
        else:
            self.author = value
