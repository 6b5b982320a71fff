from typing import Optional


class SelectionCursor:
    """Highlighted row in the book list, ``None`` when the list is empty."""

    def __init__(self, selected: Optional[int] = None):
        self.selected = selected

    def select(self, index: Optional[int]):
        self.selected = index

    def select_next(self, length: int):
        if length == 0:
            self.selected = None
            return
        if self.selected is None or self.selected >= length - 1:
            self.selected = 0
        else:
            self.selected += 1

    def select_previous(self, length: int):
        if length == 0:
            self.selected = None
            return
        if self.selected is None:
            self.selected = 0
        elif self.selected == 0:
            self.selected = length - 1
        else:
            self.selected -= 1

    def reclamp_after_removal(self, removed_index: Optional[int], length: int):
        if removed_index is None:
            return
        if length == 0:
            self.selected = None
        elif removed_index == 0:
            self.selected = 0
        else:
            self.selected = min(removed_index - 1, length - 1)

    def clamp(self, length: int):
        if length == 0:
            self.selected = None
        elif self.selected is None:
            self.selected = 0
        else:
            self.selected = max(0, min(self.selected, length - 1))
