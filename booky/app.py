import logging

import textual.events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.events import Key
from textual.screen import ModalScreen, Screen
from textual.widgets import Static

from booky.dispatcher import AppSession, handle_key_event, handle_paste
from booky.edit import Focus

logger = logging.getLogger(__name__)

HELP_LINE = "up/k down/j: select   a: add   d: delete   q/ESC: quit"
EDIT_HELP_LINE = "Tab/up/down: move   Enter: next / press   ESC: cancel"
EMPTY_LINE = "No books yet. Press 'a' to add one."


def format_row(book):
    rating = f"{book.rating:.1f}"
    return f"{book.id:>4}  {book.title[:30]:30}  {book.author[:22]:22}  {book.genre[:12]:12}  {rating:>5}  {book.status}"


class BookListScreen(Screen):
    CSS = """
    BookListScreen {
        padding: 1;
    }
    #books {
        height: 1fr;
        border: round white;
        padding: 0 1;
        overflow: auto;
    }
    #status {
        color: yellow;
        height: 1;
    }
    .selected {
        background: #444444;
    }
    """

    def __init__(self):
        super().__init__()
        self._rendered_ids = None

    def compose(self) -> ComposeResult:
        yield Static("Books\n", id="title")
        yield Vertical(id="books")
        yield Static("", id="status", markup=False)
        yield Static(HELP_LINE, id="help", markup=False)

    def on_mount(self):
        self.refresh_view()

    def on_key(self, event: Key):
        event.stop()
        event.prevent_default()
        self.app.route_key(event)

    def refresh_view(self):
        session = self.app.session
        ids = tuple(book.id for book in session.items)
        if ids != self._rendered_ids:
            self._rebuild_list()
            self._rendered_ids = ids
        else:
            self._update_selection()
        self.query_one("#status", Static).update(session.status or "")

    def _rebuild_list(self):
        session = self.app.session
        container = self.query_one("#books")
        for static in list(container.query(Static)):
            static.remove()
        if not session.items:
            container.mount(Static(EMPTY_LINE, markup=False))
            return
        for i, book in enumerate(session.items):
            container.mount(Static(
                format_row(book),
                markup=False,
                classes="row selected" if i == session.selection.selected else "row",
            ))

    def _update_selection(self):
        selected = self.app.session.selection.selected
        for i, static in enumerate(self.query(".row")):
            if i == selected:
                static.add_class("selected")
            else:
                static.remove_class("selected")


class EditOverlay(ModalScreen):
    CSS = """
    EditOverlay {
        align: center middle;
    }
    #box {
        width: 60;
        height: auto;
        padding: 1 2;
        border: round white;
        background: black;
    }
    .field {
        border: round #666666;
        height: 3;
    }
    #buttons {
        height: auto;
        align: center middle;
    }
    #buttons Static {
        width: auto;
        margin: 0 2;
    }
    .selected {
        background: #444444;
    }
    """

    def compose(self) -> ComposeResult:
        with Vertical(id="box"):
            yield Static("New book\n")
            yield Static("Title")
            yield Static("", id="title-field", classes="field", markup=False)
            yield Static("Author")
            yield Static("", id="author-field", classes="field", markup=False)
            with Horizontal(id="buttons"):
                yield Static("[ Confirm ]", id="confirm", markup=False)
                yield Static("[ Cancel ]", id="cancel", markup=False)
            yield Static(EDIT_HELP_LINE, markup=False)

    def on_mount(self):
        self.refresh_view()

    def on_key(self, event: Key):
        event.stop()
        event.prevent_default()
        self.app.route_key(event)

    def on_paste(self, event: textual.events.Paste):
        event.stop()
        handle_paste(event.text, self.app.session)
        self.refresh_view()

    def refresh_view(self):
        edit = self.app.session.edit
        if edit is None:
            return
        targets = {
            Focus.TITLE: self.query_one("#title-field", Static),
            Focus.AUTHOR: self.query_one("#author-field", Static),
            Focus.CONFIRM: self.query_one("#confirm", Static),
            Focus.CANCEL: self.query_one("#cancel", Static),
        }
        targets[Focus.TITLE].update(edit.title + ("_" if edit.focus == Focus.TITLE else ""))
        targets[Focus.AUTHOR].update(edit.author + ("_" if edit.focus == Focus.AUTHOR else ""))
        for focus, widget in targets.items():
            if focus == edit.focus:
                widget.add_class("selected")
            else:
                widget.remove_class("selected")


class BookyApp(App):
    ENABLE_COMMAND_PALETTE = False

    def __init__(self, session: AppSession):
        super().__init__()
        self.session = session
        self.list_screen: BookListScreen = None

    def on_mount(self):
        self.list_screen = BookListScreen()
        self.push_screen(self.list_screen)

    def route_key(self, event: Key):
        handle_key_event(event, self.session)
        self.sync()

    def sync(self):
        """Bring the screen stack in line with the session."""
        if not self.session.running:
            logger.info("quitting")
            self.exit()
            return
        overlay_open = isinstance(self.screen, EditOverlay)
        if self.session.show_popup and not overlay_open:
            self.push_screen(EditOverlay())
        elif not self.session.show_popup and overlay_open:
            self.pop_screen()
        elif overlay_open:
            self.screen.refresh_view()
        self.list_screen.refresh_view()
