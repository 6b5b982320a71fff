"""Book records and the JSON file that mirrors them."""

import json
import logging
import os
from dataclasses import asdict, dataclass
from typing import List, Optional

from booky.errors import (
    ConfigDirUnavailable,
    EmptyCollectionError,
    PersistenceReadError,
    PersistenceWriteError,
)

logger = logging.getLogger(__name__)

FIRST_ID = 0
DEFAULT_RATING = 10.0


@dataclass
class Book:
    id: int
    title: str
    author: str
    genre: str = ""
    rating: float = DEFAULT_RATING
    status: str = ""

    def to_dict(self) -> dict:
        return asdict(self)

    @staticmethod
    def from_dict(data: dict) -> "Book":
        return Book(
            id=int(data["id"]),
            title=str(data["title"]),
            author=str(data["author"]),
            genre=str(data.get("genre") or ""),
            rating=float(data.get("rating", DEFAULT_RATING)),
            status=str(data.get("status") or ""),
        )


class StoragePathProvider:
    """Resolves the per-user directory that holds the book list, once.

    ``base_dir`` wins when given; otherwise ``$XDG_CONFIG_HOME/<app_id>`` or
    ``~/.config/<app_id>``. Raises ``ConfigDirUnavailable`` on construction
    when neither can be found.
    """

    def __init__(self, app_id: str = "booky", base_dir: Optional[str] = None,
                 books_file: str = "books.json"):
        self.app_id = app_id
        self.books_file = books_file
        self._config_dir = self._resolve(base_dir)

    def _resolve(self, base_dir: Optional[str]) -> str:
        if base_dir:
            return os.path.abspath(os.path.expanduser(base_dir))
        xdg = os.environ.get("XDG_CONFIG_HOME")
        if xdg:
            return os.path.join(xdg, self.app_id)
        home = os.path.expanduser("~")
        if not home or home == "~":
            raise ConfigDirUnavailable(
                f"cannot resolve a config directory for '{self.app_id}': no home directory"
            )
        return os.path.join(home, ".config", self.app_id)

    def config_dir(self) -> str:
        return self._config_dir

    def books_path(self) -> str:
        return os.path.join(self._config_dir, self.books_file)

    def log_path(self) -> str:
        return os.path.join(self._config_dir, f"{self.app_id}.log")


class RecordStore:
    """Ordered book list with a whole-file JSON mirror.

    Every mutation rewrites the file. When the write fails the in-memory
    change is kept and ``PersistenceWriteError`` is raised, so the caller
    decides how to report it. A file that could not be parsed is moved to
    ``<name>.bak`` before the first rewrite.
    """

    def __init__(self, paths: StoragePathProvider):
        self.paths = paths
        self.path = paths.books_path()
        self.books: List[Book] = []
        self._unreadable = False

    @property
    def backup_path(self) -> str:
        return self.path + ".bak"

    def initialize_if_absent(self) -> None:
        path = self.path
        if os.path.exists(path):
            return
        try:
            os.makedirs(os.path.dirname(path), exist_ok=True)
            with open(path, "w", encoding="utf-8") as f:
                json.dump([], f)
        except OSError as e:
            raise PersistenceWriteError(f"could not create {path}: {e}") from e
        logger.info("created empty book list at %s", path)

    def load(self) -> List[Book]:
        path = self.path
        self.books = []
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise PersistenceReadError(f"{path} does not exist") from e
        except (OSError, ValueError) as e:
            self._unreadable = True
            raise PersistenceReadError(f"could not read {path}: {e}") from e

        if not isinstance(data, list):
            self._unreadable = True
            raise PersistenceReadError(f"{path} does not contain a list of books")
        try:
            books = [Book.from_dict(item) for item in data]
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            self._unreadable = True
            raise PersistenceReadError(f"malformed book entry in {path}: {e}") from e

        self._unreadable = False
        self.books = books
        logger.info("loaded %d books from %s", len(books), path)
        return list(books)

    def save(self) -> None:
        path = self.path
        try:
            if self._unreadable and os.path.isfile(path):
                os.replace(path, self.backup_path)
                logger.warning("moved unreadable %s to %s", path, self.backup_path)
            self._unreadable = False
            with open(path, "w", encoding="utf-8") as f:
                json.dump([b.to_dict() for b in self.books], f, indent=2)
        except OSError as e:
            raise PersistenceWriteError(f"could not write {path}: {e}") from e

    def last_id(self) -> int:
        if not self.books:
            raise EmptyCollectionError("no books to take an id from")
        return self.books[-1].id

    def next_id(self) -> int:
        try:
            return self.last_id() + 1
        except EmptyCollectionError:
            return FIRST_ID

    def append(self, title: str, author: str) -> Book:
        book = Book(id=self.next_id(), title=title, author=author)
        self.books.append(book)
        logger.info("added book %d: %r by %r", book.id, title, author)
        self.save()
        return book

    def remove_at(self, index: Optional[int]) -> Optional[int]:
        """Remove the record at ``index``; returns the removed index.

        ``None`` means nothing is selected and is a no-op.
        """
        if index is None:
            return None
        book = self.books.pop(index)
        logger.info("removed book %d: %r", book.id, book.title)
        self.save()
        return index
