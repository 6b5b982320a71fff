import logging
import os
import sys

from booky.app import BookyApp
from booky.config import settings
from booky.dispatcher import AppSession
from booky.errors import ConfigDirUnavailable, PersistenceWriteError
from booky.store import RecordStore, StoragePathProvider

logger = logging.getLogger(__name__)


def configure_logging(paths: StoragePathProvider):
    log_file = settings.log_file or paths.log_path()
    os.makedirs(os.path.dirname(os.path.abspath(log_file)), exist_ok=True)
    logging.basicConfig(
        filename=log_file,
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    base_dir = argv[0] if len(argv) == 1 else settings.config_dir
    try:
        paths = StoragePathProvider(settings.app_id, base_dir=base_dir, books_file=settings.books_file)
        configure_logging(paths)
    except (ConfigDirUnavailable, OSError) as e:
        print(f"booky: {e}", file=sys.stderr)
        return 1

    store = RecordStore(paths)
    try:
        store.initialize_if_absent()
    except PersistenceWriteError as e:
        logger.error("%s", e)
        print(f"booky: warning: {e}", file=sys.stderr)

    session = AppSession.open(store)
    app = BookyApp(session)
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
