class BookyError(Exception):
    """Base class for errors the session knows how to report."""


class ConfigDirUnavailable(BookyError):
    pass


class PersistenceReadError(BookyError):
    pass


class PersistenceWriteError(BookyError):
    pass


class EmptyCollectionError(BookyError):
    pass
