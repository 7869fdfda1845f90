from sqlalchemy import event


def _unicode_lower(value):
    return value.lower() if value is not None else None


def register_unicode_functions(dbapi_connection, connection_record=None):
    """
    Replace SQLite's ASCII-only lower() with Python's, so case-insensitive
    search folds "Über" the same way the memory store does.
    """
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def install_unicode_functions(engine):
    event.listen(engine, "connect", register_unicode_functions)
    return engine
