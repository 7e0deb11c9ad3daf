from sqlalchemy import event


def serialize_sqlite_writes(engine, busy_timeout_ms: int = 30000) -> None:
    """
    Makes every SQLite transaction start with ``BEGIN IMMEDIATE``.

    ``SELECT ... FOR UPDATE`` is a no-op on SQLite and pysqlite defers BEGIN
    until the first write, so two requests could both read a scope's count
    before either inserts. Taking the database write lock at the start of
    the transaction serializes them instead; waiting writers block for up
    to ``busy_timeout_ms``.
    """

    @event.listens_for(engine, "connect")
    def disable_pysqlite_begin(dbapi_connection, connection_record):
        # SQLAlchemy emits BEGIN itself from the "begin" hook below
        dbapi_connection.isolation_level = None
        dbapi_connection.execute(f"PRAGMA busy_timeout = {int(busy_timeout_ms)}")

    @event.listens_for(engine, "begin")
    def begin_immediate(conn):
        conn.exec_driver_sql("BEGIN IMMEDIATE")
