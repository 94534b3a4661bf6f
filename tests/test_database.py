import pytest

from rootdefence.database import TABLES, DatabaseError, UserProgressDB, sql_quote


@pytest.fixture
def db():
    database = UserProgressDB()
    database.open(":memory:")
    yield database
    database.close()


def test_tables_absent_before_creation(db):
    assert all(not db.table_exists(name) for name in TABLES)


def test_create_tables_creates_every_table(db):
    db.create_tables()
    assert all(db.table_exists(name) for name in TABLES)


def test_create_tables_is_idempotent(db):
    db.create_tables()
    db.create_tables()
    rows = db.execute("SELECT count(*) FROM sqlite_master WHERE type = 'table'")
    assert rows[0][0] == len(TABLES)


def test_execute_round_trip(db):
    db.create_tables()
    db.execute("INSERT INTO maps (id, name) VALUES (?, ?)", (7, "Swamp"))
    assert db.execute("SELECT id, name FROM maps") == [(7, "Swamp")]


def test_execute_bad_sql_raises(db):
    with pytest.raises(DatabaseError):
        db.execute("SELECT * FROM no_such_table")


def test_closed_database_raises():
    database = UserProgressDB()
    assert not database.is_open
    with pytest.raises(DatabaseError):
        database.execute("SELECT 1")


def test_open_in_missing_directory_raises(tmp_path):
    database = UserProgressDB()
    with pytest.raises(DatabaseError):
        database.open(tmp_path / "missing" / "nested" / "progress.db")


def test_context_manager_closes():
    with UserProgressDB() as database:
        database.open(":memory:")
        assert database.is_open
    assert not database.is_open


def test_data_persists_in_file(tmp_path):
    path = tmp_path / "progress.db"
    with UserProgressDB() as database:
        database.open(path)
        database.create_tables()
        database.execute("INSERT INTO maps (id, name) VALUES (?, ?)", (3, "Hill"))
    with UserProgressDB() as database:
        database.open(path)
        assert database.execute("SELECT name FROM maps WHERE id = ?", (3,)) == [("Hill",)]


def test_sql_quote_doubles_single_quotes():
    assert sql_quote("it's") == "it''s"
    assert sql_quote("plain") == "plain"


def test_sql_quote_result_is_usable_literal(db):
    text = "o'clock 'x'"
    rows = db.execute(f"SELECT '{sql_quote(text)}'")
    assert rows == [(text,)]