from attendance_tracker.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use


def test_splits_on_top_level_semicolons_only():
    sql = """
    -- offices; seeded below
    CREATE TABLE a (id INT);
    INSERT INTO a(note) VALUES ('x; y'), ("it's; fine");
    INSERT INTO a(note) VALUES ('a-b')
    """

    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (id INT)",
        "INSERT INTO a(note) VALUES ('x; y'), (\"it's; fine\")",
        "INSERT INTO a(note) VALUES ('a-b')",
    ]


def test_create_database_and_use_are_dropped():
    sql = "CREATE DATABASE IF NOT EXISTS other;\nUSE other;\nCREATE TABLE b (id INT);\n"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE b (id INT)"]
