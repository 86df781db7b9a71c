from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Iterator

import mysql.connector
from werkzeug.security import generate_password_hash

from .connection import DBConfig

logger = logging.getLogger(__name__)


def _connect(target: DBConfig, *, with_database: bool = True):
    kwargs = dict(host=target.host, port=target.port, user=target.user, password=target.password, use_pure=True)
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


# Quoted strings and '--' comments are single tokens, so a ';' only splits at top level.
_SQL_TOKEN = re.compile(r"""'(?:\\.|''|[^'\\])*'|"(?:\\.|[^"\\])*"|--[^\n]*|;|[^'";-]+|-""", re.S)


def _iter_sql_statements(sql: str) -> Iterator[str]:
    buf: list[str] = []
    for token in _SQL_TOKEN.findall(sql):
        if token.startswith("--"):
            continue
        if token == ";":
            stmt = "".join(buf).strip()
            buf = []
            if stmt:
                yield stmt
            continue
        buf.append(token)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(db_config: dict) -> None:
    target = DBConfig.from_dict(db_config)
    conn = _connect(target, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)
    sql = _strip_create_db_and_use(Path(schema_path).read_text(encoding="utf-8"))

    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
        conn.commit()
    finally:
        conn.close()


def ensure_demo_data(db_config: dict) -> None:
    """Idempotent demo seed: one office granted to IT, an admin and an employee."""

    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor(dictionary=True)

        cur.execute("SELECT office_id FROM office_locations WHERE name=%s", ("Head Office",))
        row = cur.fetchone()
        if row:
            office_id = int(row["office_id"])
        else:
            cur.execute(
                """
                INSERT INTO office_locations(name, address, latitude, longitude, radius_meters, is_active)
                VALUES(%s,%s,%s,%s,%s,1)
                """,
                ("Head Office", "MG Road, Bengaluru", 12.9716, 77.5946, 200),
            )
            office_id = int(cur.lastrowid)

        cur.execute(
            "INSERT IGNORE INTO department_office_access(department, office_id) VALUES(%s,%s)",
            ("IT", office_id),
        )

        def upsert_employee(username: str, password: str, name: str, email: str, phone: str, role: str) -> None:
            password_hash = generate_password_hash(password)
            cur.execute("SELECT employee_id FROM employees WHERE username=%s", (username,))
            if cur.fetchone():
                cur.execute(
                    "UPDATE employees SET password_hash=%s, role=%s, is_active=1 WHERE username=%s",
                    (password_hash, role, username),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO employees(username, password_hash, name, email, phone, department, primary_office_id, role)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (username, password_hash, name, email, phone, "IT", office_id, role),
                )

        upsert_employee("admin", "admin123", "Admin Demo", "admin@example.com", "9000000001", "admin")
        upsert_employee("employee", "employee123", "Demo Employee", "employee@example.com", "9000000002", "employee")

        conn.commit()
    finally:
        conn.close()
    logger.info("Demo office and accounts ensured")


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(DBConfig.from_dict(db_config))
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()
