import pytest
from sqlglot import exp

from erdify.schema.errors import (
    DDLDialectError,
    EmptyInputError,
    PARSE_FAILURE_MESSAGE,
    UnparseableSQLError,
)
from erdify.schema.parser.dialect_parser import (
    dialect_order,
    normalize_dialect,
    parse_dialect_comment,
    parse_sql_statements,
    resolve_dialects,
    strip_batch_separators,
)


def test_first_dialect_wins_for_portable_sql():
    script = parse_sql_statements("CREATE TABLE users (id INT PRIMARY KEY);")

    assert script.dialect == "mysql"
    assert len(script.expressions) == 1
    assert isinstance(script.expressions[0], exp.Create)


def test_falls_back_to_tsql_for_bracket_identifiers():
    script = parse_sql_statements("CREATE TABLE [users] ([id] INT PRIMARY KEY);")

    assert script.dialect == "tsql"


def test_statement_order_is_preserved():
    sql = """
    CREATE TABLE a (id INT);
    INSERT INTO a (id) VALUES (1);
    CREATE TABLE b (id INT);
    """
    script = parse_sql_statements(sql)

    kinds = [e.key for e in script.expressions]
    assert kinds == ["create", "insert", "create"]


def test_empty_input():
    with pytest.raises(EmptyInputError):
        parse_sql_statements("  \n  ")


def test_all_dialects_fail():
    with pytest.raises(UnparseableSQLError) as exc_info:
        parse_sql_statements("CREATE TABLE users (id INT, email VARCHAR(255)")
    assert str(exc_info.value) == PARSE_FAILURE_MESSAGE


def test_explicit_dialect_list_with_alias():
    script = parse_sql_statements(
        'CREATE TABLE "users" ("id" SERIAL PRIMARY KEY);',
        dialects=["postgresql"],
    )
    assert script.dialect == "postgres"


@pytest.mark.parametrize(
    "name, expected",
    [
        ("MySQL", "mysql"),
        ("pg", "postgres"),
        ("mssql", "tsql"),
        (" sqlite ", "sqlite"),
        ("cobol", None),
        ("", None),
        (None, None),
    ],
)
def test_normalize_dialect(name, expected):
    assert normalize_dialect(name) == expected


def test_resolve_dialects_dedupes_in_order():
    assert resolve_dialects(["mysql", "MariaDB", "postgresql", "pg"]) == ["mysql", "postgres"]


def test_resolve_dialects_rejects_unknown():
    with pytest.raises(DDLDialectError):
        resolve_dialects(["mysql", "cobol"])


def test_resolve_dialects_rejects_empty():
    with pytest.raises(DDLDialectError):
        resolve_dialects([])


def test_resolve_dialects_reads_environment(monkeypatch):
    monkeypatch.setenv("ERDIFY_SQL_DIALECTS", "postgres, mysql")
    assert resolve_dialects() == ["postgres", "mysql"]


def test_dialect_comment_detection():
    assert parse_dialect_comment("-- PostgreSQL\nCREATE TABLE a (id INT);") == "postgres"
    assert parse_dialect_comment("-- users table\nCREATE TABLE a (id INT);") is None
    assert parse_dialect_comment("CREATE TABLE a (id INT);") is None


def test_dialect_comment_only_in_leading_lines():
    sql = "\n" * 12 + "-- tsql\nCREATE TABLE a (id INT);"
    assert parse_dialect_comment(sql) is None


def test_dialect_order_moves_hint_first():
    order = dialect_order("-- tsql\nCREATE TABLE a (id INT);", ["mysql", "postgres", "tsql"])
    assert order == ["tsql", "mysql", "postgres"]


def test_hinted_dialect_is_tried_first():
    script = parse_sql_statements("-- tsql\nCREATE TABLE users (id INT PRIMARY KEY);")
    assert script.dialect == "tsql"


def test_deeply_nested_input_is_a_parse_failure():
    sql = "SELECT " + "(" * 3000 + "1" + ")" * 3000 + ";"

    with pytest.raises(UnparseableSQLError):
        parse_sql_statements(sql)


def test_go_batch_separators_become_statement_breaks():
    sql = "CREATE TABLE a (id INT)\nGO\nCREATE TABLE b (id INT)\n  go 2\nSELECT gone FROM b"

    assert strip_batch_separators(sql) == (
        "CREATE TABLE a (id INT)\n;\nCREATE TABLE b (id INT)\n;\nSELECT gone FROM b"
    )
