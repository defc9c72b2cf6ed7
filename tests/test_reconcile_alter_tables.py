from erdify.schema.builder.pipeline.extract_tables import extract_tables
from erdify.schema.builder.pipeline.reconcile_alter_tables import reconcile_alter_tables
from erdify.schema.parser.ddl_types import (
    AlterTableStatement,
    ColumnDefinition,
    CreateTableStatement,
    ForeignKeyClause,
)
from erdify.schema.types.schema_types import Schema


def _base_schema():
    statements = [
        CreateTableStatement(
            name="users",
            columns=[ColumnDefinition(name="id", type="INT")],
            primary_keys=["id"],
        ),
        CreateTableStatement(
            name="orders",
            columns=[
                ColumnDefinition(name="id", type="INT"),
                ColumnDefinition(name="buyer", type="INT"),
            ],
            primary_keys=["id"],
        ),
    ]
    return extract_tables(Schema(), statements)


def _alter(table, columns, target, target_columns):
    return AlterTableStatement(
        name=table,
        foreign_keys=[
            ForeignKeyClause(columns=columns, references_table=target, references_columns=target_columns)
        ],
    )


def test_alter_table_adds_relationship_and_marks_column():
    schema = reconcile_alter_tables(_base_schema(), [_alter("orders", ["buyer"], "users", ["id"])])

    assert [r.id for r in schema.relationships] == ["orders.buyer->users.id"]
    buyer = schema.find_table("orders").find_column("buyer")
    assert buyer.is_foreign_key is True
    assert buyer.references.table == "users"
    assert buyer.references.column == "id"


def test_names_resolve_case_insensitively_to_declared_names():
    schema = reconcile_alter_tables(_base_schema(), [_alter("ORDERS", ["BUYER"], "users", ["id"])])

    assert [r.id for r in schema.relationships] == ["orders.buyer->users.id"]


def test_unknown_source_table_is_ignored():
    schema = reconcile_alter_tables(_base_schema(), [_alter("invoices", ["buyer"], "users", ["id"])])

    assert schema.relationships == []


def test_unknown_source_column_is_ignored():
    schema = reconcile_alter_tables(_base_schema(), [_alter("orders", ["seller"], "users", ["id"])])

    assert schema.relationships == []


def test_unknown_target_table_is_ignored():
    schema = reconcile_alter_tables(_base_schema(), [_alter("orders", ["buyer"], "customers", ["id"])])

    assert schema.relationships == []
    buyer = schema.find_table("orders").find_column("buyer")
    assert buyer.is_foreign_key is False
    assert buyer.references is None


def test_existing_relationship_is_not_duplicated():
    schema = _base_schema()
    statement = _alter("orders", ["buyer"], "users", ["id"])

    schema = reconcile_alter_tables(schema, [statement, statement])

    assert len(schema.relationships) == 1


def test_existing_references_are_kept():
    schema = reconcile_alter_tables(
        _base_schema(),
        [
            _alter("orders", ["buyer"], "users", ["id"]),
            _alter("orders", ["buyer"], "orders", ["id"]),
        ],
    )

    assert [r.id for r in schema.relationships] == [
        "orders.buyer->users.id",
        "orders.buyer->orders.id",
    ]
    assert schema.find_table("orders").find_column("buyer").references.table == "users"


def test_target_names_resolve_to_declared_names():
    schema = reconcile_alter_tables(_base_schema(), [_alter("orders", ["buyer"], "USERS", ["ID"])])

    assert [r.id for r in schema.relationships] == ["orders.buyer->users.id"]
    assert schema.find_table("orders").find_column("buyer").references.table == "users"
