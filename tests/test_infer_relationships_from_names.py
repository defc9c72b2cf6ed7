from erdify.schema.builder.pipeline.infer_relationships_from_names import (
    infer_relationships_from_names,
    name_candidates,
    singular_forms,
)
from erdify.schema.types.schema_types import Column, Relationship, Schema, Table


def _table(name, *columns):
    return Table(id=name, name=name, columns=list(columns))


def _pk(name="id"):
    return Column(name=name, type="INT", is_primary_key=True)


def _col(name):
    return Column(name=name, type="INT")


def _ids(schema):
    return [r.id for r in schema.relationships]


def test_plural_table_is_matched():
    schema = Schema(tables=[
        _table("users", _pk()),
        _table("orders", _pk(), _col("user_id")),
    ])
    infer_relationships_from_names(schema)

    assert _ids(schema) == ["orders.user_id->users.id"]
    user_id = schema.find_table("orders").find_column("user_id")
    assert user_id.is_foreign_key is True
    assert user_id.references.table == "users"
    assert user_id.references.column == "id"


def test_ies_plural_is_matched_through_singular_form():
    schema = Schema(tables=[
        _table("categories", _pk()),
        _table("products", _pk(), _col("category_id")),
    ])
    infer_relationships_from_names(schema)

    assert _ids(schema) == ["products.category_id->categories.id"]


def test_es_plural_and_singular_tables():
    schema = Schema(tables=[
        _table("classes", _pk()),
        _table("user", _pk()),
        _table("enrollments", _pk(), _col("class_id"), _col("user_id")),
    ])
    infer_relationships_from_names(schema)

    assert _ids(schema) == [
        "enrollments.class_id->classes.id",
        "enrollments.user_id->user.id",
    ]


def test_target_column_is_first_primary_key_or_id():
    schema = Schema(tables=[
        _table("users", _pk("uid")),
        _table("teams", _col("name")),
        _table("members", _pk(), _col("user_id"), _col("team_id")),
    ])
    infer_relationships_from_names(schema)

    assert _ids(schema) == [
        "members.user_id->users.uid",
        "members.team_id->teams.id",
    ]


def test_skipped_when_explicit_relationships_exist():
    schema = Schema(
        tables=[
            _table("users", _pk()),
            _table("orders", _pk(), _col("user_id"), _col("owner")),
        ],
        relationships=[Relationship("orders", "owner", "users", "id")],
    )
    infer_relationships_from_names(schema)

    assert _ids(schema) == ["orders.owner->users.id"]
    assert schema.find_table("orders").find_column("user_id").is_foreign_key is False


def test_skipped_for_single_table():
    schema = Schema(tables=[_table("users", _pk(), _col("user_id"))])
    infer_relationships_from_names(schema)

    assert schema.relationships == []


def test_primary_key_and_own_table_columns_are_not_inferred():
    schema = Schema(tables=[
        _table("users", _pk(), _col("user_id")),
        _table("profiles", _pk("user_id")),
    ])
    infer_relationships_from_names(schema)

    assert schema.relationships == []


def test_unmatched_names_are_left_alone():
    schema = Schema(tables=[
        _table("users", _pk()),
        _table("orders", _pk(), _col("warehouse_id"), _col("userid")),
    ])
    infer_relationships_from_names(schema)

    assert schema.relationships == []


def test_name_candidates_and_singular_forms():
    assert name_candidates("user") == ["user", "users", "useres", "user"]
    assert singular_forms("Categories") == ["categories", "categorie", "categori", "category"]
