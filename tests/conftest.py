import pytest

from erdify.schema.types.schema_types import Schema


USERS_ORDERS_SQL = """
CREATE TABLE users (
    id INT PRIMARY KEY,
    email VARCHAR(255) NOT NULL UNIQUE
);

CREATE TABLE orders (
    id INT PRIMARY KEY,
    user_id INT,
    FOREIGN KEY (user_id) REFERENCES users(id)
);
"""

USERS_ORDERS_NO_FK_SQL = """
CREATE TABLE users (id INT PRIMARY KEY);
CREATE TABLE orders (id INT PRIMARY KEY, user_id INT);
"""


@pytest.fixture
def users_orders_sql():
    return USERS_ORDERS_SQL


@pytest.fixture
def users_orders_no_fk_sql():
    return USERS_ORDERS_NO_FK_SQL


@pytest.fixture
def schema_to_ddl():
    """Schema를 다시 CREATE TABLE / ALTER TABLE DDL로 만들어 주는 함수"""

    def _render(schema: Schema) -> str:
        lines = []
        for table in schema.tables:
            parts = []
            for column in table.columns:
                part = f"{column.name} {column.type}"
                if column.is_not_null and not column.is_primary_key:
                    part += " NOT NULL"
                if column.is_unique:
                    part += " UNIQUE"
                parts.append(part)
            pks = [c.name for c in table.primary_key_columns()]
            if pks:
                parts.append(f"PRIMARY KEY ({', '.join(pks)})")
            lines.append(f"CREATE TABLE {table.name} ({', '.join(parts)});")

        for i, rel in enumerate(schema.relationships):
            lines.append(
                f"ALTER TABLE {rel.source_table} ADD CONSTRAINT fk_{i} "
                f"FOREIGN KEY ({rel.source_column}) "
                f"REFERENCES {rel.target_table}({rel.target_column});"
            )
        return "\n".join(lines)

    return _render
