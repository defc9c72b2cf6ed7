from typing import Dict, List, Optional, Set, Tuple

from erdify.schema.parser.ddl_types import (
    ColumnDefinition,
    CreateTableStatement,
    ForeignKeyClause,
    Statement,
)
from erdify.schema.types.schema_types import Column, ColumnReference, Relationship, Schema, Table
from erdify.schema.utils.identifiers import clean_identifier
from erdify.schema.utils.relationships import pair_foreign_key
from erdify.utils.logger import setup_logger

logger = setup_logger("extract_tables")

# 테이블명을 찾지 못한 CREATE TABLE에 붙이는 이름
UNKNOWN_TABLE_NAME = "unknown"


def extract_tables(schema: Schema, statements: List[Statement]) -> Schema:
    """
    CREATE TABLE 문마다 Table 하나와 Relationship들을 만들어 schema에 추가합니다.
    """
    for statement in statements:
        if not isinstance(statement, CreateTableStatement):
            continue

        table, relationships = build_table(statement)
        if any(t.name == table.name for t in schema.tables):
            # 이전 정의에서 나온 관계는 더 이상 없는 컬럼을 가리킬 수 있으므로 함께 버립니다.
            removed = schema.remove_relationships_from(table.name)
            logger.debug("테이블 %s 재선언: 마지막 정의로 교체합니다. (이전 관계 %d개 제거)",
                         table.name, removed)
        schema.add_table(table)

        for relationship in relationships:
            schema.add_relationship(relationship)

    logger.info("CREATE TABLE 추출 완료: 테이블 %d개, 관계 %d개",
                len(schema.tables), len(schema.relationships))
    return schema


def build_table(statement: CreateTableStatement) -> Tuple[Table, List[Relationship]]:
    """
    CREATE TABLE 문 하나를 Table로 변환합니다.

    1) 제약조건: 테이블 레벨 PRIMARY KEY 컬럼 집합과 FOREIGN KEY 관계를 먼저 모읍니다.
    2) 컬럼: 선언 순서대로 컬럼을 만들면서 PK/NOT NULL/UNIQUE/FK를 판정합니다.
    """
    table_name = clean_identifier(statement.name) or UNKNOWN_TABLE_NAME
    if not statement.name:
        logger.debug("테이블명이 없는 CREATE TABLE -> '%s'", UNKNOWN_TABLE_NAME)

    relationships: List[Relationship] = []

    # 1) 제약조건
    primary_keys: Set[str] = {clean_identifier(pk).lower() for pk in statement.primary_keys}
    constraint_references: Dict[str, ColumnReference] = {}
    for clause in statement.foreign_keys:
        for relationship in pair_foreign_key(table_name, clause):
            _append_unique(relationships, relationship)
            constraint_references[relationship.source_column.lower()] = ColumnReference(
                table=relationship.target_table, column=relationship.target_column
            )

    # 2) 컬럼
    columns: List[Column] = []
    for definition in statement.columns:
        column = build_column(definition, primary_keys)

        inline_relationship = _inline_relationship(table_name, column.name, definition.reference)
        if inline_relationship is not None:
            _append_unique(relationships, inline_relationship)
            # 인라인 REFERENCES가 나중에 처리되므로 제약조건 쪽 참조를 덮어씁니다.
            column.references = ColumnReference(
                table=inline_relationship.target_table, column=inline_relationship.target_column
            )
        else:
            column.references = constraint_references.get(column.name.lower())

        lowered = column.name.lower()
        column.is_foreign_key = column.references is not None or any(
            r.source_column.lower() == lowered for r in relationships
        )
        columns.append(column)

    return Table(id=table_name, name=table_name, columns=columns), relationships


def build_column(definition: ColumnDefinition, primary_keys: Set[str]) -> Column:
    name = clean_identifier(definition.name)
    is_primary_key = (
        name.lower() in primary_keys
        or definition.auto_increment
        or definition.primary_key
    )
    return Column(
        name=name,
        type=definition.type,
        is_primary_key=is_primary_key,
        is_not_null=definition.not_null or is_primary_key,
        is_unique=definition.unique,
        default_value=definition.default,
    )


def _inline_relationship(
    table_name: str,
    column_name: str,
    reference: Optional[ForeignKeyClause],
) -> Optional[Relationship]:
    if reference is None:
        return None
    clause = ForeignKeyClause(
        columns=[column_name],
        references_table=reference.references_table,
        references_columns=reference.references_columns,
    )
    pairs = pair_foreign_key(table_name, clause)
    return pairs[0] if pairs else None


def _append_unique(relationships: List[Relationship], relationship: Relationship) -> None:
    if not any(r.id == relationship.id for r in relationships):
        relationships.append(relationship)
