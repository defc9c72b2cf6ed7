from typing import List, Optional, Tuple

from erdify.schema.parser.ddl_types import AlterTableStatement, Statement
from erdify.schema.types.schema_types import Column, Relationship, Schema, Table
from erdify.schema.utils.identifiers import clean_identifier
from erdify.schema.utils.relationships import make_relationship, pair_foreign_key
from erdify.utils.logger import setup_logger

logger = setup_logger("reconcile_alter_tables")


def reconcile_alter_tables(schema: Schema, statements: List[Statement]) -> Schema:
    """
    ALTER TABLE ... ADD [CONSTRAINT ...] FOREIGN KEY 로 선언된 FK를
    이미 추출된 테이블/컬럼에 반영합니다.

    - 참조하는 테이블/컬럼이나 참조되는 테이블을 찾지 못하면 그 쌍은 버립니다.
      (다른 마이그레이션 파일에 정의된 테이블을 가리키는 경우가 흔함)
    - 같은 id의 relationship이 이미 있으면 건너뜁니다.
    """
    added = 0
    for statement in statements:
        if not isinstance(statement, AlterTableStatement):
            continue

        table = schema.find_table(clean_identifier(statement.name)) if statement.name else None
        if table is None:
            logger.debug("ALTER TABLE 대상 테이블을 찾지 못함: %s", statement.name)
            continue

        for clause in statement.foreign_keys:
            for relationship in pair_foreign_key(table.name, clause):
                resolved = _resolve(schema, table, relationship)
                if resolved is None:
                    logger.debug("ALTER TABLE FK 해석 실패: %s", relationship.id)
                    continue

                column, resolved_relationship = resolved
                if not schema.add_relationship(resolved_relationship):
                    continue

                column.mark_foreign_key(
                    resolved_relationship.target_table, resolved_relationship.target_column
                )
                added += 1

    if added:
        logger.info("ALTER TABLE 관계 %d개 반영", added)
    return schema


def _resolve(
    schema: Schema,
    table: Table,
    relationship: Relationship,
) -> Optional[Tuple[Column, Relationship]]:
    """
    relationship의 원본 컬럼과 참조 테이블을 찾아, 추출된 이름 기준으로 다시 만듭니다.
    하나라도 찾지 못하면 None
    """
    column = table.find_column(relationship.source_column)
    if column is None:
        return None
    target_table = schema.find_table(relationship.target_table)
    if target_table is None:
        return None

    # 참조 컬럼은 추출된 테이블에 있으면 그 이름을, 없으면 선언된 이름을 씁니다.
    target_column = target_table.find_column(relationship.target_column)
    target_column_name = target_column.name if target_column else relationship.target_column

    resolved = make_relationship(table.name, column.name, target_table.name, target_column_name)
    if resolved is None:
        return None
    return column, resolved
