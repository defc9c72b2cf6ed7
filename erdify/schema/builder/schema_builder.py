from typing import List

from erdify.schema.builder.pipeline import (
    extract_tables,
    reconcile_alter_tables,
    infer_relationships_from_names,
)
from erdify.schema.parser.ddl_types import Statement
from erdify.schema.types.schema_types import Schema
from erdify.utils.logger import setup_logger


logger = setup_logger("schema_builder")


def build_schema(statements: List[Statement]) -> Schema:
    """adapt된 statement 목록을 Schema로 조립합니다. 단계 순서가 중요합니다."""
    schema = Schema()

    # 1) CREATE TABLE 에서 테이블/컬럼과 인라인·제약조건 FK를 추출합니다.
    schema = extract_tables(schema, statements)

    # 2) ALTER TABLE ... ADD FOREIGN KEY 를 이미 추출된 테이블에 반영합니다.
    schema = reconcile_alter_tables(schema, statements)

    # 3) 관계가 하나도 없으면 컬럼명(<table>_id)으로 관계를 추론합니다.
    schema = infer_relationships_from_names(schema)

    logger.info(
        "스키마 조립 완료: 테이블 %d개, 관계 %d개",
        len(schema.tables), len(schema.relationships),
    )
    return schema
