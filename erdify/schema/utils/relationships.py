"""
FK 컬럼 쌍 -> Relationship 변환 헬퍼
CREATE TABLE(인라인/제약조건)과 ALTER TABLE 단계가 같은 규칙을 씁니다.
"""
from typing import List, Optional

from erdify.schema.parser.ddl_types import ForeignKeyClause
from erdify.schema.types.schema_types import Relationship
from erdify.schema.utils.identifiers import clean_identifier


def make_relationship(
    source_table: str,
    source_column: str,
    target_table: str,
    target_column: str,
) -> Optional[Relationship]:
    """
    네 식별자가 모두 있을 때만 Relationship을 만듭니다. 하나라도 비어 있으면 None
    """
    source_table = clean_identifier(source_table)
    source_column = clean_identifier(source_column)
    target_table = clean_identifier(target_table)
    target_column = clean_identifier(target_column)

    if not (source_table and source_column and target_table and target_column):
        return None

    return Relationship(
        source_table=source_table,
        source_column=source_column,
        target_table=target_table,
        target_column=target_column,
    )


def pair_foreign_key(source_table: str, clause: ForeignKeyClause) -> List[Relationship]:
    """
    FK의 원본 컬럼과 참조 컬럼을 위치 순서대로 짝지어 Relationship 목록을 만듭니다.

    예:
        FOREIGN KEY (a, b) REFERENCES t(x, y) -> a->t.x, b->t.y

    두 목록의 길이가 다르면 짧은 쪽에서 멈춥니다.
    """
    candidates = [
        make_relationship(source_table, source_column, clause.references_table, target_column)
        for source_column, target_column in zip(clause.columns, clause.references_columns)
    ]
    return [rel for rel in candidates if rel is not None]
