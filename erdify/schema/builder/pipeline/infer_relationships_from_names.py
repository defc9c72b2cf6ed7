import re
from typing import List, Optional

from erdify.schema.types.schema_types import Column, Schema, Table
from erdify.schema.utils.relationships import make_relationship
from erdify.utils.logger import setup_logger

logger = setup_logger("infer_relationships_from_names")

FK_COLUMN_PATTERN = re.compile(r'^(.+)_id$')

# 참조 테이블에 PK가 없을 때 가정하는 컬럼명
FALLBACK_TARGET_COLUMN = "id"


def infer_relationships_from_names(schema: Schema) -> Schema:
    """
    명시적인 FK가 하나도 없을 때만 `<base>_id` 컬럼명으로 관계를 추론합니다.

    예:
        orders.user_id -> users.id
        products.category_id -> categories.id

    명시적인 관계가 하나라도 있으면 아무것도 하지 않습니다.
    (추론 결과와 명시적 제약조건이 섞이면 중복되거나 모순된 선이 생김)
    """
    if schema.relationships or len(schema.tables) < 2:
        return schema

    for table in schema.tables:
        for column in table.columns:
            if column.is_primary_key:
                continue
            _infer_for_column(schema, table, column)

    logger.info("컬럼명 기반 관계 추론: %d개", len(schema.relationships))
    return schema


def _infer_for_column(schema: Schema, table: Table, column: Column) -> None:
    base = _base_name(column.name)
    if base is None:
        return

    target = _find_forward_match(schema.tables, table, base) or _find_reverse_match(schema.tables, table, base)
    if target is None:
        logger.debug("추론 대상 테이블 없음: %s.%s", table.name, column.name)
        return

    pk_columns = target.primary_key_columns()
    target_column = pk_columns[0].name if pk_columns else FALLBACK_TARGET_COLUMN

    relationship = make_relationship(table.name, column.name, target.name, target_column)
    if relationship is None or not schema.add_relationship(relationship):
        return

    column.mark_foreign_key(target.name, target_column, overwrite=True)


def _base_name(column_name: str) -> Optional[str]:
    match = FK_COLUMN_PATTERN.match(column_name.lower())
    return match.group(1) if match else None


def name_candidates(base: str) -> List[str]:
    """
    `<base>` 로 찾아볼 테이블명 후보 (우선순위 순)

    예:
        user -> [user, users, useres, user]
        category -> [category, categorys, categoryes, category]
    """
    return [
        base,
        base + 's',
        base + 'es',
        re.sub(r'ies$', 'y', base),
    ]


def singular_forms(table_name: str) -> List[str]:
    """
    테이블명의 단수형 후보: 그대로, -s 제거, -es 제거, -ies -> -y
    """
    lowered = table_name.lower()
    return [
        lowered,
        re.sub(r's$', '', lowered),
        re.sub(r'es$', '', lowered),
        re.sub(r'ies$', 'y', lowered),
    ]


def _find_forward_match(tables: List[Table], own: Table, base: str) -> Optional[Table]:
    for candidate in name_candidates(base):
        for table in tables:
            if table is not own and table.name.lower() == candidate:
                return table
    return None


def _find_reverse_match(tables: List[Table], own: Table, base: str) -> Optional[Table]:
    for table in tables:
        if table is not own and base in singular_forms(table.name):
            return table
    return None
