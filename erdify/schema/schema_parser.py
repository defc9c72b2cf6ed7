"""
SQL DDL -> ER 스키마 변환 진입점

**역할**: dialect 순서 파싱 -> statement 변환 -> 스키마 조립
- 입력이 같으면 결과도 항상 같습니다 (공유 상태 없음)
- 호출자에게 전달되는 예외는 EmptyInputError, UnparseableSQLError 뿐
"""

from pathlib import Path
from typing import Optional, Sequence, Union

from erdify.schema.builder import build_schema
from erdify.schema.parser import adapt_statements, parse_sql_statements
from erdify.schema.types.schema_types import Schema
from erdify.utils.logger import setup_logger

logger = setup_logger("schema_parser")


def parse_sql(sql: str, dialects: Optional[Sequence[str]] = None) -> Schema:
    """
    SQL 텍스트를 파싱하여 Schema를 만듭니다.

    Args:
        sql: CREATE TABLE / ALTER TABLE 문이 담긴 SQL 텍스트
        dialects: 시도할 dialect 목록 (None이면 ERDIFY_SQL_DIALECTS 설정값)

    Returns:
        tables와 relationships를 담은 Schema

    Raises:
        EmptyInputError: 입력이 비어 있거나 공백뿐인 경우
        UnparseableSQLError: 어떤 dialect로도 파싱하지 못한 경우
    """
    script = parse_sql_statements(sql, dialects)
    statements = adapt_statements(script.expressions, script.dialect)
    return build_schema(statements)


def parse_sql_file(sql_path: Union[str, Path], dialects: Optional[Sequence[str]] = None) -> Schema:
    """
    .sql 파일을 읽어 parse_sql로 파싱합니다.

    Raises:
        FileNotFoundError: 파일이 없는 경우
    """
    if not Path(sql_path).exists():
        raise FileNotFoundError(f"SQL file not found: {sql_path}")

    logger.info(f"SQL 파일 발견: {sql_path}")

    with open(sql_path, 'r', encoding='utf-8-sig') as f:
        sql = f.read()

    return parse_sql(sql, dialects)
