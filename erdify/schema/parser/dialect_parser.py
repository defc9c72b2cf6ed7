"""
다중 dialect SQL 파싱 모듈
SQL 텍스트를 정해진 우선순위의 dialect로 차례대로 파싱해 보고,
문법 오류 없이 처음 성공한 dialect의 결과를 돌려줍니다.
기본 순서: mysql -> postgres -> tsql

**역할**: dialect 자동 감지 대신 순서대로 시도 (first match wins)
- dialect별 파싱 오류는 debug 로그로만 남기고 호출자에게는 올리지 않음
- 모든 dialect가 실패한 경우에만 UnparseableSQLError
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

import sqlglot
from sqlglot import exp
from sqlglot.errors import SqlglotError

from erdify.config import get_sql_dialects
from erdify.schema.errors import DDLDialectError, EmptyInputError, UnparseableSQLError
from erdify.utils.logger import setup_logger

logger = setup_logger("dialect_parser")

# 지원하는 dialect 목록 (sqlglot dialect 이름)
SUPPORTED_DIALECTS = {
    'mysql', 'postgres', 'sqlite', 'oracle',
    'tsql', 'bigquery', 'snowflake', 'duckdb'
}

# 흔히 쓰는 별칭 -> sqlglot 이름
DIALECT_ALIASES = {
    'postgresql': 'postgres',
    'pg': 'postgres',
    'mariadb': 'mysql',
    'mssql': 'tsql',
    'sqlserver': 'tsql',
    'transactsql': 'tsql',
}

# dialect 힌트 주석을 찾는 범위
DIALECT_HINT_LINES = 10

# T-SQL 배치 구분자: 한 줄에 GO (반복 횟수 포함 가능)만 있는 경우
BATCH_SEPARATOR_PATTERN = re.compile(r'^[ \t]*GO(?:[ \t]+\d+)?[ \t]*;?[ \t]*$', re.IGNORECASE | re.MULTILINE)

# dialect 하나의 파싱 실패로 보는 예외
# 깊게 중첩된 입력은 RecursionError, 일부 잘못된 리터럴은 ValueError로 올라옵니다.
DIALECT_FAILURES = (SqlglotError, RecursionError, ValueError)


@dataclass
class ParsedScript:
    """파싱에 성공한 dialect와 문장 목록"""
    dialect: str
    expressions: List[exp.Expression] = field(default_factory=list)


def normalize_dialect(name: Optional[str]) -> Optional[str]:
    """
    dialect 이름을 sqlglot 이름으로 정규화합니다.
    지원하지 않는 이름이면 None을 반환합니다.
    """
    if not name:
        return None
    d = name.lower().strip()
    d = DIALECT_ALIASES.get(d, d)
    return d if d in SUPPORTED_DIALECTS else None


def resolve_dialects(dialects: Optional[Sequence[str]] = None) -> List[str]:
    """
    시도할 dialect 목록을 정규화합니다. 인자가 없으면 설정값(ERDIFY_SQL_DIALECTS)을 씁니다.

    Raises:
        DDLDialectError: 지원하지 않는 dialect가 있거나 목록이 비어 있는 경우
    """
    names = list(dialects) if dialects is not None else get_sql_dialects()

    resolved: List[str] = []
    for name in names:
        dialect = normalize_dialect(name)
        if dialect is None:
            raise DDLDialectError(
                f"지원하지 않는 dialect: {name}. "
                f"지원하는 dialect: {', '.join(sorted(SUPPORTED_DIALECTS))}"
            )
        if dialect not in resolved:
            resolved.append(dialect)

    if not resolved:
        raise DDLDialectError("시도할 dialect가 하나도 설정되지 않았습니다.")
    return resolved


def parse_dialect_comment(sql_text: str) -> Optional[str]:
    """
    SQL 첫머리의 dialect 힌트 주석을 찾습니다.

    형식: -- mysql 또는 -- postgres 등
    지원하지 않는 이름이 적힌 주석은 일반 주석으로 보고 넘어갑니다.

    Returns:
        정규화된 dialect 이름 또는 None
    """
    for line in sql_text.split('\n')[:DIALECT_HINT_LINES]:
        stripped = line.strip()
        if not stripped.startswith('--'):
            continue
        dialect = normalize_dialect(stripped[2:].strip())
        if dialect:
            return dialect
    return None


def strip_batch_separators(sql_text: str) -> str:
    """
    SSMS 스크립트의 GO 줄을 세미콜론으로 바꿉니다.
    GO는 SQL 문이 아니라서 그대로 두면 다음 문장과 합쳐져 Command가 됩니다.
    """
    return BATCH_SEPARATOR_PATTERN.sub(';', sql_text)


def dialect_order(sql_text: str, dialects: Optional[Sequence[str]] = None) -> List[str]:
    """힌트 주석의 dialect를 맨 앞에 두고 나머지는 설정 순서를 따릅니다."""
    order = resolve_dialects(dialects)
    hint = parse_dialect_comment(sql_text)
    if hint:
        logger.debug("dialect 힌트 감지: %s", hint)
        order = [hint] + [d for d in order if d != hint]
    return order


def parse_sql_statements(sql_text: str, dialects: Optional[Sequence[str]] = None) -> ParsedScript:
    """
    SQL 텍스트를 dialect 순서대로 파싱합니다.

    Args:
        sql_text: SQL 텍스트 (세미콜론으로 구분된 여러 문장)
        dialects: 시도할 dialect 목록 (None이면 설정값)

    Returns:
        처음 성공한 dialect와 문장 목록 (원문 순서 유지)

    Raises:
        EmptyInputError: 입력이 비어 있거나 공백뿐인 경우
        UnparseableSQLError: 모든 dialect가 실패한 경우
    """
    if sql_text is None or not sql_text.strip():
        raise EmptyInputError()

    script = strip_batch_separators(sql_text)
    for dialect in dialect_order(sql_text, dialects):
        try:
            parsed = sqlglot.parse(script, read=dialect)
        except DIALECT_FAILURES as e:
            logger.debug("%s dialect 파싱 실패: %s", dialect, e)
            continue

        # ';;' 사이의 빈 문장은 None으로 들어옵니다.
        expressions = [e for e in parsed if e is not None]
        logger.info("SQL 파싱 성공 (dialect: %s, 문장 %d개)", dialect, len(expressions))
        return ParsedScript(dialect=dialect, expressions=expressions)

    raise UnparseableSQLError()
