"""
SQL 파서 모듈
dialect 순서대로 sqlglot 파싱을 시도하고, 결과 AST를 내부 statement 타입으로 변환합니다.
"""

from erdify.schema.parser.dialect_parser import ParsedScript, parse_sql_statements
from erdify.schema.parser.statement_adapter import adapt_statements

__all__ = [
    'ParsedScript',
    'parse_sql_statements',
    'adapt_statements',
]
