"""
식별자/타입 문자열 공통 유틸리티
"""
import re
from typing import Optional

_QUOTE_CHARS = re.compile(r'[`"\'\[\]]')
_TYPE_PARAMS = re.compile(r'\s*\(.*\)\s*$', re.DOTALL)

INTEGER_TYPES = {
    'INT', 'INTEGER', 'TINYINT', 'SMALLINT', 'MEDIUMINT', 'BIGINT',
    'INT2', 'INT4', 'INT8', 'SERIAL', 'SMALLSERIAL', 'BIGSERIAL',
}


def clean_identifier(identifier: Optional[str]) -> str:
    """
    식별자에서 backtick, 쌍따옴표, 홑따옴표, 대괄호를 제거합니다.

    예:
        `users` -> users
        [dbo] -> dbo
    """
    if not identifier:
        return ''
    return _QUOTE_CHARS.sub('', identifier).strip()


def base_type(type_str: Optional[str]) -> str:
    """
    타입 문자열에서 길이/정밀도 파라미터를 떼어 낸 대문자 타입 계열을 반환합니다.

    예:
        VARCHAR(255) -> VARCHAR
        decimal(10, 2) -> DECIMAL
    """
    if not type_str:
        return ''
    return _TYPE_PARAMS.sub('', type_str).strip().upper()


def is_integer_type(type_str: Optional[str]) -> bool:
    # INT UNSIGNED 같은 수식어는 첫 단어만 봅니다.
    family = base_type(type_str).split(' ')[0] if type_str else ''
    return family in INTEGER_TYPES


def relationship_id(source_table: str, source_column: str,
                    target_table: str, target_column: str) -> str:
    return f"{source_table}.{source_column}->{target_table}.{target_column}"
