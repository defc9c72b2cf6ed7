"""
환경 변수 기반 설정
.env 파일이 있으면 먼저 읽어 들입니다.
"""
import logging
import os
from typing import List

from dotenv import load_dotenv

load_dotenv()

DEFAULT_SQL_DIALECTS = "mysql,postgres,tsql"
DEFAULT_CORS_ORIGINS = "http://localhost:3000,http://localhost:5173"
DEFAULT_MAX_SQL_BYTES = 5 * 1024 * 1024


def _split_csv(value: str) -> List[str]:
    return [item.strip() for item in value.split(",") if item.strip()]


def get_sql_dialects() -> List[str]:
    """
    파싱을 시도할 dialect 이름 목록 (우선순위 순)

    이름 정규화와 지원 여부 확인은 dialect_parser.resolve_dialects에서 합니다.
    """
    return _split_csv(os.getenv("ERDIFY_SQL_DIALECTS", DEFAULT_SQL_DIALECTS))


def get_log_level() -> int:
    name = os.getenv("ERDIFY_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    # 알 수 없는 이름이면 getLevelName이 "Level X" 문자열을 돌려줍니다.
    if not isinstance(level, int):
        return logging.INFO
    return level


def get_cors_origins() -> List[str]:
    return _split_csv(os.getenv("ERDIFY_CORS_ORIGINS", DEFAULT_CORS_ORIGINS))


def get_max_sql_bytes() -> int:
    raw = os.getenv("ERDIFY_MAX_SQL_BYTES")
    if not raw:
        return DEFAULT_MAX_SQL_BYTES
    try:
        return int(raw)
    except ValueError:
        return DEFAULT_MAX_SQL_BYTES
