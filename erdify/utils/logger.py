"""
erdify 로거 유틸리티
모든 로거는 `erdify.` 아래에 만들어지고, 레벨은 ERDIFY_LOG_LEVEL을 따릅니다.
"""
import logging
import sys
from typing import Optional

from erdify.config import get_log_level

ROOT_LOGGER_NAME = "erdify"
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_logger(name: str, level: Optional[int] = None) -> logging.Logger:
    """
    모듈 로거를 설정하고 반환합니다.

    Args:
        name: 모듈 이름 (예: "dialect_parser" -> "erdify.dialect_parser")
        level: 로그 레벨 (None이면 ERDIFY_LOG_LEVEL 설정값)

    Returns:
        설정된 로거 인스턴스
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    logger = logging.getLogger(name)

    # 이미 핸들러가 있으면 중복 추가하지 않음
    if logger.handlers:
        return logger

    level = get_log_level() if level is None else level
    logger.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    logger.addHandler(handler)

    # 핸들러를 직접 달았으므로 상위(root) 로거로 중복 출력하지 않음
    logger.propagate = False

    return logger
