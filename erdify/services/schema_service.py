import asyncio

from erdify.schema.schema_parser import parse_sql
from erdify.schema.types.schema_types import Schema
from erdify.utils.logger import setup_logger


logger = setup_logger("schema_service")


async def parse_schema_service(sql: str) -> Schema:
    """
    SQL 텍스트를 Schema로 변환하는 서비스입니다.
    """
    logger.info("스키마 파싱 요청: %d bytes", len(sql.encode("utf-8")))

    # CPU 바운드 작업이므로 executor에서 실행
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(None, lambda: parse_sql(sql))
