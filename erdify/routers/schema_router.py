"""
SQL DDL -> ER 스키마 변환 router
"""
from fastapi import APIRouter, File, HTTPException, UploadFile

from erdify.config import get_max_sql_bytes
from erdify.dto.schema_dto import ParseSchemaRequest, SchemaResponse
from erdify.schema.errors import SchemaParseError
from erdify.services.schema_service import parse_schema_service
from erdify.utils.logger import setup_logger


logger = setup_logger("schema_router")
router = APIRouter(prefix="/schema", tags=["schema"])

ALLOWED_EXTENSIONS = (".sql", ".txt")


async def _parse(sql: str) -> SchemaResponse:
    try:
        schema = await parse_schema_service(sql)
    except SchemaParseError as e:
        logger.warning("Failed to parse SQL: %s", str(e))
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error("Unexpected error while parsing SQL: %s", str(e))
        raise HTTPException(status_code=500, detail=str(e))

    logger.info(
        "Successfully parsed schema: %d tables, %d relationships",
        len(schema.tables), len(schema.relationships),
    )
    return SchemaResponse.from_schema_dict(schema.to_dict())


@router.post("/parse", response_model=SchemaResponse, response_model_exclude_none=True)
async def parse_schema_api(request: ParseSchemaRequest):
    """
    SQL 텍스트를 파싱하여 tables/relationships를 반환하는 엔드포인트입니다.
    """
    return await _parse(request.sql)


@router.post("/upload", response_model=SchemaResponse, response_model_exclude_none=True)
async def upload_schema_api(file: UploadFile = File(...)):
    """
    .sql 파일을 업로드받아 파싱하는 엔드포인트입니다.
    """
    filename = (file.filename or "").lower()
    if not filename.endswith(ALLOWED_EXTENSIONS):
        raise HTTPException(status_code=400, detail="Only .sql or .txt files are supported.")

    content = await file.read()
    if len(content) > get_max_sql_bytes():
        raise HTTPException(status_code=413, detail="SQL file is too large.")

    try:
        sql = content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="SQL file must be UTF-8 encoded.")

    return await _parse(sql)
