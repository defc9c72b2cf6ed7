"""
Schema 파싱 DTO 정의
"""
from typing import List, Optional, Dict, Any
from pydantic import BaseModel


class ParseSchemaRequest(BaseModel):
    """SQL 텍스트 파싱 요청"""
    sql: str


class ColumnReferenceResponse(BaseModel):
    """컬럼이 참조하는 테이블/컬럼"""
    table: str
    column: str


class ColumnResponse(BaseModel):
    """컬럼"""
    name: str
    type: str
    isPrimaryKey: bool
    isForeignKey: bool
    isNotNull: bool
    isUnique: bool
    defaultValue: Optional[str] = None
    references: Optional[ColumnReferenceResponse] = None


class TableResponse(BaseModel):
    """테이블"""
    id: str
    name: str
    columns: List[ColumnResponse]


class RelationshipResponse(BaseModel):
    """테이블 간 관계"""
    id: str
    sourceTable: str
    sourceColumn: str
    targetTable: str
    targetColumn: str
    type: str


class SchemaResponse(BaseModel):
    """파싱 결과 (tables + relationships)"""
    tables: List[TableResponse]
    relationships: List[RelationshipResponse]

    @classmethod
    def from_schema_dict(cls, data: Dict[str, Any]) -> "SchemaResponse":
        return cls.model_validate(data)
