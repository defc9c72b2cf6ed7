"""
DDL 파싱에 사용되는 데이터 타입 정의

dialect 파서(sqlglot)의 AST는 statement_adapter에서만 다루고,
이후 단계(테이블 추출, ALTER TABLE 반영, 네이밍 추론)는 여기 정의된 타입만 봅니다.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Union


@dataclass
class ForeignKeyClause:
    """FOREIGN KEY (...) REFERENCES table(...) 또는 인라인 REFERENCES"""
    columns: List[str]
    references_table: str
    references_columns: List[str] = field(default_factory=list)


@dataclass
class ColumnDefinition:
    """CREATE TABLE 안의 컬럼 정의 한 줄"""
    name: str
    type: str  # 파라미터 포함 원본 타입 (예: VARCHAR(255))
    primary_key: bool = False  # 인라인 PRIMARY KEY
    auto_increment: bool = False  # AUTO_INCREMENT / IDENTITY
    not_null: bool = False
    unique: bool = False  # 인라인 UNIQUE
    default: Optional[str] = None
    reference: Optional[ForeignKeyClause] = None  # 인라인 REFERENCES


@dataclass
class CreateTableStatement:
    """CREATE TABLE 문"""
    name: Optional[str]  # 테이블명을 찾지 못하면 None
    columns: List[ColumnDefinition] = field(default_factory=list)
    primary_keys: List[str] = field(default_factory=list)  # 테이블 레벨 PRIMARY KEY (...)
    foreign_keys: List[ForeignKeyClause] = field(default_factory=list)  # 테이블 레벨 FOREIGN KEY


@dataclass
class AlterTableStatement:
    """ALTER TABLE 문 (ADD 된 FOREIGN KEY만 보관)"""
    name: Optional[str]
    foreign_keys: List[ForeignKeyClause] = field(default_factory=list)


@dataclass
class OtherStatement:
    """그 외 모든 문 (CREATE INDEX, INSERT 등) - 무시 대상"""
    kind: str


Statement = Union[CreateTableStatement, AlterTableStatement, OtherStatement]
