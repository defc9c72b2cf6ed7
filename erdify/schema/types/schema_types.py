from __future__ import annotations
from dataclasses import dataclass, field
from typing import Optional, List, Dict, Any

from erdify.schema.types.type_commons import (
    RelationshipType,
    DEFAULT_RELATIONSHIP_TYPE,
    load_objects,
    optional_to_dict,
    list_to_dict,
)
from erdify.schema.utils.identifiers import relationship_id


# -------- Leaf / helper objects --------
@dataclass
class ColumnReference:
    table: str
    column: str

    @staticmethod
    def from_dict(d: Optional[Dict[str, Any]]) -> Optional["ColumnReference"]:
        if d is None:
            return None
        return ColumnReference(table=d["table"], column=d["column"])

    def to_dict(self) -> Dict[str, Any]:
        return {"table": self.table, "column": self.column}


# -------- Core domain objects --------
@dataclass
class Column:
    name: str
    type: str
    is_primary_key: bool = False
    is_foreign_key: bool = False
    is_not_null: bool = False
    is_unique: bool = False
    references: Optional[ColumnReference] = None
    default_value: Optional[str] = None

    def __post_init__(self):
        # PK는 항상 NOT NULL
        if self.is_primary_key:
            self.is_not_null = True

    def mark_foreign_key(self, table: str, column: str, overwrite: bool = False) -> None:
        """
        FK 플래그를 세우고 참조 대상을 기록합니다.
        overwrite가 False면 기존 references는 그대로 둡니다.
        """
        self.is_foreign_key = True
        if overwrite or self.references is None:
            self.references = ColumnReference(table=table, column=column)

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Column":
        return Column(
            name=d["name"],
            type=d.get("type", "VARCHAR"),
            is_primary_key=bool(d.get("isPrimaryKey", False)),
            is_foreign_key=bool(d.get("isForeignKey", False)),
            is_not_null=bool(d.get("isNotNull", False)),
            is_unique=bool(d.get("isUnique", False)),
            references=ColumnReference.from_dict(d.get("references")),
            default_value=d.get("defaultValue"),
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "isPrimaryKey": self.is_primary_key,
            "isForeignKey": self.is_foreign_key,
            "isNotNull": self.is_not_null,
            "isUnique": self.is_unique,
        }
        if self.default_value is not None:
            out["defaultValue"] = self.default_value
        if self.references is not None:
            out["references"] = optional_to_dict(self.references)
        return out


@dataclass
class Table:
    id: str
    name: str
    columns: List[Column] = field(default_factory=list)

    def find_column(self, name: str) -> Optional[Column]:
        """컬럼명을 대소문자 구분 없이 찾습니다."""
        lowered = name.lower()
        return next((c for c in self.columns if c.name.lower() == lowered), None)

    def primary_key_columns(self) -> List[Column]:
        return [c for c in self.columns if c.is_primary_key]

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Table":
        return Table(
            id=d.get("id", d["name"]),
            name=d["name"],
            columns=load_objects(d.get("columns"), Column, "column"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "columns": list_to_dict(self.columns),
        }


@dataclass
class Relationship:
    source_table: str
    source_column: str
    target_table: str
    target_column: str
    type: RelationshipType = DEFAULT_RELATIONSHIP_TYPE
    id: str = ""

    def __post_init__(self):
        if not self.id:
            self.id = relationship_id(
                self.source_table, self.source_column,
                self.target_table, self.target_column,
            )

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Relationship":
        return Relationship(
            source_table=d["sourceTable"],
            source_column=d["sourceColumn"],
            target_table=d["targetTable"],
            target_column=d["targetColumn"],
            type=d.get("type", DEFAULT_RELATIONSHIP_TYPE),
            id=d.get("id", ""),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "sourceTable": self.source_table,
            "sourceColumn": self.source_column,
            "targetTable": self.target_table,
            "targetColumn": self.target_column,
            "type": self.type,
        }


@dataclass
class Schema:
    """
    파싱 결과 전체 (tables + relationships)

    다이어그램 레이아웃, export 등 다운스트림이 받는 유일한 산출물입니다.
    relationship id 중복은 add_relationship에서만 걸러냅니다.
    """
    tables: List[Table] = field(default_factory=list)
    relationships: List[Relationship] = field(default_factory=list)

    def find_table(self, name: str) -> Optional[Table]:
        lowered = name.lower()
        return next((t for t in self.tables if t.name.lower() == lowered), None)

    def add_table(self, table: Table) -> None:
        """
        같은 이름의 테이블이 이미 있으면 그 자리를 새 테이블로 교체합니다 (last wins).
        """
        for i, existing in enumerate(self.tables):
            if existing.name == table.name:
                self.tables[i] = table
                return
        self.tables.append(table)

    def remove_relationships_from(self, table_name: str) -> int:
        """
        source_table이 table_name인 relationship을 모두 지우고, 지운 개수를 반환합니다.
        """
        kept = [r for r in self.relationships if r.source_table != table_name]
        removed = len(self.relationships) - len(kept)
        self.relationships = kept
        return removed

    def has_relationship(self, rel_id: str) -> bool:
        return any(r.id == rel_id for r in self.relationships)

    def add_relationship(self, relationship: Relationship) -> bool:
        """
        id가 같은 relationship이 없을 때만 추가하고, 추가 여부를 반환합니다.
        """
        if self.has_relationship(relationship.id):
            return False
        self.relationships.append(relationship)
        return True

    @staticmethod
    def from_dict(d: Dict[str, Any]) -> "Schema":
        return Schema(
            tables=load_objects(d.get("tables"), Table, "table"),
            relationships=load_objects(d.get("relationships"), Relationship, "relationship"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tables": list_to_dict(self.tables),
            "relationships": list_to_dict(self.relationships),
        }
