from .schema_types import Column, ColumnReference, Relationship, Schema, Table

__all__ = [
    "Column",
    "ColumnReference",
    "Relationship",
    "Schema",
    "Table",
]
