"""
SQL DDL to ER Schema Package
"""
from .schema_parser import parse_sql, parse_sql_file
from .errors import (
    SchemaParseError,
    EmptyInputError,
    UnparseableSQLError,
    DDLDialectError,
)
from .types.schema_types import Column, ColumnReference, Table, Relationship, Schema

__all__ = [
    'parse_sql',
    'parse_sql_file',
    'SchemaParseError',
    'EmptyInputError',
    'UnparseableSQLError',
    'DDLDialectError',
    'Column',
    'ColumnReference',
    'Table',
    'Relationship',
    'Schema',
]
