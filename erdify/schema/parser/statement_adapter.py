"""
sqlglot AST -> ddl_types 변환
sqlglot 고유의 노드 구조는 이 모듈 밖으로 나가지 않습니다.
"""

from typing import Iterable, List, Optional

from sqlglot import exp

from erdify.schema.parser.ddl_types import (
    AlterTableStatement,
    ColumnDefinition,
    CreateTableStatement,
    ForeignKeyClause,
    OtherStatement,
    Statement,
)
from erdify.schema.utils.identifiers import clean_identifier

# 타입 없이 선언된 컬럼의 기본 타입
DEFAULT_COLUMN_TYPE = 'VARCHAR'


def adapt_statements(expressions: Iterable[exp.Expression], dialect: str) -> List[Statement]:
    return [adapt_statement(expression, dialect) for expression in expressions]


def adapt_statement(expression: exp.Expression, dialect: str) -> Statement:
    if isinstance(expression, exp.Create) and _kind(expression) == 'TABLE':
        return _adapt_create_table(expression, dialect)
    if isinstance(expression, exp.Alter) and _kind(expression) == 'TABLE':
        return _adapt_alter_table(expression)
    return OtherStatement(kind=expression.key)


def _kind(expression: exp.Expression) -> str:
    return (expression.args.get('kind') or '').upper()


def _identifier_name(node: Optional[exp.Expression]) -> str:
    """
    Identifier / Column / Literal(문자열 식별자) / Ordered 어디서든 이름을 꺼냅니다.
    """
    if node is None:
        return ''
    while isinstance(node, exp.Ordered):
        node = node.this
    name = node.name
    if not name:
        ident = node.find(exp.Identifier)
        name = ident.name if ident else ''
    return clean_identifier(name)


def _names(nodes: Iterable[exp.Expression]) -> List[str]:
    return [name for name in (_identifier_name(node) for node in nodes) if name]


def _table_name(node: Optional[exp.Expression]) -> Optional[str]:
    if isinstance(node, exp.Schema):
        node = node.this
    return _identifier_name(node) or None


def _unwrap_constraint(definition: exp.Expression) -> List[exp.Expression]:
    """CONSTRAINT name PRIMARY KEY (...) 형태면 안쪽 제약조건들을 꺼냅니다."""
    if isinstance(definition, exp.Constraint):
        return list(definition.expressions)
    return [definition]


def _adapt_reference(columns: List[str], reference: Optional[exp.Expression]) -> Optional[ForeignKeyClause]:
    """
    REFERENCES table(col, ...) 부분을 ForeignKeyClause로 변환합니다.
    참조 테이블명을 찾지 못하면 None
    """
    if not isinstance(reference, exp.Reference):
        return None

    target = reference.this
    if isinstance(target, exp.Schema):
        table = _table_name(target.this)
        ref_columns = _names(target.expressions)
    else:
        table = _table_name(target)
        ref_columns = []

    if not table:
        return None
    return ForeignKeyClause(columns=columns, references_table=table, references_columns=ref_columns)


def _adapt_foreign_key(foreign_key: exp.ForeignKey) -> Optional[ForeignKeyClause]:
    columns = _names(foreign_key.expressions)
    return _adapt_reference(columns, foreign_key.args.get('reference'))


def _adapt_column(column_def: exp.ColumnDef, dialect: str) -> ColumnDefinition:
    kind = column_def.args.get('kind')
    column = ColumnDefinition(
        name=_identifier_name(column_def),
        type=kind.sql(dialect=dialect) if kind else DEFAULT_COLUMN_TYPE,
    )

    for constraint in column_def.args.get('constraints') or []:
        constraint_kind = constraint.args.get('kind') if isinstance(constraint, exp.ColumnConstraint) else constraint

        if isinstance(constraint_kind, exp.PrimaryKeyColumnConstraint):
            column.primary_key = True
        elif isinstance(constraint_kind, exp.NotNullColumnConstraint):
            # NULL 도 NotNullColumnConstraint(allow_null=True)로 들어옵니다.
            column.not_null = not constraint_kind.args.get('allow_null')
        elif isinstance(constraint_kind, exp.UniqueColumnConstraint):
            column.unique = True
        elif isinstance(constraint_kind, exp.AutoIncrementColumnConstraint):
            column.auto_increment = True
        elif isinstance(constraint_kind, exp.GeneratedAsIdentityColumnConstraint):
            # GENERATED ALWAYS AS (expr) 계산 컬럼은 제외
            if not constraint_kind.args.get('expression'):
                column.auto_increment = True
        elif isinstance(constraint_kind, exp.DefaultColumnConstraint):
            if constraint_kind.this is not None:
                column.default = constraint_kind.this.sql(dialect=dialect)
        elif isinstance(constraint_kind, exp.Reference):
            column.reference = _adapt_reference([column.name], constraint_kind)

    return column


def _adapt_create_table(create: exp.Create, dialect: str) -> CreateTableStatement:
    schema = create.this
    statement = CreateTableStatement(name=_table_name(schema))

    # CREATE TABLE ... AS SELECT / LIKE 는 컬럼 정의가 없습니다.
    if not isinstance(schema, exp.Schema):
        return statement

    for definition in schema.expressions:
        if isinstance(definition, exp.ColumnDef):
            statement.columns.append(_adapt_column(definition, dialect))
            continue

        for constraint in _unwrap_constraint(definition):
            if isinstance(constraint, exp.PrimaryKey):
                statement.primary_keys.extend(_names(constraint.expressions))
            elif isinstance(constraint, exp.ForeignKey):
                clause = _adapt_foreign_key(constraint)
                if clause is not None:
                    statement.foreign_keys.append(clause)

    return statement


def _adapt_alter_table(alter: exp.Alter) -> AlterTableStatement:
    statement = AlterTableStatement(name=_table_name(alter.this))

    for action in alter.args.get('actions') or []:
        # ADD 계열 액션만 반영 (DROP 등은 무시)
        if isinstance(action, exp.Drop):
            continue
        for foreign_key in action.find_all(exp.ForeignKey):
            clause = _adapt_foreign_key(foreign_key)
            if clause is not None:
                statement.foreign_keys.append(clause)

    return statement
