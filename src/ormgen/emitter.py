"""
Code fragment emitters for a single column.

Every emitter is a pure function of a column's metadata and its access
strategy. ``container`` selects the container path instead of the
instance path; it is always explicit.

Emitted Python fragments refer to the names ``model``, ``model_container``,
``values``, ``statement``, ``row`` and ``row_id``, which the assembled adapter
module provides. The DDL clause, the insert column name and the
placeholder are SQL text.
"""
import logging
from collections.abc import Iterable
from typing import assert_never

from ormgen.access import CONTAINER_VARIABLE, BlobAccess, BoxedBooleanAccess
from ormgen.access import ColumnAccessStrategy, DirectAccess, EnumAccess
from ormgen.access import PackagePrivateAccess, PrimitiveBooleanAccess
from ormgen.access import PrivateAccess, TypeConverterAccess, model_variable
from ormgen.access import ref_variable
from ormgen.codeblock import CodeBlock
from ormgen.column import ColumnMetadata
from ormgen.exceptions import ContainerAccessError, UnmappedColumnTypeError
from ormgen.sql import make_placeholder, quote_identifier
from ormgen.type_mapping import get_bind_method, get_container_method, get_sql_type
from ormgen.types import Collate, TypeDescriptor

logger = logging.getLogger(__name__)

ROW_VARIABLE = 'row'
VALUES_VARIABLE = 'values'
STATEMENT_VARIABLE = 'statement'
ROW_ID_VARIABLE = 'row_id'

__all__ = [
    'db_type_of',
    'emit_property_definition',
    'emit_property_case',
    'emit_insert_column_name',
    'emit_insert_placeholder',
    'emit_content_values',
    'emit_statement_binding',
    'assign_statement_indices',
    'resolve_put_default',
    'emit_load_from_cursor',
    'emit_update_auto_increment',
    'emit_to_model',
    'emit_creation_clause',
    'emit_column_access',
    'emit_comparison_access',
    'reference_column_name',
    'emit_foreign_key_container_put',
]


def db_type_of(column: ColumnMetadata, access: ColumnAccessStrategy) -> TypeDescriptor | None:
    """Type of the value the database stores for a column.

    None when the column relies on a converter that is only known at runtime.
    """
    match access:
        case DirectAccess() | PackagePrivateAccess() | PrivateAccess():
            return column.declared_type
        case BoxedBooleanAccess() | PrimitiveBooleanAccess():
            return column.declared_type
        case EnumAccess():
            return TypeDescriptor.of('str')
        case BlobAccess():
            return column.declared_type
        case TypeConverterAccess():
            return access.db_type
        case _:
            assert_never(access)


def _sql_type(column: ColumnMetadata, access: ColumnAccessStrategy) -> str | None:
    db_type = db_type_of(column, access)
    return get_sql_type(db_type) if db_type is not None else None


# 1. Property declaration

def emit_property_definition(column: ColumnMetadata, model_class: str) -> str:
    """Declare the typed column reference, as a class attribute of the table class.

    Non-optional ``int`` and ``float`` get their specialized reference type;
    every other type gets ``Property`` over its boxed form.
    """
    declared = column.declared_type
    if declared.is_primitive and not declared.is_boolean:
        prop = f'{declared.name.capitalize()}Property'
        annotation = prop
    else:
        prop = 'Property'
        annotation = f'Property[{declared.name}]'
    return (f'{column.column_name}: {annotation} = '
            f'{prop}({model_class}, {column.column_name!r})\n')


# 2. Name-to-property dispatch case

def emit_property_case(column: ColumnMetadata, table_class: str,
                       dialect: str = 'sqlite') -> str:
    """One ``case`` of the ``match`` on a quoted column name."""
    quoted = quote_identifier(column.column_name, dialect)
    return (CodeBlock()
            .begin_control_flow(f'case {quoted!r}')
            .add_statement(f'return {table_class}.{column.column_name}')
            .end_control_flow()
            .build())


# 3. Insert column name and placeholder

def emit_insert_column_name(column: ColumnMetadata, dialect: str = 'sqlite') -> str:
    return quote_identifier(column.column_name, dialect)


def emit_insert_placeholder(column: ColumnMetadata, dialect: str = 'sqlite') -> str:
    return make_placeholder(dialect)


# 4. Content values

def emit_content_values(column: ColumnMetadata, access: ColumnAccessStrategy,
                        container: bool) -> str:
    """Write the column's database form value into ``values[column_name]``."""
    target = f'{VALUES_VARIABLE}[{column.column_name!r}]'
    block = CodeBlock()
    if container or access.null_safe or column.declared_type.is_primitive:
        block.add_statement(f'{target} = {access.get_access(column, container)}')
    else:
        ref = ref_variable(column)
        block.add_statement(f'{ref} = {access.get_raw(column, container)}')
        block.add_statement(f'{target} = {access.to_db(ref)} if {ref} is not None else None')
    return block.build()


# 5. Prepared statement binding

def emit_statement_binding(column: ColumnMetadata, access: ColumnAccessStrategy,
                           container: bool, index: int) -> tuple[str, int]:
    """Bind the column's value at a 1-based position of ``statement``.

    Auto-increment primary keys are assigned by the database and are not
    bound; their fragment is empty and the index does not advance.

    Returns
        The fragment and the index for the next column
    """
    if column.is_auto_increment_primary_key:
        return '', index

    bind = get_bind_method(_sql_type(column, access))
    block = CodeBlock()
    if column.declared_type.is_primitive and not container:
        block.add_statement(f'{STATEMENT_VARIABLE}.{bind}({index}, '
                            f'{access.get_access(column, container)})')
        return block.build(), index + 1

    ref = ref_variable(column)
    if container or not access.null_safe:
        block.add_statement(f'{ref} = {access.get_raw(column, container)}')
        value = ref if container else access.to_db(ref)
    else:
        block.add_statement(f'{ref} = {access.get_access(column, container)}')
        value = ref
    block.begin_control_flow(f'if {ref} is not None')
    block.add_statement(f'{STATEMENT_VARIABLE}.{bind}({index}, {value})')
    block.next_control_flow('else')
    block.add_statement(f'{STATEMENT_VARIABLE}.bind_null({index})')
    block.end_control_flow()
    return block.build(), index + 1


def assign_statement_indices(columns: Iterable[ColumnMetadata], start: int = 1) -> list[int | None]:
    """Positions of each column in the insert statement, in declaration order.

    Auto-increment primary keys get None and do not consume a position.
    """
    indices = []
    index = start
    for column in columns:
        if column.is_auto_increment_primary_key:
            indices.append(None)
        else:
            indices.append(index)
            index += 1
    return indices


# 6. Cursor load

def resolve_put_default(column: ColumnMetadata, container: bool,
                        put_default_for_container: bool | None = None) -> bool:
    """Decide whether an absent value is replaced by a default.

    The instance path always writes a default. On the container path the
    column's own setting wins over the adapter wide request.
    """
    if not container:
        return True
    if (put_default_for_container is not None
            and put_default_for_container != column.put_container_default_value):
        logger.debug(f'{column.column_name}: container default '
                     f'{column.put_container_default_value} overrides requested {put_default_for_container}')
    return column.put_container_default_value


def emit_load_from_cursor(column: ColumnMetadata, access: ColumnAccessStrategy,
                          container: bool,
                          put_default_for_container: bool | None = None) -> str:
    """Read the column from ``row`` into the instance or the container."""
    read = f'{ROW_VARIABLE}[{column.column_name!r}]'
    block = CodeBlock()
    block.begin_control_flow(f'if {ROW_VARIABLE}.get({column.column_name!r}) is not None')
    block.add_statement(access.set_access(column, container, read))
    if resolve_put_default(column, container, put_default_for_container):
        block.next_control_flow('else')
        if container:
            block.add_statement(f'{CONTAINER_VARIABLE}.put_default({column.container_key_name!r})')
        else:
            block.add_statement(access.put_raw(column, False, access.default_value(column)))
    block.end_control_flow()
    return block.build()


# 7. Auto-increment write back

def emit_update_auto_increment(column: ColumnMetadata, access: ColumnAccessStrategy,
                               container: bool) -> str:
    """Store ``row_id`` after an insert; empty unless the column is an auto-increment key."""
    if not column.is_auto_increment_primary_key:
        return ''
    return CodeBlock().add_statement(access.set_access(column, container, ROW_ID_VARIABLE)).build()


# 8. Container to model transfer

def _container_method(column: ColumnMetadata, access: ColumnAccessStrategy) -> str:
    method = get_container_method(column.declared_type)
    if method is not None:
        return method
    match access:
        case EnumAccess():
            method = get_container_method(TypeDescriptor.of('str'))
        case TypeConverterAccess(converter=converter) if converter is not None:
            method = get_container_method(converter.db_type)
    if method is None:
        raise ContainerAccessError(
            f'No container accessor for {column.declared_type} of column {column.element_name}',
            field_name=column.element_name, types=(str(column.declared_type),))
    return method


def emit_to_model(column: ColumnMetadata, access: ColumnAccessStrategy) -> str:
    """Copy the container's value into the instance.

    Optional booleans, and booleans behind a converter, are written through
    the wrapped field access so the container's None survives the transfer.

    Raises
        ContainerAccessError: If no container accessor exists for the column's type
    """
    method = _container_method(column, access)
    read = f'{CONTAINER_VARIABLE}.get_{method}_value({column.container_key_name!r})'

    match access:
        case BoxedBooleanAccess(inner=inner):
            target = inner
        case TypeConverterAccess(inner=inner) if access.is_boolean_converter:
            target = inner
        case _:
            target = access

    block = CodeBlock()
    if target.null_safe:
        block.add_statement(target.set_access(column, False, read))
    else:
        ref = ref_variable(column)
        block.add_statement(f'{ref} = {read}')
        block.add_statement(target.put_raw(
            column, False, f'{target.to_model(ref)} if {ref} is not None else None'))
    return block.build()


# 9. DDL column clause

def emit_creation_clause(column: ColumnMetadata, access: ColumnAccessStrategy,
                         dialect: str = 'sqlite') -> str:
    """Column definition: name, type, then length, collation, UNIQUE and NOT NULL.

    Raises
        UnmappedColumnTypeError: If the column's stored type has no SQL type
    """
    sql_type = _sql_type(column, access)
    if sql_type is None:
        raise UnmappedColumnTypeError(
            f'No SQL column type for {column.declared_type} of column {column.element_name}',
            field_name=column.element_name, types=(str(column.declared_type),))

    clause = f'{quote_identifier(column.column_name, dialect)} {sql_type}'
    if column.length > -1:
        clause += f'({column.length})'
    if column.collate is not Collate.NONE:
        clause += f' COLLATE {column.collate.value}'
    if column.unique:
        clause += ' UNIQUE'
    if column.not_null:
        clause += ' NOT NULL'
    return clause


# Access handles for sibling assemblers

def emit_column_access(column: ColumnMetadata, access: ColumnAccessStrategy,
                       container: bool) -> str:
    """Expression reading the column's database form value."""
    return access.get_access(column, container)


def emit_comparison_access(column: ColumnMetadata, access: ColumnAccessStrategy,
                           container: bool) -> str:
    """Expression reading the column's value without type conversion."""
    if isinstance(access, TypeConverterAccess):
        if container:
            return (f'{model_variable(True)}.get_type_converted_property_value('
                    f'{access.model_type.name}, {column.container_key_name!r})')
        return access.inner.get_raw(column, False)
    return access.get_access(column, container)


def reference_column_name(column: ColumnMetadata, referenced_column: str) -> str:
    """Key of this column in a related entity, qualified by the referenced column."""
    return f'{column.column_name}_{referenced_column}'.upper()


def emit_foreign_key_container_put(column: ColumnMetadata, access: ColumnAccessStrategy,
                                   referenced_column: str) -> str:
    """Copy the instance's value into a related entity's container."""
    key = reference_column_name(column, referenced_column)
    return (CodeBlock()
            .add_statement(f'{CONTAINER_VARIABLE}.put({key!r}, '
                           f'{access.get_access(column, False)})')
            .build())
