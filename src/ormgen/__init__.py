"""
Column metadata and code generation core of an ORM compiler.

A mapped field is compiled in three steps:
- resolve_access / build_column: choose how the value is read and written
- ColumnMetadata: the field's declared column properties
- emitter functions: code fragments for DDL, inserts, binding, loading and transfers

Module functions in ``ormgen.emitter`` can be called in any order and any
number of times; only statement binding threads an index across columns.
"""
__version__ = '0.1.0'

from ormgen.access import BaseColumnAccess, BlobAccess, BoxedBooleanAccess
from ormgen.access import ColumnAccessStrategy, DirectAccess, EnumAccess
from ormgen.access import PackagePrivateAccess, PrimitiveBooleanAccess
from ormgen.access import PrivateAccess, TypeConverterAccess
from ormgen.annotations import Column, ContainerKey, Index, NotNull
from ormgen.annotations import PrimaryKey, Unique
from ormgen.column import ColumnMetadata, ResolvedColumn, build_column
from ormgen.column import build_columns
from ormgen.converters import ConverterDescriptor, ConverterRegistry
from ormgen.converters import default_registry
from ormgen.diagnostics import DiagnosticSink, LoggingDiagnostics
from ormgen.exceptions import ArrayColumnError, CodegenError, ConfigurationError
from ormgen.exceptions import ContainerAccessError, ConverterMismatchError
from ormgen.exceptions import InternalConsistencyError, InvalidColumnNameError
from ormgen.exceptions import UnmappedColumnTypeError
from ormgen.options import TableOptions, get_table_options
from ormgen.resolver import AccessResolution, resolve_access
from ormgen.types import Collate, ConflictAction, FieldDescriptor, TypeDescriptor
from ormgen.types import TypeKind, Visibility

__all__ = [
    'AccessResolution',
    'ArrayColumnError',
    'BaseColumnAccess',
    'BlobAccess',
    'BoxedBooleanAccess',
    'CodegenError',
    'Collate',
    'Column',
    'ColumnAccessStrategy',
    'ColumnMetadata',
    'ConfigurationError',
    'ConflictAction',
    'ContainerAccessError',
    'ContainerKey',
    'ConverterDescriptor',
    'ConverterMismatchError',
    'ConverterRegistry',
    'DiagnosticSink',
    'DirectAccess',
    'EnumAccess',
    'FieldDescriptor',
    'Index',
    'InternalConsistencyError',
    'InvalidColumnNameError',
    'LoggingDiagnostics',
    'NotNull',
    'PackagePrivateAccess',
    'PrimaryKey',
    'PrimitiveBooleanAccess',
    'PrivateAccess',
    'ResolvedColumn',
    'TableOptions',
    'TypeConverterAccess',
    'TypeDescriptor',
    'TypeKind',
    'Unique',
    'UnmappedColumnTypeError',
    'Visibility',
    'build_column',
    'build_columns',
    'default_registry',
    'get_table_options',
    'resolve_access',
]
