"""
Column metadata extracted from a mapped field.
"""
import keyword
import logging
from dataclasses import dataclass, field
from typing import Self

from ormgen.access import ColumnAccessStrategy
from ormgen.annotations import GENERIC_INDEX_GROUP, Column, ContainerKey
from ormgen.annotations import Index, NotNull, PrimaryKey, Unique
from ormgen.converters import ConverterRegistry
from ormgen.diagnostics import DiagnosticSink, report
from ormgen.exceptions import ConfigurationError, InvalidColumnNameError
from ormgen.options import TableOptions
from ormgen.resolver import AccessResolution, resolve_access
from ormgen.types import Collate, ConflictAction, FieldDescriptor, TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ColumnMetadata:
    """Declared properties of one mapped field.

    ``column_name`` is used by everything on the SQL side and
    ``container_key_name`` by everything on the container side; the two
    may differ.
    """
    element_name: str
    declared_type: TypeDescriptor
    column_name: str
    container_key_name: str
    put_container_default_value: bool = True
    length: int = -1
    collate: Collate = Collate.NONE
    default_value: str | None = None
    not_null: bool = False
    on_null_conflict: ConflictAction | None = None
    unique: bool = False
    on_unique_conflict: ConflictAction | None = None
    unique_groups: frozenset[int] = field(default_factory=frozenset)
    index_groups: frozenset[int] = field(default_factory=frozenset)
    is_primary_key: bool = False
    is_auto_increment_primary_key: bool = False
    quick_check_auto_increment: bool = False
    has_custom_converter: bool = False
    has_type_converter: bool = False

    def __post_init__(self):
        if self.is_primary_key and self.is_auto_increment_primary_key:
            raise ValueError(f'{self.column_name}: a column is either a primary key '
                             'or an auto-increment primary key, not both')

    @classmethod
    def from_field(cls, field_: FieldDescriptor,
                   resolution: AccessResolution | None = None) -> Self:
        """Read the column annotations of a field.

        Args:
            field_: Field carrying the annotations
            resolution: Access resolution providing the converter flags

        Returns
            ColumnMetadata instance

        Raises
            InvalidColumnNameError: If the column name is a keyword or not an identifier
        """
        kw = {}

        column = field_.get_annotation(Column)
        if column is not None:
            kw['column_name'] = column.name or field_.name
            kw['length'] = column.length
            kw['collate'] = column.collate
            kw['default_value'] = column.default_value
        else:
            kw['column_name'] = field_.name

        # the column name also names the table class attribute
        name = kw['column_name']
        if not name.isidentifier() or keyword.iskeyword(name):
            raise InvalidColumnNameError(
                f'Column name {name!r} of {field_.name} is not a valid Python identifier',
                field_name=field_.name)

        primary_key = field_.get_annotation(PrimaryKey)
        if primary_key is not None:
            if primary_key.autoincrement:
                kw['is_auto_increment_primary_key'] = True
                kw['quick_check_auto_increment'] = primary_key.quick_check_auto_increment
            else:
                kw['is_primary_key'] = True

        unique = field_.get_annotation(Unique)
        if unique is not None:
            kw['unique'] = unique.unique
            kw['on_unique_conflict'] = unique.on_unique_conflict
            kw['unique_groups'] = frozenset(unique.unique_groups)

        not_null = field_.get_annotation(NotNull)
        if not_null is not None:
            kw['not_null'] = True
            kw['on_null_conflict'] = not_null.on_null_conflict

        container_key = field_.get_annotation(ContainerKey)
        if container_key is not None:
            kw['container_key_name'] = container_key.value or field_.name
            kw['put_container_default_value'] = container_key.put_default
        else:
            kw['container_key_name'] = field_.name

        index = field_.get_annotation(Index)
        if index is not None:
            kw['index_groups'] = frozenset(index.index_groups or (GENERIC_INDEX_GROUP,))

        if resolution is not None:
            kw['has_custom_converter'] = resolution.has_custom_converter
            kw['has_type_converter'] = resolution.has_type_converter

        return cls(element_name=field_.name, declared_type=field_.type, **kw)


@dataclass(frozen=True)
class ResolvedColumn:
    """A column's metadata and its access strategy.

    ``access`` is None for parameterized fields, which must not be emitted.
    """
    metadata: ColumnMetadata
    access: ColumnAccessStrategy | None

    @property
    def is_emittable(self) -> bool:
        return self.access is not None


def build_column(field_: FieldDescriptor, options: TableOptions,
                 registry: ConverterRegistry) -> ResolvedColumn:
    """Build the metadata and access strategy of one field.

    Raises
        ConfigurationError: If the field cannot be mapped to a column
    """
    resolution = resolve_access(field_, options, registry)
    metadata = ColumnMetadata.from_field(field_, resolution)
    return ResolvedColumn(metadata, resolution.access if resolution else None)


def build_columns(fields: list[FieldDescriptor], options: TableOptions,
                  registry: ConverterRegistry,
                  diagnostics: DiagnosticSink) -> list[ResolvedColumn]:
    """Build every column of one entity.

    A field that fails is reported to ``diagnostics`` and skipped, so one
    pass surfaces every configuration error of the entity.

    Returns
        Columns in declaration order, without the skipped fields
    """
    columns = []
    for field_ in fields:
        try:
            columns.append(build_column(field_, options, registry))
        except ConfigurationError as exc:
            report(diagnostics, exc)
            logger.debug(f'{options.model_class}.{field_.name}: skipped')
    return columns
