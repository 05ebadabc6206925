"""
Column access strategies.

A strategy knows how a column's value is physically read and written
through the instance path (the typed model) and the container path (the
generic key/value representation), and how values are converted between
model form and database form.

The set of strategies is closed:
- DirectAccess, PackagePrivateAccess, PrivateAccess read and write the
  field itself and never convert
- EnumAccess, BlobAccess, BoxedBooleanAccess, PrimitiveBooleanAccess and
  TypeConverterAccess wrap one of the above and add a conversion

The container stores database form values, so conversions only ever apply
on the instance path.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING

from ormgen.converters import ConverterDescriptor
from ormgen.type_mapping import get_default_value
from ormgen.types import TypeDescriptor

if TYPE_CHECKING:
    from ormgen.column import ColumnMetadata

MODEL_VARIABLE = 'model'
CONTAINER_VARIABLE = 'model_container'


def model_variable(container: bool) -> str:
    """Name of the variable holding the instance or the container."""
    return CONTAINER_VARIABLE if container else MODEL_VARIABLE


def ref_variable(column: 'ColumnMetadata') -> str:
    """Temporary used to read a value once before a null check."""
    return f'ref_{column.element_name}'


class BaseColumnAccess(ABC):
    """Shared behavior of every access strategy."""

    @abstractmethod
    def get_raw(self, column: 'ColumnMetadata', container: bool) -> str:
        """Expression reading the stored value without conversion."""

    @abstractmethod
    def put_raw(self, column: 'ColumnMetadata', container: bool, value: str) -> str:
        """Statement storing a value without conversion."""

    @property
    def null_safe(self) -> bool:
        """Whether the conversions accept None."""
        return True

    def to_db(self, value: str) -> str:
        return value

    def to_model(self, value: str) -> str:
        return value

    def default_value(self, column: 'ColumnMetadata') -> str:
        """Source text of the model value loaded for an absent column."""
        return get_default_value(column.declared_type)

    def get_access(self, column: 'ColumnMetadata', container: bool) -> str:
        """Expression reading the column's database form value."""
        raw = self.get_raw(column, container)
        if container:
            return raw
        converted = self.to_db(raw)
        if converted == raw or self.null_safe or column.declared_type.is_primitive:
            return converted
        return f'{converted} if {raw} is not None else None'

    def set_access(self, column: 'ColumnMetadata', container: bool, value: str) -> str:
        """Statement storing a database form value, converting on the instance path.

        ``value`` must be non-null unless the strategy is null safe.
        """
        if container:
            return self.put_raw(column, container, value)
        return self.put_raw(column, container, self.to_model(value))

    def unwrap(self) -> 'BaseColumnAccess':
        return self


class _FieldAccess(BaseColumnAccess):
    """Container path shared by the strategies that touch the field itself."""

    def get_raw(self, column: 'ColumnMetadata', container: bool) -> str:
        if container:
            return f'{CONTAINER_VARIABLE}.get_value({column.container_key_name!r})'
        return self.get_field(column)

    def put_raw(self, column: 'ColumnMetadata', container: bool, value: str) -> str:
        if container:
            return f'{CONTAINER_VARIABLE}.put({column.container_key_name!r}, {value})'
        return self.set_field(column, value)

    @abstractmethod
    def get_field(self, column: 'ColumnMetadata') -> str:
        ...

    @abstractmethod
    def set_field(self, column: 'ColumnMetadata', value: str) -> str:
        ...


@dataclass(frozen=True)
class DirectAccess(_FieldAccess):
    """Reads and writes the attribute directly."""

    def get_field(self, column: 'ColumnMetadata') -> str:
        return f'{MODEL_VARIABLE}.{column.element_name}'

    def set_field(self, column: 'ColumnMetadata', value: str) -> str:
        return f'{MODEL_VARIABLE}.{column.element_name} = {value}'


@dataclass(frozen=True)
class PackagePrivateAccess(_FieldAccess):
    """Goes through the static accessors of the generated helper class."""
    helper_class: str

    def get_field(self, column: 'ColumnMetadata') -> str:
        return f'{self.helper_class}.get_{column.element_name}({MODEL_VARIABLE})'

    def set_field(self, column: 'ColumnMetadata', value: str) -> str:
        return f'{self.helper_class}.set_{column.element_name}({MODEL_VARIABLE}, {value})'


@dataclass(frozen=True)
class PrivateAccess(_FieldAccess):
    """Calls the model's getter and setter methods."""
    getter_name: str
    setter_name: str

    def get_field(self, column: 'ColumnMetadata') -> str:
        return f'{MODEL_VARIABLE}.{self.getter_name}()'

    def set_field(self, column: 'ColumnMetadata', value: str) -> str:
        return f'{MODEL_VARIABLE}.{self.setter_name}({value})'

    @classmethod
    def for_field(cls, element_name: str, use_is: bool = False,
                  getter_name: str = '', setter_name: str = '') -> 'PrivateAccess':
        if not getter_name:
            if use_is:
                getter_name = element_name if element_name.startswith('is_') else f'is_{element_name}'
            else:
                getter_name = f'get_{element_name}'
        return cls(getter_name=getter_name, setter_name=setter_name or f'set_{element_name}')


FieldAccess = DirectAccess | PackagePrivateAccess | PrivateAccess


class _WrapperAccess(BaseColumnAccess):
    """Adds a conversion on top of a field access."""
    inner: FieldAccess

    def get_raw(self, column: 'ColumnMetadata', container: bool) -> str:
        return self.inner.get_raw(column, container)

    def put_raw(self, column: 'ColumnMetadata', container: bool, value: str) -> str:
        return self.inner.put_raw(column, container, value)

    def unwrap(self) -> FieldAccess:
        return self.inner


@dataclass(frozen=True)
class EnumAccess(_WrapperAccess):
    """Persists an enum member by its name."""
    inner: FieldAccess
    enum_type: TypeDescriptor

    @property
    def null_safe(self) -> bool:
        return False

    def to_db(self, value: str) -> str:
        return f'{value}.name'

    def to_model(self, value: str) -> str:
        return f'{self.enum_type.name}[{value}]'

    def default_value(self, column: 'ColumnMetadata') -> str:
        return 'None'


@dataclass(frozen=True)
class BlobAccess(_WrapperAccess):
    """Persists the bytes held by a blob wrapper."""
    inner: FieldAccess

    @property
    def null_safe(self) -> bool:
        return False

    def to_db(self, value: str) -> str:
        return f'{value}.get_blob()'

    def to_model(self, value: str) -> str:
        return f'Blob({value})'

    def default_value(self, column: 'ColumnMetadata') -> str:
        return 'None'


@dataclass(frozen=True)
class BoxedBooleanAccess(_WrapperAccess):
    """Optional boolean; an absent value stays None instead of False."""
    inner: FieldAccess

    @property
    def null_safe(self) -> bool:
        return False

    def to_model(self, value: str) -> str:
        return f'bool({value})'

    def default_value(self, column: 'ColumnMetadata') -> str:
        return 'None'


@dataclass(frozen=True)
class PrimitiveBooleanAccess(_WrapperAccess):
    """Non-optional boolean; an absent value loads as False."""
    inner: FieldAccess

    def to_model(self, value: str) -> str:
        return f'bool({value})'

    def default_value(self, column: 'ColumnMetadata') -> str:
        return 'False'


@dataclass(frozen=True)
class TypeConverterAccess(_WrapperAccess):
    """Converts through a type converter.

    ``converter`` is None for a type with no registered converter and no
    SQL mapping; the converter is then looked up at runtime.
    """
    inner: FieldAccess
    model_type: TypeDescriptor
    converter: ConverterDescriptor | None = None
    converter_field: str | None = None

    @property
    def converter_ref(self) -> str:
        if self.converter_field:
            return self.converter_field
        return f'get_type_converter({self.model_type.name})'

    @property
    def db_type(self) -> TypeDescriptor | None:
        return self.converter.db_type if self.converter else None

    @property
    def is_boolean_converter(self) -> bool:
        return (self.converter is not None
                and self.converter.model_type == TypeDescriptor.of('bool'))

    def to_db(self, value: str) -> str:
        return f'{self.converter_ref}.get_db_value({value})'

    def to_model(self, value: str) -> str:
        return f'{self.converter_ref}.get_model_value({value})'

    def default_value(self, column: 'ColumnMetadata') -> str:
        return 'None'


ColumnAccessStrategy = (DirectAccess | PackagePrivateAccess | PrivateAccess
                        | EnumAccess | BlobAccess | BoxedBooleanAccess
                        | PrimitiveBooleanAccess | TypeConverterAccess)
