"""
Column annotations attached to mapped fields.

Annotation discovery is not done here: a discovery layer creates these
records and attaches them to a ``FieldDescriptor``.
"""
from dataclasses import dataclass

from ormgen.converters import ConverterDescriptor
from ormgen.types import Collate, ConflictAction

# Index group assigned when an index annotation names no group.
GENERIC_INDEX_GROUP = -1


@dataclass(frozen=True)
class Column:
    """Marks a field as a column and overrides its defaults.

    An empty ``name`` keeps the field name. ``type_converter`` names a custom
    converter that takes precedence over every other access strategy.
    """
    name: str = ''
    length: int = -1
    collate: Collate = Collate.NONE
    default_value: str | None = None
    type_converter: ConverterDescriptor | None = None
    getter_name: str = ''
    setter_name: str = ''


@dataclass(frozen=True)
class PrimaryKey:
    autoincrement: bool = False
    quick_check_auto_increment: bool = False


@dataclass(frozen=True)
class Unique:
    unique: bool = True
    unique_groups: tuple[int, ...] = ()
    on_unique_conflict: ConflictAction = ConflictAction.FAIL


@dataclass(frozen=True)
class NotNull:
    on_null_conflict: ConflictAction = ConflictAction.FAIL


@dataclass(frozen=True)
class Index:
    index_groups: tuple[int, ...] = ()


@dataclass(frozen=True)
class ContainerKey:
    """Alternate key used by the container representation.

    ``put_default`` False omits the key when a loaded row has no value.
    """
    value: str = ''
    put_default: bool = True
