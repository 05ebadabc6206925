"""
Type and field descriptors consumed by the column compiler.

This module provides:
- TypeKind / Visibility: shape of a declared type and of a member
- TypeDescriptor: the static type of a mapped field
- FieldDescriptor: a field as surfaced by annotation discovery
- Collate / ConflictAction: SQL level enumerations shared by annotations
"""
import datetime
import decimal
import types
import typing
import uuid
from dataclasses import dataclass, field, replace
from enum import Enum, auto
from typing import Any, Self

# Types that have a non-optional ("primitive") form.
PRIMITIVE_NAMES: frozenset[str] = frozenset({'int', 'float', 'bool'})

BLOB_TYPE_NAME = 'Blob'


class TypeKind(Enum):
    """Shape of a declared type."""
    CLASS = auto()
    ENUM = auto()
    ARRAY = auto()
    PARAMETERIZED = auto()


class Visibility(Enum):
    """Visibility of a mapped member."""
    PUBLIC = auto()
    PROTECTED = auto()
    PACKAGE = auto()
    PRIVATE = auto()


class Collate(Enum):
    """SQLite collating sequences."""
    NONE = 'NONE'
    BINARY = 'BINARY'
    NOCASE = 'NOCASE'
    RTRIM = 'RTRIM'


class ConflictAction(Enum):
    """Conflict resolution algorithms for constraints."""
    NONE = 'NONE'
    ROLLBACK = 'ROLLBACK'
    ABORT = 'ABORT'
    FAIL = 'FAIL'
    IGNORE = 'IGNORE'
    REPLACE = 'REPLACE'


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Static type of a field.

    Only ``int``, ``float`` and ``bool`` have a primitive (non-optional)
    form; any other type is always boxed, so ``str`` and ``str | None``
    describe the same type.

    Attributes
        name: Qualified type name as written in generated code
        nullable: True for the boxed (optional) form
        kind: Shape of the type
        args: Type arguments of a parameterized type, or the component of an array
    """
    name: str
    nullable: bool = True
    kind: TypeKind = TypeKind.CLASS
    args: tuple['TypeDescriptor', ...] = ()

    def __post_init__(self):
        if self.name not in PRIMITIVE_NAMES and not self.nullable:
            object.__setattr__(self, 'nullable', True)

    @property
    def is_primitive(self) -> bool:
        return self.name in PRIMITIVE_NAMES and not self.nullable

    @property
    def is_boolean(self) -> bool:
        return self.name == 'bool' and self.kind is TypeKind.CLASS

    @property
    def is_enum(self) -> bool:
        return self.kind is TypeKind.ENUM

    @property
    def is_array(self) -> bool:
        return self.kind is TypeKind.ARRAY

    @property
    def is_parameterized(self) -> bool:
        return self.kind is TypeKind.PARAMETERIZED

    @property
    def is_blob(self) -> bool:
        return self.name == BLOB_TYPE_NAME and self.kind is TypeKind.CLASS

    def box(self) -> Self:
        """Return the boxed (optional) form of this type."""
        return self if self.nullable else replace(self, nullable=True)

    def unbox(self) -> Self:
        """Return the primitive form where one exists."""
        return replace(self, nullable=False)

    @property
    def simple_name(self) -> str:
        return self.name.rsplit('.', 1)[-1]

    def __str__(self) -> str:
        if self.kind is TypeKind.ARRAY:
            return f'tuple[{self.args[0]}, ...]'
        text = self.name
        if self.kind is TypeKind.PARAMETERIZED and self.args:
            text = f"{text}[{', '.join(str(a) for a in self.args)}]"
        if self.name in PRIMITIVE_NAMES and self.nullable:
            text = f'{text} | None'
        return text

    @classmethod
    def of(cls, name: str, nullable: bool = True) -> Self:
        return cls(name=name, nullable=nullable)

    @classmethod
    def enum(cls, name: str) -> Self:
        return cls(name=name, kind=TypeKind.ENUM)

    @classmethod
    def array(cls, component: 'TypeDescriptor') -> Self:
        return cls(name='tuple', kind=TypeKind.ARRAY, args=(component,))

    @classmethod
    def parameterized(cls, name: str, *args: 'TypeDescriptor') -> Self:
        return cls(name=name, kind=TypeKind.PARAMETERIZED, args=tuple(args))

    @classmethod
    def from_annotation(cls, annotation: Any) -> Self:
        """Build a descriptor from a Python annotation.

        ``X | None`` and ``Optional[X]`` give the boxed form of ``X``,
        ``tuple[X, ...]`` is an array and any other generic alias
        (``list[X]``, ``dict[K, V]``) is parameterized.

        Raises
            TypeError: If the annotation is a union of several non-None types
        """
        origin = typing.get_origin(annotation)
        if origin is typing.Union or origin is types.UnionType:
            members = [a for a in typing.get_args(annotation) if a is not type(None)]
            if len(members) != 1:
                raise TypeError(f'Unsupported union annotation: {annotation!r}')
            return cls.from_annotation(members[0]).box()

        if origin is not None:
            args = typing.get_args(annotation)
            if origin is tuple and len(args) == 2 and args[1] is Ellipsis:
                return cls.array(cls.from_annotation(args[0]))
            return cls.parameterized(_qualified_name(origin),
                                     *(cls.from_annotation(a) for a in args))

        if isinstance(annotation, type) and issubclass(annotation, Enum):
            return cls.enum(_qualified_name(annotation))

        name = _qualified_name(annotation)
        return cls(name=name, nullable=name not in PRIMITIVE_NAMES)


_KNOWN_MODULES = {
    datetime.datetime: 'datetime.datetime',
    datetime.date: 'datetime.date',
    datetime.time: 'datetime.time',
    decimal.Decimal: 'decimal.Decimal',
    uuid.UUID: 'uuid.UUID',
}


def _qualified_name(tp: Any) -> str:
    if isinstance(tp, str):
        return tp
    if tp in _KNOWN_MODULES:
        return _KNOWN_MODULES[tp]
    module = getattr(tp, '__module__', 'builtins')
    name = getattr(tp, '__qualname__', None) or getattr(tp, '__name__', str(tp))
    # the runtime blob wrapper is always referenced unqualified
    if module in {'builtins', '__main__'} or name == BLOB_TYPE_NAME:
        return name
    return f'{module}.{name}'


@dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """A mapped member as surfaced by annotation discovery.

    Attributes
        name: Simple name of the member
        type: Declared type
        visibility: Member visibility
        annotations: Annotation instances attached to the member
    """
    name: str
    type: TypeDescriptor
    visibility: Visibility = Visibility.PUBLIC
    annotations: tuple[Any, ...] = field(default_factory=tuple)

    @property
    def is_private(self) -> bool:
        return self.visibility is Visibility.PRIVATE

    def get_annotation(self, annotation_type: type) -> Any | None:
        """Return the first annotation of the given type, if present."""
        for annotation in self.annotations:
            if isinstance(annotation, annotation_type):
                return annotation
        return None
