"""
Mapping of declared model types to SQL column types.

This module identifies types only:
- which declared types have a native SQL column type
- which container read accessor and statement bind method serve a type
- the value a primitive takes when a loaded row has none
"""
from ormgen.types import BLOB_TYPE_NAME, TypeDescriptor

sqlite_types: dict[str, str] = {
    'int': 'INTEGER',
    'bool': 'INTEGER',
    'float': 'REAL',
    'str': 'TEXT',
    'bytes': 'BLOB',
    BLOB_TYPE_NAME: 'BLOB',
}

container_methods: dict[str, str] = {
    'int': 'int',
    'bool': 'bool',
    'float': 'float',
    'str': 'str',
    'bytes': 'bytes',
    BLOB_TYPE_NAME: 'blob',
}

bind_methods: dict[str, str] = {
    'INTEGER': 'bind_long',
    'REAL': 'bind_double',
    'TEXT': 'bind_string',
    'BLOB': 'bind_blob',
}

primitive_defaults: dict[str, str] = {
    'int': '0',
    'float': '0.0',
    'bool': 'False',
}


def contains_type(type_: TypeDescriptor) -> bool:
    """Check if a declared type has a native SQL column type."""
    return type_.name in sqlite_types and not (type_.is_enum or type_.is_array
                                               or type_.is_parameterized)


def get_sql_type(type_: TypeDescriptor) -> str | None:
    """Return the SQLite column type for a declared type, if native."""
    if not contains_type(type_):
        return None
    return sqlite_types[type_.name]


def get_container_method(type_: TypeDescriptor) -> str | None:
    """Return the container read accessor kind for a type.

    The accessor called on the container is ``get_<kind>_value``.
    """
    if not contains_type(type_):
        return None
    return container_methods[type_.name]


def get_bind_method(sql_type: str | None) -> str:
    """Return the statement bind method for a SQL column type.

    Types without a known SQL column type are bound untyped.
    """
    if sql_type is None:
        return 'bind_value'
    return bind_methods.get(sql_type, 'bind_value')


def get_default_value(type_: TypeDescriptor) -> str:
    """Return the source text of the value an absent column loads as."""
    if type_.is_primitive:
        return primitive_defaults[type_.name]
    return 'None'
