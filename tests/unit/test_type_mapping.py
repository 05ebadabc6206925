"""
Tests for the declared type to SQL type mapping.
"""
import pytest
from ormgen.type_mapping import contains_type, get_bind_method, get_container_method
from ormgen.type_mapping import get_default_value, get_sql_type
from ormgen.types import TypeDescriptor


@pytest.mark.parametrize(('type_', 'sql_type'), [
    (TypeDescriptor.of('int', nullable=False), 'INTEGER'),
    (TypeDescriptor.of('int'), 'INTEGER'),
    (TypeDescriptor.of('bool'), 'INTEGER'),
    (TypeDescriptor.of('float'), 'REAL'),
    (TypeDescriptor.of('str'), 'TEXT'),
    (TypeDescriptor.of('bytes'), 'BLOB'),
    (TypeDescriptor.of('Blob'), 'BLOB'),
    (TypeDescriptor.of('datetime.datetime'), None),
    (TypeDescriptor.enum('str'), None),
    (TypeDescriptor.array(TypeDescriptor.of('int')), None),
])
def test_get_sql_type(type_, sql_type):
    assert get_sql_type(type_) == sql_type
    assert contains_type(type_) is (sql_type is not None)


def test_container_method():
    assert get_container_method(TypeDescriptor.of('bool', nullable=False)) == 'bool'
    assert get_container_method(TypeDescriptor.of('Blob')) == 'blob'
    assert get_container_method(TypeDescriptor.of('uuid.UUID')) is None


@pytest.mark.parametrize(('sql_type', 'method'), [
    ('INTEGER', 'bind_long'),
    ('REAL', 'bind_double'),
    ('TEXT', 'bind_string'),
    ('BLOB', 'bind_blob'),
    ('NUMERIC', 'bind_value'),
    (None, 'bind_value'),
])
def test_bind_method(sql_type, method):
    assert get_bind_method(sql_type) == method


@pytest.mark.parametrize(('type_', 'default'), [
    (TypeDescriptor.of('int', nullable=False), '0'),
    (TypeDescriptor.of('float', nullable=False), '0.0'),
    (TypeDescriptor.of('bool', nullable=False), 'False'),
    (TypeDescriptor.of('int'), 'None'),
    (TypeDescriptor.of('str'), 'None'),
])
def test_default_value(type_, default):
    """Only primitives load a non-None default"""
    assert get_default_value(type_) == default
