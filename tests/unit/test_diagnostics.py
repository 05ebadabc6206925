"""
Tests for error reporting while building an entity's columns.
"""
import logging

from ormgen.annotations import Column
from ormgen.column import build_columns
from ormgen.diagnostics import Diagnostic, LoggingDiagnostics, report
from ormgen.exceptions import ArrayColumnError, ConverterMismatchError
from ormgen.types import TypeDescriptor

from tests.fixtures.fields import make_field

INT = TypeDescriptor.of('int', nullable=False)


def test_failed_fields_are_reported_and_skipped(options, registry, color_converter, caplog):
    """Every bad field is reported in one pass; the rest still compile"""
    fields = [
        make_field('id', INT),
        make_field('scores', TypeDescriptor.array(INT)),
        make_field('name', TypeDescriptor.of('str')),
        make_field('count', INT, Column(type_converter=color_converter)),
    ]
    diagnostics = LoggingDiagnostics()

    with caplog.at_level(logging.ERROR, logger='ormgen.diagnostics'):
        columns = build_columns(fields, options, registry, diagnostics)

    assert [c.metadata.element_name for c in columns] == ['id', 'name']
    assert diagnostics.has_errors
    assert [d.elements[0] for d in diagnostics.errors] == ['scores', 'count']
    assert diagnostics.errors[1].elements == ('count', 'Color', 'int')
    assert len([r for r in caplog.records if r.levelno == logging.ERROR]) == 2


def test_parameterized_fields_are_kept_but_not_emittable(options, registry):
    field = make_field('tags', TypeDescriptor.parameterized('list', TypeDescriptor.of('str')))
    diagnostics = LoggingDiagnostics()

    columns = build_columns([field], options, registry, diagnostics)

    assert not diagnostics.has_errors
    assert len(columns) == 1
    assert not columns[0].is_emittable


def test_report_forwards_field_and_types():
    diagnostics = LoggingDiagnostics()
    report(diagnostics, ConverterMismatchError('bad converter', field_name='count',
                                               types=('Color', 'int')))
    report(diagnostics, ArrayColumnError('no arrays'))

    assert diagnostics.errors == [
        Diagnostic('bad converter', ('count', 'Color', 'int')),
        Diagnostic('no arrays', ()),
    ]
    assert diagnostics.messages == ['bad converter', 'no arrays']


def test_report_error_logs_elements(caplog):
    diagnostics = LoggingDiagnostics()
    with caplog.at_level(logging.ERROR, logger='ormgen.diagnostics'):
        diagnostics.report_error('broken', 'name', 'str')
    assert 'broken [name, str]' in caplog.text


def test_keyword_column_name_is_reported(options, registry, mocker):
    sink = mocker.Mock()
    fields = [
        make_field('kind', TypeDescriptor.of('str'), Column(name='class')),
        make_field('count', INT),
    ]

    columns = build_columns(fields, options, registry, sink)

    assert [c.metadata.column_name for c in columns] == ['count']
    sink.report_error.assert_called_once()
    message, field_name = sink.report_error.call_args.args
    assert "'class'" in message
    assert field_name == 'kind'
