"""
Resolution of a field's column access strategy.

Rules are evaluated in a fixed order and the first match wins:
1. explicit custom converter on the column annotation
2. enum type
3. blob wrapper type
4. optional boolean
5. non-optional boolean
6. registered converter, or any type without a native SQL mapping
7. plain field access chosen by visibility and table options
"""
import logging
from dataclasses import dataclass

from ormgen.access import BlobAccess, BoxedBooleanAccess, ColumnAccessStrategy
from ormgen.access import DirectAccess, EnumAccess, FieldAccess
from ormgen.access import PackagePrivateAccess, PrimitiveBooleanAccess
from ormgen.access import PrivateAccess, TypeConverterAccess
from ormgen.annotations import Column
from ormgen.converters import ConverterRegistry
from ormgen.exceptions import ArrayColumnError, ConverterMismatchError
from ormgen.exceptions import InternalConsistencyError
from ormgen.options import TableOptions
from ormgen.type_mapping import contains_type
from ormgen.types import FieldDescriptor, TypeKind

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessResolution:
    """Strategy chosen for a field and the converter flags it implies."""
    access: ColumnAccessStrategy
    has_custom_converter: bool = False
    has_type_converter: bool = False


def resolve_field_access(field: FieldDescriptor, options: TableOptions) -> FieldAccess:
    """Choose the plain field access by visibility and table options.
    """
    if options.package_private:
        return PackagePrivateAccess(options.helper_class)

    if field.is_private:
        column = field.get_annotation(Column)
        use_is = field.type.is_boolean and options.use_is_for_private_booleans
        return PrivateAccess.for_field(
            field.name, use_is=use_is,
            getter_name=column.getter_name if column else '',
            setter_name=column.setter_name if column else '')

    return DirectAccess()


def resolve_access(field: FieldDescriptor, options: TableOptions,
                   registry: ConverterRegistry) -> AccessResolution | None:
    """Resolve the access strategy of a field.

    Args:
        field: Field to resolve
        options: Options of the enclosing table
        registry: Converters available for lookup by type

    Returns
        The resolution, or None for a parameterized type without a custom
        converter (those fields are mapped as relationships elsewhere)

    Raises
        ArrayColumnError: If the field has an array type
        ConverterMismatchError: If a custom converter does not produce the field's type
    """
    declared = field.type
    if declared.is_array:
        raise ArrayColumnError(f'Columns cannot be of array type: {field.name} is {declared}',
                               field_name=field.name, types=(str(declared),))

    base = resolve_field_access(field, options)

    column = field.get_annotation(Column)
    custom = column.type_converter if column else None
    if custom is not None:
        if custom.model_type != declared:
            raise ConverterMismatchError(
                f'The custom type converter {custom.class_name} declares model type '
                f'{custom.model_type}, which must match the type {declared} of column {field.name}',
                field_name=field.name, types=(str(custom.model_type), str(declared)))
        logger.debug(f'{field.name}: custom converter {custom.class_name}')
        access = TypeConverterAccess(base, declared, custom, custom.custom_field_name())
        return AccessResolution(access, has_custom_converter=True, has_type_converter=True)

    match declared.kind:
        case TypeKind.PARAMETERIZED:
            logger.debug(f'{field.name}: parameterized type {declared}, no column access')
            return None
        case TypeKind.ENUM:
            resolution = AccessResolution(EnumAccess(base, declared))
        case TypeKind.CLASS:
            resolution = _resolve_class_access(field, base, registry)
        case _:
            raise InternalConsistencyError(
                f'No access strategy for {field.name} of type {declared}')

    logger.debug(f'{field.name}: {type(resolution.access).__name__}')
    return resolution


def _resolve_class_access(field: FieldDescriptor, base: FieldAccess,
                          registry: ConverterRegistry) -> AccessResolution:
    declared = field.type
    if declared.is_blob:
        return AccessResolution(BlobAccess(base))
    if declared.is_boolean:
        if declared.nullable:
            return AccessResolution(BoxedBooleanAccess(base))
        return AccessResolution(PrimitiveBooleanAccess(base))

    converter = registry.lookup(declared)
    if converter is not None:
        access = TypeConverterAccess(base, declared, converter, converter.global_field_name())
        return AccessResolution(access, has_type_converter=True)
    if not contains_type(declared):
        logger.debug(f'{field.name}: no converter registered for {declared}, deferring to runtime')
        return AccessResolution(TypeConverterAccess(base, declared), has_type_converter=True)

    return AccessResolution(base)
