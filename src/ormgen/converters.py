"""
Type converter descriptors and the converter registry.

A converter maps a model type to an on-disk type and back. The registry
only identifies converters by model type; the converter classes themselves
are built and registered by the runtime.
"""
import logging
import re
from dataclasses import dataclass

from ormgen.types import TypeDescriptor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConverterDescriptor:
    """A converter class and the two types it maps between.

    Attributes
        class_name: Name of the converter class in generated code
        model_type: Type the converter produces for the model (always boxed)
        db_type: Type stored in the database
    """
    class_name: str
    model_type: TypeDescriptor
    db_type: TypeDescriptor

    @property
    def snake_name(self) -> str:
        simple = self.class_name.rsplit('.', 1)[-1]
        return re.sub(r'(?<!^)(?=[A-Z])', '_', simple).lower()

    def global_field_name(self) -> str:
        """Module level field holding a registry converter instance."""
        return f'global_{self.snake_name}'

    def custom_field_name(self) -> str:
        """Module level field holding a custom converter instance."""
        return f'type_converter_{self.snake_name}'


def _builtin_converters() -> list[ConverterDescriptor]:
    return [
        ConverterDescriptor('DateTimeConverter',
                            TypeDescriptor.of('datetime.datetime'),
                            TypeDescriptor.of('int')),
        ConverterDescriptor('DateConverter',
                            TypeDescriptor.of('datetime.date'),
                            TypeDescriptor.of('int')),
        ConverterDescriptor('DecimalConverter',
                            TypeDescriptor.of('decimal.Decimal'),
                            TypeDescriptor.of('str')),
        ConverterDescriptor('UUIDConverter',
                            TypeDescriptor.of('uuid.UUID'),
                            TypeDescriptor.of('str')),
    ]


class ConverterRegistry:
    """Registry of converters keyed by model type name.

    Registration of a second converter for the same model type replaces
    the first one. The registry is passed explicitly to the resolver.
    """

    def __init__(self, converters: list[ConverterDescriptor] | None = None) -> None:
        self._converters: dict[str, ConverterDescriptor] = {}
        for converter in converters or []:
            self.register(converter)

    def register(self, converter: ConverterDescriptor) -> None:
        """Register a converter for its model type.
        """
        name = converter.model_type.name
        if name in self._converters:
            logger.warning(f'Replacing converter for {name}: '
                           f'{self._converters[name].class_name} -> {converter.class_name}')
        self._converters[name] = converter

    def lookup(self, type_: TypeDescriptor) -> ConverterDescriptor | None:
        """Find the converter registered for a declared type.

        Primitive and boxed forms of a type share one converter.
        """
        return self._converters.get(type_.name)

    def __contains__(self, type_: TypeDescriptor) -> bool:
        return type_.name in self._converters

    def __len__(self) -> int:
        return len(self._converters)


def default_registry() -> ConverterRegistry:
    """Create a registry holding the built-in converters."""
    return ConverterRegistry(_builtin_converters())
