"""
Column compiler exception classes.
"""


class CodegenError(Exception):
    """Base class for all column compiler errors.
    """


class ConfigurationError(CodegenError):
    """A mapped field is declared in a way that cannot be compiled.

    Fatal to the entity being processed, not to the whole run.
    """

    def __init__(self, message: str, field_name: str | None = None,
                 types: tuple[str, ...] = ()) -> None:
        super().__init__(message)
        self.field_name = field_name
        self.types = types


class ArrayColumnError(ConfigurationError):
    """Column declared with an array type.
    """


class ConverterMismatchError(ConfigurationError):
    """Custom converter model type differs from the declared column type.
    """


class ContainerAccessError(ConfigurationError):
    """No container read accessor exists for a declared type.
    """


class UnmappedColumnTypeError(ConfigurationError):
    """No SQL column type exists for a declared type.
    """


class InternalConsistencyError(CodegenError):
    """The resolver reached a state its rules should make impossible.
    """


class InvalidColumnNameError(ConfigurationError):
    """Column name is a Python keyword or not an identifier.
    """
