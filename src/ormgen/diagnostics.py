"""
Diagnostic sinks for configuration errors.
"""
import logging
from dataclasses import dataclass
from typing import Protocol

from ormgen.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class DiagnosticSink(Protocol):
    """Receives configuration errors found while compiling columns."""

    def report_error(self, message: str, *elements: str) -> None:
        ...


@dataclass(frozen=True)
class Diagnostic:
    message: str
    elements: tuple[str, ...] = ()


class LoggingDiagnostics:
    """Sink that logs every error and keeps it for inspection.
    """

    def __init__(self) -> None:
        self.errors: list[Diagnostic] = []

    def report_error(self, message: str, *elements: str) -> None:
        self.errors.append(Diagnostic(message, tuple(elements)))
        if elements:
            logger.error(f"{message} [{', '.join(elements)}]")
        else:
            logger.error(message)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def messages(self) -> list[str]:
        return [d.message for d in self.errors]


def report(sink: DiagnosticSink, exc: ConfigurationError) -> None:
    """Forward a configuration error to a sink with its field and types."""
    elements = tuple(e for e in (exc.field_name, *exc.types) if e)
    sink.report_error(str(exc), *elements)
