"""Runtime value model for a Lox-family tree-walking interpreter."""

from loguru import logger

from loxrt.core.errors import ProgramError, ValueErrorKind, ValueTypeError
from loxrt.eval.value import Value, render
from loxrt.utils.location import Location

# Silent until the host calls logging_utils.configure_logging.
logger.disable("loxrt")

__all__ = [
    "Location",
    "ProgramError",
    "Value",
    "ValueErrorKind",
    "ValueTypeError",
    "render",
]
