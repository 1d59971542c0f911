"""
Errors
======

Result codes and the exception hierarchy raised by h3core.

Every exception carries the numeric ``code`` used by other implementations
of the index, so callers that need flat ``(value, code)`` results (for
example a C-callable wrapper) can use ``call_with_code``.
"""

import logging
from enum import IntEnum
from typing import Any, Callable, Dict, Optional, Tuple, Type

logger = logging.getLogger(__name__)


class ErrorCode(IntEnum):
    """Numeric result codes, numbered as in the H3 C library."""
    SUCCESS = 0
    FAILED = 1
    DOMAIN = 2
    LATLNG_DOMAIN = 3
    RES_DOMAIN = 4
    CELL_INVALID = 5
    DIR_EDGE_INVALID = 6
    UNDIR_EDGE_INVALID = 7
    VERTEX_INVALID = 8
    PENTAGON = 9
    DUPLICATE_INPUT = 10
    NOT_NEIGHBORS = 11
    RES_MISMATCH = 12
    MEMORY_ALLOC = 13
    MEMORY_BOUNDS = 14
    OPTION_INVALID = 15


class H3CoreError(ValueError):
    """Base class for all h3core failures."""
    code = ErrorCode.FAILED

    def __init__(self, message: str = "", code: Optional[ErrorCode] = None):
        if code is not None:
            self.code = ErrorCode(code)
        super().__init__(message or self.code.name)


class FailedError(H3CoreError):
    code = ErrorCode.FAILED


class CapacityError(FailedError):
    """A bounded buffer was too small for its input."""


class DomainError(H3CoreError):
    code = ErrorCode.DOMAIN


class LatLngDomainError(H3CoreError):
    code = ErrorCode.LATLNG_DOMAIN


class ResolutionDomainError(H3CoreError):
    code = ErrorCode.RES_DOMAIN


class CellInvalidError(H3CoreError):
    code = ErrorCode.CELL_INVALID


class DirectedEdgeInvalidError(H3CoreError):
    code = ErrorCode.DIR_EDGE_INVALID


class PentagonError(H3CoreError):
    code = ErrorCode.PENTAGON


class NotNeighborsError(H3CoreError):
    code = ErrorCode.NOT_NEIGHBORS


class ResolutionMismatchError(H3CoreError):
    code = ErrorCode.RES_MISMATCH


class OptionInvalidError(H3CoreError):
    code = ErrorCode.OPTION_INVALID


_EXCEPTIONS: Dict[ErrorCode, Type[H3CoreError]] = {
    ErrorCode.FAILED: FailedError,
    ErrorCode.DOMAIN: DomainError,
    ErrorCode.LATLNG_DOMAIN: LatLngDomainError,
    ErrorCode.RES_DOMAIN: ResolutionDomainError,
    ErrorCode.CELL_INVALID: CellInvalidError,
    ErrorCode.DIR_EDGE_INVALID: DirectedEdgeInvalidError,
    ErrorCode.PENTAGON: PentagonError,
    ErrorCode.NOT_NEIGHBORS: NotNeighborsError,
    ErrorCode.RES_MISMATCH: ResolutionMismatchError,
    ErrorCode.OPTION_INVALID: OptionInvalidError,
}


def error_for_code(code: int, message: str = "") -> H3CoreError:
    """
    Build the exception matching a numeric result code.

    Args:
        code: Non-zero result code
        message: Optional message

    Returns:
        An H3CoreError subclass instance with ``.code == code``

    Raises:
        ValueError: If ``code`` is SUCCESS or not a known code
    """
    code = ErrorCode(code)
    if code == ErrorCode.SUCCESS:
        raise ValueError("SUCCESS is not an error")
    cls = _EXCEPTIONS.get(code, H3CoreError)
    return cls(message, code=code)


def call_with_code(func: Callable[..., Any], *args, **kwargs) -> Tuple[Any, ErrorCode]:
    """
    Run ``func`` and report its outcome as a ``(value, code)`` pair.

    Returns ``(value, SUCCESS)`` on success and ``(None, code)`` when an
    H3CoreError is raised. Any other exception propagates.
    """
    try:
        return func(*args, **kwargs), ErrorCode.SUCCESS
    except H3CoreError as e:
        logger.debug(f"{getattr(func, '__name__', func)} failed with {e.code.name}: {e}")
        return None, e.code
