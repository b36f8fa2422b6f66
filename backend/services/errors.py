"""
Engine errors - Raised by the analysis engines, mapped to HTTP 400 by routers
"""

from __future__ import annotations


class EngineError(ValueError):
    """Base class for malformed-input errors raised by the engines"""

    kind = "engine_error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class CompileError(EngineError):
    """Regex pattern (or flag set) could not be compiled"""

    kind = "compile_error"


class FormatError(EngineError):
    """Token is not a well-formed three-segment compact token"""

    kind = "format_error"


class ParseError(EngineError):
    """Cron expression or field is malformed"""

    kind = "parse_error"

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
