"""Services module - Analysis engines and configuration"""

from .config_manager import ConfigManager
from .cron_parser import describe_cron, parse_cron, parse_field
from .diff_generator import DiffGenerator
from .errors import CompileError, EngineError, FormatError, ParseError
from .regex_engine import RegexEngine, to_highlight_segments
from .token_decoder import decode_token

__all__ = [
    "ConfigManager",
    "DiffGenerator",
    "RegexEngine",
    "to_highlight_segments",
    "parse_field",
    "parse_cron",
    "describe_cron",
    "decode_token",
    "EngineError",
    "CompileError",
    "FormatError",
    "ParseError",
]
