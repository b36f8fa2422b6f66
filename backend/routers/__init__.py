"""Routers module - FastAPI route handlers"""

from . import cron, diff, generators, regex, tokens, workspace

__all__ = ["cron", "diff", "generators", "regex", "tokens", "workspace"]
