"""Helpers shared by INTERACTOR CLI commands."""

from .log_level_parser import parse_log_level
from .messages import failure, success, warn
from .params import build_params

__all__ = ["build_params", "failure", "parse_log_level", "success", "warn"]
