"""Core domain types and logic."""

from .config import Config, ConfigError, GitSettings, ScanSettings, load_config
from .errors import ErrorCode, FailureKind
from .result import Err, Ok, Result, is_err, is_ok

__all__ = [
    # config
    "Config",
    "ConfigError",
    "GitSettings",
    "ScanSettings",
    "load_config",
    # errors
    "ErrorCode",
    "FailureKind",
    # result
    "Err",
    "Ok",
    "Result",
    "is_err",
    "is_ok",
]
