"""Utility modules for configuration, logging, and validation."""

from .config import ConverterConfig
from .logging import setup_logger, get_logger
from .validation import (
    ConversionError,
    OutputFileError,
    InvalidRecordError,
    AtmosphereNotFoundError,
    AtmosphereNotInitializedError,
    InvalidConfigurationError,
    validate_config
)

__all__ = [
    'ConverterConfig',
    'setup_logger',
    'get_logger',
    'ConversionError',
    'OutputFileError',
    'InvalidRecordError',
    'AtmosphereNotFoundError',
    'AtmosphereNotInitializedError',
    'InvalidConfigurationError',
    'validate_config'
]
