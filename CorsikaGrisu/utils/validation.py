"""Exceptions and validation helpers for the converter."""

from pathlib import Path

from .config import ConverterConfig
from .logging import get_logger
from .path_utils import is_stdout, validate_output_path, PathValidationError


logger = get_logger()


class ConversionError(Exception):
    """Base exception for conversion errors."""
    pass


class OutputFileError(ConversionError):
    """Raised when the output file cannot be opened for writing.
    
    This is fatal for the whole run; there is no fallback destination.
    """
    
    def __init__(self, path: str, reason: str = ''):
        self.path = str(path)
        message = f"error opening outputfile: {self.path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidRecordError(ConversionError):
    """Raised when an input record does not have the expected layout."""
    pass


class AtmosphereNotFoundError(ConversionError):
    """Raised when no atmosphere model exists for the requested id."""
    pass


class AtmosphereNotInitializedError(ConversionError):
    """Raised when slant depth is requested without an atmosphere model."""
    pass


class InvalidConfigurationError(ConversionError):
    """Raised when configuration parameters are invalid."""
    pass


def validate_config(config: ConverterConfig) -> None:
    """Validate converter configuration against the file system.
    
    Value checks happen in ``ConverterConfig.__post_init__``; this adds
    runtime checks on the files the configuration refers to.
    
    Args:
        config: Converter configuration
        
    Raises:
        InvalidConfigurationError: If configuration is invalid
    """
    if not is_stdout(config.output_file):
        try:
            validate_output_path(config.output_file)
        except PathValidationError as e:
            raise InvalidConfigurationError(str(e)) from e
    
    if config.atmosphere_dir:
        atm_dir = Path(config.atmosphere_dir)
        if not atm_dir.is_dir():
            raise InvalidConfigurationError(
                f"Atmosphere directory not found: {config.atmosphere_dir}"
            )
    
    if config.run_header_info_path:
        if not Path(config.run_header_info_path).exists():
            logger.warning(
                f"Run header info file not found: {config.run_header_info_path}; "
                "header block will be left empty"
            )
    
    logger.debug("Configuration validation passed")
