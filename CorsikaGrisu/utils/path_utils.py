"""Path validation utilities for output and auxiliary files."""

from pathlib import Path
from typing import Union


STDOUT_SENTINEL = 'stdout'


class PathValidationError(Exception):
    """Raised when path validation fails."""
    pass


def is_stdout(path: Union[str, Path]) -> bool:
    """Return True if ``path`` selects standard output instead of a file."""
    return str(path) == STDOUT_SENTINEL


def validate_path(path: Union[str, Path], must_exist: bool = False) -> Path:
    """Validate and resolve a file path.
    
    Args:
        path: Path to validate
        must_exist: If True, path must exist
        
    Returns:
        Validated Path object
        
    Raises:
        PathValidationError: If path is invalid
    """
    try:
        path_obj = Path(path).expanduser().resolve()
    except (ValueError, OSError) as e:
        raise PathValidationError(f"Invalid path: {path}") from e
    
    if must_exist and not path_obj.exists():
        raise PathValidationError(f"Path does not exist: {path}")
    
    return path_obj


def validate_output_path(path: Union[str, Path]) -> Path:
    """Validate an output path.
    
    Args:
        path: Output path to validate
        
    Returns:
        Validated Path object
        
    Raises:
        PathValidationError: If path is invalid or names a directory
    """
    path_obj = validate_path(path, must_exist=False)
    
    if path_obj.is_dir():
        raise PathValidationError(f"Output path is a directory: {path}")
    
    return path_obj
