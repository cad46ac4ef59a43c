"""Physics data package containing the bundled atmosphere parameterisations.

The atmosphere database maps CORSIKA atmosphere ids to five-layer
Linsley parameters (a, b, c and layer boundaries).
"""

from pathlib import Path


def get_physics_data_dir() -> Path:
    """Get the physics data directory path.
    
    Returns:
        Path to the physics_data directory
    """
    return Path(__file__).parent


def get_atmosphere_database_path(database_name: str = 'atmospheres.json') -> Path:
    """Get path to an atmosphere database file.
    
    Args:
        database_name: Name of the database file (default: 'atmospheres.json')
        
    Returns:
        Path to the atmosphere database file
        
    Raises:
        FileNotFoundError: If the database file doesn't exist
    """
    db_path = get_physics_data_dir() / database_name
    if not db_path.exists():
        raise FileNotFoundError(f"Atmosphere database not found: {db_path}")
    return db_path


try:
    DEFAULT_ATMOSPHERE_DATABASE = str(get_atmosphere_database_path())
except FileNotFoundError:
    DEFAULT_ATMOSPHERE_DATABASE = None


__all__ = [
    'get_physics_data_dir',
    'get_atmosphere_database_path',
    'DEFAULT_ATMOSPHERE_DATABASE',
]
