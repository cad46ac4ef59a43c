"""Configuration management for CORSIKA to GrIsu conversion."""

from dataclasses import dataclass, asdict
from typing import Optional
import logging
import yaml
from pathlib import Path


@dataclass
class ConverterConfig:
    """Configuration for writing a GrIsu photon list.
    
    Attributes:
        output_file: Output file path, or 'stdout' for standard output
        atmosphere_id: Atmosphere model id (negative disables the model)
        version_label: Text written into the header banner
        quantum_efficiency: Value written on the 'R' line
        observation_height: Observation height in m, written on the 'H' line
        print_more_info: Write 'C' lines with first interaction depth
        atmosphere_dir: Directory holding atmprof<id>.dat tables
        run_header_info_path: CORSIKA input card copied into the header
        log_file: Optional log file path
        log_level: Logging level name
    """
    output_file: str = 'stdout'
    atmosphere_id: int = -1
    version_label: str = 'CorsikaGrisu'
    quantum_efficiency: float = 1.0
    observation_height: float = 100.0
    print_more_info: bool = False
    atmosphere_dir: Optional[str] = None
    run_header_info_path: Optional[str] = None
    log_file: Optional[str] = None
    log_level: str = 'INFO'
    
    def __post_init__(self):
        """Validate configuration after initialization."""
        self._validate()
    
    def _validate(self) -> None:
        """Validate configuration parameters."""
        if not self.output_file or not isinstance(self.output_file, str):
            raise ValueError("output_file must be a non-empty string")
        
        if not isinstance(self.version_label, str) or not self.version_label:
            raise ValueError("version_label must be a non-empty string")
        
        if self.quantum_efficiency <= 0:
            raise ValueError(
                f"quantum_efficiency must be positive, got {self.quantum_efficiency}"
            )
        
        if self.print_more_info and self.atmosphere_id < 0:
            raise ValueError(
                "print_more_info requires an atmosphere model "
                f"(atmosphere_id >= 0), got {self.atmosphere_id}"
            )
        
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log_level: {self.log_level}")
    
    @property
    def logging_level(self) -> int:
        """Numeric logging level."""
        return logging.getLevelName(self.log_level.upper())
    
    @classmethod
    def from_yaml(cls, yaml_path: str) -> 'ConverterConfig':
        """Load configuration from YAML file.
        
        Args:
            yaml_path: Path to YAML configuration file
            
        Returns:
            ConverterConfig instance
        """
        with open(yaml_path, 'r') as f:
            config_dict = yaml.safe_load(f) or {}
        
        return cls(**config_dict)
    
    def to_yaml(self, yaml_path: str) -> None:
        """Save configuration to YAML file.
        
        Args:
            yaml_path: Path to save YAML configuration
        """
        Path(yaml_path).parent.mkdir(parents=True, exist_ok=True)
        with open(yaml_path, 'w') as f:
            yaml.dump(asdict(self), f, default_flow_style=False)
