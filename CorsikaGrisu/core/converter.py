"""Conversion of CORSIKA records into a GrIsu photon list."""

import time
from pathlib import Path
from typing import Dict, Optional, Union

from .data_models import InputCardHeader, RunHeaderInfo
from .grisu_writer import GrisuWriter
from .input_manager import CorsikaRecords, InputManager
from .output_sink import OutputSink
from ..utils.config import ConverterConfig
from ..utils.logging import setup_logger
from ..utils.validation import validate_config


class GrisuConverter:
    """Orchestrates loading records and writing the GrIsu photon list.

    Attributes:
        config: Converter configuration
        input_manager: Record loader
        logger: Logger instance
    """

    def __init__(self, config: ConverterConfig):
        """Initialize GrisuConverter.

        Args:
            config: Converter configuration
        """
        validate_config(config)
        self.config = config

        self.logger = setup_logger(
            level=config.logging_level,
            log_file=config.log_file,
            console_level=config.logging_level
        )
        self.logger.info(
            f"GrisuConverter initialized: output={config.output_file}, "
            f"atmosphere={config.atmosphere_id}, more_info={config.print_more_info}"
        )

        self.input_manager = InputManager()

    def _load_header_info(self) -> Optional[RunHeaderInfo]:
        path = self.config.run_header_info_path
        if not path or not Path(path).exists():
            return None
        return InputCardHeader.from_file(path)

    def create_writer(self, sink: Optional[OutputSink] = None) -> GrisuWriter:
        """Create a writer for the configured destination.

        Raises:
            OutputFileError: If the output file cannot be opened
        """
        return GrisuWriter(
            self.config.version_label,
            output_file=self.config.output_file,
            atmosphere_id=self.config.atmosphere_id,
            observation_height=self.config.observation_height,
            quantum_efficiency=self.config.quantum_efficiency,
            atmosphere_dir=self.config.atmosphere_dir,
            sink=sink
        )

    def run(
        self,
        records: Union[str, Path, CorsikaRecords],
        sink: Optional[OutputSink] = None
    ) -> Dict:
        """Write header, events and photon bunches.

        Args:
            records: Record dump path or already loaded records
            sink: Optional destination replacing ``config.output_file``

        Returns:
            Dictionary with counts and elapsed time
        """
        start_time = time.time()

        if not isinstance(records, CorsikaRecords):
            records = self.input_manager.load_records(records)

        with self.create_writer(sink) as writer:
            writer.write_run_header(records.run_header, self._load_header_info())

            for event, bunches in records.iter_events():
                writer.write_event(event, self.config.print_more_info)
                for telescope, bunch in bunches:
                    writer.write_photon(bunch, telescope)

            summary = {
                'events': writer.events_written,
                'photons': writer.photons_written,
                'output': writer.sink.name,
            }

        summary['elapsed_seconds'] = time.time() - start_time
        self.logger.info(
            f"Wrote {summary['events']} events and {summary['photons']} photon bunches "
            f"to {summary['output']} in {summary['elapsed_seconds']:.2f} s"
        )
        return summary
