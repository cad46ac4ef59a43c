"""Input manager for CORSIKA record dumps."""

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, List, Tuple, Union

import numpy as np

from .data_models import PhotonBunch, RunHeaderBuffer, ShowerEvent
from ..utils.logging import get_logger
from ..utils.path_utils import validate_path, PathValidationError
from ..utils.validation import InvalidRecordError


logger = get_logger()

EVENT_FIELDS = ('energy', 'azimuth', 'altitude', 'xcore', 'ycore', 'firstint', 'shower_id')
PHOTON_FIELDS = ('event', 'telescope', 'x', 'y', 'cx', 'cy', 'zem', 'ctime', 'wavelength')


@dataclass
class CorsikaRecords:
    """Decoded records of one CORSIKA run.

    Attributes:
        run_header: CORSIKA header block
        events: Structured array of shower parameters [N_events]
        photons: Structured array of photon bunches [N_bunches], with
            'event' indexing into ``events`` and 'telescope' counted from 0
    """
    run_header: RunHeaderBuffer
    events: np.ndarray
    photons: np.ndarray

    @property
    def num_events(self) -> int:
        return len(self.events)

    @property
    def num_photons(self) -> int:
        return len(self.photons)

    def iter_events(self) -> Iterator[Tuple[ShowerEvent, List[Tuple[int, PhotonBunch]]]]:
        """Yield each event with its (telescope, bunch) list in input order."""
        if len(self.photons):
            order = np.argsort(self.photons['event'], kind='stable')
            sorted_index = self.photons['event'][order]
        else:
            order = np.zeros(0, dtype=np.int64)
            sorted_index = order

        bounds = np.searchsorted(sorted_index, np.arange(len(self.events) + 1), side='left')

        for i, record in enumerate(self.events):
            rows = self.photons[order[bounds[i]:bounds[i + 1]]]
            bunches = [
                (int(row['telescope']), PhotonBunch.from_record(row))
                for row in rows
            ]
            yield ShowerEvent.from_record(record), bunches


class InputManager:
    """Loads CORSIKA record dumps written by an upstream reader.

    The dump is an ``.npz`` archive with arrays ``run_header``, ``events``
    and ``photons``; see ``CorsikaRecords`` for the layout.
    """

    def load_records(self, source: Union[str, Path]) -> CorsikaRecords:
        """Load records from an ``.npz`` file.

        Args:
            source: Path to the record dump

        Returns:
            CorsikaRecords instance

        Raises:
            InvalidRecordError: If the file or its arrays are malformed
        """
        try:
            path = validate_path(source, must_exist=True)
        except PathValidationError as e:
            raise InvalidRecordError(str(e)) from e

        logger.info(f"Loading CORSIKA records from {path}")

        with np.load(path, allow_pickle=False) as data:
            missing = [name for name in ('run_header', 'events', 'photons') if name not in data]
            if missing:
                raise InvalidRecordError(f"Record file {path} lacks arrays: {missing}")
            records = self.create_records(data['run_header'], data['events'], data['photons'])

        logger.info(
            f"Loaded {records.num_events} events and {records.num_photons} photon bunches"
        )
        return records

    def create_records(
        self,
        run_header: np.ndarray,
        events: np.ndarray,
        photons: np.ndarray
    ) -> CorsikaRecords:
        """Validate array layouts and bundle them.

        Args:
            run_header: CORSIKA header block
            events: Structured array with EVENT_FIELDS
            photons: Structured array with PHOTON_FIELDS

        Returns:
            CorsikaRecords instance
        """
        self._check_fields('events', events, EVENT_FIELDS)
        self._check_fields('photons', photons, PHOTON_FIELDS)

        if len(photons):
            event_index = photons['event']
            if event_index.min() < 0 or event_index.max() >= len(events):
                raise InvalidRecordError("Photon bunches refer to events that do not exist")

        return CorsikaRecords(
            run_header=RunHeaderBuffer(run_header),
            events=events,
            photons=photons
        )

    @staticmethod
    def _check_fields(name: str, array: np.ndarray, fields: Tuple[str, ...]) -> None:
        names = array.dtype.names or ()
        missing = [f for f in fields if f not in names]
        if missing:
            raise InvalidRecordError(f"'{name}' array lacks fields: {missing}")
