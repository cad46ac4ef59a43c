"""Atmospheric profiles for converting heights to vertical thickness.

Two kinds of models are supported:

- five-layer Linsley parameterisations as used by CORSIKA (bundled
  database, selected by atmosphere id)
- tabulated profiles in the ``atmprof<id>.dat`` format used by the
  IACT/atmo package (height km, density g/cm^3, thickness g/cm^2, n-1)
"""

import json
import math
from pathlib import Path
from typing import Dict, Optional, Sequence, Union

import numpy as np

from ..physics_data import DEFAULT_ATMOSPHERE_DATABASE
from ..utils.logging import get_logger
from ..utils.validation import AtmosphereNotFoundError


logger = get_logger()

CM_PER_KM = 1.0e5


class AtmosphereModel:
    """Base class for atmosphere models.

    Attributes:
        atmosphere_id: CORSIKA atmosphere id
        observation_height: Observation height in m
    """

    def __init__(self, atmosphere_id: int, observation_height: float):
        self.atmosphere_id = atmosphere_id
        self.observation_height = observation_height

    def thickness(self, height: float) -> float:
        """Vertical atmospheric thickness in g/cm^2 above ``height`` (cm)."""
        raise NotImplementedError


class LinsleyAtmosphere(AtmosphereModel):
    """Five-layer atmosphere after Linsley.

    The four lower layers follow ``T(h) = a + b * exp(-h / c)``, the top
    layer decreases linearly, ``T(h) = a - b * h / c``, until it reaches 0.

    Attributes:
        a: Layer offsets in g/cm^2
        b: Layer scales in g/cm^2
        c: Layer scale heights in cm
        boundaries: Lower layer boundaries in cm
        top: Height in cm at which the thickness reaches 0
    """

    def __init__(
        self,
        atmosphere_id: int,
        observation_height: float,
        a: Sequence[float],
        b: Sequence[float],
        c: Sequence[float],
        boundaries: Sequence[float],
        name: str = ''
    ):
        super().__init__(atmosphere_id, observation_height)
        self.a = np.asarray(a, dtype=np.float64)
        self.b = np.asarray(b, dtype=np.float64)
        self.c = np.asarray(c, dtype=np.float64)
        self.boundaries = np.asarray(boundaries, dtype=np.float64)
        self.name = name

        if not (len(self.a) == len(self.b) == len(self.c) == len(self.boundaries) == 5):
            raise ValueError("Linsley atmosphere needs exactly five layers")

        self.top = self.a[4] * self.c[4] / self.b[4]

    def thickness(self, height: float) -> float:
        if height >= self.top:
            return 0.0

        layer = int(np.searchsorted(self.boundaries, height, side='right')) - 1
        layer = max(layer, 0)

        if layer < 4:
            return float(self.a[layer] + self.b[layer] * math.exp(-height / self.c[layer]))
        return float(self.a[4] - self.b[4] * height / self.c[4])


class TabulatedAtmosphere(AtmosphereModel):
    """Atmosphere interpolated from a tabulated profile.

    Thickness is interpolated linearly in log(thickness) between table
    heights; it is clamped to the table below the lowest entry. Above the
    last entry with positive thickness it falls linearly to 0 at the first
    entry with vanishing thickness (``top``).

    Attributes:
        heights: Table heights in cm, increasing
        thicknesses: Vertical thickness in g/cm^2 at each height
    """

    def __init__(
        self,
        atmosphere_id: int,
        observation_height: float,
        heights: Sequence[float],
        thicknesses: Sequence[float]
    ):
        super().__init__(atmosphere_id, observation_height)
        heights = np.asarray(heights, dtype=np.float64)
        thicknesses = np.asarray(thicknesses, dtype=np.float64)

        if heights.ndim != 1 or heights.shape != thicknesses.shape or len(heights) < 2:
            raise ValueError("Atmosphere table needs matching 1D height and thickness columns")

        order = np.argsort(heights)
        self.heights = heights[order]
        self.thicknesses = thicknesses[order]

        positive = self.thicknesses > 0
        if not positive.any():
            raise ValueError("Atmosphere table has no positive thickness")

        self._log_heights = self.heights[positive]
        self._log_thicknesses = np.log(self.thicknesses[positive])
        self._last_thickness = self.thicknesses[positive][-1]
        self.top = self.heights[-1] if positive.all() else self.heights[~positive][0]

    @classmethod
    def from_atmprof(
        cls,
        path: Union[str, Path],
        atmosphere_id: int,
        observation_height: float
    ) -> 'TabulatedAtmosphere':
        """Load an ``atmprof<id>.dat`` table.

        Args:
            path: Table file
            atmosphere_id: Atmosphere id the table belongs to
            observation_height: Observation height in m

        Returns:
            TabulatedAtmosphere instance
        """
        table = np.loadtxt(path, comments='#', ndmin=2)
        if table.shape[1] < 3:
            raise ValueError(f"Atmosphere table needs at least 3 columns: {path}")

        return cls(
            atmosphere_id,
            observation_height,
            heights=table[:, 0] * CM_PER_KM,
            thicknesses=table[:, 2]
        )

    def thickness(self, height: float) -> float:
        if height >= self.top:
            return 0.0
        last_height = self._log_heights[-1]
        if height > last_height:
            return float(self._last_thickness * (self.top - height) / (self.top - last_height))
        return float(np.exp(np.interp(height, self._log_heights, self._log_thicknesses)))


def load_atmosphere_database(database_path: Optional[str] = None) -> Dict[int, dict]:
    """Load the Linsley parameter database.

    Args:
        database_path: JSON database, bundled one by default

    Returns:
        Dictionary mapping atmosphere id to its parameters
    """
    database_path = database_path or DEFAULT_ATMOSPHERE_DATABASE
    if database_path is None:
        return {}

    with open(database_path, 'r') as f:
        data = json.load(f)

    return {int(atm_id): params for atm_id, params in data.items()}


def init_atmosphere(
    atmosphere_id: int,
    observation_height: float,
    atmosphere_dir: Optional[Union[str, Path]] = None,
    database_path: Optional[str] = None
) -> AtmosphereModel:
    """Initialise the atmosphere model for an atmosphere id.

    A tabulated ``atmprof<id>.dat`` in ``atmosphere_dir`` takes precedence
    over the bundled Linsley parameterisations.

    Args:
        atmosphere_id: CORSIKA atmosphere id (>= 0)
        observation_height: Observation height in m
        atmosphere_dir: Optional directory with atmprof tables
        database_path: Optional Linsley parameter database

    Returns:
        Atmosphere model

    Raises:
        AtmosphereNotFoundError: If no model exists for the id
    """
    if atmosphere_dir is not None:
        table_path = Path(atmosphere_dir) / f'atmprof{atmosphere_id}.dat'
        if table_path.exists():
            logger.info(f"Using tabulated atmosphere {table_path}")
            return TabulatedAtmosphere.from_atmprof(
                table_path, atmosphere_id, observation_height
            )

    database = load_atmosphere_database(database_path)
    if atmosphere_id not in database:
        raise AtmosphereNotFoundError(
            f"No atmosphere model for id {atmosphere_id} "
            f"(bundled ids: {sorted(database)})"
        )

    params = database[atmosphere_id]
    logger.info(f"Using atmosphere {atmosphere_id}: {params.get('name', '')}")
    return LinsleyAtmosphere(
        atmosphere_id,
        observation_height,
        a=params['a'],
        b=params['b'],
        c=params['c'],
        boundaries=params['boundaries_cm'],
        name=params.get('name', '')
    )
