"""
Simulation configuration.

SimulationConfig loads a YAML run definition:

    simulation:
      grid_size: 200
      trials: 100
      seed: 42
      workers: 4
    output:
      samples: results/samples.npz
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional


class SimulationConfig:
    """
    Loads and validates a simulation configuration YAML.

    Example:
        config = SimulationConfig.from_yaml('config/threshold.yaml')
        print(config.grid_size, config.trials)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'SimulationConfig':
        """Load simulation config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Simulation config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        return cls(data or {})

    def _validate(self):
        """Validate required config sections and convert simulation values to int."""
        simulation = self._data.get('simulation')
        if not isinstance(simulation, dict):
            raise ValueError("Missing required config section: 'simulation'")
        for key in ('grid_size', 'trials'):
            if key not in simulation:
                raise ValueError(f"Missing required simulation key: '{key}'")

        self._simulation = {
            'grid_size': self._to_int('grid_size', simulation['grid_size']),
            'trials': self._to_int('trials', simulation['trials']),
            'workers': self._to_int('workers', simulation.get('workers', 1)),
            'seed': None,
        }
        if simulation.get('seed') is not None:
            seed = self._to_int('seed', simulation['seed'])
            if seed < 0:
                raise ValueError(f"Simulation key 'seed' must be >= 0, got {seed}")
            self._simulation['seed'] = seed

    @staticmethod
    def _to_int(key: str, value: Any) -> int:
        if isinstance(value, bool):
            raise ValueError(f"Simulation key '{key}' must be an integer, got {value!r}")
        try:
            return int(value)
        except (TypeError, ValueError):
            raise ValueError(f"Simulation key '{key}' must be an integer, got {value!r}")

    # --- Simulation ---

    @property
    def grid_size(self) -> int:
        return self._simulation['grid_size']

    @property
    def trials(self) -> int:
        return self._simulation['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._simulation['seed']

    @property
    def workers(self) -> int:
        return self._simulation['workers']

    # --- Output ---

    @property
    def samples_path(self) -> Optional[Path]:
        """Where to save the trial sample (.npz), if configured."""
        samples = (self._data.get('output') or {}).get('samples')
        return Path(samples) if samples else None
