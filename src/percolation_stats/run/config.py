"""
Experiment run configuration.

The ExperimentConfig loads a YAML run definition holding the execution
settings of a threshold experiment. Grid size and trial count stay on the
command line; the config supplies seed, worker count and verbosity.

Example YAML:
    seed: 42
    workers: 4
    verbose: true
"""

from pathlib import Path
from typing import Any, Dict, Optional

import yaml


KNOWN_KEYS = ('seed', 'workers', 'verbose')


class ExperimentConfig:
    """
    Loads and validates an experiment configuration.

    Example:
        config = ExperimentConfig.from_yaml('config/experiment.yaml')
        print(config.seed, config.workers)
    """

    def __init__(self, data: Optional[Dict[str, Any]] = None):
        self._data = dict(data or {})
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'ExperimentConfig':
        """Load experiment config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Experiment config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ValueError(f"Experiment config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate config keys and value types."""
        unknown = sorted(set(self._data) - set(KNOWN_KEYS))
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")

        seed = self._data.get('seed')
        if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
            raise ValueError(f"Invalid config value for 'seed': {seed!r}")

        workers = self._data.get('workers', 1)
        if not isinstance(workers, int) or isinstance(workers, bool) or workers < 1:
            raise ValueError(f"Invalid config value for 'workers': {workers!r}")

        if not isinstance(self._data.get('verbose', False), bool):
            raise ValueError(f"Invalid config value for 'verbose': {self._data['verbose']!r}")

    # --- Properties ---

    @property
    def seed(self) -> Optional[int]:
        return self._data.get('seed')

    @property
    def workers(self) -> int:
        return self._data.get('workers', 1)

    @property
    def verbose(self) -> bool:
        return self._data.get('verbose', False)

    def merged(self, **overrides) -> 'ExperimentConfig':
        """Return a new config with non-None overrides applied."""
        data = dict(self._data)
        data.update({k: v for k, v in overrides.items() if v is not None})
        return ExperimentConfig(data)
