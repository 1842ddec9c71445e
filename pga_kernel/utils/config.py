"""
Configuration management for pga_kernel.

Provides the configuration dataclass for the scenario harness.
"""

import logging
from dataclasses import dataclass, field, asdict
from typing import Dict, Any

from ..core.constants import EXIT_FAILURE


logger = logging.getLogger(__name__)


@dataclass
class HarnessConfig:
    """
    Configuration for the scenario harness.

    Attributes:
        exit_code_on_failure: Process exit status when at least one
            scenario fails (0 reproduces the always-succeed behaviour)
        stop_on_first_failure: Stop running scenarios after the first failure
        log_level: Logging level name for the harness loggers
        extra: Unrecognised keys from a loaded config
    """

    exit_code_on_failure: int = EXIT_FAILURE
    stop_on_first_failure: bool = False
    log_level: str = 'WARNING'

    # Additional fields
    extra: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'HarnessConfig':
        """Create config from dictionary."""
        # Extract known fields
        known_fields = {f.name for f in cls.__dataclass_fields__.values()}
        known_kwargs = {k: v for k, v in config_dict.items() if k in known_fields}
        extra_kwargs = {k: v for k, v in config_dict.items() if k not in known_fields}

        if extra_kwargs:
            logger.warning(f"Unknown config keys: {sorted(extra_kwargs)}")

        known_kwargs.pop('extra', None)
        config = cls(**known_kwargs)
        config.extra = {**config_dict.get('extra', {}), **extra_kwargs}
        return config

    def update(self, **kwargs) -> 'HarnessConfig':
        """Return a new config with updated values."""
        config_dict = self.to_dict()
        config_dict.update(kwargs)
        return HarnessConfig.from_dict(config_dict)

