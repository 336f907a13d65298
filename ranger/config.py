from typing import Any, Dict, Optional
from dataclasses import dataclass, fields
from pathlib import Path
import logging
import os

import yaml

from ranger.domain import IntDomain, get_domain

##################################################################################################
# Configuration
##################################################################################################

CONFIG_FILE = 'ranger.yml'
CONFIG_ENV_VAR = 'RANGER_CONFIG'

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


@dataclass
class RangerConfig:
    domain: str = 'int'
    log_level: str = 'INFO'
    verify_rounds: int = 100
    seed: int | None = None

    def __post_init__(self):
        if not isinstance(self.domain, str):
            raise ValueError(f"domain must be a string, got {type(self.domain).__name__}")
        get_domain(self.domain)

        if not isinstance(self.log_level, str) or self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {self.log_level}. Expected one of: {', '.join(LOG_LEVELS)}")
        self.log_level = self.log_level.upper()

        if not isinstance(self.verify_rounds, int) or isinstance(self.verify_rounds, bool) or self.verify_rounds < 0:
            raise ValueError(f"verify_rounds must be a non-negative integer, got {self.verify_rounds!r}")

        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise ValueError(f"seed must be an integer or null, got {self.seed!r}")

    @property
    def int_domain(self) -> IntDomain:
        return get_domain(self.domain)

    @property
    def logging_level(self) -> int:
        return getattr(logging, self.log_level)


def config_path(path: Path | None = None) -> Path:
    if path is not None:
        return path
    from_env = os.environ.get(CONFIG_ENV_VAR)
    if from_env:
        return Path(from_env)
    return Path(CONFIG_FILE)


def load_config(path: Optional[Path] = None) -> RangerConfig:
    path = config_path(path)
    if not path.exists():
        return RangerConfig()

    with open(path, 'rt', encoding='utf-8') as f:
        raw = yaml.safe_load(f)

    if raw is None:
        return RangerConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Expected a mapping at the top of {path}, got {type(raw).__name__}")

    known = {f.name for f in fields(RangerConfig)}
    unknown = [k for k in raw if k not in known]
    if unknown:
        raise ValueError(f"Unknown keys in {path}: {', '.join(str(k) for k in unknown)}")

    values: Dict[str, Any] = dict(raw)
    return RangerConfig(**values)
