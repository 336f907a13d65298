from pathlib import Path

from ranger.config import load_config, config_path
from ranger.messages import warning, success


def check_config(path: Path | None = None) -> None:
    config = load_config(path)
    source = config_path(path)
    if not source.exists():
        warning(f"No config file at {source}, using defaults")
    success(
        "Config is valid",
        f"domain:        {config.domain}",
        f"log_level:     {config.log_level}",
        f"verify_rounds: {config.verify_rounds}",
        f"seed:          {config.seed}")
