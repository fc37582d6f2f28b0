"""
Runtime configuration for the mt19937_64 command line.

The algorithm itself has no tunables (see constants.py). What can be
configured is how the CLI logs and how many values it draws by default:

    MT19937_64_LOG_LEVEL       logging level name (default: WARNING)
    MT19937_64_DEFAULT_COUNT   default --count (default: 10)
"""

import os
import logging
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(message)s'
LOG_DATEFMT = '%Y-%m-%d %H:%M:%S'

ENV_LOG_LEVEL = "MT19937_64_LOG_LEVEL"
ENV_DEFAULT_COUNT = "MT19937_64_DEFAULT_COUNT"

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_COUNT = 10

logger = logging.getLogger(__name__)


@dataclass
class Settings:
    log_level: str = DEFAULT_LOG_LEVEL
    default_count: int = DEFAULT_COUNT


def load_settings(env: Optional[Mapping[str, str]] = None) -> Settings:
    """Build Settings from the environment, falling back to defaults on bad values."""
    if env is None:
        env = os.environ
    settings = Settings()

    level = env.get(ENV_LOG_LEVEL)
    if level:
        level = level.strip().upper()
        if isinstance(logging.getLevelName(level), int):
            settings.log_level = level
        else:
            logger.warning(f"Ignoring unknown {ENV_LOG_LEVEL}={level!r}")

    count = env.get(ENV_DEFAULT_COUNT)
    if count:
        try:
            settings.default_count = int(count)
        except ValueError:
            logger.warning(f"Ignoring non-integer {ENV_DEFAULT_COUNT}={count!r}")
        else:
            if settings.default_count < 0:
                logger.warning(f"Ignoring negative {ENV_DEFAULT_COUNT}={count!r}")
                settings.default_count = DEFAULT_COUNT

    return settings


def configure_logging(level: str = DEFAULT_LOG_LEVEL) -> None:
    """Install the root handler used by the command line."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
    )
