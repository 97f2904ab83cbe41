import json
import logging
import os
from pathlib import Path

logger = logging.getLogger(__name__)

# http token
CHECKER_TOKEN = os.getenv(
    'CHECKER_TOKEN',
    'KoNoCheckerDa',
)
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")
LOG_LEVEL = os.getenv('CHECKER_LOG_LEVEL', 'WARNING').upper()
LOG_FILE = os.getenv('CHECKER_LOG_FILE')

_DEFAULT_CHECKER_CONFIG_PATH = Path(
    os.getenv('CHECKER_CONFIG', '.config/checker.json'))

# tolerance used when a front end is not given one explicitly
FALLBACK_EPS = 1e-6


def _load_checker_config(path: Path) -> dict:
    try:
        with path.open() as f:
            cfg = json.load(f)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError:
        return {}
    return cfg if isinstance(cfg, dict) else {}


def get_default_eps(config_path: str | Path | None = None) -> float:
    path = Path(config_path) if config_path else _DEFAULT_CHECKER_CONFIG_PATH
    cfg = _load_checker_config(path)
    sources = (
        ('CHECKER_EPS', os.getenv('CHECKER_EPS')),
        (f'DEFAULT_EPS in {path}', cfg.get('DEFAULT_EPS')),
    )
    for name, value in sources:
        if value is None:
            continue
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning(f"ignoring invalid {name}: {value!r}")
    return FALLBACK_EPS


def setup_logging(level: str | None = None,
                  filename: str | None = None) -> None:
    """Configure the root logger.

    stdout is reserved for the verdict, so records go to stderr unless
    a log file is configured.
    """
    level = (level or LOG_LEVEL).upper()
    if level not in LOG_LEVELS:
        level = 'WARNING'
    filename = filename or LOG_FILE
    if filename:
        logging.basicConfig(filename=filename, level=level)
    else:
        logging.basicConfig(level=level)
