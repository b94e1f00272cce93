"""
Configuration

Settings are immutable. They can come from the environment, from a JSON
file merged over the defaults, or be built directly.

Environment variables:
    ZKCP_LOG_LEVEL       logging level name (default WARNING)
    ZKCP_ORACLE_KEY      hex-encoded 32-byte local oracle attestation key
    ZKCP_SEAL_SALT_LEN   salt bytes per local oracle seal (default 16)
"""

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional
import json
import logging
import os

ORACLE_KEY_SIZE = 32

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class Settings:
    """Runtime settings for the local oracle and logging."""

    log_level: str = 'WARNING'
    """Level for the zkcp logger."""

    oracle_key: Optional[bytes] = None
    """Attestation key for LocalOracle. None means a fresh key per oracle."""

    seal_salt_len: int = 16
    """Random salt bytes mixed into each local oracle seal."""

    def __post_init__(self):
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if self.oracle_key is not None and len(self.oracle_key) != ORACLE_KEY_SIZE:
            raise ValueError(
                f"Oracle key must be {ORACLE_KEY_SIZE} bytes, got {len(self.oracle_key)}"
            )
        if self.seal_salt_len < 0:
            raise ValueError(f"Seal salt length must be non-negative, got {self.seal_salt_len}")

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Settings':
        """Build settings from plain values (hex strings for keys)."""
        kwargs: Dict[str, Any] = {}
        if data.get('log_level') is not None:
            kwargs['log_level'] = str(data['log_level'])
        if data.get('oracle_key') is not None:
            kwargs['oracle_key'] = bytes.fromhex(data['oracle_key'])
        if data.get('seal_salt_len') is not None:
            kwargs['seal_salt_len'] = int(data['seal_salt_len'])
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> 'Settings':
        """Read ZKCP_* variables from the environment."""
        environ = os.environ if environ is None else environ
        return cls.from_mapping({
            'log_level': environ.get('ZKCP_LOG_LEVEL'),
            'oracle_key': environ.get('ZKCP_ORACLE_KEY'),
            'seal_salt_len': environ.get('ZKCP_SEAL_SALT_LEN'),
        })


def load_settings(path: str, base: Optional[Settings] = None) -> Settings:
    """
    Load a JSON settings file and merge it over base (shallow merge).

    :param path: path to JSON settings file
    :param base: settings to update (if None use the defaults)
    :return: merged settings
    """
    base = base if base is not None else Settings()
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Settings file not found: {path}")
    with p.open('r', encoding='utf-8') as fh:
        data = json.load(fh)
    overrides = Settings.from_mapping(data)
    names = {f.name for f in fields(Settings)}
    return replace(base, **{
        k: getattr(overrides, k) for k in data if k in names and data[k] is not None
    })


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """
    Attach a compact stream handler to the zkcp logger.

    Calling this more than once only updates the level.
    """
    settings = settings if settings is not None else Settings()
    logger = logging.getLogger('zkcp')
    logger.setLevel(settings.log_level.upper())
    if logger.handlers:
        return logger
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    return logger
