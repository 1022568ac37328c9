"""
Configuration module.

Contains the ``key = value`` config file reader and the Pydantic-based
configuration class for the fdown application.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, Iterable, Optional, Tuple

from pydantic import ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings

from fdown.core.exceptions import ConfigurationError, MissingConfigValueError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = '~/.fdown'


def expand_home(
    filename: str,
    home_dir: Optional[Callable[[], Path]] = None
) -> Optional[Path]:
    """
    Expand a leading ``~`` path component to the home directory.

    Only a first component that is exactly ``~`` is expanded, so
    ``~user/x`` and ``/a/~/b`` are left alone.

    Args:
        filename: Path as given by the user.
        home_dir: Callable returning the home directory (default Path.home).

    Returns:
        The expanded path, or None if no expansion applies.
    """
    parts = Path(filename).parts
    if not parts or parts[0] != '~':
        return None
    return (home_dir or Path.home)().joinpath(*parts[1:])


def split_line_at_first_equals(line: str) -> Tuple[str, str]:
    """
    Split a config line into a trimmed key and value.

    Raises:
        ConfigurationError: If the line has no '='.
    """
    key, sep, value = line.partition('=')
    if not sep:
        raise ConfigurationError(f'Missing \'=\' in config file: "{line}"')
    return key.strip(), value.strip()


class ConfigFile:
    """
    Flat ``key = value`` configuration file.

    Blank lines and lines starting with ``#`` are skipped.
    """

    def __init__(self, values: Dict[str, str]):
        self._values = values

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> 'ConfigFile':
        """Parse config lines."""
        values: Dict[str, str] = {}
        for line in lines:
            trimmed = line.strip()
            if not trimmed or trimmed.startswith('#'):
                continue
            key, value = split_line_at_first_equals(trimmed)
            values[key] = value
        return cls(values)

    @classmethod
    def load(cls, filename: str = DEFAULT_CONFIG_PATH) -> 'ConfigFile':
        """
        Read a config file from disk.

        Raises:
            ConfigurationError: If the file cannot be read or parsed.
        """
        path = expand_home(filename) or Path(filename)
        try:
            with open(path, 'r', encoding='utf-8') as f:
                return cls.from_lines(f)
        except OSError as e:
            raise ConfigurationError(
                f'Unable to read config file: {e}',
                context={'path': str(path)}
            ) from e

    @property
    def values(self) -> Dict[str, str]:
        """Return a copy of all parsed values."""
        return dict(self._values)

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Return a value or ``default``."""
        return self._values.get(key, default)

    def required_string(self, key: str) -> str:
        """
        Return a required value.

        Raises:
            MissingConfigValueError: If the key is absent.
        """
        if key not in self._values:
            raise MissingConfigValueError(key)
        return self._values[key]


class AppConfig(BaseSettings):
    """Main application configuration."""

    userid: str
    token: str

    # Local archive directory
    target_dir: str = '~/Pictures/fdown'
    base_url: str = 'http://cloud.feedly.com/v3'
    timeout: int = Field(default=30, ge=1, le=600)
    # Unsave entries that succeeded even when a later entry fails
    unsave_partial: bool = False
    dropbox_token: Optional[str] = None
    dropbox_folder: str = '/fdown'

    model_config = ConfigDict(
        env_prefix='FDOWN_',
        extra='ignore',
        frozen=True
    )

    @field_validator('userid', 'token')
    @classmethod
    def not_blank(cls, v: str) -> str:
        """Reject empty credentials."""
        if not v.strip():
            raise ValueError('must not be empty')
        return v

    @field_validator('target_dir')
    @classmethod
    def expand_target_dir(cls, v: str) -> str:
        """Expand ``~`` in the target directory."""
        return os.path.expanduser(v)

    @classmethod
    def from_config_file(cls, config_file: ConfigFile) -> 'AppConfig':
        """
        Build a validated configuration from parsed file values.

        Raises:
            MissingConfigValueError: If userid or token is absent.
            ConfigurationError: If any value fails validation.
        """
        try:
            return cls(**config_file.values)
        except ValidationError as e:
            for error in e.errors():
                if error['type'] == 'missing':
                    raise MissingConfigValueError(str(error['loc'][0])) from e
            raise ConfigurationError(
                f'Invalid configuration: {e.error_count()} error(s)',
                context={'errors': [
                    f'{".".join(str(p) for p in err["loc"])}: {err["msg"]}'
                    for err in e.errors()
                ]}
            ) from e

    @classmethod
    def load(cls, config_path: Optional[str] = None) -> 'AppConfig':
        """Load configuration from a ``key = value`` file."""
        if config_path is None:
            config_path = os.getenv('FDOWN_CONFIG', DEFAULT_CONFIG_PATH)

        logger.debug(f'📁 Loading config file: {config_path}')
        return cls.from_config_file(ConfigFile.load(config_path))

    def require_dropbox_token(self) -> str:
        """
        Return the Dropbox token.

        Raises:
            MissingConfigValueError: If no token is configured.
        """
        if not self.dropbox_token:
            raise MissingConfigValueError('dropbox_token')
        return self.dropbox_token
