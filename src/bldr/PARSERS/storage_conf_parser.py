"""
Parser for the YAML storage configuration file.

Example::

    storage:
      driver: overlay
      root: ${HOME}/.local/share/bldr/storage
"""
import os
import yaml
from typing import Any, Dict, Optional
from pydantic import BaseModel, ValidationError
from ..UTILS.errors import ConfigError
from ..UTILS.string_interpolation import PathInterpolator

DEFAULT_DRIVER = "overlay"
DEFAULT_CONF_PATH = os.path.join("~", ".config", "bldr", "storage.yaml")
CONF_ENV_VAR = "BLDR_STORAGE_CONF"


def default_root(context: Optional[Dict[str, str]] = None) -> str:
    """
    Returns the default storage root: a system location for root, a per-user
    data directory otherwise.
    """
    context = dict(os.environ) if context is None else context
    if os.geteuid() == 0:
        return "/var/lib/bldr/storage"
    data_home = context.get("XDG_DATA_HOME")
    if not data_home:
        data_home = os.path.join(context.get("HOME") or os.path.expanduser("~"), ".local", "share")
    return os.path.join(data_home, "bldr", "storage")


class StoreOptions(BaseModel):
    """
    Where the container store lives and which driver laid it out.
    """
    root: str
    driver: str = DEFAULT_DRIVER


class StorageConfParser:
    """
    Parser for storage.yaml files.
    """
    def __init__(self, context: Optional[Dict[str, str]] = None):
        """
        :param context: Environment used for interpolation and default paths.
        """
        self.context = dict(os.environ) if context is None else context
        self.interpolator = PathInterpolator(self.context)

    def parse(self, conf_path: str) -> StoreOptions:
        """
        Parses a storage configuration file from a path.

        :param conf_path: Path to the configuration file.
        :return: Parsed store options.
        :raises ConfigError: If the file cannot be read or is invalid.
        """
        try:
            with open(conf_path, 'r') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise ConfigError(f"error reading storage configuration {conf_path}: {e}") from e
        return self.parse_from_string(content)

    def parse_from_string(self, content: str) -> StoreOptions:
        """
        Parses a storage configuration from a YAML string.

        :param content: YAML content.
        :return: Parsed store options.
        :raises ConfigError: If the content is not a valid configuration.
        """
        try:
            data = yaml.safe_load(content)
        except (yaml.YAMLError, ValueError) as e:
            raise ConfigError(f"invalid storage configuration: {e}") from e
        if not data:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("invalid storage configuration: expected a mapping")

        section = data.get('storage') or {}
        if not isinstance(section, dict):
            raise ConfigError("invalid storage configuration: 'storage' must be a mapping")
        return self._options(section)

    def load(self, conf_path: Optional[str] = None) -> StoreOptions:
        """
        Loads store options from ``conf_path``, the file named by
        $BLDR_STORAGE_CONF, or the per-user default file, in that order.
        Only the per-user default may be absent.

        :param conf_path: Explicit configuration file, if any.
        :return: Store options.
        """
        explicit = conf_path or self.context.get(CONF_ENV_VAR)
        if explicit:
            return self.parse(explicit)

        default_path = self.interpolator.expand(DEFAULT_CONF_PATH)
        if os.path.exists(default_path):
            return self.parse(default_path)
        return self._options({})

    def _options(self, section: Dict[str, Any]) -> StoreOptions:
        """
        Builds store options from a 'storage' section, filling in defaults.
        """
        values = dict(section)
        root = values.get('root')
        try:
            values['root'] = self.interpolator.expand(str(root)) if root else default_root(self.context)
        except KeyError as e:
            raise ConfigError(f"invalid storage root {root!r}: {e}") from e
        if not values.get('driver'):
            values['driver'] = DEFAULT_DRIVER
        try:
            return StoreOptions.model_validate(values)
        except ValidationError as e:
            raise ConfigError(f"invalid storage configuration: {e}") from e
