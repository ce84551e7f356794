"""
Layered configuration for ncu.

Two layers exist: a global one stored in ``~/.ncurc`` (or under
``$XDG_CONFIG_HOME``) and a local one stored in ``.ncu/config`` below the
working directory. Local values override global ones key by key.
"""

import json
import logging
import os
from typing import Any, Callable, Dict, Mapping, Optional

from .filesystem import LocalFileSystem

HOME_DIR_ENV = 'XDG_CONFIG_HOME'
NCU_DIR_NAME = '.ncu'
GLOBAL_CONFIG_FILE = '.ncurc'
LOCAL_CONFIG_FILE = 'config'


class ConfigParseError(ValueError):
    """Raised when a config file exists but does not hold a JSON object."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not parse config file {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigStore:
    """Resolves, loads, merges and persists the global and local config layers."""

    def __init__(
        self,
        fs=None,
        environ: Mapping[str, str] = None,
        platform_home: Callable[[], str] = None,
        cwd: Callable[[], str] = None
    ):
        """Initialize the config store.

        Args:
            fs: File system with exists/read_text/write_text/ensure_directory
            environ: Environment lookup, read again on every path resolution
            platform_home: Returns the platform's home directory
            cwd: Returns the current working directory
        """
        self.fs = fs or LocalFileSystem()
        self.environ = os.environ if environ is None else environ
        self.platform_home = platform_home or (lambda: os.path.expanduser('~'))
        self.cwd = cwd or os.getcwd

    def get_home_dir(self, home_dir: Optional[str] = None) -> str:
        """Return the directory holding the global config file.

        An explicit argument wins over $XDG_CONFIG_HOME, which wins over the
        platform home directory.
        """
        if home_dir:
            return home_dir
        env_home = self.environ.get(HOME_DIR_ENV)
        if env_home:
            return env_home
        return self.platform_home()

    def get_ncu_dir(self, base: Optional[str] = None) -> str:
        """Return the hidden directory used for project-local state."""
        return os.path.join(base or self.cwd(), NCU_DIR_NAME)

    def get_config_path(self, is_global: bool, base: Optional[str] = None) -> str:
        if is_global:
            return os.path.join(self.get_home_dir(base), GLOBAL_CONFIG_FILE)
        return os.path.join(self.get_ncu_dir(base), LOCAL_CONFIG_FILE)

    def get_config(self, is_global: bool, base: Optional[str] = None) -> Dict[str, Any]:
        """Load one config layer.

        Args:
            is_global: Load the global layer instead of the local one
            base: Overrides the home directory (global) or working directory (local)

        Returns:
            The parsed mapping, or an empty dict if the file does not exist

        Raises:
            ConfigParseError: If the file is not UTF-8 or does not hold a JSON object
        """
        config_path = self.get_config_path(is_global, base)
        if not self.fs.exists(config_path):
            logging.debug(f"No config found at {config_path}")
            return {}

        try:
            data = json.loads(self.fs.read_text(config_path))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ConfigParseError(config_path, str(e)) from e

        if not isinstance(data, dict):
            raise ConfigParseError(config_path, f"expected an object, got {type(data).__name__}")

        logging.debug(f"Loaded {len(data)} key(s) from {config_path}")
        return data

    def get_merged_config(self, base: Optional[str] = None) -> Dict[str, Any]:
        """Return the global config overlaid with the local config."""
        local_config = self.get_config(False, base)
        global_config = self.get_config(True, base)
        return {**global_config, **local_config}

    def get_value(self, key: str, is_global: Optional[bool] = None, base: Optional[str] = None) -> Any:
        """Look up a single key.

        Args:
            key: Config key
            is_global: None reads the merged view, True/False reads a single layer
            base: Passed through to path resolution

        Returns:
            The value, or None if the key is not set
        """
        if is_global is None:
            config = self.get_merged_config(base)
        else:
            config = self.get_config(is_global, base)
        return config.get(key)

    def write_config(self, is_global: bool, config: Dict[str, Any], base: Optional[str] = None) -> None:
        """Replace a config layer with the given mapping.

        Keys missing from ``config`` are dropped from the file.

        Raises:
            OSError: If the directory cannot be created or the file cannot be written
        """
        config_path = self.get_config_path(is_global, base)
        content = json.dumps(config, indent=2, ensure_ascii=False) + '\n'
        try:
            self.fs.ensure_directory(os.path.dirname(config_path))
            self.fs.write_text(config_path, content)
        except OSError as e:
            logging.error(f"Could not save config to {config_path}: {e}")
            raise
        logging.info(f"Saved {len(config)} key(s) to {config_path}")

    def update_config(self, is_global: bool, partial: Dict[str, Any], base: Optional[str] = None) -> None:
        """Set the given keys in a config layer and keep every other key.

        This is a plain read-modify-write without locking.
        """
        config = self.get_config(is_global, base)
        config.update(partial)
        self.write_config(is_global, config, base)
