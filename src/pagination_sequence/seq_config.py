"""Display-parameter configuration with directory-based detection.

Default ``edges`` / ``neighbors`` values can be set per project so that
every command run inside it renders the same paginator shape.

## .pagination/ Folder

```
.pagination/
└── config.json          # Main config file
```

### config.json Structure

```json
{
  "edges": 1,
  "neighbors": 2
}
```

Both keys are optional.

### Resolution Order

1. Check for .pagination/config.json in current directory
2. Walk up parent directories looking for .pagination/config.json
3. Fall back to the user config directory (platformdirs)
4. Built-in defaults

PAGINATION_EDGES / PAGINATION_NEIGHBORS environment variables override
whatever the file layer resolved.
"""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from platformdirs import user_config_dir

from .models.item import DEFAULT_EDGES, DEFAULT_NEIGHBORS

logger = logging.getLogger(__name__)

APP_NAME = "pagination-sequence"

# User-level config location
USER_CONFIG_DIR = Path(user_config_dir(APP_NAME))
USER_CONFIG_FILE = USER_CONFIG_DIR / "config.json"

# Directory-level config
SEQ_CONFIG_DIR = ".pagination"
SEQ_CONFIG_FILE = "config.json"

EDGES_ENV = "PAGINATION_EDGES"
NEIGHBORS_ENV = "PAGINATION_NEIGHBORS"

CONFIG_KEYS = ("edges", "neighbors")


class ConfigError(ValueError):
    """Raised when a config file or environment override is malformed."""


@dataclass
class SequenceContext:
    """Resolved display parameters for a directory."""

    # Source of config
    config_path: Optional[Path] = None
    config_source: str = "none"  # "directory", "parent", "user", "none"

    edges: int = DEFAULT_EDGES
    neighbors: int = DEFAULT_NEIGHBORS

    # Names of environment variables that overrode file values
    env_overrides: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "config_source": self.config_source,
            "config_path": str(self.config_path) if self.config_path else None,
            "edges": self.edges,
            "neighbors": self.neighbors,
            "env_overrides": list(self.env_overrides),
        }


def _check_count(value: object, where: str, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise ConfigError(f"{where}: '{key}' must be a non-negative integer, got {value!r}")
    return value


def find_seq_config(start_path: Optional[Path] = None) -> Optional[Path]:
    """Find the nearest .pagination/config.json by walking up the directory tree.

    Args:
        start_path: Directory to start searching from (default: cwd)

    Returns:
        Path to config.json if found, None otherwise
    """
    if start_path is None:
        start_path = Path.cwd()

    current = Path(start_path).resolve()

    while True:
        config_path = current / SEQ_CONFIG_DIR / SEQ_CONFIG_FILE
        if config_path.is_file():
            return config_path
        if current == current.parent:
            return None
        current = current.parent


def load_seq_config(config_path: Path) -> dict:
    """Load and validate a config.json file."""
    try:
        with open(config_path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{config_path}: invalid JSON ({e.msg})") from e
    except UnicodeDecodeError as e:
        raise ConfigError(f"{config_path}: not valid UTF-8 ({e.reason})") from e
    except OSError as e:
        raise ConfigError(f"{config_path}: cannot read ({e.strerror or e})") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path}: expected a JSON object")

    return {
        key: _check_count(data[key], str(config_path), key)
        for key in CONFIG_KEYS
        if key in data
    }


def load_user_config() -> Optional[dict]:
    """Load the user-level config, if present."""
    if USER_CONFIG_FILE.is_file():
        return load_seq_config(USER_CONFIG_FILE)
    return None


def _env_count(name: str) -> Optional[int]:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return None
    try:
        value = int(raw)
    except ValueError as e:
        raise ConfigError(f"{name}: expected an integer, got {raw!r}") from e
    return _check_count(value, name, name)


def resolve_context(path: Optional[Path] = None) -> SequenceContext:
    """Resolve display parameters for a path.

    Args:
        path: Directory to resolve context for (default: cwd)

    Returns:
        SequenceContext with resolved configuration

    Raises:
        ConfigError: If a config file or environment override is malformed
    """
    context = SequenceContext()

    config_path = find_seq_config(path)
    if config_path:
        data = load_seq_config(config_path)
        context.config_path = config_path

        target_dir = Path(path).resolve() if path else Path.cwd().resolve()
        config_dir = config_path.parent.parent  # .pagination/config.json -> project dir
        context.config_source = "directory" if config_dir == target_dir else "parent"
    else:
        data = load_user_config()
        if data is not None:
            context.config_path = USER_CONFIG_FILE
            context.config_source = "user"

    if data:
        context.edges = data.get("edges", context.edges)
        context.neighbors = data.get("neighbors", context.neighbors)

    overrides = []
    edges = _env_count(EDGES_ENV)
    if edges is not None:
        context.edges = edges
        overrides.append(EDGES_ENV)
    neighbors = _env_count(NEIGHBORS_ENV)
    if neighbors is not None:
        context.neighbors = neighbors
        overrides.append(NEIGHBORS_ENV)
    context.env_overrides = tuple(overrides)

    logger.debug(
        "resolved display parameters from %s: edges=%d neighbors=%d",
        context.config_source,
        context.edges,
        context.neighbors,
    )
    return context


def create_config(
    path: Path,
    edges: Optional[int] = None,
    neighbors: Optional[int] = None,
) -> Path:
    """Create a .pagination/config.json file in the specified directory.

    Args:
        path: Directory to create .pagination/ in
        edges: Default edge count
        neighbors: Default neighbor count

    Returns:
        Path to created config file
    """
    config = {}
    if edges is not None:
        config["edges"] = _check_count(edges, "edges", "edges")
    if neighbors is not None:
        config["neighbors"] = _check_count(neighbors, "neighbors", "neighbors")

    config_dir = Path(path) / SEQ_CONFIG_DIR
    config_dir.mkdir(exist_ok=True)

    config_path = config_dir / SEQ_CONFIG_FILE
    with open(config_path, "w") as f:
        json.dump(config, f, indent=2)

    return config_path
