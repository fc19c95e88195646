"""Configuration loading from pyproject.toml."""

import tomllib
from dataclasses import dataclass
from pathlib import Path


class ConfigError(Exception):
    """Error in graphex configuration."""


@dataclass(slots=True, frozen=True)
class GraphexConfig:
    """Configuration loaded from the ``[tool.graphex]`` table.

    Unset values fall back to the defaults below; CLI options override both.
    """

    seed: int | None = None
    vertices: int = 10
    probability: float = 0.5
    max_attempts: int = 10_000
    project_root: Path | None = None


def find_pyproject_toml(start_dir: Path | None = None) -> Path | None:
    """Find pyproject.toml by walking up from start_dir.

    Args:
        start_dir: Starting directory. Defaults to current working directory.

    Returns:
        Path to pyproject.toml if found, None otherwise.

    """
    current = (start_dir or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def _get_int(section: dict[str, object], key: str, *, minimum: int) -> int | None:
    if key not in section:
        return None
    value = section[key]
    # bool is an int subclass but never a sensible count
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"Invalid [tool.graphex].{key}: expected integer"
        raise ConfigError(msg)
    if value < minimum:
        msg = f"Invalid [tool.graphex].{key}: must be at least {minimum}"
        raise ConfigError(msg)
    return value


def load_config(pyproject_path: Path) -> GraphexConfig:
    """Load and validate [tool.graphex] config from pyproject.toml.

    Args:
        pyproject_path: Path to pyproject.toml

    Returns:
        Parsed GraphexConfig

    Raises:
        ConfigError: If the configuration is invalid

    """
    project_root = pyproject_path.parent

    with pyproject_path.open("rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            msg = f"Invalid TOML in {pyproject_path}: {e}"
            raise ConfigError(msg) from e

    section = data.get("tool", {}).get("graphex", {})
    if not section:
        return GraphexConfig(project_root=project_root)
    if not isinstance(section, dict):
        msg = "Invalid [tool.graphex] configuration: expected a table"
        raise ConfigError(msg)

    defaults = GraphexConfig()

    seed = _get_int(section, "seed", minimum=0)
    vertices = _get_int(section, "vertices", minimum=0)
    max_attempts = _get_int(section, "max_attempts", minimum=1)

    probability = defaults.probability
    if "probability" in section:
        value = section["probability"]
        if not isinstance(value, int | float) or isinstance(value, bool):
            msg = "Invalid [tool.graphex].probability: expected number"
            raise ConfigError(msg)
        if not 0.0 <= value <= 1.0:
            msg = "Invalid [tool.graphex].probability: must be between 0 and 1"
            raise ConfigError(msg)
        probability = float(value)

    return GraphexConfig(
        seed=seed,
        vertices=defaults.vertices if vertices is None else vertices,
        probability=probability,
        max_attempts=defaults.max_attempts if max_attempts is None else max_attempts,
        project_root=project_root,
    )


def get_config() -> GraphexConfig:
    """Get config from pyproject.toml in current directory or parents.

    Returns:
        GraphexConfig (defaults if no pyproject.toml or no [tool.graphex] section)

    """
    pyproject_path = find_pyproject_toml()
    if pyproject_path is None:
        return GraphexConfig()
    return load_config(pyproject_path)
