"""Tests for the configuration module."""

import dataclasses
from pathlib import Path

import pytest

from graphex._cli.config import (
    ConfigError,
    GraphexConfig,
    find_pyproject_toml,
    load_config,
)


class TestFindPyprojectToml:
    """Tests for find_pyproject_toml function."""

    def test_finds_in_current_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in current directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        result = find_pyproject_toml(tmp_path)

        assert result == pyproject

    def test_finds_in_parent_directory(self, tmp_path: Path) -> None:
        """Should find pyproject.toml in parent directory."""
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        subdir = tmp_path / "src" / "pkg"
        subdir.mkdir(parents=True)

        result = find_pyproject_toml(subdir)

        assert result == pyproject

    def test_returns_none_when_not_found(self, tmp_path: Path) -> None:
        """Should return None when no pyproject.toml is found."""
        result = find_pyproject_toml(tmp_path)

        assert result is None


class TestLoadConfigValues:
    """Tests for loading values from [tool.graphex]."""

    def test_full_configuration(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text(
            """
[tool.graphex]
seed = 42
vertices = 12
probability = 0.4
max_attempts = 50
""",
        )

        config = load_config(pyproject)

        assert config == GraphexConfig(
            seed=42,
            vertices=12,
            probability=0.4,
            max_attempts=50,
            project_root=tmp_path,
        )

    def test_partial_configuration_keeps_defaults(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphex]\nseed = 7\n")

        config = load_config(pyproject)

        assert config.seed == 7
        assert config.vertices == 10
        assert config.probability == 0.5
        assert config.max_attempts == 10_000

    def test_integer_probability_accepted(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphex]\nprobability = 1\n")

        config = load_config(pyproject)

        assert config.probability == 1.0


class TestLoadConfigEmptySection:
    """Tests for missing or empty [tool.graphex] section."""

    def test_no_tool_graphex_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[project]\nname = 'test'\n")

        config = load_config(pyproject)

        assert config == GraphexConfig(project_root=tmp_path)

    def test_empty_tool_graphex_section(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphex]\n")

        config = load_config(pyproject)

        assert config.seed is None
        assert config.project_root == tmp_path


class TestLoadConfigErrors:
    """Tests for configuration error handling."""

    def test_invalid_toml_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("this is not valid toml [[[")

        with pytest.raises(ConfigError, match="Invalid TOML"):
            load_config(pyproject)

    def test_string_vertices_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text('[tool.graphex]\nvertices = "ten"\n')

        with pytest.raises(ConfigError, match="vertices: expected integer"):
            load_config(pyproject)

    def test_boolean_seed_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphex]\nseed = true\n")

        with pytest.raises(ConfigError, match="seed: expected integer"):
            load_config(pyproject)

    def test_zero_max_attempts_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphex]\nmax_attempts = 0\n")

        with pytest.raises(ConfigError, match="at least 1"):
            load_config(pyproject)

    def test_probability_out_of_range_raises_error(self, tmp_path: Path) -> None:
        pyproject = tmp_path / "pyproject.toml"
        pyproject.write_text("[tool.graphex]\nprobability = 1.5\n")

        with pytest.raises(ConfigError, match="between 0 and 1"):
            load_config(pyproject)


class TestGraphexConfigDataclass:
    """Tests for GraphexConfig dataclass."""

    def test_default_values(self) -> None:
        config = GraphexConfig()

        assert config.seed is None
        assert config.vertices == 10
        assert config.probability == 0.5
        assert config.max_attempts == 10_000
        assert config.project_root is None

    def test_frozen(self) -> None:
        config = GraphexConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            config.seed = 3  # type: ignore[misc]
