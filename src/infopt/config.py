"""Model settings for infopt.

Settings are runtime defaults that are NOT part of any parameter's
specification, such as how many support points to draw when a parameter
is discretized. They can be given directly or read from the
``[tool.infopt]`` table of a project's pyproject.toml.

All settings are immutable to ensure reproducibility.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union
import tomllib

from .constants import DEFAULT_NUM_SUPPORTS


@dataclass(frozen=True)
class ModelSettings:
    """Immutable runtime settings for an InfiniteModel.

    Attributes:
        num_supports: Default number of support points per parameter
        seed: Default random seed for distribution supports (None = unseeded)
    """
    num_supports: int = DEFAULT_NUM_SUPPORTS
    seed: Optional[int] = None

    def __post_init__(self):
        """Validate settings."""
        if isinstance(self.num_supports, bool) or not isinstance(self.num_supports, int):
            raise TypeError(f"num_supports must be an int, got {type(self.num_supports).__name__}")
        if self.num_supports <= 0:
            raise ValueError(f"num_supports must be positive, got {self.num_supports}")
        if self.seed is not None and (isinstance(self.seed, bool) or not isinstance(self.seed, int)):
            raise TypeError(f"seed must be an int or None, got {type(self.seed).__name__}")

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any]) -> "ModelSettings":
        """Create settings from a mapping, rejecting unknown keys.

        Args:
            mapping: Setting names to values

        Returns:
            Validated ModelSettings

        Raises:
            ValueError: If the mapping contains unknown settings
        """
        known = {f.name for f in fields(cls)}
        extra = set(mapping) - known
        if extra:
            raise ValueError(f"Unknown settings: {sorted(extra)}. Available: {sorted(known)}")
        return cls(**dict(mapping))

    def to_dict(self) -> Dict[str, Any]:
        """Export settings as a regular dict."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


def read_pyproject(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Read the infopt section of a pyproject.toml.

    Args:
        path: Path to pyproject.toml (defaults to ./pyproject.toml)

    Returns:
        The [tool.infopt] section, or empty dict if not found

    Raises:
        FileNotFoundError: If pyproject.toml doesn't exist
        tomllib.TOMLDecodeError: If TOML is malformed
    """
    pyproject_path = Path(path) if path is not None else Path.cwd() / "pyproject.toml"

    if not pyproject_path.exists():
        raise FileNotFoundError(f"{pyproject_path} not found")

    with open(pyproject_path, "rb") as f:
        data = tomllib.load(f)

    return data.get("tool", {}).get("infopt", {})


def load_settings(path: Optional[Union[str, Path]] = None) -> ModelSettings:
    """Load settings from pyproject.toml, falling back to defaults.

    Args:
        path: Path to pyproject.toml (defaults to ./pyproject.toml)

    Returns:
        ModelSettings from the [tool.infopt] table, or defaults if the file
        does not exist
    """
    try:
        section = read_pyproject(path)
    except FileNotFoundError:
        return ModelSettings()
    return ModelSettings.from_mapping(section)
