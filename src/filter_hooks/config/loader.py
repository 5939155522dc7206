"""
Configuration Loader - YAML Loading with Validation.

A config file may be refined by a named profile. Profiles are looked up
in a ``profiles/`` directory next to the config file, or in an explicit
``profiles_dir``:

    settings/
        filter_hooks.yaml
        profiles/
            permissive.yaml

    load_config("settings/filter_hooks.yaml", profile="permissive")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from filter_hooks.config.models import FilterHooksConfig

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]

PROFILE_SUFFIXES = (".yaml", ".yml")


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _deep_merge(base: Mapping[str, Any], overlay: Mapping[str, Any]) -> Dict[str, Any]:
    """Merge overlay onto base; nested mappings merge, everything else replaces."""
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        if isinstance(current, Mapping) and isinstance(value, Mapping):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Loads FilterHooksConfig from YAML, optionally refined by a profile."""

    def __init__(self, profiles_dir: Optional[PathLike] = None) -> None:
        """
        Args:
            profiles_dir: Where profiles live; defaults to ``profiles/``
                          beside each loaded config file
        """
        self._profiles_dir = Path(profiles_dir) if profiles_dir is not None else None

    def load(
        self,
        config_path: PathLike,
        profile: Optional[str] = None,
    ) -> FilterHooksConfig:
        """
        Load and validate a config file.

        Raises:
            FileNotFoundError: If the config file or the profile is missing
            ValidationError: If the merged config is invalid
        """
        path = Path(config_path)
        raw = _read_yaml(path)

        if profile:
            profile_path = self.profile_path(path, profile)
            raw = _deep_merge(raw, _read_yaml(profile_path))
            logger.debug(f"Applied profile '{profile}' from {profile_path}")

        return self.load_from_dict(raw)

    def load_from_dict(self, config_dict: Mapping[str, Any]) -> FilterHooksConfig:
        return FilterHooksConfig.model_validate(dict(config_dict))

    def profile_path(self, config_path: PathLike, profile: str) -> Path:
        """Locate the file for a named profile."""
        directory = self._profiles_dir or Path(config_path).parent / "profiles"
        for suffix in PROFILE_SUFFIXES:
            candidate = directory / f"{profile}{suffix}"
            if candidate.is_file():
                return candidate
        raise FileNotFoundError(f"Profile not found: {profile} (searched {directory})")


def load_config(
    config_path: PathLike,
    profile: Optional[str] = None,
    profiles_dir: Optional[PathLike] = None,
) -> FilterHooksConfig:
    """Convenience wrapper around ConfigLoader.load()."""
    return ConfigLoader(profiles_dir=profiles_dir).load(config_path, profile=profile)
