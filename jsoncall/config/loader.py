# jsoncall/config/loader.py
"""
Configuration Loader

Loads configuration from YAML files with code defaults as fallback.

Design principle:
- Code = truth (has all defaults)
- YAML = input parameters (optional)
- System works without YAML
"""

from __future__ import annotations

import importlib
import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from jsoncall.core.binding import CallOptions
from jsoncall.core.context import ContextFactory, default_context_factory
from jsoncall.core.errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".jsoncall" / "config.yml"


@dataclass(frozen=True)
class JsonCallConfig:
    """
    Unified jsoncall configuration.

    Attributes:
        context_factory: Import path "package.module:attribute" of a
            zero-argument callable producing the execution context.
            None means the background context.
        normalize: Wrap bare scalars/objects into an array before binding
            (used by Invoker).
    """
    context_factory: Optional[str] = None
    normalize: bool = False

    @classmethod
    def default(cls) -> "JsonCallConfig":
        """Create default configuration (no YAML needed)"""
        return cls()

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "JsonCallConfig":
        """
        Merge a mapping into defaults.

        Unknown keys are ignored with a warning.
        """
        if not data:
            return cls.default()
        if not isinstance(data, dict):
            raise ConfigError("config must be a mapping", got=type(data).__name__)

        known = {f.name for f in fields(cls)}
        for key in data:
            if key not in known:
                logger.warning("ignoring unknown config key %r", key)

        factory = data.get("context_factory")
        if factory is not None and (not isinstance(factory, str) or ":" not in factory):
            raise ConfigError(
                "context_factory must be an import path like 'package.module:attribute'",
                context_factory=factory,
            )

        normalize = data.get("normalize", False)
        if not isinstance(normalize, bool):
            raise ConfigError("normalize must be a boolean", normalize=normalize)

        return cls(context_factory=factory, normalize=normalize)

    @classmethod
    def from_yaml(cls, config_path: Optional[Path] = None) -> "JsonCallConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML file. If None, tries ~/.jsoncall/config.yml

        Returns:
            JsonCallConfig instance (always has code defaults as fallback)
        """
        return cls.from_dict(_load_yaml(config_path))

    def resolve_context_factory(self) -> ContextFactory:
        """Import the configured context factory."""
        if self.context_factory is None:
            return default_context_factory

        module_name, _, attr = self.context_factory.partition(":")
        try:
            module = importlib.import_module(module_name)
        except ImportError as e:
            raise ConfigError(
                f"cannot import context factory module {module_name!r}",
                context_factory=self.context_factory,
            ) from e

        fn = getattr(module, attr, None)
        if fn is None or not callable(fn):
            raise ConfigError(
                f"context factory {self.context_factory!r} is not callable",
                context_factory=self.context_factory,
            )
        return fn

    def to_options(self) -> CallOptions:
        return CallOptions(context_factory=self.resolve_context_factory())

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization"""
        return {
            "context_factory": self.context_factory,
            "normalize": self.normalize,
        }


def _load_yaml(config_path: Optional[Path] = None) -> Optional[Dict[str, Any]]:
    """Load YAML file, return None if not found (not an error)"""
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    if not path.exists():
        logger.debug("no config file at %s, using defaults", path)
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}", path=str(path)) from e

    logger.debug("loaded config from %s", path)
    return data
