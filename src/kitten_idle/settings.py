from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Dict, List, Optional

import yaml

from .economy.config import EconomyConfig
from .engine.loop import LoopConfig
from .exceptions import SettingsError
from .input.mapping import DEFAULT_BINDINGS, InputMapper

logger = logging.getLogger(__name__)


@dataclass
class SaveSettings:
    path: str = "save.dat"


@dataclass
class InputSettings:
    mapping: Dict[str, List[str]] = field(
        default_factory=lambda: {c.value: list(keys) for c, keys in DEFAULT_BINDINGS.items()}
    )

    def build_mapper(self) -> InputMapper:
        return InputMapper.from_mapping(self.mapping)


@dataclass
class Settings:
    """Runtime settings for the economy, tick loop, save slot and key bindings.

    Built-in defaults ship as ``kitten_idle/config/default_settings.yaml``; a
    user YAML file may overlay any subset of keys.
    """

    economy: EconomyConfig = field(default_factory=EconomyConfig)
    loop: LoopConfig = field(default_factory=LoopConfig)
    save: SaveSettings = field(default_factory=SaveSettings)
    input: InputSettings = field(default_factory=InputSettings)

    @property
    def save_path(self) -> Path:
        return Path(self.save.path)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise SettingsError(f"Invalid YAML in {path}: {e}") from e
        except OSError as e:
            raise SettingsError(f"Unable to read settings file {path}: {e}") from e
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping at the top level")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @staticmethod
    def _merge_mapping(base: dict, overlay: dict) -> dict:
        """Overlay user key bindings onto the defaults.

        A command listed by the user takes exactly the user's keys, and any key
        the user claims is dropped from the default commands that held it.
        """
        claimed = set()
        for keys in overlay.values():
            if isinstance(keys, str):
                keys = [keys]
            if isinstance(keys, (list, tuple)):
                claimed.update(str(k).strip()[:1].lower() for k in keys)
        merged = {}
        for name, keys in base.items():
            if name in overlay:
                continue
            kept = [k for k in keys if str(k).strip()[:1].lower() not in claimed]
            if kept:
                merged[name] = kept
        merged.update(overlay)
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            economy = EconomyConfig(**data.get("economy", {}))
            loop = LoopConfig(**data.get("loop", {}))
            save = SaveSettings(**data.get("save", {}))
            mapping = data.get("input", {}).get("mapping", {})
            input_ = InputSettings(mapping={str(k): [str(x) for x in v] for k, v in mapping.items()})
            # Validate command names eagerly so typos surface at startup
            input_.build_mapper()
        except (TypeError, ValueError, AttributeError) as e:
            raise SettingsError(f"Invalid settings: {e}") from e
        return Settings(economy=economy, loop=loop, save=save, input=input_)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("kitten_idle.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        user_input = user_data.get("input")
        user_mapping = user_input.get("mapping") if isinstance(user_input, dict) else None
        default_mapping = default_data.get("input", {}).get("mapping", {})
        if isinstance(user_mapping, dict):
            merged["input"] = dict(merged["input"], mapping=cls._merge_mapping(default_mapping, user_mapping))
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

