"""
Preset Manager

Loads named animation presets from YAML, with include system support.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from tweenloop.models.animation import AnimationConfig
from tweenloop.models.enums import LogCategory
from tweenloop.models.errors import PresetNotFoundError, PresetValidationError
from tweenloop.schemas.preset import AnimationPreset
from tweenloop.utils.logger import get_logger

log = get_logger().for_category(LogCategory.CONFIG)

PACKAGE_DIR = Path(__file__).parent.parent
DEFAULT_PRESETS_PATH = PACKAGE_DIR / "config" / "presets.yaml"


class PresetManager:
    """
    Animation preset manager

    Loads presets.yaml and processes the include: directive to load modular
    YAML files. Each entry under 'presets' is validated into an
    AnimationPreset.

    Example:
        presets = PresetManager()
        presets.load()

        config = presets.build("fade_in", lambda p: SetOpacity(p))
        handle = config.start(dispatch)

    YAML format:
        include:
          - extra_presets.yaml
        presets:
          fade_in:
            value_type: float
            from: 0.0
            to: 1.0
            duration_ms: 300
    """

    def __init__(self, config_path: Union[str, Path] = DEFAULT_PRESETS_PATH):
        self.config_path = Path(config_path)
        self.presets: Dict[str, AnimationPreset] = {}

    def load(self) -> Dict[str, AnimationPreset]:
        """
        Load and validate presets

        Process:
        1. Load main YAML file
        2. Load and merge every file in its 'include:' list (relative to it)
        3. Validate each preset; the main file wins on duplicate names

        Raises:
            FileNotFoundError: main or included file missing
            PresetValidationError: a preset doesn't match the schema
        """
        main_config = self._read_yaml(self.config_path)

        raw_presets: Dict[str, Any] = {}
        for filename in main_config.get("include", []) or []:
            included = self._read_yaml(self.config_path.parent / filename)
            raw_presets.update(included.get("presets", {}) or {})
            log.info(f"Loaded {filename}", presets=len(included.get("presets", {}) or {}))

        raw_presets.update(main_config.get("presets", {}) or {})

        self.presets = {}
        for name, data in raw_presets.items():
            self.presets[name] = self._parse_preset(name, {} if data is None else data)
            log.debug(f"Loaded preset: {name}")

        log.info("Presets loaded", total=len(self.presets), path=str(self.config_path))
        return self.presets

    def _read_yaml(self, path: Path) -> dict:
        try:
            with open(path, "r", encoding="utf-8") as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            log.error(f"File not found: {path}")
            raise

    def _parse_preset(self, name: str, data: Any) -> AnimationPreset:
        if not isinstance(data, dict):
            errors = [f"preset must be a mapping, got {type(data).__name__}"]
            log.error(f"Invalid preset '{name}'", errors=errors)
            raise PresetValidationError(name, errors)
        if "name" in data:
            errors = ["name: set by the preset key, not allowed in the body"]
            log.error(f"Invalid preset '{name}'", errors=errors)
            raise PresetValidationError(name, errors)

        try:
            return AnimationPreset.model_validate({**data, "name": name})
        except ValidationError as ex:
            errors = [f"{'.'.join(str(p) for p in e['loc'])}: {e['msg']}" for e in ex.errors()]
            log.error(f"Invalid preset '{name}'", errors=errors)
            raise PresetValidationError(name, errors) from ex

    def get_preset(self, name: str) -> Optional[AnimationPreset]:
        return self.presets.get(name)

    def get_all_presets(self) -> List[AnimationPreset]:
        return list(self.presets.values())

    def build(self, name: str, callback: Callable) -> AnimationConfig:
        """Build an AnimationConfig from a named preset"""
        preset = self.presets.get(name)
        if preset is None:
            raise PresetNotFoundError(name)
        return preset.to_config(callback)
