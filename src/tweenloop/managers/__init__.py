from .preset_manager import PresetManager

__all__ = ["PresetManager"]
