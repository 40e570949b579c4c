"""
Pydantic schemas for YAML-defined presets
"""

from .preset import AnimationPreset

__all__ = ["AnimationPreset"]
