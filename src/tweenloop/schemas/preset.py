"""
Preset schemas - Pydantic models for animation presets loaded from YAML
"""

from datetime import timedelta
from typing import Callable, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from tweenloop.models.animation import AnimationConfig
from tweenloop.models.enums import ValueType

VALUE_TYPES = {
    ValueType.INT: int,
    ValueType.FLOAT: float,
}


class AnimationPreset(BaseModel):
    """One named animation definition"""
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    name: str = Field(description="Preset name (e.g. 'fade_in')")
    value_type: ValueType = Field(ValueType.INT, description="Interpolated value type")
    from_value: Optional[float] = Field(None, alias="from", description="Start value (default: 0)")
    to_value: Optional[float] = Field(None, alias="to", description="End value (default: 1)")
    delay_ms: int = Field(0, ge=0, description="Delay before the first tick")
    duration_ms: int = Field(1000, gt=0, description="Duration of one pass")
    frame_ms: int = Field(16, gt=0, description="Tick cadence")
    recur: Union[bool, int] = Field(False, description="true = forever, false = once, n = n passes")

    @model_validator(mode="after")
    def validate_recur(self):
        if not isinstance(self.recur, bool) and self.recur < 1:
            raise ValueError("recur count must be >= 1")
        return self

    @model_validator(mode="after")
    def validate_int_bounds(self):
        if self.value_type != ValueType.INT:
            return self
        for label, value in (("from", self.from_value), ("to", self.to_value)):
            if value is not None and not float(value).is_integer():
                raise ValueError(f"{label} must be a whole number for int presets, got {value}")
        return self

    def to_config(self, callback: Callable) -> AnimationConfig:
        """Build the AnimationConfig this preset describes"""
        kind = VALUE_TYPES[self.value_type]
        config = AnimationConfig(callback, value_type=kind)

        if self.from_value is not None:
            config = config.from_(kind(self.from_value))
        if self.to_value is not None:
            config = config.to(kind(self.to_value))

        return (
            config
            .delay(timedelta(milliseconds=self.delay_ms))
            .duration(timedelta(milliseconds=self.duration_ms))
            .frame(timedelta(milliseconds=self.frame_ms))
            .recur(self.recur)
        )
