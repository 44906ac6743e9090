# IN THIS FILE: ROBOT CONFIGURATION (start state defaults and speed range)

from pathlib import Path

from pydantic import BaseModel, Field, field_validator, model_validator

from gridbot.utils.consts import (
    DEFAULT_X,
    DEFAULT_Y,
    DEFAULT_HEADING,
    MIN_SPEED,
    MAX_SPEED,
    DEFAULT_SPEED
)
from gridbot.utils.enums import Heading


class RobotConfig(BaseModel):
    # Used when Robot() is constructed without explicit arguments
    default_x: int = DEFAULT_X
    default_y: int = DEFAULT_Y
    default_heading: Heading = DEFAULT_HEADING

    # Legal step counts for forward/backward commands
    min_speed: int = Field(default=MIN_SPEED, ge=1)
    max_speed: int = MAX_SPEED
    default_speed: int = DEFAULT_SPEED

    @field_validator("default_heading", mode="before")
    @classmethod
    def heading_by_name(cls, value):
        # Config files may spell headings out ("west") instead of 0-3
        if isinstance(value, str) and value.strip().upper() in Heading.__members__:
            return Heading[value.strip().upper()]
        return value

    @model_validator(mode="after")
    def check_speed_range(self) -> 'RobotConfig':
        if not self.min_speed <= self.max_speed:
            raise ValueError(
                f"min_speed ({self.min_speed}) must not exceed max_speed ({self.max_speed})"
            )
        if not self.min_speed <= self.default_speed <= self.max_speed:
            raise ValueError(
                f"default_speed ({self.default_speed}) must lie in "
                f"[{self.min_speed}, {self.max_speed}]"
            )
        return self

    @classmethod
    def from_json(cls, path: str) -> 'RobotConfig':
        """Load a config file. Missing keys keep their defaults."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
        return cls.model_validate_json(config_path.read_text(encoding="utf-8"))
