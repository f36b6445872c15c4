"""
Controls - input capabilities read by the ship each tick.

The ship only asks whether a control is currently active. Key mapping,
repeat handling and device polling belong to whoever implements
ShipControls.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Protocol


class Control(Enum):
    """Ship controls."""
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    THRUST = "thrust"
    FIRE = "fire"


class ShipControls(Protocol):
    """Anything that can report which controls are held this tick."""
    
    def is_active(self, control: Control) -> bool:
        ...


@dataclass
class ShipInputs:
    """Level-triggered control state for one tick."""
    turn_left: bool = False
    turn_right: bool = False
    thrust: bool = False
    fire: bool = False
    
    def is_active(self, control: Control) -> bool:
        """Check whether a control is held.
        
        Args:
            control: Control to query
        
        Returns:
            True if held this tick
        """
        return bool(getattr(self, control.value))
    
    @classmethod
    def from_active(cls, controls: Iterable[Control]) -> "ShipInputs":
        """Build inputs from the set of held controls.
        
        Args:
            controls: Controls currently held
        
        Returns:
            ShipInputs with those controls active
        """
        return cls(**{control.value: True for control in controls})
