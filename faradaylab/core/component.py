"""Base interface for the per-tick components of the lab."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class LabComponent(ABC):
    """
    Base interface for everything advanced once per frame:
    position sources and the physics core.
    """

    @abstractmethod
    def initialize(self, **kwargs: Any) -> None:
        """Reset the component to its start-of-session state."""
        pass

    @abstractmethod
    def step(self, *, time: float, **kwargs: Any) -> Dict[str, Any]:
        """
        Advance one frame.

        Args:
            time: frame timestamp in milliseconds
            **kwargs: component-specific inputs

        Returns:
            Dict with the component outputs (keys depend on the type).
        """
        pass

    def state_dict(self) -> Dict[str, Any]:
        """
        Internal state for inspection and debugging.
        Override in stateful components.
        """
        return {}
