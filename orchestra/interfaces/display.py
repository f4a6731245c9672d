"""LED display interface definitions for Orchestra actors."""

from abc import ABC, abstractmethod


class ILedDisplay(ABC):
    """5x5 LED grid primitives."""

    @abstractmethod
    def plot(self, x: int, y: int) -> None:
        """Light a single cell.

        Args:
            x: Column (0-4)
            y: Row (0-4, top to bottom)
        """
        pass

    @abstractmethod
    def clear(self) -> None:
        """Turn off every cell."""
        pass

    @abstractmethod
    def set_brightness(self, level: int) -> None:
        """Set display brightness immediately.

        Args:
            level: Brightness (0-255)
        """
        pass

    @abstractmethod
    def plot_bar_graph(self, current: float, total: float) -> None:
        """Render a proportional bar graph.

        Args:
            current: Progress value
            total: Value corresponding to a full bar
        """
        pass
