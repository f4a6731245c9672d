"""In-memory board: music output, LED grid and loopback radio.

Records every primitive call instead of producing sound or light. Used for
dry runs and tests; several actors can share one RadioMedium in-process.
"""

import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np

from notation.grid import GRID_SIZE, bar_graph_cells
from notation.playback_state import DEFAULT_TEMPO_BPM, wait_seconds
from orchestra.interfaces.display import ILedDisplay
from orchestra.interfaces.music import IMusicOutput
from orchestra.interfaces.radio import IRadio, NumberCallback

logger = logging.getLogger(__name__)

MAX_LEVEL = 255


@dataclass
class ToneEvent:
    """Single primitive call recorded by SimulatedMusic."""

    kind: str  # "tone" or "rest"
    pitch: Optional[float]
    duration_ms: float
    volume: int


class SimulatedMusic(IMusicOutput):
    """Music output that records tones and optionally sleeps through them."""

    def __init__(self, tempo: float = DEFAULT_TEMPO_BPM, realtime: bool = False):
        """Initialize simulated music output.

        Args:
            tempo: Initial tempo in BPM
            realtime: Block for each tone/rest like real hardware
        """
        self.tempo = tempo
        self.volume = MAX_LEVEL
        self.realtime = realtime
        self.events: List[ToneEvent] = []
        self.volume_changes: List[int] = []

    def play_tone(self, pitch: float, duration_ms: float) -> None:
        self.events.append(ToneEvent("tone", pitch, duration_ms, self.volume))
        self._wait(duration_ms)

    def rest(self, duration_ms: float) -> None:
        self.events.append(ToneEvent("rest", None, duration_ms, self.volume))
        self._wait(duration_ms)

    def set_volume(self, level: int) -> None:
        self.volume = level
        self.volume_changes.append(level)

    def set_tempo(self, bpm: float) -> None:
        self.tempo = bpm

    def get_tempo(self) -> float:
        return self.tempo

    def total_duration_ms(self) -> float:
        """Sum of all recorded tone and rest durations."""
        return sum(event.duration_ms for event in self.events)

    def _wait(self, duration_ms: float) -> None:
        if self.realtime:
            time.sleep(wait_seconds(duration_ms))


class SimulatedDisplay(ILedDisplay):
    """5x5 LED grid held in a NumPy array.

    Cells hold 0 (off) or 1 (on); brightness is a global level that
    saturates into 0-255. Plots outside the grid are ignored.
    """

    def __init__(self):
        """Initialize an empty grid at full brightness."""
        self.grid = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.uint8)
        self.brightness = MAX_LEVEL

    def plot(self, x: int, y: int) -> None:
        if not (0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE):
            logger.debug(f"Ignoring plot outside grid: ({x}, {y})")
            return
        self.grid[y, x] = 1

    def clear(self) -> None:
        self.grid.fill(0)

    def set_brightness(self, level: int) -> None:
        self.brightness = int(np.clip(level, 0, MAX_LEVEL))

    def plot_bar_graph(self, current: float, total: float) -> None:
        self.clear()
        for x, y in bar_graph_cells(current, total):
            self.grid[y, x] = 1

    def lit_cells(self) -> list[tuple[int, int]]:
        """Return lit (x, y) cells, row by row."""
        ys, xs = np.nonzero(self.grid)
        return [(int(x), int(y)) for y, x in zip(ys, xs)]

    def render(self) -> str:
        """Render the grid as text, '#' for lit cells."""
        return "\n".join(
            "".join("#" if cell else "." for cell in row) for row in self.grid
        )


class RadioMedium:
    """In-process broadcast medium shared by loopback radios.

    Delivery is synchronous on the sender's thread. A sender does not
    receive its own broadcasts.
    """

    def __init__(self):
        self.radios: List["LoopbackRadio"] = []
        self.sent: List[int] = []

    def attach(self, radio: "LoopbackRadio") -> None:
        self.radios.append(radio)

    def detach(self, radio: "LoopbackRadio") -> None:
        if radio in self.radios:
            self.radios.remove(radio)

    def broadcast(self, sender: "LoopbackRadio", value: int) -> None:
        self.sent.append(value)
        for radio in list(self.radios):
            if radio is not sender and radio.group == sender.group:
                radio.deliver(value)


class LoopbackRadio(IRadio):
    """Radio endpoint on an in-process RadioMedium."""

    def __init__(self, medium: Optional[RadioMedium] = None, group: int = 0):
        """Initialize loopback radio.

        Args:
            medium: Shared medium (a private one is created if omitted)
            group: Radio group; only radios in the same group hear each other
        """
        self.medium = medium if medium is not None else RadioMedium()
        self.group = group
        self.callbacks: List[NumberCallback] = []
        self.medium.attach(self)

    def send_number(self, value: int) -> None:
        self.medium.broadcast(self, value)

    def on_received_number(self, callback: NumberCallback) -> None:
        self.callbacks.append(callback)

    def deliver(self, value: int) -> None:
        """Invoke every registered callback with an inbound value."""
        for callback in list(self.callbacks):
            try:
                callback(value)
            except Exception as e:
                logger.error(
                    f"Radio callback failed: {e}", exc_info=True, extra={"signal": value}
                )

    def close(self) -> None:
        self.medium.detach(self)
