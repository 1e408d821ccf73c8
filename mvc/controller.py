from typing import Iterable, Sequence
from absl import logging as absl_logging

class StaticFeedController:
    """
    Controller:
      - holds a fixed list of (temperature, humidity, pressure) readings
      - pushes them into the Model one at a time, in order
      - the Model fans each one out to its observers before push() returns
    """
    def __init__(self, model, readings: Iterable[Sequence[float]]) -> None:
        self.model = model
        self.readings = [tuple(r) for r in readings]

    def push(self, reading: Iterable[float]) -> None:
        try:
            values = tuple(reading)
        except TypeError:
            values = ()
        if len(values) != 3:
            raise ValueError(f"expected (temperature, humidity, pressure), got {reading!r}")
        temperature, humidity, pressure = (float(v) for v in values)
        absl_logging.debug("[Controller] Pushing t=%s h=%s p=%s", temperature, humidity, pressure)
        self.model.set_measurements(temperature, humidity, pressure)

    def run(self) -> int:
        for reading in self.readings:
            self.push(reading)
        absl_logging.info("[Controller] Pushed %d readings", len(self.readings))
        return len(self.readings)
