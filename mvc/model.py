from typing import List, NamedTuple, Tuple
import numpy as np
from absl import logging as absl_logging
from notifier.observer import ISubject, IObserver

class Measurement(NamedTuple):
    temperature: float
    humidity: float
    pressure: float

class WeatherData(ISubject):
    """Observable data model holding the latest (temperature, humidity, pressure)."""
    def __init__(self):
        self._arr = np.full(3, np.nan, dtype=np.float64)
        self._observers: List[IObserver] = []

    @property
    def observers(self) -> Tuple[IObserver, ...]:
        return tuple(self._observers)

    def register(self, observer: IObserver) -> None:
        self._observers.append(observer)
        absl_logging.debug("[Model] Registered %s (%d observers)",
                           type(observer).__name__, len(self._observers))

    def remove(self, observer: IObserver) -> None:
        # identity, not equality; first occurrence only
        for i, obs in enumerate(self._observers):
            if obs is observer:
                del self._observers[i]
                absl_logging.debug("[Model] Removed %s (%d observers)",
                                   type(observer).__name__, len(self._observers))
                return

    def notify_observers(self) -> None:
        m = self.get_measurements()
        snapshot = list(self._observers)
        absl_logging.debug("[Model] Notifying %d observers with %s", len(snapshot), m)
        for obs in snapshot:
            try:
                obs.update(m.temperature, m.humidity, m.pressure)
            except Exception:
                absl_logging.exception("[Model] Observer %s failed", type(obs).__name__)

    def set_measurements(self, temperature: float, humidity: float, pressure: float) -> None:
        self._arr = np.array([temperature, humidity, pressure], dtype=np.float64)
        self.notify_observers()

    def get_measurements(self) -> Measurement:
        return Measurement(*(float(v) for v in self._arr))
