# mvc/view.py
import numpy as np
from notifier.observer import IObserver, IDisplayElement

def fmt(v: float) -> str:
    """Shortest round-trip form, no trailing '.0' (80.0 -> '80', 30.4 -> '30.4')."""
    return np.format_float_positional(float(v), trim='-')

class CurrentConditionsDisplay(IObserver, IDisplayElement):
    def __init__(self) -> None:
        self.temperature = 0.0
        self.humidity = 0.0

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature = temperature
        self.humidity = humidity
        self.display()

    def display(self) -> None:
        print(f"Current Conditions: {fmt(self.temperature)}F degrees and {fmt(self.humidity)}% humidity")

class StatisticsDisplay(IObserver, IDisplayElement):
    """Running mean of every temperature received."""
    def __init__(self) -> None:
        self.temperature_sum = 0.0
        self.num_readings = 0

    @property
    def average(self) -> float:
        if self.num_readings == 0:
            return 0.0
        return self.temperature_sum / self.num_readings

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.temperature_sum += temperature
        self.num_readings += 1
        self.display()

    def display(self) -> None:
        print(f"Average Temperature: {fmt(self.average)}F")

class ForecastDisplay(IObserver, IDisplayElement):
    """
    Compares the latest pressure with the one before it.
    last_pressure starts at 0.0, so the first reading almost always
    forecasts improving weather.
    """
    IMPROVING = "Forecast: Improving weather on the way!"
    SAME = "Forecast: More of the same"
    WORSENING = "Forecast: Watch out for cooler, rainy weather"

    def __init__(self) -> None:
        self.last_pressure = 0.0
        self.current_pressure = 0.0

    def update(self, temperature: float, humidity: float, pressure: float) -> None:
        self.last_pressure = self.current_pressure
        self.current_pressure = pressure
        self.display()

    def forecast(self) -> str:
        if self.current_pressure > self.last_pressure:
            return self.IMPROVING
        if self.current_pressure == self.last_pressure:
            return self.SAME
        return self.WORSENING

    def display(self) -> None:
        print(self.forecast())
