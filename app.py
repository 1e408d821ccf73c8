# app.py
from absl import logging as absl_logging
from mvc.model import WeatherData
from mvc.view import CurrentConditionsDisplay, StatisticsDisplay, ForecastDisplay
from mvc.controller import StaticFeedController

LOG_VERBOSITY = absl_logging.INFO

# (temperature F, humidity %, pressure inHg)
DEMO_READINGS = [
    (80, 65, 30.4),
    (82, 70, 29.2),
    (78, 90, 29.2),
]

def main():
    absl_logging.set_verbosity(LOG_VERBOSITY)

    # Model
    weather_data = WeatherData()

    # Views (Observers)
    current_display = CurrentConditionsDisplay()
    statistics_display = StatisticsDisplay()
    forecast_display = ForecastDisplay()

    # Attach observers
    weather_data.register(current_display)
    weather_data.register(statistics_display)
    weather_data.register(forecast_display)

    # Controller (fixed demo readings)
    ctrl = StaticFeedController(model=weather_data, readings=DEMO_READINGS)

    absl_logging.info("[APP] Starting weather station demo…")
    ctrl.run()
    absl_logging.info("[APP] Stopped.")

if __name__ == "__main__":
    main()
