import pytest

from mvc.model import WeatherData
from mvc.view import (
    CurrentConditionsDisplay,
    ForecastDisplay,
    StatisticsDisplay,
    fmt,
)


def lines(capsys):
    return capsys.readouterr().out.splitlines()


@pytest.mark.parametrize("value, expected", [
    (80, "80"),
    (80.0, "80"),
    (30.4, "30.4"),
    (72.1234567, "72.1234567"),
    (1234567, "1234567"),
    (333400.25, "333400.25"),
])
def test_fmt_keeps_every_digit(value, expected):
    assert fmt(value) == expected


def test_current_conditions_renders_latest_values(capsys):
    view = CurrentConditionsDisplay()
    view.update(80, 65, 30.4)
    view.update(72.5, 40, 29.9)

    assert lines(capsys) == [
        "Current Conditions: 80F degrees and 65% humidity",
        "Current Conditions: 72.5F degrees and 40% humidity",
    ]
    assert (view.temperature, view.humidity) == (72.5, 40)


def test_current_conditions_renders_values_verbatim(capsys):
    view = CurrentConditionsDisplay()
    view.update(72.1234567, 1234567, 30.0)

    assert lines(capsys) == [
        "Current Conditions: 72.1234567F degrees and 1234567% humidity",
    ]


def test_statistics_average_is_running_mean(capsys):
    view = StatisticsDisplay()
    temps = [71.3, 68.0, 90.1, 55.5]
    for t in temps:
        view.update(t, 50, 30)

    assert view.num_readings == len(temps)
    assert view.average == pytest.approx(sum(temps) / len(temps))
    assert len(lines(capsys)) == len(temps)


def test_statistics_prints_full_precision_average(capsys):
    view = StatisticsDisplay()
    for t in (100.0, 100.5, 1000000.25):
        view.update(t, 50, 30)

    assert view.average == 333400.25
    assert lines(capsys)[-1] == "Average Temperature: 333400.25F"


def test_statistics_without_readings_reports_zero(capsys):
    view = StatisticsDisplay()
    assert view.average == 0.0

    view.display()
    assert lines(capsys) == ["Average Temperature: 0F"]


@pytest.mark.parametrize("p0, p1, expected", [
    (29.2, 30.4, ForecastDisplay.IMPROVING),
    (29.2, 29.2, ForecastDisplay.SAME),
    (30.4, 29.2, ForecastDisplay.WORSENING),
])
def test_forecast_compares_with_previous_pressure(capsys, p0, p1, expected):
    view = ForecastDisplay()
    view.update(70, 50, p0)
    view.update(70, 50, p1)

    assert lines(capsys)[-1] == expected


def test_forecast_first_update_compares_against_zero(capsys):
    view = ForecastDisplay()
    view.update(70, 50, 30.4)

    assert lines(capsys) == ["Forecast: Improving weather on the way!"]
    assert view.last_pressure == 0.0


def test_displays_registered_on_model_render_one_line_each(capsys):
    wd = WeatherData()
    wd.register(CurrentConditionsDisplay())
    wd.register(StatisticsDisplay())

    wd.set_measurements(80, 65, 30.4)

    assert lines(capsys) == [
        "Current Conditions: 80F degrees and 65% humidity",
        "Average Temperature: 80F",
    ]
