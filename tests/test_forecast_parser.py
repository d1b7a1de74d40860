"""Tests for decoding One Call bodies into ForecastSnapshot."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from owm_forecast.exceptions import ForecastParseError
from owm_forecast.weather.models import ForecastSnapshot
from owm_forecast.weather.parser import parse_forecast

FIXTURE = Path(__file__).parent / "fixtures" / "onecall_tokyo.json"


def _fixture_text() -> str:
    return FIXTURE.read_text(encoding="utf-8")


def _fixture_payload() -> dict[str, Any]:
    return json.loads(_fixture_text())


def test_parse_fixture_maps_all_sections() -> None:
    snapshot = parse_forecast(_fixture_text())

    assert snapshot.lat == 35.1815
    assert snapshot.lon == 136.9066
    assert snapshot.timezone == "Asia/Tokyo"
    assert snapshot.timezone_offset == 32400
    assert snapshot.current.temp == 18.64
    assert snapshot.current.weather[0].description == "scattered clouds"
    assert len(snapshot.minutely) == 2
    assert [hour.dt for hour in snapshot.hourly] == [1792400400, 1792404000, 1792407600]
    assert [day.dt for day in snapshot.daily] == [1792411200, 1792497600, 1792584000]
    assert snapshot.hourly[1].rain is not None
    assert snapshot.hourly[1].rain.one_hour == 0.31
    assert snapshot.alerts[0].event == "Heavy rain advisory"
    assert snapshot.alerts[0].tags == ("Rain", "Flood")


def test_round_trip_preserves_every_declared_field() -> None:
    payload = _fixture_payload()
    snapshot = parse_forecast(json.dumps(payload))

    dumped = snapshot.model_dump(mode="json", by_alias=True, exclude_unset=True)
    expected = copy.deepcopy(payload)
    expected.pop("source")  # unknown keys are ignored
    assert dumped == expected


def test_missing_daily_rain_decodes_to_none_not_zero() -> None:
    snapshot = parse_forecast(_fixture_text())
    assert snapshot.daily[0].rain == 2.37
    assert snapshot.daily[1].rain is None
    assert snapshot.daily[2].wind_gust is None


def test_optional_hourly_fields_stay_absent() -> None:
    snapshot = parse_forecast(_fixture_text())
    last = snapshot.hourly[2]
    assert last.visibility is None
    assert last.wind_gust is None
    assert last.rain is None


def test_bytes_body_is_accepted() -> None:
    snapshot = parse_forecast(_fixture_text().encode("utf-8"))
    assert snapshot.timezone == "Asia/Tokyo"


def test_missing_optional_sequences_default_to_empty() -> None:
    payload = _fixture_payload()
    for key in ("minutely", "hourly", "daily", "alerts"):
        payload.pop(key)
    snapshot = parse_forecast(json.dumps(payload))
    assert snapshot.minutely == ()
    assert snapshot.hourly == ()
    assert snapshot.daily == ()
    assert snapshot.alerts == ()


@pytest.mark.parametrize("body", [None, "", "   \n", "null", "{}", "[]", "42", b""])
def test_empty_or_absent_root_raises(body: str | bytes | None) -> None:
    with pytest.raises(ForecastParseError):
        parse_forecast(body)


def test_non_json_body_raises() -> None:
    with pytest.raises(ForecastParseError, match="not valid JSON"):
        parse_forecast("<html>Service Unavailable</html>")


def test_schema_violation_raises_with_cause() -> None:
    payload = _fixture_payload()
    del payload["current"]
    with pytest.raises(ForecastParseError, match="expected schema") as excinfo:
        parse_forecast(json.dumps(payload))
    assert isinstance(excinfo.value.__cause__, ValidationError)


def test_schema_violation_message_is_one_line() -> None:
    payload = _fixture_payload()
    del payload["current"]
    payload["daily"][0]["moon_phase"] = "full"
    with pytest.raises(ForecastParseError) as excinfo:
        parse_forecast(json.dumps(payload))
    message = str(excinfo.value)
    assert "\n" not in message
    assert "(2 error(s))" in message
    assert "current: Field required" in message
    assert "daily.0.moon_phase:" in message
    assert "errors.pydantic.dev" not in message


def test_wrong_field_type_raises() -> None:
    payload = _fixture_payload()
    payload["daily"][0]["moon_phase"] = "full"
    with pytest.raises(ForecastParseError):
        parse_forecast(json.dumps(payload))


def test_snapshot_is_immutable() -> None:
    snapshot = parse_forecast(_fixture_text())
    with pytest.raises(ValidationError):
        snapshot.timezone = "UTC"  # type: ignore[misc]
    assert isinstance(snapshot, ForecastSnapshot)
