from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

from .helpers import FakeResponse, solar_payload

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=10)
    at.run()
    assert not at.exception
    return at


def metrics(at):
    return {m.label: m.value for m in at.metric}


def fill_form(at, address="1 Main St", business_type="Office"):
    at.text_input(key="address").input(address).run()
    at.selectbox(key="business_type").select(business_type).run()
    assert not at.exception
    return at


def scan_button(at):
    return at.button[0]


def test_initial_page_has_no_estimate_or_results(app, solar_api):
    assert scan_button(app).disabled
    assert metrics(app) == {}
    assert solar_api.calls == []


def test_estimate_appears_and_enables_submit(app, solar_api):
    solar_api.response = FakeResponse(solar_payload(100, 10))

    fill_form(app)

    assert metrics(app) == {
        "📍 Estimated Building Size": "1,076 ft²",
        "🧮 Estimated Monthly Usage": "1,345 kWh",
    }
    assert not scan_button(app).disabled
    assert "Estimated ROI" not in metrics(app)
    assert solar_api.calls[0][1]["json"] == {"address": "1 Main St"}


def test_failed_estimate_keeps_submit_disabled(app, solar_api):
    solar_api.response = FakeResponse(status_code=500)

    fill_form(app)

    assert scan_button(app).disabled
    assert metrics(app) == {}


def test_scan_shows_results(app, solar_api):
    solar_api.response = FakeResponse(solar_payload(100, 10))
    fill_form(app)

    scan_button(app).click().run()

    assert not app.exception
    shown = metrics(app)
    assert shown["Estimated Roof Size"] == "1,076 ft²"
    assert shown["Estimated Monthly Usage"] == "1,345 kWh"
    assert shown["System Size Needed"] == "10 kW"
    assert shown["Estimated Annual Savings"] == "$5,649"
    assert shown["Estimated Build Cost"] == "$21,500"
    assert shown["Estimated ROI"] == "26%"
    # One call for the estimate, one for the scan
    assert len(solar_api.calls) == 2


def test_zero_system_size_shows_undefined_roi(app, solar_api):
    solar_api.response = FakeResponse(solar_payload(100, 0))
    fill_form(app)

    scan_button(app).click().run()

    assert not app.exception
    shown = metrics(app)
    assert shown["Estimated Build Cost"] == "$0"
    assert shown["Estimated ROI"] == "inf%"
    assert any(
        c.value == "ROI is undefined because the estimated build cost is $0."
        for c in app.caption
    )


def test_failed_scan_keeps_previous_results(app, solar_api):
    solar_api.response = FakeResponse(solar_payload(100, 10))
    fill_form(app)
    scan_button(app).click().run()

    solar_api.response = FakeResponse(status_code=502)
    scan_button(app).click().run()

    assert not app.exception
    assert metrics(app)["Estimated ROI"] == "26%"
    assert any("API error: 502" in w.value for w in app.warning)
