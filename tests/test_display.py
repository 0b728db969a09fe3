# ABOUTME: Contract tests for the rendering helpers.
# ABOUTME: Validates time-code formatting, unit labels, previews, and location headings.

import pytest

from weather_glass.display import (
    NO_TIDES_MESSAGE,
    distance_unit,
    format_time_code,
    hourly_preview,
    location_heading,
    location_meta,
    sample_wind,
    speed_unit,
    tide_preview,
)
from weather_glass.models import HistoricalDayEntry, HourlyEntry, LocationInfo, ManyTides, SingleTide


class TestFormatTimeCode:
    @pytest.mark.parametrize(
        "code,expected",
        [(900, "09:00"), (0, "00:00"), (2330, "23:30"), (30, "00:30"), ("300", "03:00"), ("1200", "12:00")],
    )
    def test_pads_and_inserts_colon(self, code, expected):
        """Time codes are left-padded to four digits with a colon before the minutes.

        Implementation: Formats integer and string codes.
        Passing implies: HHMM codes without separators render as HH:MM.
        """
        assert format_time_code(code) == expected

    def test_none_renders_empty(self):
        """A missing time code renders as an empty string.

        Implementation: Formats None.
        Passing implies: Hourly slots without a time do not crash rendering.
        """
        assert format_time_code(None) == ""


class TestUnitLabels:
    def test_metric_labels(self):
        """Metric units label speed in km/h and distance in km.

        Implementation: Asks for labels with units="m".
        Passing implies: Metric results render with metric suffixes.
        """
        assert speed_unit("m") == "km/h"
        assert distance_unit("m") == "km"

    @pytest.mark.parametrize("units", ["f", "s"])
    def test_non_metric_labels(self, units):
        """Imperial and scientific units label speed in mph and distance in mi.

        Implementation: Asks for labels with units f and s.
        Passing implies: Only metric switches to kilometre labels.
        """
        assert speed_unit(units) == "mph"
        assert distance_unit(units) == "mi"


class TestPreviews:
    def test_hourly_preview_limits_to_six(self):
        """hourly_preview keeps the first six slots in order.

        Implementation: Builds a day with eight hourly slots.
        Passing implies: Only the leading slots are shown.
        """
        day = HistoricalDayEntry(hourly=[HourlyEntry(time_code=i * 300) for i in range(8)])
        assert [h.time_code for h in hourly_preview(day)] == [0, 300, 600, 900, 1200, 1500]

    def test_tide_preview_shapes(self):
        """tide_preview handles the list, single, and missing tide shapes.

        Implementation: Previews ManyTides with five records, a SingleTide, and None.
        Passing implies: Renderers get a plain list for every shape.
        """
        many = ManyTides(records=[{"n": i} for i in range(5)])
        assert tide_preview(many) == [{"n": 0}, {"n": 1}, {"n": 2}, {"n": 3}]
        assert tide_preview(SingleTide(record={"n": 1})) == [{"n": 1}]
        assert tide_preview(None) == []
        assert "tide data was not returned" in NO_TIDES_MESSAGE

    def test_sample_wind_uses_first_hour(self):
        """sample_wind reads the first hourly slot, or returns Nones for an empty day.

        Implementation: Samples a day with two slots and an empty day.
        Passing implies: The marine summary has a wind sample when hourly data exists.
        """
        day = HistoricalDayEntry(
            hourly=[HourlyEntry(wind_speed=28, wind_direction="NW"), HourlyEntry(wind_speed=5, wind_direction="S")]
        )
        assert sample_wind(day) == (28, "NW")
        assert sample_wind(HistoricalDayEntry()) == (None, None)


class TestLocationText:
    def test_heading_and_meta(self):
        """Location heading and meta lines combine the location fields.

        Implementation: Renders a fully populated LocationInfo.
        Passing implies: The header shows name, country, region, and timezone.
        """
        loc = LocationInfo(name="New York", country="USA", region="New York", timezone_id="America/New_York")
        assert location_heading(loc) == "New York, USA"
        assert location_meta(loc) == "New York · Timezone: America/New_York"

    def test_heading_skips_missing_parts(self):
        """The heading omits missing parts instead of printing None.

        Implementation: Renders a LocationInfo with only a name.
        Passing implies: Sparse location blocks still render cleanly.
        """
        assert location_heading(LocationInfo(name="Oslo")) == "Oslo"
