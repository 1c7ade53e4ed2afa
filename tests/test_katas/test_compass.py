"""Tests for the 32-point compass."""

import pytest

from katas.compass import CARDINALS, STEP, CompassPoint, build_compass_points


class TestCompassPoints:
    @pytest.fixture()
    def points(self) -> list[CompassPoint]:
        return build_compass_points()

    def test_count(self, points: list[CompassPoint]) -> None:
        assert len(points) == 32

    def test_abbreviations(self, points: list[CompassPoint]) -> None:
        assert [p.abbreviation for p in points] == [
            "N", "NbE", "NNE", "NEbN", "NE", "NEbE", "ENE", "EbN",
            "E", "EbS", "ESE", "SEbE", "SE", "SEbS", "SSE", "SbE",
            "S", "SbW", "SSW", "SWbS", "SW", "SWbW", "WSW", "WbS",
            "W", "WbN", "WNW", "NWbW", "NW", "NWbN", "NNW", "NbW",
        ]

    def test_azimuths(self, points: list[CompassPoint]) -> None:
        assert points[0] == CompassPoint(abbreviation="N", azimuth=0.0)
        assert points[1].azimuth == 11.25
        assert points[2].azimuth == 22.5
        assert points[16] == CompassPoint(abbreviation="S", azimuth=180.0)
        assert points[-1] == CompassPoint(abbreviation="NbW", azimuth=348.75)

    def test_evenly_spaced(self, points: list[CompassPoint]) -> None:
        for before, after in zip(points, points[1:]):
            assert after.azimuth - before.azimuth == STEP

    def test_cardinals_on_right_angles(self, points: list[CompassPoint]) -> None:
        by_name = {p.abbreviation: p.azimuth for p in points}
        assert [by_name[c] for c in CARDINALS] == [0.0, 90.0, 180.0, 270.0]

    def test_to_dict(self, points: list[CompassPoint]) -> None:
        assert points[2].to_dict() == {"abbreviation": "NNE", "azimuth": 22.5}

    def test_frozen(self, points: list[CompassPoint]) -> None:
        with pytest.raises(AttributeError):
            points[0].azimuth = 1.0  # type: ignore[misc]
