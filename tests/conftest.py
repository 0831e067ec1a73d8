"""Shared pytest fixtures for the tiny_kml test suite."""

from pathlib import Path

import pytest

from tiny_kml.models import Document, LineString, Location, Placemark, Point

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"
EDGE_CASES_DIR = DATA_DIR / "edge_cases"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


@pytest.fixture()
def edge_cases_dir() -> Path:
    """Return the path to the edge-cases test data directory."""
    return EDGE_CASES_DIR


# ---------------------------------------------------------------------------
# Sample KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def survey_track_kml(data_dir: Path) -> Path:
    """Path to a KML with one Point, one LineString and a bare Point."""
    return data_dir / "01_survey_track.kml"


# ---------------------------------------------------------------------------
# Edge-case KML file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_xml_kml(edge_cases_dir: Path) -> Path:
    """Path to a file that is not valid XML."""
    return edge_cases_dir / "11_malformed_not_xml.kml"


@pytest.fixture()
def self_closing_name_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose document name is ``<name/>``."""
    return edge_cases_dir / "12_self_closing_name.kml"


@pytest.fixture()
def empty_kml(edge_cases_dir: Path) -> Path:
    """Path to a valid KML with no placemarks."""
    return edge_cases_dir / "13_empty_no_placemarks.kml"


@pytest.fixture()
def no_geometry_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose only Placemark has no geometry."""
    return edge_cases_dir / "14_placemark_without_geometry.kml"


@pytest.fixture()
def no_coordinates_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML whose LineString has no coordinates element."""
    return edge_cases_dir / "15_geometry_without_coordinates.kml"


@pytest.fixture()
def malformed_coordinates_kml(edge_cases_dir: Path) -> Path:
    """Path to a KML with a one-field coordinate token."""
    return edge_cases_dir / "16_malformed_coordinates.kml"


# ---------------------------------------------------------------------------
# In-memory model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_document() -> Document:
    """A document with a Point and a LineString placemark."""
    return Document(
        name="Field Trip",
        description="Day one",
        placemarks=[
            Placemark(
                "Camp",
                "Tents",
                Point(Location(-122.0841, 37.4220, 12.5), extrude=True, tessellate=True),
            ),
            Placemark(
                "Trail",
                "",
                LineString(
                    [
                        Location(-122.0841, 37.4220),
                        Location(-122.0850, 37.4231, 3.25),
                        Location(-122.0862, 37.4245, 7.0),
                    ],
                    extrude=False,
                    tessellate=True,
                ),
            ),
        ],
    )
