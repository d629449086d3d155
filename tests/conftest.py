"""Shared pytest fixtures for the geoson test suite."""

from pathlib import Path

import pytest

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
# Sample GeoJSON file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def enu_mixed_geojson(data_dir: Path) -> Path:
    """ENU collection with one Point, Line, Path and Polygon plus global properties."""
    return data_dir / "01_enu_mixed_shapes.geojson"


@pytest.fixture()
def wgs84_collection_geojson(data_dir: Path) -> Path:
    """EPSG:4326 collection with a GeometryCollection and a null-geometry feature."""
    return data_dir / "02_wgs84_geometry_collection.geojson"


@pytest.fixture()
def multi_geometries_geojson(data_dir: Path) -> Path:
    """ECEF-tagged collection with MultiPoint, MultiLineString and MultiPolygon."""
    return data_dir / "03_multi_geometries.geojson"


# ---------------------------------------------------------------------------
# Edge-case GeoJSON file fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def not_json_geojson(edge_cases_dir: Path) -> Path:
    """Path to a truncated file that is not valid JSON."""
    return edge_cases_dir / "11_not_json.geojson"


@pytest.fixture()
def missing_datum_geojson(edge_cases_dir: Path) -> Path:
    """Path to a collection without ``properties.datum``."""
    return edge_cases_dir / "12_missing_datum.geojson"


@pytest.fixture()
def unknown_crs_geojson(edge_cases_dir: Path) -> Path:
    """Path to a collection with an unsupported CRS string."""
    return edge_cases_dir / "13_unknown_crs.geojson"


@pytest.fixture()
def bare_point_geojson(edge_cases_dir: Path) -> Path:
    """Path to a bare Point geometry carrying the header as a foreign member."""
    return edge_cases_dir / "14_bare_point.geojson"


@pytest.fixture()
def unknown_geometry_geojson(edge_cases_dir: Path) -> Path:
    """Path to a collection with one unsupported geometry type."""
    return edge_cases_dir / "15_unknown_geometry_type.geojson"
