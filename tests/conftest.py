# tests/conftest.py
import json
import pytest
from fastapi.testclient import TestClient

from catalog.main import app
from catalog.loader import parse_export
from catalog.store import Catalog, build_catalog, get_catalog, set_catalog


# --- A small export covering the messy shapes seen in the real data ---
@pytest.fixture
def sample_export():
    return {
        "meta": {"source": "Eames Institute sample export", "exportedAt": "2024-05-01T12:00:00Z"},
        "records": [
            {
                "object_id": "EI-001",
                "accession_number": " 2001.1 ",
                "title": "Lounge Chair Wood (LCW)",
                "creator": ["Charles Eames", "Ray Eames"],
                "date": {"display": "1945–1946", "earliest": 1945, "latest": 1946},
                "object_type": "furniture",
                "department": "Design",
                "materials": ["molded plywood", "rubber shock mounts"],
                "dimensions": {"h": {"value": 26, "unit": "in"}, "w": {"value": 21, "unit": "in"}},
                "flags": {"possible_duplicate": True, "prototype": False},
                "related": [
                    {"type": "paired-with", "object_id": "EI-002"},
                    {"type": "variant-of", "object_id": "EI-999"},
                ],
            },
            {
                "object_id": "EI-002",
                "accession_number": None,
                "title": "Wire Mesh Chair",
                "creator": "Unknown",
                "date": 1951,
                "object_type": "furniture",
                "department": "Design",
                "materials": "wire mesh, metal frame",
                "dimensions": {"display": "?", "h": 10, "unit": "cm"},
                "geo": {"country": "USA", "region": None},
            },
            {
                "object_id": "EI-003",
                "accession_number": "",
                "title": None,
                "creator": [],
                "date": "unknown",
                "object_type": "photograph",
                "department": "Archive",
                "materials": [],
                "dimensions": None,
                "flags": {"needs_review": False},
                "related": [{"type": "paired-with"}],
                "legacy_code": "X-17",
            },
        ],
    }


@pytest.fixture
def export_file(tmp_path, sample_export):
    p = tmp_path / "collection.json"
    p.write_text(json.dumps(sample_export), encoding="utf-8")
    return p


@pytest.fixture
def seeded_catalog(sample_export):
    return build_catalog(parse_export(sample_export))


# --- Override the catalog dependency with the seeded batch ---
@pytest.fixture
def seed_sample(seeded_catalog):
    app.dependency_overrides[get_catalog] = lambda: seeded_catalog
    yield seeded_catalog
    app.dependency_overrides.clear()


# --- Each test starts from an empty process-wide catalog ---
@pytest.fixture(autouse=True)
def reset_catalog():
    set_catalog(Catalog())
    yield
    set_catalog(Catalog())


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
