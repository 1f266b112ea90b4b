def test_ingest_then_read(client, sample_export):
    r = client.post("/ingest", json=sample_export)
    assert r.status_code == 200
    p = r.json()
    assert p["ok"] is True
    assert p["ingested"] == 3
    assert p["unresolved"] == 1
    assert p["source"] == "Eames Institute sample export"

    r2 = client.get("/items/EI-003")
    assert r2.status_code == 200
    assert r2.json()["title"] == "Unknown Title"


def test_ingest_replaces_previous_batch(client, sample_export):
    client.post("/ingest", json=sample_export)
    r = client.post("/ingest", json=[{"object_id": "N-1", "title": "New", "object_type": "x", "department": "y"}])
    assert r.status_code == 200
    assert r.json()["source"] is None
    ids = [i["id"] for i in client.get("/items").json()]
    assert ids == ["N-1"]


def test_ingest_rejects_bad_payloads(client):
    assert client.post("/ingest", json=[]).status_code == 400
    assert client.post("/ingest", json={"meta": {}}).status_code == 400
    assert client.post("/ingest", json={"records": [1, 2]}).status_code == 400
