import base64
import json


def _segment(value) -> str:
    return base64.urlsafe_b64encode(json.dumps(value).encode()).rstrip(b"=").decode()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_diff_endpoint(client):
    response = client.post("/api/diff", json={"old_text": "a\nb\nc", "new_text": "a\nx\nc"})
    assert response.status_code == 200
    data = response.json()
    assert [(p["kind"], p["text"]) for p in data["parts"]] == [
        ("unchanged", "a\n"),
        ("removed", "b\n"),
        ("added", "x\n"),
        ("unchanged", "c"),
    ]
    assert data["stats"] == {"added": 1, "removed": 1, "unchanged": 2}
    assert data["unified"] == "  a\n- b\n+ x\n  c"


def test_diff_endpoint_empty_inputs(client):
    response = client.post("/api/diff", json={})
    assert response.status_code == 200
    assert response.json()["stats"] == {"added": 0, "removed": 0, "unchanged": 0}


def test_regex_endpoint(client):
    response = client.post("/api/regex/match", json={"pattern": "a+", "flags": "g", "subject": "aaa baa"})
    assert response.status_code == 200
    data = response.json()
    assert data["match_count"] == 2
    assert [(m["start"], m["end"]) for m in data["matches"]] == [(0, 3), (5, 7)]
    assert "".join(s["text"] for s in data["segments"]) == "aaa baa"


def test_regex_endpoint_compile_error(client):
    response = client.post("/api/regex/match", json={"pattern": "(abc", "subject": "abc"})
    assert response.status_code == 400
    assert "missing )" in response.json()["detail"]


def test_regex_endpoint_bad_flags(client):
    response = client.post("/api/regex/match", json={"pattern": "a", "flags": "gq", "subject": "a"})
    assert response.status_code == 400


def test_cron_describe(client):
    response = client.post("/api/cron/describe", json={"expression": "0 9 * * 1"})
    assert response.status_code == 200
    data = response.json()
    assert data["description"] == "at minute 0 at 9:00 on Monday"
    assert data["fields"][0] == {"kind": "value", "value": 0}
    assert data["fields"][2] == {"kind": "any"}


def test_cron_describe_error(client):
    response = client.post("/api/cron/describe", json={"expression": "60 * * * *"})
    assert response.status_code == 400
    assert "minute" in response.json()["detail"]


def test_cron_presets(client):
    response = client.get("/api/cron/presets")
    assert response.status_code == 200
    assert {"label": "Every minute", "expression": "* * * * *"} in response.json()


def test_token_decode(client):
    token = f"{_segment({'alg': 'HS256'})}.{_segment({'exp': 1000})}.sig"
    response = client.post("/api/token/decode", json={"token": token, "now_ms": 2_000_000})
    assert response.status_code == 200
    data = response.json()
    assert data["payload"] == {"exp": 1000}
    assert data["expired"] is True
    assert data["dates"]["exp"].startswith("1970-01-01T00:16:40")
    assert data["dates"]["iat"] is None


def test_token_decode_error(client):
    response = client.post("/api/token/decode", json={"token": "a.b"})
    assert response.status_code == 400
    assert response.json()["detail"] == "wrong segment count"


def test_hash_endpoint(client):
    response = client.post("/api/generators/hash", json={"text": "abc", "algorithm": "MD5"})
    assert response.status_code == 200
    assert response.json() == {"algorithm": "md5", "digest": "900150983cd24fb0d6963f7d28e17f72"}

    response = client.post("/api/generators/hash", json={"text": "abc", "algorithm": "crc32"})
    assert response.status_code == 400


def test_password_endpoint(client):
    response = client.post("/api/generators/password", json={"length": 12})
    assert response.status_code == 200
    assert len(response.json()["password"]) == 12

    response = client.post("/api/generators/password", json={"length": 2})
    assert response.status_code == 400


def test_uuid_endpoint(client):
    response = client.get("/api/generators/uuid", params={"count": 2})
    assert response.status_code == 200
    assert len(response.json()["uuids"]) == 2


def test_workspace_round_trip(client):
    assert client.get("/api/workspace").json() == {"activeView": "json", "scratchpad": ""}

    response = client.put("/api/workspace", json={"activeView": "diff", "scratchpad": "notes"})
    assert response.status_code == 200
    assert response.json() == {"activeView": "diff", "scratchpad": "notes"}

    response = client.put("/api/workspace", json={"scratchpad": "more notes"})
    assert response.json() == {"activeView": "diff", "scratchpad": "more notes"}

    response = client.delete("/api/workspace/scratchpad")
    assert response.json() == {"activeView": "diff", "scratchpad": ""}


def test_workspace_rejects_unknown_view(client):
    response = client.put("/api/workspace", json={"activeView": "spreadsheet"})
    assert response.status_code == 422
