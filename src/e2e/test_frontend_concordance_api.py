import pytest
from concordance.engine import Engine
from frontend.web import app as flask_app

@pytest.fixture
def client(monkeypatch):
    import frontend.web as webmod
    monkeypatch.setattr(webmod, "_engine", Engine())
    return flask_app.test_client()

@pytest.mark.e2e
def test_frontend_concordance_api_json(client):
    rv = client.post("/api/concordance", json={"text": "cat sat. the cat ran. cat cat."})
    assert rv.status_code == 200
    data = rv.get_json()
    assert isinstance(data, list) and data
    first = data[0]
    for key in ("word", "count", "sentences", "record"):
        assert key in first
    assert first == {"word": "cat", "count": 4, "sentences": [0, 1, 2, 2], "record": "{4:0,1,2,2}"}

@pytest.mark.e2e
def test_frontend_accepts_form_field(client):
    rv = client.post("/api/concordance", data={"text": "Hello world."})
    assert rv.status_code == 200
    assert [r["word"] for r in rv.get_json()] == ["hello", "world"]

@pytest.mark.e2e
def test_frontend_plain_text_report(client):
    rv = client.post("/api/concordance.txt", json={"text": "Hi..  Bye."})
    assert rv.status_code == 200
    assert rv.mimetype == "text/plain"
    assert rv.data.decode("utf-8").splitlines() == ["bye\t{1:2}", "hi\t{1:0}"]

@pytest.mark.e2e
def test_frontend_missing_text_is_400(client):
    rv = client.post("/api/concordance", json={"body": "x"})
    assert rv.status_code == 400
    assert "error" in rv.get_json()
    rv = client.post("/api/concordance.txt", json={"text": 3})
    assert rv.status_code == 400
    assert "error" in rv.get_json()

@pytest.mark.e2e
def test_frontend_empty_text_is_empty_list(client):
    rv = client.post("/api/concordance", json={"text": ""})
    assert rv.status_code == 200
    assert rv.get_json() == []

@pytest.mark.e2e
def test_frontend_health_and_home(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.get_json() == {"ok": True}
    r = client.get("/")
    assert r.status_code == 200
    html = r.data.decode("utf-8", errors="ignore").lower()
    assert "<form" in html and "concordance" in html

@pytest.mark.e2e
def test_frontend_plain_text_empty_report(client):
    rv = client.post("/api/concordance.txt", json={"text": "..."})
    assert rv.status_code == 200
    assert rv.data == b""
