from conftest import FakeTransport, make_reply


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "ok"}


def test_lookup_found(client, transport):
    resp = client.post("/api/afm/lookup", json={"afm_for": "094014201", "look_date": "2024-05-17"})
    assert resp.status_code == 200
    body = resp.get_json()
    assert body["success"] is True
    assert body["data"]["found"] is True
    assert body["data"]["data"]["registration_date"] == "1998-01-02"
    assert list(body["data"]["data"]["activities"]) == ["46", "47"]
    assert "ΔΟΚΙΜΑΣΤΙΚΗ" in resp.get_data(as_text=True)
    assert transport.calls == [("afm_method", {"afm_called_by": "", "afm_called_for": "094014201", "as_on_date": "2024-05-17"})]


def test_lookup_uses_configured_caller_and_separator(app, client, transport):
    app.config["AFM_CALLED_BY"] = "123456789"
    app.config["ACTIVITY_SEPARATOR"] = "-"
    resp = client.post("/api/afm/lookup", json={"afmFor": "094014201"})
    assert resp.status_code == 200
    assert transport.calls[0][1]["afm_called_by"] == "123456789"
    items = resp.get_json()["data"]["data"]["activities"]["47"]["items"]
    assert items[0]["formatted_code"] == "47-91-00-00"


def test_lookup_missing_target(client, transport):
    resp = client.post("/api/afm/lookup", json={})
    assert resp.status_code == 400
    assert resp.get_json()["success"] is False
    assert transport.calls == []


def test_lookup_transport_failure(app, client, failing_transport):
    app.extensions["gsis"] = failing_transport
    resp = client.post("/api/afm/lookup", json={"afm_for": "094014201"})
    assert resp.status_code == 502
    assert resp.get_json()["error_msg"] == "Authentication failed"


def test_lookup_malformed_reply(app, client):
    app.extensions["gsis"] = FakeTransport(reply={"result": "garbage"})
    resp = client.post("/api/afm/lookup", json={"afm_for": "094014201"})
    assert resp.status_code == 422
    assert resp.get_json()["error_type"] == "reply"


def test_info(client, transport):
    resp = client.get("/api/afm/info")
    assert resp.status_code == 200
    assert resp.get_json() == {"success": True, "data": "RgWsPublic2 v.1.0.3 (2018-07-01)"}
    assert transport.calls == [("version_info", None)]


def test_lookup_rejects_non_object_body(client, transport):
    resp = client.post("/api/afm/lookup", json=["094014201"])
    assert resp.status_code == 400
    assert resp.get_json()["error_type"] == "request"
    assert transport.calls == []
