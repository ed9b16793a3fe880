# test/test_health.py

def test_health(client):
    r = client.get("/")
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert "proxy" in body["message"].lower()


def test_chat_is_post_only(client):
    r = client.get("/api/chat")
    assert r.status_code == 405
