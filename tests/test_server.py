import pytest

from huffcoder import server


@pytest.fixture
def client():
	server.app.config["TESTING"] = True
	with server.app.test_client() as client:
		yield client


def test_health(client):
	response = client.get("/health")
	assert response.status_code == 200
	assert response.get_json()["status"] == "healthy"
	assert response.headers["Access-Control-Allow-Origin"] == "*"


def test_compress(client):
	response = client.post("/compress", json={"text": "aabbbc"})
	assert response.status_code == 200
	body = response.get_json()
	assert body["bitstream"] == "000011101"
	assert body["bit_count"] == 9
	assert body["decoded_text"] == "aabbbc"
	assert body["codes"] == {"a": "00", "b": "1", "c": "01"}
	assert body["frequencies"] == {"a": 2, "b": 3, "c": 1}


def test_compress_empty_text(client):
	response = client.post("/compress", json={"text": ""})
	assert response.status_code == 400
	assert "empty" in response.get_json()["error"]


def test_compress_requires_json(client):
	response = client.post("/compress", data="text")
	assert response.status_code == 400


def test_compress_requires_text_field(client):
	response = client.post("/compress", json={"message": "hi"})
	assert response.status_code == 400


def test_compress_text_too_long(client, monkeypatch):
	monkeypatch.setattr(server, "MAX_TEXT_LENGTH", 5)
	response = client.post("/compress", json={"text": "abcdefg"})
	assert response.status_code == 400


def test_compress_returns_rendered_tree(client):
	body = client.post("/compress", json={"text": "aabbbc"}).get_json()
	assert "tree" not in body
	assert body["tree_text"].splitlines()[1] == "6"
