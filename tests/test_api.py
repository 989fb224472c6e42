import pytest
from fastapi.testclient import TestClient

from api import app
from explainer.config import Settings, get_settings

SECRET = "s3cret"
AUTH = {"Authorization": f"Bearer {SECRET}"}


@pytest.fixture
def client():
	app.dependency_overrides[get_settings] = lambda: Settings(SHARED_SECRET=SECRET)
	yield TestClient(app)
	app.dependency_overrides.clear()


def test_usage_page(client):
	resp = client.get("/")
	assert resp.status_code == 200
	assert resp.headers["content-type"].startswith("text/html")
	assert "explainCode" in resp.text


def test_missing_token(client):
	resp = client.post("/", json={"method": "explainCode", "params": ["", "python"]})
	assert resp.status_code == 401
	assert resp.text == "Unauthorized"


def test_wrong_token(client):
	resp = client.post(
		"/",
		json={"method": "explainCode", "params": ["", "python"]},
		headers={"Authorization": "Bearer nope"},
	)
	assert resp.status_code == 401


def test_empty_secret_rejects_everything():
	app.dependency_overrides[get_settings] = lambda: Settings(SHARED_SECRET="")
	try:
		resp = TestClient(app).post(
			"/",
			json={"method": "explainCode", "params": ["", "python"]},
			headers={"Authorization": "Bearer "},
		)
	finally:
		app.dependency_overrides.clear()
	assert resp.status_code == 401


@pytest.mark.parametrize(
	"body",
	[
		{"method": "other", "params": ["", "python"]},
		{"method": "explainCode", "params": ["only code"]},
		{"method": "explainCode", "params": "not a list"},
		{"method": "explainCode", "params": [1, "python"]},
		["explainCode"],
	],
)
def test_invalid_method_or_params(client, body):
	resp = client.post("/", json=body, headers=AUTH)
	assert resp.status_code == 400
	assert resp.text == "Invalid method or parameters"


def test_malformed_json(client):
	resp = client.post("/", content=b"{not json", headers={**AUTH, "Content-Type": "application/json"})
	assert resp.status_code == 500
	assert resp.text.startswith("Error processing request:")


def test_explain_code(client):
	resp = client.post(
		"/",
		json={"method": "explainCode", "params": ["def f(x):\n    return x\n", "python"]},
		headers=AUTH,
	)
	assert resp.status_code == 200
	result = resp.json()["result"]
	assert "## Architecture Diagram" in result
	assert "- f: F - " in result
