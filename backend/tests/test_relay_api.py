from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from zenith.llm.factory import get_model_client
from zenith.main import app
from zenith.services.synthetic_planner import generate_synthetic_plan


@pytest.fixture()
def client(fake_model):
    model = fake_model(available=False)
    app.dependency_overrides[get_model_client] = lambda: model
    with TestClient(app) as test_client:
        yield test_client, model
    app.dependency_overrides.clear()


def test_generate_plan_without_credential_returns_synthetic_plan(client):
    test_client, model = client

    response = test_client.post("/api/generate-plan", json={"prompt": "Learn Go in 2 months"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["meta"]["months"] == 2
    assert len(payload["plan"]) == 8
    assert len(payload["tasks"]) == 24
    assert model.calls == 0


def test_generate_plan_returns_model_plan(client):
    test_client, model = client
    model.api_key = "live"
    model.reply = '```json\n{"durationDays": 2, "tasks": [{"id": "t1", "text": "Read the tour", "done": false}]}\n```'

    response = test_client.post("/api/generate-plan", json={"prompt": "Learn Go in 2 days"})

    assert response.status_code == 200
    assert response.json() == {"durationDays": 2, "tasks": [{"id": "t1", "text": "Read the tour", "done": False}]}
    assert model.calls == 1


def test_generate_plan_falls_back_on_garbage(client):
    test_client, model = client
    model.api_key = "live"
    model.reply = "I cannot help with that."

    response = test_client.post("/api/generate-plan", json={"prompt": "Learn Lua"})

    assert response.status_code == 200
    assert response.json() == generate_synthetic_plan("Learn Lua").model_dump()


@pytest.mark.parametrize("body", [None, {}, {"prompt": ""}, {"prompt": "   "}, {"goal": "Learn Go"}])
def test_generate_plan_requires_prompt(client, body):
    test_client, model = client

    response = test_client.post("/api/generate-plan", json=body)

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing prompt"}
    assert model.calls == 0


def test_atomize_without_credential_returns_empty(client):
    test_client, model = client

    response = test_client.post("/api/atomize", json={"taskText": "Write the report"})

    assert response.status_code == 200
    assert response.json() == {"subtasks": []}
    assert model.calls == 0


def test_atomize_returns_model_subtasks(client):
    test_client, model = client
    model.api_key = "live"
    model.reply = '{"subtasks": ["Outline sections", "Draft intro", "Proofread"]}'

    response = test_client.post("/api/atomize", json={"taskText": "Write the report"})

    assert response.status_code == 200
    assert response.json() == {"subtasks": ["Outline sections", "Draft intro", "Proofread"]}


def test_resources_returns_model_resources(client):
    test_client, model = client
    model.api_key = "live"
    model.reply = 'Resources: {"resources": [{"title": "Tour of Go", "url": "https://go.dev/tour"}]}'

    response = test_client.post("/api/resources", json={"taskText": "Learn Go basics"})

    assert response.status_code == 200
    assert response.json() == {"resources": [{"title": "Tour of Go", "url": "https://go.dev/tour"}]}


def test_resources_model_failure_returns_empty(client, call_error):
    test_client, model = client
    model.api_key = "live"
    model.error = call_error

    response = test_client.post("/api/resources", json={"taskText": "Learn Go basics"})

    assert response.status_code == 200
    assert response.json() == {"resources": []}
    assert model.calls == 1


@pytest.mark.parametrize("route", ["/api/atomize", "/api/resources"])
@pytest.mark.parametrize("body", [None, {}, {"taskText": ""}, {"taskText": "   "}, {"task_text": ""}, {"text": "Write"}])
def test_task_routes_require_task_text(client, route, body):
    test_client, model = client

    response = test_client.post(route, json=body)

    assert response.status_code == 400
    assert response.json() == {"detail": "Missing taskText"}
    assert model.calls == 0


@pytest.mark.parametrize(
    ("route", "reply", "expected"),
    [
        ("/api/atomize", '{"subtasks": 5}', {"subtasks": 5}),
        ("/api/resources", '{"resources": true}', {"resources": True}),
    ],
)
def test_non_list_results_are_returned_verbatim(client, route, reply, expected):
    test_client, model = client
    model.api_key = "live"
    model.reply = reply

    response = test_client.post(route, json={"taskText": "Write"})

    assert response.status_code == 200
    assert response.json() == expected
