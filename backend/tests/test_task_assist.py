from __future__ import annotations

import pytest

from zenith.services.task_assist import ResourceLookupHandler, TaskAtomizationHandler


@pytest.mark.parametrize(
    ("handler_cls", "empty"),
    [
        (TaskAtomizationHandler, {"subtasks": []}),
        (ResourceLookupHandler, {"resources": []}),
    ],
)
def test_missing_credential_returns_empty_without_network(fake_model, handler_cls, empty) -> None:
    client = fake_model('{"subtasks": ["x"], "resources": [{"title": "t", "url": "u"}]}', available=False)

    assert handler_cls(client).handle("Write unit tests") == empty
    assert client.calls == 0


@pytest.mark.parametrize(
    ("handler_cls", "empty"),
    [
        (TaskAtomizationHandler, {"subtasks": []}),
        (ResourceLookupHandler, {"resources": []}),
    ],
)
def test_unusable_reply_returns_empty(fake_model, handler_cls, empty) -> None:
    for client in (fake_model("Sorry, no."), fake_model("{not json}")):
        assert handler_cls(client).handle("Write unit tests") == empty
        assert client.calls == 1


def test_call_error_returns_empty(fake_model, call_error) -> None:
    client = fake_model(error=call_error)

    assert TaskAtomizationHandler(client).handle("Refactor parser") == {"subtasks": []}
    assert ResourceLookupHandler(client).handle("Refactor parser") == {"resources": []}


def test_atomize_returns_parsed_reply_verbatim(fake_model) -> None:
    subtasks = [f"step {n}" for n in range(1, 8)]
    client = fake_model('```json\n{"subtasks": ' + str(subtasks).replace("'", '"') + "}\n```")

    result = TaskAtomizationHandler(client).handle("Plan the sprint")

    assert result == {"subtasks": subtasks}
    assert client.prompts[0].endswith("Task: Plan the sprint")
    assert "3-5 small, actionable sub-tasks" in client.prompts[0]


def test_resources_items_are_not_validated(fake_model) -> None:
    client = fake_model('Here you go: {"resources": [{"title": "Go by Example"}, {"url": "https://go.dev"}]}')

    result = ResourceLookupHandler(client).handle("Learn goroutines")

    assert result == {"resources": [{"title": "Go by Example"}, {"url": "https://go.dev"}]}
    assert "2-3 high-quality learning resources" in client.prompts[0]


def test_missing_result_key_is_filled_with_empty_list(fake_model) -> None:
    client = fake_model('{"note": "nothing to add"}')

    assert TaskAtomizationHandler(client).handle("Tidy desk") == {"note": "nothing to add", "subtasks": []}


@pytest.mark.parametrize(
    "reply",
    [
        '{"subtasks": ' + "9" * 5000 + "}",
        '{"subtasks": ' + "[" * 100000 + "]" * 100000 + "}",
    ],
)
def test_pathological_json_returns_empty(fake_model, reply) -> None:
    assert TaskAtomizationHandler(fake_model(reply)).handle("Write docs") == {"subtasks": []}
    assert ResourceLookupHandler(fake_model(reply.replace("subtasks", "resources"))).handle("Write docs") == {
        "resources": []
    }
