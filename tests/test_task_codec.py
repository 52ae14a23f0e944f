# tests/test_task_codec.py

from __future__ import annotations

from datetime import datetime

import pytest

from task_tracker.errors import FormatError
from task_tracker.tasks.task_codec import decode, encode
from task_tracker.tasks.task_models import Task, TaskStatus


def _entry(**overrides: object) -> str:
    fields = {
        "id": "1",
        "description": '"Task 1"',
        "status": '"TODO"',
        "createdAt": '"2023-01-01T12:00:00"',
        "updatedAt": '"2023-01-01T12:00:00"',
    }
    fields.update({k: str(v) for k, v in overrides.items()})
    return "{" + ", ".join(f'"{k}": {v}' for k, v in fields.items()) + "}"


def test_encode_empty_is_empty_list() -> None:
    assert encode([]) == "[]"


def test_encode_layout_and_field_order() -> None:
    task = Task(
        id=1,
        description="Buy milk",
        status=TaskStatus.TODO,
        created_at=datetime(2024, 1, 1, 12, 0, 0),
        updated_at=datetime(2024, 1, 2, 8, 5, 9),
    )

    assert encode([task]) == (
        "[\n"
        '  {"id": 1, "description": "Buy milk", "status": "TODO", '
        '"createdAt": "2024-01-01T12:00:00", "updatedAt": "2024-01-02T08:05:09"}\n'
        "]"
    )


def test_encode_one_entry_per_line(sample_tasks: list[Task]) -> None:
    lines = encode(sample_tasks).splitlines()

    assert lines[0] == "["
    assert lines[-1] == "]"
    assert len(lines) == len(sample_tasks) + 2
    assert lines[1].endswith("},")
    assert lines[-2].endswith("}")


def test_encode_escapes_description() -> None:
    task = Task(
        id=7,
        description='say "hi"\nnext\rline\ttab',
        status=TaskStatus.DONE,
        created_at=datetime(2024, 1, 1),
        updated_at=datetime(2024, 1, 1),
    )

    text = encode([task])

    assert '"description": "say \\"hi\\"\\nnext\\rline\\ttab"' in text
    assert len(text.splitlines()) == 3


def test_round_trip_preserves_every_field(sample_tasks: list[Task]) -> None:
    assert decode(encode(sample_tasks)) == sample_tasks


def test_encode_is_stable_after_decode(sample_tasks: list[Task]) -> None:
    text = encode(sample_tasks)
    assert encode(decode(text)) == text


@pytest.mark.parametrize("text", ["", "   ", "\n\t \n", "[]", "  [ ]  \n"])
def test_decode_empty_inputs(text: str) -> None:
    assert decode(text) == []


def test_decode_two_entries_in_order() -> None:
    second = _entry(id=2, description='"Task 2"', status='"IN_PROGRESS"')
    text = "[\n  " + _entry() + ",\n  " + second + "\n]"

    tasks = decode(text)

    assert [t.id for t in tasks] == [1, 2]
    assert tasks[0].description == "Task 1"
    assert tasks[0].status is TaskStatus.TODO
    assert tasks[1].description == "Task 2"
    assert tasks[1].status is TaskStatus.IN_PROGRESS
    assert tasks[0].created_at == datetime(2023, 1, 1, 12, 0, 0)


def test_decode_ignores_field_order_and_layout() -> None:
    text = """
    [
        {
              "updatedAt" :"2023-03-04T05:06:07",
          "status":   "DONE",
            "description": "multi\\nline",
        "createdAt": "2023-03-01T00:00:00",
                "id": 42
        }
    ]
    """

    (task,) = decode(text)

    assert task.id == 42
    assert task.description == "multi\nline"
    assert task.status is TaskStatus.DONE
    assert task.created_at == datetime(2023, 3, 1, 0, 0, 0)
    assert task.updated_at == datetime(2023, 3, 4, 5, 6, 7)


def test_decode_ignores_unknown_fields() -> None:
    (task,) = decode("[" + _entry(priority='"high"') + "]")
    assert task.id == 1


@pytest.mark.parametrize(
    "text",
    [
        "[" + _entry(status='"BLOCKED"') + "]",
        "[" + _entry(status='"todo"') + "]",
        "[" + _entry(createdAt='"2023-01-01 12:00:00"') + "]",
        "[" + _entry(updatedAt='"2023-01-01T12:00:00.123"') + "]",
        "[" + _entry(updatedAt='"2023-01-01T12:00:00Z"') + "]",
        "[" + _entry(createdAt='"2023-02-30T12:00:00"') + "]",
        "[" + _entry(createdAt='"\u0662\u0660\u0662\u0664-01-01T12:00:00"') + "]",
        "[" + _entry(id="0") + "]",
        "[" + _entry(id='"1"') + "]",
        "[" + _entry(id="true") + "]",
        "[" + _entry(description="null") + "]",
        '[{"id": 1, "description": "no dates", "status": "TODO"}]',
        "[1, 2]",
        '{"id": 1}',
        "[{",
        "not a list",
    ],
)
def test_decode_rejects_malformed_text(text: str) -> None:
    with pytest.raises(FormatError):
        decode(text)


def test_format_error_is_a_value_error() -> None:
    with pytest.raises(ValueError, match="unknown status"):
        decode("[" + _entry(status='"LATER"') + "]")
