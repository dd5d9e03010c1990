import io

import pytest

from deskapps.tasks import TaskIndexError, TaskList, main


def test_add_creates_pending_task():
    tasks = TaskList()
    task = tasks.add("Write", "the report")
    assert task.completed is False
    assert list(tasks) == [task]
    assert len(tasks) == 1


def test_mark_completed_by_number():
    tasks = TaskList()
    tasks.add("a", "first")
    second = tasks.add("b", "second")
    assert tasks.mark_completed(2) is second
    assert [t.completed for t in tasks] == [False, True]


@pytest.mark.parametrize("number", [0, -1, 3])
def test_mark_completed_out_of_range(number):
    tasks = TaskList()
    tasks.add("a", "x")
    tasks.add("b", "y")
    with pytest.raises(TaskIndexError):
        tasks.mark_completed(number)
    assert not any(t.completed for t in tasks)


def test_index_error_is_index_error():
    with pytest.raises(IndexError):
        TaskList().mark_completed(1)


def test_empty_report():
    assert TaskList().report() == "No tasks to show."


def test_report_lines():
    tasks = TaskList()
    tasks.add("Write", "the report")
    tasks.add("Send", "the mail")
    tasks.mark_completed(1)
    assert tasks.report().splitlines() == [
        "Tasks:",
        "1. Write - the report [Completed]",
        "2. Send - the mail [Pending]",
    ]


def test_main_session(monkeypatch, capsys):
    text = "2\n1\nWrite\nthe report\n3\n5\n3\n1\n2\n9\n4\n"
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "No tasks to show." in out
    assert "Task added successfully!" in out
    assert "Invalid task number." in out
    assert "Task marked as completed." in out
    assert "1. Write - the report [Completed]" in out
    assert "Invalid choice. Please enter a number from 1 to 4." in out