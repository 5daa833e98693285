"""Tests for the task handler registry."""

import pytest

from jobs import registry
from jobs.base import AbstractTaskHandler
from jobs.registry import get_task_handler, register_handler
from jobs.sleep_job import SleepTask
from jobs.word_count import WordCountTask
from models.enums import TaskType


def test_every_task_type_has_a_handler():
    for task_type in TaskType:
        assert get_task_handler(task_type.value).task_type == task_type.value


def test_returns_shared_instances():
    assert isinstance(get_task_handler("sleep"), SleepTask)
    assert isinstance(get_task_handler("word_count"), WordCountTask)
    assert get_task_handler("sleep") is get_task_handler("sleep")


def test_unknown_task_type():
    with pytest.raises(ValueError, match="Unknown task type"):
        get_task_handler("thumbnail")


class _EchoTask(AbstractTaskHandler):
    def run(self, params: dict) -> dict:
        return dict(params)

    @property
    def task_type(self) -> str:
        return "echo"


def test_register_handler_adds_new_type(monkeypatch):
    # work on a copy so the extra type doesn't outlive this test
    monkeypatch.setattr(registry, "_REGISTRY", dict(registry._REGISTRY))
    handler = _EchoTask()

    register_handler(handler)

    assert get_task_handler("echo") is handler
    assert isinstance(get_task_handler("sleep"), SleepTask)
