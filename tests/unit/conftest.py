# -*- coding: utf-8 -*-
import io
import json
import time
from unittest.mock import Mock

import pytest
from invoke import MockContext, Result
from rich.console import Console

from vvm import ShellRunner, StatusReporter, VmController


@pytest.fixture
def reporter():
    return StatusReporter(
        console=Console(file=io.StringIO(), width=200),
        error_console=Console(file=io.StringIO(), width=200)
    )


@pytest.fixture
def home(tmp_path, monkeypatch):
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("USERPROFILE", raising=False)
    return tmp_path


@pytest.fixture
def write_config(home):
    def _write(data):
        path = home / "vvm.config.json"
        path.write_text(data if isinstance(data, str) else json.dumps(data))
        return path

    return _write


@pytest.fixture
def sleeps(monkeypatch):
    calls = []
    monkeypatch.setattr(time, "sleep", calls.append)
    return calls


@pytest.fixture
def make_context():
    """
    MockContext answering only the given commands, with ``run`` wrapped
    in a Mock so the issued command lines can be inspected.
    """
    def _make(results=None):
        context = MockContext(run=results or {})
        context.run = Mock(wraps=context.run)
        return context

    return _make


@pytest.fixture
def make_controller(reporter, make_context):
    def _make(results=None):
        context = make_context(results)
        return VmController(runner=ShellRunner(context=context), reporter=reporter), context

    return _make


def issued(context) -> list:
    return [call.args[0] for call in context.run.call_args_list]


def stdout_of(reporter: StatusReporter) -> str:
    return reporter.console.file.getvalue()


def stderr_of(reporter: StatusReporter) -> str:
    return reporter.error_console.file.getvalue()


def ok(stdout: str = "", stderr: str = "", exited: int = 0) -> Result:
    return Result(stdout=stdout, stderr=stderr, exited=exited)


def fail(stderr: str = "") -> Result:
    return Result(stderr=stderr, exited=1)
