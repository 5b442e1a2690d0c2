"""Shared test fixtures for Qualytics tests."""

import json
import logging
import os

import pytest

from builders import block, cls, function, if_, ident, lit, logical, method, program, ret, binary, function_expr


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Keep user/project config files and QUALYTICS_* variables out of tests."""
    home = tmp_path / "home"
    work = tmp_path / "work"
    home.mkdir()
    work.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.chdir(work)
    for key in list(os.environ):
        if key.startswith("QUALYTICS_"):
            monkeypatch.delenv(key)
    return work


@pytest.fixture(autouse=True)
def reset_qualytics_logger():
    """Drop handlers and level set by setup_logging() during a test."""
    yield
    logger = logging.getLogger("qualytics")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def write_tree(tmp_path):
    """Write an ESTree document to a JSON file and return its path."""

    def _write(document, name="ast.json"):
        path = tmp_path / name
        path.write_text(json.dumps(document), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_program():
    """A module with one function and a class holding one method.

    function check(a, b) {            // 1-5
        if (a && b) { return 1; }
        return 0;
    }
    class Shape { area() { return 0; } }   // 7-9
    """
    check = function(
        "check",
        block(
            if_(logical("&&", ident("a", 2), ident("b", 2), 2), block(ret(lit(1, 2), 2), line=2), line=2),
            ret(lit(0, 3), 3),
            line=1,
            end=5,
        ),
        params=[ident("a"), ident("b")],
        line=1,
        end=5,
    )
    area = method(
        "area",
        function_expr(block(ret(binary("*", lit(0, 8), lit(1, 8), 8), 8), line=8, end=8), line=8, end=8),
        line=8,
        end=8,
    )
    shape = cls("Shape", area, line=7, end=9)
    return program(check, shape, end=9)
