"""Tests for the package-level re-exports."""

import labutils


def test_generators_exported():
    assert labutils.logspace(0, 2, 3, base=2) == [1.0, 2.0, 4.0]
    assert labutils.geomspace(1, 100, 3)[-1] == 100


def test_pipe_composes_left_to_right():
    result = labutils.pipe(3, lambda x: x + 1, lambda x: x * 10)
    assert result == 40


def test_pipe_with_generators():
    total = labutils.pipe(labutils.geomspace(1, 16, 5), sum)
    assert total == 31.0


def test_compose_applies_right_to_left():
    f = labutils.compose(str, len)
    assert f([1, 2, 3]) == "3"


def test_here_resolves_against_project_root(tmp_path, monkeypatch):
    (tmp_path / ".here").touch()
    monkeypatch.chdir(tmp_path)
    assert labutils.here("data").resolve() == (tmp_path / "data").resolve()


def test_error_type_exported():
    assert issubclass(labutils.InvalidArgumentError, ValueError)
    assert issubclass(labutils.InvalidArgumentError, labutils.LabUtilsError)
