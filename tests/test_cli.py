from __future__ import annotations

import os

import numpy as np
import pytest

from cachematrix import demo
from cachematrix.__main__ import main
from cachematrix.config import ENV_BACKEND


@pytest.fixture(autouse=True)
def _default_backend(monkeypatch):
    monkeypatch.delenv(ENV_BACKEND, raising=False)


def test_run_checks_all_pass():
    checks = list(demo.run_checks())
    assert len(checks) == 8
    assert all(c.passed for c in checks), [c.line() for c in checks if not c.passed]


def test_check_line_prefix():
    assert demo.Check("x", True).line() == "EXPECTED: x"
    assert demo.Check("x", False).line() == "UNEXPECTED: x"


def test_demo_command(capsys):
    assert main(["demo"]) == 0
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 8
    assert all(line.startswith("EXPECTED: ") for line in out)


def test_demo_command_verbose_logs(capsys, caplog):
    with caplog.at_level("INFO", logger="cachematrix.solve"):
        assert main(["demo", "-v"]) == 0
    messages = [r.getMessage() for r in caplog.records if r.name == "cachematrix.solve"]
    assert "returning cached inverse" in messages
    assert "inverse is not cached - calculating it now" in messages


def test_demo_command_reports_failure(monkeypatch, capsys):
    monkeypatch.setattr(demo, "FIRST_MATRIX", np.array([[1.0, 2.0], [2.0, 4.0]]))
    assert main(["demo"]) == 1
    assert "Demo failed" in capsys.readouterr().err


def test_demo_command_backend_flag(monkeypatch, capsys):
    monkeypatch.setenv(ENV_BACKEND, "mlx")
    assert main(["demo", "--backend", "numpy"]) == 0
    assert "UNEXPECTED" not in capsys.readouterr().out


def test_backends_command(capsys):
    assert main(["backends"]) == 0
    out = capsys.readouterr().out.split()
    assert out == ["numpy", "mlx"]


def test_requires_command():
    with pytest.raises(SystemExit):
        main([])


def test_demo_backend_flag_restores_env(monkeypatch, capsys):
    monkeypatch.setenv(ENV_BACKEND, "mlx")
    assert main(["demo", "--backend", "numpy"]) == 0
    assert os.environ[ENV_BACKEND] == "mlx"

    monkeypatch.delenv(ENV_BACKEND)
    assert main(["demo", "--backend", "numpy"]) == 0
    assert ENV_BACKEND not in os.environ


def test_demo_command_reports_backend_runtime_error(monkeypatch, capsys):
    def _lu_failure(a, backend=None):
        raise RuntimeError("[linalg::inv] Matrix is singular.")

    monkeypatch.setattr(demo, "invert", _lu_failure)
    assert main(["demo"]) == 1
    assert "Matrix is singular" in capsys.readouterr().err
