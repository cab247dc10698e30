"""Tests for pyproject/environment configuration of plot defaults."""

from __future__ import annotations

import pytest

from plotspecs import ConfigurationError, PlotSpec
from plotspecs.config_helpers import (
    LINEWIDTH_ENV_VAR,
    default_line_width,
    read_pyproject_section,
)
from plotspecs.gnuplot import DEFAULT_LINEWIDTH


def _write_pyproject(path, body):
    (path / "pyproject.toml").write_text(body, encoding="utf-8")


def test_builtin_default_without_config():
    assert default_line_width() == DEFAULT_LINEWIDTH


def test_read_pyproject_section_missing_file():
    assert read_pyproject_section(("tool", "plotspecs")) == {}


def test_read_pyproject_section_nested(isolated_config):
    _write_pyproject(isolated_config, "[tool.plotspecs]\ndefault_line_width = 3\n")
    assert read_pyproject_section(("tool", "plotspecs")) == {"default_line_width": 3}
    assert read_pyproject_section(("tool", "other")) == {}


def test_read_pyproject_section_ignores_invalid_toml(isolated_config):
    _write_pyproject(isolated_config, "[tool.plotspecs\n")
    assert read_pyproject_section(("tool", "plotspecs")) == {}


def test_pyproject_default_applies_to_new_specs(isolated_config):
    _write_pyproject(isolated_config, "[tool.plotspecs]\ndefault_line_width = 1.5\n")
    assert PlotSpec("x", "lines").render() == "x with lines linewidth 1.5"


def test_env_var_wins_over_pyproject(isolated_config, monkeypatch):
    _write_pyproject(isolated_config, "[tool.plotspecs]\ndefault_line_width = 1.5\n")
    monkeypatch.setenv(LINEWIDTH_ENV_VAR, "4")
    assert default_line_width() == 4
    assert PlotSpec("x", "lines").render() == "x with lines linewidth 4"


@pytest.mark.parametrize("raw", ["thick", "-1", "nan"])
def test_invalid_env_value(monkeypatch, raw):
    monkeypatch.setenv(LINEWIDTH_ENV_VAR, raw)
    with pytest.raises(ConfigurationError) as exc_info:
        default_line_width()
    assert exc_info.value.details["source"] == LINEWIDTH_ENV_VAR


def test_invalid_pyproject_value(isolated_config):
    _write_pyproject(isolated_config, '[tool.plotspecs]\ndefault_line_width = "wide"\n')
    with pytest.raises(ConfigurationError):
        default_line_width()


def test_explicit_line_width_skips_config(monkeypatch):
    monkeypatch.setenv(LINEWIDTH_ENV_VAR, "thick")
    assert PlotSpec("x", "lines", line_width=1).render() == "x with lines linewidth 1"
