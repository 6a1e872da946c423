"""Pytest fixtures for argsmith tests."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

import pytest
from hypothesis import Phase, Verbosity, settings

_TEST_BASE_DIR = Path(tempfile.mkdtemp(prefix="argsmith-tests-"))
os.environ["ARGSMITH_CONFIG_DIR"] = str(_TEST_BASE_DIR / "config")
os.environ.pop("ARGSMITH_DEBUG", None)


settings.register_profile(
    "ci",
    max_examples=200,
    deadline=None,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
)
settings.register_profile(
    "dev",
    max_examples=50,
    deadline=500,
)
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


@pytest.fixture
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point ARGSMITH_CONFIG_DIR at a fresh directory for one test."""
    path = tmp_path / "config"
    monkeypatch.setenv("ARGSMITH_CONFIG_DIR", str(path))
    return path
