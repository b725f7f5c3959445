import stat
import sys
from collections.abc import Callable
from pathlib import Path

import pytest

from cargo_testify.config import Config, load_config


@pytest.fixture
def cargo_project(tmp_path: Path) -> Path:
    project = tmp_path / "project"
    (project / "src").mkdir(parents=True)
    (project / "tests").mkdir()
    (project / "src" / "lib.rs").write_text("pub fn answer() -> u32 { 42 }\n")
    (project / "Cargo.toml").write_text('[package]\nname = "demo"\nversion = "0.1.0"\n')
    return project.resolve()


@pytest.fixture
def config(cargo_project: Path) -> Config:
    return load_config(project_dir=cargo_project)


@pytest.fixture
def fake_command(tmp_path: Path) -> Callable[[str], Path]:
    """Writes an executable Python script that stands in for `cargo`."""
    if sys.platform == "win32":
        pytest.skip("Fake commands rely on shebang scripts")

    def _write(body: str) -> Path:
        script = tmp_path / "fake-cargo"
        script.write_text(f"#!{sys.executable}\nimport os, sys\n{body}\n")
        script.chmod(script.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
        return script

    return _write
