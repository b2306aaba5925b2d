"""Packaging metadata — the distribution readme is the project README."""

import tomllib
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]


def test_readme_is_project_readme():
    project = tomllib.loads((ROOT / "pyproject.toml").read_text())["project"]
    assert project["readme"] == "README.md"
    assert (ROOT / project["readme"]).is_file()
