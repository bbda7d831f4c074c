"""Shared test fixtures for dotgen."""

from pathlib import Path

import pytest

from dotgen.graph import Context


@pytest.fixture
def context() -> Context:
    """A fresh graph name registry."""
    return Context()


@pytest.fixture
def sample_yaml() -> str:
    """Return a small graph description with a cluster."""
    return """\
name: deps
kind: digraph
attributes:
  rankdir: LR
node_defaults:
  shape: box
nodes:
  a:
    color: red
  b:
edges:
  - tail: a
    head: b
    attributes:
      style: dashed
  - tail: b
    head: c
subgraphs:
  - name: core
    cluster: true
    attributes:
      label: Core
    nodes:
      d:
"""


@pytest.fixture
def sample_yaml_file(tmp_path: Path, sample_yaml: str) -> Path:
    """Write the sample description to a file."""
    path = tmp_path / "graph.yaml"
    path.write_text(sample_yaml)
    return path
