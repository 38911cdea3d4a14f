"""Conformance fixture loader for segmatch.

Loads YAML fixtures from tests/fixtures/ and parametrizes any test that
takes a ``conformance_case`` argument with one case per fixture entry.

Fixture document shape::

    name: literal_prefix
    pattern: "hello"
    field_map: {image: src}        # optional
    cases:
      - name: prefix with remainder
        segments: [{type: text, data: {text: "hello world"}}]
        expect:                    # null means "no match"
          params: {}
          matched: [...]           # optional
          remaining: [...]         # optional
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import pytest
import yaml

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"


@dataclass
class FixtureCase:
    """A single test case from a conformance fixture."""

    fixture_name: str
    case_name: str
    pattern: str
    field_map: dict[str, Any] | None
    segments: list[dict[str, Any]]
    expect: dict[str, Any] | None

    @property
    def id(self) -> str:
        return f"{self.fixture_name}::{self.case_name}"


def load_fixtures() -> list[FixtureCase]:
    """Load every conformance fixture file, in file-name order."""
    cases: list[FixtureCase] = []
    for yaml_file in sorted(FIXTURE_DIR.glob("*.yaml")):
        cases.extend(_load_file(yaml_file))
    return cases


def _load_file(path: Path) -> list[FixtureCase]:
    """Load a single fixture YAML file (may contain multiple documents)."""
    cases: list[FixtureCase] = []
    with path.open(encoding="utf-8") as f:
        for doc in yaml.safe_load_all(f):
            if doc is None:
                continue
            for case in doc["cases"]:
                cases.append(
                    FixtureCase(
                        fixture_name=doc["name"],
                        case_name=case["name"],
                        pattern=doc["pattern"],
                        field_map=doc.get("field_map"),
                        segments=case["segments"],
                        expect=case["expect"],
                    )
                )
    return cases


def pytest_generate_tests(metafunc: pytest.Metafunc) -> None:
    if "conformance_case" in metafunc.fixturenames:
        cases = load_fixtures()
        metafunc.parametrize("conformance_case", cases, ids=[c.id for c in cases])
