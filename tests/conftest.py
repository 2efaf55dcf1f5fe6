"""Shared fixtures for pinaudit tests."""

from pathlib import Path

import pytest

PUBSPEC = """\
name: example_app
dependencies:
  foo: 1.2.3
  bar: ">=1.0.0 <2.0.0"
  baz:
    version: ">=1.0.0 <=1.1.0"
  flutter:
    sdk: flutter
dev_dependencies:
  test: ^1.16.0
  mocktail: ">=0.3.0 <0.3.4"
"""


@pytest.fixture
def dart_package(tmp_path: Path) -> Path:
    """A small Dart package with pins, hidden tool output and generated code."""
    (tmp_path / "pubspec.yaml").write_text(PUBSPEC)

    files = [
        "lib/main.dart",
        "lib/src/model.dart",
        "lib/src/model.g.dart",
        "lib/styles/app.scss",
        "test/main_test.dart",
        ".dart_tool/build/entrypoint.dart",
        "lib/.cache/stale.dart",
    ]
    for rel in files:
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("// generated for tests\n")

    return tmp_path
