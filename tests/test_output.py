"""Tests for the output and logging helpers."""

import json
import logging
from datetime import datetime
from pathlib import Path

from rich.console import Console

from pinaudit.log import bullet_items, log_dependency_info, log_dependency_infractions
from pinaudit.models.pins import PinEvaluation
from pinaudit.models.results import AuditResults, PinInfraction, UnparseableDependency
from pinaudit.output.json_writer import load_results, write_results
from pinaudit.output.tree import build_pins_tree


def make_results() -> AuditResults:
    """Audit results with pins in two sections and one bad constraint."""
    return AuditResults(
        package="example",
        manifest=Path("/work/example/pubspec.yaml"),
        audited_at=datetime(2024, 1, 15, 10, 30, 0),
        pinaudit_version="0.3.0",
        infractions=[
            PinInfraction("dependencies", "zeta", "1.0.0", PinEvaluation.DIRECT_PIN),
            PinInfraction("dependencies", "alpha", "2.0.0", PinEvaluation.DIRECT_PIN),
            PinInfraction(
                "dev_dependencies", "mid", ">=1.0.0 <1.2.4", PinEvaluation.BLOCKS_PATCH_RELEASES
            ),
        ],
        unparseable=[
            UnparseableDependency("dependencies", "bad", "1.2", "'1.2' is not a valid version"),
        ],
        files_scanned={"scss": 0, "dart": 12},
        analysis_options_include="lints",
    )


def render(tree) -> str:
    """Render a tree to plain text."""
    console = Console(width=200, record=True)
    console.print(tree)
    return console.export_text()


class TestBulletItems:
    """Tests for bullet_items."""

    def test_formats_each_item(self) -> None:
        """Each item gets its own indented bullet."""
        assert bullet_items(["a", "b"]) == "  * a\n  * b"

    def test_empty(self) -> None:
        """No items give an empty string."""
        assert bullet_items([]) == ""


class TestLogHelpers:
    """Tests for the dependency log helpers."""

    def test_infractions_are_sorted_warnings(self, caplog) -> None:
        """Infractions are logged sorted at warning level."""
        with caplog.at_level(logging.INFO, logger="pinaudit"):
            log_dependency_infractions("Pinned:", ["b: 1.0.0", "a: 2.0.0"])

        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "Pinned:\n  * a: 2.0.0\n  * b: 1.0.0\n"

    def test_info_is_info_level(self, caplog) -> None:
        """Info lists are logged at info level."""
        with caplog.at_level(logging.INFO, logger="pinaudit"):
            log_dependency_info("Scanned:", ["dart: 3"])

        record = caplog.records[-1]
        assert record.levelno == logging.INFO
        assert record.getMessage() == "Scanned:\n  * dart: 3\n"


class TestResultsModel:
    """Tests for AuditResults serialization."""

    def test_to_dict(self) -> None:
        """Should serialize every field to JSON-safe values."""
        data = make_results().to_dict()

        assert data["package"] == "example"
        assert data["audited_at"] == "2024-01-15T10:30:00"
        assert data["files_scanned"] == {"dart": 12, "scss": 0}
        assert data["infractions"][0] == {
            "section": "dependencies",
            "package": "zeta",
            "version": "1.0.0",
            "evaluation": "direct_pin",
            "message": PinEvaluation.DIRECT_PIN.message,
        }
        assert data["unparseable"][0]["package"] == "bad"
        assert data["analysis_options_include"] == "lints"

    def test_describe(self) -> None:
        """An infraction describes itself with its message."""
        infraction = make_results().infractions[0]
        assert infraction.describe() == f"zeta: 1.0.0 -- {PinEvaluation.DIRECT_PIN.message}"


class TestWriteResults:
    """Tests for JSON results round trip through files."""

    def test_writes_valid_json(self, tmp_path: Path) -> None:
        """The written file is valid JSON."""
        output = tmp_path / "results.json"

        write_results(make_results(), output)

        with open(output) as f:
            data = json.load(f)
        assert data["pinaudit_version"] == "0.3.0"
        assert len(data["infractions"]) == 3

    def test_load_results(self, tmp_path: Path) -> None:
        """Should read back what write_results wrote."""
        output = tmp_path / "results.json"
        write_results(make_results(), output)

        assert load_results(output)["package"] == "example"


class TestPinsTree:
    """Tests for the Rich pins tree."""

    def test_groups_by_reason(self) -> None:
        """Pins are grouped under their evaluation message."""
        text = render(build_pins_tree(make_results()))

        assert "example" in text
        assert PinEvaluation.DIRECT_PIN.message in text
        assert PinEvaluation.BLOCKS_PATCH_RELEASES.message in text
        assert "Unparseable constraints (1)" in text

    def test_packages_sorted_within_group(self) -> None:
        """Packages are sorted by name within a group."""
        text = render(build_pins_tree(make_results()))
        assert text.index("alpha") < text.index("zeta")

    def test_empty_results(self) -> None:
        """Empty results show only the package."""
        results = make_results()
        results.infractions = []
        results.unparseable = []

        text = render(build_pins_tree(results))

        assert "example" in text
        assert "Unparseable" not in text

    def test_package_name_is_not_markup(self) -> None:
        """Brackets in the package name are shown literally."""
        results = make_results()
        results.package = "[bold]weird[/bold]"

        text = render(build_pins_tree(results))

        assert "[bold]weird[/bold]" in text
