"""JSON output for audit results."""

import json
from pathlib import Path

from pinaudit.models.results import AuditResults


def write_results(results: AuditResults, output_path: Path) -> None:
    """Write audit results as JSON."""
    data = results.to_dict()

    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def load_results(results_path: Path) -> dict:
    """Load a results JSON file."""
    with open(results_path, "r", encoding="utf-8") as f:
        return json.load(f)
