"""Output modules for CLI display and file writing."""

from pinaudit.output.json_writer import load_results, write_results
from pinaudit.output.tree import build_pins_tree, display_tree

__all__ = ["build_pins_tree", "display_tree", "load_results", "write_results"]
