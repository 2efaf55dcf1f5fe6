"""Rich tree visualization for pin audit results."""

from collections import defaultdict

from rich.console import Console
from rich.markup import escape
from rich.text import Text
from rich.tree import Tree

from pinaudit.models.pins import PinEvaluation
from pinaudit.models.results import AuditResults, PinInfraction

console = Console()

_EVALUATION_COLORS = {
    PinEvaluation.DIRECT_PIN: "red",
    PinEvaluation.INCLUSIVE_MAX: "red",
    PinEvaluation.BLOCKS_PATCH_RELEASES: "yellow",
    PinEvaluation.BLOCKS_MINOR_BUMPS: "yellow",
    PinEvaluation.BUILD_OR_PRERELEASE: "magenta",
    PinEvaluation.EMPTY_PIN: "cyan",
}


def build_pins_tree(results: AuditResults) -> Tree:
    """Build a Rich tree of pins grouped by the reason they were flagged."""
    by_evaluation: dict[PinEvaluation, list[PinInfraction]] = defaultdict(list)
    for infraction in results.infractions:
        by_evaluation[infraction.evaluation].append(infraction)

    root = Tree(f"[bold]{escape(results.package)}[/]", guide_style="dim")

    # Keep the enum's declaration order so the most severe groups come first
    for evaluation in PinEvaluation:
        items = by_evaluation.get(evaluation)
        if not items:
            continue

        color = _EVALUATION_COLORS.get(evaluation, "white")
        group = root.add(f"[{color}]{evaluation.message}[/] ({len(items)})")

        for item in sorted(items, key=lambda x: x.package):
            item_text = Text()
            item_text.append(item.package, style=color)
            item_text.append(f": {item.version}", style="dim")
            item_text.append(f" ({item.section})", style="dim")
            group.add(item_text)

    if results.unparseable:
        group = root.add(f"[red]Unparseable constraints[/] ({len(results.unparseable)})")
        for entry in sorted(results.unparseable, key=lambda x: x.package):
            group.add(Text(entry.describe(), style="red"))

    return root


def display_tree(tree: Tree) -> None:
    """Display the tree to console."""
    console.print()
    console.print(tree)
    console.print()
