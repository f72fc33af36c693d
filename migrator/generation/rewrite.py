"""Declarative post-render rewrite rules for dialect quirks."""

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True)
class RewriteRule:
    """Replace every occurrence of an exact substring."""

    pattern: str
    replacement: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("Rewrite pattern must not be empty")

    def apply(self, text: str) -> str:
        return text.replace(self.pattern, self.replacement)


def apply_rewrites(text: str, rules: Iterable[RewriteRule]) -> str:
    """Apply rewrite rules to text in order.

    Args:
        text: Rendered SQL fragment
        rules: Rules applied one after another

    Returns:
        Rewritten text, unchanged when no pattern occurs
    """
    for rule in rules:
        text = rule.apply(text)
    return text
