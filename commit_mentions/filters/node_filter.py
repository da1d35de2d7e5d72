"""Node filter contract and the tree walk that applies it."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Protocol, runtime_checkable
from xml.etree.ElementTree import Element


@runtime_checkable
class NodeFilter(Protocol):
    """A rewrite applied to selected elements of a rendered document."""

    def is_candidate(self, node: Element, parent: Element | None = None) -> bool: ...

    async def rewrite(self, node: Element) -> list[Element] | None: ...


def iter_with_parent(root: Element) -> Iterator[tuple[Element, Element]]:
    """Yield ``(parent, child)`` pairs below ``root`` in document order."""
    for child in root:
        yield root, child
        yield from iter_with_parent(child)


def iter_candidates(root: Element, node_filter: NodeFilter) -> list[tuple[Element, Element]]:
    """Collect the accepted ``(parent, node)`` pairs before anything is spliced."""
    return [
        (parent, node)
        for parent, node in iter_with_parent(root)
        if node_filter.is_candidate(node, parent)
    ]


def replace_node(parent: Element, node: Element, replacements: Sequence[Element]) -> None:
    index = list(parent).index(node)
    parent.remove(node)
    for offset, replacement in enumerate(replacements):
        parent.insert(index + offset, replacement)


async def apply_node_filters(root: Element, filters: Sequence[NodeFilter]) -> int:
    """Run each filter over the tree in turn, returning the number of rewrites."""
    rewritten = 0
    for node_filter in filters:
        for parent, node in iter_candidates(root, node_filter):
            replacements = await node_filter.rewrite(node)
            if replacements is None:
                continue
            replace_node(parent, node, replacements)
            rewritten += 1
    return rewritten
