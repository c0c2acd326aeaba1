"""
Tree preparation: identity checks and internal id assignment.

Internal ids address nodes in the emitted program and in inbound events.
A node keeps an internal id once it has one, so rebuilding the same tree
yields the same ids.
"""

from __future__ import annotations

import re
from collections.abc import Iterator, Sequence

from hudmark.errors import ContractViolation, DuplicateElementIdError
from hudmark.specs.node import ElementNode

_SAFE_ID = re.compile(r"^[A-Za-z][A-Za-z0-9_]*$")


def walk_all(roots: Sequence[ElementNode]) -> Iterator[ElementNode]:
    """Pre-order walk over several top-level nodes."""
    for root in roots:
        yield from root.walk()


def find_by_user_id(roots: Sequence[ElementNode], user_id: str) -> ElementNode | None:
    for node in walk_all(roots):
        if node.user_id == user_id:
            return node
    return None


def prepare_tree(roots: Sequence[ElementNode]) -> None:
    """
    Validate identities and assign missing internal ids.

    A user id that is a plain identifier doubles as the internal id; every
    other node gets ``<DslType><n>``, numbered in document order and skipping
    ids already taken.

    Raises:
        ContractViolation: If a node is reachable twice, or a child points at
            a parent other than the node that lists it.
        DuplicateElementIdError: If two nodes share a user id or an explicit
            internal id. Nothing is assigned in either case.
    """
    nodes = _collect(roots)

    user_ids: set[str] = set()
    taken: set[str] = set()
    for node in nodes:
        if node.user_id is not None:
            if node.user_id in user_ids:
                raise DuplicateElementIdError(node.user_id, field="id")
            user_ids.add(node.user_id)
        if node.internal_id is not None:
            if node.internal_id in taken:
                raise DuplicateElementIdError(node.internal_id, field="internal id")
            taken.add(node.internal_id)

    # Identifier-safe user ids claim their own name before generated ids are handed out
    claims: dict[int, str] = {}
    for node in nodes:
        if node.internal_id is None and node.user_id and _SAFE_ID.match(node.user_id):
            if node.user_id not in taken:
                claims[id(node)] = node.user_id
                taken.add(node.user_id)

    counter = 0
    for node in nodes:
        for child in node.children:
            if child.parent is None:
                child.parent = node
        if node.internal_id is not None:
            continue
        claimed = claims.get(id(node))
        if claimed is not None:
            node.internal_id = claimed
            continue
        while True:
            counter += 1
            candidate = f"{node.traits.dsl_type}{counter}"
            if candidate not in taken:
                break
        taken.add(candidate)
        node.internal_id = candidate


def _collect(roots: Sequence[ElementNode]) -> list[ElementNode]:
    """Pre-order node list; each node must be owned by exactly one parent."""
    nodes: list[ElementNode] = []
    seen: set[int] = set()

    def visit(node: ElementNode, parent: ElementNode | None) -> None:
        if id(node) in seen:
            raise ContractViolation("node appears more than once in the tree", _label(node))
        seen.add(id(node))
        if node.parent is not None and node.parent is not parent:
            raise ContractViolation("node is attached to a different parent", _label(node))
        nodes.append(node)
        for child in node.children:
            visit(child, node)

    for root in roots:
        visit(root, None)
    return nodes


def _label(node: ElementNode) -> str:
    ident = node.user_id or node.internal_id
    return f"{node.kind.value}#{ident}" if ident else node.kind.value
