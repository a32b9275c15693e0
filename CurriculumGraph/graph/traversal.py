"""
Traversals shared by every node kind.

They only rely on the node contract: ``dependencies`` (every wired
reference, used for satisfaction), ``links`` (the reduced references that
are drawn), ``wiring`` (the graph's ``networkx.DiGraph`` of those same
references), ``is_leaf``, ``subject_id`` and ``satisfies``. Both reference
collections are insertion-ordered dicts used as sets so rendering order is
stable between runs.

Plain reachability is answered by networkx on ``wiring``. Satisfaction
walks ``dependencies`` itself so each node kind can answer for itself, and
carries a visited set so cyclic input terminates.
"""

import logging

import networkx as nx

logger = logging.getLogger(__name__)


def add_dependency(node, dependency):
    node.dependencies[dependency] = None
    node.links[dependency] = None
    node.wiring.add_edge(node, dependency)


def depends_on(node, target, excluded=()):
    """
    True if ``target`` is ``node`` or is reachable from it.

    Paths through any node in ``excluded`` do not count.
    """
    if node is target:
        return True
    if node in excluded or target in excluded:
        return False

    wiring = node.wiring
    if excluded:
        wiring = nx.restricted_view(wiring, excluded, [])
    return nx.has_path(wiring, node, target)


def simplify(node):
    """
    Transitive reduction of the drawn references of ``node``.

    Each direct reference is dropped when it stays reachable through the
    remaining ones, i.e. A -> C is not drawn when A -> B -> C exists. The
    search never walks back through ``node`` itself, so a cycle keeps both
    of its edges.
    """
    for dependency in list(node.links):
        del node.links[dependency]
        if any(depends_on(other, dependency, {node}) for other in node.links):
            logger.debug(f"Dropping redundant link {dependency.id} -> {node.id}")
            continue
        node.links[dependency] = None


def mark_leaves(node):
    """Whatever ``node`` draws an arrow from is needed by something."""
    for dependency in node.links:
        dependency.is_leaf = False


def reachable_subject_satisfies(node, subject_id, status_id, visited=None):
    """
    Search upstream of ``node`` for ``subject_id`` at ``status_id`` or higher.

    A node already in ``visited`` contributes no paths.
    """
    if visited is None:
        visited = set()
    if node in visited:
        return False
    visited.add(node)
    return any(
        d.satisfies(subject_id, status_id, visited) for d in node.dependencies
    )


def all_reachable_subject_ids(node):
    """Ids of every subject reachable from ``node``, its own included."""
    reachable = nx.descendants(node.wiring, node) | {node}
    return {n.subject_id for n in reachable if n.subject_id is not None}
