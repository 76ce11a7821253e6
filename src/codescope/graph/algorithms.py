"""Graph algorithms: cycle detection."""

from collections.abc import Iterable, Iterator


def find_cycles(roots: Iterable[str], adjacency: dict[str, list[str]]) -> list[list[str]]:
    """Depth-first cycle detection (iterative).

    Roots are visited in the given order. Reaching a node that is on the
    active DFS path records the path slice from that node, closed by
    repeating it. Every node is expanded at most once, so cycles that pass
    only through already-expanded nodes are not reported.

    Targets with no adjacency entry (e.g. unresolved import strings) are
    visited as leaves.

    Uses an explicit stack to avoid Python recursion limits on deep import
    chains.
    """
    cycles: list[list[str]] = []
    visited: set[str] = set()
    on_stack: set[str] = set()
    path: list[str] = []

    for root in roots:
        if root in visited:
            continue

        visited.add(root)
        on_stack.add(root)
        path.append(root)
        stack: list[tuple[str, Iterator[str]]] = [(root, iter(adjacency.get(root, [])))]

        while stack:
            node, neighbors = stack[-1]
            advanced = False

            for neighbor in neighbors:
                if neighbor in on_stack:
                    start = path.index(neighbor)
                    cycles.append(path[start:] + [neighbor])
                    continue
                if neighbor in visited:
                    continue
                visited.add(neighbor)
                on_stack.add(neighbor)
                path.append(neighbor)
                stack.append((neighbor, iter(adjacency.get(neighbor, []))))
                advanced = True
                break

            if not advanced:
                stack.pop()
                path.pop()
                on_stack.discard(node)

    return cycles
