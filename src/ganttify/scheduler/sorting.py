"""Topological ordering of task graphs."""

from __future__ import annotations

from collections import deque

from ganttify.exceptions import CycleDetectedError
from ganttify.logger import checks_enabled, get_logger

from .core import TaskGraph, TaskId

logger = get_logger()


def topological_sort(graph: TaskGraph) -> list[TaskId]:
    """Order task ids so every edge's source precedes its target.

    Kahn's algorithm with a FIFO queue seeded in task insertion order, so the
    result is reproducible for identical input. Edges whose source is not in
    the graph add no in-degree; the resolver reports those references.

    Args:
        graph: Graph to sort

    Returns:
        Task ids in dependency-respecting order

    Raises:
        CycleDetectedError: If the graph contains a cycle
    """
    in_degree: dict[TaskId, int] = dict.fromkeys(graph.tasks, 0)
    successors: dict[TaskId, list[TaskId]] = {task_id: [] for task_id in graph.tasks}

    for edge in graph.edges:
        if edge.from_id not in successors or edge.to_id not in in_degree:
            continue
        successors[edge.from_id].append(edge.to_id)
        in_degree[edge.to_id] += 1

    queue = deque(task_id for task_id, degree in in_degree.items() if degree == 0)
    result: list[TaskId] = []

    while queue:
        current = queue.popleft()
        result.append(current)
        for successor in successors[current]:
            in_degree[successor] -= 1
            if in_degree[successor] == 0:
                queue.append(successor)

    if len(result) != len(graph.tasks):
        remaining = [task_id for task_id, degree in in_degree.items() if degree > 0]
        raise CycleDetectedError(remaining)

    if checks_enabled():
        logger.checks(f"Topological order: {result}")
    return result
