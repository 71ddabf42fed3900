"""
Hierarchy Builder

Converts flat employee records (each naming itself and its manager) into a
reporting tree held by a NodeIndex.

Pipeline:
1. Node pass - one Employee per record with an id (last duplicate wins)
2. Cycle pass - find ids whose manager chain loops back on itself
3. Link pass - attach each node to its manager's children

Nodes whose manager does not resolve, and every member of a manager cycle,
stay unlinked with their manager_id untouched and are offered as roots.
"""
import logging
from typing import Dict, Iterable, List, Mapping, Set

from core.constants import ID_FIELDS, MANAGER_FIELDS, NAME_FIELDS, UNKNOWN_NAME
from core.exceptions import EmptyInputError
from core.models import BuildReport, Employee
from utils.record_utils import normalize_record, resolve_field
from hierarchy.index import NodeIndex

logger = logging.getLogger(__name__)


def create_nodes(records: List[Mapping[str, str]], report: BuildReport) -> Dict[str, Employee]:
    """
    Node pass: create one Employee per record that carries an id.

    Args:
        records: Normalized records, in input order
        report: Build report to update (skips, duplicates)

    Returns:
        id -> Employee in first-seen order
    """
    nodes: Dict[str, Employee] = {}

    for record in records:
        employee_id = resolve_field(record, ID_FIELDS)
        if not employee_id:
            report.skipped_records += 1
            continue

        if employee_id in nodes:
            report.duplicate_ids.append(employee_id)
            logger.debug("Duplicate employee id %s; later record replaces the earlier one", employee_id)

        nodes[employee_id] = Employee(
            id=employee_id,
            manager_id=resolve_field(record, MANAGER_FIELDS),
            name=resolve_field(record, NAME_FIELDS) or UNKNOWN_NAME,
        )

    return nodes


def find_cyclic_ids(nodes: Mapping[str, Employee]) -> Set[str]:
    """
    Cycle pass: ids that sit on a closed manager chain.

    Follows manager links that resolve inside `nodes`. Each node is walked
    at most once, so this is linear in the number of nodes.

    Args:
        nodes: id -> Employee

    Returns:
        Set of ids on some cycle (a self-managed node is a cycle of one)
    """
    IN_PROGRESS, DONE = 1, 2
    state: Dict[str, int] = {}
    cyclic: Set[str] = set()

    for start in nodes:
        if start in state:
            continue

        path: List[str] = []
        position: Dict[str, int] = {}
        current = start
        while current is not None and current not in state:
            state[current] = IN_PROGRESS
            position[current] = len(path)
            path.append(current)
            manager_id = nodes[current].manager_id
            current = manager_id if manager_id in nodes else None

        if current is not None and state[current] == IN_PROGRESS:
            cyclic.update(path[position[current]:])

        for node_id in path:
            state[node_id] = DONE

    return cyclic


def link_nodes(nodes: Dict[str, Employee], cyclic_ids: Set[str], report: BuildReport) -> List[str]:
    """
    Link pass: append every resolvable node to its manager's children.

    Args:
        nodes: id -> Employee (children lists are filled in place)
        cyclic_ids: Ids that must stay unlinked
        report: Build report to update (unresolved managers, cycles)

    Returns:
        Root candidate ids in index order
    """
    root_candidate_ids: List[str] = []

    for node in nodes.values():
        if not node.manager_id:
            root_candidate_ids.append(node.id)
            continue

        if node.id in cyclic_ids:
            report.cyclic_ids.append(node.id)
            root_candidate_ids.append(node.id)
            logger.warning(
                "Employee %s is part of a reporting cycle via manager %s; shown as a root",
                node.id, node.manager_id
            )
            continue

        manager = nodes.get(node.manager_id)
        if manager is None:
            report.unresolved_managers[node.id] = node.manager_id
            root_candidate_ids.append(node.id)
            logger.warning("Manager %s not found for employee %s", node.manager_id, node.id)
            continue

        manager.children.append(node)

    return root_candidate_ids


class HierarchyBuilder:
    """Builds a NodeIndex from flat employee records."""

    def build(self, records: Iterable[Mapping[str, str]]) -> NodeIndex:
        """
        Build the reporting tree.

        Records may use any key casing; they are normalized first. Nothing
        is returned unless the whole build succeeds.

        Args:
            records: Employee rows

        Returns:
            NodeIndex owning every node

        Raises:
            EmptyInputError: No records, or none with an employee id
        """
        normalized = [normalize_record(record) for record in records]
        report = BuildReport(record_count=len(normalized))

        if not normalized:
            raise EmptyInputError("Record set is empty", record_count=0)

        nodes = create_nodes(normalized, report)
        if not nodes:
            raise EmptyInputError(
                "No record has an employee identifier "
                f"(expected one of: {', '.join(ID_FIELDS)})",
                record_count=len(normalized)
            )

        cyclic_ids = find_cyclic_ids(nodes)
        root_candidate_ids = link_nodes(nodes, cyclic_ids, report)

        logger.info(
            "Built hierarchy: %d nodes, %d root candidates, %d unresolved managers, "
            "%d cyclic, %d duplicates, %d skipped",
            len(nodes), len(root_candidate_ids), len(report.unresolved_managers),
            len(report.cyclic_ids), report.duplicate_count, report.skipped_records
        )

        return NodeIndex(nodes, root_candidate_ids, report)


def build_hierarchy(records: Iterable[Mapping[str, str]]) -> NodeIndex:
    """Build a NodeIndex with a default HierarchyBuilder."""
    return HierarchyBuilder().build(records)
