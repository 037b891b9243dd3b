# ============================================================================
# INTERLEAVE ORDERING
# ============================================================================
# STATUS: Core - Parent-before-child table ordering
# PURPOSE: Deterministic table emission order for interleaved tables
# LAST_REVIEWED: 18 OCT 2026
# EXPORTS: InterleaveOrderer, order_tables
# ============================================================================
"""
Interleave Ordering

Spanner requires a parent table to exist before a child can be interleaved
in it, so CREATE TABLE statements are emitted by interleaving depth:

    depth(t) = 0                     if t has no parent, or the parent is
                                     not in the schema
    depth(t) = 1 + depth(parent(t))  otherwise

Tables are grouped by depth (ascending) and sorted by id inside a group,
which makes the output identical across runs and machines.

Parent chains are walked iteratively with an in-progress set, so a cyclic
chain is reported as CyclicInterleavingError instead of looping, and deep
chains never hit the recursion limit.
"""

from typing import Dict, List

from schemaddl.errors import CyclicInterleavingError
from schemaddl.logging import ComponentType, get_logger
from schemaddl.models.schema import Schema

logger = get_logger(__name__, ComponentType.ORDERER)


class InterleaveOrderer:
    """Computes interleaving depths and the table emission order."""

    def depths(self, schema: Schema) -> Dict[str, int]:
        """
        Compute the interleaving depth of every table.

        Args:
            schema: Full schema mapping

        Returns:
            Dict of table id -> depth

        Raises:
            CyclicInterleavingError: If a parent chain loops
        """
        depths: Dict[str, int] = {}

        for table_id in sorted(schema):
            if table_id in depths:
                continue

            # Walk up the parent chain until a known depth or a root
            path: List[str] = []
            on_path = set()
            current = table_id
            while True:
                if current in depths:
                    base = depths[current]
                    break
                if current in on_path:
                    cycle = path[path.index(current):] + [current]
                    raise CyclicInterleavingError(cycle)

                path.append(current)
                on_path.add(current)

                parent_id = schema[current].parent_id
                if not parent_id:
                    base = -1
                    break
                if parent_id not in schema:
                    logger.warning(
                        f"Table '{current}' is interleaved in unknown table '{parent_id}'; treating it as a root"
                    )
                    base = -1
                    break
                current = parent_id

            # path runs child -> ancestor; the last entry sits directly on base
            for offset, path_id in enumerate(reversed(path)):
                depths[path_id] = base + 1 + offset

        return depths

    def order(self, schema: Schema) -> List[str]:
        """
        Table ids with every parent strictly before its children.

        Args:
            schema: Full schema mapping

        Returns:
            Ordered list of table ids (empty for an empty schema)
        """
        depths = self.depths(schema)
        ordered = sorted(schema, key=lambda table_id: (depths[table_id], table_id))
        logger.debug(f"Interleave order: {ordered}")
        return ordered


def order_tables(schema: Schema) -> List[str]:
    """Convenience wrapper around InterleaveOrderer.order()."""
    return InterleaveOrderer().order(schema)


__all__ = ["InterleaveOrderer", "order_tables"]
