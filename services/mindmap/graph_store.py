"""
Graph Store
===========

Owns the live mind map: nodes, edges, advisory selection and per-node
edit state. Every mutation either completes or raises
GraphValidationError before touching anything.

Author: lycosa9527
Made by: MindSpring Team

Copyright 2024-2025 北京思源智教科技有限公司 (Beijing Siyuan Zhijiao Technology Co., Ltd.)
All Rights Reserved
Proprietary License
"""
from typing import Dict, Iterable, Iterator, List, Optional, Tuple
import logging

from agents.mind_maps.size_estimator import estimate_node_size
from config.settings import config
from models.common import EdgeStyle, MAX_LEVEL, ROOT_LEVEL, is_detail_label
from models.domain.mindmap import Edge, Node, NodeStyle, Position, Size, style_for_node
from services.mindmap.exceptions import GraphValidationError
from services.mindmap.id_generator import IdGenerator, uuid_id_generator

logger = logging.getLogger(__name__)


class GraphStore:
    """
    Live node/edge collections and their mutation contract.

    Nodes and edges keep insertion order. parent_id on a node is a layout
    hint only; connectivity lives in the edge list.
    """

    def __init__(self, id_generator: Optional[IdGenerator] = None, layout_config=None):
        self.id_generator = id_generator or uuid_id_generator("node")
        self.config = layout_config or config
        self._nodes: Dict[str, Node] = {}
        self._edges: Dict[str, Edge] = {}
        self._selected_id: Optional[str] = None
        self.name: Optional[str] = None

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes.values())

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges.values())

    @property
    def selected_id(self) -> Optional[str]:
        return self._selected_id

    def is_empty(self) -> bool:
        return not self._nodes

    def get_node(self, node_id: str) -> Optional[Node]:
        return self._nodes.get(node_id)

    def styled_nodes(self) -> Iterator[Tuple[Node, NodeStyle]]:
        """Nodes paired with the style attributes the canvas draws them with."""
        for node in self._nodes.values():
            yield node, style_for_node(node)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add_node(self, level: int, label: str, anchor_id: Optional[str] = None) -> Node:
        """
        Create a node at `level`.

        For level > 0 the anchor must be the currently selected node and sit
        exactly one level above. anchor_id defaults to the current selection.

        Args:
            level: 0 (root) to 3 (detail)
            label: Node text, must not be blank
            anchor_id: Parent node for level > 0

        Returns:
            The new node

        Raises:
            GraphValidationError: blank label, bad level or bad anchor
        """
        text = (label or '').strip()
        if not text:
            raise GraphValidationError("Node label must not be empty", {"level": level})
        if not ROOT_LEVEL <= level <= MAX_LEVEL:
            raise GraphValidationError(
                f"Level must be between {ROOT_LEVEL} and {MAX_LEVEL}",
                {"level": level}
            )

        anchor = None
        if level > ROOT_LEVEL:
            anchor = self._resolve_anchor(level, anchor_id)

        is_detail = is_detail_label(level, text)
        width, height = estimate_node_size(text, is_detail)
        node = Node(
            id=self._unique_id(),
            label=text,
            level=level,
            parent_id=anchor.id if anchor else None,
            position=self._place_new_node(level, anchor),
            size=Size(width=width, height=height),
            is_detail=is_detail,
        )
        self._nodes[node.id] = node
        if anchor is not None:
            self._connect(anchor, node)

        logger.debug("[GraphStore] Added level %s node %s", level, node.id)
        return node

    def add_edge(self, source_id: str, target_id: str) -> Edge:
        """
        Free-form manual connection. Level rules do not apply.

        Connecting the same pair twice returns the existing edge.

        Raises:
            GraphValidationError: either endpoint is missing
        """
        missing = [node_id for node_id in (source_id, target_id) if node_id not in self._nodes]
        if missing:
            raise GraphValidationError(
                "Edge endpoints must exist",
                {"source": source_id, "target": target_id, "missing": missing}
            )
        for edge in self._edges.values():
            if edge.source == source_id and edge.target == target_id:
                return edge
        edge = self._connect(self._nodes[source_id], self._nodes[target_id])
        logger.debug("[GraphStore] Connected %s -> %s", source_id, target_id)
        return edge

    def update_label(self, node_id: str, new_label: str) -> Node:
        """
        Change a node's text and recompute its size. Position is kept.

        Raises:
            GraphValidationError: unknown node or blank label (node untouched)
        """
        node = self._require_node(node_id)
        text = (new_label or '').strip()
        if not text:
            raise GraphValidationError("Node label must not be empty", {"node_id": node_id})

        node.is_detail = is_detail_label(node.level, text, node.is_detail)
        width, height = estimate_node_size(text, node.is_detail)
        node.label = text
        node.size = Size(width=width, height=height)
        node.editing = False
        logger.debug("[GraphStore] Relabeled %s", node_id)
        return node

    def move_node(self, node_id: str, x: float, y: float) -> Node:
        """Drag gesture: update position only."""
        node = self._require_node(node_id)
        node.position = Position(x=x, y=y)
        return node

    def begin_edit(self, node_id: str) -> Node:
        """Open inline editing on one node. Other nodes keep their own state."""
        node = self._require_node(node_id)
        node.editing = True
        return node

    def cancel_edit(self, node_id: str) -> Optional[Node]:
        """Close inline editing without changing the label. No-op if absent."""
        node = self._nodes.get(node_id)
        if node is not None:
            node.editing = False
        return node

    def delete_node(self, node_id: str) -> bool:
        """
        Remove a node and every edge touching it.

        Returns:
            True if something was removed; absent ids are a no-op
        """
        if node_id not in self._nodes:
            return False
        del self._nodes[node_id]
        touching = [edge_id for edge_id, edge in self._edges.items() if edge.touches(node_id)]
        for edge_id in touching:
            del self._edges[edge_id]
        if self._selected_id == node_id:
            self._selected_id = None
        logger.debug("[GraphStore] Deleted %s and %s edges", node_id, len(touching))
        return True

    def clear(self) -> None:
        """Empty the graph."""
        self._nodes.clear()
        self._edges.clear()
        self._selected_id = None
        self.name = None
        logger.debug("[GraphStore] Cleared")

    def select(self, node_id: Optional[str]) -> None:
        """
        Set the advisory selection used by the next level-scoped add.

        Raises:
            GraphValidationError: node_id is not None and unknown
        """
        if node_id is not None:
            self._require_node(node_id)
        self._selected_id = node_id

    def replace(self, nodes: Iterable[Node], edges: Iterable[Edge], name: Optional[str] = None) -> None:
        """
        Swap in a whole new graph at once (imports, snapshot loads).

        Edges whose endpoints are not in the new node set are dropped.
        Selection and edit state are reset.
        """
        new_nodes: Dict[str, Node] = {}
        for node in nodes:
            copy = node.model_copy(deep=True)
            copy.editing = False
            new_nodes[copy.id] = copy

        new_edges: Dict[str, Edge] = {}
        for edge in edges:
            if edge.source not in new_nodes or edge.target not in new_nodes:
                logger.warning("[GraphStore] Dropping dangling edge %s (%s -> %s)", edge.id, edge.source, edge.target)
                continue
            new_edges[edge.id] = edge.model_copy(deep=True)

        self._nodes = new_nodes
        self._edges = new_edges
        self._selected_id = None
        self.name = name
        logger.info("[GraphStore] Replaced graph: %s nodes, %s edges", len(new_nodes), len(new_edges))

    def export(self) -> Tuple[List[Node], List[Edge]]:
        """Deep copies of the current nodes and valid edges."""
        nodes = [node.model_copy(deep=True) for node in self._nodes.values()]
        edges = [
            edge.model_copy(deep=True)
            for edge in self._edges.values()
            if edge.source in self._nodes and edge.target in self._nodes
        ]
        return nodes, edges

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _require_node(self, node_id: str) -> Node:
        node = self._nodes.get(node_id)
        if node is None:
            raise GraphValidationError(f"Node {node_id} not found", {"node_id": node_id})
        return node

    def _resolve_anchor(self, level: int, anchor_id: Optional[str]) -> Node:
        anchor_id = anchor_id if anchor_id is not None else self._selected_id
        if anchor_id is None:
            raise GraphValidationError("Please select a parent node first", {"level": level})
        if anchor_id != self._selected_id:
            raise GraphValidationError(
                "Anchor must be the selected node",
                {"anchor_id": anchor_id, "selected_id": self._selected_id}
            )
        anchor = self._require_node(anchor_id)
        if anchor.level != level - 1:
            raise GraphValidationError(
                f"A level {level} node needs a level {level - 1} parent",
                {"anchor_id": anchor_id, "anchor_level": anchor.level, "level": level}
            )
        return anchor

    def _place_new_node(self, level: int, anchor: Optional[Node]) -> Position:
        if anchor is None:
            return Position(x=self.config.ROOT_X, y=self.config.ROOT_Y)
        spacing = self.config.MANUAL_SPACING.get(level, self.config.CHILD_SPACING)
        y = anchor.position.y + self.config.ROW_HEIGHT
        occupied = {
            (node.position.x, node.position.y)
            for node in self._nodes.values()
            if node.parent_id == anchor.id
        }
        # First free slot to the right of the anchor
        slot = 0
        while (anchor.position.x + slot * spacing, y) in occupied:
            slot += 1
        return Position(x=anchor.position.x + slot * spacing, y=y)

    def _connect(self, source: Node, target: Node) -> Edge:
        edge_id = f"e{source.id}-{target.id}"
        if edge_id in self._edges:
            edge_id = f"{edge_id}-{self.id_generator()}"
        edge = Edge(
            id=edge_id,
            source=source.id,
            target=target.id,
            style=EdgeStyle.for_source_level(source.level),
        )
        self._edges[edge.id] = edge
        return edge

    def _unique_id(self) -> str:
        node_id = self.id_generator()
        while node_id in self._nodes:
            node_id = self.id_generator()
        return node_id
