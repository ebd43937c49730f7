"""Convert a tree-sitter parse tree into dressed Node objects."""

from __future__ import annotations

from typing import Dict, List, Optional

from tree_sitter import Node as TSNode

from rubysmell.analysis.comments import CommentMap

from .node import Node, node_class_for


class TreeDresser:
    """
    Dress parse nodes with rubysmell Node classes.

    Only named nodes are kept, minus comments. Each dressed node gets the
    Node subclass registered for its type and the comments the comment map
    holds for it.
    """

    def dress(self, ast: Optional[TSNode], comment_map: Optional[CommentMap]) -> Optional[Node]:
        if ast is None:
            return None
        return self._dress(ast, comment_map or {})

    def _dress(self, ts_node: TSNode, comment_map: CommentMap) -> Node:
        kept = [child for child in ts_node.named_children if child.type != "comment"]
        children: List[Node] = [self._dress(child, comment_map) for child in kept]
        by_id: Dict[int, Node] = {child.id: dressed for child, dressed in zip(kept, children)}

        klass = node_class_for(ts_node.type)
        fields: Dict[str, Node] = {}
        for name in klass.FIELDS:
            field_node = ts_node.child_by_field_name(name)
            if field_node is not None and field_node.id in by_id:
                fields[name] = by_id[field_node.id]

        return klass(
            ts_node.type,
            children,
            source=(ts_node.text or b"").decode("utf-8", errors="replace"),
            start_point=(ts_node.start_point[0], ts_node.start_point[1]),
            end_point=(ts_node.end_point[0], ts_node.end_point[1]),
            comments=comment_map.get(ts_node.id, ()),
            fields=fields,
        )
