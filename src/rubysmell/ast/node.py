"""Dressed syntax-tree nodes handed to smell detectors."""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple, Type, Union

from rubysmell.analysis.comments import Comment

NodeTypes = Union[str, Iterable[str]]


def _as_set(types: NodeTypes) -> frozenset:
    if isinstance(types, str):
        return frozenset((types,))
    return frozenset(types)


class Node:
    """A named syntax node with its children, source text and comments."""

    # Field names copied from the parse tree onto this node (see field()).
    FIELDS: Tuple[str, ...] = ()

    def __init__(
        self,
        type: str,
        children: Sequence["Node"] = (),
        *,
        source: str = "",
        start_point: Tuple[int, int] = (0, 0),
        end_point: Tuple[int, int] = (0, 0),
        comments: Sequence[Comment] = (),
        fields: Optional[Dict[str, "Node"]] = None,
    ) -> None:
        self.type = type
        self.children: Tuple[Node, ...] = tuple(children)
        self.source = source
        self.start_point = start_point
        self.end_point = end_point
        self.comments: Tuple[Comment, ...] = tuple(comments)
        self._fields = dict(fields or {})

    def __repr__(self) -> str:
        if not self.children:
            return f"({self.type} {self.source!r})"
        inner = " ".join(repr(child) for child in self.children)
        return f"({self.type} {inner})"

    @property
    def line(self) -> int:
        return self.start_point[0] + 1

    @property
    def last_line(self) -> int:
        return self.end_point[0] + 1

    @property
    def column(self) -> int:
        return self.start_point[1] + 1

    @property
    def full_comment(self) -> str:
        """All comments attached to this node, one per line."""
        return "\n".join(comment.text for comment in self.comments)

    @property
    def leading_comment(self) -> str:
        """Comments that sit above this node."""
        return "\n".join(comment.text for comment in self.comments if comment.line < self.line)

    def field(self, name: str) -> Optional["Node"]:
        return self._fields.get(name)

    def each_node(self, target_types: NodeTypes, ignoring: NodeTypes = ()) -> Iterator["Node"]:
        """
        Yield this node and its descendants whose type is in target_types.

        Subtrees rooted at a node whose type is in ignoring are not entered
        (the ignored node itself is still yielded when it is a target).
        """
        targets = _as_set(target_types)
        skipped = _as_set(ignoring)
        stack: List[Node] = [self]
        while stack:
            node = stack.pop()
            if node.type in targets:
                yield node
            if node is not self and node.type in skipped:
                continue
            stack.extend(reversed(node.children))

    def contains_nested_node(self, target_type: str) -> bool:
        return any(node is not self for node in self.each_node(target_type))

    @property
    def length(self) -> int:
        """Number of nodes in this subtree."""
        return 1 + sum(child.length for child in self.children)


class ModuleNode(Node):
    FIELDS = ("name", "body")

    @property
    def name(self) -> str:
        name = self.field("name")
        return name.source if name else ""

    @property
    def simple_name(self) -> str:
        return self.name.split("::")[-1]

    def full_name(self, outer: str = "") -> str:
        return f"{outer}::{self.name}" if outer else self.name

    @property
    def defined_methods(self) -> List["MethodNode"]:
        """Methods defined directly in this module, not in nested modules or classes."""
        body = self.field("body")
        if body is None:
            return []
        return [
            node
            for node in body.each_node(("method", "singleton_method"), ignoring=("class", "module"))
            if isinstance(node, MethodNode)
        ]


class ClassNode(ModuleNode):
    FIELDS = ("name", "superclass", "body")

    @property
    def superclass_name(self) -> Optional[str]:
        superclass = self.field("superclass")
        if superclass is None:
            return None
        if superclass.children:
            return superclass.children[0].source
        return superclass.source.lstrip("<").strip()


class MethodNode(Node):
    FIELDS = ("name", "parameters", "body")

    @property
    def name(self) -> str:
        name = self.field("name")
        return name.source if name else ""

    @property
    def parameter_names(self) -> List[str]:
        params = self.field("parameters")
        if params is None:
            return []
        names: List[str] = []
        for param in params.children:
            if param.type == "identifier":
                names.append(param.source)
                continue
            ident = next((c for c in param.children if c.type == "identifier"), None)
            if ident is not None:
                names.append(ident.source)
        return names


class SingletonMethodNode(MethodNode):
    FIELDS = ("object", "name", "parameters", "body")

    @property
    def receiver(self) -> Optional[Node]:
        return self.field("object")


class CallNode(Node):
    FIELDS = ("receiver", "method", "arguments")

    @property
    def name(self) -> str:
        method = self.field("method")
        return method.source if method else ""

    @property
    def receiver(self) -> Optional[Node]:
        return self.field("receiver")

    @property
    def arguments(self) -> Tuple[Node, ...]:
        args = self.field("arguments")
        return args.children if args else ()


NODE_CLASSES: Dict[str, Type[Node]] = {
    "module": ModuleNode,
    "class": ClassNode,
    "method": MethodNode,
    "singleton_method": SingletonMethodNode,
    "call": CallNode,
}


def node_class_for(node_type: str) -> Type[Node]:
    return NODE_CLASSES.get(node_type, Node)
