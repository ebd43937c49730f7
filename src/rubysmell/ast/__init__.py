"""Dressed syntax tree."""

from .node import (
    NODE_CLASSES,
    CallNode,
    ClassNode,
    MethodNode,
    ModuleNode,
    Node,
    SingletonMethodNode,
    node_class_for,
)
from .tree_dresser import TreeDresser

__all__ = [
    "CallNode",
    "ClassNode",
    "MethodNode",
    "ModuleNode",
    "NODE_CLASSES",
    "Node",
    "SingletonMethodNode",
    "TreeDresser",
    "node_class_for",
]
