"""Unit tests for TreeDresser and the dressed node classes."""

from __future__ import annotations

from rubysmell.analysis import RubyParser, associate
from rubysmell.ast import CallNode, ClassNode, MethodNode, ModuleNode, Node, SingletonMethodNode, TreeDresser


def _dress(text: str) -> Node:
    ast, comments = RubyParser().parse_with_comments(text, "string")
    return TreeDresser().dress(ast, associate(ast, comments))


def test_dress_none_returns_none() -> None:
    assert TreeDresser().dress(None, None) is None


def test_dress_without_comment_map() -> None:
    ast, _ = RubyParser().parse_with_comments("# doc\nclass C; end", "string")
    tree = TreeDresser().dress(ast, None)
    klass = next(tree.each_node("class"))
    assert klass.comments == ()
    assert klass.full_comment == ""


def test_node_classes_by_type() -> None:
    tree = _dress(
        "module M\n"
        "  class C < Base\n"
        "    def self.build(a, b = 1, *rest, key:, &blk); end\n"
        "    def run\n"
        "      helper.call(1, 2)\n"
        "    end\n"
        "  end\n"
        "end\n"
    )
    assert tree.type == "program"
    module = next(tree.each_node("module"))
    klass = next(tree.each_node("class"))
    assert isinstance(module, ModuleNode)
    assert isinstance(klass, ClassNode)
    assert module.name == "M"
    assert klass.name == "C"
    assert klass.full_name(module.name) == "M::C"
    assert klass.superclass_name == "Base"

    singleton = next(tree.each_node("singleton_method"))
    assert isinstance(singleton, SingletonMethodNode)
    assert singleton.name == "build"
    assert singleton.receiver.source == "self"
    assert singleton.parameter_names == ["a", "b", "rest", "key", "blk"]

    run = next(tree.each_node("method"))
    assert isinstance(run, MethodNode)
    assert run.name == "run"
    assert run.parameter_names == []

    call = next(run.each_node("call"))
    assert isinstance(call, CallNode)
    assert call.name == "call"
    assert call.receiver.source == "helper"
    assert [arg.source for arg in call.arguments] == ["1", "2"]


def test_defined_methods_skip_nested_classes() -> None:
    tree = _dress(
        "class Outer\n"
        "  def a; end\n"
        "  class Inner\n"
        "    def b; end\n"
        "  end\n"
        "  def self.c; end\n"
        "end\n"
    )
    outer = next(tree.each_node("class"))
    assert outer.name == "Outer"
    assert [m.name for m in outer.defined_methods] == ["a", "c"]


def test_scoped_class_name() -> None:
    klass = next(_dress("class A::B; end").each_node("class"))
    assert klass.name == "A::B"
    assert klass.simple_name == "B"
    assert klass.superclass_name is None


def test_positions_and_source() -> None:
    tree = _dress("\nclass C\n  def m\n  end\nend\n")
    klass = next(tree.each_node("class"))
    assert klass.line == 2
    assert klass.last_line == 5
    assert klass.column == 1
    assert klass.source.startswith("class C")
    method = next(klass.each_node("method"))
    assert method.line == 3
    assert method.column == 3


def test_comments_are_attached() -> None:
    tree = _dress("# Doc for C\n# more\nclass C\n  def m; end # trailing\nend\n")
    klass = next(tree.each_node("class"))
    assert klass.full_comment == "# Doc for C\n# more"
    assert klass.leading_comment == "# Doc for C\n# more"
    method = next(klass.each_node("method"))
    assert method.full_comment == "# trailing"
    assert method.leading_comment == ""


def test_comment_nodes_are_not_children() -> None:
    tree = _dress("# a\nx = 1\n# b\n")
    assert list(tree.each_node("comment")) == []
    assert [node.type for node in tree.children] == ["assignment"]


def test_each_node_ignoring() -> None:
    tree = _dress("class A\n  class B\n    def m; end\n  end\n  def n; end\nend\n")
    outer = next(tree.each_node("class"))
    names = [m.name for m in outer.each_node("method", ignoring="class")]
    assert names == ["n"]
    assert outer.contains_nested_node("class")
    inner = [c for c in outer.each_node("class") if c is not outer][0]
    assert not inner.contains_nested_node("class")


def test_length_counts_subtree() -> None:
    tree = _dress("x = 1\n")
    assignment = next(tree.each_node("assignment"))
    assert assignment.length == 3
    assert tree.length == 4


def test_repr_is_s_expression() -> None:
    tree = _dress("x = 1\n")
    assert repr(tree) == "(program (assignment (identifier 'x') (integer '1')))"


def test_header_comment_is_on_method_node() -> None:
    method = next(_dress("def m(x) # c\n  x\nend\n").each_node("method"))
    assert method.full_comment == "# c"


def test_crlf_comments_are_clean() -> None:
    klass = next(_dress("# Doc\r\n# more\r\nclass C\r\nend\r\n").each_node("class"))
    assert klass.full_comment == "# Doc\n# more"
    assert klass.leading_comment == "# Doc\n# more"
