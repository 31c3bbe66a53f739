import pytest

from labtrees.expression import (
    ExpressionNode,
    deletion_order,
    parse_prefix,
    postorder,
    preorder,
)


def test_simple_postorder():
    assert postorder(parse_prefix("+ab")) == "ab+"


def test_nested_postorder():
    assert postorder(parse_prefix("-*ab/cd")) == "ab*cd/-"


def test_tree_shape():
    tree = parse_prefix("+ab")
    assert tree.data == "+"
    assert tree.left == ExpressionNode("a")
    assert tree.right == ExpressionNode("b")


@pytest.mark.parametrize("expr", ["a", "+ab", "*+abc", "-*ab/cd", "/+a*bc-de"])
def test_preorder_round_trip(expr):
    assert preorder(parse_prefix(expr)) == expr


@pytest.mark.parametrize("expr", ["+ab", "*+abc", "-*ab/cd", "/+a*bc-de"])
def test_postorder_invariants(expr):
    tree = parse_prefix(expr)
    result = postorder(tree)
    assert sorted(result) == sorted(expr)
    assert result[-1] == expr[0]
    assert deletion_order(tree) == list(result)


def test_ignored_characters():
    assert preorder(parse_prefix("+a b")) == preorder(parse_prefix("+ab"))


def test_missing_operand_raises():
    with pytest.raises(ValueError):
        parse_prefix("+a")


def test_empty_expression_raises():
    with pytest.raises(ValueError):
        parse_prefix("")


def test_traversals_of_none():
    assert preorder(None) == ""
    assert postorder(None) == ""
    assert deletion_order(None) == []