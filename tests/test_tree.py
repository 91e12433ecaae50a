import pytest

from bintree.tree import Node


@pytest.fixture
def root():
    node = Node(5)
    left = node.add_left_child(3)
    right = node.add_right_child(7)
    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    return node


def test_add_children_sets_parent_and_value():
    node = Node(5)
    left = node.add_left_child(3)
    right = node.add_right_child(7)
    assert node.left is left and left.value == 3 and left.parent is node
    assert node.right is right and right.value == 7 and right.parent is node


def test_add_child_replaces_existing():
    node = Node(5)
    node.add_left_child(3)
    replacement = node.add_left_child(1)
    assert node.left is replacement
    assert node.left.value == 1


def test_copy_is_shallow(root):
    duplicate = root.copy()
    assert duplicate is not root
    assert duplicate.value == root.value
    assert duplicate.left is root.left
    assert duplicate.right is root.right
    assert duplicate.parent is root.parent


def test_count_nodes(root):
    values = [5, 3, 7, 2, 4, 10]
    assert root.count_nodes() == len(values)
    assert root.right.count_nodes() == 2


def test_count_single_node():
    assert Node(1).count_nodes() == 1


def test_tree_depth_of_chain():
    chain = [1, 2, 3, 4]
    node = Node(chain[0])
    top = node
    for value in chain[1:]:
        node = node.add_right_child(value)
    assert top.tree_depth() == len(chain) - 1
    assert node.tree_depth() == 0


def test_tree_depth_balanced(root):
    assert root.tree_depth() == root.left.tree_depth() + 1


def test_get_node_by_value_returns_copy(root):
    found = root.get_node_by_value(2)
    assert found.value == 2
    assert found is not root.left.left
    assert found.parent is root.left


def test_get_node_by_value_follows_left_only(root):
    assert root.get_node_by_value(10) is None
    assert root.get_node_by_value(4) is None
    assert root.right.get_node_by_value(10).value == 10


def test_get_node_by_full_property_matches(root):
    found = root.get_node_by_full_property(root.left)
    assert found.value == 3
    assert found.left is root.left.left
    assert found.right is root.left.right


def test_get_node_by_full_property_mismatch(root):
    assert root.get_node_by_full_property(Node(3)) is None


def test_discard_on_copy(root):
    left = root.left
    duplicate = root.copy()
    assert duplicate.discard_node_by_value(3) is True
    assert duplicate.left is None
    assert left.parent is None
    assert root.left is left
    assert duplicate.count_nodes() == 1 + root.right.count_nodes()


def test_discard_missing_value_severs_path(root):
    assert root.discard_node_by_value(99) is False
    assert root.left is None
    assert root.right.value == 7


def test_discard_in_leaf_missing():
    assert Node(1).discard_node_by_value(2) is False


def test_sibling(root):
    assert root.left.sibling() is root.right
    assert root.right.sibling() is root.left
    assert root.sibling() is None
    assert root.right.right.sibling() is None