import pytest

from bintree.bst import BstNode
from bintree.dot import bst_to_dot, generate_dotfile, generate_dotfile_bst, tree_to_dot
from bintree.tree import Node


def _small_tree():
    root = Node(5)
    left = root.add_left_child(3)
    right = root.add_right_child(7)
    left.add_left_child(2)
    left.add_right_child(4)
    right.add_right_child(10)
    return root


def _edge_lines(text):
    body = text[len("graph tree{\n"):-1]
    return body.splitlines()


def test_single_node_has_empty_body():
    assert tree_to_dot(Node(5)) == "graph tree{\n}"


def test_root_with_two_children():
    root = Node(5)
    root.add_left_child(3)
    root.add_right_child(7)
    assert tree_to_dot(root) == "graph tree{\n\t5--3;\n\t5--7;\n}"


def test_node_edges_come_before_subtree_edges():
    lines = _edge_lines(tree_to_dot(_small_tree()))
    assert lines == ["\t5--3;", "\t5--7;", "\t3--2;", "\t3--4;", "\t7--10;"]


def test_edge_count_matches_node_count():
    root = _small_tree()
    assert len(_edge_lines(tree_to_dot(root))) == root.count_nodes() - 1


def test_bst_rendering_uses_keys():
    root = BstNode(15)
    for key in (6, 18, 3):
        root.tree_insert(key)
    assert bst_to_dot(root) == "graph tree{\n\t15--6;\n\t15--18;\n\t6--3;\n}"


def test_bst_single_keyless_node_renders_empty():
    root = BstNode(1)
    root.tree_delete(1)
    assert bst_to_dot(root) == "graph tree{\n}"


def test_bst_keyless_node_with_child_raises():
    root = BstNode(None)
    root.add_left_child(1)
    with pytest.raises(ValueError):
        bst_to_dot(root)


def test_generate_dotfile_writes_rendered_text(tmp_path):
    root = _small_tree()
    path = tmp_path / "tree.dot"
    generate_dotfile(root, path)
    assert path.read_bytes() == tree_to_dot(root).encode("utf-8")


def test_generate_dotfile_bst_writes_rendered_text(tmp_path):
    root = BstNode(10)
    for key in (5, 15, 12):
        root.tree_insert(key)
    path = tmp_path / "bst.dot"
    generate_dotfile_bst(root, str(path))
    assert path.read_text(encoding="utf-8") == bst_to_dot(root)


def test_generate_dotfile_overwrites(tmp_path):
    path = tmp_path / "tree.dot"
    path.write_text("old content that is much longer than the new one", encoding="utf-8")
    generate_dotfile(Node(1), path)
    assert path.read_text(encoding="utf-8") == "graph tree{\n}"