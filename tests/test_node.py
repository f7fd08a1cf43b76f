import pytest

from arbortree.node import Node


def _small_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    root.insert_right(128)
    return root


def _sibling_tree():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(128, root)
    root.left.right = Node(54, root.left)
    root.right.right = Node(402, root.right)
    root.left.left = Node(10, root.left)
    root.right.left = Node(110, root.right)
    root.right.right.left = Node(200, root.right.right)
    root.right.right.right = Node(512, root.right.right)
    return root


def test_new_node_records_parent_only():
    root = Node(98)
    child = Node(12, root)
    assert child.parent is root
    assert root.left is None and root.right is None
    assert child.value == 12


def test_insert_left_pushes_existing_child_down():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.right.insert_left(128)
    new = root.insert_left(54)
    assert new is root.left
    assert root.left.value == 54
    assert root.left.parent is root
    assert root.left.left.value == 12
    assert root.left.left.parent is root.left
    assert root.right.left.value == 128
    assert root.right.left.parent is root.right


def test_insert_right_pushes_existing_child_down():
    root = Node(98)
    root.left = Node(12, root)
    root.right = Node(402, root)
    root.left.insert_right(54)
    new = root.insert_right(128)
    assert new is root.right
    assert root.right.value == 128
    assert root.right.right.value == 402
    assert root.right.right.parent is root.right
    assert root.left.right.value == 54


def test_delete_detaches_subtree():
    root = _small_tree()
    left = root.left
    grandchild = left.right
    left.delete()
    assert root.left is None
    assert left.parent is None
    assert left.right is None
    assert grandchild.parent is None
    assert root.right.value == 128


def test_delete_whole_tree_clears_links():
    root = _small_tree()
    right = root.right
    root.delete()
    assert root.left is None and root.right is None
    assert right.parent is None and right.right is None


@pytest.mark.parametrize(
    "path, expected",
    [((), False), (("right",), False), (("right", "right"), True)],
)
def test_is_leaf(path, expected):
    node = _small_tree()
    for step in path:
        node = getattr(node, step)
    assert node.is_leaf() is expected


@pytest.mark.parametrize(
    "path, expected",
    [((), True), (("right",), False), (("right", "right"), False)],
)
def test_is_root(path, expected):
    node = _small_tree()
    for step in path:
        node = getattr(node, step)
    assert node.is_root() is expected


def test_sibling():
    root = _sibling_tree()
    assert root.left.sibling() is root.right
    assert root.right.left.sibling().value == 402
    assert root.left.right.sibling().value == 10
    assert root.sibling() is None


def test_sibling_missing_other_child():
    root = Node(98)
    root.left = Node(12, root)
    assert root.left.sibling() is None


def test_uncle():
    root = _sibling_tree()
    assert root.right.left.uncle().value == 12
    assert root.left.right.uncle().value == 128
    assert root.left.uncle() is None
    assert root.uncle() is None