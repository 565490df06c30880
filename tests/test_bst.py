import pytest

from bstree.bst import BstNode

DEMO_KEYS = [15, 6, 18, 17, 20, 3, 7, 2, 4, 13, 9]


def build(keys):
    root = BstNode(keys[0])
    for key in keys[1:]:
        root.insert(key)
    return root


def inorder(node):
    if node is None:
        return []
    return inorder(node.left) + [node.key] + inorder(node.right)


def links_consistent(node, parent=None):
    if node is None:
        return True
    if node.parent is not parent:
        return False
    return links_consistent(node.left, node) and links_consistent(node.right, node)


@pytest.fixture
def demo():
    return build(DEMO_KEYS)


def test_insert_keeps_order_and_links(demo):
    assert inorder(demo) == sorted(DEMO_KEYS)
    assert links_consistent(demo)


def test_insert_places_children(demo):
    assert demo.left.key == 6
    assert demo.right.key == 18
    assert demo.right.left.key == 17
    assert demo.left.right.right.left.key == 9


def test_insert_equal_goes_right():
    root = BstNode(5)
    node = root.insert(5)
    assert root.right is node
    assert node.parent is root


def test_search_found(demo):
    for key in DEMO_KEYS:
        node = demo.search(key)
        assert node.key == key


def test_search_missing(demo):
    assert demo.search(22) is None
    assert demo.search(1) is None


def test_minimum_and_maximum(demo):
    assert demo.minimum().key == min(DEMO_KEYS)
    assert demo.maximum().key == max(DEMO_KEYS)
    assert demo.search(6).minimum().key == 2
    assert demo.search(18).minimum().key == 17


def test_root_from_any_node(demo):
    assert demo.maximum().root() is demo
    assert demo.search(9).root() is demo
    assert demo.root() is demo


@pytest.mark.parametrize(
    "key, expected",
    [(2, 3), (20, None), (15, 17), (13, 15), (9, 13), (7, 9)],
)
def test_successor_cases(demo, key, expected):
    result = demo.search(key).successor()
    assert (None if result is None else result.key) == expected


def test_successor_walks_in_order(demo):
    keys = []
    node = demo.minimum()
    while node is not None:
        keys.append(node.key)
        node = node.successor()
    assert keys == sorted(DEMO_KEYS)


def test_add_children_replace():
    root = BstNode(10)
    left = root.add_left_child(5)
    right = root.add_right_child(20)
    assert root.left is left and left.parent is root
    assert root.right is right and right.parent is root
    replaced = root.add_left_child(4)
    assert root.left is replaced
    assert replaced is not left


def test_copy_is_shallow(demo):
    duplicate = demo.copy()
    assert duplicate is not demo
    assert duplicate.key == demo.key
    assert duplicate.left is demo.left
    assert duplicate.right is demo.right
    assert duplicate.parent is demo.parent


def test_delete_sequence(demo):
    root = demo
    remaining = sorted(DEMO_KEYS)
    for key in [20, 7, 22, 3, 15, 17, 6]:
        node = root.search(key)
        if node is None:
            assert key not in remaining
            continue
        root = root.delete(node)
        remaining.remove(key)
        assert inorder(root) == remaining
        assert links_consistent(root)
        assert root.search(key) is None


def test_delete_root_with_two_children(demo):
    root = demo.delete(demo)
    assert root.key == 17
    assert root.parent is None
    assert inorder(root) == sorted(k for k in DEMO_KEYS if k != 15)


def test_delete_root_with_one_child():
    root = build([10, 20, 30])
    new_root = root.delete(root)
    assert new_root.key == 20
    assert new_root.parent is None
    assert inorder(new_root) == [20, 30]


def test_delete_only_node():
    root = BstNode(1)
    assert root.delete(root) is None


def test_delete_leaf_keeps_root(demo):
    root = demo.delete(demo.search(2))
    assert root is demo
    assert demo.search(3).left is None
    assert links_consistent(root)