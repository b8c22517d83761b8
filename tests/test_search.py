import pytest

from btreedemo.search import ORDER_M, SearchNode, build_simple_tree, main, search_key


@pytest.fixture
def root():
    return build_simple_tree()


def test_tree_layout(root):
    assert root.keys == [10, 20]
    assert not root.is_leaf
    assert len(root.children) == ORDER_M
    assert root.children[2] is None
    assert root.children[3].keys == [21, 30]


def test_find_in_root(root):
    assert search_key(root, 10) is root
    assert search_key(root, 20) is root


@pytest.mark.parametrize("value,slot", [(1, 0), (5, 0), (11, 1), (15, 1)])
def test_find_in_leaf(root, value, slot):
    assert search_key(root, value) is root.children[slot]


@pytest.mark.parametrize("value", [3, 0, 12, 19])
def test_missing_value(root, value):
    assert search_key(root, value) is None


def test_empty_child_slot_gives_none(root):
    # values above 20 route to slot 2, which the example tree leaves empty
    assert search_key(root, 30) is None
    assert search_key(root, 25) is None


def test_search_none_node():
    assert search_key(None, 1) is None


def test_single_leaf():
    leaf = SearchNode(True, [4, 8])
    assert search_key(leaf, 8) is leaf
    assert search_key(leaf, 6) is None


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == "Value: 3 not found\nFound value: 5\n"