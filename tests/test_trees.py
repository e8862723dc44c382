import pytest

from algokit.trees import TreeNode, is_symmetric, is_valid_bst, num_trees


def test_num_trees_base_cases():
    assert num_trees(0) == 1
    assert num_trees(1) == 1


def test_num_trees_small_values():
    assert num_trees(3) == 5
    assert num_trees(4) == 14


def test_num_trees_strictly_grows():
    values = [num_trees(n) for n in range(1, 12)]
    assert all(a < b for a, b in zip(values, values[1:]))


def test_num_trees_rejects_negative():
    with pytest.raises(ValueError):
        num_trees(-1)


def test_valid_bst_simple():
    root = TreeNode(2, TreeNode(1), TreeNode(3))
    assert is_valid_bst(root) is True


def test_invalid_bst_deep_violation():
    root = TreeNode(5, TreeNode(4), TreeNode(6, TreeNode(3), TreeNode(7)))
    assert is_valid_bst(root) is False


def test_invalid_bst_nested_ancestor_bound():
    root = TreeNode(
        32,
        TreeNode(26, TreeNode(19, None, TreeNode(27))),
        TreeNode(47, None, TreeNode(56)),
    )
    assert is_valid_bst(root) is False


def test_bst_rejects_duplicates():
    assert is_valid_bst(TreeNode(1, TreeNode(1))) is False
    assert is_valid_bst(TreeNode(1, None, TreeNode(1))) is False


def test_empty_tree_is_valid_bst():
    assert is_valid_bst(None) is True


def test_bst_handles_extreme_values():
    big = 2**63
    assert is_valid_bst(TreeNode(big, TreeNode(-big))) is True


def test_symmetric_tree():
    root = TreeNode(
        1,
        TreeNode(2, TreeNode(3), TreeNode(4)),
        TreeNode(2, TreeNode(4), TreeNode(3)),
    )
    assert is_symmetric(root) is True


def test_asymmetric_shape():
    root = TreeNode(1, TreeNode(2, None, TreeNode(3)), TreeNode(2, None, TreeNode(3)))
    assert is_symmetric(root) is False


def test_asymmetric_values():
    root = TreeNode(1, TreeNode(2), TreeNode(3))
    assert is_symmetric(root) is False


def test_single_node_and_empty_are_symmetric():
    assert is_symmetric(TreeNode(7)) is True
    assert is_symmetric(None) is True