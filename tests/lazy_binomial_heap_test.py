import os
import sys
import random
import logging

import pytest

# Ensure we can import from the project
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from mergeheap.datastructures.lazy_binomial_heap import LazyBinomialHeap, _BinomialNode, _link

# ----------------------------
# Helper Functions
# ----------------------------

def tree_size(node):
    """Check binomial shape and heap order below *node*; return its node count."""
    count = 1
    expected_degree = node.degree - 1
    child = node.child
    while child is not None:
        assert child.degree == expected_degree
        assert not child.key < node.key
        count += tree_size(child)
        expected_degree -= 1
        child = child.sibling
    assert expected_degree == -1
    assert count == 2 ** node.degree
    return count


def check_forest(heap):
    """Verify the root list bookkeeping of a heap."""
    roots = []
    node = heap._head
    while node is not None:
        roots.append(node)
        node = node.sibling
    if not roots:
        assert heap._tail is None and heap._min is None and len(heap) == 0
        return roots
    assert heap._tail is roots[-1]
    assert any(r is heap._min for r in roots)
    assert all(not r.key < heap._min.key for r in roots)
    assert sum(tree_size(r) for r in roots) == len(heap)
    return roots


def set_bits(n):
    return [i for i in range(n.bit_length()) if n >> i & 1]

# ----------------------------
# Link primitive
# ----------------------------

def test_link_smaller_key_becomes_parent():
    a, b = _BinomialNode(7), _BinomialNode(3)
    root = _link(a, b)
    assert root is b
    assert root.degree == 1
    assert root.child is a
    assert a.sibling is None


def test_link_prefers_first_tree_on_ties():
    a, b = _BinomialNode(4), _BinomialNode(4)
    assert _link(a, b) is a


def test_link_prepends_loser_to_children():
    a = _link(_BinomialNode(1), _BinomialNode(5))
    b = _link(_BinomialNode(2), _BinomialNode(6))
    root = _link(a, b)
    assert root is a
    assert root.degree == 2
    assert root.child is b
    assert b.sibling.key == 5
    assert tree_size(root) == 4


def test_link_rejects_unequal_degrees():
    a = _link(_BinomialNode(1), _BinomialNode(2))
    with pytest.raises(AssertionError):
        _link(a, _BinomialNode(3))

# ----------------------------
# Laziness
# ----------------------------

def test_insert_and_merge_do_not_consolidate():
    h = LazyBinomialHeap([5, 3, 8])
    other = LazyBinomialHeap([1, 9])
    h.merge(other)
    assert h.root_count() == 5
    assert h.root_degrees() == [0, 0, 0, 0, 0]
    assert h.minimum() == 1
    check_forest(h)


def test_merged_source_is_emptied():
    h = LazyBinomialHeap([2])
    other = LazyBinomialHeap([1, 0])
    h.merge(other)
    assert other._head is None and other._tail is None and other._min is None
    assert len(other) == 0
    assert h.minimum() == 0


def test_merge_with_empty_other_keeps_min():
    h = LazyBinomialHeap([4, 2])
    h.merge(LazyBinomialHeap())
    assert h.minimum() == 2
    assert len(h) == 2
    check_forest(h)

# ----------------------------
# Consolidation
# ----------------------------

def test_lazy_stress_of_singleton_merges():
    keys = list(range(1, 1001))
    random.Random(3).shuffle(keys)
    h = LazyBinomialHeap()
    for key in keys:
        h.merge(LazyBinomialHeap([key]))
    assert h.root_count() == 1000
    assert len(h) == 1000

    assert h.extract_min() == 1
    degrees = h.root_degrees()
    assert degrees == sorted(set(degrees))
    assert degrees == set_bits(999)
    check_forest(h)

    assert [h.extract_min() for _ in range(3)] == [2, 3, 4]
    assert h.root_degrees() == set_bits(996)
    check_forest(h)


@pytest.mark.parametrize("size", [1, 2, 3, 4, 7, 8, 31, 64, 100])
def test_root_degrees_follow_binary_size(size):
    h = LazyBinomialHeap(range(size + 1))
    h.extract_min()
    assert h.root_count() <= size.bit_length()
    assert h.root_degrees() == set_bits(size)
    check_forest(h)


def test_insert_after_extract_appends_at_tail():
    h = LazyBinomialHeap(range(8))
    h.extract_min()
    h.insert(-1)
    assert h.root_degrees() == [0, 1, 2, 0]
    assert h.minimum() == -1
    check_forest(h)
    assert h.extract_min() == -1
    assert h.root_degrees() == [0, 1, 2]


def test_forest_stays_valid_through_random_operations():
    rng = random.Random(5)
    h = LazyBinomialHeap()
    for _ in range(400):
        op = rng.random()
        if op < 0.45:
            h.insert(rng.randint(0, 60))
        elif op < 0.65:
            h.merge(LazyBinomialHeap(rng.randint(0, 60) for _ in range(rng.randint(0, 5))))
        else:
            h.extract_min()
            degrees = h.root_degrees()
            assert len(degrees) == len(set(degrees))
        check_forest(h)


def test_consolidation_logs_summary(caplog):
    h = LazyBinomialHeap(range(5))
    with caplog.at_level(logging.DEBUG, logger="mergeheap.datastructures.lazy_binomial_heap"):
        h.extract_min()
    assert "consolidated 4 roots into 1 trees with 3 links" in caplog.text

# ----------------------------
# Introspection and teardown
# ----------------------------

def test_breadth_first_visits_every_key_level_by_level():
    h = LazyBinomialHeap(range(8))
    h.extract_min()
    keys = list(h.breadth_first())
    assert sorted(keys) == list(range(1, 8))
    # Roots come first
    assert keys[:3] == [r.key for r in check_forest(h)]


def test_clear_handles_large_unconsolidated_forest():
    h = LazyBinomialHeap(range(50000))
    h.extract_min()
    h.merge(LazyBinomialHeap(range(20000)))
    h.clear()
    assert len(h) == 0
    assert h.minimum() is None
    assert h.extract_min() is None
    assert h.root_count() == 0
    h.insert(3)
    assert h.minimum() == 3
    check_forest(h)


def test_extracted_node_is_detached():
    h = LazyBinomialHeap(range(5))
    h.extract_min()
    root = h._min
    assert root.key == 1 and root.degree == 2
    assert h.extract_min() == 1
    assert root.child is None and root.sibling is None
