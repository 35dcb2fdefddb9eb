import random

import pytest

from puzzlesolvers.avl_sequence import AVLSequence, main


FIRST = [10, 212, 99, 54, 121, 31, 56, 75, 87]
SECOND = [9, 10, 11, 12, 13, 14, 15]


def _check_balanced(keys):
    """Rebuild a search tree from its preorder keys and return its height."""
    if not keys:
        return 0
    root, rest = keys[0], keys[1:]
    left = [k for k in rest if k < root]
    right = [k for k in rest if k > root]
    assert rest == left + right
    left_height = _check_balanced(left)
    right_height = _check_balanced(right)
    assert abs(left_height - right_height) <= 1
    return 1 + max(left_height, right_height)


def test_build_round_trip():
    seq = AVLSequence(FIRST)
    assert seq.to_list() == FIRST
    assert seq.size() == len(FIRST)
    assert len(seq) == len(FIRST)
    assert list(seq) == FIRST


def test_lookup_and_set():
    seq = AVLSequence(FIRST)
    assert seq.lookup(2) == 99
    seq.set(100, 2)
    assert seq.lookup(2) == 100
    assert seq.to_list()[:3] == [10, 212, 100]


def test_lookup_missing_raises():
    seq = AVLSequence(FIRST)
    with pytest.raises(IndexError):
        seq.lookup(42)
    with pytest.raises(IndexError):
        AVLSequence().lookup(0)


def test_set_missing_raises():
    with pytest.raises(IndexError):
        AVLSequence([1, 2]).set(5, 7)


def test_insert_existing_index_is_ignored():
    seq = AVLSequence([1, 2, 3])
    seq.insert(50, 1)
    assert seq.to_list() == [1, 2, 3]


def test_sparse_indices_read_as_zero():
    seq = AVLSequence()
    seq.insert(7, 0)
    seq.insert(8, 3)
    assert seq.size() == 4
    assert seq.to_list() == [7, 0, 0, 8]


def test_empty_sequence():
    seq = AVLSequence()
    assert seq.size() == 0
    assert seq.to_list() == []
    assert seq.preorder() == []


def test_preorder_of_perfect_tree():
    seq = AVLSequence(SECOND)
    assert seq.preorder() == [3, 1, 0, 2, 5, 4, 6]


@pytest.mark.parametrize("count", [1, 2, 9, 31, 100])
def test_sequential_inserts_stay_balanced(count):
    seq = AVLSequence(range(count))
    keys = seq.preorder()
    assert sorted(keys) == list(range(count))
    _check_balanced(keys)


def test_delete_shifts_later_items():
    seq = AVLSequence([3, 14, 17, 13, 21, 23])
    seq.delete(3)
    assert seq.to_list() == [3, 14, 17, 21, 23]
    assert seq.size() == 5
    _check_balanced(seq.preorder())


def test_delete_missing_raises():
    with pytest.raises(IndexError):
        AVLSequence([1, 2, 3]).delete(3)


def test_deletes_match_list_model():
    rng = random.Random(1234)
    model = list(range(100, 160))
    seq = AVLSequence(model)
    while model:
        index = rng.randrange(len(model))
        del model[index]
        seq.delete(index)
        assert seq.to_list() == model
        _check_balanced(seq.preorder())


def test_concat_appends_and_leaves_operands():
    first = AVLSequence(FIRST)
    second = AVLSequence(SECOND)
    joined = first.concat(second)
    assert joined.to_list() == FIRST + SECOND
    assert first.to_list() == FIRST
    assert second.to_list() == SECOND
    _check_balanced(joined.preorder())


def test_split_round_trip():
    joined = AVLSequence(FIRST + SECOND)
    lower, greater = joined.split(5)
    assert lower.to_list() == (FIRST + SECOND)[:6]
    assert greater.to_list() == (FIRST + SECOND)[6:]
    assert lower.concat(greater).to_list() == FIRST + SECOND


def test_split_at_end_leaves_second_empty():
    lower, greater = AVLSequence(SECOND).split(len(SECOND) - 1)
    assert lower.to_list() == SECOND
    assert greater.size() == 0


def test_main_prints_demo(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "FIRST TREE" in out
    assert "Size = 9" in out
    assert "LOOKUP(2)=99" in out
    assert "LOOKUP(2)=100" in out
    assert "Size = 7" in out