import pytest

from puzzlesolvers.valley import min_excavation, parse_input, main


@pytest.mark.parametrize("heights", [[5, 3, 1, 2, 4], [9, 1, 8], [7, 6, 2, 3, 10, 11]])
def test_valley_needs_no_digging(heights):
    assert min_excavation(heights) == 0


def test_peak_before_minimum_is_dug():
    assert min_excavation([3, 5, 4, 1]) == 3


def test_three_heights_special_case():
    assert min_excavation([5, 7, 3]) == 4


def test_strictly_increasing_digs_second():
    heights = [2, 6, 9, 13]
    assert min_excavation(heights) == heights[1] - heights[0]


def test_strictly_decreasing_digs_second_last():
    heights = [13, 9, 6, 2]
    assert min_excavation(heights) == heights[-2] - heights[-1]


@pytest.mark.parametrize("heights", [[4, 8, 2, 6, 3, 9], [10, 12, 5, 1, 7, 6, 8]])
def test_mirror_symmetry_for_distinct_heights(heights):
    assert min_excavation(heights) == min_excavation(heights[::-1])


def test_result_not_negative_and_input_untouched():
    heights = [6, 9, 2, 8, 4, 7]
    copy = list(heights)
    assert min_excavation(heights) >= 0
    assert heights == copy


@pytest.mark.parametrize("heights", [[], [4]])
def test_too_short(heights):
    with pytest.raises(ValueError):
        min_excavation(heights)


def test_parse_input():
    assert parse_input("4\n3 5 4 1\n") == [3, 5, 4, 1]


@pytest.mark.parametrize("text", ["", "3 1 2", "2 a b"])
def test_parse_input_rejects_bad_text(text):
    with pytest.raises(ValueError):
        parse_input(text)


def test_main_writes_result(tmp_path):
    text = "6\n6 9 2 8 4 7\n"
    source = tmp_path / "valley.in"
    target = tmp_path / "valley.out"
    source.write_text(text)
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == str(min_excavation(parse_input(text)))