import pytest

from puzzlesolvers.bridges import main, min_bridges, parse_input


def test_two_by_two_of_d_bridges():
    assert min_bridges(["DD", "DD"], (1, 1)) == 2


def test_start_cell_is_never_an_exit():
    assert min_bridges(["D"], (1, 1)) is None


def test_dead_end_is_unreachable():
    assert min_bridges(["...", ".D.", "..."], (2, 2)) is None


def test_vertical_bridge_at_edge_is_an_exit():
    assert min_bridges([".V.", ".D.", "..."], (2, 2)) == min_bridges(["DD", "DD"], (1, 1))


def test_horizontal_bridge_does_not_go_up():
    assert min_bridges([".V.", ".O.", "..."], (2, 2)) is None


def test_vertical_bridge_does_not_exit_sideways():
    # A V bridge on the left edge only points up and down.
    assert min_bridges(["...", "DV.", "..."], (2, 1)) is None


def test_longer_column_needs_one_more_bridge():
    short = min_bridges(["V"] * 5, (3, 1))
    longer = min_bridges(["V"] * 7, (4, 1))
    assert short is not None
    assert longer == short + 1


def test_shortest_route_is_chosen():
    grid = ["VVVVV", "DDDDD", "VVVVV"]
    assert min_bridges(grid, (2, 3)) == min_bridges(["DD", "DD"], (1, 1))


def test_start_outside_grid_is_rejected():
    with pytest.raises(ValueError):
        min_bridges(["DD", "DD"], (3, 1))


def test_ragged_grid_is_rejected():
    with pytest.raises(ValueError):
        min_bridges(["DD", "D"], (1, 1))


def test_empty_grid_is_rejected():
    with pytest.raises(ValueError):
        min_bridges([], (1, 1))


def test_parse_input_rows():
    assert parse_input("2 2\n1 1\nDD\nVO\n") == (["DD", "VO"], (1, 1))


def test_parse_input_spaced_cells():
    assert parse_input("2 2 1 2\nD V\nO D\n") == (["DV", "OD"], (1, 2))


def test_parse_input_missing_cells():
    with pytest.raises(ValueError):
        parse_input("2 2\n1 1\nDD\n")


def test_parse_input_malformed_header():
    with pytest.raises(ValueError):
        parse_input("two 2 1 1 DDDD")


def test_main_writes_minus_one_when_unreachable(tmp_path):
    source = tmp_path / "poduri.in"
    target = tmp_path / "poduri.out"
    source.write_text("3 3\n2 2\n...\n.D.\n...\n")
    assert main([str(source), str(target)]) == 0
    assert target.read_text() == "-1"


def test_main_writes_result(tmp_path):
    source = tmp_path / "poduri.in"
    target = tmp_path / "poduri.out"
    source.write_text("2 2\n1 1\nDD\nDD\n")
    main([str(source), str(target)])
    assert target.read_text() == str(min_bridges(["DD", "DD"], (1, 1)))