from mazegen.environment.cell import Cell, CellType


def test_new_cell_is_wall():
    cell = Cell(2, 3)
    assert cell.cell_type is CellType.WALL
    assert cell.is_wall
    assert not cell.is_passage


def test_carve_turns_wall_into_passage():
    cell = Cell(0, 0)
    cell.carve()
    assert cell.is_passage


def test_equality_ignores_type():
    wall = Cell(4, 7, CellType.WALL)
    passage = Cell(4, 7, CellType.PASSAGE)

    assert wall == passage
    assert hash(wall) == hash(passage)
    assert len({wall, passage}) == 1


def test_different_coordinates_are_not_equal():
    assert Cell(1, 2) != Cell(2, 1)
    assert Cell(1, 2) != (1, 2)
