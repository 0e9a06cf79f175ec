import pytest

from tsplibreader.cli import main, tour_cost
from tsplibreader.instance import parse

_TEXT = (
    "NAME: tiny\nDIMENSION: 3\nEDGE_WEIGHT_TYPE: EXPLICIT\n"
    "EDGE_WEIGHT_FORMAT: FULL_MATRIX\nEDGE_WEIGHT_SECTION\n"
    "0 1 9\n9 0 2\n4 9 0\nEOF\n"
)

_SYMMETRIC = (
    "DIMENSION: 4\nEDGE_WEIGHT_TYPE: EXPLICIT\nEDGE_WEIGHT_FORMAT: UPPER_ROW\n"
    "EDGE_WEIGHT_SECTION\n3 8 5 2 7 6\n"
)


def test_tour_cost_closed_tour():
    inst = parse(_TEXT)
    assert tour_cost(inst, [1, 2, 3]) == 7.0


def test_tour_cost_rotation_invariant():
    inst = parse(_SYMMETRIC)
    assert tour_cost(inst, [1, 2, 3, 4]) == tour_cost(inst, [3, 4, 1, 2])


def test_tour_cost_reverse_on_symmetric_matrix():
    inst = parse(_SYMMETRIC)
    assert tour_cost(inst, [1, 3, 2, 4]) == tour_cost(inst, [4, 2, 3, 1])


def test_tour_cost_empty_and_single():
    inst = parse(_SYMMETRIC)
    assert tour_cost(inst, []) == 0.0
    assert tour_cost(inst, [2]) == 0.0


def test_main_prints_matrix_and_tour(tmp_path, capsys):
    path = tmp_path / "tiny.tsp"
    path.write_text(_TEXT, encoding="utf-8")
    assert main([str(path)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Dimension: 3"
    assert lines[1] == "DistanceMatrix: "
    assert lines[2] == "0 1 9 "
    assert lines[5] == "Exemplo de Solucao s = 1 -> 2 -> 3 -> 1"
    assert lines[6] == "Custo de S: 7"


def test_main_missing_parameters(capsys):
    assert main([]) == 1
    assert "Missing parameters" in capsys.readouterr().out


def test_main_too_many_parameters(capsys):
    assert main(["a.tsp", "1", "2", "3"]) == 1
    assert "Too many parameters" in capsys.readouterr().out


def test_main_file_not_found(tmp_path, capsys):
    assert main([str(tmp_path / "absent.tsp")]) == 1
    assert capsys.readouterr().out.strip() == "File not found"


@pytest.mark.parametrize("kind", ["MAN_2D", "XRAY2"])
def test_main_unsupported_type(tmp_path, capsys, kind):
    path = tmp_path / "bad.tsp"
    path.write_text(f"DIMENSION: 1\nEDGE_WEIGHT_TYPE: {kind}\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert kind in capsys.readouterr().out