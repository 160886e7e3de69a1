import json

from ruststats.utils import make_sparkline, read_history, update_history, write_history


def test_read_history_missing_file(tmp_path):
    assert read_history(tmp_path / "missing.json") == []


def test_read_history_valid_data(tmp_path):
    path = tmp_path / "hist.json"
    write_history(path, [1.0, 2.0, 3.0])
    assert read_history(path) == [1.0, 2.0, 3.0]


def test_write_history_produces_json(tmp_path):
    path = tmp_path / "hist.json"
    write_history(path, [1.0, 2.0, 3.0])
    assert path.exists()
    assert json.loads(path.read_text()) == [1.0, 2.0, 3.0]


def test_write_history_truncates_previous_content(tmp_path):
    path = tmp_path / "hist.json"
    write_history(path, [1.0, 2.0, 3.0, 4.0, 5.0])
    write_history(path, [9.0])
    assert read_history(path) == [9.0]


def test_read_history_invalid_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("not json")
    assert read_history(path) == []


def test_read_history_wrong_shape(tmp_path):
    path = tmp_path / "obj.json"
    path.write_text('{"a": 1}')
    assert read_history(path) == []
    path.write_text('[1, "two"]')
    assert read_history(path) == []


def test_read_history_integers_become_floats(tmp_path):
    path = tmp_path / "ints.json"
    path.write_text("[1, 2]")
    assert read_history(path) == [1.0, 2.0]


def test_write_history_to_directory_is_silent(tmp_path):
    write_history(tmp_path, [1.0])
    assert read_history(tmp_path) == []


def test_update_history_trims_oldest(tmp_path):
    path = tmp_path / "hist.json"
    write_history(path, [1.0, 2.0, 3.0])
    assert update_history(path, 4.0, 3) == [2.0, 3.0, 4.0]
    assert read_history(path) == [2.0, 3.0, 4.0]


def test_update_history_zero_length(tmp_path):
    path = tmp_path / "hist.json"
    assert update_history(path, 4.0, 0) == []
    assert read_history(path) == []


def test_make_sparkline_empty():
    assert make_sparkline([]) == ""


def test_make_sparkline_single_value():
    assert make_sparkline([1.0]) == "▁"


def test_make_sparkline_multiple_values():
    result = make_sparkline([1.0, 2.0, 3.0, 4.0, 5.0])
    assert len(result) == 5
    assert result[0] == "▁"
    assert result[-1] == "▇"


def test_make_sparkline_constant_values():
    assert make_sparkline([3.0, 3.0, 3.0]) == "▁▁▁"


def test_make_sparkline_rounds_half_away_from_zero():
    assert make_sparkline([0.0, 3.0, 4.0]) == "▁▆▇"