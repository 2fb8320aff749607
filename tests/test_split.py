from sensorlog.readings import ValueType
from sensorlog.split import group_by_sensor, main, write_sensor_files

LINES = ["1 a 5\n", "2 b true\n", "0 a 7\n", "bad\n"]


def test_groups_keep_first_appearance_order():
    groups, invalid = group_by_sensor(LINES)
    assert list(groups) == ["a", "b"]
    assert [r.time for r in groups["a"]] == [1, 0]
    assert groups["b"][0].value_type is ValueType.BOOLEAN
    assert invalid == ["bad\n"]


def test_sensor_limit_drops_new_sensors():
    groups, _ = group_by_sensor(LINES, max_sensors=1)
    assert list(groups) == ["a"]
    assert len(groups["a"]) == 2


def test_write_sorts_by_time(tmp_path):
    groups, _ = group_by_sensor(LINES)
    paths = write_sensor_files(groups, tmp_path)
    assert sorted(p.name for p in paths) == ["a.txt", "b.txt"]
    assert (tmp_path / "a.txt").read_text() == "0 a 7\n1 a 5\n"
    assert (tmp_path / "b.txt").read_text() == "2 b true\n"


def test_write_sort_is_stable(tmp_path):
    groups, _ = group_by_sensor(["5 s x\n", "5 s y\n", "1 s z\n"])
    write_sensor_files(groups, tmp_path)
    assert (tmp_path / "s.txt").read_text() == "1 s z\n5 s x\n5 s y\n"


def test_main_writes_files(tmp_path, monkeypatch, capsys):
    source = tmp_path / "input.txt"
    source.write_text("".join(LINES))
    monkeypatch.chdir(tmp_path)
    assert main([str(source)]) == 0
    assert (tmp_path / "a.txt").read_text() == "0 a 7\n1 a 5\n"
    assert "Linha inválida: bad" in capsys.readouterr().out


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Uso:")


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.txt")]) == 1
    assert "Erro ao abrir arquivo." in capsys.readouterr().out