from incomelogit.cli import main


def _dataset_text():
    order = [v for pair in zip(range(10), range(10, 20)) for v in pair]
    lines = []
    for i in order:
        category = "Private" if i % 2 else "State-gov"
        label = ">50K" if i >= 10 else "<=50K"
        lines.append(f"{i},{category},{label}")
    return "\n".join(lines) + "\n"


def test_main_execution_with_default_path(tmp_path, monkeypatch, capsys):
    data_dir = tmp_path / "adult"
    data_dir.mkdir()
    (data_dir / "adult.data").write_text(_dataset_text(), encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["Model trained successfully!", "Best Training Accuracy: 100.00%"]


def test_main_with_explicit_path(tmp_path, capsys):
    path = tmp_path / "income.csv"
    path.write_text(_dataset_text(), encoding="utf-8")

    assert main([str(path), "--test-size", "0.5"]) == 0
    out = capsys.readouterr().out
    assert "Best Training Accuracy: 100.00%" in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.csv")]) == 1
    assert capsys.readouterr().err.startswith("Error:")


def test_main_empty_dataset(tmp_path, capsys):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "Dataset is empty or malformed" in capsys.readouterr().err