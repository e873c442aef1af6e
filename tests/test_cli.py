import json

import pytest

from conftest import write_csv
from stepcount.cli import main


def test_text_report(walk_csv, capsys):
    assert main([str(walk_csv)]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "vectors read: 400"
    assert lines[1] == "normalized gravity vector: 0.000000 0.000000 1.000000"
    assert lines[2].startswith("rms: ")
    assert lines[3].startswith("cnt: ")
    assert 38 <= int(lines[3].split()[1]) <= 40


def test_json_report(walk_csv, capsys):
    assert main([str(walk_csv), "--json"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert report["n_samples"] == 400
    assert report["gravity"] == pytest.approx([0.0, 0.0, 1.0], abs=1e-12)
    assert report["steps"] == len(report["step_indices"])


def test_max_samples_option(walk_csv, capsys):
    assert main([str(walk_csv), "--max-samples", "100"]) == 0
    assert capsys.readouterr().out.splitlines()[0] == "vectors read: 100"


def test_dump_filtered(walk_csv, capsys):
    assert main([str(walk_csv), "--dump-filtered"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 400 + 4
    float(lines[0])


def test_missing_argument_exits_nonzero(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code != 0


def test_degenerate_recording(tmp_path, capsys):
    path = write_csv(tmp_path / "zeros.csv", [(0, 0, 0)] * 5)
    assert main([str(path)]) == 1
    assert "[Error]" in capsys.readouterr().err


def test_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "nope.csv")]) == 1
    assert "not found" in capsys.readouterr().err


def test_json_with_filtered_series(walk_csv, capsys):
    assert main([str(walk_csv), "--json", "--dump-filtered"]) == 0
    report = json.loads(capsys.readouterr().out)
    assert len(report["filtered"]) == 400
    assert report["n_samples"] == 400


def test_json_without_dump_has_no_series(walk_csv, capsys):
    assert main([str(walk_csv), "--json"]) == 0
    assert "filtered" not in json.loads(capsys.readouterr().out)


@pytest.mark.parametrize("args", [
    ["--max-samples", "-1"],
    ["--threshold-ratio", "-0.5"],
    ["--threshold-ratio", "0"],
])
def test_rejects_bad_options(walk_csv, capsys, args):
    with pytest.raises(SystemExit) as exc:
        main([str(walk_csv)] + args)
    assert exc.value.code == 2
    assert "must be" in capsys.readouterr().err
