
import json
import pytest
from scripts.cli import main, load_answers


def test_cli_writes_evaluation(tmp_path, capsys):
    answers = tmp_path / "answers.json"
    answers.write_text(json.dumps({"answers": ["I used a database with my team to ship it"] * 8}))
    out = tmp_path / "out" / "evaluation.json"

    result = main(["--answers", str(answers), "--warnings", "2", "--questions", "10", "--out", str(out)])
    assert result["overall_score"] == 90
    assert json.loads(out.read_text())["focus_score"] == 84
    assert "Evaluation written to" in capsys.readouterr().out


def test_cli_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_answers(str(tmp_path / "nope.json"))
