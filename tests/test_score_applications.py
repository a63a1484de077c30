# tests/test_score_applications.py

"""
Command-line scoring script tests
"""

import json

from admission_scoring.scripts import score_applications

# main() routes structlog through stdlib logging, so stdout carries only results.


def _write(path, data):
    path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
    return path


class TestScoreApplications:

    def test_single_payload(self, tmp_path, capsys, full_application_payload):
        path = _write(tmp_path / "app.json", full_application_payload)
        assert score_applications.main([str(path)]) == 0

        output = json.loads(capsys.readouterr().out)
        assert len(output) == 1
        assert output[0]["file"] == str(path)
        assert output[0]["index"] == 0
        assert output[0]["academic"]["capped"] == 15.0
        assert output[0]["performance"]["capped"] == 4.9
        assert output[0]["composite"] is None

    def test_batch_file_with_academic_base(self, tmp_path, capsys, full_application_payload):
        path = _write(tmp_path / "batch.json", [full_application_payload, {}])
        assert score_applications.main([str(path), "--academic-base", "70"]) == 0

        output = json.loads(capsys.readouterr().out)
        assert [entry["index"] for entry in output] == [0, 1]
        assert output[0]["composite"]["composite"] == 89.9
        assert output[1]["composite"]["composite"] == 70.0

    def test_unknown_ordinance(self, tmp_path, capsys):
        path = _write(tmp_path / "app.json", {})
        assert score_applications.main([str(path), "--ordinance", "1999"]) == 2
        assert capsys.readouterr().out == ""

    def test_missing_file_is_reported(self, tmp_path, capsys):
        good = _write(tmp_path / "good.json", {})
        missing = tmp_path / "missing.json"
        assert score_applications.main([str(missing), str(good)]) == 1

        output = json.loads(capsys.readouterr().out)
        assert [entry["file"] for entry in output] == [str(good)]

    def test_invalid_json(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        assert score_applications.main([str(path)]) == 1
        assert json.loads(capsys.readouterr().out) == []

    def test_failed_application_does_not_stop_batch(self, tmp_path, capsys):
        path = _write(tmp_path / "batch.json", [{"academicBase": 95}, "not an object", {}])
        assert score_applications.main([str(path)]) == 1

        output = json.loads(capsys.readouterr().out)
        assert [entry["index"] for entry in output] == [2]

    def test_non_numeric_base_does_not_stop_batch(self, tmp_path, capsys):
        path = _write(tmp_path / "batch.json", [{"academicBase": "n/a"}, {}])
        assert score_applications.main([str(path)]) == 1

        output = json.loads(capsys.readouterr().out)
        assert [entry["index"] for entry in output] == [1]
        assert output[0]["composite"] is None
