"""Test the command-line interface."""

import json

from slidesplit.cli import main

from samples import STORY, LIST_TEXT


class TestSplitCommand:
    """Test `slidesplit split`."""

    def test_split_text(self, capsys):
        assert main(["split", "--text", STORY, "-n", "3"]) == 0
        out = capsys.readouterr().out
        assert "3 slides (target 3, story)" in out
        assert "--- Slide 3" in out

    def test_split_json(self, capsys):
        assert main(["split", "--text", STORY, "-n", "3", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert len(data["fragments"]) == 3
        assert data["content_type"] == "story"
        assert data["used_fallback"] is False
        assert data["length_summary"]["count"] == 3

    def test_split_uses_recommended_count(self, capsys):
        assert main(["split", "--text", LIST_TEXT, "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["target_slides"] == 2

    def test_split_file(self, tmp_path, capsys):
        source = tmp_path / "story.txt"
        source.write_text(STORY, encoding="utf-8")
        assert main(["split", str(source), "-n", "4"]) == 0
        assert "4 slides" in capsys.readouterr().out

    def test_missing_file(self, tmp_path, capsys):
        assert main(["split", str(tmp_path / "missing.txt")]) == 1
        assert "Cannot read input" in capsys.readouterr().out

    def test_bad_policy(self, tmp_path, capsys):
        bad = tmp_path / "bad.yaml"
        bad.write_text("undersized: keep\n", encoding="utf-8")
        assert main(["split", "--text", STORY, "--policy", str(bad)]) == 1
        assert "Policy error" in capsys.readouterr().out

    def test_verbose_logs_to_stderr(self, capsys):
        assert main(["split", "--text", STORY, "-n", "3", "-v"]) == 0
        assert "plan_complete" in capsys.readouterr().err


class TestEstimateAndClassify:
    """Test `slidesplit estimate` and `slidesplit classify`."""

    def test_estimate_blank(self, capsys):
        assert main(["estimate", "--text", ""]) == 0
        assert capsys.readouterr().out.strip() == "1"

    def test_estimate_story(self, capsys):
        assert main(["estimate", "--text", STORY, "--chars-per-slide", "100"]) == 0
        assert capsys.readouterr().out.strip() == "7"

    def test_classify(self, capsys):
        assert main(["classify", "--text", LIST_TEXT]) == 0
        out = capsys.readouterr().out
        assert "Content type: list" in out
        assert "Recommended slides: 2" in out
        assert "Preview: - Drink a glass" in out


class TestPolicyCommands:
    """Test `slidesplit validate` and `slidesplit info`."""

    def test_validate(self, temp_policy_file, capsys):
        assert main(["validate", str(temp_policy_file), "-v"]) == 0
        out = capsys.readouterr().out
        assert "validation successful" in out
        assert "Undersized chunks: drop" in out
        assert "list: 2-6 slides" in out

    def test_validate_missing(self, capsys):
        assert main(["validate", "/does/not/exist.yaml"]) == 1
        assert "not found" in capsys.readouterr().out

    def test_validate_invalid(self, tmp_path, capsys):
        bad = tmp_path / "bad.yaml"
        bad.write_text("limits: [1, 2]\n", encoding="utf-8")
        assert main(["validate", str(bad)]) == 1
        assert "validation failed" in capsys.readouterr().out

    def test_no_command(self, capsys):
        assert main([]) == 1

    def test_info(self, capsys):
        assert main(["info"]) == 0
        assert "pydantic" in capsys.readouterr().out
