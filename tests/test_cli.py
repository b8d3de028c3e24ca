"""Tests for the typer CLI."""

import json

import pytest
from typer.testing import CliRunner

from cv_copilot.cli import app

runner = CliRunner()


@pytest.fixture
def job_file(tmp_path, sample_job_text):
    path = tmp_path / "job.txt"
    path.write_text(sample_job_text, encoding="utf-8")
    return path


@pytest.fixture
def cv_file(tmp_path, sample_cv_text):
    path = tmp_path / "cv.txt"
    path.write_text(sample_cv_text, encoding="utf-8")
    return path


class TestAnalyze:
    def test_writes_outputs(self, tmp_path, job_file, cv_file):
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["analyze", "--job", str(job_file), "--cv", str(cv_file),
             "--personal", "Long-time Acme user.", "--output", str(out)],
        )
        assert result.exit_code == 0, result.output
        report = (out / "suggestions.md").read_text(encoding="utf-8")
        letter = (out / "cover_letter.txt").read_text(encoding="utf-8")
        assert report.startswith("# CV Enhancement Suggestions: Senior Backend Engineer at Acme Payments")
        assert "Long-time Acme user." in letter

    def test_personal_file(self, tmp_path, job_file, cv_file):
        note = tmp_path / "note.txt"
        note.write_text("I admire your payments work.", encoding="utf-8")
        out = tmp_path / "out"
        result = runner.invoke(
            app,
            ["analyze", "--job", str(job_file), "--cv", str(cv_file),
             "--personal-file", str(note), "-o", str(out)],
        )
        assert result.exit_code == 0, result.output
        assert "I admire your payments work." in (out / "cover_letter.txt").read_text(encoding="utf-8")

    def test_missing_job_file(self, tmp_path, cv_file):
        result = runner.invoke(app, ["analyze", "--job", str(tmp_path / "nope.txt"), "--cv", str(cv_file)])
        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unreadable_cv_continues(self, tmp_path, job_file):
        cv = tmp_path / "cv.rtf"
        cv.write_text("{\\rtf1 hello}")
        out = tmp_path / "out"
        result = runner.invoke(app, ["analyze", "--job", str(job_file), "--cv", str(cv), "-o", str(out)])
        assert result.exit_code == 0, result.output
        assert "Could not read CV" in result.output
        assert "Professional Summary" in (out / "suggestions.md").read_text(encoding="utf-8")

    def test_llm_backend_shows_token_usage(self, monkeypatch, mock_llm_client, job_file, cv_file):
        monkeypatch.setattr(
            "cv_copilot.pipeline.backends.LLMClient", lambda **kwargs: mock_llm_client
        )
        result = runner.invoke(
            app, ["analyze", "--job", str(job_file), "--cv", str(cv_file), "--backend", "llm"]
        )
        assert result.exit_code == 0, result.output
        assert "backend=llm" in result.output
        assert "Tokens: 100 in / 50 out (1 calls)" in result.output

    def test_invalid_backend(self, job_file, cv_file):
        result = runner.invoke(
            app, ["analyze", "--job", str(job_file), "--cv", str(cv_file), "--backend", "magic"]
        )
        assert result.exit_code == 1
        assert "Invalid configuration" in result.output


class TestInspect:
    def test_job_json(self, job_file):
        result = runner.invoke(app, ["inspect", "--job", str(job_file)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["company_name"] == "Acme Payments"
        assert data["experience_level"] == "senior"

    def test_cv_json(self, cv_file):
        result = runner.invoke(app, ["inspect", "--cv", str(cv_file)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert [s["type"] for s in data["sections"]] == ["summary", "experience", "skills", "education"]

    def test_requires_exactly_one_input(self, job_file, cv_file):
        assert runner.invoke(app, ["inspect"]).exit_code == 1
        assert runner.invoke(app, ["inspect", "--job", str(job_file), "--cv", str(cv_file)]).exit_code == 1


class TestCheckFile:
    def test_text_file(self, cv_file):
        result = runner.invoke(app, ["check-file", str(cv_file)])
        assert result.exit_code == 0
        assert "chars extracted" in result.output

    def test_unsupported_file(self, tmp_path):
        path = tmp_path / "photo.png"
        path.write_bytes(b"\x89PNG")
        result = runner.invoke(app, ["check-file", str(path)])
        assert result.exit_code == 1
        assert "Unsupported file format" in result.output
