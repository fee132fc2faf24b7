"""Tests for the command-line entry point."""

import json

import pytest

from brandtokens.main import build_request, main, parse_args


class TestBuildRequest:
    def test_flags(self):
        req = build_request(parse_args(["--directive", "legal case tracker", "--name", "Casewell"]))
        assert req.directive == "legal case tracker"
        assert req.product_name == "Casewell"
        assert req.pitch == ""

    def test_flags_override_brief(self, tmp_path):
        (tmp_path / "brief.md").write_text("## Directive\nlegal case tracker\n## Product Name\nCasewell\n")
        req = build_request(parse_args(["--brief", str(tmp_path), "--name", "Docketly"]))
        assert req.directive == "legal case tracker"
        assert req.product_name == "Docketly"


class TestMain:
    def test_generate(self, tmp_path):
        out = tmp_path / "out"
        main(["--directive", "legal case tracker", "--name", "Casewell", "--output", str(out), "--zip"])
        for name in ("tokens.css", "tokens.json", "tokens.md", "tailwind.config.ts", "snapshot.json", "swatches.png"):
            assert (out / name).exists()
        assert (out / "casewell_design_tokens.zip").exists()

    def test_output_dir_from_environment(self, tmp_path, monkeypatch):
        monkeypatch.setenv("BRAND_TOKENS_OUTPUT_DIR", str(tmp_path))
        main(["--directive", "Build a CRM", "--name", "Acme", "--no-render"])
        assert (tmp_path / "acme" / "tokens.css").exists()
        assert not (tmp_path / "acme" / "swatches.png").exists()

    def test_json_stdout(self, capsys):
        main(["--directive", "legal case tracker", "--name", "Casewell", "--json"])
        data = json.loads(capsys.readouterr().out)
        assert data["category"] == "legal"
        assert data["fingerprint"]["seed"] == 1136575442

    def test_verify_ok(self, tmp_path):
        main(["--directive", "legal case tracker", "--name", "Casewell", "--output", str(tmp_path), "--no-render"])
        main(["--verify", str(tmp_path / "snapshot.json")])

    def test_verify_tampered_exits_1(self, tmp_path):
        main(["--directive", "legal case tracker", "--name", "Casewell", "--output", str(tmp_path), "--no-render"])
        path = tmp_path / "snapshot.json"
        data = json.loads(path.read_text())
        data["brandChroma"] = 0.2
        path.write_text(json.dumps(data))
        with pytest.raises(SystemExit) as exc:
            main(["--verify", str(path)])
        assert exc.value.code == 1

    def test_missing_brief_exits_1(self, tmp_path):
        with pytest.raises(SystemExit) as exc:
            main(["--brief", str(tmp_path / "nowhere")])
        assert exc.value.code == 1

    def test_malformed_snapshot_exits_1(self, tmp_path):
        path = tmp_path / "snapshot.json"
        path.write_text('{"version": "1.0.0"}')
        with pytest.raises(SystemExit) as exc:
            main(["--verify", str(path)])
        assert exc.value.code == 1
