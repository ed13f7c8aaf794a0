import json
from pathlib import Path

import main


DEFAULT_CONFIG = {
    "rules": [
        {
            "id": "@secretlint/secretlint-rule-pattern",
            "options": {"patterns": [{"name": "AWS", "pattern": "/AKIA[0-9A-Z]{16}/g"}]},
        },
        {"id": "@secretlint/secretlint-rule-preset-recommend"},
    ],
    "messages": "fr",
}


def _write_json(path: Path, data) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def _read_output(tmp_path: Path) -> dict:
    return json.loads((tmp_path / ".secretlintrc.json").read_text(encoding="utf-8"))


def _setup_default(tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    _write_json(tmp_path / ".default.secretlintrc.json", DEFAULT_CONFIG)


def test_cli_merges_external_config(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = _write_json(
        tmp_path / "external.json",
        {
            "rules": [
                {
                    "id": "@secretlint/secretlint-rule-pattern",
                    "options": {"patterns": [{"name": "Slack", "pattern": "/xox[baprs]-[0-9a-zA-Z-]+/"}]},
                },
                {"id": "@secretlint/secretlint-rule-no-k8s-kind-secret"},
            ],
            "messages": "en",
        },
    )

    exit_code = main.main([str(external)])

    out = capsys.readouterr().out
    merged = _read_output(tmp_path)
    assert exit_code == 0
    assert "Merge completed successfully!" in out
    assert "- Default rules: 2" in out
    assert "- External rules: 2" in out
    assert "- Merged rules: 3" in out
    assert merged["messages"] == "en"
    assert [p["name"] for p in merged["rules"][0]["options"]["patterns"]] == ["AWS", "Slack"]
    assert merged["rules"][2] == {"id": "@secretlint/secretlint-rule-no-k8s-kind-secret"}


def test_cli_without_external_copies_default(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)

    exit_code = main.main([])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "No external config provided" in out
    assert "- Rules: 2" in out
    assert _read_output(tmp_path) == DEFAULT_CONFIG


def test_cli_missing_external_uses_default(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)

    exit_code = main.main([str(tmp_path / "missing.json")])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "External config file not found" in out
    assert _read_output(tmp_path) == DEFAULT_CONFIG


def test_cli_empty_external_uses_default(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = tmp_path / "external.json"
    external.write_text("   \n", encoding="utf-8")

    exit_code = main.main([str(external)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "External config file is empty" in out
    assert _read_output(tmp_path) == DEFAULT_CONFIG


def test_cli_external_without_rules_merges_other_keys(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = _write_json(tmp_path / "external.json", {"rules": [], "messages": "en", "color": True})

    exit_code = main.main([str(external)])

    out = capsys.readouterr().out
    merged = _read_output(tmp_path)
    assert exit_code == 0
    assert "External config has no rules" in out
    assert merged["rules"] == DEFAULT_CONFIG["rules"]
    assert merged["messages"] == "en"
    assert merged["color"] is True


def test_cli_missing_default_fails(capsys, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    exit_code = main.main([])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "Default config file not found" in err
    assert not (tmp_path / ".secretlintrc.json").exists()


def test_cli_invalid_external_json_fails(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = tmp_path / "external.json"
    external.write_text("{not json", encoding="utf-8")

    exit_code = main.main([str(external)])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "Invalid JSON format in config file." in err
    assert not (tmp_path / ".secretlintrc.json").exists()


def test_cli_unsupported_flags_fail(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = _write_json(
        tmp_path / "external.json",
        {
            "rules": [
                {
                    "id": "@secretlint/secretlint-rule-pattern",
                    "options": {"patterns": [{"name": "AWS", "pattern": "/ASIA[0-9A-Z]{16}/gz"}]},
                }
            ]
        },
    )

    exit_code = main.main([str(external)])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "Unsupported regex flag(s) 'z'" in err


def test_cli_warns_on_duplicate_rule_ids(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = _write_json(tmp_path / "external.json", {"rules": [{"id": "dup"}, {"id": "dup"}]})

    exit_code = main.main([str(external)])

    out = capsys.readouterr().out
    assert exit_code == 0
    assert "Duplicate rule id 'dup' in external config" in out


def test_cli_paths_and_settings_file(capsys, tmp_path: Path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    base = _write_json(tmp_path / "base.json", {"rules": [{"id": "a"}]})
    _write_json(tmp_path / "secretlint-merge.json", {"indent": 2, "output_path": "from-settings.json"})
    output = tmp_path / "nested" / "merged.json"

    exit_code = main.main(["--default", str(base), "--output", str(output)])

    assert exit_code == 0
    assert output.read_text(encoding="utf-8") == '{\n  "rules": [\n    {\n      "id": "a"\n    }\n  ]\n}'
    assert not (tmp_path / "from-settings.json").exists()


def test_cli_log_level_silences_progress(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)

    exit_code = main.main(["--log-level", "error"])

    assert exit_code == 0
    assert capsys.readouterr().out == ""


def test_cli_settings_missing(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)

    exit_code = main.main(["--settings", str(tmp_path / "missing.json")])

    err = capsys.readouterr().err
    assert exit_code == 2
    assert "Settings path not found" in err


def test_cli_settings_invalid_json(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    settings = tmp_path / "settings.json"
    settings.write_text("{", encoding="utf-8")

    exit_code = main.main(["--settings", str(settings)])

    err = capsys.readouterr().err
    assert exit_code == 2
    assert "Invalid settings file" in err


def test_cli_invalid_utf8_external_fails(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    external = tmp_path / "external.json"
    external.write_bytes(b'{"rules": [{"id": "\xff"}]}')

    exit_code = main.main([str(external)])

    err = capsys.readouterr().err
    assert exit_code == 1
    assert "not valid UTF-8" in err
    assert not (tmp_path / ".secretlintrc.json").exists()


def test_cli_settings_unreadable(capsys, tmp_path: Path, monkeypatch) -> None:
    _setup_default(tmp_path, monkeypatch)
    settings = _write_json(tmp_path / "settings.json", {"indent": 2})

    def fake_load_settings(_path):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(main, "load_settings", fake_load_settings)

    exit_code = main.main(["--settings", str(settings)])

    err = capsys.readouterr().err
    assert exit_code == 2
    assert "Permission denied" in err
