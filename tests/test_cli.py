import logging

import pytest

from tabstore.cli import main


def test_end_to_end_with_demo_bootstrap(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main([]) == 0

    out, err = capsys.readouterr()
    assert (tmp_path / "data.csv").exists()
    assert "--- Loaded Data Table ---" in out
    assert "Total Estimated Revenue: $38283.50" in out
    assert "[INFO] Created demo file" in err
    assert "[SUCCESS] Loaded 5 data rows" in err

def test_missing_file_without_demo_still_exits_zero(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert main(["--path", "absent.csv", "--no-demo"]) == 0

    out, err = capsys.readouterr()
    assert out == ""
    assert "[ERROR] Failed to open file: absent.csv" in err

def test_settings_from_environment(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "sales.csv").write_text("Price,UnitsSold\n2.50,4\nbad,1\n")
    monkeypatch.setenv("TABSTORE_DATA_PATH", "sales.csv")
    monkeypatch.setenv("TABSTORE_COLUMN_WIDTH", "10")

    assert main([]) == 0

    out, err = capsys.readouterr()
    assert "Price     UnitsSold " in out
    assert "-" * 20 in out
    assert "$10.00" in out
    assert "[WARNING] Skipping row 2" in err

def test_log_level_flag(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    main(["--log-level", "warning"])
    _, err = capsys.readouterr()
    assert "[INFO]" not in err
    assert logging.getLogger("tabstore").level == logging.WARNING

def test_unknown_log_level_flag_is_rejected(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "verbose"])
    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err

def test_unknown_log_level_setting_is_rejected(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TABSTORE_LOG_LEVEL", "verbose")
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2
    assert "log_level" in capsys.readouterr().err

def test_log_level_setting_is_case_insensitive(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TABSTORE_LOG_LEVEL", "error")
    assert main([]) == 0
    assert logging.getLogger("tabstore").level == logging.ERROR

@pytest.mark.parametrize("width", ["0", "-3", "wide"])
def test_invalid_width_is_rejected(width, tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as exc:
        main(["--width", width])
    assert exc.value.code == 2
    assert "--width" in capsys.readouterr().err

def test_width_flag_overrides_setting(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("TABSTORE_COLUMN_WIDTH", "20")
    assert main(["--width", "8"]) == 0
    out, _ = capsys.readouterr()
    assert "-" * 40 + "\n" in out
    assert "-" * 41 not in out
