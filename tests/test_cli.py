from typer.testing import CliRunner
from ssnkit.__main__ import main
from ssnkit.cli import app

runner = CliRunner()

def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "SSN validator" in result.stdout

def test_main_is_callable():
    assert callable(main)

def test_validate_valid():
    result = runner.invoke(app, ["validate", "2506901238", "1990-06-15"])
    assert result.exit_code == 0
    assert "valid" in result.stdout

def test_validate_invalid():
    result = runner.invoke(app, ["validate", "5506901238", "1990-06-15"])
    assert result.exit_code == 1
    assert "invalid" in result.stdout

def test_generate_deterministic():
    result = runner.invoke(app, ["generate", "1988-12-03", "--sex", "male", "--sequence", "1"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1312880014"

def test_generate_count():
    result = runner.invoke(app, ["generate", "1990-06-15", "--sex", "female", "--sequence", "1", "-n", "3"])
    assert result.exit_code == 0
    assert result.stdout.split() == ["6506900017", "6506900028", "6506900039"]

def test_generate_seed_is_reproducible():
    a = runner.invoke(app, ["generate", "1970-07-07", "--seed", "99"])
    b = runner.invoke(app, ["generate", "1970-07-07", "--seed", "99"])
    assert a.exit_code == 0
    assert a.stdout == b.stdout

def test_generate_bad_date():
    result = runner.invoke(app, ["generate", "1700-01-01"])
    assert result.exit_code == 2
    assert "outside the supported span" in result.stdout

def test_generate_uses_config(tmp_path):
    cfg = tmp_path / ".ssnkit.yaml"
    cfg.write_text("generation:\n  sex: male\n  sequence: 1\n")
    result = runner.invoke(app, ["--config", str(cfg), "generate", "1988-12-03"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1312880014"

def test_bad_config_exits():
    result = runner.invoke(app, ["--config", "/nonexistent/.ssnkit.yaml", "generate", "1988-12-03"])
    assert result.exit_code == 2

def test_decode():
    result = runner.invoke(app, ["decode", "2506901238"])
    assert result.exit_code == 0
    assert "1990-06-15" in result.stdout
    assert "male" in result.stdout

def test_decode_invalid():
    result = runner.invoke(app, ["decode", "0000000000"])
    assert result.exit_code == 1

def test_generate_never_prints_triple_six():
    result = runner.invoke(app, ["generate", "1999-09-09", "--sex", "male", "--sequence", "666"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "1909996676"

def test_allow_triple_six_flag_removed():
    result = runner.invoke(app, ["generate", "1999-09-09", "--allow-triple-six"])
    assert result.exit_code == 2

def test_verbose_validate_logs():
    result = runner.invoke(app, ["--verbose", "validate", "2506901238", "1990-06-15"])
    assert result.exit_code == 0
    assert "validated" in result.stdout
