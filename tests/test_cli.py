import pytest

from genpass import cli
from genpass.config import DEFAULTS, load_config, save_config

@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    monkeypatch.setenv("APPDATA", str(tmp_path))

def _lines(capsys):
    out = capsys.readouterr().out
    return out.splitlines()

def test_default_prints_one_line(capsys):
    assert cli.main([]) == 0
    lines = _lines(capsys)
    assert len(lines) == 1
    assert len(lines[0]) == 12

def test_length_include_exclude(capsys):
    assert cli.main(["-len", "8", "-inc", "n", "-exc", "13579"]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 8
    assert all(c in "02468" for c in pw)

def test_long_password_is_not_wrapped(capsys):
    assert cli.main(["-len", "300", "-inc", "s"]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 300

def test_double_dash_aliases(capsys):
    assert cli.main(["--length", "5", "--include", "u"]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 5
    assert pw.isupper()

def test_empty_include_means_all(capsys):
    assert cli.main(["-inc", "", "-len", "40"]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 40

def test_copies(capsys):
    assert cli.main(["-copies", "3", "-len", "6"]) == 0
    lines = _lines(capsys)
    assert len(lines) == 3
    assert all(len(line) == 6 for line in lines)

def test_seed_is_reproducible(capsys):
    cli.main(["-seed", "99", "-len", "20"])
    first = capsys.readouterr().out
    cli.main(["-seed", "99", "-len", "20"])
    second = capsys.readouterr().out
    assert first == second

def test_empty_pool_fails_without_output(capsys):
    code = cli.main(["-inc", "l", "-exc", "abcdefghijklmnopqrstuvwxyz"])
    captured = capsys.readouterr()
    assert code == 1
    assert captured.out == ""
    assert "no characters available" in captured.err

def test_negative_length_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-len", "-3"])
    assert exc.value.code == 2
    assert capsys.readouterr().out == ""

def test_save_defaults(capsys):
    assert cli.main(["-save", "-len", "7", "-inc", "n"]) == 0
    capsys.readouterr()
    assert cli.main([]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 7
    assert pw.isdigit()

def test_bad_config_values_use_defaults(capsys):
    save_config({"length": None, "include": 5, "exclude": ""})
    assert cli.main([]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 12

def test_failed_save_keeps_previous_defaults(capsys):
    assert cli.main(["-save", "-inc", "x"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert load_config() == DEFAULTS
    assert cli.main([]) == 0
    (pw,) = _lines(capsys)
    assert len(pw) == 12

def test_unwritable_config_is_reported(capsys, monkeypatch):
    def fail(cfg):
        raise PermissionError("read-only config dir")
    monkeypatch.setattr(cli, "save_config", fail)
    assert cli.main(["-save", "-len", "9"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "read-only config dir" in captured.err

def test_verbose_never_logs_the_password(capsys):
    assert cli.main(["-v", "-seed", "1"]) == 0
    captured = capsys.readouterr()
    (pw,) = captured.out.splitlines()
    assert len(pw) == 12
    assert pw not in captured.err
    assert "seeded" in captured.err
    assert "pool of" in captured.err

def test_zero_copies_is_usage_error(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-copies", "0"])
    assert exc.value.code == 2
    assert capsys.readouterr().out == ""

def test_non_integer_length_message(capsys):
    with pytest.raises(SystemExit) as exc:
        cli.main(["-len", "ten"])
    assert exc.value.code == 2
    assert "expected an integer" in capsys.readouterr().err
