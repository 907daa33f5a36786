from chaintable.shared import format_entry, printf, printf_err


def test_printf(capsys):
    printf("{0:04d} {1:s}", 3, "x")
    assert capsys.readouterr().out == "0003 x"


def test_printf_err_follows_redirected_stderr(capsys):
    printf_err("bad {0!r}\n", 0)

    captured = capsys.readouterr()
    assert captured.err == "chaintable: bad 0\n"
    assert captured.out == ""


def test_format_entry():
    assert format_entry("a", 1) == "'a'=1"
