from chaintable.main import main, run_demo
from chaintable.table import NotFound


def test_run_demo(capsys):
    t = run_demo()

    assert capsys.readouterr().out == (
        "Value for key 'two': 2\n" "Removed value for key 'one': 1\n"
    )
    assert len(t) == 2
    assert t.get("one") == NotFound()
    assert t.get("three") == 3


def test_main_default():
    assert main([]) == 0


def test_main_dump(capsys):
    assert main(["--dump", "4"]) == 0

    out = capsys.readouterr().out
    assert "== demo ==" in out
    assert "count 2 capacity 4 load 0.50" in out


def test_main_trace(capsys):
    assert main(["--trace"]) == 0

    out = capsys.readouterr().out
    assert out.count("probe insert") == 3
    assert "probe get" in out
    assert "probe remove" in out


def test_main_invalid_capacity(capsys):
    assert main(["0"]) == 65
    assert main(["-3"]) == 65
    assert main(["lots"]) == 65

    err = capsys.readouterr().err
    assert err.startswith("chaintable: Capacity must be a positive integer")


def test_main_usage(capsys):
    assert main(["1", "2"]) == 64
    assert main(["--verbose"]) == 64
    assert capsys.readouterr().out.startswith("Usage: chaintable-demo")
