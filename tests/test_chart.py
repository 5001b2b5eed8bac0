import pytest

from intcalc import chart
from intcalc.__main__ import main
from intcalc.integral import integrate


def test_title():
    di = integrate("x / (1 + (x^2))", -5, 5, 10)
    di.result = 0.0

    assert chart.title(di) == "Integral of x/(1+(x^2)) from -5.00 to 5.00 = 0.0000"


def test_render(tmp_path):
    di = integrate("sin(x)", 0, 3, 30)
    fname = tmp_path / "chart.png"

    chart.render(di, fname)

    with open(fname, 'rb') as f:
        assert f.read(8) == b'\x89PNG\r\n\x1a\n'


def test_render_special_values(tmp_path):
    di = integrate("1 / x", -1, 1, 4)
    fname = tmp_path / "chart.png"

    chart.render(di, fname)

    assert fname.exists()


def test_main(tmp_path, capsys):
    fname = tmp_path / "output.png"

    assert main(['-o', str(fname)]) == 0

    cap = capsys.readouterr()
    assert float(cap.out) == pytest.approx(0, abs=1e-9)
    assert fname.exists()


def test_main_samples(capsys):
    assert main(['x', '-n', '2', '-a', '0', '-b', '1', '--samples', '--no-chart']) == 0

    cap = capsys.readouterr()
    assert cap.out == "0.0 0.0\n0.5 0.5\n1.0 1.0\n0.5\n"


def test_main_at(capsys):
    assert main(['2^x', '--at', '0', '3']) == 0

    cap = capsys.readouterr()
    assert cap.out == "0.0 1.0\n3.0 8.0\n"


def test_main_error(capsys):
    assert main(['x +', '--no-chart']) == 1

    cap = capsys.readouterr()
    assert cap.out.startswith("Error: ")
