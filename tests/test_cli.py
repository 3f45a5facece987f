import pytest

from simpleslice.__main__ import main
from simpleslice.config import SIMPLESLICE_CONFIG


CUBE_STL = """solid cube
facet normal 0 0 -1
outer loop
vertex 0 0 0
vertex 1 1 0
vertex 1 0 0
endloop
endfacet
facet normal 0 0 -1
outer loop
vertex 0 0 0
vertex 0 1 0
vertex 1 1 0
endloop
endfacet
facet normal 0 0 1
outer loop
vertex 0 0 1
vertex 1 0 1
vertex 1 1 1
endloop
endfacet
facet normal 0 0 1
outer loop
vertex 0 0 1
vertex 1 1 1
vertex 0 1 1
endloop
endfacet
facet normal 0 -1 0
outer loop
vertex 0 0 0
vertex 1 0 0
vertex 1 0 1
endloop
endfacet
facet normal 0 -1 0
outer loop
vertex 0 0 0
vertex 1 0 1
vertex 0 0 1
endloop
endfacet
facet normal 1 0 0
outer loop
vertex 1 0 0
vertex 1 1 0
vertex 1 1 1
endloop
endfacet
facet normal 1 0 0
outer loop
vertex 1 0 0
vertex 1 1 1
vertex 1 0 1
endloop
endfacet
facet normal 0 1 0
outer loop
vertex 1 1 0
vertex 0 1 0
vertex 0 1 1
endloop
endfacet
facet normal 0 1 0
outer loop
vertex 1 1 0
vertex 0 1 1
vertex 1 1 1
endloop
endfacet
facet normal -1 0 0
outer loop
vertex 0 1 0
vertex 0 0 0
vertex 0 0 1
endloop
endfacet
facet normal -1 0 0
outer loop
vertex 0 1 0
vertex 0 0 1
vertex 0 1 1
endloop
endfacet
endsolid cube
"""


@pytest.fixture(autouse=True)
def isolated(tmp_path, monkeypatch):
    monkeypatch.setenv('HOME', str(tmp_path))
    monkeypatch.setenv('APPDATA', str(tmp_path))
    monkeypatch.delenv(SIMPLESLICE_CONFIG, raising=False)
    return tmp_path


@pytest.fixture
def cube(tmp_path):
    path = tmp_path / 'cube.stl'
    path.write_text(CUBE_STL)
    return path


def test_slice_to_stdout(cube, capsys):
    assert main(['slice', str(cube), '-l', '0.5', '--precision', '1']) == 0
    out = capsys.readouterr().out
    assert out.count('G0 Z') == 3
    assert out.startswith('G0 Z0.0\n')
    assert 'G0 Z0.5\n' in out
    assert 'G0 Z1.0\n' in out


def test_slice_to_files(cube, tmp_path, capsys):
    gcode = tmp_path / 'cube.gcode'
    dxf = tmp_path / 'cube.dxf'
    rc = main(['slice', str(cube), '-l', '0.5', '-o', str(gcode), '--dxf', str(dxf)])
    assert rc == 0
    assert capsys.readouterr().out == ''
    assert gcode.read_text().count('G0 Z') == 3
    assert dxf.exists()


def test_slice_with_perimeters(cube, capsys):
    main(['slice', str(cube), '-l', '1', '--precision', '2'])
    plain = capsys.readouterr().out
    main(['slice', str(cube), '-l', '1', '--precision', '2', '--perimeter-spacing', '0.2'])
    with_perim = capsys.readouterr().out
    assert with_perim.count('G0 X') > plain.count('G0 X')


def test_slice_uses_config_file(cube, tmp_path, capsys):
    config = tmp_path / 'slice.yaml'
    config.write_text("layer_height: 0.25\nprecision: 2\n")
    assert main(['--config', str(config), 'slice', str(cube)]) == 0
    out = capsys.readouterr().out
    assert out.count('G0 Z') == 5
    assert 'G0 Z0.25\n' in out


def test_slice_missing_file(tmp_path, capsys):
    missing = tmp_path / 'missing.stl'
    assert main(['slice', str(missing)]) == 1
    err = capsys.readouterr().err
    assert f"Error: Failed to read ASCII STL from: {missing}" in err


def test_rectangle(capsys):
    assert main(['rectangle', '0', '0', '8', '6', '-s', '2', '--precision', '0']) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [
        'G0 X0 Y0', 'G1 X8 Y0', 'G1 X8 Y6', 'G1 X0 Y6', 'G1 X0 Y0',
        'G0 X2 Y2', 'G1 X6 Y2', 'G1 X6 Y4', 'G1 X2 Y4', 'G1 X2 Y2',
    ]


@pytest.mark.parametrize("bounds", [['0', '0', '0', '6'], ['0', '5', '8', '5'], ['3', '0', '1', '6']])
def test_rectangle_rejects_bad_bounds(bounds, capsys):
    assert main(['rectangle'] + bounds) == 1
    assert 'Error: Rectangle max must be greater than min.' in capsys.readouterr().err


def test_circle(capsys):
    assert main(['circle', '0', '0', '5', '-s', '2', '-n', '8', '--precision', '3']) == 0
    lines = capsys.readouterr().out.splitlines()
    assert sum(1 for line in lines if line.startswith('G0')) == 3
    assert len(lines) == 27
    assert lines[0] == 'G0 X5.000 Y0.000'


def test_circle_rejects_bad_radius(capsys):
    assert main(['circle', '0', '0', '0']) == 1
    assert capsys.readouterr().err.startswith('Error: ')


def test_bad_config_value(capsys):
    assert main(['circle', '0', '0', '1', '-n', '2']) == 1
    assert 'circle_segments' in capsys.readouterr().err


def test_no_action(capsys):
    assert main([]) == 1


def test_unwritable_output(tmp_path, capsys):
    assert main(['rectangle', '0', '0', '2', '2', '-o', str(tmp_path)]) == 1
    err = capsys.readouterr().err
    assert f"Error: Failed to open {tmp_path} for writing." in err


def test_unwritable_dxf(cube, tmp_path, capsys):
    target = tmp_path / 'no_such_dir' / 'cube.dxf'
    rc = main(['slice', str(cube), '-l', '0.5', '-o', str(tmp_path / 'cube.gcode'),
               '--dxf', str(target)])
    assert rc == 1
    assert capsys.readouterr().err.startswith('Error: ')


def test_negative_precision_clamped(capsys):
    assert main(['rectangle', '0', '0', '2', '2', '-s', '5', '--precision', '-2']) == 0
    assert capsys.readouterr().out.splitlines()[0] == 'G0 X0 Y0'
