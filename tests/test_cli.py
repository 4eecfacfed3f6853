import pytest

from objmesh.cli import describe_mesh, main
from objmesh.parser import loads

QUAD = "v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n"


def test_describe_mesh_counts():
    text = describe_mesh(loads(QUAD))
    assert "Number of vertices: 4" in text
    assert "Number of faces: 1" in text
    assert "groups_names: ['default']" in text


def test_describe_mesh_lists_indices():
    text = describe_mesh(loads(QUAD))
    assert "indices_vertices: [0, 1, 2, 3]" in text
    assert "faces_ends: [4]" in text


def test_main_prints_mesh_and_triangulation(tmp_path, capsys):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD, encoding="utf-8")
    assert main([str(path)]) == 0
    out = capsys.readouterr().out
    assert "[Triangulation]" in out
    assert out.count("Number of faces:") == 2
    assert "Number of faces: 2" in out


def test_main_output_matches_describe(tmp_path, capsys):
    path = tmp_path / "quad.obj"
    path.write_text(QUAD, encoding="utf-8")
    main([str(path)])
    out = capsys.readouterr().out
    mesh = loads(QUAD)
    assert describe_mesh(mesh) in out
    assert describe_mesh(mesh.triangulate()) in out


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "absent.obj")]) == 1
    assert "Error opening file" in capsys.readouterr().err


def test_main_parse_error(tmp_path, capsys):
    path = tmp_path / "bad.obj"
    path.write_text("v 0 0 0\nv 1 x 1\n", encoding="utf-8")
    assert main([str(path)]) == 1
    err = capsys.readouterr().err
    assert "Float expected" in err
    assert "line 2" in err


def test_main_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.obj"
    path.write_text("# nothing here\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "File is empty" in capsys.readouterr().err


def test_main_requires_path():
    with pytest.raises(SystemExit) as info:
        main([])
    assert info.value.code == 2