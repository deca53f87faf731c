import pytest

from snapruler.__main__ import main


def test_snap_to_grid(capsys):
    main(["snap", "12.3", "45.7"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["point: (20.000000, 40.000000)", "source: grid"]


def test_snap_to_line_endpoint(capsys):
    main(["snap", "31", "6", "--line", "0,0,33,7"])
    out = capsys.readouterr().out
    assert "point: (33.000000, 7.000000)" in out
    assert "source: endpoint" in out


def test_ruler_constraint_without_snapping(capsys):
    main(["snap", "90", "5", "--ruler", "0,0,0,200", "--no-snap"])
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "point: (90.000000, 0.000000)"
    assert out[1] == "source: ruler"
    assert out[2] == "constrained by: ruler"


def test_no_candidate_reports_raw(capsys):
    main(["snap", "9", "9", "--zoom", "10"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["point: (9.000000, 9.000000)", "source: raw"]


def test_stroke_argument(capsys):
    main(["snap", "1", "29", "--grid", "1000", "--stroke", "0,0;0,10;0,30"])
    out = capsys.readouterr().out
    assert "point: (0.000000, 30.000000)" in out
    assert "source: endpoint" in out


def test_angle_command(capsys):
    main(["angle", "0,0", "10,0", "0,10"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["angle: 90.000000", "display: 90"]


@pytest.mark.parametrize(
    "argv",
    [
        ["snap", "nan", "0"],
        ["snap", "1", "2", "--line", "0,0,1"],
        ["angle", "0,0", "1,x", "0,1"],
        [],
    ],
)
def test_bad_arguments_exit(argv, capsys):
    with pytest.raises(SystemExit):
        main(argv)
