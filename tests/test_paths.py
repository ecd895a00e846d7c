import pytest
from unittest.mock import patch
from linfit.utils.paths import read_lines
from linfit.ml.errors import SourceUnavailableError


def test_read_lines_strips_terminators(tmp_path):
    path = tmp_path / "lines.csv"
    path.write_bytes(b"1,2\r\n3,4\n5,6")
    assert list(read_lines(path)) == ["1,2", "3,4", "5,6"]


def test_read_lines_is_lazy(tmp_path):
    path = tmp_path / "lines.csv"
    path.write_text("a\nb\n")
    lines = read_lines(path)
    assert next(lines) == "a"
    lines.close()


def test_unadvanced_iterator_holds_no_open_handle(tmp_path):
    path = tmp_path / "lines.csv"
    path.write_text("a\nb\n")
    opened = []

    def tracking_open(*args, **kwargs):
        handle = open(*args, **kwargs)
        opened.append(handle)
        return handle

    with patch("linfit.utils.paths.open", side_effect=tracking_open, create=True):
        lines = read_lines(path)
        assert len(opened) == 1
        assert all(handle.closed for handle in opened)

        assert list(lines) == ["a", "b"]

    assert len(opened) == 2
    assert all(handle.closed for handle in opened)


def test_read_lines_reports_missing_source_once(tmp_path):
    missing = tmp_path / "missing.csv"
    # raised by the call itself, before any iteration
    with pytest.raises(SourceUnavailableError) as excinfo:
        read_lines(missing)
    assert excinfo.value.source == missing


def test_read_lines_replaces_undecodable_bytes(tmp_path):
    path = tmp_path / "lines.csv"
    path.write_bytes(b"\xff\xfe,1\n2,3\n")
    lines = list(read_lines(path))
    assert len(lines) == 2
    assert lines[1] == "2,3"
