import pytest

from access_stats import LineTooLongError, read_lines


def test_read_lines_strips_newlines(tmp_path):
    log = tmp_path / "access.log"
    log.write_text("first\r\nsecond\n\nlast", encoding="utf-8")
    assert read_lines(log) == ["first", "second", "", "last"]


def test_line_at_limit_is_accepted(tmp_path):
    log = tmp_path / "access.log"
    log.write_text("x" * 1024 + "\n", encoding="utf-8")
    assert read_lines(log) == ["x" * 1024]


def test_long_line_rejects_file(tmp_path):
    log = tmp_path / "access.log"
    log.write_text("ok\n" + "x" * 1025 + "\n", encoding="utf-8")
    with pytest.raises(LineTooLongError) as exc_info:
        read_lines(log)
    assert exc_info.value.file_name == "access.log"
    assert exc_info.value.length == 1025
    assert exc_info.value.max_length == 1024


def test_custom_limit(tmp_path):
    log = tmp_path / "access.log"
    log.write_text("x" * 20, encoding="utf-8")
    with pytest.raises(LineTooLongError):
        read_lines(log, max_length=10)


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path / "missing.log")


def test_directory_is_not_a_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_lines(tmp_path)
