import io
import sys

import pytest

import head
import streams


def head_chars(raw, **kwargs):

    extractor = head.BoundedExtractor(**kwargs)
    stdout = io.StringIO()
    extractor.extract(io.BytesIO(raw), stdout=stdout)

    return stdout.getvalue()


def test_first_ten_lines_by_default():

    raw = "".join("line {}\r\n".format(_) for _ in range(15)).encode()

    chars = head_chars(raw)

    assert chars == "".join("line {}\r\n".format(_) for _ in range(10))


def test_more_lines_than_input_copies_all_input():

    assert head_chars(b"a\nb", lines=5) == "a\nb"
    assert head_chars(b"", lines=5) == ""


def test_bytes_ignore_line_boundaries():

    assert head_chars(b"ab\ncd\n", bytes_=4) == "ab\nc"
    assert head_chars(b"ab", bytes_=400) == "ab"


def test_bytes_decode_permissively():

    assert head_chars("é!".encode(), bytes_=1) == "\ufffd"
    assert head_chars("é!".encode(), bytes_=2) == "é"


def test_parse_count():

    assert head.parse_count("7") == 7
    assert head.parse_count("2b") == 1024
    assert head.parse_count("1kB") == 1000
    assert head.parse_count("1K") == 1024
    assert head.parse_count("1KiB") == 1024
    assert head.parse_count("3MB") == 3 * 1000 ** 2
    assert head.parse_count("1G") == 1024 ** 3
    assert head.parse_count("1Q") == 1024 ** 10


@pytest.mark.parametrize("chars", ["0", "0K", "-5", "+5", "ten", "5X", ""])
def test_parse_count_rejects(chars):

    with pytest.raises(streams.ConfigError):
        head.parse_count(chars)


def test_main_heads_many_files(tmp_path, capsys):

    a_path = tmp_path / "a.txt"
    a_path.write_text("a1\na2\na3\n")
    b_path = tmp_path / "b.txt"
    b_path.write_text("b1\n")
    missing = str(tmp_path / "missing.txt")

    head.main(["head.py", "-n", "2", str(a_path), missing, str(b_path)])

    captured = capsys.readouterr()
    assert captured.out == "==> {} <==\na1\na2\n\n==> {} <==\nb1\n".format(
        a_path, b_path
    )
    assert captured.err == (
        "head.py: cannot open '{}' for reading: No such file or directory\n"
    ).format(missing)


def test_main_skips_header_for_one_file(monkeypatch, capsys):

    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"abc\ndef\n")))

    head.main(["head.py", "-c", "5"])

    assert capsys.readouterr().out == "abc\nd"


def test_main_names_stdin_in_headers(tmp_path, monkeypatch, capsys):

    a_path = tmp_path / "a.txt"
    a_path.write_text("a\n")
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"z\n")))

    head.main(["head.py", str(a_path), "-"])

    assert capsys.readouterr().out == "==> {} <==\na\n\n==> standard input <==\nz\n".format(
        a_path
    )


def test_main_prefers_bytes_over_lines(monkeypatch, capsys):

    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(b"abc\ndef\n")))

    head.main(["head.py", "-n", "1", "-c", "6"])

    assert capsys.readouterr().out == "abc\nde"


def test_main_rejects_zero_count(capsys):

    with pytest.raises(SystemExit) as exc_info:
        head.main(["head.py", "-n", "0"])

    assert exc_info.value.code == 2
    assert "count must be positive" in capsys.readouterr().err


def test_main_exits_1_on_read_failure(broken_stdin, capsys):

    with pytest.raises(SystemExit) as exc_info:
        head.main(["head.py"])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err == "head.py: error: -: Input/output error\n"


def test_main_exits_1_on_read_failure_of_bytes(broken_stdin, capsys):

    with pytest.raises(SystemExit) as exc_info:
        head.main(["head.py", "-c", "3"])

    assert exc_info.value.code == 1
    assert capsys.readouterr().err == "head.py: error: -: Input/output error\n"
