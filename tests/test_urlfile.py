import pytest

from dracgraph.urlfile import URLFile, url_open


@pytest.fixture
def local_file(tmp_path):
    path = tmp_path / "page.html"
    path.write_text("alpha\nbeta\ngamma", encoding="utf-8")
    return path


def test_readline_local_lines(local_file):
    with url_open(str(local_file)) as f:
        assert f.is_local
        assert f.readline() == "alpha\n"
        assert f.readline() == "beta\n"
        assert f.readline() == "gamma"
        assert f.readline() == ""
        assert f.at_eof()


def test_at_eof_false_before_reading(local_file):
    with URLFile(str(local_file)) as f:
        assert f.at_eof() is False


def test_readline_size_limit(tmp_path):
    path = tmp_path / "x.txt"
    path.write_text("abcdef\nrest\n", encoding="utf-8")
    with url_open(str(path)) as f:
        assert f.readline(3) == "abc"
        assert f.readline() == "def\n"
        assert f.readline(100) == "rest\n"


def test_read_in_pieces_round_trip(local_file):
    content = local_file.read_text(encoding="utf-8")
    with url_open(str(local_file)) as f:
        head = f.read(4)
        tail = f.read()
        assert len(head) == 4
        assert head + tail == content
        assert f.read() == ""


def test_rewind_local(local_file):
    with url_open(str(local_file)) as f:
        first = f.readline()
        f.read()
        f.rewind()
        assert f.readline() == first


def test_file_url_is_fetched_remotely(local_file):
    content = local_file.read_text(encoding="utf-8")
    with url_open(local_file.as_uri()) as f:
        assert not f.is_local
        assert f.read() == content
        assert f.at_eof()
        f.rewind()
        assert f.readline() == "alpha\n"


def test_loop_until_eof_rebuilds_large_content(tmp_path):
    lines = [f"line {n} \u00e9\u00e8 text" for n in range(3000)]
    content = "\n".join(lines) + "\n"
    path = tmp_path / "big.txt"
    path.write_text(content, encoding="utf-8")
    for name in (str(path), path.as_uri()):
        collected = []
        with url_open(name) as f:
            while not f.at_eof():
                collected.append(f.readline())
        assert "".join(collected) == content
        assert len(collected) == len(lines)


def test_closed_after_context(local_file):
    with url_open(str(local_file)) as f:
        pass
    assert f.closed
    with pytest.raises(ValueError):
        f.read()
    with pytest.raises(ValueError):
        f.readline()


def test_close_is_idempotent(local_file):
    f = url_open(str(local_file))
    f.close()
    f.close()
    assert f.closed


def test_missing_name_raises(tmp_path):
    with pytest.raises(OSError):
        url_open(str(tmp_path / "does-not-exist"))


def test_empty_remote_raises(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    with pytest.raises(OSError):
        url_open(path.as_uri())


def test_empty_local_is_at_eof(tmp_path):
    path = tmp_path / "empty.txt"
    path.write_bytes(b"")
    with url_open(str(path)) as f:
        assert f.at_eof()
        assert f.readline() == ""