import pytest

from dracgraph.crawl import crawl, main, set_first_url

BASE = "http://www.unsw.edu.au"
INDEX = BASE + "/index.html"
PAGE_A = BASE + "/a.html"
OTHER = "http://other.com/x"


class FakePage:
    def __init__(self, text):
        self._lines = text.splitlines(keepends=True)

    def at_eof(self):
        return not self._lines

    def readline(self, size=-1):
        return self._lines.pop(0)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return None


class FakeWeb:
    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def __call__(self, url):
        self.calls.append(url)
        if url not in self.pages:
            raise OSError("missing")
        return FakePage(self.pages[url])


def make_web():
    return FakeWeb(
        {
            INDEX: '<a href="a.html">A</a> <a href="http://other.com/x">X</a>\n',
            PAGE_A: '<a href="index.html">home</a>\n',
        }
    )


def test_set_first_url_with_index():
    assert set_first_url(INDEX) == (BASE, INDEX)


def test_set_first_url_with_trailing_slash():
    assert set_first_url(BASE + "/") == (BASE, INDEX)


def test_set_first_url_plain():
    assert set_first_url(BASE) == (BASE, INDEX)


def test_crawl_builds_graph():
    web = make_web()
    graph = crawl(BASE, 40, opener=web, delay=0)
    assert graph.num_vertices() == 3
    assert graph.is_connected(INDEX, PAGE_A)
    assert graph.is_connected(INDEX, OTHER)
    assert graph.is_connected(PAGE_A, INDEX)
    assert not graph.is_connected(PAGE_A, OTHER)


def test_crawl_open_order_skips_foreign_domain():
    web = make_web()
    crawl(BASE, 40, opener=web, delay=0)
    assert web.calls == [INDEX, PAGE_A, INDEX]


def test_crawl_reports_found_urls(capsys):
    crawl(BASE, 40, opener=make_web(), delay=0)
    out = capsys.readouterr().out
    assert f"Found: '{PAGE_A}'" in out
    assert f"Found: '{OTHER}'" in out


def test_crawl_respects_limit():
    web = make_web()
    graph = crawl(BASE, 1, opener=web, delay=0)
    assert graph.num_vertices() == 1
    assert not graph.is_connected(INDEX, PAGE_A)
    assert web.calls == [INDEX]


def test_crawl_unopenable_page_raises():
    web = FakeWeb({})
    with pytest.raises(OSError, match="Couldn't open"):
        crawl(BASE, 40, opener=web, delay=0)


def test_main_usage():
    assert main([]) == 1


def test_main_foreign_base_gives_empty_graph(capsys):
    assert main(["http://example.com", "5"]) == 0
    out = capsys.readouterr().out
    assert out == "Graph is empty\nGraph is empty\n"