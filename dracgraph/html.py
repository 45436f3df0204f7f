"""Small helpers for pulling link targets out of HTML text.

The parser is deliberately simple. It scans for ``<a`` or ``<A`` tags,
takes the value after the first ``=`` in the tag, and resolves relative
targets against the URL of the page.
"""

from __future__ import annotations

import re
from collections.abc import Iterator

_ANCHOR = re.compile(r"<[aA]")
_URL_END = re.compile(r"['\">]")
_UPPER_TO_LOWER = str.maketrans(
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ", "abcdefghijklmnopqrstuvwxyz"
)
_PAGE_EXTENSIONS = (".htm", ".HTM", ".php", ".jsp")


def remove_white_space(html: str) -> str:
    """Return ``html`` without spaces or control characters (code <= 32)."""
    return "".join(c for c in html if ord(c) > 32)


def _resolve(target: str, page_url: str) -> str:
    """Combine a relative link target with the URL of its page."""
    if target.startswith("/"):
        end = page_url.find("/", 7)
        if end == -1:
            end = len(page_url)
        return page_url[:end] + target

    last_slash = page_url.rfind("/")
    last_dot = page_url.rfind(".")
    if last_slash == len(page_url) - 1:
        return page_url[: last_slash + 1] + target
    if last_slash <= 6 or last_slash > last_dot:
        return f"{page_url}/{target}"
    return page_url[: last_slash + 1] + target


def get_next_url(html: str, page_url: str, pos: int) -> tuple[str, int] | None:
    """Find the next link target at or after ``pos``.

    When ``pos`` is 0 the whitespace is first removed from ``html``; the
    returned position then refers to that cleaned text, which must be
    passed in for later calls.  Returns ``(url, next_pos)``, or ``None``
    once no more links are found.  Fragment links, ``mailto:`` links and
    targets starting with ``.`` are skipped.
    """
    if pos == 0:
        html = remove_white_space(html)

    while pos < len(html):
        anchor = _ANCHOR.search(html, pos)
        if anchor is None:
            return None
        pos = anchor.start()

        equals = html.find("=", pos + 1)
        if equals == -1 or html[equals - 1] == "e" or equals - pos > 10:
            pos += 1
            continue

        start = equals + 1
        if start < len(html) and html[start] in "\"'":
            start += 1

        end_match = _URL_END.search(html, start)
        if end_match is None:
            pos += 1
            continue
        end = end_match.start()

        target = html[start:end]
        if html.startswith("#", start) or html.startswith("mailto:", start):
            pos += 1
            continue
        if html.startswith(("http", "HTTP"), start):
            return target, end + 1
        if html.startswith(".", start):
            pos += 1
            continue
        return _resolve(target, page_url), end + 1

    return None


def iter_urls(html: str, page_url: str) -> Iterator[str]:
    """Yield every link target found in ``html``, in document order."""
    text = remove_white_space(html)
    pos = 0
    while (found := get_next_url(text, page_url, pos)) is not None:
        url, pos = found
        yield url


def normalize_word(word: str) -> str:
    """Return ``word`` with ASCII capital letters made lower case."""
    return word.translate(_UPPER_TO_LOWER)


def normalize_url(url: str) -> str | None:
    """Drop one trailing slash and check the URL names a page.

    Returns the normalised URL, or ``None`` if it is too short or points
    at a file whose extension is not one of .htm, .HTM, .php or .jsp.
    """
    if len(url) <= 1:
        return None
    if url.endswith("/"):
        url = url[:-1]
    if len(url) < 2:
        return None

    dot = url.rfind(".")
    slash = url.rfind("/")
    if slash >= 7 and dot > slash and dot + 2 < len(url):
        if url[dot : dot + 4] not in _PAGE_EXTENSIONS:
            return None
    return url