# File: tests/test_link_extractor.py
"""Tests for anchor discovery, resolution, exclusion and scope filtering."""
import pytest

from link_crawler.crawler.link_extractor import extract_links, in_scope, is_excluded, resolve_link
from link_crawler.exceptions import LinkResolutionError

from fakes import page


def test_absolute_links_in_domain_are_kept():
    html = page("https://example.com/page1", "https://example.com/page2", "https://external.com/page3")
    links = extract_links("example.com", "https://example.com", html)
    assert links == {"https://example.com/page1", "https://example.com/page2"}


def test_media_download_and_git_links_are_excluded():
    html = page(
        "https://orf.at/media/file.mp3",
        "https://orf.at/download/file.jpeg",
        "https://gitlab.com",
        "https://orf.at/news",
    )
    assert extract_links("orf.at", "https://orf.at", html) == {"https://orf.at/news"}


def test_relative_links_are_resolved_against_page_url():
    html = page("https://orf.at/news", "/doc/")
    links = extract_links("orf.at", "https://orf.at", html)
    assert links == {"https://orf.at/news", "https://orf.at/doc/"}


def test_bare_relative_path_uses_page_directory():
    html = page("about", "../contact")
    links = extract_links("example.com", "https://example.com/news/index", html)
    assert links == {"https://example.com/news/about", "https://example.com/contact"}


def test_protocol_relative_link_takes_page_scheme():
    html = page("//blog.example.com/post")
    links = extract_links("example.com", "https://example.com/", html)
    assert links == {"https://blog.example.com/post"}


def test_subdomains_are_in_scope():
    html = page("https://orf.at/news", "https://kids.orf.at/story", "https://external.com/page")
    links = extract_links("orf.at", "https://orf.at", html)
    assert links == {"https://orf.at/news", "https://kids.orf.at/story"}


def test_non_navigational_hrefs_are_ignored():
    html = page(
        "mailto:info@example.com",
        "javascript:void(0)",
        "tel:+431234",
        "#top",
        "https://example.com/ok",
    )
    assert extract_links("example.com", "https://example.com/", html) == {"https://example.com/ok"}


def test_fragment_is_dropped_and_duplicates_collapse():
    html = page("/a#top", "/a#bottom", "https://example.com/a")
    assert extract_links("example.com", "https://example.com/", html) == {"https://example.com/a"}


def test_unresolvable_link_is_dropped_without_aborting():
    html = page("http://[::1", "http://example.com:port/", "/fine")
    assert extract_links("example.com", "https://example.com/", html) == {"https://example.com/fine"}


def test_anchor_with_unusual_attribute_layout():
    html = '<a class="some_class "href="https://example.com/page1">Page 1</a>' \
           "<A HREF='https://example.com/page2'>Page 2</A>"
    links = extract_links("example.com", "https://example.com", html)
    assert links == {"https://example.com/page1", "https://example.com/page2"}


def test_hrefs_with_leading_whitespace_are_kept():
    html = '<a href=" https://example.com/x">x</a><a href="\n/y">y</a><a href=" mailto:a@example.com">m</a>'
    links = extract_links("example.com", "https://example.com/", html)
    assert links == {"https://example.com/x", "https://example.com/y"}


def test_non_anchor_references_are_ignored():
    html = '<link href="https://example.com/style"><img src="https://example.com/pic"><a>no href</a>'
    assert extract_links("example.com", "https://example.com", html) == set()


def test_resolve_link_raises_for_bad_reference():
    with pytest.raises(LinkResolutionError) as info:
        resolve_link("https://example.com/", "http://[::1")
    assert info.value.base == "https://example.com/"


def test_resolve_link_rejects_non_http_result():
    with pytest.raises(LinkResolutionError):
        resolve_link("https://example.com/", "ftp://example.com/file")


@pytest.mark.parametrize(
    "url",
    [
        "https://example.com/img/logo.PNG",
        "https://example.com/report.pdf",
        "https://example.com/files/archive.tar.gz",
        "https://example.com/setup.exe",
        "https://example.com/slides.pptx",
        "https://example.com/Downloads/",
        "https://example.com/upload/form",
        "https://github.com/example.com",
        "https://example.com/digital/",
    ],
)
def test_is_excluded(url):
    assert is_excluded(url)


@pytest.mark.parametrize(
    "url",
    ["https://example.com/", "https://example.com/page.html", "https://example.com/pdf-guide"],
)
def test_is_not_excluded(url):
    assert not is_excluded(url)


def test_scope_is_plain_substring_containment():
    assert in_scope("https://example.com/a", "example.com")
    assert in_scope("https://shop.example.com/a", "example.com")
    # unrelated host that happens to contain the token
    assert in_scope("https://notexample.com.evil.net/", "example.com")
    assert in_scope("https://other.net/?ref=example.com", "example.com")
    assert not in_scope("https://example.org/", "example.com")
