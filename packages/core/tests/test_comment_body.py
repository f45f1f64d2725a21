"""Tests for the preview comment body."""

from prpreview_core.comment import (
    NO_FILES_MESSAGE,
    build_body,
    build_changed_files_markdown,
    build_signature_line,
    build_urls_markdown,
    join_url,
)
from prpreview_core.config import DEFAULT_CONFIG
from prpreview_core.deploy import ChannelSuccessResult, SiteDeploy

EXPIRE = "2020-10-27T21:32:57.233344586Z"
URL = "https://my-site--pr7-abc.web.app"


def _result(*urls):
    urls = urls or (URL,)
    return ChannelSuccessResult(
        result={f"site-{i}": SiteDeploy(site=f"site-{i}", url=url, expire_time=EXPIRE) for i, url in enumerate(urls)}
    )


def _body(served_paths, result=None):
    return build_body(
        result or _result(),
        "abc1234",
        served_paths,
        signature_line=build_signature_line(DEFAULT_CONFIG, 7),
        deploy_sign="sig123",
    )


class TestUrlsMarkdown:
    def test_single_url_is_bare_link(self):
        assert build_urls_markdown([URL]) == f"[{URL}]({URL})"

    def test_multiple_urls_are_bulleted(self):
        md = build_urls_markdown(["https://a", "https://b"])
        assert md.splitlines() == ["- [https://a](https://a)", "- [https://b](https://b)"]


class TestChangedFilesMarkdown:
    def test_one_line_per_served_path(self):
        md = build_changed_files_markdown([URL], ["/index.md", "about.html"])
        assert md.splitlines() == [
            f"- [{URL}/index.md]({URL}/index.md)",
            f"- [{URL}/about.html]({URL}/about.html)",
        ]

    def test_each_path_links_every_preview_url(self):
        md = build_changed_files_markdown(["https://a", "https://b"], ["/x.md"])
        assert md == "- [https://a/x.md](https://a/x.md) · [https://b/x.md](https://b/x.md)"

    def test_empty_paths_render_explicit_message(self):
        assert build_changed_files_markdown([URL], []) == NO_FILES_MESSAGE

    def test_join_url_uses_single_slash(self):
        assert join_url("https://a/", "/x.md") == "https://a/x.md"
        assert join_url("https://a", "x.md") == "https://a/x.md"


class TestSignatureLine:
    def test_echoes_inputs_in_fixed_order(self):
        line = build_signature_line(DEFAULT_CONFIG, 7)
        assert line == (
            "showDetailedUrls: false<br>pullRequestNumber: 7<br>fileExtension: md, html"
            "<br>originalPath: _site/<br>replacedPath: /"
        )


class TestBuildBody:
    def test_contains_all_sections(self):
        body = _body(["/index.md"])
        assert body.startswith("Visit the preview URL for this PR (updated for commit abc1234):")
        assert f"[{URL}]({URL})" in body
        assert "### Changed Details:" in body
        assert f"[{URL}/index.md]({URL}/index.md)" in body
        assert "<sub>(expires Tue, 27 Oct 2020 21:32:57 GMT)</sub>" in body
        assert "pullRequestNumber: 7" in body
        assert body.endswith("<sub>Sign: `sig123`</sub>")

    def test_no_changed_files_section_is_not_blank(self):
        body = _body([])
        assert f"### Changed Details:\n{NO_FILES_MESSAGE}\n" in body

    def test_multiple_urls_listed(self):
        body = _body(["/a.md"], result=_result("https://a", "https://b"))
        assert "- [https://a](https://a)\n- [https://b](https://b)" in body

    def test_body_is_stripped(self):
        body = _body(["/a.md"])
        assert body == body.strip()

    def test_deterministic(self):
        assert _body(["/a.md", "/b.html"]) == _body(["/a.md", "/b.html"])
