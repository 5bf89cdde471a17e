"""Tests for the `check` and `version` CLI commands."""

import logging

import httpx
import pytest
import respx
from typer.testing import CliRunner

from cli.main import app
from rawhide_check import __version__
from rawhide_check.log import LOGGER_NAME

runner = CliRunner()

BASE_URL = "https://packages.example.org/pkgs"
FOO_URL = f"{BASE_URL}/rust-foo/rust-foo-devel"
BAR_URL = f"{BASE_URL}/rust-bar/rust-bar-devel"

_FOO_HTML = """\
<table id="version-table"><tbody>
  <tr><td>Fedora Rawhide</td><td>1.2.3-1.fc41</td></tr>
</tbody></table>
"""


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop the handler bound to the runner's stream once the test is over."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def _mock_pages(router) -> None:
    router.get(FOO_URL).mock(return_value=httpx.Response(200, text=_FOO_HTML))
    router.get(BAR_URL).mock(return_value=httpx.Response(404))


def test_check_reads_stdin():
    with respx.mock as router:
        _mock_pages(router)
        result = runner.invoke(
            app,
            ["check", "--base-url", BASE_URL],
            input="foo 1.0\nmalformed\nbar 2.0\n",
        )

    assert result.exit_code == 0
    assert "foo: found: [Fedora Rawhide: 1.2.3-1.fc41]" in result.output
    assert "bar: missing" in result.output
    assert "1 missing packages" in result.output


def test_check_reads_input_file(tmp_path):
    crates = tmp_path / "crates.txt"
    crates.write_text("foo 1.0\nbar 2.0\n", encoding="utf-8")

    with respx.mock as router:
        _mock_pages(router)
        result = runner.invoke(app, ["check", "--base-url", BASE_URL, "--input", str(crates)])

    assert result.exit_code == 0
    assert "1 missing packages" in result.output


def test_check_missing_input_file(tmp_path):
    result = runner.invoke(app, ["check", "--input", str(tmp_path / "nope.txt")])
    assert result.exit_code != 0


def test_check_server_error_aborts():
    with respx.mock(assert_all_called=False) as router:
        router.get(BAR_URL).mock(return_value=httpx.Response(500))
        foo = router.get(FOO_URL).mock(return_value=httpx.Response(200, text=_FOO_HTML))
        result = runner.invoke(
            app, ["check", "--base-url", BASE_URL], input="bar 2.0\nfoo 1.0\n"
        )

    assert result.exit_code == 1
    assert "aborted: HTTP 500" in result.output
    assert foo.call_count == 0


def test_check_keep_going():
    with respx.mock as router:
        router.get(BAR_URL).mock(return_value=httpx.Response(503))
        router.get(FOO_URL).mock(return_value=httpx.Response(200, text=_FOO_HTML))
        result = runner.invoke(
            app,
            ["check", "--base-url", BASE_URL, "--keep-going"],
            input="bar 2.0\nfoo 1.0\n",
        )

    assert result.exit_code == 0
    assert "bar: HTTP 503" in result.output
    assert "foo: found" in result.output
    assert "0 missing packages" in result.output


def test_check_fail_on_missing():
    with respx.mock as router:
        _mock_pages(router)
        result = runner.invoke(
            app,
            ["check", "--base-url", BASE_URL, "--fail-on-missing"],
            input="foo 1.0\nbar 2.0\n",
        )

    assert result.exit_code == 2


def test_check_fail_on_missing_all_found():
    with respx.mock as router:
        router.get(FOO_URL).mock(return_value=httpx.Response(200, text=_FOO_HTML))
        result = runner.invoke(
            app,
            ["check", "--base-url", BASE_URL, "--fail-on-missing"],
            input="foo 1.0\n",
        )

    assert result.exit_code == 0


def test_check_distribution_option():
    with respx.mock as router:
        router.get(FOO_URL).mock(return_value=httpx.Response(200, text=_FOO_HTML))
        result = runner.invoke(
            app,
            ["check", "--base-url", BASE_URL, "--distribution", "fedora rawhide"],
            input="foo 1.0\n",
        )

    assert result.exit_code == 0
    assert "foo: missing" in result.output


def test_check_quiet_hides_found_lines():
    with respx.mock as router:
        _mock_pages(router)
        result = runner.invoke(
            app, ["check", "--base-url", BASE_URL, "--quiet"], input="foo 1.0\nbar 2.0\n"
        )

    assert result.exit_code == 0
    assert "foo: found" not in result.output
    assert "bar: missing" in result.output


def test_check_verbose_shows_result_lines():
    with respx.mock as router:
        router.get(FOO_URL).mock(return_value=httpx.Response(200, text=_FOO_HTML))
        result = runner.invoke(
            app, ["check", "--base-url", BASE_URL, "--verbose"], input="foo 1.0\n"
        )

    assert result.exit_code == 0
    assert "foo: result: [Fedora Rawhide: 1.2.3-1.fc41]" in result.output


def test_check_rejects_non_base_url():
    result = runner.invoke(app, ["check", "--base-url", "mailto:x@example.org"], input="foo 1.0\n")
    assert result.exit_code == 1
    assert "not a base URL" in result.output


def test_check_reads_stdin_as_utf8():
    with respx.mock as router:
        route = router.get(url__regex=r".*").mock(return_value=httpx.Response(404))
        result = runner.invoke(
            app,
            ["check", "--base-url", BASE_URL],
            input="cr\u00e8me 1.0\n".encode("utf-8"),
        )

    assert result.exit_code == 0
    assert "cr\u00e8me: missing" in result.output
    assert route.calls.last.request.url.raw_path == (
        b"/pkgs/rust-cr%C3%A8me/rust-cr%C3%A8me-devel"
    )


def test_check_rejects_empty_base_url():
    result = runner.invoke(app, ["check", "--base-url", ""], input="foo 1.0\n")
    assert result.exit_code == 1
    assert "not a base URL" in result.output


def test_check_redirect_loop_aborts():
    with respx.mock as router:
        router.get(FOO_URL).mock(
            return_value=httpx.Response(302, headers={"Location": FOO_URL})
        )
        result = runner.invoke(app, ["check", "--base-url", BASE_URL], input="foo 1.0\n")

    assert result.exit_code == 1
    assert "aborted: request to" in result.output


def test_version():
    result = runner.invoke(app, ["version"])
    assert result.exit_code == 0
    assert __version__ in result.stdout
