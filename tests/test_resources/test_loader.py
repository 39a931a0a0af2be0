import httpx
import pytest

from scenario.core.errors import ScriptNotFoundError, ScriptReadError, SourceUnavailableError
from scenario.resources.loader import (
    BundledScriptSource,
    FileScriptSource,
    HttpScriptSource,
    load_script_text,
)


def test_file_source(tmp_path):
    path = tmp_path / "script.txt"
    path.write_text("ID\tSTART", encoding="utf-8")

    assert load_script_text(path) == "ID\tSTART"
    assert FileScriptSource().read(str(path)) == "ID\tSTART"


def test_file_not_found(tmp_path):
    with pytest.raises(ScriptNotFoundError):
        load_script_text(tmp_path / "missing.txt")


def test_directory_is_not_a_script(tmp_path):
    with pytest.raises(ScriptNotFoundError):
        FileScriptSource().read(str(tmp_path))


def test_undecodable_file(tmp_path):
    path = tmp_path / "broken.txt"
    path.write_bytes(b"\xff\xfe\xfa")

    with pytest.raises(ScriptReadError):
        load_script_text(path)


def test_bundled_source(tmp_path):
    (tmp_path / "CSV").mkdir()
    (tmp_path / "CSV" / "intro.txt").write_text("hello", encoding="utf-8")
    source = BundledScriptSource(tmp_path)

    assert source.path_for("intro") == tmp_path / "CSV" / "intro.txt"
    assert load_script_text("intro", source) == "hello"

    with pytest.raises(ScriptNotFoundError):
        load_script_text("outro", source)


def _transport(status: int, text: str = ""):
    requests = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(status, text=text)

    return httpx.MockTransport(handler), requests


def test_http_source():
    transport, requests = _transport(200, "ID\tSTART")
    source = HttpScriptSource(base_url="https://example.com/scripts/", transport=transport)

    assert load_script_text("intro.txt", source) == "ID\tSTART"
    assert str(requests[0].url) == "https://example.com/scripts/intro.txt"


def test_http_absolute_url():
    source = HttpScriptSource(base_url="https://example.com")
    assert source.url_for("http://other.org/a.txt") == "http://other.org/a.txt"


def test_http_not_found():
    transport, _ = _transport(404)
    source = HttpScriptSource(transport=transport)

    with pytest.raises(ScriptNotFoundError):
        load_script_text("https://example.com/missing.txt", source)


def test_http_server_error():
    transport, _ = _transport(500)
    source = HttpScriptSource(transport=transport)

    with pytest.raises(ScriptReadError):
        load_script_text("https://example.com/intro.txt", source)


def test_http_connection_error():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    source = HttpScriptSource(transport=httpx.MockTransport(handler))

    with pytest.raises(SourceUnavailableError):
        load_script_text("https://example.com/intro.txt", source)
