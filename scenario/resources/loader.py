"""
Script acquisition.

Fetches the raw text of a dialogue script from one of:
- an external file
- the bundled resources folder (``<root>/CSV/<name>.txt``)
- an HTTP(S) URL
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

import httpx

from scenario.core.errors import ScriptNotFoundError, ScriptReadError, SourceUnavailableError

logger = logging.getLogger(__name__)


class ScriptSource(ABC):
    """Somewhere dialogue scripts can be read from."""

    @abstractmethod
    def read(self, locator: str) -> str:
        """
        Return the full text of the script.

        Raises:
            ScriptNotFoundError: The script does not exist
            ScriptReadError: Reading the script failed
        """


def _read_file(path: Path) -> str:
    if not path.is_file():
        raise ScriptNotFoundError(f"Script not found: {path}")
    try:
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ScriptReadError(f"Failed to read script {path}: {e}") from e


class FileScriptSource(ScriptSource):
    """Reads scripts from arbitrary filesystem paths."""

    def read(self, locator: str) -> str:
        return _read_file(Path(locator))


class BundledScriptSource(ScriptSource):
    """Reads scripts by name from the bundled ``CSV`` resources folder."""

    def __init__(self, root: str | Path = "game/data", folder: str = "CSV", suffix: str = ".txt"):
        self.root = Path(root)
        self.folder = folder
        self.suffix = suffix

    def path_for(self, name: str) -> Path:
        return self.root / self.folder / f"{name}{self.suffix}"

    def read(self, locator: str) -> str:
        return _read_file(self.path_for(locator))


class HttpScriptSource(ScriptSource):
    """
    Downloads scripts over HTTP.

    Args:
        base_url: Prefix joined to relative locators (absolute URLs are used as-is)
        timeout: Request timeout in seconds
        transport: Optional httpx transport (e.g. ``httpx.MockTransport`` in tests)
    """

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url
        self.timeout = timeout
        self.transport = transport

    def url_for(self, locator: str) -> str:
        if locator.startswith(("http://", "https://")) or not self.base_url:
            return locator
        return f"{self.base_url.rstrip('/')}/{locator.lstrip('/')}"

    def read(self, locator: str) -> str:
        url = self.url_for(locator)
        try:
            with httpx.Client(timeout=self.timeout, transport=self.transport) as client:
                resp = client.get(url)
                resp.raise_for_status()
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 404:
                raise ScriptNotFoundError(f"Script not found: {url}") from e
            raise ScriptReadError(f"Script server returned {e.response.status_code} for {url}") from e
        except httpx.HTTPError as e:
            raise ScriptReadError(f"Failed to download script {url}: {e}") from e

        return resp.text


def load_script_text(locator: str | Path, source: Optional[ScriptSource] = None) -> str:
    """
    Load a script's raw text.

    Args:
        locator: Path, resource name or URL, interpreted by ``source``
        source: Where to read from (default: the filesystem)
    """
    source = source or FileScriptSource()
    logger.info(f"Loading script {locator} ({type(source).__name__})")
    try:
        text = source.read(str(locator))
    except SourceUnavailableError as e:
        logger.error(f"Failed to retrieve script: {e}")
        raise

    logger.debug(f"Loaded {len(text)} characters from {locator}")
    return text
