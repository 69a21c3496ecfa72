"""Load a Swagger document from disk or over HTTP.

JSON and YAML are both accepted. Every failure surfaces as SpecLoadError
so callers can report it without catching a zoo of exception types.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx
import yaml

logger = logging.getLogger(__name__)

DEFAULT_SPEC = Path("petstore.json")
HTTP_TIMEOUT = 30.0

_YAML_SUFFIXES = (".yaml", ".yml")


class SpecLoadError(Exception):
    """Raised when a specification cannot be read or parsed."""


def _is_url(location: str | Path) -> bool:
    return isinstance(location, str) and location.startswith(("http://", "https://"))


def _read_url(url: str, client: httpx.Client | None = None) -> str:
    owns_client = client is None
    client = client or httpx.Client(timeout=HTTP_TIMEOUT, follow_redirects=True)
    try:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.text
    except httpx.HTTPError as exc:
        raise SpecLoadError(f"Cannot fetch {url}: {exc}") from exc
    finally:
        if owns_client:
            client.close()


def _read_file(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SpecLoadError(f"Cannot read {path}: {exc}") from exc


def parse_document(text: str, name: str = "") -> dict[str, Any]:
    """Parse JSON or YAML text into a mapping."""
    try:
        if name.endswith(_YAML_SUFFIXES):
            doc = yaml.safe_load(text)
        else:
            try:
                doc = json.loads(text)
            except json.JSONDecodeError:
                # content without a telling suffix may still be YAML
                doc = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SpecLoadError(f"Cannot parse {name or 'document'}: {exc}") from exc

    if not isinstance(doc, dict):
        raise SpecLoadError(f"{name or 'document'} is not a mapping")
    return doc


def load_spec(
    location: str | Path | None = None,
    client: httpx.Client | None = None,
) -> dict[str, Any]:
    """Load the raw Swagger document from a path or http(s) URL."""
    location = location or DEFAULT_SPEC
    if _is_url(location):
        text = _read_url(str(location), client)
    else:
        text = _read_file(Path(location))

    logger.info("Loaded specification from %s", location)
    return parse_document(text, str(location))


def get_paths(spec: dict[str, Any]) -> dict[str, Any]:
    """Extract paths from the spec."""
    return spec.get("paths") or {}


def resolve_ref(spec: dict[str, Any], ref: str) -> dict[str, Any]:
    """Resolve a local $ref pointer in the spec."""
    parts = ref.lstrip("#/").split("/")
    node = spec
    for part in parts:
        node = node[part]
    return node
