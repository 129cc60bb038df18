"""Loading raw DMMF documents.

A DMMF reference may be:

- an already decoded mapping;
- an http(s) URL serving the DMMF JSON;
- a path to a JSON file, or to a directory holding ``dmmf.json``;
- the name of an importable module exposing a ``dmmf`` attribute, which is
  how generated clients ship their metadata.

Any failure is reported as ``DocumentLoadError`` with the cause chained.
"""

import importlib
import json
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import httpx
from pydantic import ValidationError

from .errors import DocumentLoadError
from .raw import RawDocument

logger = logging.getLogger(__name__)

DMMF_FILENAME = "dmmf.json"


def get_raw_document(
    reference: Mapping[str, Any] | str | Path,
    *,
    timeout: float = 30.0,
    client: httpx.Client | None = None,
) -> RawDocument:
    """Resolve a DMMF reference and validate it into a ``RawDocument``.

    Args:
        reference: Mapping, URL, file or directory path, or module name
        timeout: Request timeout in seconds for URL references
        client: Optional HTTP client to use for URL references

    Raises:
        DocumentLoadError: If the reference cannot be resolved or the payload
            is not a valid DMMF document.
    """
    if isinstance(reference, Mapping):
        return _validate(reference, "<mapping>")

    label = str(reference)
    if label.startswith(("http://", "https://")):
        payload = _fetch(label, timeout=timeout, client=client)
    else:
        path = Path(reference)
        if path.exists():
            payload = _read_path(path)
        elif isinstance(reference, str) and _looks_like_module(reference):
            payload = _import_module_dmmf(reference)
        else:
            raise DocumentLoadError(label, "path does not exist")
    return _validate(payload, label)


def _validate(payload: Any, label: str) -> RawDocument:
    if not isinstance(payload, Mapping):
        raise DocumentLoadError(label, f"expected a JSON object, got {type(payload).__name__}")
    try:
        document = RawDocument.model_validate(payload)
    except ValidationError as e:
        raise DocumentLoadError(label, f"invalid DMMF document: {e}") from e
    logger.debug(
        "Loaded DMMF from %s: %d models, %d input types, %d output types",
        label,
        len(document.datamodel.models),
        len(document.schema_.input_types),
        len(document.schema_.output_types),
    )
    return document


def _fetch(url: str, *, timeout: float, client: httpx.Client | None) -> Any:
    logger.debug("Fetching DMMF from %s", url)
    try:
        if client is not None:
            response = client.get(url)
        else:
            with httpx.Client(timeout=timeout) as http:
                response = http.get(url)
        response.raise_for_status()
        return response.json()
    except httpx.HTTPError as e:
        raise DocumentLoadError(url, f"HTTP request failed: {e}") from e
    except ValueError as e:
        raise DocumentLoadError(url, f"response is not valid JSON: {e}") from e


def _read_path(path: Path) -> Any:
    if path.is_dir():
        path = path / DMMF_FILENAME
    logger.debug("Reading DMMF from %s", path)
    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except OSError as e:
        raise DocumentLoadError(str(path), f"could not read file: {e}") from e
    except ValueError as e:
        raise DocumentLoadError(str(path), f"file is not valid JSON: {e}") from e


def _looks_like_module(reference: str) -> bool:
    return all(part.isidentifier() for part in reference.split("."))


def _import_module_dmmf(module_name: str) -> Any:
    logger.debug("Importing DMMF from module %s", module_name)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise DocumentLoadError(module_name, f"could not import module: {e}") from e

    dmmf = getattr(module, "dmmf", None)
    if dmmf is None:
        raise DocumentLoadError(module_name, "module has no 'dmmf' attribute")
    if isinstance(dmmf, (str, bytes)):
        try:
            return json.loads(dmmf)
        except ValueError as e:
            raise DocumentLoadError(module_name, f"'dmmf' is not valid JSON: {e}") from e
    return dmmf
