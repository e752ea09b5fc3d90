"""
cataas.com integration ("Cat as a service").

New cats get their picture from a single anonymous request to
``GET {base}/cat?json=true``, which picks a random cat and answers
with its tags and image URL. The lookup is exposed through the
``CataasClient`` abstraction so that tests can swap in a fixed or
failing client without touching the network.

There is deliberately no cache and no retry here: every call is
independent, and any failure surfaces as ``EnrichmentUnavailable``.
Only the Python standard library is used for HTTP requests.
"""

from __future__ import annotations

import abc
import http.client
import json
import logging
import urllib.error
import urllib.parse
import urllib.request
from typing import Optional

from pydantic import ValidationError

from ..errors import EnrichmentUnavailable
from .schemas import CataasResponse


logger = logging.getLogger(__name__)

CATAAS_URL = "https://cataas.com"


class CataasClient(abc.ABC):
    @abc.abstractmethod
    def fetch_random_image(self) -> CataasResponse:
        """Return one random cat picture or raise ``EnrichmentUnavailable``."""


def _http_get_json(url: str, timeout: Optional[float] = None) -> object:
    """Perform an HTTP GET and return the parsed JSON body.

    Network errors, non-200 statuses and undecodable bodies are logged
    and raised as ``EnrichmentUnavailable``. ``timeout=None`` keeps
    urllib's default (the global socket timeout).
    """
    request = urllib.request.Request(
        url,
        headers={
            'User-Agent': 'catsapi/1.0',
            'Accept': 'application/json',
        },
    )
    kwargs = {} if timeout is None else {'timeout': timeout}
    try:
        with urllib.request.urlopen(request, **kwargs) as response:
            if response.status != 200:
                logger.warning(
                    "cataas request to %s returned status %s", url, response.status
                )
                raise EnrichmentUnavailable(
                    f"cataas returned status {response.status}"
                )
            data = response.read().decode('utf-8', errors='ignore')
    except urllib.error.HTTPError as exc:
        logger.warning("cataas request to %s returned status %s", url, exc.code)
        raise EnrichmentUnavailable(f"cataas returned status {exc.code}") from exc
    except (urllib.error.URLError, OSError, http.client.HTTPException) as exc:
        logger.error("Error fetching %s: %s", url, exc)
        raise EnrichmentUnavailable(f"cataas is unreachable: {exc}") from exc
    try:
        return json.loads(data)
    except ValueError as exc:
        logger.error("Invalid JSON from %s: %s", url, exc)
        raise EnrichmentUnavailable("cataas returned invalid JSON") from exc


def _normalize_payload(payload: object, base_url: str) -> dict:
    """Give the payload an absolute ``url``.

    Older cataas answers carry a relative ``url`` (``/cat/<id>``) or
    only an ``_id``; both are resolved against ``base_url``.
    """
    if not isinstance(payload, dict):
        raise EnrichmentUnavailable("cataas returned an unexpected payload")
    data = dict(payload)
    url = data.get('url')
    if isinstance(url, str) and url.strip():
        data['url'] = urllib.parse.urljoin(base_url + '/', url.strip())
        return data
    cat_id = data.get('id') or data.get('_id')
    if isinstance(cat_id, str) and cat_id:
        data['url'] = f"{base_url}/cat/{urllib.parse.quote(cat_id)}"
        return data
    raise EnrichmentUnavailable("cataas payload has no image url")


class HttpCataasClient(CataasClient):
    """``CataasClient`` backed by the public cataas.com API."""

    def __init__(self, base_url: str = CATAAS_URL, timeout: Optional[float] = None):
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout

    def fetch_random_image(self) -> CataasResponse:
        url = f"{self.base_url}/cat?{urllib.parse.urlencode({'json': 'true'})}"
        payload = _http_get_json(url, timeout=self.timeout)
        try:
            result = CataasResponse.model_validate(
                _normalize_payload(payload, self.base_url)
            )
        except ValidationError as exc:
            logger.error("Unexpected cataas payload: %s", exc)
            raise EnrichmentUnavailable("cataas payload has an unexpected shape") from exc
        logger.debug("cataas picked %s", result.url)
        return result
