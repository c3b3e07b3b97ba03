"""Client for the Cat as a Service (cataas) image API"""

import logging
from typing import Any
from urllib.parse import quote, urljoin

import requests
from fastapi import Depends

from cattags.config import Config, get_config
from cattags.errors.upstream import UpstreamUnavailable
from cattags.schemas.picture import CatPictureSchema

logger = logging.getLogger(__name__)


class CataasClient:
    """Blocking client over the two cataas endpoints the service relies on.

    No retries: a failed call surfaces as UpstreamUnavailable.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()

    def _get(self, endpoint: str, params: dict[str, Any] | None = None):
        url = f"{self.base_url}/{endpoint}"
        logger.info("API->cataas GET %s params=%s", url, params)
        try:
            r = self._session.get(url, params=params, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise UpstreamUnavailable(f"request to {url} failed: {e}")
        logger.info("API<-cataas GET %s status=%s", url, r.status_code)
        logger.debug("cataas body=%s", r.text)
        return r

    def get_tags(self) -> list[str]:
        """Return every tag the image service knows about."""
        r = self._get("api/tags")
        if r.status_code != 200:
            raise UpstreamUnavailable(
                f"unable to fetch tags from {self.base_url}, status {r.status_code}"
            )
        try:
            tags = r.json()
        except ValueError:
            raise UpstreamUnavailable(f"unable to fetch tags from {self.base_url}")
        if not isinstance(tags, list):
            raise UpstreamUnavailable(f"unexpected tags payload from {self.base_url}")
        return [t for t in tags if isinstance(t, str) and t != ""]

    def get_random_picture(self, tag: str) -> CatPictureSchema | None:
        """Return a random picture for the tag, None if nothing matches."""
        r = self._get(f"cat/{quote(tag, safe='')}", params={"json": "true"})
        if r.status_code == 404:
            return None
        if r.status_code != 200:
            raise UpstreamUnavailable(
                f"unable to fetch picture from {self.base_url}, status {r.status_code}"
            )
        try:
            data = r.json()
        except ValueError:
            raise UpstreamUnavailable(f"unable to fetch picture from {self.base_url}")
        if not isinstance(data, dict):
            raise UpstreamUnavailable(f"unexpected picture payload from {self.base_url}")
        return self._to_picture(data)

    def _to_picture(self, data: dict[str, Any]) -> CatPictureSchema:
        # newer API versions expose the mongo "_id" instead of "id"
        picture_id = str(data.get("id") or data.get("_id") or "")
        if not picture_id:
            raise UpstreamUnavailable("picture payload has no identifier")
        url = data.get("url") or f"/cat/{picture_id}"
        # relative urls are resolved against the service address
        url = urljoin(f"{self.base_url}/", url)
        return CatPictureSchema(id=picture_id, url=url, tags=data.get("tags") or [])


def get_cataas_client(config: Config = Depends(get_config)) -> CataasClient:
    return CataasClient(base_url=config.cataas_url, timeout=config.cataas_timeout)
