import logging

import httpx

logger = logging.getLogger(__name__)

_TIMEOUT = 10.0
_USER_AGENT = "VectraE2E/1.0"


class SiteProbe:
    def __init__(self, client: httpx.Client):
        self._client = client

    def is_reachable(self, url: str) -> bool:
        """Best-effort check that ``url`` answers below 400. Never raises."""
        try:
            resp = self._client.get(
                url,
                follow_redirects=True,
                timeout=_TIMEOUT,
                headers={"User-Agent": _USER_AGENT},
            )
        except httpx.HTTPError as exc:
            logger.warning("Site %s unreachable: %s", url, exc)
            return False

        if resp.status_code >= 400:
            logger.warning("Site %s answered with status %d", url, resp.status_code)
            return False
        return True
