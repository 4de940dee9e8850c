"""CommunityDragon client for the locale index and summoner emote manifests."""

from typing import Any, List, Optional
import logging

import requests

from .aggregate import RawEmote
from .config import RiftmakerConfig, DEFAULT_CONFIG
from .exceptions import HttpRequestError, UnexpectedResponseError

logger = logging.getLogger(__name__)


class CommunityDragonClient:
    """Fetches JSON documents from CommunityDragon. One request per call, no retries."""

    def __init__(self, config: RiftmakerConfig = DEFAULT_CONFIG, session: Optional[requests.Session] = None):
        """Initialize client with configuration and an optional pre-built session."""
        self.config = config
        self.session = session if session is not None else requests.Session()
        self.headers = {
            'User-Agent': config.user_agent,
            'Accept': 'application/json',
        }

    def get_json(self, url: str) -> Any:
        """GET ``url`` and decode its body as JSON."""
        logger.debug(f"GET {url}")
        try:
            response = self.session.get(url, headers=self.headers, timeout=self.config.request_timeout)
        except requests.exceptions.RequestException as e:
            raise HttpRequestError(url, reason=str(e)) from e

        if not 200 <= response.status_code < 300:
            raise HttpRequestError(url, status_code=response.status_code, reason=response.reason)

        try:
            return response.json()
        except ValueError as e:
            raise UnexpectedResponseError(url, f"body is not valid JSON ({e})") from e

    def discover_locales(self) -> List[str]:
        """Return the locale identifiers published by the service, in service order."""
        url = self.config.locale_index_url()
        directories = self.get_json(url)
        if not isinstance(directories, list):
            raise UnexpectedResponseError(url, f"expected a list of directories, got {type(directories).__name__}")

        locales = []
        for directory in directories:
            if not isinstance(directory, dict) or not isinstance(directory.get('name'), str):
                raise UnexpectedResponseError(url, f"directory entry without a string 'name': {directory!r}")
            locales.append(directory['name'])

        logger.info(f"Discovered {len(locales)} locales")
        return locales

    def fetch_manifest(self, locale: str) -> List[RawEmote]:
        """Fetch and parse the summoner emote manifest of one locale."""
        url = self.config.manifest_url(locale)
        records = self.get_json(url)
        if not isinstance(records, list):
            raise UnexpectedResponseError(url, f"expected a list of emotes, got {type(records).__name__}")

        emotes = [RawEmote.from_dict(record, url) for record in records]
        logger.debug(f"Fetched {len(emotes)} emotes for locale {locale}")
        return emotes
