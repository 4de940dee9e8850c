"""Endpoint templates and path markers used throughout the pipeline."""

import dataclasses
from dataclasses import dataclass
from pathlib import Path
from typing import Union
import logging

import yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RiftmakerConfig:
    """Immutable settings injected into every pipeline component."""
    base_url: str = 'https://raw.communitydragon.org'
    locale_index_url_template: str = '{base_url}/json/latest/plugins/rcp-be-lol-game-data/global/'
    manifest_url_template: str = '{base_url}/latest/plugins/rcp-be-lol-game-data/global/{locale}/v1/summoner-emotes.json'
    icon_url_template: str = '{base_url}/latest/plugins/rcp-be-lol-game-data/global/default/assets/loadouts/summoneremotes/{path}'
    empty_assets_marker: str = '/lol-game-data/assets/'
    emote_assets_root: str = '/lol-game-data/assets/ASSETS/Loadouts/SummonerEmotes/'
    icon_split_marker: str = 'SummonerEmotes/'
    # acronym-to-word | camelCase | letter-to-non-letter
    tag_boundary_pattern: str = r'(?<=[A-Z])(?=[A-Z][a-z])|(?<=[^A-Z])(?=[A-Z])|(?<=[A-Za-z])(?=[^A-Za-z])'
    output_filename: str = 'summoner-emotes.json'
    request_timeout: float = 30.0
    user_agent: str = 'riftmaker/0.1.0 (+https://raw.communitydragon.org)'

    def locale_index_url(self) -> str:
        """Build the URL of the directory listing that names every locale."""
        return self.locale_index_url_template.format(base_url=self.base_url)

    def manifest_url(self, locale: str) -> str:
        """Build the summoner emote manifest URL for one locale."""
        return self.manifest_url_template.format(base_url=self.base_url, locale=locale)

    def icon_url(self, path: str) -> str:
        """Build the absolute icon URL for a lower-cased path below the emote root."""
        return self.icon_url_template.format(base_url=self.base_url, path=path)


DEFAULT_CONFIG = RiftmakerConfig()


def load_config(config_path: Union[str, Path]) -> RiftmakerConfig:
    """Load a YAML file whose keys override the default configuration."""
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")

    fields = {field.name: field for field in dataclasses.fields(RiftmakerConfig)}
    overrides = {}
    for key, value in data.items():
        if key not in fields:
            raise ConfigError(f"Unknown config key '{key}' in {config_path}")

        expected = type(getattr(DEFAULT_CONFIG, key))
        if expected is float and isinstance(value, int) and not isinstance(value, bool):
            value = float(value)
        if not isinstance(value, expected) or isinstance(value, bool):
            raise ConfigError(
                f"Config key '{key}' in {config_path} must be {expected.__name__}, got {type(value).__name__}"
            )
        overrides[key] = value

    logger.info(f"Loaded {len(overrides)} config overrides from {config_path}")
    return dataclasses.replace(DEFAULT_CONFIG, **overrides)
