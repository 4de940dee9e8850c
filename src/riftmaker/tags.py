"""Tag derivation from summoner emote icon paths."""

import re
from typing import List

from .config import RiftmakerConfig, DEFAULT_CONFIG


def split_words(segment: str, config: RiftmakerConfig = DEFAULT_CONFIG) -> str:
    """Turn one path segment into space separated words.

    ``T1_Default`` -> ``T 1 Default``, ``SummonerEmotes`` -> ``Summoner Emotes``.
    """
    segment = segment.replace('_', '')
    return ' '.join(re.split(config.tag_boundary_pattern, segment))


def derive_tags(icon_path: str, config: RiftmakerConfig = DEFAULT_CONFIG) -> List[str]:
    """Derive human readable tags from an inventory icon path.

    Every directory below the emote asset root becomes one tag; the file name
    (anything containing ``.png``) is dropped.
    """
    if icon_path == config.empty_assets_marker:
        return []

    if icon_path.startswith(config.emote_assets_root):
        icon_path = icon_path[len(config.emote_assets_root):]

    segments = icon_path.split('/')
    while segments and not segments[-1]:
        segments.pop()

    return [split_words(segment, config) for segment in segments if '.png' not in segment]
