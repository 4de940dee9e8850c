"""Merging of per-locale emote manifests into one record per emote id."""

import dataclasses
from dataclasses import dataclass, field
from functools import reduce
from typing import Any, Callable, Dict, Iterable, List
import logging

from .config import RiftmakerConfig, DEFAULT_CONFIG
from .exceptions import UnexpectedResponseError
from .tags import derive_tags

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RawEmote:
    """One record of a locale's summoner-emotes.json."""
    id: int
    name: str
    inventory_icon: str

    @classmethod
    def from_dict(cls, data: Any, url: str = '<manifest>') -> 'RawEmote':
        """Build a RawEmote from a decoded manifest record, checking the consumed fields."""
        if not isinstance(data, dict):
            raise UnexpectedResponseError(url, f"expected an object, got {type(data).__name__}")

        for key in ('id', 'name', 'inventoryIcon'):
            if key not in data:
                raise UnexpectedResponseError(url, f"record is missing '{key}': {data!r}")

        name = data['name']
        inventory_icon = data['inventoryIcon']
        if not isinstance(name, str):
            raise UnexpectedResponseError(url, f"'name' must be a string, got {name!r}")
        if not isinstance(inventory_icon, str):
            raise UnexpectedResponseError(url, f"'inventoryIcon' must be a string, got {inventory_icon!r}")

        return cls(id=parse_emote_id(data['id'], url), name=name, inventory_icon=inventory_icon)


@dataclass(frozen=True)
class LocalizedName:
    name: str

    def to_dict(self) -> Dict[str, str]:
        return {'name': self.name}


@dataclass
class AggregateEntry:
    """Locale independent emote metadata plus its name in every locale."""
    id: int
    inventory_icon: str = ''
    tags: List[str] = field(default_factory=list)
    localized_names: Dict[str, LocalizedName] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Output shape of one emote in summoner-emotes.json."""
        return {
            'id': self.id,
            'inventoryIcon': self.inventory_icon,
            'tags': list(self.tags),
            'localizedNames': {locale: name.to_dict() for locale, name in self.localized_names.items()},
        }


def parse_emote_id(value: Any, url: str = '<manifest>') -> int:
    """Coerce a manifest id to int; digit-only strings are accepted."""
    if isinstance(value, bool):
        raise UnexpectedResponseError(url, f"'id' must be an integer, got {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str) and value.isdecimal():
        return int(value)
    raise UnexpectedResponseError(url, f"'id' must be an integer, got {value!r}")


def normalize_icon_url(icon_path: str, config: RiftmakerConfig = DEFAULT_CONFIG) -> str:
    """Map a game data icon path to its lower-cased CommunityDragon URL."""
    if icon_path in (config.empty_assets_marker, ''):
        return ''

    segments = [segment.lower() for segment in icon_path.split(config.icon_split_marker)]
    while segments and not segments[-1]:
        segments.pop()

    return config.icon_url(segments[-1] if segments else '')


def merge_locale_manifest(aggregate: Dict[int, AggregateEntry], entries: Iterable[RawEmote],
                          locale: str, config: RiftmakerConfig = DEFAULT_CONFIG) -> Dict[int, AggregateEntry]:
    """Fold one locale's manifest into the aggregate.

    Returns a new mapping; ``aggregate`` and its entries are left untouched.
    Icon and tags are recomputed for every occurrence, so the last locale wins
    if two locales disagree on an emote's icon path.
    """
    merged = dict(aggregate)

    for raw in entries:
        current = merged.get(raw.id)
        if current is None:
            current = AggregateEntry(id=raw.id)

        inventory_icon = normalize_icon_url(raw.inventory_icon, config)
        if current.localized_names and current.inventory_icon != inventory_icon:
            logger.debug(f"Emote {raw.id}: icon changed by locale {locale}: "
                         f"{current.inventory_icon!r} -> {inventory_icon!r}")

        localized_names = dict(current.localized_names)
        localized_names[locale] = LocalizedName(name=raw.name)

        merged[raw.id] = dataclasses.replace(
            current,
            inventory_icon=inventory_icon,
            tags=derive_tags(raw.inventory_icon, config),
            localized_names=localized_names,
        )

    return merged


def aggregate(locales: Iterable[str], fetch_manifest: Callable[[str], List[RawEmote]],
              config: RiftmakerConfig = DEFAULT_CONFIG) -> Dict[int, AggregateEntry]:
    """Fetch every locale's manifest in order and merge them into one mapping by id."""

    def step(current: Dict[int, AggregateEntry], locale: str) -> Dict[int, AggregateEntry]:
        entries = fetch_manifest(locale)
        merged = merge_locale_manifest(current, entries, locale, config)
        logger.info(f"Merged {len(entries)} emotes from locale {locale} ({len(merged)} unique so far)")
        return merged

    return reduce(step, locales, {})
