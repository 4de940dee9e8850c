"""Export of the merged emote data to summoner-emotes.json and a metrics summary."""

import json
import yaml
from pathlib import Path
from typing import List, Dict, Any, Union
from collections import Counter
import logging

from .aggregate import AggregateEntry

logger = logging.getLogger(__name__)


def finalize(aggregate: Dict[int, AggregateEntry]) -> Dict[str, Dict[str, Any]]:
    """Order entries by ascending id and key them by the stringified id."""
    return {str(emote_id): entry.to_dict() for emote_id, entry in sorted(aggregate.items())}


def serialize(document: Dict[str, Any]) -> str:
    """Compact JSON with non-ASCII names kept as-is."""
    return json.dumps(document, ensure_ascii=False, separators=(',', ':'))


class EmoteExporter:
    """Writes the finalized emote document and an optional metrics.yml."""

    def export_emotes(self, aggregate: Dict[int, AggregateEntry],
                      output_path: Union[str, Path] = 'summoner-emotes.json') -> bool:
        """Export the aggregate to ``output_path``, replacing any previous contents."""
        # Encode before opening the file
        content = serialize(finalize(aggregate))

        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                f.write(content)
        except OSError as e:
            logger.error(f"Error writing emotes to {output_path}: {e}")
            if output_path.is_file():
                output_path.unlink()
            return False

        logger.info(f"Exported {len(aggregate)} emotes to {output_path}")
        return True

    def export_metrics(self, aggregate: Dict[int, AggregateEntry], locales: List[str],
                       output_path: Union[str, Path] = 'metrics.yml') -> bool:
        """Export a YAML summary of the run."""
        metrics_data = self._generate_metrics(aggregate, locales)

        output_path = Path(output_path)
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                yaml.dump(metrics_data, f, default_flow_style=False, allow_unicode=True, sort_keys=False)
        except OSError as e:
            logger.error(f"Error exporting metrics to {output_path}: {e}")
            return False

        logger.info(f"Exported metrics to {output_path}")
        return True

    def _generate_metrics(self, aggregate: Dict[int, AggregateEntry], locales: List[str]) -> Dict[str, Any]:
        entries = list(aggregate.values())

        locale_counts = Counter()
        for entry in entries:
            locale_counts.update(entry.localized_names.keys())

        tag_counts = Counter(tag for entry in entries for tag in entry.tags)

        return {
            'summary': {
                'emotes_total': len(entries),
                'locales_total': len(locales),
                'emotes_without_icon': sum(1 for entry in entries if not entry.inventory_icon),
                'emotes_without_tags': sum(1 for entry in entries if not entry.tags),
            },
            'locale_coverage': [
                {'locale': locale, 'emotes': locale_counts.get(locale, 0)}
                for locale in locales
            ],
            'rankings': {
                'popular_tags': [
                    {'tag': tag, 'count': count}
                    for tag, count in tag_counts.most_common(20)
                ],
            },
        }
