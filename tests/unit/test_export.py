"""Unit tests for finalizing and exporting the emote document."""

import json
from pathlib import Path

import yaml

from riftmaker.aggregate import AggregateEntry, LocalizedName
from riftmaker.export import EmoteExporter, finalize, serialize


def _entry(emote_id: int, **names: str) -> AggregateEntry:
    return AggregateEntry(
        id=emote_id,
        localized_names={locale: LocalizedName(name) for locale, name in names.items()},
    )


class TestFinalize:
    """Ordering and output shape."""

    def test_sorted_numerically(self) -> None:
        aggregate = {10: _entry(10, default="ten"), 2: _entry(2, default="two"), 1: _entry(1, default="one")}

        document = finalize(aggregate)

        assert list(document) == ["1", "2", "10"]
        assert document["10"]["id"] == 10

    def test_empty(self) -> None:
        assert finalize({}) == {}


class TestSerialize:
    def test_compact_unescaped(self) -> None:
        document = finalize({1: _entry(1, default="Hello", ja_jp="こんにちは")})

        assert serialize(document) == (
            '{"1":{"id":1,"inventoryIcon":"","tags":[],'
            '"localizedNames":{"default":{"name":"Hello"},"ja_jp":{"name":"こんにちは"}}}}'
        )


class TestEmoteExporter:
    """File output."""

    def test_export_emotes_overwrites(self, tmp_path: Path) -> None:
        output_path = tmp_path / "summoner-emotes.json"
        output_path.write_text("stale contents that are longer than the new ones" * 10, encoding="utf-8")

        assert EmoteExporter().export_emotes({3: _entry(3, default="x")}, output_path) is True

        data = json.loads(output_path.read_text(encoding="utf-8"))
        assert data == {"3": {"id": 3, "inventoryIcon": "", "tags": [], "localizedNames": {"default": {"name": "x"}}}}

    def test_export_emotes_creates_parent(self, tmp_path: Path) -> None:
        output_path = tmp_path / "dist" / "summoner-emotes.json"

        assert EmoteExporter().export_emotes({}, output_path) is True
        assert output_path.read_text(encoding="utf-8") == "{}"

    def test_export_emotes_unwritable(self, tmp_path: Path) -> None:
        blocker = tmp_path / "file"
        blocker.write_text("", encoding="utf-8")

        assert EmoteExporter().export_emotes({}, blocker / "summoner-emotes.json") is False

    def test_export_metrics(self, tmp_path: Path) -> None:
        aggregate = {
            1: AggregateEntry(id=1, inventory_icon="https://x/ahri.png", tags=["Ahri"],
                              localized_names={"default": LocalizedName("a"), "ja_jp": LocalizedName("b")}),
            2: AggregateEntry(id=2, localized_names={"default": LocalizedName("c")}),
        }
        metrics_path = tmp_path / "metrics.yml"

        assert EmoteExporter().export_metrics(aggregate, ["default", "ja_jp", "ko_kr"], metrics_path) is True

        metrics = yaml.safe_load(metrics_path.read_text(encoding="utf-8"))
        assert metrics["summary"] == {
            "emotes_total": 2,
            "locales_total": 3,
            "emotes_without_icon": 1,
            "emotes_without_tags": 1,
        }
        assert metrics["locale_coverage"] == [
            {"locale": "default", "emotes": 2},
            {"locale": "ja_jp", "emotes": 1},
            {"locale": "ko_kr", "emotes": 0},
        ]
        assert metrics["rankings"]["popular_tags"] == [{"tag": "Ahri", "count": 1}]
