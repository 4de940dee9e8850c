"""Main pipeline orchestration script for Riftmaker."""

import logging
import sys
import time
from pathlib import Path
from typing import List, Dict, Optional
import argparse

from .aggregate import AggregateEntry, aggregate
from .client import CommunityDragonClient
from .config import RiftmakerConfig, DEFAULT_CONFIG, load_config
from .exceptions import HttpRequestError, RiftmakerError, UnexpectedResponseError
from .export import EmoteExporter

logger = logging.getLogger(__name__)

# Process exit status per failure kind; anything else exits 1
EXIT_CODES = {
    HttpRequestError: 3,
    UnexpectedResponseError: 4,
}


class RiftmakerETL:
    """Main pipeline orchestrator: locales -> merged emotes -> summoner-emotes.json."""

    def __init__(self, config: RiftmakerConfig = DEFAULT_CONFIG, output_dir: str = '.',
                 metrics_file: Optional[str] = None, locales: Optional[List[str]] = None,
                 client: Optional[CommunityDragonClient] = None):
        """Initialize the pipeline.

        Args:
            config: Endpoint templates and path markers
            output_dir: Directory receiving summoner-emotes.json
            metrics_file: Optional path of a YAML run summary
            locales: Restrict the run to these locales (default: every published locale)
            client: Pre-built CommunityDragon client
        """
        self.config = config
        self.output_dir = Path(output_dir)
        self.metrics_file = Path(metrics_file) if metrics_file else None
        self.requested_locales = locales

        self.client = client if client is not None else CommunityDragonClient(config)
        self.exporter = EmoteExporter()
        self.error: Optional[RiftmakerError] = None

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.config.output_filename

    def run_full_pipeline(self) -> bool:
        """Run the complete pipeline.

        Returns:
            True if summoner-emotes.json was written, False otherwise
        """
        logger.info("Starting Riftmaker pipeline")
        start_time = time.time()
        self.error = None

        try:
            # Step 1: Discover locales
            logger.info("Step 1: Discovering locales")
            locales = self.discover_locales()

            # Step 2: Merge manifests
            logger.info("Step 2: Merging summoner emote manifests")
            emotes = aggregate(locales, self.client.fetch_manifest, self.config)
            logger.info(f"Merged {len(emotes)} emotes from {len(locales)} locales")
        except RiftmakerError as e:
            logger.error(f"Riftmaker pipeline failed: {e}")
            self.error = e
            return False

        # Step 3: Export outputs
        logger.info("Step 3: Exporting outputs")
        if not self.export_outputs(emotes, locales):
            logger.error("Failed to export outputs")
            return False

        self.generate_reports(locales, emotes)

        elapsed_time = time.time() - start_time
        logger.info(f"Riftmaker pipeline completed successfully in {elapsed_time:.2f}s")
        return True

    def discover_locales(self) -> List[str]:
        """Discover published locales, narrowed to the requested ones if any."""
        locales = self.client.discover_locales()
        if not self.requested_locales:
            return locales

        missing = [locale for locale in self.requested_locales if locale not in locales]
        if missing:
            raise RiftmakerError(f"Locales not published by the service: {', '.join(missing)}")

        return [locale for locale in locales if locale in self.requested_locales]

    def export_outputs(self, emotes: Dict[int, AggregateEntry], locales: List[str]) -> bool:
        """Export all output files."""
        if not self.exporter.export_emotes(emotes, self.output_path):
            return False

        if self.metrics_file is not None:
            if not self.exporter.export_metrics(emotes, locales, self.metrics_file):
                if self.output_path.is_file():
                    self.output_path.unlink()
                    logger.info(f"Removed {self.output_path} after metrics export failure")
                return False

        logger.info(f"Exported outputs to {self.output_dir}")
        return True

    def generate_reports(self, locales: List[str], emotes: Dict[int, AggregateEntry]):
        """Print a processing report."""
        without_icon = sum(1 for entry in emotes.values() if not entry.inventory_icon)
        name_counts = {locale: 0 for locale in locales}
        for entry in emotes.values():
            for locale in entry.localized_names:
                name_counts[locale] += 1

        print("\n" + "="*60)
        print("RIFTMAKER REPORT")
        print("="*60)
        print(f"Summoner Emotes:")
        print(f"  Locales processed:     {len(locales)}")
        print(f"  Unique emotes:         {len(emotes)}")
        print(f"  Without icon:          {without_icon}")
        print()
        print(f"Localized Names:")
        for locale in locales:
            print(f"  {locale:15}: {name_counts[locale]}")
        print()
        print(f"Output Files:")
        print(f"  {self.output_path}")
        if self.metrics_file is not None:
            print(f"  {self.metrics_file}")
        print("="*60)


def exit_code_for(error: Optional[RiftmakerError]) -> int:
    """Map a pipeline failure to a process exit status."""
    for error_type, code in EXIT_CODES.items():
        if isinstance(error, error_type):
            return code
    return 1


def setup_logging(verbose: bool = False):
    """Setup logging configuration."""
    log_level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )


def main(argv: Optional[List[str]] = None):
    """Main entry point with command line interface."""
    parser = argparse.ArgumentParser(
        description='Riftmaker - Generate summoner-emotes.json from CommunityDragon data'
    )
    parser.add_argument(
        '--output-dir', '-o',
        default='.',
        help='Directory for summoner-emotes.json (default: current directory)'
    )
    parser.add_argument(
        '--config', '-c',
        help='YAML file overriding endpoint templates and path markers'
    )
    parser.add_argument(
        '--locale', '-l',
        action='append',
        dest='locales',
        help='Only merge this locale (repeatable, default: all published locales)'
    )
    parser.add_argument(
        '--metrics-file', '-m',
        help='Also write a YAML run summary to this path'
    )
    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Enable verbose logging'
    )

    args = parser.parse_args(argv)

    # Setup logging
    setup_logging(verbose=args.verbose)

    config = DEFAULT_CONFIG
    if args.config:
        try:
            config = load_config(args.config)
        except RiftmakerError as e:
            logger.error(str(e))
            sys.exit(1)

    # Create and run pipeline
    etl = RiftmakerETL(
        config=config,
        output_dir=args.output_dir,
        metrics_file=args.metrics_file,
        locales=args.locales
    )

    success = etl.run_full_pipeline()

    if success:
        print("\nRiftmaker completed successfully!")
        print(f"Summoner emotes written to: {etl.output_path}")
        sys.exit(0)
    else:
        print("\nRiftmaker failed!")
        sys.exit(exit_code_for(etl.error))


if __name__ == '__main__':
    main()
