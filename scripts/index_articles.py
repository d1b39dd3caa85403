#!/usr/bin/env python3
"""
Article Indexing Script

Generates the sample articles, makes sure the Elasticsearch index exists
with the expected mapping, then indexes every article with its own request.
"""

import sys
import click
from dotenv import load_dotenv
from article_indexer.errors import ArticleIndexerError
from article_indexer.generator.sample_generator import generate_collection
from article_indexer.indexing.concurrent_indexer import ConcurrentIndexer
from article_indexer.search.elasticsearch_client import create_client
from article_indexer.search.index_provisioner import IndexProvisioner
from article_indexer.utils.config import CONFIG, IndexerConfig, load_config
from article_indexer.utils.logger import setup_logger, logger


load_dotenv('.env')

@click.command()
@click.option('--config', 'config_path', default=None,
              type=click.Path(dir_okay=False), help='Config file path (default: config/config.yaml)')
@click.option('--debug', is_flag=True, help='Enable debug logging')

def main(config_path, debug):
  """Generate sample articles and index them into Elasticsearch"""

  try:
    raw_config = load_config(config_path) if config_path else CONFIG
    log_config = raw_config.get('logging') or {}
    setup_logger(
      log_file = log_config.get('log_file', "logs/indexer.log"),
      level = "DEBUG" if debug else log_config.get('level', "INFO")
    )
    config = IndexerConfig.from_dict(raw_config)
  except ArticleIndexerError as e:
    click.echo(f"✗ {e}", err=True)
    sys.exit(1)

  # dummy data
  articles = generate_collection()

  es = create_client(config)

  logger.info("~" * 37)

  try:
    IndexProvisioner(es, config).ensure_index()

    logger.info("-" * 37)
    summary = ConcurrentIndexer(es, config).index_articles(articles)
  except ArticleIndexerError as e:
    logger.error(f"✗ Fatal error: {e}")
    sys.exit(1)
  finally:
    es.close()

  logger.info("=" * 37)

  # per-document engine errors are reported but do not fail the run
  if summary.transport_errors:
    sys.exit(1)


if __name__ == "__main__":
  main()
