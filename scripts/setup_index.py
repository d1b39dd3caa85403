#!/usr/bin/env python3
"""
Index Setup Script

Create the Elasticsearch index (if missing) and show its status
"""

import sys
import click
from dotenv import load_dotenv
from article_indexer.errors import ArticleIndexerError
from article_indexer.search.elasticsearch_client import create_client
from article_indexer.search.index_provisioner import IndexProvisioner
from article_indexer.utils.config import CONFIG, IndexerConfig, load_config
from article_indexer.utils.logger import setup_logger


load_dotenv('.env')

@click.command()
@click.option('--config', 'config_path', default=None,
              type=click.Path(dir_okay=False), help='Config file path (default: config/config.yaml)')
def main(config_path):
  """Setup and verify the index"""

  print("="*80)
  print("INDEX SETUP")
  print("="*80)

  try:
    raw_config = load_config(config_path) if config_path else CONFIG
    log_config = raw_config.get('logging') or {}
    setup_logger(
      log_file = log_config.get('log_file', "logs/indexer.log"),
      level = log_config.get('level', "INFO")
    )
    config = IndexerConfig.from_dict(raw_config)

    print(f"\nConnecting to Elasticsearch ({', '.join(config.hosts)})...")
    es = create_client(config)
    try:
      provisioner = IndexProvisioner(es, config)
      created = provisioner.ensure_index()
      status = provisioner.describe()
    finally:
      es.close()

  except ArticleIndexerError as e:
    print(f"\n✗ Error: {e}")
    print("\nTroubleshooting:")
    print("  1. Ensure Elasticsearch is running")
    print("  2. Check hosts and index_name in config/config.yaml (or ELASTICSEARCH_URL in .env)")
    print("  3. Verify network connectivity")
    sys.exit(1)

  print(f"\n✓ Index {'created' if created else 'already present'}: {status['index']}")
  print(f"  Documents: {status['documents']}")
  print("\n✓ Index is ready for use!")


if __name__ == "__main__":
  main()
