from elasticsearch import Elasticsearch
from article_indexer.utils.config import IndexerConfig
from article_indexer.utils.logger import logger


def create_client(config: IndexerConfig) -> Elasticsearch:
  """
  Configure the Elasticsearch client.

  The client is shared by every indexing worker (it is thread safe).
  Retries are disabled: a failed request is reported once.
  """
  options = {
    "max_retries": 0,
    "retry_on_timeout": False
  }
  if config.request_timeout is not None:
    options["request_timeout"] = config.request_timeout

  logger.debug(f"Elasticsearch client for {', '.join(config.hosts)}")
  return Elasticsearch(config.hosts, **options)
