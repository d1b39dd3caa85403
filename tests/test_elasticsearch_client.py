import unittest
from unittest.mock import patch

from article_indexer.search.elasticsearch_client import create_client
from article_indexer.utils.config import IndexerConfig


class TestCreateClient(unittest.TestCase):
  @patch("article_indexer.search.elasticsearch_client.Elasticsearch")
  def test_no_retries(self, es_cls) -> None:
    create_client(IndexerConfig(hosts=["http://es:9200"]))
    es_cls.assert_called_once_with(["http://es:9200"], max_retries=0, retry_on_timeout=False)

  @patch("article_indexer.search.elasticsearch_client.Elasticsearch")
  def test_request_timeout(self, es_cls) -> None:
    create_client(IndexerConfig(request_timeout=2.5))
    self.assertEqual(es_cls.call_args.kwargs["request_timeout"], 2.5)

  def test_real_client_is_built_without_connecting(self) -> None:
    client = create_client(IndexerConfig(hosts=["http://localhost:9200"]))
    try:
      self.assertTrue(hasattr(client, "index"))
    finally:
      client.close()


if __name__ == "__main__":
  unittest.main()
