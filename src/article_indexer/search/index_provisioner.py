from typing import Any, Dict
from elasticsearch import ApiError, TransportError
from article_indexer.errors import ProvisioningError
from article_indexer.utils.config import IndexerConfig
from article_indexer.utils.logger import logger


def get_mapping() -> Dict[str, Any]:
  """Settings and mapping used when the index is created"""
  return {
    "settings": {
      "number_of_shards": 1
    },
    "mappings": {
      "properties": {
        "id": {"type": "integer"},
        "items": {
          "properties": {
            # stored in _source only
            "interactions": {
              "enabled": False,
              "type": "nested"
            },
            "tags": {
              "type": "nested",
              "include_in_root": True,
              "properties": {
                "name": {"type": "keyword"}
              }
            }
          }
        }
      }
    }
  }


class IndexProvisioner:
  """Make sure the target index exists before documents are written"""

  def __init__(self, client, config: IndexerConfig):
    self.client = client
    self.index_name = config.index_name

  def index_exists(self) -> bool:
    """Single existence request: 404 means absent, any other status means present"""
    try:
      response = self.client.indices.exists(index=self.index_name)
    except TransportError as e:
      raise ProvisioningError(f"Cannot reach Elasticsearch: {e}") from e
    except ApiError as e:
      if e.meta.status != 404:
        logger.warning(f"⚠ Existence check for '{self.index_name}' answered {e.meta.status}, treating index as present")
      return e.meta.status != 404
    return response.meta.status != 404

  def ensure_index(self) -> bool:
    """Create the index with get_mapping() if it is missing. Returns True if created."""
    if self.index_exists():
      logger.info(f"ℹ Index '{self.index_name}' already exists")
      return False

    mapping = get_mapping()
    try:
      self.client.indices.create(
        index = self.index_name,
        settings = mapping['settings'],
        mappings = mapping['mappings']
      )
    except TransportError as e:
      raise ProvisioningError(f"Cannot create index: {e}") from e
    except ApiError as e:
      raise ProvisioningError(f"Cannot create index: [{e.status_code}] {e.message}") from e

    logger.info(f"✓ Created index '{self.index_name}'")
    return True

  def describe(self) -> Dict[str, Any]:
    """Index status for the setup script"""
    exists = self.index_exists()
    documents = None
    if exists:
      try:
        documents = self.client.count(index=self.index_name)['count']
      except (ApiError, TransportError) as e:
        raise ProvisioningError(f"Cannot count documents in '{self.index_name}': {e}") from e
    return {
      "index": self.index_name,
      "exists": exists,
      "documents": documents
    }
