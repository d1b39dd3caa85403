from .generator.sample_generator import generate_collection
from .indexing.concurrent_indexer import ConcurrentIndexer, IndexOutcome, IndexStatus, IndexingSummary
from .models.article import Article, Item, Tag
from .search.index_provisioner import IndexProvisioner, get_mapping

__all__ = [
  'Article', 'Item', 'Tag',
  'generate_collection',
  'IndexProvisioner', 'get_mapping',
  'ConcurrentIndexer', 'IndexOutcome', 'IndexStatus', 'IndexingSummary'
]
