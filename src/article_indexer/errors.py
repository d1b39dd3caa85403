class ArticleIndexerError(Exception):
  """Base class for every fatal error raised by article_indexer"""


class ConfigError(ArticleIndexerError):
  """Missing or invalid configuration value"""


class ProvisioningError(ArticleIndexerError):
  """The target index could not be checked or created"""


class IndexingAborted(ArticleIndexerError):
  """
  Indexing run stopped before every article was processed.

  `outcomes` holds what was collected before the abort, in no particular order.
  """

  def __init__(self, message: str, outcomes=None):
    super().__init__(message)
    self.outcomes = list(outcomes or [])
