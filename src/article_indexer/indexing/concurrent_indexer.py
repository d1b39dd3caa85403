import concurrent.futures as cf
import json
from dataclasses import dataclass, field
from enum import Enum
from http import HTTPStatus
from typing import Any, Dict, List, Optional, Sequence
from elasticsearch import ApiError, SerializationError, TransportError
from tqdm import tqdm
from article_indexer.errors import IndexingAborted
from article_indexer.models.article import Article
from article_indexer.utils.config import IndexerConfig
from article_indexer.utils.logger import logger


class IndexStatus(str, Enum):
  SUCCESS = "SUCCESS"
  ENGINE_ERROR = "ENGINE_ERROR"
  TRANSPORT_ERROR = "TRANSPORT_ERROR"
  DECODE_ERROR = "DECODE_ERROR"


@dataclass(frozen=True)
class IndexOutcome:
  """Result of one indexing request"""
  article_id: int
  status: IndexStatus
  http_status: Optional[int] = None
  result: Optional[str] = None
  version: Optional[int] = None
  error: Optional[str] = None


@dataclass(frozen=True)
class IndexingSummary:
  outcomes: List[IndexOutcome] = field(default_factory=list)

  def _count(self, status: IndexStatus) -> int:
    return sum(1 for o in self.outcomes if o.status == status)

  @property
  def succeeded(self) -> int:
    return self._count(IndexStatus.SUCCESS)

  @property
  def engine_errors(self) -> int:
    return self._count(IndexStatus.ENGINE_ERROR)

  @property
  def transport_errors(self) -> int:
    return self._count(IndexStatus.TRANSPORT_ERROR)

  @property
  def decode_errors(self) -> int:
    return self._count(IndexStatus.DECODE_ERROR)

  @property
  def ok(self) -> bool:
    return self.succeeded == len(self.outcomes)

  def by_id(self) -> Dict[int, IndexOutcome]:
    return {o.article_id: o for o in self.outcomes}


def status_text(code: Optional[int]) -> str:
  """'200 OK' style status line"""
  if code is None:
    return "---"
  try:
    return f"{code} {HTTPStatus(code).phrase}"
  except ValueError:
    return str(code)


class ConcurrentIndexer:
  """Index every article with its own request, in parallel"""

  def __init__(self, client, config: IndexerConfig):
    self.client = client
    self.index_name = config.index_name
    self.max_concurrency = config.max_concurrency
    self.on_transport_error = config.on_transport_error
    self.show_progress = config.show_progress

  def index_article(self, article: Article) -> IndexOutcome:
    """
    Send one document, keyed by the article id.

    Engine error responses, transport failures and unreadable acknowledgments
    are returned as outcomes; a document that cannot be serialized raises
    IndexingAborted.
    """
    try:
      document = article.to_dict()
      json.dumps(document)
    except (TypeError, ValueError) as e:
      raise IndexingAborted(f"Error encoding article ID={article.id}: {e}") from e

    try:
      response = self.client.index(
        index = self.index_name,
        id = str(article.id),
        document = document,
        refresh = True
      )
    except SerializationError as e:
      # the document was encodable, so the acknowledgment body is the problem
      logger.error(f"Error parsing the response body for document ID={article.id}: {e}")
      return IndexOutcome(
        article_id = article.id,
        status = IndexStatus.DECODE_ERROR,
        error = str(e)
      )
    except ApiError as e:
      logger.error(f"[{status_text(e.meta.status)}] Error indexing document ID={article.id}")
      return IndexOutcome(
        article_id = article.id,
        status = IndexStatus.ENGINE_ERROR,
        http_status = e.meta.status,
        error = e.message
      )
    except TransportError as e:
      logger.error(f"Error getting response for document ID={article.id}: {e}")
      return IndexOutcome(
        article_id = article.id,
        status = IndexStatus.TRANSPORT_ERROR,
        error = str(e)
      )

    body = response.body
    http_status = response.meta.status
    result = body.get('result')
    version = body.get('_version')
    if version is not None:
      version = int(version)
    logger.info(f"[{status_text(http_status)}] {result}; version={version}")
    return IndexOutcome(
      article_id = article.id,
      status = IndexStatus.SUCCESS,
      http_status = http_status,
      result = result,
      version = version
    )

  def index_articles(self, articles: Sequence[Article]) -> IndexingSummary:
    """
    Submit one task per article and wait for all of them.

    With on_transport_error == "abort" the first transport failure cancels
    the tasks that have not started yet and raises IndexingAborted.
    """
    if not articles:
      logger.info("No articles to index")
      return IndexingSummary()

    workers = self.max_concurrency or len(articles)
    outcomes: List[IndexOutcome] = []

    logger.debug(f"Indexing {len(articles)} articles into '{self.index_name}' with {workers} workers")

    with cf.ThreadPoolExecutor(max_workers=workers, thread_name_prefix="indexer") as executor, \
        tqdm(total=len(articles), desc="Indexing articles", disable=not self.show_progress) as progress:
      futures = {executor.submit(self.index_article, article): article for article in articles}

      for future in cf.as_completed(futures):
        try:
          outcome = future.result()
        except IndexingAborted as e:
          _cancel_pending(futures)
          e.outcomes = list(outcomes)
          logger.error(f"✗ {e}")
          raise
        outcomes.append(outcome)
        progress.update(1)

        if outcome.status == IndexStatus.TRANSPORT_ERROR and self.on_transport_error == "abort":
          _cancel_pending(futures)
          raise IndexingAborted(
            f"Transport failure on document ID={outcome.article_id}: {outcome.error}",
            outcomes
          )

    summary = IndexingSummary(outcomes = sorted(outcomes, key=lambda o: o.article_id))
    logger.info(
      f"Indexed {summary.succeeded}/{len(summary.outcomes)} articles "
      f"(engine errors: {summary.engine_errors}, transport errors: {summary.transport_errors}, "
      f"unreadable responses: {summary.decode_errors})"
    )
    return summary


def _cancel_pending(futures: Dict[cf.Future, Any]) -> None:
  cancelled = sum(1 for f in futures if f.cancel())
  if cancelled:
    logger.warning(f"⚠ {cancelled} pending indexing tasks cancelled")
