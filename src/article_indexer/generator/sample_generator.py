from datetime import datetime, timedelta, timezone
from typing import List, Optional
from article_indexer.models.article import Article, Item, Tag
from article_indexer.utils.logger import logger

DEFAULT_COUNT = 10
BODY = "Lorem ipsum dolor sit amet..."


def generate_collection(count: int = DEFAULT_COUNT, now: Optional[datetime] = None) -> List[Article]:
  """
  Build the dummy articles to load into the index.

  Article i (1-based) is published i days after `now` (wall clock by default),
  rounded to the second and expressed in UTC.
  """
  base = _round_to_second(now or datetime.now(timezone.utc))

  articles = []
  for i in range(1, count + 1):
    n = str(i)
    articles.append(Article(
      id = i,
      title = f"Title {i}",
      body = BODY,
      published = base + timedelta(days=i),
      tags = (
        Tag(name = "TagZ-" + n),
        Tag(name = "TagY-" + n),
        Tag(name = "TagW-" + n)
      ),
      items = Item(
        interactions = ("Interaction A" + n, "Interaction B" + n),
        tags = (
          Tag(name = "TagA-" + n),
          Tag(name = "TagB-" + n),
          Tag(name = "TagC-" + n)
        )
      )
    ))

  logger.info(f"> Generated {len(articles)} articles")
  return articles


def _round_to_second(value: datetime) -> datetime:
  if value.tzinfo is None:
    value = value.replace(tzinfo=timezone.utc)
  value = value.astimezone(timezone.utc)
  rounded = value.replace(microsecond=0)
  if value.microsecond >= 500_000:
    rounded += timedelta(seconds=1)
  return rounded
