from datetime import datetime, timezone
from typing import Any, Dict, Tuple
from dataclasses import dataclass
from dateutil import parser

PUBLISHED_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


@dataclass(frozen=True)
class Tag:
  """Tag element"""
  name: str

  def to_dict(self) -> Dict[str, Any]:
    return {"name": self.name}


@dataclass(frozen=True)
class Item:
  """Nested item structure; interactions are stored but not indexed"""
  interactions: Tuple[str, ...] = ()
  tags: Tuple[Tag, ...] = ()

  def __post_init__(self):
    object.__setattr__(self, 'interactions', tuple(self.interactions))
    object.__setattr__(self, 'tags', tuple(self.tags))

  def to_dict(self) -> Dict[str, Any]:
    return {
      "interactions": list(self.interactions),
      "tags": [t.to_dict() for t in self.tags]
    }


@dataclass(frozen=True)
class Article:
  """Complete article structure"""
  id: int
  title: str
  body: str
  published: datetime
  items: Item
  tags: Tuple[Tag, ...] = ()

  def __post_init__(self):
    object.__setattr__(self, 'tags', tuple(self.tags))

  def to_dict(self) -> Dict[str, Any]:
    """Convert to the JSON document sent to Elasticsearch"""
    return {
      "id": self.id,
      "title": self.title,
      "body": self.body,
      "published": format_published(self.published),
      "items": self.items.to_dict(),
      "tags": [t.to_dict() for t in self.tags]
    }

  @classmethod
  def from_dict(cls, data: Dict[str, Any]) -> 'Article':
    """Create Article from an Elasticsearch document (_source)"""
    items = data.get('items') or {}
    return cls(
      id = int(data['id']),
      title = data['title'],
      body = data.get('body', ''),
      published = parse_published(data['published']),
      items = Item(
        interactions = tuple(items.get('interactions') or ()),
        tags = tuple(Tag(name = t['name']) for t in items.get('tags') or ())
      ),
      tags = tuple(Tag(name = t['name']) for t in data.get('tags') or ())
    )


def format_published(value: datetime) -> str:
  """RFC 3339 in UTC, second precision"""
  if value.tzinfo is not None:
    value = value.astimezone(timezone.utc)
  return value.strftime(PUBLISHED_FORMAT)


def parse_published(value) -> datetime:
  if isinstance(value, datetime):
    dt = value
  else:
    dt = parser.isoparse(value)
  if dt.tzinfo is None:
    return dt.replace(tzinfo=timezone.utc)
  return dt.astimezone(timezone.utc)
