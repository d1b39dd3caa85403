import unittest
from datetime import datetime, timedelta, timezone

from article_indexer.generator.sample_generator import DEFAULT_COUNT, generate_collection


class TestGenerateCollection(unittest.TestCase):
  def setUp(self) -> None:
    self.now = datetime(2026, 10, 19, 12, 30, 15, 700_000, tzinfo=timezone.utc)
    self.articles = generate_collection(now=self.now)

  def test_generates_ten_articles(self) -> None:
    self.assertEqual(DEFAULT_COUNT, 10)
    self.assertEqual(len(generate_collection()), 10)

  def test_ids_are_contiguous(self) -> None:
    self.assertEqual([a.id for a in self.articles], list(range(1, 11)))

  def test_three_tags_at_each_level(self) -> None:
    for a in self.articles:
      self.assertEqual(len(a.tags), 3)
      self.assertEqual(len(a.items.tags), 3)
      self.assertEqual(len(a.items.interactions), 2)

  def test_dates_one_day_apart(self) -> None:
    dates = [a.published for a in self.articles]
    for earlier, later in zip(dates, dates[1:]):
      self.assertEqual(later - earlier, timedelta(days=1))

  def test_dates_rounded_to_second_in_utc(self) -> None:
    first = self.articles[0].published
    self.assertEqual(first, datetime(2026, 10, 20, 12, 30, 16, tzinfo=timezone.utc))
    for a in self.articles:
      self.assertEqual(a.published.microsecond, 0)
      self.assertEqual(a.published.utcoffset(), timedelta(0))

  def test_naive_now_treated_as_utc(self) -> None:
    articles = generate_collection(count=1, now=datetime(2026, 1, 1, 0, 0, 0))
    self.assertEqual(articles[0].published, datetime(2026, 1, 2, tzinfo=timezone.utc))

  def test_article_five(self) -> None:
    a = self.articles[4]
    self.assertEqual(a.id, 5)
    self.assertEqual(a.title, "Title 5")
    self.assertEqual([t.name for t in a.tags], ["TagZ-5", "TagY-5", "TagW-5"])
    self.assertEqual([t.name for t in a.items.tags], ["TagA-5", "TagB-5", "TagC-5"])
    self.assertEqual(a.items.interactions, ("Interaction A5", "Interaction B5"))

  def test_same_structure_across_runs(self) -> None:
    again = generate_collection(now=self.now)
    self.assertEqual(again, self.articles)

  def test_logs_count(self) -> None:
    with self.assertLogs("article_indexer", level="INFO") as cm:
      generate_collection(count=3)
    self.assertIn("> Generated 3 articles", cm.output[-1])


if __name__ == "__main__":
  unittest.main()
