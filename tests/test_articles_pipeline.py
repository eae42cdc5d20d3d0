import random
import unittest

from brandradar.errors import UpstreamError
from brandradar.ingestion.article_types import SearchResponse
from brandradar.pipeline.articles import aggregate_articles
from brandradar.pipeline.query_planner import build_search_queries
from support.fakes import FakeSearch, FixedRandom, result


class TestQueryPlanner(unittest.TestCase):
    def test_review_query_first_and_editorial_sites_second(self):
        queries = build_search_queries("Nike")
        self.assertEqual(queries[0], "best Nike review")
        self.assertIn("site:wirecutter.com", queries[1])
        self.assertGreaterEqual(len(queries), 3)


class TestAggregateArticles(unittest.TestCase):
    def setUp(self):
        self.queries = build_search_queries("Nike")

    def test_dedup_across_queries_first_occurrence_wins(self):
        search = FakeSearch({
            self.queries[0]: SearchResponse(results=(
                result("https://www.example.com/a", title="First A"),
                result("https://blog.example.net/b", title="B"),
            )),
            self.queries[1]: SearchResponse(results=(
                result("https://www.example.com/a?utm_source=x", title="Second A"),
                result("https://news.example.io/c", title="C"),
            )),
        })
        articles = aggregate_articles("Nike", search, rng=FixedRandom(0.5))

        self.assertEqual(search.calls, self.queries[:2])
        urls = [a.url for a in articles]
        self.assertEqual(len(urls), len(set(urls)))
        self.assertEqual(len(articles), 3)
        # equal traffic everywhere: first-seen order survives the sort
        self.assertEqual([a.title for a in articles], ["First A", "B", "C"])
        self.assertEqual([a.id for a in articles], [1, 2, 3])

    def test_sorted_by_traffic_with_dense_ids(self):
        search = FakeSearch({
            self.queries[0]: SearchResponse(results=(
                result("https://smallblog.com/x"),
                result("https://www.nytimes.com/y"),
                result("https://irs.gov/z"),
            )),
        })
        articles = aggregate_articles("Nike", search, rng=random.Random(4))
        traffic = [a.monthly_traffic for a in articles]
        self.assertEqual(traffic, sorted(traffic, reverse=True))
        self.assertEqual([a.id for a in articles], list(range(1, len(articles) + 1)))

    def test_record_fields(self):
        search = FakeSearch({
            self.queries[0]: SearchResponse(results=(
                result(
                    "https://www.forbes.com/nike-review",
                    title="Sponsored: Nike Pegasus",
                    domain="www.forbes.com",
                    snippet="#2 Nike is the pick",
                    publish_date="2024-03-04T10:00:00Z",
                ),
                result("https://example.com/other", title="Trail shoes", snippet="nothing"),
            )),
        })
        articles = aggregate_articles("Nike", search, rng=FixedRandom(0.0))
        forbes = next(a for a in articles if a.publisher == "forbes.com")
        self.assertEqual(forbes.content_type, "Sponsored")
        self.assertTrue(forbes.sponsored)
        self.assertTrue(forbes.brand_mentioned)
        self.assertEqual(forbes.mention_position, 2)
        self.assertEqual(forbes.publish_date, "Mar 4, 2024")
        self.assertEqual(forbes.monthly_traffic, 60_000)

        other = next(a for a in articles if a.publisher == "example.com")
        self.assertFalse(other.brand_mentioned)
        self.assertIsNone(other.mention_position)
        self.assertEqual(other.publish_date, "Recent")
        self.assertFalse(other.sponsored)

        payload = forbes.to_dict()
        self.assertEqual(payload["type"], "Sponsored")
        self.assertEqual(payload["domain"], "forbes.com")
        self.assertIn("monthlyTraffic", payload)

    def test_query_limit(self):
        search = FakeSearch()
        aggregate_articles("Nike", search, query_limit=3)
        self.assertEqual(search.calls, self.queries[:3])

    def test_search_failure_aborts(self):
        search = FakeSearch(
            {self.queries[0]: SearchResponse(results=(result("https://example.com/a"),))},
            failures=[self.queries[1]],
        )
        with self.assertRaises(UpstreamError):
            aggregate_articles("Nike", search)


if __name__ == "__main__":
    unittest.main()
