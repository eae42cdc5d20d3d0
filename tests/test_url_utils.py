import unittest

from brandradar.ingestion.url_utils import canonicalize_url, format_publish_date, normalize_domain


class TestUrlUtils(unittest.TestCase):
    def test_canonicalize_strips_tracking_params(self):
        raw = "https://Example.com/path/to/article?utm_source=x&utm_medium=y&id=123&gclid=AAA#section"
        self.assertEqual(canonicalize_url(raw), "https://example.com/path/to/article?id=123")

    def test_equivalent_urls_share_a_key(self):
        a = "https://example.com/a?utm_source=x&id=1"
        b = "https://example.com/a?id=1&utm_medium=y"
        self.assertEqual(canonicalize_url(a), canonicalize_url(b))

    def test_normalize_domain(self):
        self.assertEqual(normalize_domain("WWW.Forbes.com"), "forbes.com")
        self.assertEqual(normalize_domain("shop.www.example.com"), "shop.www.example.com")
        self.assertEqual(normalize_domain(None), "")

    def test_publish_date(self):
        self.assertEqual(format_publish_date("2024-03-04T10:00:00Z"), "Mar 4, 2024")
        self.assertEqual(format_publish_date("Mar 4, 2024"), "Mar 4, 2024")
        self.assertEqual(format_publish_date(None), "Recent")
        self.assertEqual(format_publish_date("3 days ago"), "Recent")


if __name__ == "__main__":
    unittest.main()
