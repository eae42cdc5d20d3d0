import random
import unittest
from datetime import date

from brandradar.analytics.trends import rolling_months, synthesize_trend
from brandradar.scoring.traffic import estimate_traffic, traffic_range
from brandradar.scoring.volume import estimate_volume, volume_range
from support.fakes import FixedRandom


class TestTrafficEstimator(unittest.TestCase):
    def test_known_publisher_share_of_site_traffic(self):
        self.assertEqual(estimate_traffic("www.forbes.com", FixedRandom(0.0)), 60_000)
        lo, hi = traffic_range("forbes.com")
        rng = random.Random(7)
        for _ in range(200):
            self.assertTrue(lo <= estimate_traffic("forbes.com", rng) < hi)
        self.assertLess(estimate_traffic("forbes.com", FixedRandom(0.999999)), 60_000_000 * 0.019)

    def test_unknown_domain_bands(self):
        self.assertEqual(traffic_range("irs.gov"), (100_000, 1_100_000))
        self.assertEqual(traffic_range("example.org"), (50_000, 550_000))
        self.assertEqual(traffic_range("blog.example.com"), (10_000, 310_000))

    def test_unknown_domain_estimates_stay_in_band(self):
        rng = random.Random(11)
        for domain in ("irs.gov", "WWW.Example.org", "blog.example.com"):
            lo, hi = traffic_range(domain)
            for _ in range(100):
                self.assertTrue(lo <= estimate_traffic(domain, rng) < hi)
        self.assertEqual(estimate_traffic("blog.example.com", FixedRandom(0.0)), 10_000)
        self.assertEqual(estimate_traffic("blog.example.com", FixedRandom(0.9999999)), 309_999)


class TestVolumeEstimator(unittest.TestCase):
    def test_rule_cascade(self):
        cases = [
            ("Best running shoes of 2024", (80_000, 480_000)),
            ("best running shoes", (50_000, 350_000)),
            ("Top 10 running shoes", (40_000, 240_000)),
            ("Nike vs Adidas", (30_000, 180_000)),
            ("What is Nike known for?", (15_000, 115_000)),
            ("Nike alternatives", (10_000, 90_000)),
            ("Shoes similar to Nike", (10_000, 90_000)),
            ("Is Nike worth buying?", (5_000, 55_000)),
            ("best nike shoes", (8_000, 68_000)),
            ("Nike pros and cons", (8_000, 68_000)),
            ("running shoes", (10_000, 110_000)),
        ]
        for query, expected in cases:
            self.assertEqual(volume_range(query, "Nike"), expected, msg=query)

    def test_estimates_stay_in_range(self):
        rng = random.Random(3)
        for query in ("Best running shoes of 2024", "Is Nike worth it", "running shoes"):
            lo, hi = volume_range(query, "Nike")
            for _ in range(100):
                self.assertTrue(lo <= estimate_volume(query, "Nike", rng) < hi)


class TestTrendSynthesizer(unittest.TestCase):
    def test_six_chronological_months(self):
        trend = synthesize_trend(10_000, random.Random(1), today=date(2026, 3, 15))
        self.assertEqual(
            [p.period for p in trend],
            ["Oct 2025", "Nov 2025", "Dec 2025", "Jan 2026", "Feb 2026", "Mar 2026"],
        )

    def test_volumes_within_thirty_percent(self):
        rng = random.Random(5)
        for base in (0, 1_000, 87_654):
            trend = synthesize_trend(base, rng, today=date(2026, 10, 1))
            self.assertEqual(len(trend), 6)
            for p in trend:
                self.assertTrue(int(base * 0.7) <= p.volume <= base * 1.3)

    def test_rolling_months_wraps_year(self):
        self.assertEqual(rolling_months(date(2026, 1, 31), periods=3), [(2025, 11), (2025, 12), (2026, 1)])


if __name__ == "__main__":
    unittest.main()
