import unittest

from brandradar.scoring.content_classifier import CONTENT_TYPES, classify_content


class TestContentClassifier(unittest.TestCase):
    def test_numeric_superlative_is_listicle(self):
        self.assertEqual(classify_content("10 Best Running Shoes of 2024", "our picks", "x.com/a"), "Listicle")

    def test_sponsored_beats_news(self):
        self.assertEqual(classify_content("Sponsored: New Shoe Launch", "", "x.com/b"), "Sponsored")

    def test_sponsored_beats_review(self):
        self.assertEqual(classify_content("Sponsored review of the Pegasus", "hands-on", "x.com/c"), "Sponsored")

    def test_advertorial(self):
        self.assertEqual(classify_content("Promoted: comfy socks", "", "x.com/d"), "Advertorial")

    def test_we_tested_goes_to_roundup_before_review(self):
        self.assertEqual(classify_content("We tested the new mixer", "full review inside", "x.com/e"), "Product Roundup")

    def test_editor_and_pick_together(self):
        self.assertEqual(classify_content("Editor's favourite kettle", "our pick for the kitchen", "x.com/f"), "Product Roundup")

    def test_comparison(self):
        self.assertEqual(classify_content("Nike versus Adidas", "", "x.com/g"), "Comparison")
        self.assertEqual(classify_content("Blender head to head", "", "x.com/h"), "Comparison")

    def test_buying_guide(self):
        self.assertEqual(classify_content("How to choose a mattress", "", "x.com/i"), "Buying Guide")
        self.assertEqual(classify_content("The buyer's guide to kettles", "", "x.com/j"), "Buying Guide")

    def test_review(self):
        self.assertEqual(classify_content("Pegasus 41 review", "after using it daily", "x.com/k"), "Review")

    def test_news(self):
        self.assertEqual(classify_content("Nike announces a flagship store", "", "x.com/l"), "News")

    def test_listicle_triggers(self):
        self.assertEqual(classify_content("7 must-have gadgets", "", "x.com/m"), "Listicle")
        self.assertEqual(classify_content("Kettles ranked", "", "x.com/n"), "Listicle")
        self.assertEqual(classify_content("The best sneakers of 2023 reading list", "", "x.com/o"), "Listicle")
        self.assertEqual(classify_content("The best sneakers of 2023", "", "x.com/o"), "Editorial")

    def test_listicle_beats_roundup(self):
        self.assertEqual(classify_content("Ranked: we tested 12 kettles", "", "x.com/p"), "Listicle")
        self.assertEqual(classify_content("Our picks after we tried 30 kettles", "", "x.com/q"), "Listicle")

    def test_comparison_triggers(self):
        self.assertEqual(classify_content("Kettle head-to-head", "", "x.com/r"), "Comparison")
        self.assertEqual(classify_content("Two kettles compared", "", "x.com/s"), "Comparison")
        self.assertEqual(classify_content("A kettle comparison", "", "x.com/t"), "Comparison")

    def test_what_to_look_for_is_buying_guide(self):
        self.assertEqual(classify_content("Kettles: what to look for", "", "x.com/u"), "Buying Guide")

    def test_review_triggers(self):
        self.assertEqual(classify_content("Six months of running in the Pegasus", "", "x.com/w"), "Review")
        self.assertEqual(classify_content("Hands on with the new kettle", "", "x.com/y"), "Review")

    def test_news_triggers(self):
        self.assertEqual(classify_content("Nike launches a running app", "", "x.com/z"), "News")
        self.assertEqual(classify_content("A new product line from Nike", "", "x.com/aa"), "News")
        self.assertEqual(classify_content("Report: Nike sales slow", "", "x.com/ab"), "News")

    def test_default_is_editorial(self):
        self.assertEqual(classify_content("A day in the life of a shoemaker", "", "example.com/story"), "Editorial")

    def test_url_participates(self):
        self.assertEqual(classify_content("Our take", "", "example.com/sponsored/post"), "Sponsored")

    def test_always_returns_known_label(self):
        samples = [
            ("", "", ""),
            ("Top 5 kettles", "", ""),
            ("Random words", "nothing here", "example.com"),
            ("BREAKING: report: prices up", "", ""),
        ]
        for title, snippet, url in samples:
            self.assertIn(classify_content(title, snippet, url), CONTENT_TYPES)


if __name__ == "__main__":
    unittest.main()
