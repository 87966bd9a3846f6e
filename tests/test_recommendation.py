import unittest

from weather_risk.domain import RiskScores
from weather_risk.recommendation import PERFECT_CONDITIONS, recommend


def scores(hot=0, cold=0, windy=0, wet=0, uncomfortable=0):
    return RiskScores(hot=hot, cold=cold, windy=windy, wet=wet, uncomfortable=uncomfortable)


class TestRecommend(unittest.TestCase):
    def test_nothing_above_threshold_is_perfect(self):
        # every axis sits exactly on its threshold
        self.assertEqual(recommend(scores(hot=80, cold=70, windy=70, wet=60, uncomfortable=65)),
                         PERFECT_CONDITIONS)

    def test_highest_axis_above_threshold_wins(self):
        text = recommend(scores(wet=75, windy=88, hot=81))
        self.assertEqual(
            text,
            "There's a 88% chance of wind on your chosen day. "
            "Expect strong winds - secure loose items and dress appropriately!",
        )

    def test_high_value_below_its_own_threshold_is_ignored(self):
        # hot=78 is higher than wet=61 but under the heat threshold of 80
        text = recommend(scores(hot=78, wet=61))
        self.assertTrue(text.startswith("There's a 61% chance of rain"))

    def test_discomfort_wording(self):
        text = recommend(scores(uncomfortable=90))
        self.assertIn("chance of uncomfortable conditions", text)
        self.assertIn("take frequent breaks", text)

    def test_tie_goes_to_later_axis(self):
        text = recommend(scores(wet=90, cold=90))
        self.assertTrue(text.startswith("There's a 90% chance of cold"))


if __name__ == "__main__":
    unittest.main()
