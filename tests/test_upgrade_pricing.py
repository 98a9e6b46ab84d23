from __future__ import annotations

from decimal import Decimal
import unittest

from app.domain.exceptions import PricingError
from app.domain.services.upgrade_pricing import DURATION_OPTIONS, calculate_price


class UpgradePricingTests(unittest.TestCase):
    def test_monthly_price_without_discount(self):
        quote = calculate_price("PRO", 1)
        self.assertEqual(quote.original_price, Decimal("19.90"))
        self.assertEqual(quote.final_price, Decimal("19.90"))
        self.assertEqual(quote.savings, Decimal("0.00"))
        self.assertEqual(quote.discount_percent, 0)

    def test_yearly_price_applies_twenty_percent(self):
        quote = calculate_price("pro", 12)
        self.assertEqual(quote.plan_type, "PRO")
        self.assertEqual(quote.original_price, Decimal("238.80"))
        self.assertEqual(quote.final_price, Decimal("191.04"))
        self.assertEqual(quote.savings, Decimal("47.76"))
        self.assertEqual(quote.discount_percent, 20)

    def test_diamond_three_years(self):
        quote = calculate_price("DIAMOND", 36)
        self.assertEqual(quote.original_price, Decimal("1796.40"))
        self.assertEqual(quote.final_price, Decimal("898.20"))
        self.assertEqual(quote.discount_percent, 50)

    def test_lifetime_uses_fixed_price_against_sixty_months(self):
        pro = calculate_price("PRO", 0)
        self.assertEqual(pro.original_price, Decimal("1194.00"))
        self.assertEqual(pro.final_price, Decimal("990.00"))
        self.assertEqual(pro.savings, Decimal("204.00"))
        self.assertEqual(pro.discount_percent, 17)

        diamond = calculate_price("DIAMOND", 0)
        self.assertEqual(diamond.final_price, Decimal("2190.00"))
        self.assertEqual(diamond.discount_percent, 27)

    def test_unlisted_duration_has_no_discount(self):
        quote = calculate_price("PRO", 2)
        self.assertEqual(quote.final_price, Decimal("39.80"))
        self.assertEqual(quote.discount_percent, 0)

    def test_free_and_negative_months_cannot_be_priced(self):
        with self.assertRaises(PricingError):
            calculate_price("FREE", 1)
        with self.assertRaises(PricingError):
            calculate_price("PRO", -1)

    def test_only_one_option_is_flagged_popular(self):
        popular = [option.months for option in DURATION_OPTIONS if option.popular]
        self.assertEqual(popular, [12])


if __name__ == "__main__":
    unittest.main()
