"""Tests for the Currency and Money value types."""

from decimal import Decimal

import pytest

from sku_fields.core.error import CurrencyError
from sku_fields.core.types.currency import Currency
from sku_fields.core.types.money import Money


class TestCurrency:

    def test_instances_are_shared(self):
        assert Currency.get_instance('usd') is Currency.get_instance('USD')

    def test_code_is_normalized(self):
        jpy = Currency.get_instance(' jpy ')
        assert jpy.code == 'JPY'
        assert str(jpy) == 'JPY'

    @pytest.mark.parametrize('code', ['', None, 'XYZ1', 'NOPE'])
    def test_invalid_code(self, code):
        with pytest.raises(CurrencyError):
            Currency.get_instance(code)

    def test_format_amount(self):
        assert Currency.get_instance('USD').format_amount(Decimal('1234.5')) == '$1,234.50'
        assert Currency.get_instance('JPY').format_amount(1200) == '¥1,200'


class TestMoney:

    def test_default_currency(self):
        assert Money(Decimal('1')).currency == Currency.get_instance('USD')

    def test_amount_is_decimal(self):
        assert Money('2.50').amount == Decimal('2.50')

    def test_set_default_currency(self):
        Money.set_default_currency('EUR')
        assert Money.default_currency().code == 'EUR'
        assert Money(Decimal('1')).currency.code == 'EUR'

    def test_set_invalid_default_currency(self):
        with pytest.raises(CurrencyError):
            Money.set_default_currency('NOPE')
        assert Money.default_currency().code == 'USD'
