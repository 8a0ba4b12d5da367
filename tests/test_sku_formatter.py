"""Tests for SkuFieldFormatter: eligibility, extraction and currency resolution."""

from datetime import date, datetime, time
from decimal import Decimal

import pytest

from sku_fields.core.constants import priority
from sku_fields.core.constants.field_types import FieldProviderResponse, SupportedFieldType
from sku_fields.core.error import FormattingContextError, PersistenceError, FieldAccessError
from sku_fields.core.interfaces import ISku
from sku_fields.core.models import CatalogCurrency, Product, Property, Sku, qualified_name
from sku_fields.core.types.currency import Currency
from sku_fields.core.types.money import Money
from sku_fields.formatters.basic_formatter import BasicFieldFormatter
from sku_fields.formatters.sku_formatter import SkuFieldFormatter

MONEY = SupportedFieldType.MONEY


@pytest.fixture
def formatter():
    return SkuFieldFormatter()


class TestCanHandle:

    def test_sku_declared_property(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, None)
        assert formatter.can_handle(request, Property('name'))

    def test_interface_declared_property(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, None, target_class=qualified_name(ISku))
        assert formatter.can_handle(request, Property('name'))

    @pytest.mark.parametrize('target_class', [
        qualified_name(Product),
        'sku_fields.core.models.Category',
        None,
    ])
    def test_other_declaring_class(self, formatter, make_request, plain_sku, target_class):
        request = make_request(plain_sku, None, target_class=target_class)
        assert not formatter.can_handle(request, Property('name'))

    def test_map_field_property(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, None)
        assert not formatter.can_handle(request, Property('attributes---color'))

    def test_not_handled_response_leaves_property_untouched(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, 'Mug', target_class=qualified_name(Product))
        prop = Property('name')
        assert formatter.extract(request, prop) is FieldProviderResponse.NOT_HANDLED
        assert prop.value is None
        assert prop.display_value is None


class TestMoneyFields:

    def test_usd_formatting(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, Decimal('19.99'), field_type=MONEY)
        prop = Property('retailPrice')

        assert formatter.extract(request, prop) is FieldProviderResponse.HANDLED_BREAK
        assert prop.value == '19.99'
        assert prop.display_value == '$19.99'

    def test_null_requested_and_getter_values(self, formatter, make_request):
        request = make_request(Sku(), None, field_type=MONEY)
        prop = Property('retailPrice')

        formatter.extract(request, prop)
        assert prop.value is None
        assert prop.display_value is None

    def test_money_wrapper_is_unwrapped(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, Money(Decimal('5.50')), field_type=MONEY)
        prop = Property('retailPrice')

        formatter.extract(request, prop)
        assert prop.value == '5.5'
        assert prop.display_value == '$19.99'

    def test_sku_currency_is_used(self, formatter, make_request, gbp_sku):
        request = make_request(gbp_sku, Decimal('19.99'), field_type=MONEY)
        prop = Property('retailPrice')

        formatter.extract(request, prop)
        assert prop.display_value == '£19.99'

    def test_getter_and_requested_values_diverge(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, Decimal('24.00'), field_type=MONEY)
        prop = Property('retailPrice')

        formatter.extract(request, prop)
        assert prop.value == '24'
        assert prop.display_value == '$19.99'

    def test_locale_is_taken_from_context(self, formatter, make_request, context):
        sku = Sku(currency=CatalogCurrency('EUR'), retail_price=Money(Decimal('19.99')))
        request = make_request(sku, Decimal('19.99'), field_type=MONEY)
        request.context = context.for_locale('de_DE')
        prop = Property('retailPrice')

        formatter.extract(request, prop)
        assert prop.value == '19.99'
        assert prop.display_value == '19,99\xa0€'

    def test_entity_is_not_mutated(self, formatter, make_request, gbp_sku):
        before = Sku(**vars(gbp_sku))
        formatter.extract(make_request(gbp_sku, Decimal('1.00'), field_type=MONEY), Property('retailPrice'))
        assert gbp_sku == before


class TestOtherFields:

    def test_datetime_uses_date_formatter(self, formatter, make_request, gbp_sku):
        request = make_request(gbp_sku, datetime(2024, 3, 1, 12, 30), field_type=SupportedFieldType.DATE)
        prop = Property('activeStartDate')

        formatter.extract(request, prop)
        assert prop.value == '2024.03.01 12:30:00'
        assert prop.display_value == prop.value

    def test_date_value(self, formatter, make_request):
        sku = Sku(active_end_date=date(2025, 1, 31))
        request = make_request(sku, date(2025, 1, 31), field_type=SupportedFieldType.DATE)
        prop = Property('activeEndDate')

        formatter.extract(request, prop)
        assert prop.value == '2025.01.31 00:00:00'

    def test_generic_value_uses_str(self, formatter, make_request, gbp_sku):
        request = make_request(gbp_sku, 20, field_type=SupportedFieldType.INTEGER)
        prop = Property('quantityAvailable')

        formatter.extract(request, prop)
        assert prop.value == '20'
        assert prop.display_value == '12'

    def test_time_of_day_uses_str(self, formatter, make_request):
        request = make_request(Sku(name='x'), time(12, 30))
        prop = Property('name')

        formatter.extract(request, prop)
        assert prop.value == '12:30:00'
        assert prop.display_value == 'x'

    def test_boolean_matches_basic_formatter(self, formatter, make_request, gbp_sku):
        gbp_sku.taxable = True
        request = make_request(gbp_sku, False, field_type=SupportedFieldType.BOOLEAN)
        prop = Property('taxable')

        formatter.extract(request, prop)
        assert prop.value == 'false'
        assert prop.display_value == 'true'
        assert prop.display_value == BasicFieldFormatter().format_value(True, request)


class TestCurrencyResolution:

    def test_sku_without_currency_falls_back_to_default(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, None, field_type=MONEY)
        assert formatter.get_currency(request, Property('retailPrice')) == Currency.get_instance('USD')

    def test_sku_currency(self, formatter, make_request, gbp_sku):
        request = make_request(gbp_sku, None, field_type=MONEY)
        assert formatter.get_currency(request, Property('retailPrice')).code == 'GBP'

    def test_product_default_sku_currency(self, formatter, make_request, product):
        request = make_request(product, None, field_type=MONEY)
        currency = formatter.get_currency(request, Property('defaultSku.retailPrice'))
        assert currency.code == 'GBP'

    def test_product_non_default_sku_property(self, formatter, make_request, product):
        request = make_request(product, None, field_type=MONEY)
        currency = formatter.get_currency(request, Property('name'))
        assert currency.code == 'USD'

    def test_product_without_default_sku(self, formatter, make_request):
        request = make_request(Product(name='Empty'), None, field_type=MONEY)
        currency = formatter.get_currency(request, Property('defaultSku.retailPrice'))
        assert currency.code == 'USD'

    def test_product_default_sku_formatting(self, formatter, make_request, product):
        request = make_request(product, Decimal('19.99'), field_type=MONEY)
        prop = Property('defaultSku.retailPrice')

        formatter.extract(request, prop)
        assert prop.display_value == '£19.99'


class TestErrors:

    def test_unknown_property_raises_persistence_error(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, None)
        with pytest.raises(PersistenceError) as exc_info:
            formatter.extract(request, Property('weight'))
        assert isinstance(exc_info.value.__cause__, FieldAccessError)

    def test_missing_context(self, formatter, make_request, plain_sku):
        request = make_request(plain_sku, Decimal('1'), field_type=MONEY)
        request.context = None
        with pytest.raises(FormattingContextError):
            formatter.extract(request, Property('retailPrice'))


def test_runs_before_generic_money_formatter(formatter):
    assert formatter.order == priority.MONEY - 1000
