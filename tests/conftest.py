"""Shared fixtures for the formatter tests."""

from datetime import datetime
from decimal import Decimal

import pytest
from babel import Locale

from sku_fields.app.context import DataFormatProvider, FormattingContext
from sku_fields.core.constants.field_types import SupportedFieldType
from sku_fields.core.models import (
    CatalogCurrency,
    ExtractValueRequest,
    FieldMetadata,
    Product,
    Sku,
    qualified_name,
)
from sku_fields.core.types.currency import Currency
from sku_fields.core.types.money import Money


SKU_CLASS = qualified_name(Sku)
PRODUCT_CLASS = qualified_name(Product)


@pytest.fixture(autouse=True)
def reset_default_currency():
    """Keep the process-wide default currency at USD between tests."""
    Money.set_default_currency('USD')
    yield
    Money.set_default_currency('USD')


@pytest.fixture(autouse=True)
def isolate_env(monkeypatch):
    for name in ('DEBUG', 'LOCALE', 'DEFAULT_CURRENCY', 'DATE_FORMAT'):
        monkeypatch.delenv(f'SKU_FIELDS_{name}', raising=False)


@pytest.fixture
def context():
    return FormattingContext(
        locale=Locale.parse('en_US'),
        default_currency=Currency.get_instance('USD'),
        data_format_provider=DataFormatProvider(),
    )


@pytest.fixture
def gbp_sku():
    return Sku(
        id=1,
        name='Hoodie - Large',
        currency=CatalogCurrency('GBP', 'British Pound'),
        retail_price=Money(Decimal('19.99')),
        sale_price=Money(Decimal('15.00')),
        active_start_date=datetime(2024, 3, 1, 12, 30),
        quantity_available=12,
    )


@pytest.fixture
def plain_sku():
    return Sku(id=2, name='Mug', retail_price=Money(Decimal('19.99')))


@pytest.fixture
def product(gbp_sku):
    return Product(id=10, name='Hoodie', default_sku=gbp_sku)


@pytest.fixture
def make_request(context):
    """Build an extraction request for an entity."""

    def _make(entity, requested_value, field_type=SupportedFieldType.GENERIC, target_class=SKU_CLASS):
        return ExtractValueRequest(
            entity=entity,
            requested_value=requested_value,
            metadata=FieldMetadata(field_type=field_type, target_class=target_class),
            context=context,
        )

    return _make
