"""The fixture source returns its fixtures exactly, whatever the arguments."""

from dataclasses import FrozenInstanceError

import pytest

from dashboard_data.data import demo_customers, demo_invoices, demo_revenue
from dashboard_data.services import FixtureDataSource


@pytest.fixture
def source() -> FixtureDataSource:
    return FixtureDataSource()


def test_revenue(source):
    assert source.fetch_revenue() == demo_revenue.DEMO_REVENUE
    assert len(source.fetch_revenue()) == 12


def test_latest_invoices(source):
    assert source.fetch_latest_invoices() == demo_invoices.DEMO_LATEST_INVOICES


def test_card_data(source):
    assert source.fetch_card_data() == demo_invoices.DEMO_CARD_DATA


@pytest.mark.parametrize(("query", "page"), [("", 1), ("paid", 3), ("nobody", 99)])
def test_filtered_invoices_ignore_arguments(source, query, page):
    assert source.fetch_filtered_invoices(query, page) == demo_invoices.DEMO_FILTERED_INVOICES
    assert source.fetch_invoices_pages(query) == 1


@pytest.mark.parametrize("invoice_id", ["1", "missing"])
def test_invoice_by_id(source, invoice_id):
    invoice = source.fetch_invoice_by_id(invoice_id)

    assert invoice == demo_invoices.DEMO_INVOICE
    assert invoice.amount == 150.0


def test_customers(source):
    assert source.fetch_customers() == demo_customers.DEMO_CUSTOMERS
    assert source.fetch_filtered_customers("anything") == demo_customers.DEMO_FILTERED_CUSTOMERS


def test_returned_lists_are_copies(source):
    revenue = source.fetch_revenue()
    revenue.clear()

    assert len(source.fetch_revenue()) == 12


def test_fixture_use_is_logged_at_info(source, caplog):
    caplog.set_level("INFO")

    source.fetch_revenue()

    assert "fetch_revenue - serving fixture data" in caplog.text
    assert all(record.levelname == "INFO" for record in caplog.records)


def test_not_live(source):
    assert source.live is False


def test_fixtures_cannot_be_modified_through_results(source):
    card = source.fetch_card_data()
    invoice = source.fetch_invoice_by_id("1")

    with pytest.raises(FrozenInstanceError):
        card.number_of_invoices = 0
    with pytest.raises(FrozenInstanceError):
        invoice.amount = 0.0
    with pytest.raises(FrozenInstanceError):
        source.fetch_latest_invoices()[0].amount = "$0.00"

    assert source.fetch_card_data().number_of_invoices == 25
    assert source.fetch_invoice_by_id("1").amount == 150.0
