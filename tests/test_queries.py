"""
Tests for the dashboard read queries, run against the seeded sample data.
"""

import uuid
from datetime import date
from decimal import Decimal

import pytest

import seed_data
from data.errors import DatabaseError
from data.queries import (
    ITEMS_PER_PAGE,
    fetch_card_data,
    fetch_customers,
    fetch_filtered_customers,
    fetch_filtered_invoices,
    fetch_invoice_by_id,
    fetch_invoices_pages,
    fetch_latest_invoices,
    fetch_revenue,
)
from models import db
from models.invoice import Invoice
from models.revenue import Revenue


def _replace_invoices(count):
    db.session.query(Invoice).delete()
    customer_id = seed_data.customers[0]['id']
    for day in range(1, count + 1):
        db.session.add(Invoice(customer_id=customer_id, amount=100 * day, status='paid', date=date(2024, 1, day)))
    db.session.commit()


class TestDashboardQueries:

    def test_fetch_revenue_returns_all_months(self, app):
        rows = fetch_revenue()
        assert len(rows) == 12
        assert {row.month for row in rows} >= {'Jan', 'Dec'}

    def test_fetch_revenue_wraps_storage_errors(self, app):
        Revenue.__table__.drop(db.engine)
        with pytest.raises(DatabaseError) as excinfo:
            fetch_revenue()
        assert excinfo.value.message == 'Failed to fetch revenue data.'

    def test_latest_invoices(self, app):
        latest = fetch_latest_invoices()
        assert len(latest) == 5
        assert latest[0]['name'] == 'Delba de Oliveira'
        assert latest[0]['amount'] == '$89.45'
        assert latest[1]['name'] == 'Steven Tey'
        assert latest[1]['amount'] == '$448.00'

    def test_card_data(self, app):
        cards = fetch_card_data()
        assert cards['numberOfInvoices'] == 15
        assert cards['numberOfCustomers'] == 10
        assert cards['totalPaidInvoices'] == '$1,185.16'
        assert cards['totalPendingInvoices'] == '$1,256.32'

    def test_card_data_with_no_invoices(self, app):
        db.session.query(Invoice).delete()
        db.session.commit()
        cards = fetch_card_data()
        assert cards['numberOfInvoices'] == 0
        assert cards['totalPaidInvoices'] == '$0.00'
        assert cards['totalPendingInvoices'] == '$0.00'


class TestInvoiceSearch:

    def test_first_page_is_limited(self, app):
        assert len(fetch_filtered_invoices('', 1)) == ITEMS_PER_PAGE

    def test_last_page_holds_the_remainder(self, app):
        assert len(fetch_filtered_invoices('', 3)) == 3

    def test_pages_below_one_start_at_the_beginning(self, app):
        assert fetch_filtered_invoices('', 0) == fetch_filtered_invoices('', 1)

    def test_newest_first(self, app):
        rows = fetch_filtered_invoices('', 1)
        dates = [row['date'] for row in rows]
        assert dates == sorted(dates, reverse=True)

    def test_pages_are_stable_when_dates_tie(self, app):
        db.session.query(Invoice).delete()
        customer_id = seed_data.customers[0]['id']
        for _ in range(ITEMS_PER_PAGE * 2 + 1):
            db.session.add(Invoice(customer_id=customer_id, amount=100, status='paid', date=date(2024, 1, 1)))
        db.session.commit()

        ids = [row['id'] for page in (1, 2, 3) for row in fetch_filtered_invoices('', page)]
        assert len(ids) == ITEMS_PER_PAGE * 2 + 1
        assert len(set(ids)) == len(ids)
        assert ids == sorted(ids, reverse=True)

    def test_matches_name_case_insensitively(self, app):
        rows = fetch_filtered_invoices('DELBA', 1)
        assert len(rows) == 2
        assert {row['email'] for row in rows} == {'delba@oliveira.com'}

    def test_matches_status(self, app):
        rows = fetch_filtered_invoices('pending', 1)
        assert len(rows) == 5
        assert all(row['status'] == 'pending' for row in rows)

    def test_matches_amount_as_text(self, app):
        rows = fetch_filtered_invoices('54246', 1)
        assert [row['name'] for row in rows] == ['Emil Kowalski']

    def test_matches_date_as_text(self, app):
        assert fetch_invoices_pages('2023-06') == 1
        assert len(fetch_filtered_invoices('2023-06', 1)) == 6

    def test_search_text_is_bound_not_interpolated(self, app):
        assert fetch_filtered_invoices("' OR '1'='1", 1) == []
        assert fetch_invoices_pages("'; DROP TABLE invoices; --") == 0
        assert db.session.query(Invoice).count() == 15

    def test_page_count_for_seeded_data(self, app):
        assert fetch_invoices_pages('') == 3

    def test_page_count_with_no_matches(self, app):
        assert fetch_invoices_pages('no such invoice') == 0

    def test_page_count_for_exactly_one_page(self, app):
        _replace_invoices(ITEMS_PER_PAGE)
        assert fetch_invoices_pages('') == 1

    def test_page_count_rounds_up(self, app):
        _replace_invoices(ITEMS_PER_PAGE + 1)
        assert fetch_invoices_pages('') == 2


class TestSingleRecords:

    def test_invoice_by_id_in_major_units(self, app):
        invoice = fetch_invoice_by_id(seed_data.invoices[0]['id'])
        assert invoice['amount'] == Decimal('157.95')
        assert invoice['status'] == 'pending'
        assert invoice['customer_id'] == seed_data.customers[0]['id']

    def test_invoice_by_id_accepts_strings(self, app):
        invoice = fetch_invoice_by_id(str(seed_data.invoices[3]['id']))
        assert invoice['amount'] == Decimal('448')

    def test_unknown_invoice(self, app):
        assert fetch_invoice_by_id(uuid.uuid4()) is None

    def test_malformed_invoice_id(self, app):
        assert fetch_invoice_by_id("1' OR '1'='1") is None

    def test_customers_are_sorted_by_name(self, app):
        customers = fetch_customers()
        names = [c['name'] for c in customers]
        assert len(customers) == 10
        assert names == sorted(names)
        assert names[0] == 'Amy Burns'


class TestCustomerTable:

    def test_aggregates(self, app):
        rows = fetch_filtered_customers('steven')
        assert len(rows) == 1
        steven = rows[0]
        assert steven['total_invoices'] == 2
        assert steven['total_paid'] == '$773.45'
        assert steven['total_pending'] == '$0.00'

    def test_matches_email(self, app):
        rows = fetch_filtered_customers('RABBIT.com')
        assert [row['name'] for row in rows] == ['Evil Rabbit']

    def test_customers_without_invoices(self, app):
        rows = fetch_filtered_customers('Amy')
        assert rows[0]['total_invoices'] == 0
        assert rows[0]['total_paid'] == '$0.00'

    def test_empty_query_lists_everyone(self, app):
        assert len(fetch_filtered_customers('')) == 10
