import math
import uuid
from decimal import Decimal

from flask import current_app
from sqlalchemy import case, cast, func, or_

from data.errors import database_operation
from data.formatting import format_currency
from models import db
from models.customer import Customer
from models.invoice import Invoice
from models.revenue import Revenue

ITEMS_PER_PAGE = 6


@database_operation('Failed to fetch revenue data.')
def fetch_revenue():
    current_app.logger.info('Fetching revenue data...')
    return Revenue.query.all()


@database_operation('Failed to fetch the latest invoices.')
def fetch_latest_invoices():
    rows = (
        db.session.query(Invoice.id, Invoice.amount, Customer.name, Customer.image_url, Customer.email)
        .join(Customer, Invoice.customer_id == Customer.id)
        .order_by(Invoice.date.desc(), Invoice.id.desc())
        .limit(5)
        .all()
    )
    return [{
        'id': row.id,
        'amount': format_currency(row.amount),
        'name': row.name,
        'image_url': row.image_url,
        'email': row.email
    } for row in rows]


@database_operation('Failed to fetch card data.')
def fetch_card_data():
    # ثلاث استعلامات مستقلة ثم دمج النتائج
    number_of_invoices = db.session.query(func.count(Invoice.id)).scalar() or 0
    number_of_customers = db.session.query(func.count(Customer.id)).scalar() or 0
    paid, pending = db.session.query(
        func.sum(case((Invoice.status == 'paid', Invoice.amount), else_=0)),
        func.sum(case((Invoice.status == 'pending', Invoice.amount), else_=0))
    ).one()

    return {
        'numberOfCustomers': number_of_customers,
        'numberOfInvoices': number_of_invoices,
        'totalPaidInvoices': format_currency(paid or 0),
        'totalPendingInvoices': format_currency(pending or 0)
    }


def _invoice_search(query):
    pattern = f'%{query or ""}%'
    return or_(
        Customer.name.ilike(pattern),
        Customer.email.ilike(pattern),
        cast(Invoice.amount, db.String).ilike(pattern),
        cast(Invoice.date, db.String).ilike(pattern),
        Invoice.status.ilike(pattern)
    )


@database_operation('Failed to fetch invoices.')
def fetch_filtered_invoices(query, current_page):
    offset = (max(current_page or 1, 1) - 1) * ITEMS_PER_PAGE
    rows = (
        db.session.query(
            Invoice.id, Invoice.amount, Invoice.date, Invoice.status,
            Customer.name, Customer.email, Customer.image_url
        )
        .join(Customer, Invoice.customer_id == Customer.id)
        .filter(_invoice_search(query))
        .order_by(Invoice.date.desc(), Invoice.id.desc())
        .limit(ITEMS_PER_PAGE)
        .offset(offset)
        .all()
    )
    return [row._asdict() for row in rows]


@database_operation('Failed to fetch total number of invoices.')
def fetch_invoices_pages(query):
    count = (
        db.session.query(func.count(Invoice.id))
        .join(Customer, Invoice.customer_id == Customer.id)
        .filter(_invoice_search(query))
        .scalar()
    ) or 0
    return math.ceil(count / ITEMS_PER_PAGE)


@database_operation('Failed to fetch invoice.')
def fetch_invoice_by_id(invoice_id):
    try:
        invoice_id = uuid.UUID(str(invoice_id))
    except ValueError:
        return None
    invoice = db.session.get(Invoice, invoice_id)
    if invoice is None:
        return None
    return {
        'id': invoice.id,
        'customer_id': invoice.customer_id,
        # تحويل المبلغ من السنتات إلى الدولارات
        'amount': Decimal(invoice.amount) / 100,
        'status': invoice.status
    }


@database_operation('Failed to fetch all customers.')
def fetch_customers():
    customers = Customer.query.order_by(Customer.name.asc()).all()
    return [{'id': c.id, 'name': c.name} for c in customers]


@database_operation('Failed to fetch customer table.')
def fetch_filtered_customers(query):
    pattern = f'%{query or ""}%'
    rows = (
        db.session.query(
            Customer.id, Customer.name, Customer.email, Customer.image_url,
            func.count(Invoice.id).label('total_invoices'),
            func.sum(case((Invoice.status == 'pending', Invoice.amount), else_=0)).label('total_pending'),
            func.sum(case((Invoice.status == 'paid', Invoice.amount), else_=0)).label('total_paid')
        )
        .outerjoin(Invoice, Customer.id == Invoice.customer_id)
        .filter(or_(Customer.name.ilike(pattern), Customer.email.ilike(pattern)))
        .group_by(Customer.id, Customer.name, Customer.email, Customer.image_url)
        .order_by(Customer.name.asc())
        .all()
    )
    return [{
        'id': row.id,
        'name': row.name,
        'email': row.email,
        'image_url': row.image_url,
        'total_invoices': row.total_invoices,
        'total_pending': format_currency(row.total_pending),
        'total_paid': format_currency(row.total_paid)
    } for row in rows]
