import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional

from flask import current_app

from data.errors import DatabaseError, database_operation
from data.signals import revalidate_invoices
from forms.invoice_forms import to_cents
from models import db
from models.invoice import Invoice


@dataclass
class State:
    errors: dict = field(default_factory=dict)
    message: Optional[str] = None

    @property
    def ok(self):
        return not self.errors and self.message is None

    @classmethod
    def success(cls):
        return cls()


def _today():
    return datetime.now(timezone.utc).date()


@database_operation('Database Error: Failed to Create Invoice.')
def _insert_invoice(customer_id, amount, status):
    invoice = Invoice(customer_id=uuid.UUID(str(customer_id)), amount=amount, status=status, date=_today())
    db.session.add(invoice)
    db.session.commit()
    return invoice


@database_operation('Database Error: Failed to Update Invoice.')
def _update_invoice(invoice_id, customer_id, amount, status):
    # التاريخ لا يتغير عند التعديل
    db.session.execute(
        db.update(Invoice)
        .where(Invoice.id == invoice_id)
        .values(customer_id=uuid.UUID(str(customer_id)), amount=amount, status=status)
    )
    db.session.commit()


@database_operation('Database Error: Failed to Delete Invoice.')
def _delete_invoice(invoice_id):
    db.session.execute(db.delete(Invoice).where(Invoice.id == invoice_id))
    db.session.commit()


def _invalid_uuid(value, message):
    try:
        uuid.UUID(str(value))
    except ValueError:
        current_app.logger.warning('Rejected malformed id %r', value)
        return State(message=message)
    return None


def create_invoice(form):
    """Validate ``form`` and insert a new invoice dated today.

    Returns a :class:`State`; ``state.ok`` means the caller should redirect
    to the invoice listing.
    """
    if not form.validate():
        return State(errors=form.errors, message='Missing Fields. Failed to Create Invoice.')

    customer_id, amount, status = form.parsed()
    failure = _invalid_uuid(customer_id, 'Database Error: Failed to Create Invoice.')
    if failure:
        return failure
    try:
        invoice = _insert_invoice(customer_id, to_cents(amount), status)
    except DatabaseError as error:
        return State(message=error.message)

    current_app.logger.info('Created invoice %s', invoice.id)
    revalidate_invoices()
    return State.success()


def update_invoice(invoice_id, form):
    if not form.validate():
        return State(errors=form.errors, message='Missing Fields. Failed to Update Invoice.')

    customer_id, amount, status = form.parsed()
    message = 'Database Error: Failed to Update Invoice.'
    failure = _invalid_uuid(invoice_id, message) or _invalid_uuid(customer_id, message)
    if failure:
        return failure
    try:
        _update_invoice(uuid.UUID(str(invoice_id)), customer_id, to_cents(amount), status)
    except DatabaseError as error:
        return State(message=error.message)

    current_app.logger.info('Updated invoice %s', invoice_id)
    revalidate_invoices()
    return State.success()


def delete_invoice(invoice_id):
    failure = _invalid_uuid(invoice_id, 'Database Error: Failed to Delete Invoice.')
    if failure:
        return failure
    try:
        _delete_invoice(uuid.UUID(str(invoice_id)))
    except DatabaseError as error:
        return State(message=error.message)

    current_app.logger.info('Deleted invoice %s', invoice_id)
    revalidate_invoices()
    return State.success()
