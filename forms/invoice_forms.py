from collections import namedtuple
from decimal import Decimal, ROUND_HALF_UP

from flask_wtf import FlaskForm
from wtforms import SelectField, DecimalField, RadioField, SubmitField
from wtforms.validators import InputRequired, AnyOf, ValidationError

from models.invoice import INVOICE_STATUSES

InvoiceInput = namedtuple('InvoiceInput', ['customer_id', 'amount', 'status'])

STATUS_MESSAGE = 'Please select an invoice status.'


def to_cents(amount):
    """Convert a major-unit amount to integer minor units, rounding half up."""
    return int((Decimal(amount) * 100).quantize(Decimal('1'), rounding=ROUND_HALF_UP))


class InvoiceForm(FlaskForm):
    customer_id = SelectField('Customer', choices=[], validate_choice=False,
                              validators=[InputRequired(message='Please select a customer.')])
    amount = DecimalField('Amount', places=2)
    status = RadioField('Status', choices=[('pending', 'Pending'), ('paid', 'Paid')], validate_choice=False,
                        validators=[InputRequired(message=STATUS_MESSAGE),
                                    AnyOf(INVOICE_STATUSES, message=STATUS_MESSAGE)])
    submit = SubmitField('Save Invoice')

    def validate_amount(self, field):
        amount = field.data
        # المبلغ يُقارن بعد التحويل إلى سنتات
        if amount is None or not amount.is_finite() or to_cents(amount) <= 0:
            raise ValidationError('Please enter an amount greater than $0.')

    def parsed(self):
        return InvoiceInput(self.customer_id.data, self.amount.data, self.status.data)


class DeleteInvoiceForm(FlaskForm):
    submit = SubmitField('Delete')
