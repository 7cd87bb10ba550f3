import uuid

from models import db

INVOICE_STATUSES = ('pending', 'paid')

# نموذج الفاتورة
class Invoice(db.Model):
    __tablename__ = 'invoices'
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)
    customer_id = db.Column(db.Uuid, db.ForeignKey('customers.id'), nullable=False)
    amount = db.Column(db.Integer, nullable=False)  # بالسنتات
    status = db.Column(db.String(255), nullable=False)  # pending/paid
    date = db.Column(db.Date, nullable=False)

    def __repr__(self):
        return f'<Invoice {self.id} {self.status}>'
