from blinker import Namespace
from flask import current_app

INVOICES_PATH = '/dashboard/invoices'

_signals = Namespace()

# يُرسل بعد أي تعديل ناجح على الفواتير حتى يعاد حساب صفحة القائمة
invoices_changed = _signals.signal('invoices-changed')


def revalidate_invoices():
    invoices_changed.send(current_app._get_current_object(), path=INVOICES_PATH)
