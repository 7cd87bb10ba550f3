from collections import OrderedDict

from flask import Blueprint, render_template, redirect, url_for, flash, request, abort, current_app
from flask_login import login_required
from data.actions import State, create_invoice, update_invoice, delete_invoice
from data.queries import fetch_customers, fetch_filtered_invoices, fetch_invoices_pages, fetch_invoice_by_id
from data.signals import invoices_changed
from forms.invoice_forms import InvoiceForm, DeleteInvoiceForm

invoices_bp = Blueprint('invoices', __name__, url_prefix='/dashboard/invoices')


def _listing_cache():
    return current_app.extensions.setdefault('invoice_listing', OrderedDict())


def _cached_listing(query, page):
    # أحدث الصفحات المطلوبة فقط، بحد أقصى INVOICE_LISTING_CACHE_SIZE
    cache = _listing_cache()
    key = (query, page)
    if key in cache:
        cache.move_to_end(key)
        return cache[key]
    listing = (fetch_filtered_invoices(query, page), fetch_invoices_pages(query))
    cache[key] = listing
    while len(cache) > current_app.config['INVOICE_LISTING_CACHE_SIZE']:
        cache.popitem(last=False)
    return listing


@invoices_changed.connect
def clear_listing_cache(app, **extra):
    cache = app.extensions.get('invoice_listing')
    if cache:
        app.logger.debug('Invalidating %d cached listing page(s) for %s', len(cache), extra.get('path'))
        cache.clear()


def _customer_choices():
    return [(str(c['id']), c['name']) for c in fetch_customers()]


@invoices_bp.route('/')
@login_required
def list_invoices():
    query = request.args.get('query', '').strip()
    page = max(request.args.get('page', 1, type=int), 1)
    invoices, total_pages = _cached_listing(query, page)
    return render_template('invoices/list.html', title='Invoices', invoices=invoices,
                           total_pages=total_pages, page=page, query=query,
                           delete_form=DeleteInvoiceForm())


@invoices_bp.route('/create', methods=['GET', 'POST'])
@login_required
def create():
    form = InvoiceForm()
    form.customer_id.choices = _customer_choices()
    state = State()
    if form.is_submitted():
        state = create_invoice(form)
        if state.ok:
            flash('Invoice created.', 'success')
            return redirect(url_for('invoices.list_invoices'))
        flash(state.message, 'danger')
    return render_template('invoices/form.html', title='Create Invoice', form=form, state=state)


@invoices_bp.route('/<uuid:invoice_id>/edit', methods=['GET', 'POST'])
@login_required
def edit(invoice_id):
    invoice = fetch_invoice_by_id(invoice_id)
    if invoice is None:
        abort(404)
    form = InvoiceForm(data={
        'customer_id': str(invoice['customer_id']),
        'amount': invoice['amount'],
        'status': invoice['status']
    })
    form.customer_id.choices = _customer_choices()
    state = State()
    if form.is_submitted():
        state = update_invoice(invoice_id, form)
        if state.ok:
            flash('Invoice updated.', 'success')
            return redirect(url_for('invoices.list_invoices'))
        flash(state.message, 'danger')
    return render_template('invoices/form.html', title='Edit Invoice', form=form, state=state)


@invoices_bp.route('/<uuid:invoice_id>/delete', methods=['POST'])
@login_required
def delete(invoice_id):
    form = DeleteInvoiceForm()
    if not form.validate_on_submit():
        abort(400)
    state = delete_invoice(invoice_id)
    if state.ok:
        flash('Invoice deleted.', 'success')
    else:
        flash(state.message, 'danger')
    return redirect(url_for('invoices.list_invoices'))
