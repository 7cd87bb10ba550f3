import io

import pandas as pd
from flask import Blueprint, render_template, request, send_file
from flask_login import login_required
from data.queries import fetch_filtered_customers

customers_bp = Blueprint('customers', __name__, url_prefix='/dashboard/customers')

@customers_bp.route('/')
@login_required
def list_customers():
    query = request.args.get('query', '').strip()
    customers = fetch_filtered_customers(query)
    return render_template('customers/list.html', title='Customers', customers=customers, query=query)

@customers_bp.route('/export')
@login_required
def export_customers():
    query = request.args.get('query', '').strip()
    customers = fetch_filtered_customers(query)
    data = [{
        'Name': c['name'],
        'Email': c['email'],
        'Total Invoices': c['total_invoices'],
        'Total Pending': c['total_pending'],
        'Total Paid': c['total_paid']
    } for c in customers]
    df = pd.DataFrame(data, columns=['Name', 'Email', 'Total Invoices', 'Total Pending', 'Total Paid'])
    buffer = io.BytesIO(df.to_csv(index=False).encode('utf-8'))
    return send_file(buffer, mimetype='text/csv', as_attachment=True, download_name='customers_export.csv')
