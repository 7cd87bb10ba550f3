#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Script لإنشاء الجداول وإضافة البيانات الأولية

Tables are created and seeded in a fixed order (users, customers, invoices,
revenue) because invoices reference customers. Every insert skips rows whose
primary or unique key already exists, so running the script twice is safe.
"""

import sys

from flask import current_app
from sqlalchemy import text
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.security import generate_password_hash

import seed_data
from models import db
from models.user import User
from models.customer import Customer
from models.invoice import Invoice
from models.revenue import Revenue


def _insert_ignoring_conflicts(model, rows):
    dialect = db.engine.dialect.name
    if dialect == 'postgresql':
        stmt = postgresql.insert(model.__table__)
    elif dialect == 'sqlite':
        stmt = sqlite.insert(model.__table__)
    else:
        raise RuntimeError(f'Seeding is not supported on {dialect}')
    result = db.session.execute(stmt.values(rows).on_conflict_do_nothing())
    db.session.commit()
    return result.rowcount


def _ensure_uuid_extension():
    if db.engine.dialect.name == 'postgresql':
        db.session.execute(text('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"'))
        db.session.commit()


def _seed_table(label, model, rows):
    try:
        _ensure_uuid_extension()
        model.__table__.create(db.engine, checkfirst=True)
        current_app.logger.info('Created "%s" table', model.__tablename__)
        inserted = _insert_ignoring_conflicts(model, rows)
        current_app.logger.info('Seeded %d %s (%d new)', len(rows), label, max(inserted, 0))
        return inserted
    except SQLAlchemyError as error:
        db.session.rollback()
        current_app.logger.error('Error seeding %s: %s', label, error)
        raise


def seed_users():
    rows = [{
        'id': user['id'],
        'name': user['name'],
        'email': user['email'],
        'password': generate_password_hash(user['password'])
    } for user in seed_data.users]
    return _seed_table('users', User, rows)


def seed_customers():
    return _seed_table('customers', Customer, seed_data.customers)


def seed_invoices():
    return _seed_table('invoices', Invoice, seed_data.invoices)


def seed_revenue():
    return _seed_table('revenue', Revenue, seed_data.revenue)


def seed_all():
    seed_users()
    seed_customers()
    seed_invoices()
    seed_revenue()


def seed_database(app):
    """Seed inside ``app``'s context and return the process exit status."""
    with app.app_context():
        try:
            seed_all()
        except Exception:
            app.logger.exception('An error occurred while attempting to seed the database')
            return 1
        finally:
            db.engine.dispose()
    app.logger.info('Database seeded')
    return 0


def main():
    from app import create_app
    sys.exit(seed_database(create_app()))


if __name__ == '__main__':
    main()
