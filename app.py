import sys
import uuid

from flask import Flask, render_template, redirect, url_for
from flask_login import LoginManager, login_required
from config import Config
from flask_babel import Babel
from models import db
from models.user import User
from data.errors import DatabaseError
from data.formatting import format_currency
from data.queries import fetch_revenue, fetch_latest_invoices, fetch_card_data

# Initialize extensions
login_manager = LoginManager()
babel = Babel()

def create_app(config_object=Config):
    app = Flask(__name__)
    app.config.from_object(config_object)
    app.logger.setLevel(app.config.get('LOG_LEVEL', 'INFO'))

    db.init_app(app)
    login_manager.init_app(app)
    login_manager.login_view = 'auth.login'

    def get_locale():
        return app.config['BABEL_DEFAULT_LOCALE']
    babel.init_app(app, locale_selector=get_locale)

    # Flask-Login user loader
    @login_manager.user_loader
    def load_user(user_id):
        try:
            return db.session.get(User, uuid.UUID(user_id))
        except ValueError:
            return None

    # Register Blueprints
    from routes.auth import auth_bp
    app.register_blueprint(auth_bp)
    from routes.invoices import invoices_bp
    app.register_blueprint(invoices_bp)
    from routes.customers import customers_bp
    app.register_blueprint(customers_bp)

    @app.route("/")
    def index():
        return redirect(url_for('dashboard'))

    # Dashboard route
    @app.route("/dashboard")
    @login_required
    def dashboard():
        return render_template('dashboard.html',
                               title='Dashboard',
                               revenue=fetch_revenue(),
                               latest_invoices=fetch_latest_invoices(),
                               cards=fetch_card_data())

    @app.errorhandler(DatabaseError)
    def handle_database_error(error):
        return render_template('error.html', title='Error', message=error.message), 500

    @app.template_filter('currency')
    def currency_filter(amount):
        return format_currency(amount)

    @app.cli.command('seed')
    def seed_command():
        """Create the tables and insert the sample data."""
        from seed import seed_database
        sys.exit(seed_database(app))

    return app

def shutdown_engine(app):
    """Dispose of the app's connection pool."""
    with app.app_context():
        db.engine.dispose()

if __name__ == "__main__":
    app = create_app()
    app.run(debug=True)
