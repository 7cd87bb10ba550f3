from flask import Blueprint, render_template, redirect, url_for, flash
from flask_login import logout_user, login_required, current_user
from forms.auth_forms import LoginForm
from data.auth import authenticate

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    if current_user.is_authenticated:
        return redirect(url_for('dashboard'))
    form = LoginForm()
    if form.validate_on_submit():
        error_message = authenticate(form.email.data, form.password.data)
        if error_message is None:
            return redirect(url_for('dashboard'))
        flash(error_message, 'danger')
    elif form.is_submitted():
        flash('Invalid credentials.', 'danger')
    return render_template('auth/login.html', title='Log in', form=form)

@auth_bp.route('/logout')
@login_required
def logout():
    logout_user()
    flash('You have been logged out.', 'success')
    return redirect(url_for('auth.login'))
