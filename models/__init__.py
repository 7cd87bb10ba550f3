from flask_sqlalchemy import SQLAlchemy

db = SQLAlchemy()

from .user import User
from .customer import Customer
from .invoice import Invoice
from .revenue import Revenue
