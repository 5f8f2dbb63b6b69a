from ..core.constants import MAX_NAME_LENGTH, MAX_POSITION_LENGTH
from ..database.extensions import db


class EmployeeRow(db.Model):
    __tablename__ = 'employees'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(MAX_NAME_LENGTH), nullable=False)
    position = db.Column(db.String(MAX_POSITION_LENGTH), nullable=False)
