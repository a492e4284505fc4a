"""
Database models for the expense ledger.

Python attribute names are English; the table and column names keep the
storage layout the frontend and existing database files expect
(`usuarios` and `gastos`).
"""
from extensions import db


class User(db.Model):
    """User model for authentication."""

    __tablename__ = 'usuarios'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    email = db.Column(db.Text, unique=True, nullable=False)
    password_hash = db.Column('senha', db.Text, nullable=False)

    # Relationships
    expenses = db.relationship('Expense', back_populates='owner')

    def __repr__(self):
        return f'<User {self.id}: {self.email}>'


class Expense(db.Model):
    """A dated expense owned by exactly one user."""

    __tablename__ = 'gastos'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    description = db.Column('descricao', db.Text, nullable=False)
    amount = db.Column('valor', db.Float, nullable=False)
    category = db.Column('categoria', db.Text, nullable=False)
    date = db.Column('data', db.Text, nullable=False)  # YYYY-MM-DD
    owner_id = db.Column('usuario_id', db.Integer, db.ForeignKey('usuarios.id'), index=True)

    # Relationships
    owner = db.relationship('User', back_populates='expenses')

    def __repr__(self):
        return f'<Expense {self.id}: {self.description} {self.amount}>'

    def to_dict(self):
        """Convert expense to dictionary for JSON, using the wire field names."""
        return {
            'id': self.id,
            'descricao': self.description,
            'valor': self.amount,
            'categoria': self.category,
            'data': self.date,
            'usuario_id': self.owner_id,
        }
