"""
Database models for FoodShare.
"""

from sqlalchemy import Column, Integer, Numeric, String, Text
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class User(Base):
    """User model for authentication."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    password = Column(String(255), nullable=False)  # bcrypt digest


class Recipient(Base):
    """Organisation or household that can receive food."""
    __tablename__ = "recipients"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    phone = Column(String(50), nullable=False)
    address = Column(Text, nullable=False)
    capacity = Column(Numeric(asdecimal=False))


class Food(Base):
    """Surplus food item available for redistribution."""
    __tablename__ = "foods"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    quantity = Column(Numeric(asdecimal=False))
    urgency = Column(String(50))
