"""
Mixins para models SQLAlchemy.
"""

from sqlalchemy import Integer
from sqlalchemy.orm import Mapped, mapped_column


class IntegerIDMixin:
    """Mixin que adiciona ID inteiro autoincremental como primary key."""
    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
    )
