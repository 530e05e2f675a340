"""ORM base class and mixins — all models inherit from Base."""

from sqlalchemy import Integer
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Declarative base — shared MetaData registry for all models."""

    pass


class SerialPrimaryKeyMixin:
    """SERIAL integer primary key assigned by the store on insert.

    ``sort_order=-1`` keeps ``id`` the first column of every table and select
    list, ahead of the subclass columns.
    """

    id: Mapped[int] = mapped_column(
        Integer,
        primary_key=True,
        autoincrement=True,
        sort_order=-1,
    )
