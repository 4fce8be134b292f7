from sqlalchemy import Boolean, Column, DateTime, Integer, String

from app.database import Base
from app.ringvote.utils import tz_now


class User(Base):

    __tablename__ = "auth_user"

    id = Column(Integer, primary_key=True)

    email = Column(String(200), nullable=False, unique=True)
    name = Column(String(200), nullable=False)

    # Account id handed over by the identity provider (Microsoft)
    external_id = Column(String(200), nullable=True, unique=True)

    is_admin = Column(Boolean, nullable=False, default=False)
    created_at = Column(DateTime, default=tz_now)

    def __repr__(self):
        return '<User %r>' % self.id
