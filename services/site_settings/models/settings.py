# services/site_settings/models/settings.py
from sqlalchemy import Column, String, JSON
from shared.db import Base, TimestampMixin

class Setting(TimestampMixin, Base):
    __tablename__ = "settings"

    key = Column(String(64), primary_key=True)
    value = Column(JSON, nullable=True)
