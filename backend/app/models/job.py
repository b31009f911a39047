from sqlalchemy import JSON, Column, Integer, Text
from app.database import Base


class Job(Base):
    __tablename__ = "jobs"

    id = Column(Text, primary_key=True)
    # Upserted jobs may arrive with only a few fields, so nothing but the id is required
    title = Column(Text)
    category = Column(Text, index=True)
    deadline = Column(Text, index=True)
    buyer_email = Column(Text, index=True)
    bid_count = Column(Integer, nullable=False, default=0)
    document = Column(JSON, nullable=False, default=dict)
