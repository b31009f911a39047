from sqlalchemy import JSON, Column, Text, UniqueConstraint
from app.database import Base


class Bid(Base):
    __tablename__ = "bids"
    __table_args__ = (
        UniqueConstraint("email", "job_id", name="uq_bids_email_job"),
    )

    id = Column(Text, primary_key=True)
    # Not a foreign key: deleting a job leaves its bids in place
    job_id = Column(Text, nullable=False, index=True)
    email = Column(Text, nullable=False, index=True)
    buyer = Column(Text, index=True)
    status = Column(Text, nullable=False, default="Pending")
    document = Column(JSON, nullable=False, default=dict)
