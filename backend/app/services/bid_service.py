import logging

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.models.bid import Bid
from app.models.job import Job
from app.schemas.results import InsertResult, UpdateResult
from app.utils.ids import ensure_valid_id, new_object_id

logger = logging.getLogger(__name__)

# Statuses the client moves a bid through; any text is accepted on update
BID_STATUSES = ("Pending", "In Progress", "Complete", "Rejected")


class BidConflictError(Exception):
    def __init__(self, email: str, job_id: str):
        super().__init__("You have already placed a bid on this job")
        self.email = email
        self.job_id = job_id


def bid_to_document(bid: Bid) -> dict:
    return {
        "_id": bid.id,
        **bid.document,
        "jobId": bid.job_id,
        "email": bid.email,
        "buyer": bid.buyer,
        "status": bid.status,
    }


def place_bid(db: Session, data: dict) -> InsertResult:
    """Insert a bid and bump ``bid_count`` on its job in one transaction.

    The unique (email, job_id) index rejects a second bid from the same
    seller on the same job, including one racing in from another request.
    """
    job_id = ensure_valid_id(data["job_id"])
    extra = {k: v for k, v in data.items() if k not in ("_id", "job_id", "email", "buyer", "status")}
    bid = Bid(
        id=new_object_id(),
        job_id=job_id,
        email=data["email"],
        buyer=data.get("buyer"),
        status=data.get("status") or BID_STATUSES[0],
        document=extra,
    )
    db.add(bid)
    try:
        db.flush()
        db.execute(
            update(Job).where(Job.id == job_id).values(bid_count=Job.bid_count + 1)
        )
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.info("Rejected duplicate bid from %s on job %s", bid.email, job_id)
        raise BidConflictError(bid.email, job_id) from exc

    logger.info("Bid %s placed on job %s", bid.id, job_id)
    return InsertResult(inserted_id=bid.id)


def list_bids_for_user(db: Session, email: str, as_buyer: bool = False) -> list[dict]:
    query = db.query(Bid)
    if as_buyer:
        query = query.filter(Bid.buyer == email)
    else:
        query = query.filter(Bid.email == email)
    return [bid_to_document(b) for b in query.all()]


def update_bid_status(db: Session, bid_id: str, status: str) -> UpdateResult:
    bid = db.get(Bid, ensure_valid_id(bid_id))
    if bid is None:
        return UpdateResult()
    modified = int(bid.status != status)
    bid.status = status
    db.commit()
    return UpdateResult(matched_count=1, modified_count=modified)
