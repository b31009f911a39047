import logging

from sqlalchemy.orm import Session

from app.models.job import Job
from app.schemas.results import DeleteResult, InsertResult, UpdateResult
from app.utils.ids import ensure_valid_id, new_object_id

logger = logging.getLogger(__name__)

# Columns copied out of the stored document so they can be filtered and sorted on
_PROMOTED_FIELDS = ("title", "category", "deadline")


def job_to_document(job: Job) -> dict:
    return {"_id": job.id, **job.document, "bid_count": job.bid_count}


def _apply_fields(job: Job, fields: dict):
    fields = {k: v for k, v in fields.items() if k != "_id"}
    if "bid_count" in fields:
        job.bid_count = fields.pop("bid_count")
    job.document = {**(job.document or {}), **fields}
    for name in _PROMOTED_FIELDS:
        if name in fields:
            setattr(job, name, fields[name])
    if "buyer" in fields:
        buyer = fields["buyer"] or {}
        job.buyer_email = buyer.get("email") if isinstance(buyer, dict) else None


def create_job(db: Session, data: dict) -> InsertResult:
    job = Job(id=new_object_id(), bid_count=0, document={})
    _apply_fields(job, data)
    db.add(job)
    db.commit()
    return InsertResult(inserted_id=job.id)


def list_jobs_by_owner(db: Session, email: str) -> list[dict]:
    jobs = db.query(Job).filter(Job.buyer_email == email).all()
    return [job_to_document(j) for j in jobs]


def list_jobs(db: Session) -> list[dict]:
    return [job_to_document(j) for j in db.query(Job).all()]


def get_job(db: Session, job_id: str) -> dict | None:
    job = db.get(Job, ensure_valid_id(job_id))
    if job is None:
        return None
    return job_to_document(job)


def delete_job(db: Session, job_id: str) -> DeleteResult:
    # Bids placed on the job are left untouched
    deleted = db.query(Job).filter(Job.id == ensure_valid_id(job_id)).delete()
    db.commit()
    return DeleteResult(deleted_count=deleted)


def update_job(db: Session, job_id: str, fields: dict) -> UpdateResult:
    """Merge ``fields`` into the job, inserting it if no job has this id.

    A missing job is created from ``fields`` alone, so the new record may lack
    title, buyer and the rest.
    """
    job_id = ensure_valid_id(job_id)
    job = db.get(Job, job_id)
    if job is None:
        job = Job(id=job_id, bid_count=0, document={})
        _apply_fields(job, fields)
        db.add(job)
        db.commit()
        logger.info("Upserted job %s from a partial update", job_id)
        return UpdateResult(upserted_count=1, upserted_id=job_id)

    before = job_to_document(job)
    _apply_fields(job, fields)
    modified = int(job_to_document(job) != before)
    db.commit()
    return UpdateResult(matched_count=1, modified_count=modified)


def search_jobs(
    db: Session,
    filter: str | None = None,
    search: str | None = None,
    sort: str | None = None,
) -> list[dict]:
    query = db.query(Job)

    if search:
        escaped = search.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
        query = query.filter(Job.title.ilike(f"%{escaped}%", escape="\\"))
    if filter:
        query = query.filter(Job.category == filter)
    if sort:
        query = query.order_by(Job.deadline.asc() if sort == "asc" else Job.deadline.desc())

    return [job_to_document(j) for j in query.all()]
