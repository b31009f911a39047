from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.schemas.job import JobCreate, JobUpdate
from app.schemas.results import DeleteResult, InsertResult, UpdateResult
from app.services import job_service
from app.utils.ids import InvalidIdError

router = APIRouter(tags=["jobs"])


@router.post("/add-jobs", response_model=InsertResult)
def create_job(req: JobCreate, db: Session = Depends(get_db)):
    return job_service.create_job(db, req.model_dump(exclude_unset=True))


@router.get("/jobs/{email}")
def list_jobs_by_owner(email: str, db: Session = Depends(get_db)) -> list[dict]:
    return job_service.list_jobs_by_owner(db, email)


@router.get("/jobs")
def list_jobs(db: Session = Depends(get_db)) -> list[dict]:
    return job_service.list_jobs(db)


@router.delete("/job/{job_id}", response_model=DeleteResult)
def delete_job(job_id: str, db: Session = Depends(get_db)):
    try:
        return job_service.delete_job(db, job_id)
    except InvalidIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/job/{job_id}")
def get_job(job_id: str, db: Session = Depends(get_db)) -> dict | None:
    # An unknown id answers null rather than 404
    try:
        return job_service.get_job(db, job_id)
    except InvalidIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.put("/update-job/{job_id}", response_model=UpdateResult)
def update_job(job_id: str, req: JobUpdate, db: Session = Depends(get_db)):
    try:
        return job_service.update_job(db, job_id, req.model_dump(exclude_unset=True))
    except InvalidIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/all-jobs")
def search_jobs(
    filter: str | None = None,
    search: str | None = None,
    sort: str | None = None,
    db: Session = Depends(get_db),
) -> list[dict]:
    return job_service.search_jobs(db, filter=filter, search=search, sort=sort)
