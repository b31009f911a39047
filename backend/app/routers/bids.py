from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.database import get_db
from app.dependencies import UNAUTHORIZED, require_session
from app.schemas.bid import BidCreate, BidStatusUpdate
from app.schemas.results import InsertResult, UpdateResult
from app.services import bid_service
from app.services.bid_service import BidConflictError
from app.utils.ids import InvalidIdError

router = APIRouter(tags=["bids"])


@router.post("/add-bid", response_model=InsertResult)
def place_bid(req: BidCreate, db: Session = Depends(get_db)):
    try:
        return bid_service.place_bid(db, req.model_dump())
    except (BidConflictError, InvalidIdError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@router.get("/bids/{email}")
def list_bids(
    email: str,
    buyer: str | None = None,
    identity: dict = Depends(require_session),
    db: Session = Depends(get_db),
) -> list[dict]:
    # A valid session only grants access to its own bids
    if identity.get("email") != email:
        raise HTTPException(status_code=401, detail=UNAUTHORIZED)
    # An empty or false-ish flag lists the bids this user placed
    as_buyer = buyer is not None and buyer.lower() not in ("", "false", "0")
    return bid_service.list_bids_for_user(db, email, as_buyer=as_buyer)


@router.patch("/bid-status-updated/{bid_id}", response_model=UpdateResult)
def update_bid_status(bid_id: str, req: BidStatusUpdate, db: Session = Depends(get_db)):
    try:
        return bid_service.update_bid_status(db, bid_id, req.status)
    except InvalidIdError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
