from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse
from pydantic import ValidationError

from ..ids import IdentifierGenerationError
from ..schemas import Receipt, ReceiptIdResponse, PointsResponse
from ..services.scoring import score_breakdown
from ..services.store import ReceiptStore, ReceiptNotFound
from ..utils.logging import logger

router = APIRouter(prefix="/receipts", tags=["receipts"])

def get_store(request: Request) -> ReceiptStore:
    return request.app.state.store

@router.post("/process", response_model=ReceiptIdResponse)
async def process_receipt(request: Request, store: ReceiptStore = Depends(get_store)):
    # body is decoded as JSON whatever the Content-Type header says
    raw = await request.body()
    try:
        receipt = Receipt.model_validate_json(raw)
    except ValidationError as exc:
        errors = [{**e, "loc": ("body", *e["loc"])} for e in exc.errors(include_url=False)]
        raise RequestValidationError(errors, body=raw)

    try:
        receipt_id = store.submit(receipt)
    except IdentifierGenerationError:
        logger.exception("Could not generate an id for receipt from %r", receipt.retailer)
        return PlainTextResponse("Failed to generate UUID", status_code=500)
    logger.info("Stored receipt %s (%d items)", receipt_id, len(receipt.items))
    return ReceiptIdResponse(id=receipt_id)

@router.get("/{receipt_path:path}", response_model=PointsResponse)
def get_points(receipt_path: str, store: ReceiptStore = Depends(get_store)):
    """
    Any GET under /receipts/ is a points lookup: the id is the rest of the
    path with one trailing "/points" removed, so /receipts/<id> works too.
    """
    if receipt_path == "process":
        # /receipts/process only accepts POST
        raise HTTPException(status_code=405)
    receipt_id = receipt_path.removesuffix("/points")
    try:
        receipt = store.get(receipt_id)
    except ReceiptNotFound:
        logger.info("Points requested for unknown receipt %r", receipt_id)
        raise HTTPException(status_code=404, detail="Receipt not found")

    breakdown = score_breakdown(receipt)
    points = sum(breakdown.values())
    logger.debug("Receipt %s scored %d: %s", receipt_id, points, breakdown)
    return PointsResponse(points=points)
