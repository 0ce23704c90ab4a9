from typing import List, Optional, Union

import uvicorn
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from .bank.type_router import TypeRouter
from .extraction_error import ErrorKind
from .transaction_record import ExtractionResult

app = FastAPI(
    title="Notify Parser API",
    description="API for parsing bank payment notifications into structured transaction records.",
    version="1.0.0"
)

type_router = TypeRouter.default()


class ParseRequest(BaseModel):
    id: Optional[int] = None
    bank_type: str
    message: str
    # Epoch seconds/milliseconds or "YYYY-MM-DD HH:MM[:SS]" local time.
    received_at: Optional[Union[int, float, str]] = None


class ParseResponse(BaseModel):
    id: Optional[int] = None
    amount: str
    occurred_at: str
    balance: Optional[str] = None
    bank_type: str
    raw_message: str
    warnings: List[str] = []
    status: str = "success"


def format_result(request: ParseRequest, result: ExtractionResult) -> dict:
    formatted = result.record.to_dict()
    formatted["id"] = request.id
    formatted["warnings"] = [str(err) for err in result.errors]
    formatted["status"] = "success"
    return formatted


def status_code_for(kind: ErrorKind) -> int:
    if kind is ErrorKind.UNSUPPORTED_BANK_TYPE:
        return 404
    return 422


@app.post("/parse", response_model=ParseResponse)
async def parse_message(request: ParseRequest):
    """
    Parse a single notification.
    """
    result = type_router.dispatch(request.bank_type, request.message, request.received_at)
    if result.error is not None:
        raise HTTPException(status_code=status_code_for(result.error.kind), detail=str(result.error))
    return format_result(request, result)


@app.post("/parse-batch", response_model=List[dict])
async def parse_message_batch(requests: List[ParseRequest]):
    """
    Parse several notifications in one request; failures are reported per item.
    """
    results = []
    for request in requests:
        result = type_router.dispatch(request.bank_type, request.message, request.received_at)
        if result.error is not None:
            results.append({
                "id": request.id,
                "status": "error",
                "kind": result.error.kind.value,
                "message": str(result.error),
            })
            continue
        results.append(format_result(request, result))
    return results


@app.get("/types")
async def supported_types():
    return {"bank_types": type_router.supported_types()}


@app.get("/health")
async def health_check():
    return {"status": "healthy"}


if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
