"""Complaint Service - HTTP API."""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, List
from complainthub.models import Category, Complaint, ComplaintDraft, ComplaintStatus
from complainthub.services.store import ComplaintStore
from complainthub.utils.logger import ServiceLogger
from complainthub.utils.metrics import MetricsCollector

from services.complaint import config

app = FastAPI(title="Complaint Service")
complaint_svc = ComplaintStore(id_prefix=config.ID_PREFIX)

# Initialize logger and metrics
logger = ServiceLogger(config.SERVICE_NAME, console_level=config.LOG_LEVEL.upper())
metrics = MetricsCollector(config.SERVICE_NAME)
logger.info("Complaint service starting up")


class RegisterRequest(BaseModel):
    # Whitespace-only text counts as empty, as on the client
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    phone: Optional[str] = None
    category: Category
    description: str = Field(min_length=1)


class ComplaintResponse(BaseModel):
    complaintId: str
    name: str
    email: str
    phone: str
    category: Category
    description: str
    status: ComplaintStatus
    createdDate: str


def to_response(c: Complaint) -> ComplaintResponse:
    return ComplaintResponse(**c.to_payload())


@app.post("/api/complaints", response_model=ComplaintResponse)
def register(req: RegisterRequest):
    c = complaint_svc.create(ComplaintDraft(
        name=req.name,
        email=req.email,
        phone=req.phone,
        category=req.category,
        description=req.description,
    ))
    metrics.increment("complaints_created")
    metrics.gauge("complaints_total", len(complaint_svc.list_all()))
    logger.info(f"Registered complaint {c.complaint_id} ({c.category.value})",
                complaint_id=c.complaint_id, category=c.category.value)
    return to_response(c)


@app.get("/api/complaints", response_model=List[ComplaintResponse])
def list_complaints():
    complaints = complaint_svc.list_all()
    logger.debug(f"Listing {len(complaints)} complaints", count=len(complaints))
    return [to_response(c) for c in complaints]


@app.put("/api/complaints/{complaint_id}/status", response_model=ComplaintResponse)
def update_status(complaint_id: str, status: ComplaintStatus):
    try:
        c = complaint_svc.update_status(complaint_id, status)
    except KeyError:
        logger.warning(f"Status update for unknown complaint {complaint_id}", complaint_id=complaint_id)
        raise HTTPException(status_code=404, detail=f"Complaint {complaint_id} not found")
    metrics.increment(f"complaints_{status.value}")
    logger.info(f"Complaint {complaint_id} marked as {status.value}", complaint_id=complaint_id, status=status.value)
    return to_response(c)


@app.get("/stats")
def stats():
    return complaint_svc.stats()


@app.get("/health")
def health():
    return {"status": "ok", "service": "complaint"}


@app.get("/logs")
def get_logs(limit: int = 100):
    """Get recent logs from this service."""
    return logger.get_recent_logs(limit=limit)


@app.get("/metrics")
def get_metrics(period: Optional[int] = None):
    """Get metrics from this service."""
    return metrics.get_all_metrics(time_period_minutes=period)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=config.PORT)
