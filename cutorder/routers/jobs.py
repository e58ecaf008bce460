from typing import List

from fastapi import APIRouter, Depends, HTTPException

from .. import schemas
from ..deps import get_job_builder
from ..inventory import summarize_dashboard
from ..jobs import (
    JobBuilder, JobValidationError, apply_stock_decrement, filter_jobs, update_job_status,
)
from .pricing import breakdown_schema

router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("/preview", response_model=schemas.JobPreviewSchema)
def preview_job(body: schemas.JobCreateRequest, builder: JobBuilder = Depends(get_job_builder)):
    """Costs and stock check for a job form that hasn't been submitted yet."""
    preview = builder.preview(body.request, body.material)
    if preview is None:
        raise HTTPException(status_code=422, detail="Length and quantity must both be entered and greater than 0")
    return schemas.JobPreviewSchema(
        length=preview.length,
        length_display=preview.length_display,
        quantity=preview.quantity,
        costs=breakdown_schema(preview.costs),
        stock=preview.stock.to_dict(),
        stock_after=preview.stock_after,
    )


@router.post("", response_model=schemas.JobCreateResponse)
def create_job(body: schemas.JobCreateRequest, builder: JobBuilder = Depends(get_job_builder)):
    """Create a pending job and return it with the material's stock already decremented."""
    try:
        job = builder.create_job(body.request, body.material)
    except JobValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors)
    return schemas.JobCreateResponse(job=job, material=apply_stock_decrement(body.material, job))


@router.post("/status", response_model=schemas.CutJob)
def set_status(body: schemas.JobStatusRequest):
    return update_job_status(body.job, body.status)


@router.post("/search", response_model=List[schemas.CutJob])
def search_jobs(body: schemas.JobSearchRequest):
    try:
        return filter_jobs(body.jobs, body.search, body.status)
    except ValueError:
        raise HTTPException(status_code=422, detail=f"Unknown job status: {body.status}")


@router.post("/summary", response_model=schemas.DashboardSummary)
def summary(body: schemas.DashboardRequest):
    return summarize_dashboard(body.jobs, body.materials)
