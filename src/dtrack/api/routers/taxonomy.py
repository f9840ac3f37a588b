"""Label, product and preference endpoints."""

from fastapi import APIRouter, Depends

from dtrack.api.deps import get_identity, get_tracking_service
from dtrack.api.schemas import LabelRequest, PreferencesSchema, ProductRequest
from dtrack.domain.models import IdentityKey
from dtrack.services import TrackingService

router = APIRouter(tags=["taxonomy"])


@router.get("/labels", response_model=list[str])
def get_labels(
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> list[str]:
    return service.get_labels(owner)


@router.post("/labels", status_code=204)
def add_label(
    data: LabelRequest,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    service.add_label(owner, data.label)


@router.get("/products", response_model=list[str])
def get_products(
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> list[str]:
    return service.get_products(owner)


@router.post("/products", status_code=204)
def add_product(
    data: ProductRequest,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    service.add_product(owner, data.product)


@router.delete("/products/{product:path}", status_code=204)
def remove_product(
    product: str,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    """Remove a product; succeeds whether or not it was present."""
    service.remove_product(owner, product)


@router.get("/preferences", response_model=PreferencesSchema)
def get_preferences(
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> PreferencesSchema:
    return PreferencesSchema.from_domain(service.get_preferences(owner))


@router.put("/preferences", response_model=PreferencesSchema)
def set_preferences(
    data: PreferencesSchema,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> PreferencesSchema:
    return PreferencesSchema.from_domain(service.set_preferences(owner, data.to_domain()))
