"""Transaction label and custom transaction endpoints."""

from fastapi import APIRouter, Depends

from dtrack.api.deps import get_identity, get_tracking_service
from dtrack.api.schemas import (
    CustomTransactionCreated,
    CustomTransactionRequest,
    CustomTransactionResponse,
    TransactionLabelResponse,
    TransactionLabelSet,
)
from dtrack.domain.models import IdentityKey
from dtrack.services import TrackingService

router = APIRouter(tags=["transactions"])


@router.get("/transaction-labels", response_model=list[TransactionLabelResponse])
def get_transaction_labels(
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> list[TransactionLabelResponse]:
    return [TransactionLabelResponse.from_domain(r) for r in service.get_transaction_labels(owner)]


@router.put("/transaction-labels", status_code=204)
def set_transaction_label(
    data: TransactionLabelSet,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    """Set (or overwrite) the label of an observed transaction."""
    service.set_transaction_label(owner, data.transaction_id, data.label)


@router.get("/custom-transactions", response_model=list[CustomTransactionResponse])
def get_custom_transactions(
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> list[CustomTransactionResponse]:
    return [CustomTransactionResponse.from_domain(t) for t in service.get_custom_transactions(owner)]


@router.post("/custom-transactions", response_model=CustomTransactionCreated, status_code=201)
def create_custom_transaction(
    data: CustomTransactionRequest,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> CustomTransactionCreated:
    """Create a custom transaction; a blank id is derived from the current second."""
    transaction_id = service.create_custom_transaction(owner, data.to_input())
    return CustomTransactionCreated(id=transaction_id)


@router.put("/custom-transactions", status_code=204)
def update_custom_transaction(
    data: CustomTransactionRequest,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    service.update_custom_transaction(owner, data.to_input())


@router.delete("/custom-transactions/{transaction_id:path}", status_code=204)
def delete_custom_transaction(
    transaction_id: str,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    service.delete_custom_transaction(owner, transaction_id)
