"""Labeled account endpoints."""

from fastapi import APIRouter, Depends

from dtrack.api.deps import get_identity, get_tracking_service
from dtrack.api.schemas import (
    AccountReference,
    LabeledAccountCreate,
    LabeledAccountResponse,
    LabeledAccountUpdate,
)
from dtrack.domain.models import IdentityKey
from dtrack.services import TrackingService

router = APIRouter(prefix="/labeled-accounts", tags=["labeled-accounts"])


@router.get("", response_model=list[LabeledAccountResponse])
def get_labeled_accounts(
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> list[LabeledAccountResponse]:
    """List the caller's tracked accounts in insertion order."""
    return [LabeledAccountResponse.from_domain(a) for a in service.get_labeled_accounts(owner)]


@router.post("", response_model=LabeledAccountResponse, status_code=201)
def create_labeled_account(
    data: LabeledAccountCreate,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> LabeledAccountResponse:
    """Track a new account."""
    stored = service.create_labeled_account(
        owner,
        account=data.account.to_domain(),
        label=data.label,
        product=data.product,
    )
    return LabeledAccountResponse.from_domain(stored)


@router.put("", status_code=204)
def update_labeled_account(
    data: LabeledAccountUpdate,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    """Change the label of a tracked account."""
    service.update_labeled_account(owner, data.account.to_domain(), data.label)


@router.delete("", status_code=204)
def delete_labeled_account(
    data: AccountReference,
    owner: IdentityKey = Depends(get_identity),
    service: TrackingService = Depends(get_tracking_service),
) -> None:
    """
    Stop tracking an account.

    Clears the caller's transaction labels; removing the last account also
    clears the caller's custom transactions.
    """
    service.delete_labeled_account(owner, data.account.to_domain())
