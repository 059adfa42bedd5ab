import logging
from typing import List

from fastapi import APIRouter, Depends

from schemas import MessageResponse, SavedFund, SavedFundCheck, SavedFundCreate
from storage import SavedFundStore
from utils import SavedFundNotFoundError, TokenIdentity, get_current_identity, get_saved_fund_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/saved-funds", tags=["saved-funds"])


@router.get("", response_model=List[SavedFund])
def list_saved_funds(
    identity: TokenIdentity = Depends(get_current_identity),
    funds: SavedFundStore = Depends(get_saved_fund_store),
):
    """Get all saved funds for the current user"""
    return [SavedFund.model_validate(f) for f in funds.list_by_user(identity.user_id)]


@router.post("", response_model=SavedFund)
def save_fund(
    fund: SavedFundCreate,
    identity: TokenIdentity = Depends(get_current_identity),
    funds: SavedFundStore = Depends(get_saved_fund_store),
):
    """Add a fund to the current user's watchlist"""
    saved = funds.save(
        identity.user_id,
        fund.fund_id,
        fund.fund_name,
        fund_category=fund.fund_category,
        nav=fund.nav,
    )
    logger.info("User id=%s saved fund %s", identity.user_id, saved.fund_id)
    return SavedFund.model_validate(saved)


@router.delete("/{fund_id}", response_model=MessageResponse)
def remove_saved_fund(
    fund_id: str,
    identity: TokenIdentity = Depends(get_current_identity),
    funds: SavedFundStore = Depends(get_saved_fund_store),
):
    """Remove a fund from the current user's watchlist"""
    if not funds.remove(identity.user_id, fund_id):
        raise SavedFundNotFoundError(identity.user_id, fund_id)
    logger.info("User id=%s removed fund %s", identity.user_id, fund_id)
    return {"message": "Fund removed from saved list"}


@router.get("/{fund_id}/check", response_model=SavedFundCheck)
def check_saved_fund(
    fund_id: str,
    identity: TokenIdentity = Depends(get_current_identity),
    funds: SavedFundStore = Depends(get_saved_fund_store),
):
    return SavedFundCheck(is_saved=funds.is_saved(identity.user_id, fund_id))
