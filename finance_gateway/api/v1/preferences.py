"""GET/PUT /v1/preferences - Per-user UI settings such as dark mode"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from finance_gateway.api.v1.schemas import PreferencesSchema
from finance_gateway.api.dependencies import get_owner_key
from finance_gateway.domain.models import Preferences
from finance_gateway.infrastructure.database.session import get_db
from finance_gateway.infrastructure.database.repositories import PreferenceRepository

router = APIRouter()


@router.get("/preferences", response_model=PreferencesSchema)
def get_preferences(owner_key: str = Depends(get_owner_key), db: Session = Depends(get_db)):
    preferences = PreferenceRepository(db).load(owner_key)
    return PreferencesSchema(dark_mode=preferences.dark_mode)


@router.put("/preferences", response_model=PreferencesSchema)
def save_preferences(
    body: PreferencesSchema,
    owner_key: str = Depends(get_owner_key),
    db: Session = Depends(get_db),
):
    saved = PreferenceRepository(db).save(owner_key, Preferences(dark_mode=body.dark_mode))
    db.commit()
    return PreferencesSchema(dark_mode=saved.dark_mode)
