from typing import Any, Dict, Union
from sqlalchemy.orm import Session

from app.core.constants import SETTINGS_ROW_ID
from app.core.database import utcnow
from app.models.site_settings import SiteSettings
from app.schemas.site_settings import SiteSettingsUpdate

class CRUDSiteSettings:
    """Single-row configuration store. Callers never see the row id."""

    def get_settings(self, db: Session) -> SiteSettings:
        row = db.get(SiteSettings, SETTINGS_ROW_ID)
        if row is None:
            row = SiteSettings(id=SETTINGS_ROW_ID)
            db.add(row)
            db.commit()
            db.refresh(row)
        return row

    def update_settings(self, db: Session, *, obj_in: Union[SiteSettingsUpdate, Dict[str, Any]]) -> SiteSettings:
        row = self.get_settings(db)
        update_data = obj_in if isinstance(obj_in, dict) else obj_in.model_dump(exclude_unset=True, exclude_none=True)
        for field, value in update_data.items():
            if hasattr(row, field) and field != "id":
                setattr(row, field, value)
        row.updated_at = utcnow()
        db.add(row)
        db.commit()
        db.refresh(row)
        return row

site_settings = CRUDSiteSettings()
