# navigator/domains/directory/crud.py

"""
시설 디렉터리와 관련된 CRUD 로직을 담당하는 모듈입니다.
"""

from typing import Optional

from sqlmodel.ext.asyncio.session import AsyncSession

from navigator.core.crud_base import CRUDBase
from . import models as directory_models
from . import schemas as directory_schemas


class CRUDFacility(CRUDBase[directory_models.Facility, directory_schemas.FacilityCreate]):
    def __init__(self):
        super().__init__(model=directory_models.Facility)

    async def get_by_name(self, db: AsyncSession, *, name: str) -> Optional[directory_models.Facility]:
        """시설 이름으로 조회합니다. 같은 이름이 여럿이면 첫 번째를 반환합니다."""
        return await self.get_by_attribute(db, attribute="name", value=name)


facility = CRUDFacility()
