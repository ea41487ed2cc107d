# navigator/domains/directory/services.py

import logging
from typing import List

from sqlmodel.ext.asyncio.session import AsyncSession

from . import crud, models, schemas

logger = logging.getLogger(__name__)


# 테스트용 핵심 시설 몇 곳
QUICK_FACILITIES: List[schemas.FacilityCreate] = [
    schemas.FacilityCreate(
        name="Library",
        category="Educational",
        department="Academics",
        description="A place where students can study and access academic resources.",
        hours="8:00 AM - 5:00 PM",
    ),
    schemas.FacilityCreate(
        name="Gymnasium",
        category="Sports",
        department="Physical Education",
        description="Indoor facility for sports events and student activities.",
        hours="6:00 AM - 9:00 PM",
    ),
    schemas.FacilityCreate(
        name="Cafeteria",
        category="Food & Beverage",
        department="Student Services",
        description="Serves meals and refreshments for students and staff.",
        hours="7:00 AM - 7:00 PM",
    ),
]


async def seed_quick_data(db: AsyncSession) -> List[models.Facility]:
    """
    기본 시설 데이터를 넣습니다.
    같은 이름의 시설이 이미 있으면 건너뛰므로 여러 번 실행해도 중복되지 않습니다.
    새로 생성된 시설 목록을 반환합니다.
    """
    created = []
    for facility_in in QUICK_FACILITIES:
        if await crud.facility.get_by_name(db, name=facility_in.name):
            logger.info("시설 '%s'은(는) 이미 존재하여 건너뜁니다.", facility_in.name)
            continue
        created.append(await crud.facility.create(db, obj_in=facility_in, commit=False))

    await db.commit()
    for db_obj in created:
        await db.refresh(db_obj)
    logger.info("기본 시설 %d개 생성 완료.", len(created))
    return created
