# tests/domains/test_directory.py

"""
시설 디렉터리 모델/CRUD/시더에 대한 통합 테스트 모듈입니다.
"""

import pytest
from sqlmodel.ext.asyncio.session import AsyncSession

from navigator.domains.directory import crud, models, schemas, services
from navigator.domains.importer import services as importer_services


@pytest.mark.asyncio
async def test_seed_quick_data_is_idempotent(db_session: AsyncSession):
    print("\n--- Running test_seed_quick_data_is_idempotent ---")
    first = await services.seed_quick_data(db_session)
    second = await services.seed_quick_data(db_session)

    assert [f.name for f in first] == ["Library", "Gymnasium", "Cafeteria"]
    assert second == []

    facilities = await crud.facility.get_multi(db_session)
    assert len(facilities) == 3
    assert all(f.status == "active" for f in facilities)


@pytest.mark.asyncio
async def test_seed_skips_existing_name(db_session: AsyncSession):
    await crud.facility.create(
        db_session, obj_in=schemas.FacilityCreate(name="Library", category="Educational")
    )

    created = await services.seed_quick_data(db_session)

    assert [f.name for f in created] == ["Gymnasium", "Cafeteria"]


@pytest.mark.asyncio
async def test_get_multi_filters_by_attribute(db_session: AsyncSession):
    await services.seed_quick_data(db_session)

    sports = await crud.facility.get_multi(db_session, category="Sports")
    ignored = await crud.facility.get_multi(db_session, not_a_column="x")

    assert [f.name for f in sports] == ["Gymnasium"]
    assert len(ignored) == 3


@pytest.mark.asyncio
async def test_marker_facility_photo_relations(db_session: AsyncSession):
    marker = models.Marker(name="Main Library", latitude=14.5995, longitude=120.9842)
    db_session.add(marker)
    await db_session.flush()

    facility = models.Facility(name="Library", category="Educational", marker_id=marker.id)
    db_session.add(facility)
    await db_session.flush()
    db_session.add(models.FacilityPhoto(facility_id=facility.id, photo_path="photos/library.jpg"))
    await db_session.commit()

    await db_session.refresh(facility, attribute_names=["marker", "photos"])
    assert facility.marker.name == "Main Library"
    assert [p.photo_path for p in facility.photos] == ["photos/library.jpg"]

    read = schemas.FacilityRead.model_validate(facility)
    assert read.marker_id == marker.id
    assert read.status == "active"


@pytest.mark.asyncio
async def test_imported_rows_are_visible_to_crud(
    db_session: AsyncSession, import_settings, write_script
):
    """가져온 레거시 행은 애플리케이션 모델로 그대로 조회됩니다."""
    write_script(
        "INSERT INTO markers (id, name, latitude, longitude) VALUES (7, 'Gym Marker', 14.6, 120.98);\n"
        "INSERT INTO facilities (name, category, hours, marker_id) "
        "VALUES ('Gymnasium', 'Sports', '6:00 AM - 9:00 PM', 7);\n"
    )
    await importer_services.import_script(import_settings)

    gym = await crud.facility.get_by_name(db_session, name="Gymnasium")

    assert gym is not None
    assert gym.hours == "6:00 AM - 9:00 PM"
    assert gym.marker_id == 7
