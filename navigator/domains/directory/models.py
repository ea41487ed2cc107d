# navigator/domains/directory/models.py

"""
시설 디렉터리의 데이터베이스 ORM 모델을 정의하는 모듈입니다.
 - 마커(Marker) 1 : N 시설(Facility)
 - 시설(Facility) 1 : N 시설 사진(FacilityPhoto)

테이블 이름과 컬럼은 레거시 export 파일의 INSERT 문과 그대로 맞아야 합니다.
"""

from typing import Optional, List
from datetime import datetime, UTC

from sqlmodel import Field, Relationship, SQLModel, Column
from sqlalchemy import ForeignKey, Numeric
from sqlalchemy.sql import func
from sqlalchemy.types import TIMESTAMP


def _created_at_field():
    return Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now()),
        description="레코드 생성 일시"
    )


def _updated_at_field():
    return Field(
        default_factory=lambda: datetime.now(UTC),
        sa_column=Column(TIMESTAMP(timezone=True), server_default=func.now(), onupdate=func.now()),
        description="레코드 마지막 업데이트 일시"
    )


# =============================================================================
# 1. markers 테이블 모델
# =============================================================================
class MarkerBase(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True, description="마커 고유 ID")
    name: str = Field(max_length=255, description="마커 표시 이름")
    latitude: Optional[float] = Field(default=None, sa_column=Column(Numeric(10, 7)), description="위도 (NUMERIC(10, 7))")
    longitude: Optional[float] = Field(default=None, sa_column=Column(Numeric(10, 7)), description="경도 (NUMERIC(10, 7))")
    description: Optional[str] = Field(default=None, description="설명")

    created_at: Optional[datetime] = _created_at_field()
    updated_at: Optional[datetime] = _updated_at_field()


class Marker(MarkerBase, table=True):
    __tablename__ = "markers"

    facilities: List["Facility"] = Relationship(back_populates="marker")


# =============================================================================
# 2. facilities 테이블 모델
# =============================================================================
class FacilityBase(SQLModel):
    """
    facilities 테이블의 기본 속성입니다.
    """
    id: Optional[int] = Field(default=None, primary_key=True, description="시설 고유 ID")
    name: str = Field(max_length=255, description="시설 명칭")
    category: str = Field(max_length=100, description="분류 (예: Educational, Sports)")
    department: Optional[str] = Field(default=None, max_length=255, description="담당 부서")
    description: Optional[str] = Field(default=None, description="설명")
    floor_number: Optional[int] = Field(default=None, description="층")
    hours: Optional[str] = Field(default=None, max_length=100, description="운영 시간 (예: 8:00 AM - 5:00 PM)")
    marker_id: Optional[int] = Field(
        default=None,
        sa_column=Column(ForeignKey("markers.id", onupdate="CASCADE", ondelete="SET NULL")),
        description="지도 마커 ID (FK)"
    )
    status: str = Field(default="active", max_length=50, sa_column_kwargs={"server_default": "active"}, description="상태 (active, inactive)")

    created_at: Optional[datetime] = _created_at_field()
    updated_at: Optional[datetime] = _updated_at_field()


class Facility(FacilityBase, table=True):
    __tablename__ = "facilities"

    # 시설은 하나의 마커에 속합니다. (다대일)
    marker: Optional[Marker] = Relationship(back_populates="facilities")
    # 시설은 여러 사진을 가질 수 있습니다. (일대다)
    photos: List["FacilityPhoto"] = Relationship(
        back_populates="facility",
        sa_relationship_kwargs={'cascade': 'all, delete-orphan'}
    )


# =============================================================================
# 3. facility_photos 테이블 모델
# =============================================================================
class FacilityPhotoBase(SQLModel):
    id: Optional[int] = Field(default=None, primary_key=True, description="사진 고유 ID")
    facility_id: int = Field(
        sa_column=Column(ForeignKey("facilities.id", onupdate="CASCADE", ondelete="CASCADE"), nullable=False),
        description="소속 시설 ID (FK)"
    )
    photo_path: str = Field(max_length=255, description="저장된 사진 경로")
    caption: Optional[str] = Field(default=None, max_length=255, description="사진 설명")

    created_at: Optional[datetime] = _created_at_field()
    updated_at: Optional[datetime] = _updated_at_field()


class FacilityPhoto(FacilityPhotoBase, table=True):
    __tablename__ = "facility_photos"

    facility: Facility = Relationship(back_populates="photos")
