# navigator/domains/directory/schemas.py

"""
시설 디렉터리 데이터의 Pydantic 스키마를 정의하는 모듈입니다.
"""

from typing import Optional
from datetime import datetime

from pydantic import Field
from sqlmodel import SQLModel


class FacilityCreate(SQLModel):
    """
    새로운 시설을 생성하기 위한 모델입니다.
    `name`, `category`는 필수 필드입니다.
    """
    name: str = Field(..., max_length=255, description="시설 명칭")
    category: str = Field(..., max_length=100, description="분류")
    department: Optional[str] = Field(None, max_length=255, description="담당 부서")
    description: Optional[str] = Field(None, description="설명")
    floor_number: Optional[int] = Field(None, description="층")
    hours: Optional[str] = Field(None, max_length=100, description="운영 시간")
    marker_id: Optional[int] = Field(None, description="지도 마커 ID")
    status: str = Field("active", max_length=50, description="상태")


class FacilityRead(FacilityCreate):
    """
    시설 정보를 응답하기 위한 모델입니다.
    """
    id: int = Field(..., description="시설 고유 ID")
    created_at: Optional[datetime] = Field(None, description="레코드 생성 일시")
    updated_at: Optional[datetime] = Field(None, description="레코드 마지막 업데이트 일시")

    class Config:
        from_attributes = True
