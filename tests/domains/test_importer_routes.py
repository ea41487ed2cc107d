# tests/domains/test_importer_routes.py

"""
SQL 가져오기 HTTP 엔드포인트(POST /api/v1/admin/import)에 대한 통합 테스트입니다.
"""

import pytest
from httpx import AsyncClient

from navigator import API_PREFIX
from navigator.main import app as main_app
from navigator.core import dependencies as deps

IMPORT_URL = f"{API_PREFIX}/admin/import"


@pytest.mark.asyncio
async def test_import_endpoint_disabled_returns_403(client: AsyncClient, import_settings, write_script, fetch_rows):
    """비활성화 상태에서는 파일이 있어도 아무것도 실행하지 않습니다."""
    print("\n--- Running test_import_endpoint_disabled_returns_403 ---")
    write_script("INSERT INTO facilities (name, category) VALUES ('Library','Educational');")
    disabled = import_settings.model_copy(update={"IMPORT_ENDPOINT_ENABLED": False})
    main_app.dependency_overrides[deps.get_settings] = lambda: disabled

    response = await client.post(IMPORT_URL)

    assert response.status_code == 403
    assert response.json()["detail"] == "Database import endpoint is disabled"
    assert await fetch_rows("SELECT COUNT(*) FROM facilities") == [(0,)]


@pytest.mark.asyncio
async def test_import_endpoint_success_page(client: AsyncClient, write_script, fetch_rows):
    print("\n--- Running test_import_endpoint_success_page ---")
    write_script("INSERT INTO facilities (name, category) VALUES ('Library','Educational');")

    response = await client.post(IMPORT_URL)
    print(f"Response status code: {response.status_code}")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "Database imported successfully!" in response.text
    assert "Disabling foreign key checks...<br>" in response.text
    assert await fetch_rows("SELECT name FROM facilities") == [("Library",)]


@pytest.mark.asyncio
async def test_import_endpoint_missing_file_returns_404(client: AsyncClient, import_settings):
    response = await client.post(IMPORT_URL)

    assert response.status_code == 404
    assert "SQL file not found!" in response.text
    assert "Connecting to database..." not in response.text


@pytest.mark.asyncio
async def test_import_endpoint_execution_error_escapes_message(client: AsyncClient, write_script):
    """엔진 오류 메시지는 HTML로 escape 되어 그대로 표시됩니다."""
    write_script("INSERTT INTO facilities (name) VALUES ('<b>x</b>');")

    response = await client.post(IMPORT_URL)

    assert response.status_code == 500
    assert "Import failed:" in response.text
    assert "syntax error" in response.text
    assert "Re-enabling foreign key checks..." in response.text


@pytest.mark.asyncio
async def test_import_endpoint_rejects_get(client: AsyncClient):
    response = await client.get(IMPORT_URL)
    assert response.status_code == 405


@pytest.mark.asyncio
async def test_import_endpoint_undecodable_file_returns_status_page(client: AsyncClient, import_settings):
    import_settings.import_sql_path.write_bytes(
        "INSERT INTO facilities (name, category) VALUES ('Café','Food & Beverage');".encode("latin-1")
    )

    response = await client.post(IMPORT_URL)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/html")
    assert "Could not read SQL file:" in response.text
    assert "codec can&#x27;t decode" in response.text
