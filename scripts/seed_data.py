# scripts/seed_data.py

"""
테스트용 기본 시설(Library, Gymnasium, Cafeteria)을 넣는 CLI입니다.

    python -m scripts.seed_data --create-tables
"""

import asyncio

import typer

from navigator.core.database import create_db_and_tables, engine, get_async_session_context
from navigator.domains.directory import services as directory_services

cli = typer.Typer()


async def run_seed(create_tables: bool) -> int:
    if create_tables:
        await create_db_and_tables()
    try:
        async with get_async_session_context() as db:
            created = await directory_services.seed_quick_data(db)
    finally:
        await engine.dispose()
    return len(created)


@cli.command()
def main(
    create_tables: bool = typer.Option(
        False, '--create-tables',
        help="시딩 전에 누락된 테이블을 생성합니다. (개발용)"
    ),
):
    """
    기본 시설 데이터를 넣습니다. 이미 있는 이름은 건너뜁니다.
    """
    count = asyncio.run(run_seed(create_tables))
    typer.echo(f"✅ Quick data seeded successfully! ({count} created)")


if __name__ == "__main__":
    cli()
