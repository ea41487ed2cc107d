# scripts/import_database.py

"""
레거시 SQL 덤프(navigator_export.sql)를 대상 DB로 가져오는 CLI입니다.

    python -m scripts.import_database
    python -m scripts.import_database --file ./database/other.sql --transaction

성공 시 종료 코드 0, 실패 시 1을 반환합니다.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer

from navigator.core.config import Settings
from navigator.domains.importer import services as importer_services

cli = typer.Typer()


@cli.command()
def main(
    file: Optional[Path] = typer.Option(
        None, '--file', '-f',
        help="가져올 SQL 파일 경로입니다. 생략하면 IMPORT_SQL_FILE 설정을 사용합니다."
    ),
    transaction: Optional[bool] = typer.Option(
        None, '--transaction/--no-transaction',
        help="스크립트 전체를 하나의 트랜잭션으로 실행합니다. 생략하면 IMPORT_USE_TRANSACTION 설정을 따릅니다."
    ),
    verbose: bool = typer.Option(False, '--verbose', '-v', help="진행 로그를 표준 에러로 출력합니다."),
):
    """
    설정된 SQL 파일을 대상 데이터베이스에 한 번 실행합니다.
    """
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format='%(asctime)s - %(levelname)s - %(message)s',
    )

    config = Settings()
    if transaction is not None:
        config = config.model_copy(update={"IMPORT_USE_TRANSACTION": transaction})

    outcome = asyncio.run(
        importer_services.run_import(config, script_path=file, on_step=typer.echo)
    )

    if not outcome.ok:
        typer.echo(f"Import failed: {outcome.message}")
        raise typer.Exit(code=1)

    typer.echo("✅ Database imported successfully!")


if __name__ == "__main__":
    cli()
