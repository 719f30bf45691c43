"""초기 데이터 시드 스크립트 — 관리자 직원 계정 생성.

Seed script — Creates the tables and a bootstrap employee account.
Every /api route except login requires a token, so a first account
must exist before anyone can sign in.

Usage:
    python -m scheduling_api.seed

Creates:
    - 1개 관리자 직원: SEED_ADMIN_USERNAME / SEED_ADMIN_PASSWORD (1 employee)
"""

import asyncio

from sqlalchemy import select

from scheduling_api.config import settings
from scheduling_api.database import Base, async_session, engine
from scheduling_api.models import Employee
from scheduling_api.utils.password import hash_password


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts the bootstrap employee.

    Idempotent: 같은 아이디가 이미 있으면 건너뜁니다 (Skips if the username exists).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        result = await db.execute(
            select(Employee).where(Employee.username == settings.SEED_ADMIN_USERNAME)
        )
        if result.scalar_one_or_none():
            print("Already seeded. Skipping.")
            return

        admin: Employee = Employee(
            name=settings.SEED_ADMIN_NAME,
            username=settings.SEED_ADMIN_USERNAME,
            password_hash=hash_password(settings.SEED_ADMIN_PASSWORD),
        )
        db.add(admin)
        await db.commit()
        print(f"Seeded: employee={admin.id}, username={admin.username}")


if __name__ == "__main__":
    asyncio.run(seed())
