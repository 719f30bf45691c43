"""서비스 오더 API 테스트 — 생성/수정 트랜잭션과 롤백.

Service order API tests — Transactional create/update, validation
failures that must leave no partial rows behind, listing and deletion.
"""

from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from scheduling_api.models.service_order import ServiceOrder

URL = "/api/service-orders"


def os_url(os_id: int) -> str:
    return f"{URL}/{os_id}"


def entry(department_id: int, start: str = "08:00", end: str = "12:00", collaborators=None) -> dict:
    return {
        "department_id": department_id,
        "execution_start": start,
        "execution_end": end,
        "collaborator_ids": collaborators or [],
    }


async def count_orders(client: AsyncClient, headers: dict[str, str]) -> int:
    res = await client.get(URL, headers=headers)
    return int(res.headers["X-Total-Count"])


class TestServiceOrderCreate:
    """서비스 오더 생성 테스트."""

    async def test_create_service_order(self, client: AsyncClient, headers, employee, department, second_department):
        """요일, 부서 항목, 배정 직원을 포함한 생성."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [5, 1, 3, 3],
            "departments": [
                entry(department.id, "08:00", "12:00", [employee.id, employee.id]),
                entry(second_department.id, "13:00", "17:30"),
            ],
        }, headers=headers)
        assert res.status_code == 201
        data = res.json()
        assert data["os_number"] == "OS-001"
        # 중복 제거 후 오름차순 (Deduplicated and sorted)
        assert data["service_days"] == [1, 3, 5]
        assert len(data["departments"]) == 2

        first, second = data["departments"]
        assert first["department_id"] == department.id
        assert first["department_name"] == "Cutting"
        assert first["execution_start"] == "08:00"
        assert first["execution_end"] == "12:00"
        assert first["collaborators"] == [employee.id]
        assert second["department_name"] == "Sewing"
        assert second["execution_end"] == "17:30"
        assert second["collaborators"] == []

    async def test_create_requires_service_days(self, client: AsyncClient, headers, department):
        """요일이 없으면 400."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "departments": [entry(department.id)],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Service order number and service days are required"

    async def test_create_blank_os_number(self, client: AsyncClient, headers, department):
        res = await client.post(URL, json={
            "os_number": "  ",
            "service_days": [1],
            "departments": [entry(department.id)],
        }, headers=headers)
        assert res.status_code == 400

    async def test_create_missing_os_number(self, client: AsyncClient, headers, department):
        """os_number 필드 누락 시 422."""
        res = await client.post(URL, json={
            "service_days": [1],
            "departments": [entry(department.id)],
        }, headers=headers)
        assert res.status_code == 422

    async def test_create_invalid_day(self, client: AsyncClient, headers, department):
        """요일이 0~6 밖이면 400."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1, 7],
            "departments": [entry(department.id)],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Service days must be between 0 (Sunday) and 6 (Saturday)"

    async def test_create_requires_department(self, client: AsyncClient, headers):
        """부서 항목이 없으면 400."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "At least one department is required"

    async def test_create_duplicate_os_number(self, client: AsyncClient, headers, department):
        """중복 오더 번호는 409."""
        payload = {"os_number": "OS-001", "service_days": [1], "departments": [entry(department.id)]}
        res = await client.post(URL, json=payload, headers=headers)
        assert res.status_code == 201

        res = await client.post(URL, json=payload, headers=headers)
        assert res.status_code == 409
        assert res.json()["detail"] == "Service order number already exists"
        assert await count_orders(client, headers) == 1


class TestServiceOrderRollback:
    """생성 실패 시 부분 데이터가 남지 않는지 확인."""

    async def test_invalid_time_rolls_back(self, client: AsyncClient, headers, department):
        """잘못된 시각 형식 — 400, 오더 미생성."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1, 2],
            "departments": [entry(department.id, "8:00", "12:00")],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid time format (use HH:MM)"
        assert await count_orders(client, headers) == 0

    async def test_out_of_range_time_rolls_back(self, client: AsyncClient, headers, department):
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [entry(department.id, "08:00", "24:00")],
        }, headers=headers)
        assert res.status_code == 400
        assert await count_orders(client, headers) == 0

    async def test_time_with_trailing_newline_rolls_back(self, client: AsyncClient, headers, department):
        """끝에 개행이 붙은 시각도 형식 오류."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [entry(department.id, "08:00\n", "12:00")],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid time format (use HH:MM)"
        assert await count_orders(client, headers) == 0

    async def test_unknown_department_rolls_back(self, client: AsyncClient, headers, department):
        """두 번째 부서가 없으면 첫 번째 항목도 함께 롤백."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [entry(department.id), entry(9999)],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Department 9999 does not exist"
        assert await count_orders(client, headers) == 0

    async def test_invalid_collaborator_rolls_back(self, client: AsyncClient, headers, employee, department):
        """존재하지 않는 직원 — 400, 오더/요일/부서 항목 모두 미생성."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [entry(department.id, collaborators=[employee.id, 9999, 9998])],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid collaborator(s): 9998, 9999"
        assert await count_orders(client, headers) == 0

        # 롤백 후 같은 번호로 다시 생성 가능 (Same number is free again)
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [entry(department.id, collaborators=[employee.id])],
        }, headers=headers)
        assert res.status_code == 201
        assert res.json()["departments"][0]["collaborators"] == [employee.id]

    async def test_failed_create_leaves_department_deletable(self, client: AsyncClient, headers, second_department):
        """롤백된 오더는 부서 참조를 남기지 않음."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1],
            "departments": [entry(second_department.id), entry(second_department.id, "25:00", "26:00")],
        }, headers=headers)
        assert res.status_code == 400

        res = await client.delete(f"/api/departments/{second_department.id}", headers=headers)
        assert res.status_code == 204


class TestServiceOrderRead:
    """서비스 오더 조회 테스트."""

    async def test_get_service_order(self, client: AsyncClient, headers, department):
        res = await client.post(URL, json={
            "os_number": "OS-001", "service_days": [0, 6], "departments": [entry(department.id)],
        }, headers=headers)
        os_id = res.json()["id"]

        res = await client.get(os_url(os_id), headers=headers)
        assert res.status_code == 200
        assert res.json()["service_days"] == [0, 6]

    async def test_get_missing_service_order(self, client: AsyncClient, headers):
        res = await client.get(os_url(9999), headers=headers)
        assert res.status_code == 404

    async def test_list_and_search(self, client: AsyncClient, headers, department):
        for number in ["OS-001", "OS-002", "PX-100"]:
            await client.post(URL, json={
                "os_number": number, "service_days": [1], "departments": [entry(department.id)],
            }, headers=headers)

        res = await client.get(URL, headers=headers)
        assert [o["os_number"] for o in res.json()] == ["OS-001", "OS-002", "PX-100"]
        assert res.headers["X-Total-Count"] == "3"

        res = await client.get(URL, params={"search": "os-"}, headers=headers)
        assert [o["os_number"] for o in res.json()] == ["OS-001", "OS-002"]
        assert res.headers["X-Total-Count"] == "2"

        res = await client.get(URL, params={"page": 2, "limit": 2}, headers=headers)
        assert [o["os_number"] for o in res.json()] == ["PX-100"]

    async def test_requires_token(self, client: AsyncClient):
        res = await client.get(URL)
        assert res.status_code == 401


class TestServiceOrderUpdate:
    """서비스 오더 수정 테스트."""

    async def _create(self, client: AsyncClient, headers, department_id: int, collaborators=None) -> int:
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1, 2],
            "departments": [entry(department_id, collaborators=collaborators)],
        }, headers=headers)
        assert res.status_code == 201
        return res.json()["id"]

    async def test_update_replaces_days_and_departments(
        self, client: AsyncClient, headers, employee, other_employee, department, second_department
    ):
        """요일과 부서 항목을 전체 교체."""
        os_id = await self._create(client, headers, department.id, [employee.id])

        res = await client.put(os_url(os_id), json={
            "service_days": [4],
            "departments": [entry(second_department.id, "09:15", "10:45", [other_employee.id])],
        }, headers=headers)
        assert res.status_code == 200
        data = res.json()
        assert data["os_number"] == "OS-001"
        assert data["service_days"] == [4]
        assert len(data["departments"]) == 1
        assert data["departments"][0]["department_name"] == "Sewing"
        assert data["departments"][0]["execution_start"] == "09:15"
        assert data["departments"][0]["collaborators"] == [other_employee.id]

        # 이전 부서 항목은 제거됨 (Previous department entries are gone)
        res = await client.get(os_url(os_id), headers=headers)
        assert [d["department_id"] for d in res.json()["departments"]] == [second_department.id]

    async def test_update_os_number_only(self, client: AsyncClient, headers, department):
        """번호만 수정하면 요일/부서는 유지."""
        os_id = await self._create(client, headers, department.id)

        res = await client.put(os_url(os_id), json={"os_number": "OS-009"}, headers=headers)
        assert res.status_code == 200
        data = res.json()
        assert data["os_number"] == "OS-009"
        assert data["service_days"] == [1, 2]
        assert len(data["departments"]) == 1

    async def test_update_duplicate_os_number(self, client: AsyncClient, headers, department):
        """다른 오더의 번호로 변경 시 409."""
        os_id = await self._create(client, headers, department.id)
        await client.post(URL, json={
            "os_number": "OS-002", "service_days": [3], "departments": [entry(department.id)],
        }, headers=headers)

        res = await client.put(os_url(os_id), json={"os_number": "OS-002"}, headers=headers)
        assert res.status_code == 409

    async def test_update_failure_keeps_original(self, client: AsyncClient, headers, employee, department):
        """수정 중 잘못된 직원이 있으면 기존 오더가 그대로 유지."""
        os_id = await self._create(client, headers, department.id, [employee.id])

        res = await client.put(os_url(os_id), json={
            "os_number": "OS-777",
            "service_days": [6],
            "departments": [entry(department.id, "10:00", "11:00", [9999])],
        }, headers=headers)
        assert res.status_code == 400

        res = await client.get(os_url(os_id), headers=headers)
        data = res.json()
        assert data["os_number"] == "OS-001"
        assert data["service_days"] == [1, 2]
        assert data["departments"][0]["execution_start"] == "08:00"
        assert data["departments"][0]["collaborators"] == [employee.id]

    async def _assert_unchanged(self, client: AsyncClient, headers, os_id: int, department_id: int) -> None:
        res = await client.get(os_url(os_id), headers=headers)
        data = res.json()
        assert data["os_number"] == "OS-001"
        assert data["service_days"] == [1, 2]
        assert len(data["departments"]) == 1
        assert data["departments"][0]["department_id"] == department_id
        assert data["departments"][0]["execution_start"] == "08:00"
        assert data["departments"][0]["execution_end"] == "12:00"

    async def test_update_empty_departments(self, client: AsyncClient, headers, department):
        """부서 항목을 빈 목록으로 수정하면 400."""
        os_id = await self._create(client, headers, department.id)
        res = await client.put(os_url(os_id), json={"departments": []}, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "At least one department is required"
        await self._assert_unchanged(client, headers, os_id, department.id)

    async def test_update_invalid_day(self, client: AsyncClient, headers, department):
        os_id = await self._create(client, headers, department.id)
        res = await client.put(os_url(os_id), json={"service_days": [3, 7]}, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Service days must be between 0 (Sunday) and 6 (Saturday)"
        await self._assert_unchanged(client, headers, os_id, department.id)

    async def test_update_invalid_time(self, client: AsyncClient, headers, department):
        """잘못된 시각 — 요일 교체까지 함께 롤백."""
        os_id = await self._create(client, headers, department.id)
        res = await client.put(os_url(os_id), json={
            "service_days": [5],
            "departments": [entry(department.id, "09:00", "9:30")],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Invalid time format (use HH:MM)"
        await self._assert_unchanged(client, headers, os_id, department.id)

    async def test_update_unknown_department(self, client: AsyncClient, headers, department, second_department):
        """두 번째 부서가 없으면 첫 번째 항목 교체도 롤백."""
        os_id = await self._create(client, headers, department.id)
        res = await client.put(os_url(os_id), json={
            "departments": [entry(second_department.id, "13:00", "14:00"), entry(9999)],
        }, headers=headers)
        assert res.status_code == 400
        assert res.json()["detail"] == "Department 9999 does not exist"
        await self._assert_unchanged(client, headers, os_id, department.id)

    async def test_update_days_touches_updated_at(
        self, client: AsyncClient, headers, department, session_factory: async_sessionmaker[AsyncSession]
    ):
        """요일만 교체해도 updated_at 갱신."""
        os_id = await self._create(client, headers, department.id)
        async with session_factory() as session:
            before = (await session.get(ServiceOrder, os_id)).updated_at

        res = await client.put(os_url(os_id), json={"service_days": [3]}, headers=headers)
        assert res.status_code == 200

        async with session_factory() as session:
            after = (await session.get(ServiceOrder, os_id)).updated_at
        assert after > before

    async def test_update_empty_days(self, client: AsyncClient, headers, department):
        os_id = await self._create(client, headers, department.id)
        res = await client.put(os_url(os_id), json={"service_days": []}, headers=headers)
        assert res.status_code == 400

    async def test_update_missing_service_order(self, client: AsyncClient, headers):
        res = await client.put(os_url(9999), json={"os_number": "X"}, headers=headers)
        assert res.status_code == 404


class TestServiceOrderDelete:
    """서비스 오더 삭제 테스트."""

    async def test_delete_service_order(self, client: AsyncClient, headers, employee, second_department):
        """삭제 후 404, 참조하던 부서는 삭제 가능."""
        res = await client.post(URL, json={
            "os_number": "OS-001",
            "service_days": [1, 5],
            "departments": [entry(second_department.id, collaborators=[employee.id])],
        }, headers=headers)
        os_id = res.json()["id"]

        res = await client.delete(os_url(os_id), headers=headers)
        assert res.status_code == 200
        assert res.json() == {"message": "Service order deleted successfully"}

        res = await client.get(os_url(os_id), headers=headers)
        assert res.status_code == 404

        res = await client.delete(f"/api/departments/{second_department.id}", headers=headers)
        assert res.status_code == 204

    async def test_delete_missing_service_order(self, client: AsyncClient, headers):
        res = await client.delete(os_url(9999), headers=headers)
        assert res.status_code == 404
