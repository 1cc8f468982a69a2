# -*- coding: utf-8 -*-
"""
Integration тесты для API сборки тестов
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.fixtures import create_test_category, create_test_word, create_test_words


class TestTestsAPI:
    """Integration тесты API тестов"""

    @pytest.mark.asyncio
    async def test_create_test_from_range(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Тест из диапазона 1-5 содержит ровно слова 1..5 по порядку"""
        # Arrange
        await create_test_words(test_session, count=10)

        # Act
        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Lesson 1",
                "test_type": "english_to_japanese",
                "word_selection": {"type": "range", "start_id": 1, "end_id": 5},
            },
        )

        # Assert
        assert response.status_code == 201
        created = response.json()["data"]
        assert created["question_count"] == 5

        detail = (await async_client.get(f"/api/v1/tests/{created['id']}")).json()["data"]
        assert [item["word_id"] for item in detail["items"]] == [1, 2, 3, 4, 5]
        assert [item["question_order"] for item in detail["items"]] == [1, 2, 3, 4, 5]
        assert {item["question_type"] for item in detail["items"]} == {
            "english_to_japanese"
        }

        word = (await async_client.get("/api/v1/words/3")).json()["data"]
        assert word["frequency"] == 1

    @pytest.mark.asyncio
    async def test_create_mixed_randomized(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """mixed с перемешиванием: позиции 1..N, направления чередуются"""
        # Arrange
        await create_test_words(test_session, count=6)

        # Act
        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Mixed",
                "test_type": "mixed",
                "randomize_order": True,
                "word_selection": {"type": "individual", "word_ids": [1, 2, 3, 4, 5, 6]},
            },
        )

        # Assert
        test_id = response.json()["data"]["id"]
        items = (await async_client.get(f"/api/v1/tests/{test_id}")).json()["data"]["items"]
        assert [item["question_order"] for item in items] == [1, 2, 3, 4, 5, 6]
        assert sorted(item["word_id"] for item in items) == [1, 2, 3, 4, 5, 6]
        assert [item["question_type"] for item in items] == [
            "english_to_japanese",
            "japanese_to_english",
        ] * 3

    @pytest.mark.asyncio
    async def test_create_random_with_category(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Случайная выборка из категории"""
        # Arrange
        animals = await create_test_category(test_session, "Animals")
        await create_test_words(test_session, count=3)
        await create_test_word(test_session, "owl", "ふくろう", category_id=animals.id)
        await create_test_word(test_session, "fox", "きつね", category_id=animals.id)

        # Act
        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Animals",
                "test_type": "japanese_to_english",
                "category_id": animals.id,
                "word_selection": {"type": "random", "count": 5},
            },
        )

        # Assert
        assert response.status_code == 201
        test_id = response.json()["data"]["id"]
        detail = (await async_client.get(f"/api/v1/tests/{test_id}")).json()["data"]
        assert detail["test"]["category_name"] == "Animals"
        assert sorted(item["english"] for item in detail["items"]) == ["fox", "owl"]

    @pytest.mark.asyncio
    async def test_empty_selection(self, async_client: AsyncClient, test_session: AsyncSession):
        """Пустая выборка - 400 и тест не создается"""
        await create_test_words(test_session, count=3)

        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Nothing",
                "test_type": "english_to_japanese",
                "word_selection": {"type": "range", "start_id": 50, "end_id": 60},
            },
        )

        assert response.status_code == 400
        assert response.json()["success"] is False
        assert (await async_client.get("/api/v1/tests")).json()["data"]["total"] == 0

    @pytest.mark.asyncio
    async def test_incomplete_selection(self, async_client: AsyncClient):
        """Диапазон без end_id - 400"""
        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Broken",
                "test_type": "english_to_japanese",
                "word_selection": {"type": "range", "start_id": 1},
            },
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_missing_title(self, async_client: AsyncClient):
        """Без названия - 400"""
        response = await async_client.post(
            "/api/v1/tests",
            json={
                "test_type": "english_to_japanese",
                "word_selection": {"type": "random", "count": 1},
            },
        )

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_unknown_category_filter(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Несуществующая категория-фильтр - 404"""
        await create_test_words(test_session, count=3)

        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Ghost",
                "test_type": "english_to_japanese",
                "category_id": 99,
                "word_selection": {"type": "random", "count": 1},
            },
        )

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_preview_persists_nothing(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Предпросмотр не создает тест и не меняет частоту слов"""
        # Arrange
        await create_test_words(test_session, count=4)

        # Act
        response = await async_client.post(
            "/api/v1/tests/preview",
            json={
                "test_type": "mixed",
                "word_selection": {"type": "range", "start_id": 1, "end_id": 4},
            },
        )

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert data["total_questions"] == 4
        assert [item["word"]["id"] for item in data["items"]] == [1, 2, 3, 4]
        assert (await async_client.get("/api/v1/tests")).json()["data"]["total"] == 0
        word = (await async_client.get("/api/v1/words/1")).json()["data"]
        assert word["frequency"] == 0

    @pytest.mark.asyncio
    async def test_list_and_delete(self, async_client: AsyncClient, test_session: AsyncSession):
        """Список тестов (новые первыми) и удаление"""
        # Arrange
        await create_test_words(test_session, count=2)
        for title in ("First", "Second"):
            await async_client.post(
                "/api/v1/tests",
                json={
                    "title": title,
                    "test_type": "english_to_japanese",
                    "word_selection": {"type": "individual", "word_ids": [1, 2]},
                },
            )

        # Act
        listing = (await async_client.get("/api/v1/tests")).json()["data"]
        first_id = next(t["id"] for t in listing["tests"] if t["title"] == "First")
        deleted = await async_client.delete(f"/api/v1/tests/{first_id}")

        # Assert
        assert [t["title"] for t in listing["tests"]] == ["Second", "First"]
        assert deleted.status_code == 200
        assert (await async_client.get(f"/api/v1/tests/{first_id}")).status_code == 404
        assert (await async_client.delete(f"/api/v1/tests/{first_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_history(self, async_client: AsyncClient, test_session: AsyncSession):
        """Журнал использования теста"""
        # Arrange
        await create_test_words(test_session, count=1)
        created = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "History",
                "test_type": "english_to_japanese",
                "word_selection": {"type": "individual", "word_ids": [1]},
            },
        )
        test_id = created.json()["data"]["id"]

        # Act
        recorded = await async_client.post(
            f"/api/v1/tests/{test_id}/history", json={"notes": "Class 3-B"}
        )
        history = await async_client.get(f"/api/v1/tests/{test_id}/history")
        missing = await async_client.get("/api/v1/tests/999/history")

        # Assert
        assert recorded.status_code == 201
        assert [entry["notes"] for entry in history.json()["data"]] == ["Class 3-B"]
        assert missing.status_code == 404

    @pytest.mark.asyncio
    async def test_history_without_body(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Запись использования без тела запроса"""
        await create_test_words(test_session, count=1)
        created = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Quick",
                "test_type": "english_to_japanese",
                "word_selection": {"type": "individual", "word_ids": [1]},
            },
        )
        test_id = created.json()["data"]["id"]

        response = await async_client.post(f"/api/v1/tests/{test_id}/history")

        assert response.status_code == 201
        assert response.json()["data"]["notes"] is None

    @pytest.mark.asyncio
    async def test_individual_with_unknown_category(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Категория теста проверяется и при явном списке слов"""
        await create_test_words(test_session, count=2)

        response = await async_client.post(
            "/api/v1/tests",
            json={
                "title": "Ghost",
                "test_type": "english_to_japanese",
                "category_id": 999,
                "word_selection": {"type": "individual", "word_ids": [1, 2]},
            },
        )

        assert response.status_code == 404
        assert (await async_client.get("/api/v1/tests")).json()["data"]["total"] == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "selection",
        [
            {"type": "range", "start_id": 1, "end_id": 10**20},
            {"type": "individual", "word_ids": [1, 2**31]},
            {"type": "random", "count": 10**20},
        ],
    )
    async def test_oversized_selection_rejected(
        self, async_client: AsyncClient, test_session: AsyncSession, selection
    ):
        """ID и размер выборки за пределами INTEGER - 400"""
        await create_test_words(test_session, count=2)

        response = await async_client.post(
            "/api/v1/tests/preview",
            json={"test_type": "english_to_japanese", "word_selection": selection},
        )

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_oversized_path_ids_rejected(self, async_client: AsyncClient):
        """ID в пути за пределами INTEGER - 400"""
        huge = 10**20

        responses = [
            await async_client.get(f"/api/v1/tests/{huge}"),
            await async_client.get(f"/api/v1/tests/{huge}/history"),
            await async_client.get(f"/api/v1/categories/{huge}"),
            await async_client.get(f"/api/v1/words/range/1/{huge}"),
            await async_client.get("/api/v1/tests", params={"offset": huge}),
        ]

        assert [r.status_code for r in responses] == [400] * 5


class TestErrorEnvelope:
    """Ошибки маршрутизации возвращаются в формате конверта"""

    @pytest.mark.asyncio
    async def test_unknown_path(self, async_client: AsyncClient):
        """Неизвестный путь - 404 в конверте"""
        response = await async_client.get("/api/v1/nope")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    @pytest.mark.asyncio
    async def test_method_not_allowed(self, async_client: AsyncClient):
        """Неподдерживаемый метод - 405 в конверте"""
        response = await async_client.put("/api/v1/tests/1", json={})

        assert response.status_code == 405
        assert response.json() == {"success": False, "error": "Method Not Allowed"}
        assert "GET" in response.headers["allow"]
