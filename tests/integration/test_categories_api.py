# -*- coding: utf-8 -*-
"""
Integration тесты для API категорий
"""

import pytest
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from tests.fixtures import create_saved_test, create_test_category, create_test_word


class TestCategoriesAPI:
    """Integration тесты API категорий"""

    @pytest.mark.asyncio
    async def test_default_category_present(self, async_client: AsyncClient):
        """Категория по умолчанию существует всегда"""
        response = await async_client.get("/api/v1/categories")

        assert response.status_code == 200
        categories = response.json()["data"]
        assert categories[0]["id"] == 1
        assert categories[0]["name"] == "基本単語"

    @pytest.mark.asyncio
    async def test_create_category(self, async_client: AsyncClient):
        """Создание категории"""
        response = await async_client.post(
            "/api/v1/categories", json={"name": " Animals ", "description": "動物"}
        )

        assert response.status_code == 201
        data = response.json()["data"]
        assert data["name"] == "Animals"
        assert data["word_count"] == 0

    @pytest.mark.asyncio
    async def test_create_duplicate_category(self, async_client: AsyncClient):
        """Повторное название - 400"""
        await async_client.post("/api/v1/categories", json={"name": "Animals"})

        response = await async_client.post("/api/v1/categories", json={"name": "Animals"})

        assert response.status_code == 400
        assert response.json()["success"] is False

    @pytest.mark.asyncio
    async def test_create_blank_name(self, async_client: AsyncClient):
        """Пустое название - 400"""
        response = await async_client.post("/api/v1/categories", json={"name": "  "})

        assert response.status_code == 400

    @pytest.mark.asyncio
    async def test_get_category_with_count(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Категория со счетчиком слов"""
        animals = await create_test_category(test_session, "Animals")
        await create_test_word(test_session, "cat", "猫", category_id=animals.id)

        response = await async_client.get(f"/api/v1/categories/{animals.id}")

        assert response.status_code == 200
        assert response.json()["data"]["word_count"] == 1

    @pytest.mark.asyncio
    async def test_get_missing_category(self, async_client: AsyncClient):
        """Несуществующая категория - 404"""
        response = await async_client.get("/api/v1/categories/50")

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_update_category(self, async_client: AsyncClient, test_session: AsyncSession):
        """Переименование категории"""
        animals = await create_test_category(test_session, "Animals")

        response = await async_client.put(
            f"/api/v1/categories/{animals.id}", json={"name": "Creatures"}
        )

        assert response.status_code == 200
        assert response.json()["data"]["name"] == "Creatures"

    @pytest.mark.asyncio
    async def test_delete_default_category_forbidden(self, async_client: AsyncClient):
        """Категорию 1 удалить нельзя"""
        response = await async_client.delete("/api/v1/categories/1")

        assert response.status_code == 400
        assert response.json() == {
            "success": False,
            "error": "Нельзя удалить категорию по умолчанию",
        }
        assert (await async_client.get("/api/v1/categories/1")).status_code == 200

    @pytest.mark.asyncio
    async def test_delete_category_moves_words(
        self, async_client: AsyncClient, test_session: AsyncSession
    ):
        """Удаление категории переносит слова в категорию по умолчанию"""
        # Arrange
        animals = await create_test_category(test_session, "Animals")
        animals_id = animals.id
        await create_test_word(test_session, "cat", "猫", category_id=animals_id)
        await create_saved_test(test_session, [1], category_id=animals_id)

        # Act
        response = await async_client.delete(f"/api/v1/categories/{animals_id}")

        # Assert
        assert response.status_code == 200
        assert response.json()["message"].endswith(": 1")
        word = (await async_client.get("/api/v1/words/1")).json()["data"]
        assert word["category_id"] == 1
        test = (await async_client.get("/api/v1/tests")).json()["data"]["tests"][0]
        assert test["category_id"] is None
        assert (await async_client.get(f"/api/v1/categories/{animals_id}")).status_code == 404

    @pytest.mark.asyncio
    async def test_stats_overview(self, async_client: AsyncClient, test_session: AsyncSession):
        """Общая статистика"""
        await create_test_word(test_session, "cat", "猫")
        await create_saved_test(test_session, [1])

        response = await async_client.get("/api/v1/categories/stats/overview")

        assert response.status_code == 200
        assert response.json()["data"] == {"categories": 1, "words": 1, "tests": 1}
