"""
Unit Tests for Dashboard and Health Endpoints
"""
import pytest
from httpx import AsyncClient


class TestDashboards:

    @pytest.mark.asyncio
    async def test_citizen_dashboard(self, client: AsyncClient, camp, citizen_headers):
        response = await client.get('/api/v1/dashboard/citizen', headers=citizen_headers)

        assert response.status_code == 200
        cards = response.json()['camps']
        assert cards[0]['id'] == camp.id
        assert cards[0]['is_full'] is False

    @pytest.mark.asyncio
    async def test_camp_dashboard(self, client: AsyncClient, camp, need, camp_admin_headers):
        response = await client.get('/api/v1/dashboard/camp', headers=camp_admin_headers)

        assert response.status_code == 200
        body = response.json()
        assert body['selected_camp']['id'] == camp.id
        assert body['needs'][0]['badge'] == 'default'

    @pytest.mark.asyncio
    async def test_ngo_dashboard_requires_ngo(self, client: AsyncClient, citizen_headers):
        response = await client.get('/api/v1/dashboard/ngo', headers=citizen_headers)
        assert response.status_code == 403

    @pytest.mark.asyncio
    async def test_ngo_dashboard(self, client: AsyncClient, need, ngo_headers):
        response = await client.get('/api/v1/dashboard/ngo', headers=ngo_headers)

        assert response.status_code == 200
        assert [n['id'] for n in response.json()['needs']] == [need.id]


class TestHealth:

    @pytest.mark.asyncio
    async def test_root_health(self, client: AsyncClient):
        response = await client.get('/health')
        assert response.status_code == 200
        assert response.json()['status'] == 'healthy'

    @pytest.mark.asyncio
    async def test_api_health(self, client: AsyncClient):
        response = await client.get('/api/v1/health')
        assert response.status_code == 200
        assert 'X-Request-ID' in response.headers

    @pytest.mark.asyncio
    async def test_readiness(self, client: AsyncClient):
        response = await client.get('/api/v1/health/ready')
        assert response.status_code == 200
        assert response.json()['checks']['database']['tables_ready'] is True
