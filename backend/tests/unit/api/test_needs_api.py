"""
Unit Tests for Needs, Pledges and Assistance API Endpoints
"""
import pytest
from httpx import AsyncClient


class TestNeedRetrieval:

    @pytest.mark.asyncio
    async def test_get_need(self, client: AsyncClient, need, ngo_headers):
        response = await client.get(f'/api/v1/needs/{need.id}', headers=ngo_headers)

        assert response.status_code == 200
        assert response.json()['remaining'] == 10

    @pytest.mark.asyncio
    async def test_get_missing_need(self, client: AsyncClient, ngo_headers):
        response = await client.get('/api/v1/needs/missing', headers=ngo_headers)

        assert response.status_code == 404
        assert response.json()['error']['code'] == 'NEED_NOT_FOUND'

    @pytest.mark.asyncio
    async def test_open_needs(self, client: AsyncClient, need, camp, ngo_headers):
        response = await client.get('/api/v1/needs/open', headers=ngo_headers)

        assert response.status_code == 200
        body = response.json()
        assert [n['id'] for n in body] == [need.id]
        assert body[0]['camp_name'] == camp.name
        assert body[0]['badge'] == 'default'


class TestPledges:

    @pytest.mark.asyncio
    async def test_pledge_scenario(self, client: AsyncClient, need, ngo_headers):
        """6 -> partial, 4 -> fulfilled, 1 -> 409 retryable"""
        url = f'/api/v1/needs/{need.id}/pledges'

        response = await client.post(url, json={'quantity': 6}, headers=ngo_headers)
        assert response.status_code == 201
        body = response.json()
        assert body['success'] is True
        assert body['need']['quantity_fulfilled'] == 6
        assert body['need']['status'] == 'partial'
        assert body['assistance']['delivery_status'] == 'pledged'
        assert body['assistance']['items_provided'] == need.item_name

        response = await client.post(url, json={'quantity': 4}, headers=ngo_headers)
        assert response.status_code == 201
        assert response.json()['need']['status'] == 'fulfilled'

        response = await client.post(url, json={'quantity': 1}, headers=ngo_headers)
        assert response.status_code == 409
        error = response.json()['error']
        assert error['code'] == 'OVER_COMMIT'
        assert error['retryable'] is True
        assert error['details'] == {'requested': 1, 'remaining': 0}

    @pytest.mark.asyncio
    async def test_citizen_cannot_pledge(self, client: AsyncClient, need, citizen_headers):
        response = await client.post(
            f'/api/v1/needs/{need.id}/pledges', json={'quantity': 1}, headers=citizen_headers
        )
        assert response.status_code == 403
        assert response.json()['error']['code'] == 'ROLE_NOT_PERMITTED'

    @pytest.mark.asyncio
    async def test_zero_quantity(self, client: AsyncClient, need, ngo_headers):
        response = await client.post(
            f'/api/v1/needs/{need.id}/pledges', json={'quantity': 0}, headers=ngo_headers
        )
        assert response.status_code == 400
        assert response.json()['error']['code'] == 'VALIDATION_ERROR'

    @pytest.mark.asyncio
    async def test_pledge_missing_need(self, client: AsyncClient, ngo_headers):
        response = await client.post('/api/v1/needs/missing/pledges', json={'quantity': 1}, headers=ngo_headers)
        assert response.status_code == 404


class TestAssistance:

    @pytest.mark.asyncio
    async def test_delivery_lifecycle(self, client: AsyncClient, need, ngo_headers):
        response = await client.post(
            f'/api/v1/needs/{need.id}/pledges', json={'quantity': 2}, headers=ngo_headers
        )
        entry_id = response.json()['assistance']['id']
        url = f'/api/v1/assistance/{entry_id}/delivery-status'

        response = await client.patch(url, json={'delivery_status': 'delivered'}, headers=ngo_headers)
        assert response.status_code == 409
        assert response.json()['error']['code'] == 'INVALID_TRANSITION'

        response = await client.patch(url, json={'delivery_status': 'in_transit'}, headers=ngo_headers)
        assert response.status_code == 200
        assert response.json()['delivery_status'] == 'in_transit'

        response = await client.patch(url, json={'delivery_status': 'delivered'}, headers=ngo_headers)
        assert response.status_code == 200

        response = await client.get('/api/v1/assistance/mine', headers=ngo_headers)
        assert [e['delivery_status'] for e in response.json()] == ['delivered']

    @pytest.mark.asyncio
    async def test_mine_requires_ngo(self, client: AsyncClient, citizen_headers):
        response = await client.get('/api/v1/assistance/mine', headers=citizen_headers)
        assert response.status_code == 403
