"""Tests for API endpoints."""

import os
import pytest


@pytest.mark.asyncio
class TestAPIEndpoints:
    """Test API endpoints."""
    
    async def test_list_links_empty(self, client):
        """Test GET /api/links with no links."""
        response = await client.get("/api/links")
        
        assert response.status_code == 200
        assert response.json() == {"links": [], "count": 0}
    
    async def test_list_links_sorted(self, client, service, sample_links):
        """Test GET /api/links returns links sorted by shortcut."""
        for shortcut, url in sample_links.items():
            await service.add_link(shortcut, url)
        
        response = await client.get("/api/links")
        
        assert response.status_code == 200
        data = response.json()
        assert data["count"] == 3
        assert [link["shortcut"] for link in data["links"]] == ["docs", "gh", "mail"]
        assert data["links"][1] == {"shortcut": "gh", "url": "https://github.com"}
    
    async def test_create_link(self, client, service):
        """Test POST /api/links."""
        response = await client.post(
            "/api/links",
            json={"shortcut": "x", "url": "example.com"}
        )
        
        assert response.status_code == 201
        assert response.json() == {"shortcut": "x", "url": "http://example.com"}
        assert await service.resolve("x") == "http://example.com"
    
    async def test_create_link_blank(self, client, service):
        """Test POST /api/links with a blank shortcut."""
        response = await client.post(
            "/api/links",
            json={"shortcut": " ", "url": "https://example.com"}
        )
        
        assert response.status_code == 400
        assert "required" in response.json()["detail"]
        assert await service.list_links() == {}
    
    async def test_create_link_persistence_failure(self, client, service, tmp_path):
        """Test POST /api/links when the file cannot be written."""
        service.store.file_path = os.path.join(str(tmp_path), "gone", "links.json")
        
        response = await client.post(
            "/api/links",
            json={"shortcut": "gh", "url": "https://github.com"}
        )
        
        assert response.status_code == 500
        assert response.json()["detail"] == "Failed to save link"
    
    async def test_get_link(self, client, service):
        """Test GET /api/links?shortcut= for one link."""
        await service.add_link("team/wiki", "https://wiki.example.com")
        await service.add_link("gh", "https://github.com")
        
        response = await client.get("/api/links", params={"shortcut": "team/wiki"})
        
        assert response.status_code == 200
        assert response.json() == {
            "links": [{"shortcut": "team/wiki", "url": "https://wiki.example.com"}],
            "count": 1,
        }
    
    async def test_get_link_not_found(self, client):
        """Test GET /api/links?shortcut= for nonexistent shortcut."""
        response = await client.get("/api/links", params={"shortcut": "nonexistent"})
        
        assert response.status_code == 200
        assert response.json() == {"links": [], "count": 0}
    
    async def test_api_prefixed_shortcut_redirects(self, client, service):
        """Shortcuts under api/ that are not fixed routes still redirect."""
        await service.add_link("api/wiki", "https://wiki.example.com")
        await service.add_link("api/links/team", "https://team.example.com")
        
        response = await client.get("/api/wiki")
        assert response.status_code == 302
        assert response.headers["location"] == "https://wiki.example.com"
        
        response = await client.get("/api/links/team")
        assert response.status_code == 302
        assert response.headers["location"] == "https://team.example.com"
    
    async def test_health_check(self, client, service):
        """Test GET /api/health."""
        await service.add_link("gh", "https://github.com")
        
        response = await client.get("/api/health")
        
        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["storage"] == "healthy"
        assert data["link_count"] == 1
        assert "timestamp" in data
