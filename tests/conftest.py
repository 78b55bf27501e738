"""
Shared fixtures: a fake Figma client that records calls instead of hitting the network.
"""

import pytest


class FakeFigmaClient:
    def __init__(self, payload=None, error=None):
        self.payload = payload if payload is not None else {"ok": True}
        self.error = error
        self.calls = []

    async def _respond(self, name, **kwargs):
        self.calls.append((name, kwargs))
        if self.error is not None:
            raise self.error
        return self.payload

    async def list_files(self, project_id=None, team_id=None):
        return await self._respond("list_files", project_id=project_id, team_id=team_id)

    async def get_file_info(self, file_key, depth=None, node_id=None):
        return await self._respond("get_file_info", file_key=file_key, depth=depth, node_id=node_id)

    async def get_components(self, file_key):
        return await self._respond("get_components", file_key=file_key)

    async def get_styles(self, file_key):
        return await self._respond("get_styles", file_key=file_key)

    async def get_file_versions(self, file_key):
        return await self._respond("get_file_versions", file_key=file_key)

    async def get_file_comments(self, file_key):
        return await self._respond("get_file_comments", file_key=file_key)

    async def get_file_nodes(self, file_key, ids):
        return await self._respond("get_file_nodes", file_key=file_key, ids=ids)


@pytest.fixture
def fake_client():
    return FakeFigmaClient()


@pytest.fixture
def make_client():
    return FakeFigmaClient
