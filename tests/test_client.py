"""Tests for the HTTP client, run against the real app over ASGI."""

from unittest.mock import AsyncMock, patch

import httpx
import pytest

from src.api.app import app
from src.client import IRRClient, IRRClientError, main


@pytest.fixture
def irr_client() -> IRRClient:
    return IRRClient(
        base_url="http://testserver",
        code="resolve",
        transport=httpx.ASGITransport(app=app),
    )


class TestIRRClient:
    async def test_solve(self, irr_client, reference_spending, reference_income):
        data = await irr_client.solve(reference_spending, reference_income)
        assert data["status"] == 0
        assert data["irr"] == pytest.approx(10.0)

    async def test_nan_envelope(self, irr_client):
        data = await irr_client.solve([100, 0], [0, 90])
        assert data["status"] == 1
        assert data["irr"] is None

    async def test_server_error_envelope(self, irr_client):
        data = await irr_client.solve([100, 0, 0], [0, 110, 0])
        assert data["status"] == 1
        assert "leading coefficient" in data["error"]

    async def test_rejected(self, reference_spending, reference_income):
        client = IRRClient(
            base_url="http://testserver",
            code="wrong",
            transport=httpx.ASGITransport(app=app),
        )
        with pytest.raises(IRRClientError) as exc:
            await client.solve(reference_spending, reference_income)
        assert exc.value.status_code == 400
        assert exc.value.detail == "Your request is rejected."


class TestClientMain:
    async def test_success(self, capsys):
        with patch.object(IRRClient, "solve", AsyncMock(return_value={"status": 0, "irr": 10.0, "error": ""})):
            code = await main(["--spending", "100", "0", "--income", "0", "110"])
        assert code == 0
        assert "10.0000%" in capsys.readouterr().out

    async def test_connect_error(self, capsys):
        with patch.object(IRRClient, "solve", AsyncMock(side_effect=httpx.ConnectError("refused"))):
            code = await main(["--spending", "100", "0", "--income", "0", "110"])
        assert code == 1
        assert "Could not connect" in capsys.readouterr().err

    async def test_api_error(self, capsys):
        err = IRRClientError(400, "Number of income and outcome is not equal.")
        with patch.object(IRRClient, "solve", AsyncMock(side_effect=err)):
            code = await main(["--spending", "100", "0", "--income", "0", "110"])
        assert code == 1
        assert "not equal" in capsys.readouterr().err
