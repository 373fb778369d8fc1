"""HTTP client for a running IRR service.

Usage:
    python -m src.client --spending 100 0 --income 0 110
    python -m src.client --spending 100 0 --income 0 110 --api-url http://localhost:8000
"""

import argparse
import asyncio
import sys

import httpx

from src.config import settings


class IRRClientError(Exception):
    """The service answered with a non-200 status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"API returned {status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class IRRClient:
    def __init__(
        self,
        base_url: str | None = None,
        code: str | None = None,
        timeout: float = 30,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = (base_url or settings.api_url).rstrip("/")
        self.code = code or settings.request_code
        self.timeout = timeout
        self.transport = transport

    async def solve(self, spending: list[float], income: list[float]) -> dict:
        """POST /solve and return the {status, irr, error} envelope.

        A 500 still carries the envelope and is returned as-is.
        """
        payload = {"spending": spending, "income": income, "code": self.code}
        async with httpx.AsyncClient(
            base_url=self.base_url, timeout=self.timeout, transport=self.transport
        ) as client:
            resp = await client.post("/solve", json=payload)

        try:
            data = resp.json()
        except ValueError:
            data = None

        if resp.status_code == 200 or (resp.status_code == 500 and isinstance(data, dict) and "status" in data):
            return data

        detail = data.get("detail", resp.text) if isinstance(data, dict) else resp.text
        raise IRRClientError(resp.status_code, str(detail))


def print_envelope(data: dict) -> None:
    print(f"\n{'=' * 64}")
    print("  IRR")
    print(f"{'=' * 64}")
    if data["status"] == 0:
        print(f"  IRR:     {data['irr']:.4f}%")
    else:
        print("  IRR:     N/A")
        print(f"  Error:   {data['error']}")
    print()


async def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Solve IRR through the API")
    parser.add_argument("--spending", type=float, nargs="+", required=True, help="Outflow per period")
    parser.add_argument("--income", type=float, nargs="+", required=True, help="Inflow per period")
    parser.add_argument("--code", default=settings.request_code, help="Request code")
    parser.add_argument(
        "--api-url",
        default=settings.api_url,
        help=f"API base URL (default: {settings.api_url})",
    )

    args = parser.parse_args(argv)
    client = IRRClient(base_url=args.api_url, code=args.code)

    try:
        data = await client.solve(args.spending, args.income)
    except httpx.ConnectError:
        print(f"Error: Could not connect to API at {args.api_url}", file=sys.stderr)
        print("Is the server running? Start with: uvicorn src.api.app:app --reload", file=sys.stderr)
        return 1
    except httpx.TimeoutException:
        print("Error: Request timed out", file=sys.stderr)
        return 1
    except IRRClientError as e:
        print(f"Error: API returned {e.status_code}", file=sys.stderr)
        print(f"  {e.detail}", file=sys.stderr)
        return 1

    print_envelope(data)
    return 0 if data["status"] == 0 else 1


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
