"""CLI to exercise a running stock quote API.

Usage:
  stock-quote-client health
  stock-quote-client login user@example.com user123
  stock-quote-client --token TOKEN stock AAPL.US
  stock-quote-client --token TOKEN history --head 5
  stock-quote-client --token TOKEN users create new@example.com secret1
"""
import argparse
import json
import os
import sys

import httpx


def print_json(data: object) -> None:
    print(json.dumps(data, indent=2, default=str))


def cmd_health(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/")
    r.raise_for_status()
    print_json(r.json())
    return 0


def cmd_login(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/auth/login", json={"email": args.email, "password": args.password})
    r.raise_for_status()
    data = r.json()["data"]
    if args.quiet:
        print(data["token"])
    else:
        print_json(data)
    return 0


def cmd_stock(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get("/stock", params={"q": args.symbol})
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_history(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get("/history")
    r.raise_for_status()
    data = r.json()["data"]
    print(f"Found {len(data)} queries")
    print_json(data[: args.head] if args.head else data)
    return 0


def cmd_users_list(client: httpx.Client, _: argparse.Namespace) -> int:
    r = client.get("/users")
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_users_get(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.get(f"/users/{args.user_id}")
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_users_create(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.post("/users", json={"email": args.email, "password": args.password})
    r.raise_for_status()
    print_json(r.json()["data"])
    return 0


def cmd_users_delete(client: httpx.Client, args: argparse.Namespace) -> int:
    r = client.delete(f"/users/{args.user_id}")
    r.raise_for_status()
    print_json(r.json())
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Call the stock quote API routes.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--base-url",
        default="http://localhost:8000",
        help="API base URL (default: http://localhost:8000)",
    )
    parser.add_argument(
        "--token",
        default=os.environ.get("STOCK_API_TOKEN"),
        help="Bearer token for protected routes (default: $STOCK_API_TOKEN)",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=30.0,
        help="Request timeout in seconds (default: 30)",
    )
    subparsers = parser.add_subparsers(dest="command", required=True, help="Command")

    subparsers.add_parser("health", help="GET / health check")

    p = subparsers.add_parser("login", help="POST /auth/login")
    p.add_argument("email")
    p.add_argument("password")
    p.add_argument("-q", "--quiet", action="store_true", help="Print only the token")

    p = subparsers.add_parser("stock", help="GET /stock?q=SYMBOL")
    p.add_argument("symbol", help="Symbol (e.g. AAPL.US)")

    p = subparsers.add_parser("history", help="GET /history")
    p.add_argument("--head", type=int, default=0, help="Show only first N queries (0 = all)")

    users = subparsers.add_parser("users", help="User routes (/users)")
    users_sub = users.add_subparsers(dest="users_cmd", required=True)
    users_sub.add_parser("list", help="GET /users")
    p = users_sub.add_parser("get", help="GET /users/{id}")
    p.add_argument("user_id", type=int)
    p = users_sub.add_parser("create", help="POST /users")
    p.add_argument("email")
    p.add_argument("password")
    p = users_sub.add_parser("delete", help="DELETE /users/{id}")
    p.add_argument("user_id", type=int)

    args = parser.parse_args()
    base_url = args.base_url.rstrip("/")

    handlers = {
        "health": cmd_health,
        "login": cmd_login,
        "stock": cmd_stock,
        "history": cmd_history,
        "users": {
            "list": cmd_users_list,
            "get": cmd_users_get,
            "create": cmd_users_create,
            "delete": cmd_users_delete,
        },
    }
    handler = handlers[args.command]
    if isinstance(handler, dict):
        handler = handler[args.users_cmd]

    headers = {"Authorization": f"Bearer {args.token}"} if args.token else {}
    try:
        with httpx.Client(base_url=base_url, timeout=args.timeout, headers=headers) as client:
            return handler(client, args)
    except httpx.HTTPStatusError as e:
        print(f"HTTP error: {e.response.status_code}", file=sys.stderr)
        if e.response.content:
            try:
                print(e.response.json(), file=sys.stderr)
            except ValueError:
                print(e.response.text, file=sys.stderr)
        return 1
    except httpx.RequestError as e:
        print(f"Request error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
