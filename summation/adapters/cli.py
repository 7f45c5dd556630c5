# summation/adapters/cli.py

from __future__ import annotations

import argparse
import json
import sys
from typing import Any, Optional, Sequence

from summation import __version__
from summation.core.domain.exceptions import ValidationError
from summation.shared.config import settings
from summation.shared.container import container

EXIT_OK = 0
EXIT_VALIDATION_ERROR = 2
EXIT_UNREPRESENTABLE_RESULT = 3

UNREPRESENTABLE_RESULT_MESSAGE = "The sum is too large to be represented as a JSON number."


def _parse_token(token: str) -> Any:
    """
    Read a command-line operand as a JSON scalar ("1", "-2", "1.5").

    Anything that is not valid JSON stays a string and is rejected by the
    use case like any other non-numeric operand.
    """
    try:
        return json.loads(token)
    except ValueError:
        return token


def _print_error(code: str, message: str, details: Optional[dict] = None) -> None:
    error: dict = {"code": code, "message": message}
    if details:
        error["details"] = details
    print(json.dumps({"error": error}), file=sys.stderr)


def cmd_sum(args: argparse.Namespace) -> int:
    """Add two operands and print {"answer": ...} as JSON."""
    use_case = container.compute_sum_use_case()
    payload = {"a": _parse_token(args.a), "b": _parse_token(args.b)}

    try:
        response = use_case.execute(payload)
        # JSON has no Infinity; int + float may also overflow the float range.
        output = json.dumps(response.model_dump(), allow_nan=False)
    except ValidationError as e:
        _print_error("validation_error", e.message, e.details)
        return EXIT_VALIDATION_ERROR
    except (OverflowError, ValueError):
        _print_error("unrepresentable_result", UNREPRESENTABLE_RESULT_MESSAGE)
        return EXIT_UNREPRESENTABLE_RESULT

    print(output)
    return EXIT_OK


def cmd_serve(args: argparse.Namespace) -> int:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run(
        "summation.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
    )
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="summation",
        description="Add two numbers, or serve the Sum operation over HTTP.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    subparsers = parser.add_subparsers(dest="command", required=True)

    p_sum = subparsers.add_parser("sum", help="Print the sum of two numbers")
    p_sum.add_argument("a", help="First operand, e.g. 1, -2 or 1.5")
    p_sum.add_argument("b", help="Second operand")
    p_sum.set_defaults(func=cmd_sum)

    p_serve = subparsers.add_parser("serve", help="Run the HTTP API")
    p_serve.add_argument("--host", default=settings.HOST, help=f"Bind address (default: {settings.HOST})")
    p_serve.add_argument("--port", type=int, default=settings.PORT, help=f"Port (default: {settings.PORT})")
    p_serve.add_argument("--reload", action="store_true", help="Reload on code changes (development)")
    p_serve.set_defaults(func=cmd_serve)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Usage:
        summation sum 1 2          # {"answer": 3}
        summation sum -1 -2        # {"answer": -3}
        summation sum 1e308 1e308  # stderr: unrepresentable_result, exit 3
        summation serve --port 8000
    """
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
