"""
Command-line entry point.

Usage:
  # Serve newline-delimited JSON requests on stdin/stdout
  food-label-checker stdio

  # Verify one label
  food-label-checker verify --product-name 새우깡 --ingredients "소맥분, 새우, 백설탕류"

  # Run the HTTP API
  food-label-checker serve --port 3000

Stdio requests are one JSON object per line:
  {"action": "verify", "arguments": {"productName": "...", "ingredients": [...]}}
  {"action": "list_tools"}
  {"action": "ping"}
"""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional, TextIO

from pydantic import ValidationError

from .config import get_settings
from .models import VerifyRequest, ErrorResult
from .services import VerificationService, tool_descriptor, tokenize, TOOL_NAME

logger = logging.getLogger(__name__)

VERIFY_ACTIONS = {"verify", TOOL_NAME}


def configure_logging(level: str = "INFO") -> None:
    """Send logs to stderr so stdout carries only results."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def _error(message: str) -> Dict[str, Any]:
    return ErrorResult(message=message).model_dump()


def handle_request(request: Any, service: VerificationService) -> Dict[str, Any]:
    """
    Dispatch one stdio request to the matching action.
    
    Args:
        request: Decoded JSON request object
        service: Verification service to run "verify" against
        
    Returns:
        JSON-ready response payload
    """
    if not isinstance(request, dict):
        return _error("Request must be a JSON object")
    
    action = request.get("action")
    
    if action == "ping":
        return {"status": "ok"}
    
    if action == "list_tools":
        return {"tools": [tool_descriptor()]}
    
    if action in VERIFY_ACTIONS:
        try:
            args = VerifyRequest.model_validate(request.get("arguments") or {})
        except ValidationError as e:
            return _error(f"Invalid arguments: {e.errors(include_url=False)}")
        return service.verify_payload(args.product_name, args.manufacturer, args.ingredients)
    
    return _error(f"Unknown action: {action}")


def serve_stdio(
    service: VerificationService,
    stdin: TextIO = sys.stdin,
    stdout: TextIO = sys.stdout,
) -> None:
    """Answer each JSON line on stdin with one JSON line on stdout."""
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            response = _error(f"Invalid JSON: {e}")
        else:
            response = handle_request(request, service)
        
        stdout.write(json.dumps(response, ensure_ascii=False) + "\n")
        stdout.flush()


def _collect_ingredients(args: argparse.Namespace) -> List[str]:
    ingredients = list(args.ingredient or [])
    if args.ingredients:
        ingredients.extend(tokenize(args.ingredients))
    return ingredients


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="food-label-checker",
        description="식품 표기 정보 검증: verify OCR label data against the food DB",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    subparsers.add_parser("stdio", help="Serve JSON-line requests on stdin/stdout")
    
    verify = subparsers.add_parser("verify", help="Verify a single label")
    verify.add_argument("--product-name", required=True, help="Product name read by OCR")
    verify.add_argument("--manufacturer", help="Manufacturer read by OCR")
    verify.add_argument("--ingredient", action="append", help="One ingredient (repeatable, label order)")
    verify.add_argument("--ingredients", help='Delimited ingredient text, e.g. "소맥분, 새우; 팜유"')
    
    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", help="Bind host (default from settings)")
    serve.add_argument("--port", type=int, help="Bind port (default from settings)")
    
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    configure_logging(settings.log_level)
    
    if args.command == "serve":
        import uvicorn
        
        uvicorn.run(
            "food_label.main:app",
            host=args.host or settings.host,
            port=args.port or settings.port,
        )
        return 0
    
    # The key is required up front in stdio/one-shot mode
    if not settings.food_db_api_key:
        logger.error("FOOD_DB_API_KEY is not set - check your .env file")
        return 1
    
    service = VerificationService()
    
    if args.command == "stdio":
        logger.info(f"Food label checker ready on stdio (Food DB API URL: {settings.food_db_api_url})")
        serve_stdio(service)
        return 0
    
    result = service.verify_payload(args.product_name, args.manufacturer, _collect_ingredients(args))
    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 1 if result.get("error") else 0


if __name__ == "__main__":
    sys.exit(main())
