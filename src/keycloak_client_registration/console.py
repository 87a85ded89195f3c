"""
Console trace output for registration calls.

Renders request/response panels with Rich and masks credentials before
anything is printed.
"""
import json
from typing import Any, Dict, Optional

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

console = Console(stderr=True)

SENSITIVE_HEADERS = ("authorization", "x-api-key", "cookie", "set-cookie")


def mask_sensitive(value: Optional[str], show_chars: int = 4) -> str:
    """
    Mask sensitive values for logging.

    Args:
        value: Value to mask
        show_chars: Number of characters to show before masking

    Returns:
        str: Masked value, "<none>" for empty values
    """
    if not value:
        return "<none>"
    if len(value) <= show_chars:
        return "*" * len(value)
    return value[:show_chars] + "***"


def mask_auth_header(value: Optional[str]) -> str:
    """Mask an Authorization header value, keeping the scheme readable."""
    if not value:
        return "<none>"
    scheme, _, credential = value.partition(" ")
    if not credential:
        return mask_sensitive(value)
    return f"{scheme} {mask_sensitive(credential)}"


def mask_headers(headers: Dict[str, str]) -> Dict[str, str]:
    """Return a copy of headers with credential headers masked."""
    masked = dict(headers)
    for key in masked:
        if key.lower() in SENSITIVE_HEADERS:
            masked[key] = mask_auth_header(masked[key])
    return masked


def _format_body(body: Any) -> str:
    """Format body for pretty printing."""
    if body is None:
        return ""
    if isinstance(body, (dict, list)):
        return json.dumps(body, indent=2, ensure_ascii=False)
    return str(body)


def print_request(
    method: str,
    uri: str,
    headers: Dict[str, str],
    body: Any = None,
) -> None:
    """Print an outgoing registration request."""
    console.print(
        Panel(f"[bold cyan]{method}[/bold cyan] {uri}", title="[bold blue]Request[/bold blue]")
    )
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    if body is not None:
        console.print(
            Panel(
                Syntax(_format_body(body), "json", theme="monokai"),
                title="[bold]Request Body[/bold]",
            )
        )


def print_response(
    uri: str,
    status_code: int,
    status_message: str,
    headers: Dict[str, str],
    body: Any = None,
) -> None:
    """Print a completed registration response."""
    status_color = "green" if status_code < 400 else "red"
    console.print(
        Panel(
            f"[bold {status_color}]{status_code}[/bold {status_color}] {status_message}",
            title=f"[bold blue]Response[/bold blue] ({uri})",
        )
    )
    console.print("[bold]Headers:[/bold]", mask_headers(headers))
    if body:
        console.print(
            Panel(
                Syntax(_format_body(body), "json", theme="monokai"),
                title=f"[bold]Response Body[/bold] (URL: {uri})",
            )
        )
