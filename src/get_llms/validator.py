"""Decide whether an HTTP response looks like a real llms.txt."""

import httpx


def accept(response: httpx.Response) -> bool:
    """Return True if ``response`` carries plain-text/markdown documentation.

    Many static hosts answer every path with HTTP 200 and an HTML shell
    (SPA catch-all, soft 404).  Rules, first match wins:

    1. non-2xx status -> reject
    2. content-type mentions text/plain or text/markdown -> accept
    3. content-type mentions text/html -> reject
    4. generic or missing content-type: sniff the body and reject anything
       that starts with ``<!doctype html`` or contains ``<html``
    """
    if not response.is_success:
        return False

    content_type = response.headers.get("content-type", "").lower()
    if "text/plain" in content_type or "text/markdown" in content_type:
        return True
    if "text/html" in content_type:
        return False

    body = response.text.strip().lower()
    return not (body.startswith("<!doctype html") or "<html" in body)
