"""Tests for get_llms.validator: llms.txt content acceptance."""

import httpx

from get_llms.validator import accept


def _response(status=200, content_type=None, body=""):
    headers = {"content-type": content_type} if content_type else {}
    return httpx.Response(status, headers=headers, content=body.encode())


class TestAccept:
    def test_plain_text_accepted(self):
        assert accept(_response(content_type="text/plain; charset=utf-8", body="# X"))

    def test_markdown_accepted(self):
        assert accept(_response(content_type="text/markdown", body="# X"))

    def test_plain_text_accepted_regardless_of_body(self):
        """Declared text types win even when the body looks like HTML."""
        body = "<!DOCTYPE html><html></html>"
        assert accept(_response(content_type="text/plain", body=body))

    def test_html_content_type_rejected(self):
        assert not accept(_response(content_type="text/html", body="# Looks fine"))

    def test_html_content_type_with_charset_rejected(self):
        assert not accept(
            _response(content_type="text/html; charset=utf-8", body="plain")
        )

    def test_non_2xx_rejected(self):
        assert not accept(_response(404, content_type="text/plain", body="# X"))
        assert not accept(_response(500, content_type="text/plain", body="# X"))

    def test_doctype_without_content_type_rejected(self):
        body = "  \n<!DOCTYPE HTML>\n<head></head>"
        assert not accept(_response(body=body))

    def test_html_tag_anywhere_rejected(self):
        body = "<?xml version='1.0'?>\n<HTML lang='en'><body>404</body></HTML>"
        assert not accept(_response(content_type="application/octet-stream", body=body))

    def test_generic_content_type_plain_body_accepted(self):
        assert accept(
            _response(content_type="application/octet-stream", body="# Lib\n\n- a")
        )

    def test_missing_content_type_plain_body_accepted(self):
        assert accept(_response(body="# Lib"))
