"""Tests for response writer adapters."""

import io
import logging
from http.server import BaseHTTPRequestHandler
from unittest.mock import MagicMock, call

import pytest

from json_responder.adapters.writers import BufferedResponseWriter, HandlerResponseWriter


class TestBufferedResponseWriter:
    """Tests for the in-memory writer."""

    def test_when_new_then_nothing_written(self) -> None:
        """Given a new writer, then it has no status and an empty body."""
        writer = BufferedResponseWriter()

        assert writer.status_code is None
        assert writer.body == b""

    def test_when_writing_body_then_appends_bytes(self) -> None:
        """Given several writes, when reading the body, then bytes are concatenated."""
        writer = BufferedResponseWriter()
        writer.write_header(200)

        written = writer.write(b'{"a":')
        writer.write(b"1}")

        assert written == 5
        assert writer.body == b'{"a":1}'

    def test_when_writing_without_header_then_status_defaults_to_200(self) -> None:
        """Given no write_header call, when writing, then status 200 is implied."""
        writer = BufferedResponseWriter()

        writer.write(b"[]")

        assert writer.status_code == 200

    def test_when_header_written_twice_then_first_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """Given two write_header calls, when checking status, then the first one is kept."""
        writer = BufferedResponseWriter()

        with caplog.at_level(logging.WARNING):
            writer.write_header(404)
            writer.write_header(500)

        assert writer.status_code == 404
        assert "superfluous" in caplog.text

    def test_when_headers_changed_after_status_then_not_sent(self) -> None:
        """Given a header set after write_header, then it is not part of the sent headers."""
        writer = BufferedResponseWriter()
        writer.headers["Content-Type"] = "application/json"
        writer.write_header(200)
        writer.headers["X-Late"] = "1"

        assert writer.sent_headers == {"content-type": "application/json"}

    def test_when_headers_set_then_lookup_is_case_insensitive(self) -> None:
        """Given a header set with mixed case, when reading it lowercased, then it is found."""
        writer = BufferedResponseWriter()
        writer.headers["Content-Type"] = "application/json"

        assert writer.headers["content-type"] == "application/json"

    def test_when_converted_then_returns_starlette_response(self) -> None:
        """Given a written response, when converting, then status, headers and body match."""
        writer = BufferedResponseWriter()
        writer.headers["Content-Type"] = "application/json"
        writer.write_header(201)
        writer.write(b'{"id":1}')

        response = writer.to_response()

        assert response.status_code == 201
        assert response.body == b'{"id":1}'
        assert response.headers["content-type"] == "application/json"
        assert response.headers["content-length"] == "8"

    def test_when_converted_without_writes_then_returns_empty_200(self) -> None:
        """Given nothing written, when converting, then an empty 200 response is returned."""
        response = BufferedResponseWriter().to_response()

        assert response.status_code == 200
        assert response.body == b""


def _create_handler() -> MagicMock:
    handler = MagicMock()
    handler.wfile = io.BytesIO()
    return handler


class TestHandlerResponseWriter:
    """Tests for the http.server writer."""

    def test_when_header_written_then_sends_status_and_headers(self) -> None:
        """Given headers, when writing the status, then handler sends them in order."""
        handler = _create_handler()
        writer = HandlerResponseWriter(handler)
        writer.headers["Content-Type"] = "application/json"

        writer.write_header(404)

        handler.send_response.assert_called_once_with(404)
        assert handler.send_header.call_args_list == [
            call("content-type", "application/json"),
            call("connection", "close"),
        ]
        handler.end_headers.assert_called_once_with()

    def test_when_writing_then_bytes_go_to_wfile(self) -> None:
        """Given body bytes, when writing, then they are written to handler.wfile."""
        handler = _create_handler()
        writer = HandlerResponseWriter(handler)

        writer.write_header(200)
        written = writer.write(b'{"ok":true}')

        assert written == 11
        assert handler.wfile.getvalue() == b'{"ok":true}'

    def test_when_writing_without_header_then_sends_200(self) -> None:
        """Given no write_header call, when writing, then status 200 is sent first."""
        handler = _create_handler()
        writer = HandlerResponseWriter(handler)

        writer.write(b"null")

        handler.send_response.assert_called_once_with(200)

    def test_when_header_written_twice_then_sent_once(self) -> None:
        """Given two write_header calls, when writing, then only the first is sent."""
        handler = _create_handler()
        writer = HandlerResponseWriter(handler)

        writer.write_header(201)
        writer.write_header(500)

        handler.send_response.assert_called_once_with(201)

    def test_when_transport_fails_then_os_error_propagates(self) -> None:
        """Given a broken connection, when writing, then the OSError propagates."""
        handler = MagicMock()
        handler.wfile.write.side_effect = ConnectionResetError("reset by peer")
        writer = HandlerResponseWriter(handler)

        with pytest.raises(ConnectionResetError):
            writer.write(b"{}")

    def test_when_content_length_set_then_connection_stays_open(self) -> None:
        """Given a Content-Length header, when writing the status, then no close is requested."""
        handler = _create_handler()
        handler.close_connection = False
        writer = HandlerResponseWriter(handler)
        writer.headers["Content-Length"] = "2"

        writer.write_header(200)

        assert "connection" not in writer.headers
        assert handler.close_connection is False


class _SilentHandler(BaseHTTPRequestHandler):
    def log_message(self, format: str, *args: object) -> None:
        pass


def _create_stdlib_handler(wfile: object, protocol_version: str = "HTTP/1.0") -> _SilentHandler:
    handler = _SilentHandler.__new__(_SilentHandler)
    handler.wfile = wfile  # type: ignore[assignment]
    handler.protocol_version = protocol_version
    handler.request_version = protocol_version
    handler.requestline = f"GET /things {protocol_version}"
    handler.command = "GET"
    handler.client_address = ("127.0.0.1", 54321)
    handler.close_connection = False
    return handler


class TestHandlerResponseWriterWithStdlibHandler:
    """Tests against a real BaseHTTPRequestHandler."""

    def test_when_http11_without_content_length_then_closes_connection(self) -> None:
        """Given an HTTP/1.1 handler, when writing, then the body is delimited by closing."""
        wfile = io.BytesIO()
        handler = _create_stdlib_handler(wfile, protocol_version="HTTP/1.1")
        writer = HandlerResponseWriter(handler)
        writer.headers["Content-Type"] = "application/json"

        writer.write(b'{"ok":true}')

        raw = wfile.getvalue()
        head, _, body = raw.partition(b"\r\n\r\n")
        assert head.startswith(b"HTTP/1.1 200 OK\r\n")
        assert b"content-type: application/json" in head
        assert b"connection: close" in head
        assert body == b'{"ok":true}'
        assert handler.close_connection is True

    def test_when_headers_cannot_be_flushed_then_os_error_propagates(self) -> None:
        """Given a dropped client, when writing the status, then the flush error propagates."""
        wfile = MagicMock()
        wfile.write.side_effect = BrokenPipeError("client went away")
        writer = HandlerResponseWriter(_create_stdlib_handler(wfile))

        with pytest.raises(BrokenPipeError):
            writer.write_header(200)
