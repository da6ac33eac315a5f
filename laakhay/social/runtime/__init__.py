"""Runtime layer: HTTP transport and pagination, WebSocket transport, streaming."""
