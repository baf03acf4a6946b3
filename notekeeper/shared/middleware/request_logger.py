# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
import uuid

from flask import Flask, Response, g, request

from notekeeper.shared.logging import clear_correlation_id, logger, set_correlation_id


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def configure_request_logging(app: Flask, *, debug_mode: bool = False) -> None:
    @app.before_request
    def _start_timer() -> None:
        g._t0 = time.perf_counter()
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        g.correlation_id = request_id
        set_correlation_id(request_id)
        if debug_mode:
            logger.debug(
                f"→ {request.method} {request.path} from {_get_client_ip()}"
                f" body_size={request.content_length or 0}"
            )

    @app.after_request
    def _log_response(resp: Response) -> Response:
        dt = (time.perf_counter() - getattr(g, "_t0", time.perf_counter())) * 1000.0
        logger.info(
            f"{request.method} {request.path} -> {resp.status_code} in {dt:.1f} ms"
            f" from {_get_client_ip()}"
        )
        correlation_id = getattr(g, "correlation_id", None)
        if correlation_id:
            resp.headers.setdefault("X-Request-ID", correlation_id)
        return resp

    @app.teardown_request
    def _teardown(_exc: BaseException | None) -> None:
        clear_correlation_id()


__all__ = ["configure_request_logging"]
