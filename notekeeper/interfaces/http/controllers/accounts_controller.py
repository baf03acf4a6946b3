# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from notekeeper.application.results import Result
from notekeeper.application.services.authentication import AuthenticationService
from notekeeper.domain.accounts.exceptions import AuthenticationFailedError
from notekeeper.infrastructure.audit import AuditAction, audit_log
from notekeeper.interfaces.http.dto.accounts import (
    AccountDTO,
    ChangePasswordRequestDTO,
    LoginRequestDTO,
    LoginResponseDTO,
    RegisterRequestDTO,
)
from notekeeper.shared.errors.validation import raise_validation_error


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _respond(result: Result, status: int = 200) -> tuple[Response, int]:
    return jsonify(result.to_dict()), status


class AccountsController:
    def __init__(self, *, auth_service: AuthenticationService) -> None:
        self._auth_service = auth_service

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        account_id = self._auth_service.register(dto.username, dto.password)

        audit_log(
            AuditAction.REGISTER,
            account_id=account_id,
            ip_address=_get_client_ip(),
            details={"username": dto.username},
        )
        return _respond(Result.success("User created successfully.", id=account_id), 201)

    def get(self, username: str) -> tuple[Response, int]:
        account = self._auth_service.get_account(username)
        payload = AccountDTO.model_validate(account.to_public()).model_dump()
        return _respond(Result.success(account=payload))

    def change_password(self, username: str) -> tuple[Response, int]:
        try:
            dto = ChangePasswordRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._auth_service.change_password(username, dto.new_password)

        audit_log(
            AuditAction.PASSWORD_CHANGED,
            ip_address=_get_client_ip(),
            details={"username": username},
        )
        return _respond(Result.success("Password updated successfully."))

    def deactivate(self, username: str) -> tuple[Response, int]:
        self._auth_service.deactivate_account(username)

        audit_log(
            AuditAction.ACCOUNT_DEACTIVATED,
            ip_address=_get_client_ip(),
            details={"username": username},
        )
        return _respond(Result.success("User deleted successfully."))

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()
        try:
            session = self._auth_service.authenticate(dto.username, dto.password)
        except AuthenticationFailedError:
            audit_log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"username": dto.username},
                success=False,
            )
            raise

        audit_log(
            AuditAction.LOGIN_SUCCESS,
            account_id=session.account_id,
            ip_address=ip_address,
            details={"username": session.username},
        )
        payload = LoginResponseDTO(
            token=session.token, expires_at=session.expires_at.isoformat()
        ).model_dump()
        return jsonify(payload), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("accounts", __name__, url_prefix="/api")
        bp.add_url_rule("/accounts", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/accounts/<username>", view_func=self.get, methods=["GET"])
        bp.add_url_rule(
            "/accounts/<username>/password", view_func=self.change_password, methods=["PUT"]
        )
        bp.add_url_rule("/accounts/<username>", view_func=self.deactivate, methods=["DELETE"])
        bp.add_url_rule("/auth/login", view_func=self.login, methods=["POST"])
        return bp
