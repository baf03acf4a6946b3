# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from notekeeper.application.results import Result
from notekeeper.application.services.notes import NotesService
from notekeeper.infrastructure.audit import AuditAction, audit_log
from notekeeper.interfaces.http.dto.notes import CreateNoteRequestDTO, UpdateNoteRequestDTO
from notekeeper.shared.errors.validation import raise_validation_error


class NotesController:
    def __init__(self, *, notes_service: NotesService) -> None:
        self._notes_service = notes_service

    def create(self) -> tuple[Response, int]:
        try:
            dto = CreateNoteRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        note = self._notes_service.create_note(dto.account_id, dto.title, dto.content)
        audit_log(AuditAction.NOTE_CREATED, account_id=note.account_id, details={"note_id": note.id})
        result = Result.success("Note created successfully.", note=note.to_dict())
        return jsonify(result.to_dict()), 201

    def read(self, note_id: int) -> tuple[Response, int]:
        note = self._notes_service.read_note(note_id)
        return jsonify(Result.success(note=note.to_dict()).to_dict()), 200

    def update(self, note_id: int) -> tuple[Response, int]:
        try:
            dto = UpdateNoteRequestDTO.model_validate(request.get_json(silent=True) or {})
        except ValidationError as exc:
            raise_validation_error(exc)

        self._notes_service.update_note(note_id, dto.title, dto.content)
        audit_log(AuditAction.NOTE_UPDATED, details={"note_id": note_id})
        return jsonify(Result.success("Note updated successfully.").to_dict()), 200

    def delete(self, note_id: int) -> tuple[Response, int]:
        self._notes_service.delete_note(note_id)
        audit_log(AuditAction.NOTE_DELETED, details={"note_id": note_id})
        return jsonify(Result.success("Note deleted successfully.").to_dict()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("notes", __name__, url_prefix="/api/notes")
        bp.add_url_rule("", view_func=self.create, methods=["POST"])
        bp.add_url_rule("/<int:note_id>", view_func=self.read, methods=["GET"])
        bp.add_url_rule("/<int:note_id>", view_func=self.update, methods=["PUT"])
        bp.add_url_rule("/<int:note_id>", view_func=self.delete, methods=["DELETE"])
        return bp
