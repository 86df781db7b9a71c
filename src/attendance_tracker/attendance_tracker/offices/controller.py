from __future__ import annotations

from flask import Flask, request

from ..common.http import admin_required, json_body, json_endpoint, success
from ..common.validators import require_fields, require_int, require_non_empty
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/offices", methods=["GET"], endpoint="offices")
    @json_endpoint("Failed to fetch office information")
    def offices():
        department = require_non_empty(request.args.get("department"), "department")
        result = container.office_service.accessible_offices(department)
        return success(offices=[o.to_dict() for o in result])

    @app.route("/api/check-location", methods=["POST"], endpoint="check_location")
    @json_endpoint("Failed to check location")
    def check_location():
        data = json_body()
        require_fields(data, ("latitude", "longitude", "office_id"))

        result = container.office_service.check_location(
            data["latitude"],
            data["longitude"],
            require_int(data["office_id"], "office_id"),
        )
        return success(**result.to_dict())

    @app.route("/api/admin/offices", methods=["GET"], endpoint="admin_offices")
    @admin_required
    @json_endpoint("Failed to fetch offices")
    def admin_offices():
        return success(offices=[o.to_dict() for o in container.office_service.list_all()])

    @app.route("/api/admin/offices", methods=["POST"], endpoint="admin_office_create")
    @admin_required
    @json_endpoint("Failed to create office")
    def admin_office_create():
        office_id = container.office_service.create_office(json_body())
        return success(201, message="Office created", office_id=office_id)

    @app.route("/api/admin/offices/<int:office_id>", methods=["GET"], endpoint="admin_office_get")
    @admin_required
    @json_endpoint("Failed to fetch office")
    def admin_office_get(office_id: int):
        return success(office=container.office_service.get_office(office_id).to_dict())

    @app.route("/api/admin/offices/<int:office_id>", methods=["POST", "PUT"], endpoint="admin_office_update")
    @admin_required
    @json_endpoint("Failed to update office")
    def admin_office_update(office_id: int):
        container.office_service.update_office(office_id, json_body())
        return success(message="Office updated")

    @app.route("/api/admin/offices/<int:office_id>", methods=["DELETE"], endpoint="admin_office_deactivate")
    @admin_required
    @json_endpoint("Failed to deactivate office")
    def admin_office_deactivate(office_id: int):
        container.office_service.deactivate_office(office_id)
        return success(message="Office deactivated")
