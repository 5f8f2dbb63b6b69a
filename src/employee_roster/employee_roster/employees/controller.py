from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError

from ..container import Container
from ..core.constants import MAX_NAME_LENGTH, MAX_POSITION_LENGTH, STORAGE_ERROR_MESSAGE
from ..core.exceptions import ValidationError
from .model import NewEmployee

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def render_page(form: NewEmployee, errors: dict, employees):
        return render_template(
            "employees.html",
            employees=employees,
            form=form,
            errors=errors,
            max_name_length=MAX_NAME_LENGTH,
            max_position_length=MAX_POSITION_LENGTH,
            active_page="employees",
        )

    @app.route("/", endpoint="index")
    def index():
        return redirect(url_for("employees"))

    @app.route("/employees", methods=["GET", "POST"], endpoint="employees")
    def employees():
        if request.method == "GET":
            return render_page(NewEmployee(), {}, container.employee_service.list_employees())

        form = NewEmployee(
            name=request.form.get("name", ""),
            position=request.form.get("position", ""),
        )
        try:
            employee = container.employee_service.add_employee(name=form.name, position=form.position)
            flash(f"Added {employee.name}.", "success")
            # 303: browser follows up with a GET, refresh will not resubmit
            return redirect(url_for("employees"), code=303)
        except ValidationError as e:
            return render_page(e.submitted or form, e.errors, container.employee_service.list_employees())
        except SQLAlchemyError:
            logger.exception("Failed to save employee")
            flash(STORAGE_ERROR_MESSAGE, "danger")

        # list_all fails too when the store is down
        try:
            current = container.employee_service.list_employees()
        except SQLAlchemyError:
            logger.exception("Failed to reload employees after a storage error")
            current = []
        return render_page(form, {}, current)
