from __future__ import annotations

import logging
from typing import Dict, List, Optional

from flask import Flask, abort, flash, redirect, render_template, request, url_for

from ..common.web import current_role, display_value, forbidden, form_value, login_required, write_required
from ..core.exceptions import AuthorizationError, NotFoundError, StoreError, ValidationError
from ..container import Container
from .table import ColumnKind, TableSpec

logger = logging.getLogger(__name__)


def _load_refs(container: Container, spec: TableSpec) -> Dict[str, List]:
    """Records of every referenced table, keyed by the referencing column."""
    return {c.name: container.service_for(c.ref).list() for c in spec.refs()}


def _choices(spec: TableSpec, refs: Dict[str, List]) -> Dict[str, List[tuple]]:
    out: Dict[str, List[tuple]] = {}
    for col in spec.columns:
        if col.kind == ColumnKind.ENUM:
            out[col.name] = [(m.value, m.value) for m in col.enum]
        elif col.kind == ColumnKind.REF:
            out[col.name] = [(str(r.id), r.label) for r in refs.get(col.name, ())]
    return out


def register_crud(
    app: Flask,
    container: Container,
    *,
    spec: TableSpec,
    url: str,
    list_view: bool = True,
) -> None:
    """List/new/edit/delete routes for one table, rendered from its TableSpec.

    Endpoints are named `<table>_list`, `<table>_new`, `<table>_edit` and
    `<table>_delete`. Pass `list_view=False` when the feature renders its own
    list page under `<table>_list`.
    """
    service = container.service_for(spec.name)
    name = spec.name

    def render_form(*, values: dict, errors: dict, record_id: Optional[int] = None, status: int = 200):
        try:
            refs = _load_refs(container, spec)
        except StoreError as e:
            flash(str(e), "danger")
            refs = {}
        return (
            render_template(
                "entities/form.html",
                spec=spec,
                values=values,
                errors=errors,
                choices=_choices(spec, refs),
                record_id=record_id,
                list_endpoint=f"{name}_list",
                active_page=f"{name}_list",
            ),
            status,
        )

    def submitted() -> dict:
        return {c.name: request.form.get(c.name, "") for c in spec.columns}

    def list_records():
        search = request.args.get("q", "")
        try:
            records = service.list(search=search)
            refs = _load_refs(container, spec)
        except StoreError as e:
            return render_template(
                "entities/list.html",
                spec=spec,
                rows=[],
                search=search,
                error=str(e),
                active_page=f"{name}_list",
            )
        rows = [(r, [display_value(c, getattr(r, c.name), refs) for c in spec.columns]) for r in records]
        return render_template(
            "entities/list.html",
            spec=spec,
            rows=rows,
            search=search,
            error=None,
            active_page=f"{name}_list",
        )

    def new_record():
        if request.method == "POST":
            values = submitted()
            try:
                service.create(current_role=current_role(), values=values)
                flash(f"{spec.label} created successfully", "success")
                return redirect(url_for(f"{name}_list"))
            except AuthorizationError:
                return forbidden()
            except ValidationError as e:
                flash(str(e), "danger")
                return render_form(values=values, errors=e.errors, status=400)
            except StoreError as e:
                flash(str(e), "danger")
                return render_form(values=values, errors={})
            except Exception:
                logger.exception("Unexpected error creating %s", name)
                flash(f"Failed to create {spec.label.lower()}", "danger")
                return render_form(values=values, errors={})

        defaults = {c.name: form_value(c, c.default_value()) for c in spec.columns}
        return render_form(values=defaults, errors={})

    def edit_record(record_id: int):
        if request.method == "POST":
            values = submitted()
            try:
                service.update(current_role=current_role(), record_id=record_id, changes=values)
                flash(f"{spec.label} updated successfully", "success")
                return redirect(url_for(f"{name}_list"))
            except AuthorizationError:
                return forbidden()
            except NotFoundError:
                abort(404)
            except ValidationError as e:
                flash(str(e), "danger")
                return render_form(values=values, errors=e.errors, record_id=record_id, status=400)
            except StoreError as e:
                flash(str(e), "danger")
                return render_form(values=values, errors={}, record_id=record_id)
            except Exception:
                logger.exception("Unexpected error updating %s id=%s", name, record_id)
                flash(f"Failed to update {spec.label.lower()}", "danger")
                return render_form(values=values, errors={}, record_id=record_id)

        try:
            record = service.get(record_id)
        except NotFoundError:
            abort(404)
        values = {c.name: form_value(c, getattr(record, c.name)) for c in spec.columns}
        return render_form(values=values, errors={}, record_id=record_id)

    def delete_record(record_id: int):
        try:
            service.delete(current_role=current_role(), record_id=record_id)
            flash(f"{spec.label} deleted successfully", "success")
        except AuthorizationError:
            return forbidden()
        except (NotFoundError, StoreError) as e:
            flash(str(e), "danger")
        except Exception:
            logger.exception("Unexpected error deleting %s id=%s", name, record_id)
            flash(f"Failed to delete {spec.label.lower()}", "danger")
        return redirect(url_for(f"{name}_list"))

    if list_view:
        app.add_url_rule(url, endpoint=f"{name}_list", view_func=login_required(list_records))
    app.add_url_rule(f"{url}/new", endpoint=f"{name}_new", view_func=write_required(new_record), methods=["GET", "POST"])
    app.add_url_rule(
        f"{url}/<int:record_id>/edit",
        endpoint=f"{name}_edit",
        view_func=write_required(edit_record),
        methods=["GET", "POST"],
    )
    app.add_url_rule(
        f"{url}/<int:record_id>/delete",
        endpoint=f"{name}_delete",
        view_func=write_required(delete_record),
        methods=["POST"],
    )
