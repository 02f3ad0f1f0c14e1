from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..container import Container
from ..core.exceptions import AuthenticationError, StoreError, ValidationError
from .service import SessionUser

logger = logging.getLogger(__name__)


def _start_session(user: SessionUser, *, remember: bool) -> None:
    session.clear()
    session.permanent = remember
    session["user_id"] = user.user_id
    session["name"] = user.full_name
    session["email"] = user.email
    session["role"] = user.role.value


def register(app: Flask, container: Container) -> None:
    @app.route("/auth", methods=["GET", "POST"], endpoint="auth")
    def auth():
        if "user_id" in session:
            return redirect(url_for("dashboard"))

        mode = request.form.get("mode", request.args.get("mode", "login"))
        values = {k: v for k, v in request.form.items() if "password" not in k}
        errors: dict = {}

        if request.method == "POST":
            try:
                if mode == "signup":
                    s_user = container.auth_service.sign_up(
                        email=request.form.get("email", ""),
                        password=request.form.get("password", ""),
                        confirm_password=request.form.get("confirm_password", ""),
                        first_name=request.form.get("first_name", ""),
                        last_name=request.form.get("last_name", ""),
                    )
                    _start_session(s_user, remember=False)
                    flash("Account created successfully!", "success")
                else:
                    s_user = container.auth_service.sign_in(
                        request.form.get("email", ""),
                        request.form.get("password", ""),
                    )
                    _start_session(s_user, remember=bool(request.form.get("remember_me")))
                    flash("Signed in successfully!", "success")
                return redirect(url_for("dashboard"))
            except ValidationError as e:
                errors = e.errors
                flash(str(e), "danger")
            except (AuthenticationError, StoreError) as e:
                flash(str(e), "danger")
            except Exception as e:
                logger.exception("Unexpected error during %s", mode)
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error: {e}", "danger")
                else:
                    flash("System error, please try again", "danger")

        return render_template("auth.html", mode=mode, values=values, errors=errors)

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been signed out.", "info")
        return redirect(url_for("auth"))
