from __future__ import annotations

import traceback

from flask import Flask, flash, g, redirect, render_template, request

from ..container import Container
from ..core.constants import LOGIN_PATH, LOGOUT_PATH, UNAUTHORIZED_PATH
from ..core.enums import Role
from ..core.exceptions import AccountsError, AuthenticationError, ValidationError
from ..navigation.routes import breadcrumbs, home_path, links_for, profile_path
from .guard import current_session, request_store, role_required


def register(app: Flask, container: Container) -> None:
    @app.teardown_request
    def _cancel_enrichment(exc):
        handle = g.pop("shell", None)
        if handle is not None:
            handle.cancel()

    @app.context_processor
    def _inject_shell():
        handle = g.get("shell")
        if handle is None:
            return {}

        view = handle.snapshot(wait=float(app.config.get("PROFILE_RENDER_WAIT", 0.0)))
        return {
            "shell": view,
            "nav_links": links_for(view.role),
            "breadcrumbs": breadcrumbs(request.path),
            "profile_href": profile_path(view.role),
            "logout_href": LOGOUT_PATH,
        }

    @app.route("/", endpoint="index")
    def index():
        resolved = container.access_service.read_session(request_store(container))
        if resolved.role is not None:
            return redirect(home_path(resolved.role))
        return redirect(LOGIN_PATH)

    @app.route(LOGIN_PATH, methods=["GET", "POST"], endpoint="login")
    def login():
        store = request_store(container)
        existing = store.read()
        if existing is not None and request.method == "GET":
            return redirect(home_path(existing.role))

        if request.method == "POST":
            try:
                s = container.auth_service.authenticate(
                    role=request.form.get("role", ""),
                    email=request.form.get("email", ""),
                    password=request.form.get("password", ""),
                )
                store.write(s)
                flash("Login successful!", "success")
                return redirect(home_path(s.role))
            except (ValidationError, AuthenticationError) as e:
                flash(str(e), "danger")
            except Exception as e:
                traceback.print_exc()
                if bool(app.config.get("DEBUG", False)):
                    flash(f"System error during login: {e}", "danger")
                else:
                    flash("System error during login", "danger")

        return render_template(
            "shell/login.html",
            roles=list(Role),
            selected_role=request.form.get("role", ""),
            email=request.form.get("email", ""),
        )

    @app.route(LOGOUT_PATH, methods=["GET", "POST"], endpoint="logout")
    def logout():
        request_store(container).clear()
        flash("You have been logged out.", "info")
        return redirect(LOGIN_PATH)

    @app.route(UNAUTHORIZED_PATH, endpoint="unauthorized")
    def unauthorized():
        return render_template("shell/unauthorized.html"), 403

    def _make_home(role: Role):
        def home():
            return render_template("shell/home.html", role=role)

        return home

    def _make_profile(role: Role):
        def profile():
            store = request_store(container)
            s = current_session()
            view = None
            error = None

            if s is None:
                error = "User email not found. Please log in again."
            elif request.method == "POST":
                try:
                    view = container.profile_service.update(
                        s,
                        store,
                        fullname=request.form.get("fullname", ""),
                        phone=request.form.get("phone", ""),
                        department=request.form.get("department", ""),
                        date_of_birth=request.form.get("date_of_birth", ""),
                        qualification=request.form.get("qualification", ""),
                        skills=request.form.get("skills", ""),
                    )
                    flash("Profile updated successfully!", "success")
                    return redirect(profile_path(role))
                except ValidationError as e:
                    flash(str(e), "danger")
                except AccountsError as e:
                    flash(f"Failed to update profile: {e}", "danger")
                except Exception:
                    traceback.print_exc()
                    flash("System error while updating profile", "danger")

            if s is not None and view is None:
                try:
                    view = container.profile_service.load(s, store)
                except AccountsError:
                    error = "Failed to load profile data. Please try again."

            return render_template("shell/profile.html", role=role, view=view, error=error)

        return profile

    for role in Role:
        app.add_url_rule(
            home_path(role),
            endpoint=f"{role.value}_home",
            view_func=role_required(container, role)(_make_home(role)),
        )
        app.add_url_rule(
            profile_path(role),
            endpoint=f"{role.value}_profile",
            view_func=role_required(container, role)(_make_profile(role)),
            methods=["GET", "POST"],
        )
