from __future__ import annotations

from flask import Flask, render_template

from ..container import Container
from ..core.enums import Role
from ..navigation.routes import NavLink, links_for
from .guard import role_required


def register(app: Flask, container: Container) -> None:
    """Guarded placeholder screen for every sidebar path without its own view."""
    taken = {rule.rule for rule in app.url_map.iter_rules()}

    def _make_section(role: Role, link: NavLink):
        def section():
            return render_template("shell/section.html", role=role, link=link)

        return section

    for role in Role:
        for index, link in enumerate(links_for(role)):
            if link.path in taken:
                continue
            app.add_url_rule(
                link.path,
                endpoint=f"section.{role.value}.{index}",
                view_func=role_required(container, role)(_make_section(role, link)),
            )
            taken.add(link.path)
