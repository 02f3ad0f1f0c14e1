from __future__ import annotations

from flask import Flask

from ..container import Container
from ..store.controller import register_crud
from .tables import DEPARTMENTS, FACULTIES, UNIVERSITIES


def register(app: Flask, container: Container) -> None:
    register_crud(app, container, spec=UNIVERSITIES, url="/universities")
    register_crud(app, container, spec=FACULTIES, url="/faculties")
    register_crud(app, container, spec=DEPARTMENTS, url="/departments")
