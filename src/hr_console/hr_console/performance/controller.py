from __future__ import annotations

from flask import Flask

from ..container import Container
from ..store.controller import register_crud
from .tables import APPRAISALS, PERFORMANCE_CYCLES


def register(app: Flask, container: Container) -> None:
    register_crud(app, container, spec=PERFORMANCE_CYCLES, url="/performance-cycles")
    register_crud(app, container, spec=APPRAISALS, url="/appraisals")
