from __future__ import annotations

from flask import Flask

from ..container import Container
from ..store.controller import register_crud
from .tables import JOB_ASSIGNMENTS, JOBS


def register(app: Flask, container: Container) -> None:
    register_crud(app, container, spec=JOBS, url="/jobs")
    register_crud(app, container, spec=JOB_ASSIGNMENTS, url="/job-assignments")
