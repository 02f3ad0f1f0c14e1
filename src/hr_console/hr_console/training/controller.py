from __future__ import annotations

from flask import Flask

from ..container import Container
from ..store.controller import register_crud
from .tables import TRAINING_PROGRAMS


def register(app: Flask, container: Container) -> None:
    register_crud(app, container, spec=TRAINING_PROGRAMS, url="/training-programs")
