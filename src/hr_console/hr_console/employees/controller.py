from __future__ import annotations

from flask import Flask

from ..container import Container
from ..store.controller import register_crud
from .tables import CONTRACTS, EMPLOYEES


def register(app: Flask, container: Container) -> None:
    register_crud(app, container, spec=EMPLOYEES, url="/employees")
    register_crud(app, container, spec=CONTRACTS, url="/contracts")
