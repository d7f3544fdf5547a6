"""Shared fixtures: a recording stand-in for the pyvista plotter."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List

import pytest

from roulettecurves.controller.shape import ShapeController


@dataclass(eq=False)
class FakeActor:
    mesh: Any
    kwargs: Dict[str, Any] = field(default_factory=dict)


class FakeScene:
    """Implements the ``add_mesh``/``remove_actor`` pair of ``pyvista.Plotter``."""

    def __init__(self) -> None:
        self.actors: List[FakeActor] = []
        self.added = 0
        self.removed = 0

    def add_mesh(self, mesh: Any, **kwargs: Any) -> FakeActor:
        actor = FakeActor(mesh, kwargs)
        self.actors.append(actor)
        self.added += 1
        return actor

    def remove_actor(self, actor: FakeActor, **kwargs: Any) -> bool:
        if actor not in self.actors:
            return False
        self.actors.remove(actor)
        self.removed += 1
        return True


@pytest.fixture
def scene() -> FakeScene:
    return FakeScene()


@pytest.fixture
def controller(scene: FakeScene) -> ShapeController:
    return ShapeController(scene)
