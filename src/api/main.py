"""FastAPI app exposing root planting and tree growth."""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from roots import (
    GrowthSettings,
    NotPlantedError,
    Root,
    RootStore,
    StorageError,
    Tree,
    grow,
    growth_to_dict,
    root_to_dict,
    tree_to_dict,
)
from roots.config import ConfigError, growth_settings, record_path, resolve_grid_size
from roots.root import DEFAULT_NAME

app = FastAPI(title="Roots Tree API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class PlantRequest(BaseModel):
    name: str = Field(default=DEFAULT_NAME, min_length=1)
    seed: Optional[int] = Field(default=None, ge=0, lt=2**64)


class GrowRequest(BaseModel):
    seed: int = Field(ge=0, lt=2**64)
    steps: int = Field(ge=0)
    width: int = Field(default=100, ge=1, le=1000)
    height: int = Field(default=40, ge=1, le=1000)


def get_store() -> RootStore:
    try:
        return RootStore(record_path())
    except ConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def get_settings() -> GrowthSettings:
    try:
        return growth_settings()
    except ConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def _load(store: RootStore) -> Root:
    try:
        return store.load()
    except NotPlantedError as exc:
        raise HTTPException(status_code=404, detail="Nothing planted yet") from exc
    except StorageError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


def _save(store: RootStore, root: Root) -> None:
    try:
        store.save(root)
    except StorageError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc


@app.get("/state")
def get_state(store: RootStore = Depends(get_store)) -> dict[str, object]:
    return {"root": root_to_dict(_load(store))}


@app.post("/plant")
def plant(request: PlantRequest, store: RootStore = Depends(get_store)) -> dict[str, object]:
    root = Root.new(request.name, request.seed)
    _save(store, root)
    return {"root": root_to_dict(root)}


@app.post("/water")
def water(store: RootStore = Depends(get_store)) -> dict[str, object]:
    root = _load(store)
    root.water()
    _save(store, root)
    return {"root": root_to_dict(root)}


@app.get("/tree")
def view_tree(
    rand: bool = False,
    width: Optional[int] = Query(default=None, ge=1, le=1000),
    height: Optional[int] = Query(default=None, ge=1, le=1000),
    store: RootStore = Depends(get_store),
    settings: GrowthSettings = Depends(get_settings),
) -> dict[str, object]:
    root = _load(store)
    if rand:
        root.randomize_seed()
    try:
        size = resolve_grid_size(width, height, columns=0)
    except ConfigError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc
    tree = root.generate(size.width, size.height, settings=settings)
    return {
        "root": root_to_dict(root),
        "growth": growth_to_dict(root.last_growth),
        "tree": tree_to_dict(tree),
    }


@app.post("/grow")
def grow_tree(request: GrowRequest, settings: GrowthSettings = Depends(get_settings)) -> dict[str, object]:
    tree = Tree(width=request.width, height=request.height)
    result = grow(tree, request.seed, request.steps, settings)
    return {"growth": growth_to_dict(result), "tree": tree_to_dict(tree)}
