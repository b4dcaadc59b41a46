"""FastAPI server the desktop shell forwards open-URL and drop events to."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from deeplink.router import LinkRouter
from deeplink.state import AppState
from main import build_router
from ui.main_window import MainWindow

window = MainWindow()
app_state = AppState()
router: LinkRouter = build_router(window)

app = FastAPI(title="Pear Deep Link API", version="0.1.0")

# Allow local dev origins (Vite, Tauri webview, etc.)
_origins = ["*"]
app.add_middleware(
    CORSMiddleware,
    allow_origins=_origins,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


class DeepLinkRequest(BaseModel):
    url: str = Field(min_length=1)


class DropRequest(BaseModel):
    paths: list[str] = Field(default_factory=list)


@app.post("/deeplink")
def open_deeplink(req: DeepLinkRequest):
    result = router.route(req.url, app_state)
    return {"result": result.to_dict(), "state": app_state.to_dict()}


@app.post("/drop")
def drop_paths(req: DropRequest):
    targets = [path for path in req.paths if path.strip()]
    results = router.route_many(targets, app_state)
    return {"results": [result.to_dict() for result in results], "state": app_state.to_dict()}


@app.get("/state")
def get_state():
    return app_state.to_dict()
