from __future__ import annotations

import os

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from moderation_console.enums import AuthPhase, DecisionAction, ListPhase, NavigationTarget
from moderation_console.schemas import ConsoleSnapshot
from moderation_console.services.console import ReviewConsole
from moderation_console.web import texts

templates = Jinja2Templates(directory=os.path.join(os.path.dirname(__file__), "templates"))

router = APIRouter()

_NAVIGATION_TARGETS = {target.value for target in NavigationTarget}


def get_console(request: Request) -> ReviewConsole:
    return request.app.state.console


def _redirect_home() -> RedirectResponse:
    return RedirectResponse(url="/", status_code=303)


@router.get("/health")
async def health(console: ReviewConsole = Depends(get_console)) -> dict:
    return {"status": "ok", "service": console.settings.app_name}


@router.get("/", response_class=HTMLResponse)
async def review_page(request: Request, console: ReviewConsole = Depends(get_console)) -> HTMLResponse:
    await console.start()
    snapshot = console.snapshot()
    return templates.TemplateResponse(
        request,
        "review_list.html",
        {
            "snapshot": snapshot,
            "texts": texts,
            "auth_failed": snapshot.auth_phase is AuthPhase.FAILED,
            "authenticated": snapshot.auth_phase is AuthPhase.AUTHENTICATED,
            "list_loading": snapshot.list_phase in (ListPhase.IDLE, ListPhase.LOADING),
            "list_failed": snapshot.list_phase is ListPhase.FAILED,
            "player_width": console.settings.player_width,
            "player_height": console.settings.player_height,
        },
    )


@router.post("/navigate/{target}")
async def navigate(target: str, console: ReviewConsole = Depends(get_console)) -> RedirectResponse:
    if target not in _NAVIGATION_TARGETS and not (target.isascii() and target.isdigit()):
        raise HTTPException(status_code=404, detail=f"unknown navigation target {target}")
    await console.start()
    await console.navigate(target)
    return _redirect_home()


@router.post("/posts/{post_id}/{action}")
async def review_post(
    post_id: str,
    action: DecisionAction,
    console: ReviewConsole = Depends(get_console),
) -> RedirectResponse:
    controller = console.item(post_id)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"post {post_id} is not on the current page")
    await controller.submit(action.decision)
    return _redirect_home()


@router.get("/posts/{post_id}/player", response_class=HTMLResponse)
async def player(post_id: str, request: Request, console: ReviewConsole = Depends(get_console)) -> HTMLResponse:
    controller = console.item(post_id)
    if controller is None:
        raise HTTPException(status_code=404, detail=f"post {post_id} is not on the current page")
    return templates.TemplateResponse(
        request,
        "player.html",
        {"video_url": controller.player_url, "texts": texts},
    )


@router.get("/api/state", response_model=ConsoleSnapshot)
async def state(console: ReviewConsole = Depends(get_console)) -> ConsoleSnapshot:
    return console.snapshot()
