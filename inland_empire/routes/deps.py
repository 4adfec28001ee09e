"""Accessors for the live state held on app.state."""

from fastapi import Request

from inland_empire.config import Settings
from inland_empire.llm import LLM, llm_from_settings
from inland_empire.psyche import Psyche
from inland_empire.storage import Storage


def storage(request: Request) -> Storage:
    return request.app.state.storage


def settings(request: Request) -> Settings:
    return request.app.state.settings


def psyche(request: Request) -> Psyche:
    return request.app.state.psyche


def llm(request: Request) -> LLM:
    """The injected LLM if one was given to create_app, else one built from settings."""
    return request.app.state.llm or llm_from_settings(request.app.state.settings)


def persist(request: Request) -> None:
    state = request.app.state
    state.storage.save_psyche(state.psyche, state.settings)
