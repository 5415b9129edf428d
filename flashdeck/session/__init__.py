"""Session state, controller and card rendering."""

from flashdeck.session.state import Mode, SessionState
from flashdeck.session.controller import Controller
from flashdeck.session.render import render_card, render_card_text

__all__ = ["Mode", "SessionState", "Controller", "render_card", "render_card_text"]
