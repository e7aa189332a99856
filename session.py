import logging

from app_state import FocusEditor, Model, SaveDocument, update


logger = logging.getLogger("csvgrid.session")


class Session:
    """Owns the current Model and runs the effects of each transition."""

    def __init__(self, model: Model, gateway, on_focus=None, on_status=None):
        self.model = model
        self.gateway = gateway
        self._on_focus = on_focus
        self._on_status = on_status

    def dispatch(self, intent) -> Model:
        logger.debug("intent %r", intent)
        transition = update(self.model, intent)
        self.model = transition.model
        for effect in transition.effects:
            self._run_effect(effect)
        return self.model

    def _run_effect(self, effect):
        if isinstance(effect, SaveDocument):
            try:
                self.gateway.save(effect.document)
            except (OSError, ValueError) as exc:
                logger.error("Save failed: %s", exc)
                self._status(f"Save failed: {exc}", 4)
        elif isinstance(effect, FocusEditor):
            if self._on_focus is None:
                return
            try:
                self._on_focus()
            except Exception as exc:
                logger.debug("Editor focus request failed: %s", exc)

    def _status(self, msg, seconds=3):
        if self._on_status is not None:
            self._on_status(msg, seconds)
