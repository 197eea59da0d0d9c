"""Editing session: one current form state and the two documents derived from it."""

import logging
from collections.abc import Callable

from modelyaml.form_state import FormState, create_default_form_state, update_field
from modelyaml.generators.descriptor import generate_model_yaml
from modelyaml.generators.manifest import generate_manifest_json

logger = logging.getLogger(__name__)

MODEL_YAML_FILENAME = "model.yaml"
MANIFEST_JSON_FILENAME = "manifest.json"


class ModelEditor:
    """Holds the single live FormState and keeps both outputs in step with it.

    Every edit swaps in a new FormState; the outputs are regenerated right
    away, so a reader never sees documents from a half-applied edit.
    """

    def __init__(
        self,
        state: FormState | None = None,
        clipboard: Callable[[str], None] | None = None,
    ) -> None:
        self._clipboard = clipboard
        self._set_state(state if state is not None else create_default_form_state())

    def _set_state(self, state: FormState) -> None:
        self._state = state
        self._model_yaml = generate_model_yaml(state)
        self._manifest_json = generate_manifest_json(state)

    @property
    def state(self) -> FormState:
        return self._state

    @property
    def model_yaml(self) -> str:
        return self._model_yaml

    @property
    def manifest_json(self) -> str:
        return self._manifest_json

    def update(self, key: str, value: str | bool) -> FormState:
        """Apply one field edit and return the new state.

        Raises ``UnknownFormField`` or a pydantic ``ValidationError`` without
        changing the current state.
        """
        new_state = update_field(self._state, key, value)
        if new_state == self._state:
            logger.debug("Field %s unchanged", key)
            return self._state
        self._set_state(new_state)
        logger.debug("Field %s set to %r", key, value)
        return new_state

    def reset(self) -> FormState:
        """Discard all edits and go back to the default form."""
        self._set_state(create_default_form_state())
        logger.debug("Form reset to defaults")
        return self._state

    def documents(self) -> dict[str, str]:
        """Return the generated documents keyed by filename, model.yaml first."""
        return {
            MODEL_YAML_FILENAME: self._model_yaml,
            MANIFEST_JSON_FILENAME: self._manifest_json,
        }

    def copy(self, text: str) -> bool:
        """Hand *text* to the clipboard, if there is one.

        Best-effort: returns False when no clipboard is configured or the
        write fails, and never raises.
        """
        if self._clipboard is None:
            logger.debug("No clipboard configured, nothing copied")
            return False
        try:
            self._clipboard(text)
        except Exception:
            logger.debug("Clipboard write failed", exc_info=True)
            return False
        return True
