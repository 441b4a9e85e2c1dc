# SPDX-FileCopyrightText: 2026-present Kingdom of Science contributors
#
# SPDX-License-Identifier: MIT
import logging
import threading
from openai import OpenAI, OpenAIError

from ._constants import HF_BASE_URL, HF_MODEL, HUGGING_API_LIST, MAX_TOKENS

logger = logging.getLogger(__name__)

NO_RESPONSE = "🤔 No response."
AI_FAILED = "⚠️ AI failed to respond. Please try again later."

_api_keys = [k for k in HUGGING_API_LIST if k]
_key_index = 0
_oai_client = None
_lock = threading.Lock()


def ask_ai(prompt, model=HF_MODEL, **kwargs):
    """Relay a single-turn prompt to the inference API and return the reply text.

    Never raises for API problems; the user gets a canned message instead.
    """
    client = _get_client()
    if client is None:
        logger.error("No HUGGING_API keys configured")
        return AI_FAILED

    kwargs["model"] = model
    kwargs["messages"] = [{"role": "user", "content": prompt}]
    kwargs.setdefault("max_tokens", MAX_TOKENS)

    try:
        response = client.chat.completions.create(**kwargs)
    except OpenAIError:
        logger.exception("AI request failed")
        return AI_FAILED

    _rotate_key(client)

    text = None
    if response.choices:
        text = response.choices[0].message.content
    return text or NO_RESPONSE


# Callers keep their own client reference; the shared one is only swapped under _lock
def _get_client():
    global _oai_client

    with _lock:
        if len(_api_keys) == 0:
            return None
        if _oai_client is None:
            _oai_client = OpenAI(base_url=HF_BASE_URL, api_key=_api_keys[_key_index])
        return _oai_client


# Spread load across the configured keys, one call each in turn.
# Only the call that used the current client advances the rotation.
def _rotate_key(used_client):
    global _key_index, _oai_client

    with _lock:
        if len(_api_keys) < 2 or used_client is not _oai_client:
            return

        _key_index = (_key_index + 1) % len(_api_keys)
        _oai_client = None
        logger.debug("Switched to inference key #%d", _key_index + 1)


def configure_keys(keys):
    """Replace the key list and reset rotation."""
    global _api_keys, _key_index, _oai_client

    with _lock:
        _api_keys = [k for k in keys if k]
        _key_index = 0
        _oai_client = None
