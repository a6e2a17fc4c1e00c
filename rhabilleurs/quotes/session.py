"""
Stockage de l'état du formulaire de devis dans la session Django.
"""
import logging
import time

from django.conf import settings

from .wizard import (
    STATES,
    QuoteDraft,
    SubmissionFailed,
    Submitting,
    WizardState,
    start,
)

logger = logging.getLogger(__name__)

SESSION_KEY = 'quote_wizard'


def _stale_after():
    # Un envoi interrompu (crash du worker) ne doit pas bloquer le formulaire indéfiniment
    timeout = float(getattr(settings, 'QUOTE_GATEWAY_TIMEOUT', 10))
    return max(timeout * 3, 30)


def serialize_state(state: WizardState) -> dict:
    draft = state.draft
    payload = {
        'state': state.name,
        'values': draft.values(),
        'errors': {name: list(messages) for name, messages in draft.errors.items()},
    }
    if isinstance(state, Submitting):
        payload['started_at'] = state.started_at
    if isinstance(state, SubmissionFailed):
        payload['reason'] = state.reason
    return payload


def deserialize_state(payload) -> WizardState:
    """
    Restaure l'état depuis la session.

    Une donnée corrompue ou d'une ancienne version redémarre le formulaire.
    """
    if not isinstance(payload, dict):
        return start()
    state_cls = STATES.get(payload.get('state'))
    if state_cls is None:
        return start()

    raw_values = payload.get('values') or {}
    values = {
        name: str(raw_values[name])
        for name in QuoteDraft.value_fields()
        if raw_values.get(name) is not None
    }
    errors = {
        str(name): tuple(str(m) for m in messages)
        for name, messages in (payload.get('errors') or {}).items()
        if isinstance(messages, (list, tuple))
    }
    draft = QuoteDraft(errors=errors, **values)

    if state_cls is Submitting:
        return Submitting(draft, started_at=float(payload.get('started_at') or 0))
    if state_cls is SubmissionFailed:
        return SubmissionFailed(draft, reason=str(payload.get('reason') or ''))
    return state_cls(draft)


def load_state(request) -> WizardState:
    """
    Récupère l'état du formulaire de la session.

    Returns:
        WizardState: état courant (Step1 vide pour une nouvelle visite)
    """
    state = deserialize_state(request.session.get(SESSION_KEY))
    if isinstance(state, Submitting) and time.time() - state.started_at > _stale_after():
        logger.warning("Stale in-flight quote submission found in session, marking as failed")
        state = SubmissionFailed(state.draft, reason='interrupted')
    return state


def save_state(request, state: WizardState, commit=False):
    """
    Sauvegarde l'état dans la session.

    Args:
        commit (bool): Écrit la session immédiatement (avant l'appel réseau)
    """
    request.session[SESSION_KEY] = serialize_state(state)
    request.session.modified = True
    if commit:
        request.session.save()


def clear_state(request):
    request.session.pop(SESSION_KEY, None)
    request.session.modified = True
