"""
Quote views - Formulaire de demande de devis en 3 étapes.

Le formulaire suit un POST/redirect/GET: chaque action modifie l'état stocké
en session puis redirige vers /devis/, qui affiche l'étape courante.
"""
import logging

from django.contrib import messages
from django.shortcuts import redirect, render
from django.views.decorators.http import require_GET, require_http_methods

from . import wizard
from .forms import STEP_FORMS, STEP_TITLES
from .gateway import SubmissionGateway
from .session import clear_state, load_state, save_state

logger = logging.getLogger(__name__)


def _step_form(state):
    """
    Formulaire de l'étape courante, pré-rempli avec le brouillon.

    Quand l'étape a des erreurs, le formulaire est lié pour les réafficher.
    """
    form_class = STEP_FORMS[state.step]
    data = state.draft.step_data(state.step)
    if any(name in state.draft.errors for name in data):
        return form_class(data=data)
    return form_class(initial=data)


def _apply_action(request, state, action):
    if action == 'next':
        return wizard.advance(state, request.POST)
    if action == 'back':
        return wizard.back(state, request.POST)
    if action == 'retry':
        return wizard.retry(state)
    if action == 'submit':
        return wizard.submit(
            state,
            SubmissionGateway.from_settings(),
            data=request.POST,
            on_submitting=lambda submitting: save_state(request, submitting, commit=True),
        )
    raise wizard.InvalidTransition(state, action or 'unknown')


@require_http_methods(["GET", "POST"])
def quote_request(request):
    """
    Demande de devis.

    POST actions:
        next: valide l'étape 1 ou 2 et avance
        back: revient à l'étape précédente (sans validation)
        submit: valide l'étape 3 et envoie la demande
        retry: revient à l'étape 3 après un échec d'envoi
    """
    state = load_state(request)

    if isinstance(state, wizard.Submitted):
        return redirect('quotes:success')

    if request.method == 'POST':
        action = request.POST.get('action', '')

        if isinstance(state, wizard.Submitting):
            messages.warning(request, "Votre demande est en cours d’envoi, merci de patienter.")
            return redirect('quotes:request')

        try:
            state = _apply_action(request, state, action)
        except wizard.InvalidTransition as exc:
            logger.info("Ignored quote action: %s", exc)
            return redirect('quotes:request')

        save_state(request, state)

        if isinstance(state, wizard.Submitted):
            messages.success(request, "Demande envoyée avec succès !")
            return redirect('quotes:success')
        if isinstance(state, wizard.SubmissionFailed):
            messages.error(request, "Erreur lors de l’envoi du formulaire. Vous pouvez réessayer.")
        return redirect('quotes:request')

    context = {
        'state': state,
        'draft': state.draft,
        'steps': [{'number': n, 'title': t} for n, t in STEP_TITLES.items()],
        'submission_failed': isinstance(state, wizard.SubmissionFailed),
        'submitting': isinstance(state, wizard.Submitting),
    }
    if state.step is not None:
        context['form'] = _step_form(state)
        context['current_step'] = state.step
        context['step_title'] = STEP_TITLES[state.step]
    else:
        context['current_step'] = 3
    return render(request, 'quotes/request.html', context)


@require_GET
def quote_success(request):
    """
    Écran de confirmation après un envoi réussi.

    L'état est ensuite effacé: revenir sur /devis/ démarre une nouvelle demande.
    """
    state = load_state(request)
    if not isinstance(state, wizard.Submitted):
        return redirect('quotes:request')

    response = render(request, 'quotes/success.html', {'draft': state.draft})
    clear_state(request)
    return response
