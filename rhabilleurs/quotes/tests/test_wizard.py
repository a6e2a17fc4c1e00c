"""
Tests for the quote request state machine.
"""
from unittest import mock

from django.test import SimpleTestCase

from quotes import wizard
from quotes.gateway import GatewayError
from quotes.wizard import (
    InvalidTransition,
    QuoteDraft,
    Step1,
    Step2,
    Step3,
    Submitted,
    SubmissionFailed,
    Submitting,
)

CONTACT = {'name': 'Jean Dupont', 'email': 'jean@example.ch', 'phone': '+41 79 000 00 00'}
WATCH = {'brand': 'Omega', 'model': 'Seamaster', 'watch_type': 'chronographe'}
PROBLEM = {'problem_description': 'Le chronographe ne se remet plus à zéro.', 'photo_link': ''}


def filled_step3():
    state = wizard.advance(wizard.start(), CONTACT)
    return wizard.advance(state, WATCH)


class StepGatingTests(SimpleTestCase):
    def test_start(self):
        state = wizard.start()
        self.assertIsInstance(state, Step1)
        self.assertEqual(state.draft, QuoteDraft())
        self.assertEqual(state.draft.watch_type, 'automatique')

    def test_empty_name_keeps_step1_with_error(self):
        state = wizard.advance(wizard.start(), {'name': '', 'email': 'jean@example.ch'})
        self.assertIsInstance(state, Step1)
        self.assertIn('name', state.draft.errors)
        self.assertNotIn('email', state.draft.errors)

    def test_invalid_email_keeps_step1_with_error(self):
        state = wizard.advance(wizard.start(), {'name': 'Jean Dupont', 'email': 'jean@'})
        self.assertIsInstance(state, Step1)
        self.assertEqual(state.draft.errors['email'], ('Adresse email invalide.',))

    def test_short_name(self):
        state = wizard.advance(wizard.start(), {'name': 'J', 'email': 'jean@example.ch'})
        self.assertEqual(state.draft.errors['name'], ('Le nom doit contenir au moins 2 caractères.',))

    def test_valid_contact_moves_to_step2(self):
        state = wizard.advance(wizard.start(), {'name': 'Jean Dupont', 'email': 'jean@example.ch'})
        self.assertIsInstance(state, Step2)
        self.assertFalse(state.draft.has_errors())
        self.assertEqual(state.draft.name, 'Jean Dupont')

    def test_long_name_and_phone_are_accepted(self):
        state = wizard.advance(wizard.start(), {
            'name': 'A' * 300,
            'email': 'jean@example.ch',
            'phone': '0' * 80,
        })
        self.assertIsInstance(state, Step2)
        self.assertEqual(state.draft.phone, '0' * 80)

    def test_long_description_is_accepted(self):
        state = wizard.begin_submission(filled_step3(), {'problem_description': 'x' * 10000})
        self.assertIsInstance(state, Submitting)

    def test_values_are_trimmed(self):
        state = wizard.advance(wizard.start(), {'name': '  Jean Dupont ', 'email': ' jean@example.ch '})
        self.assertEqual(state.draft.name, 'Jean Dupont')
        self.assertEqual(state.draft.email, 'jean@example.ch')

    def test_step2_requires_brand(self):
        state = wizard.advance(wizard.start(), CONTACT)
        state = wizard.advance(state, {'brand': '', 'watch_type': 'quartz'})
        self.assertIsInstance(state, Step2)
        self.assertIn('brand', state.draft.errors)

    def test_step2_rejects_unknown_watch_type(self):
        state = wizard.advance(wizard.start(), CONTACT)
        state = wizard.advance(state, {'brand': 'Omega', 'watch_type': 'solaire'})
        self.assertIsInstance(state, Step2)
        self.assertIn('watch_type', state.draft.errors)

    def test_input_cannot_touch_other_steps(self):
        state = wizard.advance(wizard.start(), CONTACT)
        state = wizard.advance(state, dict(WATCH, name='Pirate', email='x@y.ch'))
        self.assertIsInstance(state, Step3)
        self.assertEqual(state.draft.name, 'Jean Dupont')
        self.assertEqual(state.draft.email, 'jean@example.ch')


class DescriptionBoundaryTests(SimpleTestCase):
    def test_ten_characters_is_accepted(self):
        state = wizard.begin_submission(filled_step3(), {'problem_description': 'a' * 10})
        self.assertIsInstance(state, Submitting)

    def test_nine_characters_is_rejected(self):
        state = wizard.begin_submission(filled_step3(), {'problem_description': 'a' * 9})
        self.assertIsInstance(state, Step3)
        self.assertEqual(
            state.draft.errors['problem_description'],
            ('La description doit contenir au moins 10 caractères.',),
        )

    def test_photo_link_must_be_a_url(self):
        state = wizard.begin_submission(filled_step3(), dict(PROBLEM, photo_link='pas un lien'))
        self.assertIsInstance(state, Step3)
        self.assertIn('photo_link', state.draft.errors)

    def test_photo_link_without_scheme(self):
        state = wizard.begin_submission(filled_step3(), dict(PROBLEM, photo_link='drive.google.com/abc'))
        self.assertIsInstance(state, Submitting)
        self.assertEqual(state.draft.photo_link, 'https://drive.google.com/abc')


class BackTests(SimpleTestCase):
    def test_back_preserves_values(self):
        step3 = filled_step3()
        step2 = wizard.back(step3, {'problem_description': 'brouillon'})
        self.assertIsInstance(step2, Step2)
        self.assertEqual(step2.draft.brand, 'Omega')
        self.assertEqual(step2.draft.problem_description, 'brouillon')

        step1 = wizard.back(step2)
        self.assertIsInstance(step1, Step1)
        self.assertEqual(step1.draft.name, 'Jean Dupont')

    def test_back_does_not_validate_and_clears_errors(self):
        state = wizard.advance(wizard.advance(wizard.start(), CONTACT), {'brand': ''})
        self.assertTrue(state.draft.has_errors())
        state = wizard.back(state)
        self.assertIsInstance(state, Step1)
        self.assertFalse(state.draft.has_errors())

    def test_back_from_step1_is_invalid(self):
        with self.assertRaises(InvalidTransition):
            wizard.back(wizard.start())


class SubmissionTests(SimpleTestCase):
    def test_accepted_submission(self):
        gateway = mock.Mock()
        seen = []
        state = wizard.submit(filled_step3(), gateway, PROBLEM, on_submitting=seen.append)

        self.assertIsInstance(state, Submitted)
        self.assertTrue(state.terminal)
        gateway.send.assert_called_once()
        self.assertEqual(len(seen), 1)
        self.assertIsInstance(seen[0], Submitting)

    def test_invalid_step3_never_calls_gateway(self):
        gateway = mock.Mock()
        state = wizard.submit(filled_step3(), gateway, {'problem_description': 'court'})
        self.assertIsInstance(state, Step3)
        gateway.send.assert_not_called()

    def test_gateway_failure_then_retry_preserves_data(self):
        gateway = mock.Mock()
        gateway.send.side_effect = GatewayError('HTTP 500', status_code=500)

        failed = wizard.submit(filled_step3(), gateway, PROBLEM)
        self.assertIsInstance(failed, SubmissionFailed)
        self.assertEqual(failed.reason, 'HTTP 500')

        step3 = wizard.retry(failed)
        self.assertIsInstance(step3, Step3)
        self.assertEqual(step3.draft, failed.draft)
        self.assertEqual(step3.draft.name, 'Jean Dupont')
        self.assertEqual(step3.draft.watch_type, 'chronographe')
        self.assertEqual(step3.draft.problem_description, PROBLEM['problem_description'])

    def test_resolve(self):
        submitting = wizard.begin_submission(filled_step3(), PROBLEM)
        self.assertIsInstance(wizard.resolve(submitting, accepted=True), Submitted)
        failed = wizard.resolve(submitting, accepted=False, reason='timeout')
        self.assertEqual(failed.reason, 'timeout')
        self.assertEqual(failed.draft, submitting.draft)


class InvalidTransitionTests(SimpleTestCase):
    def test_disallowed_events(self):
        step3 = filled_step3()
        submitted = Submitted(step3.draft)
        cases = [
            (wizard.advance, step3),
            (wizard.advance, submitted),
            (wizard.begin_submission, wizard.start()),
            (wizard.retry, step3),
            (wizard.back, submitted),
        ]
        for event, state in cases:
            with self.subTest(event=event.__name__, state=state.name):
                with self.assertRaises(InvalidTransition):
                    event(state)

    def test_resolve_requires_submitting(self):
        with self.assertRaises(InvalidTransition):
            wizard.resolve(filled_step3(), accepted=True)
