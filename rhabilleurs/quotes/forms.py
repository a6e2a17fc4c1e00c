from django import forms
from django.db import models


class WatchType(models.TextChoices):
    MECANIQUE = 'mecanique', 'Mécanique'
    AUTOMATIQUE = 'automatique', 'Automatique'
    QUARTZ = 'quartz', 'Quartz'
    CHRONOGRAPHE = 'chronographe', 'Chronographe'
    AUTRE = 'autre', 'Autre'


DEFAULT_WATCH_TYPE = WatchType.AUTOMATIQUE.value

REQUIRED = "Ce champ est obligatoire."


class ContactStepForm(forms.Form):
    """Étape 1: coordonnées du client."""

    name = forms.CharField(
        label="Nom",
        min_length=2,
        error_messages={
            'required': REQUIRED,
            'min_length': "Le nom doit contenir au moins 2 caractères.",
        },
        widget=forms.TextInput(attrs={"class": "form-control", "autocomplete": "name"}),
    )
    email = forms.EmailField(
        label="Email",
        error_messages={
            'required': REQUIRED,
            'invalid': "Adresse email invalide.",
        },
        widget=forms.EmailInput(attrs={"class": "form-control", "autocomplete": "email"}),
    )
    phone = forms.CharField(
        label="Téléphone",
        required=False,
        widget=forms.TextInput(attrs={"class": "form-control", "autocomplete": "tel"}),
    )


class WatchStepForm(forms.Form):
    """Étape 2: la montre."""

    brand = forms.CharField(
        label="Marque",
        min_length=1,
        error_messages={'required': "Indiquez la marque de votre montre."},
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    model = forms.CharField(
        label="Modèle",
        required=False,
        widget=forms.TextInput(attrs={"class": "form-control"}),
    )
    watch_type = forms.ChoiceField(
        label="Type",
        choices=WatchType.choices,
        initial=DEFAULT_WATCH_TYPE,
        error_messages={
            'required': REQUIRED,
            'invalid_choice': "Type de montre inconnu.",
        },
        widget=forms.Select(attrs={"class": "form-control"}),
    )


class ProblemStepForm(forms.Form):
    """Étape 3: description du problème et lien vers des photos."""

    problem_description = forms.CharField(
        label="Description",
        min_length=10,
        error_messages={
            'required': "Décrivez le problème rencontré.",
            'min_length': "La description doit contenir au moins 10 caractères.",
        },
        widget=forms.Textarea(attrs={"class": "form-control", "rows": 5}),
    )
    photo_link = forms.URLField(
        label="Lien vers vos photos",
        required=False,
        assume_scheme='https',
        error_messages={'invalid': "Lien invalide."},
        widget=forms.URLInput(attrs={
            "class": "form-control",
            "placeholder": "https://... (Google Drive, WeTransfer, iCloud)",
        }),
    )


STEP_FORMS = {
    1: ContactStepForm,
    2: WatchStepForm,
    3: ProblemStepForm,
}

STEP_TITLES = {
    1: "Vos coordonnées",
    2: "Votre montre",
    3: "Le problème",
}

STEP_FIELDS = {number: tuple(form_class.base_fields) for number, form_class in STEP_FORMS.items()}
