from django import forms

from .services.catalog import (
    Condition,
    FilterCriteria,
    MovementType,
    SortKey,
    get_catalog,
    parse_price_bound,
)


class LenientMultipleChoiceField(forms.MultipleChoiceField):
    """Choix multiple qui ignore silencieusement les valeurs inconnues."""

    widget = forms.CheckboxSelectMultiple

    def clean(self, value):
        values = self.to_python(value)
        canonical = {str(key).casefold(): str(key) for key, _label in self.choices}
        cleaned = []
        for raw in values:
            key = raw.strip().casefold()
            if key in canonical and canonical[key] not in cleaned:
                cleaned.append(canonical[key])
        return cleaned


class LenientChoiceField(forms.ChoiceField):
    def __init__(self, *args, fallback=None, **kwargs):
        self.fallback = fallback
        super().__init__(*args, **kwargs)

    def clean(self, value):
        value = self.to_python(value)
        return value if value and self.valid_value(value) else self.fallback


class CatalogFilterForm(forms.Form):
    """
    Paramètres de recherche de la boutique, lus depuis la query string.

    Le formulaire ne lève jamais d'erreur: les valeurs inconnues sont ignorées
    et une borne de prix illisible est traitée comme absente (voir
    ``ignored_bounds``).
    """

    q = forms.CharField(required=False, strip=True, widget=forms.TextInput(attrs={
        "class": "form-control",
        "placeholder": "Rechercher une marque, un modèle...",
        "type": "search",
    }))
    brand = LenientMultipleChoiceField(required=False, label="Marques")
    movement = LenientMultipleChoiceField(required=False, label="Mouvement", choices=MovementType.choices)
    condition = LenientMultipleChoiceField(required=False, label="État", choices=Condition.choices)
    min_price = forms.CharField(required=False, label="Prix min", widget=forms.TextInput(attrs={
        "class": "form-control", "inputmode": "numeric", "placeholder": "Min",
    }))
    max_price = forms.CharField(required=False, label="Prix max", widget=forms.TextInput(attrs={
        "class": "form-control", "inputmode": "numeric", "placeholder": "Max",
    }))
    sort = LenientChoiceField(
        required=False,
        label="Trier par",
        choices=SortKey.choices,
        fallback=SortKey.NEWEST.value,
        widget=forms.Select(attrs={"class": "form-control"}),
    )

    def __init__(self, *args, catalog=None, **kwargs):
        super().__init__(*args, **kwargs)
        catalog = catalog or get_catalog()
        self.fields['brand'].choices = [(brand, brand) for brand in catalog.get_brands()]
        self.ignored_bounds = []

    def to_criteria(self) -> FilterCriteria:
        """
        Critères construits champ par champ.

        Un champ invalide (ex. caractère nul) est ignoré seul: les autres
        contraintes restent appliquées.
        """
        if not self.is_bound:
            return FilterCriteria()

        # Les champs invalides sont absents de cleaned_data
        self.is_valid()
        data = self.cleaned_data
        bounds = {}
        self.ignored_bounds = []
        for name in ('min_price', 'max_price'):
            if name in self.errors:
                self.ignored_bounds.append(name)
                bounds[name] = None
                continue
            raw = (data.get(name) or '').strip()
            value = parse_price_bound(raw)
            if raw and value is None:
                self.ignored_bounds.append(name)
            bounds[name] = value

        return FilterCriteria(
            search=data.get('q') or '',
            brands=data.get('brand') or (),
            movements=data.get('movement') or (),
            conditions=data.get('condition') or (),
            min_price=bounds['min_price'],
            max_price=bounds['max_price'],
            sort=data.get('sort') or SortKey.NEWEST,
        )


def criteria_from_query(querydict, catalog=None):
    """
    Build ``FilterCriteria`` from ``request.GET``.

    Returns ``(criteria, form)`` so views can re-render the form and report
    ignored bounds.
    """
    form = CatalogFilterForm(querydict, catalog=catalog)
    return form.to_criteria(), form
