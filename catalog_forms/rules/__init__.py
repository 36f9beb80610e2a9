from catalog_forms.rules.loader import load_rules
from catalog_forms.rules.models import FieldRules, FormRules, ProductFieldRules, TimingRules

__all__ = ["FieldRules", "FormRules", "ProductFieldRules", "TimingRules", "load_rules"]
