# catalog-forms - Ports (Protocol Interfaces)
# Abstract interfaces shared across components; no implementations here

from catalog_forms.ports.clock import ClockPort

__all__ = ["ClockPort"]
